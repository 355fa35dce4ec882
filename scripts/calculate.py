"""CLI for computing tax on a single income or a batch of scenarios.

Usage:
    # Slab tax only
    python scripts/calculate.py --income 1200000

    # With a spending declaration
    python scripts/calculate.py --income 10,00,000 --spend-percent 50 --spend-category basic

    # With a profitable short-term investment
    python scripts/calculate.py --income 1500000 --invest-percent 20 --profitable --short-term

    # Run every scenario in config/scenarios.yaml
    python scripts/calculate.py --scenarios scenarios.yaml

    # Machine-readable output
    python scripts/calculate.py --income 1500000 --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from src.calculators.engine import compute_tax
from src.calculators.errors import InvalidInputError
from src.calculators.models import (
    InvestingDeclaration,
    SpendCategory,
    SpendingDeclaration,
    TaxInput,
)
from src.report import load_scenarios, parse_amount, render_report, to_json_dict

logger = logging.getLogger(__name__)


_DECLARATION_FLAGS = ("spend_percent", "spend_category", "invest_percent", "profitable", "short_term")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Estimate annual income tax")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--income", type=parse_amount, help="Annual income in rupees")
    source.add_argument("--scenarios", help="YAML file of named scenarios (relative to config/)")
    parser.add_argument("--spend-percent", type=parse_amount, help="Share of income spent")
    parser.add_argument(
        "--spend-category",
        choices=[c.value for c in SpendCategory],
        help="Class of goods the spending goes on (default: basic)",
    )
    parser.add_argument("--invest-percent", type=parse_amount, help="Share of income invested")
    parser.add_argument("--profitable", action="store_true", help="The investment made money")
    parser.add_argument("--short-term", action="store_true", help="The gain was made quickly")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    args = parser.parse_args(argv)

    if args.scenarios:
        given = [f for f in _DECLARATION_FLAGS if getattr(args, f) not in (None, False)]
        if given:
            flags = ", ".join("--" + f.replace("_", "-") for f in given)
            parser.error(f"{flags} cannot be combined with --scenarios")
    if args.spend_category is not None and args.spend_percent is None:
        parser.error("--spend-category requires --spend-percent")
    if (args.profitable or args.short_term) and args.invest_percent is None:
        parser.error("--profitable and --short-term require --invest-percent")
    return args


def build_input(args: argparse.Namespace) -> TaxInput:
    """Turn CLI flags into a TaxInput; a declaration exists only if its percent is given."""
    spending = None
    if args.spend_percent is not None:
        spending = SpendingDeclaration(
            percentage=args.spend_percent,
            category=SpendCategory(args.spend_category or SpendCategory.BASIC.value),
        )
    investing = None
    if args.invest_percent is not None:
        investing = InvestingDeclaration(
            percentage=args.invest_percent,
            profitable=args.profitable,
            short_term=args.short_term,
        )
    return TaxInput(annual_income=args.income, spending=spending, investing=investing)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s: %(message)s",
    )

    if args.scenarios:
        try:
            named = load_scenarios(args.scenarios)
        except ValidationError as exc:
            logger.warning("Invalid scenario in %s", args.scenarios)
            print(f"Invalid scenario in {args.scenarios}:\n{exc}", file=sys.stderr)
            return 2
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.warning("Could not load %s: %s", args.scenarios, exc)
            print(f"Could not load {args.scenarios}: {exc}", file=sys.stderr)
            return 2
        logger.info("Running %d scenarios from %s", len(named), args.scenarios)
    else:
        named = [("", build_input(args))]

    outputs: list[dict] = []
    exit_code = 0
    for name, tax_input in named:
        try:
            result = compute_tax(tax_input)
        except InvalidInputError as exc:
            logger.warning("Skipping %s: %s", name or "input", exc.message)
            print(f"{name + ': ' if name else ''}{exc.message}", file=sys.stderr)
            exit_code = 2
            continue

        if args.json:
            outputs.append({"name": name, **to_json_dict(result)} if name else to_json_dict(result))
        else:
            print(render_report(result, title=name or None))
            print()

    if args.json and outputs:
        print(json.dumps(outputs if args.scenarios else outputs[0], indent=2, ensure_ascii=False))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
