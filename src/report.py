"""Plain-text rendering of tax results and loading of scenario files."""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from config import load_yaml_config
from config.settings import settings
from src.calculators.formatting import format_number, format_rupees
from src.calculators.models import TaxInput, TaxResult


def load_scenarios(path: str | Path = "scenarios.yaml") -> list[tuple[str, TaxInput]]:
    """Load named scenarios from a YAML file.

    Relative paths are resolved against the config/ directory. Each entry
    needs a ``name`` and an ``annual_income``; ``spending`` and
    ``investing`` are optional mappings.
    """
    data = load_yaml_config(str(path))
    scenarios: list[tuple[str, TaxInput]] = []
    for index, entry in enumerate(data.get("scenarios", [])):
        if "name" not in entry:
            raise ValueError(f"Scenario {index} has no name.")
        fields: dict[str, Any] = {k: v for k, v in entry.items() if k != "name"}
        scenarios.append((entry["name"], TaxInput.model_validate(fields)))
    return scenarios


def _money(value: Decimal) -> str:
    return format_rupees(value, settings.currency_symbol)


def render_report(result: TaxResult, title: str | None = None) -> str:
    """Render a result as an aligned plain-text report."""
    lines: list[str] = []
    if title:
        lines.append(title)
        lines.append("=" * len(title))
    lines.append(f"Annual income ({result.tax_year}): {_money(result.annual_income)}")
    lines.append("")

    if result.breakdown:
        lines.append("Slab breakdown:")
        width = max(len(line.range_label) for line in result.breakdown)
        for line in result.breakdown:
            lines.append(
                f"  {line.range_label:<{width}}  {line.rate_label:>6}  {_money(line.tax_amount)}"
            )
    else:
        lines.append("Slab breakdown: no slab tax")
    lines.append("")

    rows = [
        ("Slab tax", _money(result.bracket_tax)),
        ("Spending levy", _money(result.spending_tax)),
        ("Investment levy", _money(result.investing_tax)),
        ("Supplemental tax", _money(result.supplemental_tax)),
        ("Total tax", _money(result.total_tax)),
        ("Net income", _money(result.net_income)),
        ("Effective rate", f"{format_number(result.effective_rate_percent)}%"),
    ]
    label_width = max(len(label) for label, _ in rows)
    lines.extend(f"{label:<{label_width}}  {value}" for label, value in rows)
    return "\n".join(lines)


def to_json_dict(result: TaxResult) -> dict[str, Any]:
    """JSON-ready dict with money as plain numbers."""
    return result.model_dump(mode="json")


def parse_amount(raw: str) -> Decimal:
    """Parse a user-typed amount, allowing digit-group commas (12,00,000).

    Raises:
        ValueError: If the text is not a finite number.
    """
    try:
        amount = Decimal(raw.replace(",", "").strip())
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {raw!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Not a number: {raw!r}")
    return amount
