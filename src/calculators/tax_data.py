"""Tax constants: slab table and supplemental levy rates.

Hardcoded Python constants (not config-driven). Rates and slabs are
illustrative FY 2024-25 figures, not a legal source of truth.
"""

from decimal import Decimal
from typing import NamedTuple

from src.calculators.models import SpendCategory


class TaxBracket(NamedTuple):
    """A single income tax slab."""

    lower: Decimal  # inclusive
    upper: Decimal | None  # None = no cap
    rate: Decimal


def validate_brackets(brackets: tuple[TaxBracket, ...]) -> tuple[TaxBracket, ...]:
    """Check that a slab table is contiguous, ascending and open-ended.

    Raises:
        ValueError: If the table is empty, has gaps or overlaps, does not
            start at zero, has a capped last slab, or has a rate outside
            [0, 1] or lower than the slab before it.
    """
    if not brackets:
        raise ValueError("Bracket table must not be empty.")
    if brackets[0].lower != 0:
        raise ValueError("First bracket must start at 0.")
    if brackets[-1].upper is not None:
        raise ValueError("Last bracket must be unbounded.")

    previous: TaxBracket | None = None
    for bracket in brackets:
        if not Decimal("0") <= bracket.rate <= Decimal("1"):
            raise ValueError(f"Bracket rate out of range: {bracket.rate}")
        if previous is not None:
            if previous.upper is None:
                raise ValueError("Only the last bracket may be unbounded.")
            if bracket.lower != previous.upper:
                raise ValueError(
                    f"Brackets are not contiguous at {previous.upper} / {bracket.lower}."
                )
            if bracket.rate < previous.rate:
                raise ValueError("Bracket rates must be non-decreasing.")
        if bracket.upper is not None and bracket.upper <= bracket.lower:
            raise ValueError(f"Empty bracket at {bracket.lower}.")
        previous = bracket
    return brackets


DEFAULT_BRACKETS: tuple[TaxBracket, ...] = validate_brackets((
    TaxBracket(Decimal("0"), Decimal("300000"), Decimal("0")),
    TaxBracket(Decimal("300000"), Decimal("700000"), Decimal("0.05")),
    TaxBracket(Decimal("700000"), Decimal("1000000"), Decimal("0.10")),
    TaxBracket(Decimal("1000000"), Decimal("1200000"), Decimal("0.15")),
    TaxBracket(Decimal("1200000"), Decimal("1500000"), Decimal("0.20")),
    TaxBracket(Decimal("1500000"), None, Decimal("0.30")),
))

# Levy on the declared spending share, by class of goods
SPENDING_RATES: dict[SpendCategory, Decimal] = {
    SpendCategory.BASIC: Decimal("0.12"),
    SpendCategory.ELEVATED: Decimal("0.18"),
    SpendCategory.LUXURY: Decimal("0.28"),
}

# Levy on the declared investing share, only when the investment made money
SHORT_TERM_GAINS_RATE = Decimal("0.20")
LONG_TERM_GAINS_RATE = Decimal("0.125")

DEFAULT_TAX_YEAR = "2024-25"
