"""Income tax calculator: slab-by-slab breakdown."""

from decimal import Decimal

from src.calculators.formatting import format_range, format_rate
from src.calculators.models import BracketTaxLine
from src.calculators.tax_data import DEFAULT_BRACKETS, TaxBracket


def calculate_bracket_tax(
    income: Decimal,
    brackets: tuple[TaxBracket, ...] = DEFAULT_BRACKETS,
) -> tuple[Decimal, tuple[BracketTaxLine, ...]]:
    """Apply a progressive slab table to an income.

    Each slab taxes the part of the income that falls inside it; an amount
    sitting exactly on a bound belongs to the lower slab. Slabs that
    contribute no tax (zero rate) are left out of the breakdown. Slabs above
    the income are never visited.

    Args:
        income: Annual income (must be >= 0; checked by the caller).
        brackets: Ordered, contiguous slab table.

    Returns:
        Tuple of (total slab tax, breakdown lines in slab order).
    """
    total_tax = Decimal("0")
    breakdown: list[BracketTaxLine] = []
    remaining = income
    previous_upper = Decimal("0")

    for bracket in brackets:
        if remaining <= 0:
            break

        if bracket.upper is None:
            taxable = remaining
        else:
            taxable = max(Decimal("0"), min(remaining, bracket.upper - previous_upper))
        tax = taxable * bracket.rate
        total_tax += tax

        if tax > 0:
            breakdown.append(BracketTaxLine(
                range_label=format_range(previous_upper, bracket.upper),
                lower=previous_upper,
                upper=bracket.upper,
                rate=bracket.rate,
                rate_label=format_rate(bracket.rate),
                taxable_amount=taxable,
                tax_amount=tax,
            ))

        remaining -= taxable
        if bracket.upper is not None:
            previous_upper = bracket.upper

    return total_tax, tuple(breakdown)
