"""Supplemental levies on declared spending and investing shares."""

from decimal import Decimal

from src.calculators.models import InvestingDeclaration, SpendingDeclaration
from src.calculators.tax_data import (
    LONG_TERM_GAINS_RATE,
    SHORT_TERM_GAINS_RATE,
    SPENDING_RATES,
)


def _share_of(income: Decimal, percentage: Decimal) -> Decimal:
    return income * percentage / 100


def spending_levy(income: Decimal, spending: SpendingDeclaration | None) -> Decimal:
    """Levy on the spent share of income, rated by class of goods."""
    if spending is None:
        return Decimal("0")
    return _share_of(income, spending.percentage) * SPENDING_RATES[spending.category]


def investing_levy(income: Decimal, investing: InvestingDeclaration | None) -> Decimal:
    """Levy on the invested share of income.

    Only profitable investments are taxed: 20% when the gain was made short
    term, 12.5% otherwise.
    """
    if investing is None or not investing.profitable:
        return Decimal("0")
    rate = SHORT_TERM_GAINS_RATE if investing.short_term else LONG_TERM_GAINS_RATE
    return _share_of(income, investing.percentage) * rate


def calculate_supplemental_tax(
    income: Decimal,
    spending: SpendingDeclaration | None = None,
    investing: InvestingDeclaration | None = None,
) -> Decimal:
    """Sum the spending and investing levies.

    The two shares are independent and may together exceed 100% of income;
    no cap is applied.
    """
    return spending_levy(income, spending) + investing_levy(income, investing)
