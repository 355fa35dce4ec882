"""Tax engine: composites slab tax and supplemental levies."""

from decimal import Decimal

from src.calculators.errors import InvalidInputError
from src.calculators.income_tax import calculate_bracket_tax
from src.calculators.models import TaxInput, TaxResult
from src.calculators.supplemental import (
    calculate_supplemental_tax,
    investing_levy,
    spending_levy,
)
from src.calculators.tax_data import DEFAULT_BRACKETS, DEFAULT_TAX_YEAR, TaxBracket


def _check_percentage(field: str, percentage: Decimal) -> None:
    if not Decimal("0") <= percentage <= Decimal("100"):
        raise InvalidInputError(field, f"{field} must be between 0 and 100, got {percentage}.")


def validate_input(tax_input: TaxInput) -> None:
    """Reject input the engine cannot compute on.

    Raises:
        InvalidInputError: If income is not positive or a declared
            percentage lies outside [0, 100].
    """
    if tax_input.annual_income <= 0:
        raise InvalidInputError("annual_income", "Annual income must be positive.")
    if tax_input.spending is not None:
        _check_percentage("spending.percentage", tax_input.spending.percentage)
    if tax_input.investing is not None:
        _check_percentage("investing.percentage", tax_input.investing.percentage)


class TaxEngine:
    """Computes a full tax result from income and behavioural declarations.

    Stateless apart from the slab table it was built with, so a single
    instance can be shared between callers.
    """

    def __init__(
        self,
        brackets: tuple[TaxBracket, ...] = DEFAULT_BRACKETS,
        tax_year: str = DEFAULT_TAX_YEAR,
    ) -> None:
        self.brackets = brackets
        self.tax_year = tax_year

    def compute(self, tax_input: TaxInput) -> TaxResult:
        """Validate the input, then combine slab tax and supplemental levies.

        Net income is not clamped and goes negative when the declared shares
        and rates exceed the income.
        """
        validate_input(tax_input)

        income = tax_input.annual_income
        bracket_tax, breakdown = calculate_bracket_tax(income, self.brackets)
        supplemental_tax = calculate_supplemental_tax(income, tax_input.spending, tax_input.investing)
        total_tax = bracket_tax + supplemental_tax

        return TaxResult(
            annual_income=income,
            bracket_tax=bracket_tax,
            breakdown=breakdown,
            spending_tax=spending_levy(income, tax_input.spending),
            investing_tax=investing_levy(income, tax_input.investing),
            supplemental_tax=supplemental_tax,
            total_tax=total_tax,
            net_income=income - total_tax,
            effective_rate_percent=total_tax / income * 100,
            tax_year=self.tax_year,
        )


_default_engine = TaxEngine()


def compute_tax(tax_input: TaxInput) -> TaxResult:
    """Compute with the default slab table."""
    return _default_engine.compute(tax_input)
