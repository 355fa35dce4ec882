"""Shared test fixtures."""

from decimal import Decimal

import pytest

from src.calculators.engine import TaxEngine
from src.calculators.models import (
    InvestingDeclaration,
    SpendCategory,
    SpendingDeclaration,
    TaxInput,
)


def _make_input(
    income: str | int = "1000000",
    spending: tuple[str | int, SpendCategory] | None = None,
    investing: tuple[str | int, bool, bool] | None = None,
) -> TaxInput:
    """Build a TaxInput from compact tuples.

    spending is (percentage, category); investing is
    (percentage, profitable, short_term).
    """
    return TaxInput(
        annual_income=Decimal(str(income)),
        spending=(
            SpendingDeclaration(percentage=Decimal(str(spending[0])), category=spending[1])
            if spending is not None
            else None
        ),
        investing=(
            InvestingDeclaration(
                percentage=Decimal(str(investing[0])),
                profitable=investing[1],
                short_term=investing[2],
            )
            if investing is not None
            else None
        ),
    )


@pytest.fixture
def make_input():  # type: ignore[no-untyped-def]
    """Factory for TaxInput built from compact tuples."""
    return _make_input


@pytest.fixture
def engine() -> TaxEngine:
    """Engine with the default slab table."""
    return TaxEngine()
