"""Pydantic models for calculator inputs and results."""

from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, PlainSerializer

# Decimal internally, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class SpendCategory(str, Enum):
    """Class of goods the spending share goes on."""

    BASIC = "basic"
    ELEVATED = "elevated"
    LUXURY = "luxury"


# --- Inputs ---


class SpendingDeclaration(BaseModel):
    """Share of income spent, and on what."""

    model_config = {"frozen": True}

    percentage: Decimal
    category: SpendCategory = SpendCategory.BASIC


class InvestingDeclaration(BaseModel):
    """Share of income invested and how the investment turned out.

    ``short_term`` is only looked at when ``profitable`` is true.
    """

    model_config = {"frozen": True}

    percentage: Decimal
    profitable: bool = False
    short_term: bool = False


class TaxInput(BaseModel):
    """Everything the engine needs for one computation."""

    model_config = {"frozen": True}

    annual_income: Decimal
    spending: SpendingDeclaration | None = None
    investing: InvestingDeclaration | None = None


# --- Results ---


class BracketTaxLine(BaseModel):
    """Tax attributed to a single slab."""

    model_config = {"frozen": True}

    range_label: str
    lower: Money
    upper: Money | None = None  # None = no cap
    rate: Money
    rate_label: str
    taxable_amount: Money
    tax_amount: Money


class TaxResult(BaseModel):
    """Combined slab and supplemental tax for one income."""

    model_config = {"frozen": True}

    annual_income: Money
    bracket_tax: Money
    breakdown: tuple[BracketTaxLine, ...] = ()
    spending_tax: Money
    investing_tax: Money
    supplemental_tax: Money
    total_tax: Money
    net_income: Money
    effective_rate_percent: Money
    tax_year: str
