"""API routes for the income tax estimator."""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.calculators.errors import InvalidInputError
from src.calculators.formatting import format_range, format_rate
from src.calculators.models import TaxInput, TaxResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/brackets")
async def brackets(request: Request) -> dict[str, Any]:
    """List the slab table the engine computes with."""
    engine = request.app.state.engine
    return {
        "tax_year": engine.tax_year,
        "brackets": [
            {
                "range_label": format_range(b.lower, b.upper),
                "lower": float(b.lower),
                "upper": float(b.upper) if b.upper is not None else None,
                "rate": float(b.rate),
                "rate_label": format_rate(b.rate),
            }
            for b in engine.brackets
        ],
    }


@router.post("/calculate", response_model=TaxResult)
async def calculate(body: TaxInput, request: Request) -> TaxResult | JSONResponse:
    """Compute slab tax and supplemental levies for one income."""
    engine = request.app.state.engine
    try:
        result = engine.compute(body)
    except InvalidInputError as exc:
        logger.warning("Rejected input field=%s: %s", exc.field, exc.message)
        return JSONResponse({"error": exc.message, "field": exc.field}, status_code=422)

    logger.info(
        "Computed tax income=%s total=%s", body.annual_income, result.total_tax
    )
    return result
