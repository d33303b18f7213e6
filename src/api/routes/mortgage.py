"""Mortgage payment routes."""

from fastapi import APIRouter, Query

from src.api.schemas import MortgagePaymentResponse
from src.engine.mortgage import monthly_payment_amount

router = APIRouter(prefix="/api/v1/mortgage", tags=["mortgage"])


@router.get("/payment", response_model=MortgagePaymentResponse)
async def payment(
    principal: float = Query(..., ge=0),
    annual_rate: float = Query(..., ge=0, le=1),
    term_years: float = Query(..., ge=0),
):
    """Level monthly P&I payment for ad hoc display."""
    monthly = monthly_payment_amount(principal, annual_rate, term_years)
    return MortgagePaymentResponse(
        principal=principal,
        annual_rate=annual_rate,
        term_years=term_years,
        monthly_payment=monthly,
        annual_payment=monthly * 12,
    )
