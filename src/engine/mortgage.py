"""Mortgage payment computation.

Pure functions: float in, float out. No I/O, no rounding.
"""

from src.engine.floats import ieee_div, ieee_pow


def monthly_payment_amount(principal: float, annual_rate: float, term_years: float) -> float:
    """Level monthly principal + interest payment.

    Non-positive principal, rate, or term returns 0.
    """
    if principal <= 0 or annual_rate <= 0 or term_years <= 0:
        return 0.0

    r = annual_rate / 12
    n = term_years * 12
    if r == 0:
        return principal / n

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = ieee_pow(1 + r, n)
    return ieee_div(principal * (r * factor), factor - 1)


def year1_split(
    loan_amount: float,
    annual_rate: float,
    annual_payment: float,
) -> tuple[float, float]:
    """Split the first year's debt service into (interest, principal).

    Interest is the flat approximation loan_amount * annual_rate, not the
    sum of twelve amortized interest payments.
    """
    interest = loan_amount * annual_rate
    return interest, annual_payment - interest
