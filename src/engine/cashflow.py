"""Income and operating-expense line items, NOI, cap rate, CoC return.

Pure functions: floats in, floats out. No I/O.
"""

from src.engine.floats import ieee_div
from src.models.assumptions import AssumptionSet
from src.models.results import Scenario

DAYS_PER_YEAR = 365


def gross_potential_income(assumptions: AssumptionSet, scenario: Scenario) -> float:
    """Scheduled annual income before vacancy."""
    if scenario is Scenario.AIRBNB:
        return assumptions.avg_nightly_rate * DAYS_PER_YEAR * assumptions.occupancy_rate
    return assumptions.monthly_rent * 12


def vacancy_loss(assumptions: AssumptionSet, scenario: Scenario, gpi: float) -> float:
    """Short-term rentals carry vacancy in occupancy_rate, never both."""
    if scenario is Scenario.RENTAL:
        return gpi * assumptions.vacancy_pct
    return 0.0


def fixed_operating_expenses(assumptions: AssumptionSet) -> dict[str, float]:
    """Annual costs that do not depend on income."""
    price = assumptions.purchase_price
    return {
        "property_tax": price * assumptions.property_tax_pct,
        "insurance": price * assumptions.home_insurance_pct,
        "hoa": assumptions.monthly_hoa * 12,
        "utilities": assumptions.utilities_monthly * 12,
    }


def variable_operating_expenses(
    assumptions: AssumptionSet, scenario: Scenario, egi: float
) -> dict[str, float]:
    """Costs charged as a percentage of effective gross income."""
    platform_fee = egi * assumptions.platform_fee_pct if scenario is Scenario.AIRBNB else 0.0
    return {
        "maintenance": egi * assumptions.maintenance_pct,
        "management": egi * assumptions.mgmt_fee_pct,
        "platform_fee": platform_fee,
    }


def cap_rate(noi_amount: float, purchase_price: float) -> float:
    """Cap rate = NOI / purchase price."""
    return ieee_div(noi_amount, purchase_price)


def cash_on_cash(cash_flow: float, total_cash_needed: float) -> float:
    """Cash-on-cash return = annual cash flow / total cash invested."""
    return ieee_div(cash_flow, total_cash_needed)
