"""Pro forma engine: year-1 income, expense, and tax statement per scenario.

Pure computation. No I/O, no validation, no exceptions: degenerate inputs
(e.g. a zero purchase price) come back as inf/nan fields. Dataclasses in,
Proforma out.
"""

from src.engine.cashflow import (
    cap_rate,
    cash_on_cash,
    fixed_operating_expenses,
    gross_potential_income,
    vacancy_loss,
    variable_operating_expenses,
)
from src.engine.depreciation import annual_depreciation
from src.engine.mortgage import monthly_payment_amount, year1_split
from src.engine.tax import owner_tax_benefit, rental_tax_benefit, taxable_rental_income
from src.models.assumptions import AssumptionSet
from src.models.investor import PersonalProfile
from src.models.results import (
    OwnerProforma,
    Proforma,
    ProformaBase,
    RentalProforma,
    Scenario,
)


def compute_proforma(
    assumptions: AssumptionSet,
    personal: PersonalProfile,
    scenario: Scenario,
) -> Proforma:
    """Compute the full year-1 proforma for one scenario.

    Rental and Airbnb return a RentalProforma; Owner returns an OwnerProforma.
    """
    a = assumptions
    price = a.purchase_price

    # Purchase & loan
    down_payment = price * a.down_payment_pct
    loan_amount = price - down_payment
    total_cash_needed = down_payment + price * a.closing_costs_pct
    annual_mortgage_payment = (
        monthly_payment_amount(loan_amount, a.interest_rate, a.loan_term_years) * 12
    )
    year1_interest, year1_principal = year1_split(
        loan_amount, a.interest_rate, annual_mortgage_payment
    )

    fixed = fixed_operating_expenses(a)
    depreciation = annual_depreciation(price, a.land_value_pct)
    combined_rate = personal.combined_rate
    opportunity_cost = total_cash_needed * personal.opportunity_cost_rate

    base = ProformaBase(
        scenario=scenario,
        total_cash_needed=total_cash_needed,
        annual_property_tax=fixed["property_tax"],
        annual_home_insurance=fixed["insurance"],
        annual_hoa=fixed["hoa"],
        annual_utilities=fixed["utilities"],
        opportunity_cost=opportunity_cost,
        year1_principal=year1_principal,
    )

    if not scenario.is_rental:
        return _owner_proforma(
            a, base, annual_mortgage_payment, year1_interest, combined_rate
        )
    return _rental_proforma(
        a, base, scenario, annual_mortgage_payment, year1_interest, depreciation, combined_rate
    )


def compare_scenarios(
    assumptions: AssumptionSet,
    personal: PersonalProfile,
) -> dict[Scenario, Proforma]:
    """Proformas for every scenario, keyed by scenario."""
    return {s: compute_proforma(assumptions, personal, s) for s in Scenario}


def _rental_proforma(
    a: AssumptionSet,
    base: ProformaBase,
    scenario: Scenario,
    annual_mortgage_payment: float,
    year1_interest: float,
    depreciation: float,
    combined_rate: float,
) -> RentalProforma:
    # Income
    gpi = gross_potential_income(a, scenario)
    vacancy = vacancy_loss(a, scenario, gpi)
    egi = gpi - vacancy

    # Operating expenses
    variable = variable_operating_expenses(a, scenario, egi)
    total_opex = (
        base.annual_property_tax
        + base.annual_home_insurance
        + base.annual_hoa
        + base.annual_utilities
        + variable["maintenance"]
        + variable["management"]
        + variable["platform_fee"]
    )
    # Cash outlays plus the economic cost of the committed cash
    total_expenses = total_opex + annual_mortgage_payment + base.opportunity_cost

    # NOI & cash flow
    noi = egi - total_opex
    cfbt = noi - annual_mortgage_payment

    # Tax
    net_taxable = taxable_rental_income(egi, total_opex, year1_interest, depreciation)
    tax_benefit = rental_tax_benefit(net_taxable, combined_rate)
    cfat = cfbt + tax_benefit

    return RentalProforma(
        base=base,
        gross_potential_income=gpi,
        vacancy_loss=vacancy,
        effective_gross_income=egi,
        maintenance=variable["maintenance"],
        management_fee=variable["management"],
        platform_fee=variable["platform_fee"],
        total_opex=total_opex,
        annual_mortgage_payment=annual_mortgage_payment,
        total_expenses=total_expenses,
        net_operating_income=noi,
        cash_flow_before_tax=cfbt,
        year1_interest=year1_interest,
        annual_depreciation=depreciation,
        net_taxable_income=net_taxable,
        tax_benefit=tax_benefit,
        cash_flow_after_tax=cfat,
        cap_rate=cap_rate(noi, a.purchase_price),
        cash_on_cash_return=cash_on_cash(cfat, base.total_cash_needed),
        cash_flow_per_month=cfat / 12,
    )


def _owner_proforma(
    a: AssumptionSet,
    base: ProformaBase,
    annual_mortgage_payment: float,
    year1_interest: float,
    combined_rate: float,
) -> OwnerProforma:
    # "Income" is the rent the owner no longer pays
    gross_avoided_rent = a.equivalent_rent * 12

    annual_piti = annual_mortgage_payment + base.annual_property_tax + base.annual_home_insurance
    total_annual_cost = annual_piti + base.annual_hoa + base.annual_utilities
    total_expenses = total_annual_cost + base.opportunity_cost

    deductible_prop_tax, total_deductions, tax_benefit = owner_tax_benefit(
        base.annual_property_tax, year1_interest, combined_rate
    )

    net_annual_cost = total_annual_cost - tax_benefit

    return OwnerProforma(
        base=base,
        gross_avoided_rent=gross_avoided_rent,
        annual_piti=annual_piti,
        total_annual_cost=total_annual_cost,
        total_expenses=total_expenses,
        year1_interest=year1_interest,
        deductible_prop_tax=deductible_prop_tax,
        total_deductions=total_deductions,
        tax_benefit=tax_benefit,
        net_annual_cost=net_annual_cost,
        net_benefit=gross_avoided_rent - net_annual_cost,
        monthly_total_cost=total_annual_cost / 12,
        net_monthly_cost=net_annual_cost / 12,
    )
