"""Year-1 tax effects for rental and owner-occupied scenarios.

Simplified: one combined marginal rate, no passive-activity limits,
no standard-deduction comparison. Pure functions. No I/O.
"""

SALT_PROPERTY_TAX_CAP = 10000.0


def taxable_rental_income(
    egi: float,
    total_opex: float,
    interest_paid: float,
    depreciation: float,
) -> float:
    """Taxable income = EGI - operating expenses - mortgage interest - depreciation.

    (Principal payments are NOT deductible.)
    """
    return egi - (total_opex + interest_paid + depreciation)


def rental_tax_benefit(net_taxable_income: float, combined_rate: float) -> float:
    """Tax saved on a loss (positive) or owed on a profit (negative).

    Losses offset other income without limit.
    """
    tax_savings = abs(net_taxable_income) * combined_rate if net_taxable_income < 0 else 0.0
    taxes_owed = net_taxable_income * combined_rate if net_taxable_income > 0 else 0.0
    return tax_savings - taxes_owed


def deductible_property_tax(annual_property_tax: float) -> float:
    """Itemized property tax deduction under the SALT cap."""
    return min(annual_property_tax, SALT_PROPERTY_TAX_CAP)


def owner_tax_benefit(
    annual_property_tax: float,
    interest_paid: float,
    combined_rate: float,
) -> tuple[float, float, float]:
    """Itemized savings for an owner-occupant.

    Returns (deductible_prop_tax, total_deductions, tax_benefit).
    """
    prop_tax = deductible_property_tax(annual_property_tax)
    total_deductions = prop_tax + interest_paid
    return prop_tax, total_deductions, total_deductions * combined_rate
