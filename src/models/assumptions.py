from dataclasses import dataclass, fields


@dataclass(frozen=True)
class AssumptionSet:
    """Financial inputs for one analysis session.

    All rate/percent fields are decimal fractions (0.065, not 6.5).
    Edits replace the whole record via dataclasses.replace().
    """

    # Purchase & loan
    purchase_price: float
    down_payment_pct: float
    interest_rate: float  # Annual
    loan_term_years: float
    closing_costs_pct: float  # % of price, paid in cash at close
    land_value_pct: float  # Land is not depreciable

    # Income
    monthly_rent: float  # Long-term rental
    avg_nightly_rate: float  # Short-term rental
    occupancy_rate: float  # Short-term rental; already nets out vacancy
    equivalent_rent: float  # Owner-occupied: rent avoided per month

    # Operating expenses
    property_tax_pct: float  # Annual, % of price
    home_insurance_pct: float  # Annual, % of price
    monthly_hoa: float
    utilities_monthly: float
    maintenance_pct: float  # % of effective gross income
    vacancy_pct: float  # Long-term rental only
    mgmt_fee_pct: float  # % of effective gross income
    platform_fee_pct: float  # Booking platform fee, short-term rental only


# Fields stored as fractions in [0, 1]; everything else is a dollar amount or a count.
FRACTION_FIELDS: frozenset[str] = frozenset({
    "down_payment_pct",
    "interest_rate",
    "closing_costs_pct",
    "land_value_pct",
    "occupancy_rate",
    "property_tax_pct",
    "home_insurance_pct",
    "maintenance_pct",
    "vacancy_pct",
    "mgmt_fee_pct",
    "platform_fee_pct",
})

ASSUMPTION_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(AssumptionSet))


DEFAULT_ASSUMPTIONS = AssumptionSet(
    purchase_price=425000.0,
    down_payment_pct=0.20,
    interest_rate=0.0675,
    loan_term_years=30,
    closing_costs_pct=0.03,
    land_value_pct=0.20,
    monthly_rent=2400.0,
    avg_nightly_rate=185.0,
    occupancy_rate=0.68,
    equivalent_rent=2650.0,
    property_tax_pct=0.0115,
    home_insurance_pct=0.0038,
    monthly_hoa=125.0,
    utilities_monthly=185.0,
    maintenance_pct=0.08,
    vacancy_pct=0.05,
    mgmt_fee_pct=0.10,
    platform_fee_pct=0.03,
)
