"""Property simulator: synthesizes a full AssumptionSet from basic attributes.

Stands in for a live property-data API. Every value is a seeded draw, so the
same Property always yields the same assumptions. Each field draws from its
own seed offset; the offsets below must stay distinct and in this order or
every simulated number changes.
"""

import logging

from src.config import settings
from src.engine.seeded import round_to, seed_from_property, seeded_value
from src.models.assumptions import AssumptionSet
from src.models.market import MarketContext
from src.models.property import Property

logger = logging.getLogger(__name__)

STANDARD_LOAN_TERM_YEARS = 30

# (max age exclusive, seed offset, low, high)
AGE_FACTOR_BUCKETS: list[tuple[float, int, float, float]] = [
    (5, 3, 1.15, 1.25),  # New construction premium
    (15, 4, 1.05, 1.15),  # Modern
    (30, 5, 0.95, 1.05),  # Established
    (50, 6, 0.80, 0.95),  # Older, needs updates
    (float("inf"), 7, 0.70, 0.90),  # Historic or dated
]

# (max age exclusive, low, high) for monthly HOA dues
HOA_RANGES: list[tuple[float, float, float]] = [
    (10, 150, 400),
    (20, 100, 300),
    (float("inf"), 50, 200),
]


def _age(prop: Property) -> int:
    return prop.age(settings.market_reference_year)


def realistic_price(prop: Property, seed: float) -> float:
    """Price from per-bed/per-bath rates, age, and a market multiplier."""
    per_bed = seeded_value(seed + 1, 80000, 120000)
    per_bath = seeded_value(seed + 2, 35000, 55000)

    age = _age(prop)
    age_factor = 1.0
    for max_age, offset, low, high in AGE_FACTOR_BUCKETS:
        if age < max_age:
            age_factor = seeded_value(seed + offset, low, high)
            break

    base_price = per_bed * prop.bedrooms + per_bath * prop.bathrooms
    market_multiplier = seeded_value(seed + 8, 0.85, 1.35)

    return round_to(base_price * age_factor * market_multiplier, 5000)


def realistic_rent(purchase_price: float, prop: Property, seed: float) -> float:
    """Monthly rent as a share of price; larger homes rent for less per dollar."""
    rent_ratio = seeded_value(seed + 10, 0.0045, 0.0075)

    size_adjustment = 1.0
    if prop.bedrooms >= 4:
        size_adjustment = seeded_value(seed + 11, 0.90, 0.95)
    elif prop.bedrooms <= 2:
        size_adjustment = seeded_value(seed + 12, 1.05, 1.15)

    return round_to(purchase_price * rent_ratio * size_adjustment, 50)


def nightly_rate(monthly_rent: float, prop: Property, seed: float) -> float:
    daily_rent_equivalent = monthly_rent / 30
    multiplier = seeded_value(seed + 20, 2.3, 3.2)
    bedroom_bonus = seeded_value(seed + 21, 1.05, 1.15) if prop.bedrooms >= 3 else 1.0
    return round_to(daily_rent_equivalent * multiplier * bedroom_bonus, 5)


def occupancy_rate(seed: float) -> float:
    return seeded_value(seed + 25, 0.55, 0.75)


def property_tax_pct(seed: float) -> float:
    # Most common US effective rates: 0.8% - 1.5%
    return seeded_value(seed + 30, 0.008, 0.015)


def home_insurance_pct(purchase_price: float, seed: float) -> float:
    """Insurance as % of value; pricier homes pay a lower percentage."""
    base_rate = seeded_value(seed + 35, 0.002, 0.006)

    tier_adjustment = 1.0
    if purchase_price > 600000:
        tier_adjustment = seeded_value(seed + 36, 0.85, 0.95)
    elif purchase_price < 250000:
        tier_adjustment = seeded_value(seed + 37, 1.05, 1.20)

    return base_rate * tier_adjustment


def monthly_hoa(prop: Property, seed: float) -> float:
    # 60% of properties have an HOA
    has_hoa = seeded_value(seed + 40, 0, 1) > 0.4
    if not has_hoa:
        return 0.0

    age = _age(prop)
    low, high = HOA_RANGES[-1][1:]
    for max_age, range_low, range_high in HOA_RANGES:
        if age < max_age:
            low, high = range_low, range_high
            break

    return round_to(seeded_value(seed + 41, low, high), 25)


def utilities_monthly(prop: Property, seed: float) -> float:
    base = seeded_value(seed + 45, 100, 150)
    bedroom_cost = prop.bedrooms * seeded_value(seed + 46, 25, 40)
    bathroom_cost = prop.bathrooms * seeded_value(seed + 47, 15, 25)
    return round_to(base + bedroom_cost + bathroom_cost, 10)


def interest_rate(seed: float) -> float:
    # Rounded to the nearest 1/8 point
    return round_to(seeded_value(seed + 50, 0.0625, 0.0750), 0.00125)


def down_payment_pct(seed: float) -> float:
    return round_to(seeded_value(seed + 55, 0.15, 0.25), 0.05)


def simulate(prop: Property) -> AssumptionSet:
    """Simulate fetching market assumptions for a property.

    Pure: the same Property always returns an identical AssumptionSet.
    """
    seed = seed_from_property(prop)

    purchase_price = realistic_price(prop, seed)
    monthly_rent = realistic_rent(purchase_price, prop, seed)
    equivalent_rent = round_to(monthly_rent * seeded_value(seed + 60, 1.05, 1.15), 50)

    assumptions = AssumptionSet(
        purchase_price=purchase_price,
        down_payment_pct=down_payment_pct(seed),
        interest_rate=interest_rate(seed),
        loan_term_years=STANDARD_LOAN_TERM_YEARS,
        closing_costs_pct=seeded_value(seed + 65, 0.025, 0.040),
        land_value_pct=seeded_value(seed + 70, 0.20, 0.35),
        monthly_rent=monthly_rent,
        avg_nightly_rate=nightly_rate(monthly_rent, prop, seed),
        occupancy_rate=occupancy_rate(seed),
        equivalent_rent=equivalent_rent,
        property_tax_pct=property_tax_pct(seed),
        home_insurance_pct=home_insurance_pct(purchase_price, seed),
        monthly_hoa=monthly_hoa(prop, seed),
        utilities_monthly=utilities_monthly(prop, seed),
        maintenance_pct=seeded_value(seed + 80, 0.06, 0.12),
        vacancy_pct=seeded_value(seed + 75, 0.04, 0.08),
        mgmt_fee_pct=seeded_value(seed + 85, 0.08, 0.12),
        platform_fee_pct=seeded_value(seed + 90, 0.03, 0.05),
    )
    logger.debug(
        "Simulated %r (seed %s): price $%.0f, rent $%.0f/mo, nightly $%.0f",
        prop.address, seed, purchase_price, monthly_rent, assumptions.avg_nightly_rate,
    )
    return assumptions


def generate_market_context(prop: Property) -> MarketContext:
    """Simulated local market snapshot for display next to the analysis."""
    seed = seed_from_property(prop)
    return MarketContext(
        median_home_price=round_to(seeded_value(seed + 100, 300000, 600000), 10000),
        avg_rent_in_area=round_to(seeded_value(seed + 105, 1500, 3000), 50),
        market_appreciation=seeded_value(seed + 110, 0.02, 0.08),
        days_on_market=int(round_to(seeded_value(seed + 115, 15, 60), 1)),
    )
