"""Canonical test fixtures used across all tests.

Fixture: $500K long-term rental, 20% down, 6.5% rate, 30yr fixed, $3,000/mo rent.
Personal: 24% federal, 5% state, 7% opportunity cost.
"""

import pytest

from src.models.assumptions import AssumptionSet
from src.models.investor import PersonalProfile
from src.models.property import Property


@pytest.fixture
def canonical_assumptions() -> AssumptionSet:
    """$500K property with standard assumptions."""
    return AssumptionSet(
        purchase_price=500000.0,
        down_payment_pct=0.20,
        interest_rate=0.065,
        loan_term_years=30,
        closing_costs_pct=0.03,
        land_value_pct=0.20,
        monthly_rent=3000.0,
        avg_nightly_rate=250.0,
        occupancy_rate=0.65,
        equivalent_rent=3200.0,
        property_tax_pct=0.012,
        home_insurance_pct=0.004,
        monthly_hoa=50.0,
        utilities_monthly=200.0,
        maintenance_pct=0.08,
        vacancy_pct=0.05,
        mgmt_fee_pct=0.10,
        platform_fee_pct=0.03,
    )


@pytest.fixture
def canonical_personal() -> PersonalProfile:
    return PersonalProfile(
        federal_tax_rate=0.24,
        state_tax_rate=0.05,
        opportunity_cost_rate=0.07,
    )


@pytest.fixture
def sample_property() -> Property:
    return Property(
        address="1247 Maple Grove Avenue, Portland, OR 97214",
        bedrooms=3,
        bathrooms=2,
        year_built=2006,
    )
