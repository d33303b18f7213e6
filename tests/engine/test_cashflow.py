import math

import pytest

from src.engine.cashflow import (
    cap_rate,
    cash_on_cash,
    fixed_operating_expenses,
    gross_potential_income,
    vacancy_loss,
    variable_operating_expenses,
)
from src.models.results import Scenario


class TestGrossPotentialIncome:
    def test_rental(self, canonical_assumptions):
        assert gross_potential_income(canonical_assumptions, Scenario.RENTAL) == 36000

    def test_airbnb(self, canonical_assumptions):
        gpi = gross_potential_income(canonical_assumptions, Scenario.AIRBNB)
        assert gpi == pytest.approx(250 * 365 * 0.65)


class TestVacancyLoss:
    def test_rental(self, canonical_assumptions):
        assert vacancy_loss(canonical_assumptions, Scenario.RENTAL, 36000) == pytest.approx(1800)

    def test_airbnb_folded_into_occupancy(self, canonical_assumptions):
        assert vacancy_loss(canonical_assumptions, Scenario.AIRBNB, 59312.5) == 0


class TestOperatingExpenses:
    def test_fixed_itemized(self, canonical_assumptions):
        expenses = fixed_operating_expenses(canonical_assumptions)
        assert expenses["property_tax"] == pytest.approx(6000)
        assert expenses["insurance"] == pytest.approx(2000)
        assert expenses["hoa"] == 600
        assert expenses["utilities"] == 2400

    def test_variable_rental(self, canonical_assumptions):
        expenses = variable_operating_expenses(canonical_assumptions, Scenario.RENTAL, 34200)
        # Maintenance = 8% of EGI
        assert expenses["maintenance"] == pytest.approx(2736)
        # Management = 10% of EGI
        assert expenses["management"] == pytest.approx(3420)
        assert expenses["platform_fee"] == 0

    def test_platform_fee_airbnb_only(self, canonical_assumptions):
        expenses = variable_operating_expenses(canonical_assumptions, Scenario.AIRBNB, 50000)
        assert expenses["platform_fee"] == pytest.approx(1500)


class TestCapRate:
    def test_cap_rate_calculation(self):
        assert cap_rate(17044, 500000) == pytest.approx(0.034088)

    def test_zero_price_is_infinite(self):
        assert cap_rate(17044, 0) == math.inf
        assert cap_rate(-100, 0) == -math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(cap_rate(0, 0))


class TestCashOnCash:
    def test_positive_return(self):
        assert cash_on_cash(5000, 100000) == pytest.approx(0.05)

    def test_negative_return(self):
        assert cash_on_cash(-5000, 100000) == pytest.approx(-0.05)

    def test_zero_investment(self):
        assert not math.isfinite(cash_on_cash(5000, 0))
