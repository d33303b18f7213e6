import pytest

from src.engine.tax import (
    SALT_PROPERTY_TAX_CAP,
    deductible_property_tax,
    owner_tax_benefit,
    rental_tax_benefit,
    taxable_rental_income,
)


class TestTaxableRentalIncome:
    def test_formula(self):
        # EGI - opex - interest - depreciation; principal is not deductible
        assert taxable_rental_income(34200, 17156, 26000, 14545.45) == pytest.approx(-23501.45)


class TestRentalTaxBenefit:
    def test_loss_saves_tax(self):
        assert rental_tax_benefit(-10000, 0.29) == pytest.approx(2900)

    def test_profit_owes_tax(self):
        assert rental_tax_benefit(10000, 0.29) == pytest.approx(-2900)

    def test_break_even(self):
        assert rental_tax_benefit(0, 0.29) == 0

    def test_no_passive_loss_limit(self):
        # Large losses offset other income in full
        assert rental_tax_benefit(-250000, 0.37) == pytest.approx(92500)


class TestOwnerTaxBenefit:
    def test_under_cap(self):
        assert deductible_property_tax(6000) == 6000

    def test_at_cap(self):
        assert deductible_property_tax(25000) == SALT_PROPERTY_TAX_CAP == 10000

    def test_itemized_savings(self):
        prop_tax, deductions, benefit = owner_tax_benefit(6000, 26000, 0.30)
        assert prop_tax == 6000
        assert deductions == 32000
        assert benefit == pytest.approx(9600)

    def test_capped_savings(self):
        prop_tax, deductions, benefit = owner_tax_benefit(18000, 26000, 0.30)
        assert prop_tax == 10000
        assert deductions == 36000
        assert benefit == pytest.approx(10800)
