from dataclasses import dataclass
from enum import Enum
from typing import Union


class Scenario(Enum):
    RENTAL = "rental"  # Long-term rental
    AIRBNB = "airbnb"  # Short-term (nightly) rental
    OWNER = "owner"  # Owner-occupied

    @property
    def is_rental(self) -> bool:
        return self in (Scenario.RENTAL, Scenario.AIRBNB)


@dataclass(frozen=True)
class ProformaBase:
    """Line items every scenario shares."""
    scenario: Scenario
    total_cash_needed: float
    annual_property_tax: float
    annual_home_insurance: float
    annual_hoa: float
    annual_utilities: float
    opportunity_cost: float
    year1_principal: float


@dataclass(frozen=True)
class RentalProforma:
    base: ProformaBase

    # Income
    gross_potential_income: float
    vacancy_loss: float
    effective_gross_income: float

    # Expenses
    maintenance: float
    management_fee: float
    platform_fee: float
    total_opex: float
    annual_mortgage_payment: float
    total_expenses: float  # Cash outlays + opportunity cost

    # Operations
    net_operating_income: float
    cash_flow_before_tax: float

    # Tax
    year1_interest: float
    annual_depreciation: float
    net_taxable_income: float
    tax_benefit: float  # Positive = tax saved, negative = tax owed
    cash_flow_after_tax: float

    # Metrics
    cap_rate: float
    cash_on_cash_return: float
    cash_flow_per_month: float

    @property
    def scenario(self) -> Scenario:
        return self.base.scenario


@dataclass(frozen=True)
class OwnerProforma:
    base: ProformaBase

    gross_avoided_rent: float
    annual_piti: float
    total_annual_cost: float  # PITI + HOA + utilities
    total_expenses: float  # Total annual cost + opportunity cost

    # Tax (simplified itemized deduction)
    year1_interest: float
    deductible_prop_tax: float
    total_deductions: float
    tax_benefit: float

    net_annual_cost: float
    net_benefit: float  # Avoided rent - net annual cost
    monthly_total_cost: float
    net_monthly_cost: float

    @property
    def scenario(self) -> Scenario:
        return self.base.scenario


Proforma = Union[RentalProforma, OwnerProforma]
