"""Pydantic schemas for API request/response models."""

from typing import Annotated

from pydantic import BaseModel, Field

from src.models.results import Scenario

Fraction = Annotated[float, Field(ge=0, le=1)]


# ---- Request schemas ----

class PropertyRequest(BaseModel):
    address: str = Field(..., min_length=1, description="Full US address string")
    bedrooms: int = Field(..., ge=0)
    bathrooms: float = Field(..., ge=0, multiple_of=0.5)
    year_built: int


class AssumptionsModel(BaseModel):
    """Fractions are decimals (0.065), dollar amounts are plain numbers."""
    purchase_price: float = Field(..., ge=0)
    down_payment_pct: Fraction
    interest_rate: Fraction
    loan_term_years: float = Field(..., ge=0)
    closing_costs_pct: Fraction
    land_value_pct: Fraction
    monthly_rent: float = Field(..., ge=0)
    avg_nightly_rate: float = Field(..., ge=0)
    occupancy_rate: Fraction
    equivalent_rent: float = Field(..., ge=0)
    property_tax_pct: Fraction
    home_insurance_pct: Fraction
    monthly_hoa: float = Field(..., ge=0)
    utilities_monthly: float = Field(..., ge=0)
    maintenance_pct: Fraction
    vacancy_pct: Fraction
    mgmt_fee_pct: Fraction
    platform_fee_pct: Fraction


class PersonalModel(BaseModel):
    federal_tax_rate: Fraction
    state_tax_rate: Fraction
    opportunity_cost_rate: Fraction


class ProformaRequest(BaseModel):
    assumptions: AssumptionsModel | None = Field(None, description="Defaults if omitted")
    personal: PersonalModel | None = Field(None, description="Defaults if omitted")
    scenario: Scenario = Scenario.RENTAL
    overrides: dict[str, float] | None = Field(
        None, description="Field-level edits applied on top of assumptions"
    )


# ---- Response schemas ----

class AssumptionDetailResponse(BaseModel):
    value: float
    source: str


class SimulateResponse(BaseModel):
    property: PropertyRequest
    assumptions: AssumptionsModel
    manifest: dict[str, AssumptionDetailResponse]


class DefaultsResponse(BaseModel):
    assumptions: AssumptionsModel
    personal: PersonalModel


class MarketContextResponse(BaseModel):
    median_home_price: float
    avg_rent_in_area: float
    market_appreciation: float
    days_on_market: int


class ProformaBaseResponse(BaseModel):
    scenario: Scenario
    total_cash_needed: float
    annual_property_tax: float
    annual_home_insurance: float
    annual_hoa: float
    annual_utilities: float
    opportunity_cost: float
    year1_principal: float


class RentalProformaResponse(ProformaBaseResponse):
    gross_potential_income: float
    vacancy_loss: float
    effective_gross_income: float
    maintenance: float
    management_fee: float
    platform_fee: float
    total_opex: float
    annual_mortgage_payment: float
    total_expenses: float
    net_operating_income: float
    cash_flow_before_tax: float
    year1_interest: float
    annual_depreciation: float
    net_taxable_income: float
    tax_benefit: float
    cash_flow_after_tax: float
    cap_rate: float
    cash_on_cash_return: float
    cash_flow_per_month: float


class OwnerProformaResponse(ProformaBaseResponse):
    gross_avoided_rent: float
    annual_piti: float
    total_annual_cost: float
    total_expenses: float
    year1_interest: float
    deductible_prop_tax: float
    total_deductions: float
    tax_benefit: float
    net_annual_cost: float
    net_benefit: float
    monthly_total_cost: float
    net_monthly_cost: float


class ProformaResponse(BaseModel):
    proforma: RentalProformaResponse | OwnerProformaResponse
    overridden: list[str] = []


class CompareResponse(BaseModel):
    rental: RentalProformaResponse
    airbnb: RentalProformaResponse
    owner: OwnerProformaResponse


class MortgagePaymentResponse(BaseModel):
    principal: float
    annual_rate: float
    term_years: float
    monthly_payment: float
    annual_payment: float
