"""Assumption provenance and user overrides."""

from dataclasses import dataclass, field, fields
from enum import Enum


class AssumptionSource(Enum):
    SIMULATED = "simulated"
    DEFAULT = "default"
    USER_OVERRIDE = "user_override"


@dataclass(frozen=True)
class AssumptionDetail:
    field_name: str
    value: float
    source: AssumptionSource


@dataclass(frozen=True)
class AssumptionManifest:
    details: dict[str, AssumptionDetail] = field(default_factory=dict)

    def get(self, field_name: str) -> AssumptionDetail | None:
        return self.details.get(field_name)

    @property
    def overridden(self) -> list[str]:
        return [
            name for name, d in self.details.items()
            if d.source is AssumptionSource.USER_OVERRIDE
        ]


@dataclass(frozen=True)
class AssumptionOverrides:
    """Every field the user can override. None means keep the current value."""
    purchase_price: float | None = None
    down_payment_pct: float | None = None
    interest_rate: float | None = None
    loan_term_years: float | None = None
    closing_costs_pct: float | None = None
    land_value_pct: float | None = None
    monthly_rent: float | None = None
    avg_nightly_rate: float | None = None
    occupancy_rate: float | None = None
    equivalent_rent: float | None = None
    property_tax_pct: float | None = None
    home_insurance_pct: float | None = None
    monthly_hoa: float | None = None
    utilities_monthly: float | None = None
    maintenance_pct: float | None = None
    vacancy_pct: float | None = None
    mgmt_fee_pct: float | None = None
    platform_fee_pct: float | None = None

    def as_dict(self) -> dict[str, float]:
        """Only the fields that were set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
