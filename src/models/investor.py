from dataclasses import dataclass


@dataclass(frozen=True)
class PersonalProfile:
    federal_tax_rate: float  # e.g. 0.24
    state_tax_rate: float  # e.g. 0.06
    opportunity_cost_rate: float  # Return foregone on cash tied up in the property

    @property
    def combined_rate(self) -> float:
        # Simplified: federal + state (ignoring SALT deduction interactions)
        return self.federal_tax_rate + self.state_tax_rate


DEFAULT_PERSONAL = PersonalProfile(
    federal_tax_rate=0.24,
    state_tax_rate=0.06,
    opportunity_cost_rate=0.08,
)
