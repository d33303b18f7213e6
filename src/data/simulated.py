"""Seeded stand-in for a real property-data source."""

from src.engine.simulator import simulate
from src.models.assumptions import AssumptionSet
from src.models.property import Property


class SimulatedAssumptionProvider:
    source_name = "simulated"

    def assumptions_for(self, prop: Property) -> AssumptionSet:
        return simulate(prop)
