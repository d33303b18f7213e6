"""Protocol definitions for assumption sources.

A live property-data fetcher and the seeded simulator satisfy the same
interface, so either can feed the proforma engine.
"""

from typing import Protocol, runtime_checkable

from src.models.assumptions import AssumptionSet
from src.models.property import Property


@runtime_checkable
class AssumptionProvider(Protocol):
    source_name: str

    def assumptions_for(self, prop: Property) -> AssumptionSet:
        """Return a complete AssumptionSet for a property."""
        ...
