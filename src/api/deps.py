"""FastAPI dependency injection."""

from functools import lru_cache

from src.config import settings
from src.data.base import AssumptionProvider
from src.data.simulated import SimulatedAssumptionProvider
from src.engine.proforma import compare_scenarios, compute_proforma
from src.models.assumptions import AssumptionSet
from src.models.investor import PersonalProfile
from src.models.results import Proforma, Scenario


def get_provider() -> AssumptionProvider:
    return SimulatedAssumptionProvider()


@lru_cache(maxsize=settings.proforma_cache_size)
def cached_proforma(
    assumptions: AssumptionSet,
    personal: PersonalProfile,
    scenario: Scenario,
) -> Proforma:
    """compute_proforma memoized on its (hashable, immutable) inputs."""
    return compute_proforma(assumptions, personal, scenario)


@lru_cache(maxsize=settings.proforma_cache_size)
def cached_comparison(
    assumptions: AssumptionSet,
    personal: PersonalProfile,
) -> dict[Scenario, Proforma]:
    return compare_scenarios(assumptions, personal)
