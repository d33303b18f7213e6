"""Assumption builder: base assumptions + user overrides, with provenance.

Sits between the assumption provider and the pure engine:
    AssumptionSet (simulated or default) + AssumptionOverrides
    → (AssumptionSet, AssumptionManifest)

Edits never mutate the incoming record; a new AssumptionSet replaces it.
"""

import logging
from dataclasses import asdict, replace

from src.models.assumptions import ASSUMPTION_FIELDS, FRACTION_FIELDS, AssumptionSet
from src.models.smart_assumptions import (
    AssumptionDetail,
    AssumptionManifest,
    AssumptionOverrides,
    AssumptionSource,
)

logger = logging.getLogger(__name__)


def percent_input_to_fraction(value: str | float | None) -> float:
    """Convert an editor percent entry ("6.5" or 6.5) to a fraction (0.065).

    Empty input counts as 0.
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return 0.0
    return float(value) / 100


def _validate(changes: dict[str, float]) -> None:
    unknown = set(changes) - set(ASSUMPTION_FIELDS)
    if unknown:
        raise ValueError(f"Unknown assumption field(s): {', '.join(sorted(unknown))}")
    for name, value in changes.items():
        if name in FRACTION_FIELDS and not 0 <= value <= 1:
            raise ValueError(
                f"{name} must be a fraction between 0 and 1, got {value}"
            )


def build_manifest(
    assumptions: AssumptionSet,
    source: AssumptionSource,
    overridden: set[str] | None = None,
) -> AssumptionManifest:
    overridden = overridden or set()
    details = {
        name: AssumptionDetail(
            field_name=name,
            value=value,
            source=AssumptionSource.USER_OVERRIDE if name in overridden else source,
        )
        for name, value in asdict(assumptions).items()
    }
    return AssumptionManifest(details=details)


def apply_overrides(
    base: AssumptionSet,
    overrides: AssumptionOverrides | dict[str, float] | None = None,
    base_source: AssumptionSource = AssumptionSource.SIMULATED,
) -> tuple[AssumptionSet, AssumptionManifest]:
    """Return a new AssumptionSet with overrides applied, plus its manifest.

    Every field is: override if set → base value (simulated or default).
    Raises ValueError for unknown fields or fractions outside [0, 1].
    """
    if overrides is None:
        changes: dict[str, float] = {}
    elif isinstance(overrides, AssumptionOverrides):
        changes = overrides.as_dict()
    else:
        changes = {k: v for k, v in overrides.items() if v is not None}

    _validate(changes)
    if changes:
        logger.info("Applying assumption overrides: %s", ", ".join(sorted(changes)))

    assumptions = replace(base, **{k: float(v) for k, v in changes.items()})
    return assumptions, build_manifest(assumptions, base_source, set(changes))
