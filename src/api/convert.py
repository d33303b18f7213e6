"""Mapping between engine dataclasses and API schemas.

This is the display boundary: non-finite engine values become 0 here.
"""

from dataclasses import asdict, fields

from src.api.schemas import (
    AssumptionsModel,
    OwnerProformaResponse,
    PersonalModel,
    RentalProformaResponse,
)
from src.formatting import finite_or_zero
from src.models.assumptions import AssumptionSet
from src.models.investor import PersonalProfile
from src.models.results import OwnerProforma, Proforma, RentalProforma


def assumptions_from_model(model: AssumptionsModel) -> AssumptionSet:
    return AssumptionSet(**model.model_dump())


def assumptions_to_model(assumptions: AssumptionSet) -> AssumptionsModel:
    return AssumptionsModel(**asdict(assumptions))


def personal_from_model(model: PersonalModel) -> PersonalProfile:
    return PersonalProfile(**model.model_dump())


def personal_to_model(personal: PersonalProfile) -> PersonalModel:
    return PersonalModel(**asdict(personal))


def _flatten(proforma: Proforma) -> dict:
    """Shared base fields + variant fields, with non-finite values zeroed."""
    base = proforma.base
    flat = {"scenario": base.scenario}
    for f in fields(base):
        if f.name != "scenario":
            flat[f.name] = finite_or_zero(getattr(base, f.name))
    for f in fields(proforma):
        if f.name != "base":
            flat[f.name] = finite_or_zero(getattr(proforma, f.name))
    return flat


def proforma_to_response(
    proforma: Proforma,
) -> RentalProformaResponse | OwnerProformaResponse:
    if isinstance(proforma, OwnerProforma):
        return OwnerProformaResponse(**_flatten(proforma))
    if isinstance(proforma, RentalProforma):
        return RentalProformaResponse(**_flatten(proforma))
    raise TypeError(f"Unknown proforma type: {type(proforma).__name__}")
