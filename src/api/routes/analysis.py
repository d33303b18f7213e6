"""Proforma routes: the primary API entry point."""

from fastapi import APIRouter, HTTPException

from src.api.convert import (
    assumptions_from_model,
    assumptions_to_model,
    personal_from_model,
    personal_to_model,
    proforma_to_response,
)
from src.api.deps import cached_comparison, cached_proforma
from src.api.schemas import (
    CompareResponse,
    DefaultsResponse,
    ProformaRequest,
    ProformaResponse,
)
from src.engine.assumptions_builder import apply_overrides
from src.models.assumptions import DEFAULT_ASSUMPTIONS, AssumptionSet
from src.models.investor import DEFAULT_PERSONAL, PersonalProfile
from src.models.smart_assumptions import AssumptionSource

router = APIRouter(prefix="/api/v1", tags=["analysis"])


def _resolve_inputs(req: ProformaRequest) -> tuple[AssumptionSet, PersonalProfile, list[str]]:
    """Request → engine inputs, falling back to defaults and applying overrides."""
    if req.assumptions is not None:
        base = assumptions_from_model(req.assumptions)
        source = AssumptionSource.SIMULATED
    else:
        base = DEFAULT_ASSUMPTIONS
        source = AssumptionSource.DEFAULT

    try:
        assumptions, manifest = apply_overrides(base, req.overrides, base_source=source)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    personal = personal_from_model(req.personal) if req.personal else DEFAULT_PERSONAL
    return assumptions, personal, manifest.overridden


@router.get("/defaults", response_model=DefaultsResponse)
async def get_defaults():
    """Initial assumptions and personal profile before any property is analyzed."""
    return DefaultsResponse(
        assumptions=assumptions_to_model(DEFAULT_ASSUMPTIONS),
        personal=personal_to_model(DEFAULT_PERSONAL),
    )


@router.post("/proforma", response_model=ProformaResponse)
async def proforma(req: ProformaRequest):
    """Assumptions + personal profile + scenario → year-1 proforma."""
    assumptions, personal, overridden = _resolve_inputs(req)
    result = cached_proforma(assumptions, personal, req.scenario)
    return ProformaResponse(proforma=proforma_to_response(result), overridden=overridden)


@router.post("/proforma/compare", response_model=CompareResponse)
async def compare(req: ProformaRequest):
    """All three scenarios side by side. The request's scenario is ignored."""
    assumptions, personal, _ = _resolve_inputs(req)
    results = {
        s.value: proforma_to_response(p)
        for s, p in cached_comparison(assumptions, personal).items()
    }
    return CompareResponse(**results)
