"""Property routes: simulated assumptions and market context."""

from fastapi import APIRouter, Depends

from src.api.convert import assumptions_to_model
from src.api.deps import get_provider
from src.api.schemas import (
    AssumptionDetailResponse,
    MarketContextResponse,
    PropertyRequest,
    SimulateResponse,
)
from src.data.base import AssumptionProvider
from src.engine.assumptions_builder import build_manifest
from src.engine.simulator import generate_market_context
from src.models.property import Property
from src.models.smart_assumptions import AssumptionSource

router = APIRouter(prefix="/api/v1", tags=["properties"])


def _to_property(req: PropertyRequest) -> Property:
    return Property(
        address=req.address,
        bedrooms=req.bedrooms,
        bathrooms=req.bathrooms,
        year_built=req.year_built,
    )


@router.post("/simulate", response_model=SimulateResponse)
async def simulate_property(
    req: PropertyRequest,
    provider: AssumptionProvider = Depends(get_provider),
):
    """Property attributes → full assumption set."""
    assumptions = provider.assumptions_for(_to_property(req))
    manifest = build_manifest(assumptions, AssumptionSource.SIMULATED)
    return SimulateResponse(
        property=req,
        assumptions=assumptions_to_model(assumptions),
        manifest={
            name: AssumptionDetailResponse(value=d.value, source=d.source.value)
            for name, d in manifest.details.items()
        },
    )


@router.post("/market-context", response_model=MarketContextResponse)
async def market_context(req: PropertyRequest):
    ctx = generate_market_context(_to_property(req))
    return MarketContextResponse(
        median_home_price=ctx.median_home_price,
        avg_rent_in_area=ctx.avg_rent_in_area,
        market_appreciation=ctx.market_appreciation,
        days_on_market=ctx.days_on_market,
    )
