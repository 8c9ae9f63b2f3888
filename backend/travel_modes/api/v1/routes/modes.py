"""
Mode Estimate Routes

Endpoints for drive/transit/bike/walk estimates.
"""

from fastapi import APIRouter, Depends

from travel_modes.config import settings
from travel_modes.features.modes import (
    ModeEstimateService,
    ModeEstimateRequest,
    RouteSummaryRequest,
    ModeEstimateResponse,
)

router = APIRouter()


def get_mode_service() -> ModeEstimateService:
    """Service bound to the configured local timezone."""
    return ModeEstimateService.from_timezone_name(settings.local_timezone)


@router.post("/estimate", response_model=ModeEstimateResponse)
async def estimate(
    request: ModeEstimateRequest,
    service: ModeEstimateService = Depends(get_mode_service)
):
    """
    Estimate travel modes for a driving route.

    Takes the distance (km) and duration (min) of an already computed
    driving route. A missing or non-positive value returns no modes
    so the client can hide the chips.
    """
    result = service.estimate(request.to_route())
    return result.to_dict()


@router.post("/estimate/route-summary", response_model=ModeEstimateResponse)
async def estimate_from_route_summary(
    request: RouteSummaryRequest,
    service: ModeEstimateService = Depends(get_mode_service)
):
    """
    Estimate travel modes from a routing provider summary.

    Same as /estimate but takes distance in meters and time in
    seconds, as returned by Geoapify/OSRM route responses.
    """
    result = service.estimate(request.to_route())
    return result.to_dict()
