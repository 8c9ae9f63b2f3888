"""
Mode estimate schemas.

Pydantic schemas for API request/response serialization.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from travel_modes.shared.calculator_types import ModeId, RouteEstimate


class ModeEstimateRequest(BaseModel):
    """Request for mode estimates from a driving route."""
    distance_km: Optional[float] = Field(default=None, description="Driving distance in km")
    drive_duration_min: Optional[float] = Field(default=None, description="Driving time in minutes")
    time_of_day: Optional[datetime] = Field(default=None, description="Departure time (default: now)")

    def to_route(self) -> RouteEstimate:
        return RouteEstimate(
            distance_km=self.distance_km,
            drive_duration_min=self.drive_duration_min,
            time_of_day=self.time_of_day,
        )


class RouteSummaryRequest(BaseModel):
    """Request for mode estimates from a raw routing summary."""
    distance_m: Optional[float] = Field(default=None, description="Route distance in meters")
    duration_s: Optional[float] = Field(default=None, description="Route time in seconds")
    time_of_day: Optional[datetime] = None

    def to_route(self) -> RouteEstimate:
        return RouteEstimate.from_route_summary(
            distance_m=self.distance_m,
            duration_s=self.duration_s,
            time_of_day=self.time_of_day,
        )


class ModeEstimateSchema(BaseModel):
    """Single mode chip."""
    mode_id: ModeId
    label: str
    duration_min: float
    display: str  # '13 min', '1 h 5 min'
    icon_hint: str
    color_hint: str


class ModeEstimateResponse(BaseModel):
    """All four mode chips, or none for a degenerate route."""
    peak_hour: bool
    modes: List[ModeEstimateSchema] = Field(default_factory=list)
