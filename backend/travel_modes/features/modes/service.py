"""
Mode Estimate Service

Orchestrates the four mode calculators:
- Input validation (degenerate routes yield no estimates)
- Peak-hour detection on the local wall clock
- Drive, transit, bike and walk calculations in display order

This is the main entry point for travel mode estimates.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo

from travel_modes.shared.calculator_types import (
    ModeCalculator,
    ModeEstimate,
    RouteEstimate,
)
from travel_modes.shared.peak_hours import is_peak_hour, resolve_local_time
from travel_modes.features.modes.calculators import (
    DriveCalculator,
    TransitCalculator,
    BikeCalculator,
    WalkCalculator,
)

logger = logging.getLogger(__name__)


@dataclass
class ModeEstimateResult:
    """Estimates for one route plus the clock they were computed against."""
    peak_hour: bool
    local_time: Optional[datetime] = None
    modes: List[ModeEstimate] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Nothing to show (degenerate route)."""
        return not self.modes

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "peak_hour": self.peak_hour,
            "modes": [mode.to_dict() for mode in self.modes],
        }


class ModeEstimateService:
    """
    Service for multi-modal travel time estimates.

    Stateless apart from the configured local timezone; safe to share
    between requests.

    Example usage:
        service = ModeEstimateService()
        result = service.estimate(RouteEstimate(10.0, 20.0))
        for mode in result.modes:
            print(mode.label, mode.display)
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        """
        Initialize service.

        Args:
            tz: Local timezone for peak detection (None = host timezone)
        """
        self.tz = tz
        # Order here is the display order
        self.calculators: List[ModeCalculator] = [
            DriveCalculator(),
            TransitCalculator(),
            BikeCalculator(),
            WalkCalculator(),
        ]

    @classmethod
    def from_timezone_name(cls, name: Optional[str]) -> "ModeEstimateService":
        """Create service for an IANA timezone name (None = host timezone)."""
        return cls(tz=ZoneInfo(name) if name else None)

    def estimate(self, route: RouteEstimate) -> ModeEstimateResult:
        """
        Estimate all four modes for a driving route.

        Returns an empty result when distance or duration is missing,
        non-finite or not positive, or when a duration overflows to inf.
        """
        if not route.is_valid:
            logger.debug(
                f"Skipping mode estimate for degenerate route: "
                f"distance_km={route.distance_km}, "
                f"drive_duration_min={route.drive_duration_min}"
            )
            return ModeEstimateResult(peak_hour=False)

        local_time = resolve_local_time(route.time_of_day, self.tz)
        peak = is_peak_hour(local_time, self.tz)

        distance_km = float(route.distance_km)
        drive_duration_min = float(route.drive_duration_min)

        try:
            modes = [
                calculator.calculate(distance_km, drive_duration_min, peak)
                for calculator in self.calculators
            ]
        except OverflowError:
            modes = []

        if not modes or not all(math.isfinite(m.duration_min) for m in modes):
            logger.debug(
                f"Skipping mode estimate, durations overflow: "
                f"distance_km={distance_km}, drive_duration_min={drive_duration_min}"
            )
            return ModeEstimateResult(peak_hour=peak, local_time=local_time)

        logger.debug(
            f"Mode estimate {distance_km:.2f}km/{drive_duration_min:.1f}min "
            f"peak={peak}: "
            + ", ".join(f"{m.mode_id.value}={m.duration_min:.2f}" for m in modes)
        )

        return ModeEstimateResult(peak_hour=peak, local_time=local_time, modes=modes)


def estimate_modes(
    distance_km: Optional[float],
    drive_duration_min: Optional[float],
    time_of_day: Optional[datetime] = None,
    tz: Optional[tzinfo] = None
) -> List[ModeEstimate]:
    """
    Estimate drive, transit, bike and walk durations.

    Args:
        distance_km: Driving distance in kilometers
        drive_duration_min: Driving duration in minutes
        time_of_day: Departure time (None = now)
        tz: Local timezone for peak detection (None = host timezone)

    Returns:
        Four estimates ordered car, transit, bike, walk,
        or an empty list for a degenerate route
    """
    route = RouteEstimate(
        distance_km=distance_km,
        drive_duration_min=drive_duration_min,
        time_of_day=time_of_day,
    )
    return ModeEstimateService(tz=tz).estimate(route).modes
