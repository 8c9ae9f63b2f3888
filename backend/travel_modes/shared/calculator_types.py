"""
Base types for mode calculators.

This module contains only dataclasses, enums and the calculator ABC
to avoid circular dependencies between calculators and the service.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional
import math

from travel_modes.shared.formatters import format_duration


class ModeId(str, Enum):
    """Travel mode identifier. Declaration order is the display order."""
    CAR = "car"
    TRANSIT = "transit"
    BIKE = "bike"
    WALK = "walk"


def is_positive_number(value: Any) -> bool:
    """True for finite numbers strictly greater than zero."""
    if value is None or isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return False
    return math.isfinite(number) and number > 0


@dataclass(frozen=True)
class RouteEstimate:
    """
    A driving route as reported by a routing provider.

    Attributes:
        distance_km: Driving distance in kilometers
        drive_duration_min: Driving duration in minutes
        time_of_day: Departure time (None = now)
    """
    distance_km: Optional[float]
    drive_duration_min: Optional[float]
    time_of_day: Optional[datetime] = None

    @classmethod
    def from_route_summary(
        cls,
        distance_m: Optional[float],
        duration_s: Optional[float],
        time_of_day: Optional[datetime] = None
    ) -> "RouteEstimate":
        """
        Build from a routing summary in meters and seconds.

        Geoapify and OSRM both report route distance in meters
        and travel time in seconds.
        """
        distance_km = distance_m / 1000 if is_positive_number(distance_m) else distance_m
        duration_min = duration_s / 60 if is_positive_number(duration_s) else duration_s
        return cls(
            distance_km=distance_km,
            drive_duration_min=duration_min,
            time_of_day=time_of_day,
        )

    @property
    def is_valid(self) -> bool:
        """Both distance and duration are present, finite and positive."""
        return (
            is_positive_number(self.distance_km)
            and is_positive_number(self.drive_duration_min)
        )


@dataclass(frozen=True)
class ModeEstimate:
    """Estimated duration for one travel mode."""
    mode_id: ModeId
    label: str
    duration_min: float
    icon_hint: str
    color_hint: str

    @property
    def display(self) -> str:
        """Duration formatted for a chip ('13 min', '1 h 5 min')."""
        return format_duration(self.duration_min)

    def to_dict(self) -> dict:
        """Convert to dict for JSON output."""
        return {
            "mode_id": self.mode_id.value,
            "label": self.label,
            "duration_min": self.duration_min,
            "display": self.display,
            "icon_hint": self.icon_hint,
            "color_hint": self.color_hint,
        }


class ModeCalculator(ABC):
    """
    Abstract base class for travel mode calculators.

    Each calculator turns a validated driving route into the
    duration of one travel mode. Subclasses only provide the
    arithmetic; display metadata lives in class attributes.
    """

    mode_id: ModeId
    label: str
    icon_hint: str
    color_hint: str

    @abstractmethod
    def calculate_minutes(
        self,
        distance_km: float,
        drive_duration_min: float,
        peak_hour: bool
    ) -> float:
        """
        Calculate the mode's duration.

        Args:
            distance_km: Driving distance, already validated as > 0
            drive_duration_min: Driving duration, already validated as > 0
            peak_hour: Whether departure falls in weekday rush hour

        Returns:
            Duration in minutes, full precision
        """
        pass

    def calculate(
        self,
        distance_km: float,
        drive_duration_min: float,
        peak_hour: bool
    ) -> ModeEstimate:
        """Calculate and wrap the duration with display metadata."""
        return ModeEstimate(
            mode_id=self.mode_id,
            label=self.label,
            duration_min=self.calculate_minutes(distance_km, drive_duration_min, peak_hour),
            icon_hint=self.icon_hint,
            color_hint=self.color_hint,
        )
