"""
Walk Calculator

Walking time from an average pace plus street-crossing delays.
"""

import math
from typing import Tuple

from travel_modes.shared.calculator_types import ModeCalculator, ModeId


# (upper distance bound km, average speed km/h), upper bounds exclusive
WALK_SPEED_TIERS: Tuple[Tuple[float, float], ...] = (
    (0.5, 4.0),             # Short walk, many crossings
    (2.0, 4.5),             # Typical urban walking
    (5.0, 5.0),             # Sustained walking pace
    (float("inf"), 4.8),    # Long walk, fatigue
)

CROSSINGS_PER_KM = 4
CROSSING_MINUTES = 0.5


class WalkCalculator(ModeCalculator):
    """
    Walking time.

    Formula: distance / speed * 60 + floor(distance * 4) * 0.5 min.
    Roughly four street crossings per kilometer, 30 s each.
    Walking ignores rush hour.
    """

    mode_id = ModeId.WALK
    label = "Walk"
    icon_hint = "walk-outline"
    color_hint = "#64748b"

    @staticmethod
    def speed_for(distance_km: float) -> float:
        """Average walking speed (km/h) for a distance."""
        for upper_km, speed in WALK_SPEED_TIERS:
            if distance_km < upper_km:
                return speed
        return WALK_SPEED_TIERS[-1][1]

    @staticmethod
    def crossings_for(distance_km: float) -> int:
        """Approximate number of street crossings on the way."""
        return math.floor(distance_km * CROSSINGS_PER_KM)

    def calculate_minutes(
        self,
        distance_km: float,
        drive_duration_min: float,
        peak_hour: bool
    ) -> float:
        speed_kmh = self.speed_for(distance_km)

        duration = (distance_km / speed_kmh) * 60
        duration += self.crossings_for(distance_km) * CROSSING_MINUTES

        return duration
