"""
Transit Calculator

Public transport time as a multiple of driving time plus a fixed
offset for walking to stops and waiting.
"""

from typing import Tuple

from travel_modes.shared.calculator_types import ModeCalculator, ModeId


# (upper distance bound km, drive-time multiplier, offset min)
# Upper bounds are exclusive; the last tier is open-ended.
TRANSIT_TIERS: Tuple[Tuple[float, float, float], ...] = (
    (1.5, 2.5, 0.0),            # Too short for transit, mostly walking to stops
    (5.0, 1.8, 12.0),           # Single bus/train
    (15.0, 1.6, 15.0),          # Likely one transfer
    (float("inf"), 1.4, 18.0),  # Express routes
)


class TransitCalculator(ModeCalculator):
    """
    Transit travel time.

    Tiered by distance: walk to stop + wait + ride is modelled as
    `drive_time * multiplier + offset`. In rush hour service is more
    frequent, which outweighs crowding (x0.95).
    """

    mode_id = ModeId.TRANSIT
    label = "Transit"
    icon_hint = "bus-outline"
    color_hint = "#10b981"

    PEAK_FREQUENCY_FACTOR = 0.95

    @staticmethod
    def tier_for(distance_km: float) -> Tuple[float, float]:
        """Get (multiplier, offset_min) for a distance."""
        for upper_km, multiplier, offset in TRANSIT_TIERS:
            if distance_km < upper_km:
                return multiplier, offset
        _, multiplier, offset = TRANSIT_TIERS[-1]
        return multiplier, offset

    def calculate_minutes(
        self,
        distance_km: float,
        drive_duration_min: float,
        peak_hour: bool
    ) -> float:
        multiplier, offset = self.tier_for(distance_km)
        duration = drive_duration_min * multiplier + offset

        if peak_hour:
            duration *= self.PEAK_FREQUENCY_FACTOR

        return duration
