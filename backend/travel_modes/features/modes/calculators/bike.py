"""
Bike Calculator

Cycling time from an average speed tiered by distance.
"""

from typing import Tuple

from travel_modes.shared.calculator_types import ModeCalculator, ModeId


# (upper distance bound km, average speed km/h), upper bounds exclusive
BIKE_SPEED_TIERS: Tuple[Tuple[float, float], ...] = (
    (2.0, 12.0),            # Urban, lots of stops and lights
    (8.0, 16.0),            # Steady urban cycling
    (15.0, 18.0),           # Sustained pace, fewer stops
    (float("inf"), 17.0),   # Long ride, fatigue
)


class BikeCalculator(ModeCalculator):
    """
    Bicycle travel time.

    Formula: distance / speed * 60 + 2 min (locking/parking),
    then x1.1 in rush hour for rides under 10 km (more stops at lights).
    """

    mode_id = ModeId.BIKE
    label = "Bike"
    icon_hint = "bicycle-outline"
    color_hint = "#f97316"

    PARKING_MINUTES = 2.0
    PEAK_FACTOR = 1.1
    PEAK_MAX_DISTANCE_KM = 10.0

    @staticmethod
    def speed_for(distance_km: float) -> float:
        """Average cycling speed (km/h) for a distance."""
        for upper_km, speed in BIKE_SPEED_TIERS:
            if distance_km < upper_km:
                return speed
        return BIKE_SPEED_TIERS[-1][1]

    def calculate_minutes(
        self,
        distance_km: float,
        drive_duration_min: float,
        peak_hour: bool
    ) -> float:
        speed_kmh = self.speed_for(distance_km)

        duration = (distance_km / speed_kmh) * 60
        duration += self.PARKING_MINUTES

        if peak_hour and distance_km < self.PEAK_MAX_DISTANCE_KM:
            duration *= self.PEAK_FACTOR

        return duration
