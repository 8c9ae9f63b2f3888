"""
Drive Calculator

Driving time from the routing provider, padded for traffic and parking.
"""

from travel_modes.shared.calculator_types import ModeCalculator, ModeId


class DriveCalculator(ModeCalculator):
    """
    Car travel time.

    The routing provider already approximates traffic, so the
    estimate only adds a buffer on top of it:
    - x1.3 in rush hour, x1.1 otherwise
    - +5 min parking when the destination is more than 2 km away
    """

    mode_id = ModeId.CAR
    label = "Drive"
    icon_hint = "car-outline"
    color_hint = "#3b82f6"

    PEAK_TRAFFIC_FACTOR = 1.3
    NORMAL_TRAFFIC_FACTOR = 1.1
    PARKING_DISTANCE_KM = 2.0
    PARKING_MINUTES = 5.0

    def calculate_minutes(
        self,
        distance_km: float,
        drive_duration_min: float,
        peak_hour: bool
    ) -> float:
        duration = drive_duration_min

        if peak_hour:
            duration *= self.PEAK_TRAFFIC_FACTOR
        else:
            duration *= self.NORMAL_TRAFFIC_FACTOR

        if distance_km > self.PARKING_DISTANCE_KM:
            duration += self.PARKING_MINUTES

        return duration
