"""
Travel mode calculators.

Available calculators:
- DriveCalculator: Routed driving time + traffic buffer + parking
- TransitCalculator: Tiered multiple of driving time
- BikeCalculator: Tiered cycling speed
- WalkCalculator: Tiered walking speed + street crossings
"""
from .drive import DriveCalculator
from .transit import TransitCalculator, TRANSIT_TIERS
from .bike import BikeCalculator, BIKE_SPEED_TIERS
from .walk import WalkCalculator, WALK_SPEED_TIERS, CROSSINGS_PER_KM, CROSSING_MINUTES

__all__ = [
    "DriveCalculator",
    "TransitCalculator",
    "BikeCalculator",
    "WalkCalculator",
    # Tier tables
    "TRANSIT_TIERS",
    "BIKE_SPEED_TIERS",
    "WALK_SPEED_TIERS",
    "CROSSINGS_PER_KM",
    "CROSSING_MINUTES",
]
