"""
Formatting utilities for display.

Used by the API response schemas and the CLI.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def format_duration(minutes: float) -> str:
    """
    Format a duration in minutes for a mode chip.

    The duration is rounded to whole minutes before choosing between
    "N min" and "H h M min", so the rounding carries into the hour:
    59.6 shows as "1 h" and 119.7 as "2 h", never "60 min".

    Args:
        minutes: Duration in minutes (e.g., 75.4)

    Returns:
        Formatted string (e.g., '< 1 min', '13 min', '1 h', '1 h 15 min')
    """
    if minutes < 1:
        return "< 1 min"

    total_minutes = round_half_up(minutes)
    if total_minutes < 60:
        return f"{total_minutes} min"

    h = total_minutes // 60
    m = total_minutes % 60

    if m == 0:
        return f"{h} h"
    return f"{h} h {m} min"


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.5 km' or '850 m')
    """
    if km < 1:
        return f"{int(km * 1000)} m"
    return f"{km:.1f} km"
