"""
Shared utilities (NOT business logic).

Usage:
    from travel_modes.shared import is_peak_hour
    from travel_modes.shared.formatters import format_duration
"""
from .formatters import (
    format_duration,
    format_distance_km,
    round_half_up,
)
from .peak_hours import (
    is_peak_hour,
    resolve_local_time,
    PEAK_WINDOWS,
    WEEKEND_DAYS,
)
from .calculator_types import (
    ModeId,
    ModeEstimate,
    RouteEstimate,
    ModeCalculator,
    is_positive_number,
)

__all__ = [
    # Formatters
    "format_duration",
    "format_distance_km",
    "round_half_up",
    # Peak hours
    "is_peak_hour",
    "resolve_local_time",
    "PEAK_WINDOWS",
    "WEEKEND_DAYS",
    # Calculator types
    "ModeId",
    "ModeEstimate",
    "RouteEstimate",
    "ModeCalculator",
    "is_positive_number",
]
