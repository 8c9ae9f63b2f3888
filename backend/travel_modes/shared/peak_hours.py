"""
Peak Hours

Weekday rush-hour detection on the local wall clock.
"""

from datetime import datetime, tzinfo
from typing import Optional


# datetime.weekday(): Monday = 0 ... Sunday = 6
WEEKEND_DAYS = (5, 6)

# Inclusive local hour ranges
PEAK_WINDOWS = (
    (7, 9),    # Morning commute
    (17, 19),  # Evening commute
)


def resolve_local_time(
    moment: Optional[datetime] = None,
    tz: Optional[tzinfo] = None
) -> datetime:
    """
    Get the wall-clock time used for peak detection.

    Args:
        moment: Departure time. Naive values are taken as already local,
                aware values are converted to `tz`. None means now.
        tz: Local timezone (None = host timezone)

    Returns:
        Local datetime
    """
    if moment is None:
        return datetime.now(tz) if tz is not None else datetime.now()
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(tz)


def is_peak_hour(
    moment: Optional[datetime] = None,
    tz: Optional[tzinfo] = None
) -> bool:
    """
    Check whether a moment falls in weekday rush hour.

    Peak is Monday-Friday, local hour 7-9 or 17-19 inclusive
    (so 09:59 still counts). Weekends are never peak.
    """
    local = resolve_local_time(moment, tz)

    if local.weekday() in WEEKEND_DAYS:
        return False

    return any(start <= local.hour <= end for start, end in PEAK_WINDOWS)
