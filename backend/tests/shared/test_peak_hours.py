"""
Tests for peak hour detection.

2024-05-06 is a Monday, 2024-05-08 a Wednesday, 2024-05-11 a Saturday.
"""

import pytest
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from travel_modes.shared.peak_hours import is_peak_hour, resolve_local_time


# =============================================================================
# Test Weekday Windows
# =============================================================================

class TestWeekdayWindows:
    """Tests for weekday morning and evening windows."""

    @pytest.mark.parametrize("hour,minute", [
        (7, 0),
        (8, 0),
        (8, 59),
        (9, 1),    # Hour 9 is still inside [7, 9]
        (9, 59),
        (17, 0),
        (18, 30),
        (19, 59),
    ])
    def test_peak(self, hour, minute):
        assert is_peak_hour(datetime(2024, 5, 8, hour, minute)) is True

    @pytest.mark.parametrize("hour,minute", [
        (0, 0),
        (6, 59),
        (10, 0),
        (12, 30),
        (16, 59),
        (20, 0),
        (23, 59),
    ])
    def test_off_peak(self, hour, minute):
        assert is_peak_hour(datetime(2024, 5, 8, hour, minute)) is False

    def test_every_weekday_has_peak(self):
        """Monday through Friday share the same windows."""
        for day in range(6, 11):
            assert is_peak_hour(datetime(2024, 5, day, 8, 0))
            assert is_peak_hour(datetime(2024, 5, day, 18, 0))


# =============================================================================
# Test Weekends
# =============================================================================

class TestWeekends:
    """Weekends are never peak."""

    def test_saturday_morning(self):
        assert is_peak_hour(datetime(2024, 5, 11, 8, 0)) is False

    def test_sunday_evening(self):
        assert is_peak_hour(datetime(2024, 5, 12, 18, 0)) is False

    def test_whole_weekend(self):
        for day in (11, 12):
            for hour in range(24):
                assert is_peak_hour(datetime(2024, 5, day, hour, 0)) is False


# =============================================================================
# Test Timezones
# =============================================================================

class TestTimezones:
    """Aware timestamps are read on the local wall clock."""

    def test_naive_is_taken_as_local(self):
        moment = datetime(2024, 5, 8, 8, 0)
        assert resolve_local_time(moment, ZoneInfo("Asia/Tokyo")) == moment

    def test_aware_converted_to_timezone(self):
        # 06:00 UTC = 08:00 in Berlin (CEST)
        moment = datetime(2024, 5, 8, 6, 0, tzinfo=timezone.utc)

        assert is_peak_hour(moment, ZoneInfo("Europe/Berlin")) is True
        assert is_peak_hour(moment, timezone.utc) is False

    def test_conversion_can_cross_into_weekend(self):
        # Friday 23:30 UTC is Saturday 08:30 in Tokyo
        moment = datetime(2024, 5, 10, 23, 30, tzinfo=timezone.utc)

        assert is_peak_hour(moment, ZoneInfo("Asia/Tokyo")) is False

    def test_now_uses_timezone(self):
        local = resolve_local_time(None, ZoneInfo("Europe/Berlin"))
        assert local.tzinfo == ZoneInfo("Europe/Berlin")

    def test_now_without_timezone_is_naive(self):
        assert resolve_local_time().tzinfo is None
