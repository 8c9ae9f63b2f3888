"""
Tests for display formatters.
"""

import pytest

from travel_modes.shared.formatters import (
    format_duration,
    format_distance_km,
    round_half_up,
)


class TestFormatDuration:
    """Tests for format_duration function."""

    def test_under_one_minute(self):
        assert format_duration(0.5) == "< 1 min"
        assert format_duration(0.99) == "< 1 min"

    def test_whole_minutes(self):
        assert format_duration(1) == "1 min"
        assert format_duration(5.5) == "6 min"
        assert format_duration(15.333) == "15 min"

    def test_half_rounds_up(self):
        """12.5 shows as 13, not banker's rounding to 12."""
        assert format_duration(12.5) == "13 min"

    def test_exact_hours(self):
        assert format_duration(60) == "1 h"
        assert format_duration(120) == "2 h"

    def test_hours_and_minutes(self):
        assert format_duration(75) == "1 h 15 min"
        assert format_duration(145) == "2 h 25 min"

    def test_rounding_carries_into_hours(self):
        assert format_duration(59.6) == "1 h"
        assert format_duration(119.7) == "2 h"

    def test_carry_never_shows_60_min(self):
        for minutes in (59.5, 59.6, 59.99):
            assert format_duration(minutes) == "1 h"

    def test_just_under_an_hour(self):
        assert format_duration(59.4) == "59 min"


class TestRoundHalfUp:
    """Tests for round_half_up function."""

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (2.49, 2),
        (44.65, 45),
    ])
    def test_values(self, value, expected):
        assert round_half_up(value) == expected


class TestFormatDistance:
    """Tests for format_distance_km function."""

    def test_meters(self):
        assert format_distance_km(0.5) == "500 m"

    def test_kilometers(self):
        assert format_distance_km(12.5) == "12.5 km"
        assert format_distance_km(10) == "10.0 km"
