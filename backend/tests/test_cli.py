"""
Tests for the travel-modes CLI.
"""

import json

from click.testing import CliRunner

from travel_modes.cli import cli


def run(*args):
    return CliRunner().invoke(cli, ["estimate", *args])


class TestEstimateCommand:
    """Tests for `travel-modes estimate`."""

    def test_table(self):
        result = run("--distance-km", "10", "--duration-min", "20", "--at", "2024-05-06T08:00")

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()

        assert lines[0] == "10.0 km by car in 20 min (peak hour)"
        assert lines[1].split() == ["Drive", "31", "min"]
        assert lines[2].split() == ["Transit", "45", "min"]
        assert lines[3].split() == ["Bike", "35", "min"]
        assert lines[4].split() == ["Walk", "2", "h", "25", "min"]

    def test_off_peak_header(self):
        result = run("--distance-km", "1", "--duration-min", "5", "--at", "2024-05-08 10:00")

        assert result.exit_code == 0
        assert "peak hour" not in result.output

    def test_json(self):
        result = run(
            "--distance-km", "1", "--duration-min", "5",
            "--at", "2024-05-08T10:00", "--json",
        )

        assert result.exit_code == 0
        data = json.loads(result.output)

        assert data["peak_hour"] is False
        assert [m["mode_id"] for m in data["modes"]] == ["car", "transit", "bike", "walk"]

    def test_degenerate_route(self):
        result = run("--distance-km", "0", "--duration-min", "5")

        assert result.exit_code == 0
        assert result.output.strip() == "Nothing to show"

    def test_bad_number(self):
        result = run("--distance-km", "far", "--duration-min", "5")

        assert result.exit_code != 0

    def test_timezone_option(self):
        result = run(
            "--distance-km", "10", "--duration-min", "20",
            "--at", "2024-05-06T08:00", "--timezone", "Asia/Tokyo",
        )

        # Naive --at is already local, timezone does not shift it
        assert result.exit_code == 0
        assert "(peak hour)" in result.output


class TestLogLevelOption:
    """Tests for the --log-level group option."""

    def test_unknown_level_rejected(self):
        result = CliRunner().invoke(cli, [
            "--log-level", "LOUD",
            "estimate", "--distance-km", "1", "--duration-min", "5",
        ])

        assert result.exit_code == 2
        assert "LOUD" in result.output

    def test_lowercase_level_accepted(self):
        result = CliRunner().invoke(cli, [
            "--log-level", "warning",
            "estimate", "--distance-km", "0", "--duration-min", "5",
        ])

        assert result.exit_code == 0
        assert "Nothing to show" in result.output
