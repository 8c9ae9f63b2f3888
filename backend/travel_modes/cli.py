"""
CLI interface for travel mode estimates.

Usage:
    travel-modes estimate --distance-km 10 --duration-min 20
    travel-modes estimate --distance-km 10 --duration-min 20 --at 2024-05-06T08:00 --json
"""

import json
import logging

import click

from travel_modes.config import settings
from travel_modes.features.modes import ModeEstimateService
from travel_modes.shared.calculator_types import RouteEstimate
from travel_modes.shared.formatters import format_distance_km


DATETIME_FORMATS = ["%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override LOG_LEVEL"
)
def cli(log_level):
    """Travel mode estimates from a driving route."""
    logging.basicConfig(
        level=getattr(logging, (log_level or settings.log_level).upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


@cli.command()
@click.option("--distance-km", required=True, type=float, help="Driving distance in km")
@click.option("--duration-min", required=True, type=float, help="Driving duration in minutes")
@click.option(
    "--at",
    "time_of_day",
    default=None,
    type=click.DateTime(formats=DATETIME_FORMATS),
    help="Local departure time (default: now)"
)
@click.option(
    "--timezone",
    default=None,
    help="IANA timezone for peak hours (default: LOCAL_TIMEZONE or host)"
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
def estimate(distance_km, duration_min, time_of_day, timezone, as_json):
    """
    Print drive, transit, bike and walk estimates.

    Prints 'Nothing to show' for a zero or negative route.
    """
    service = ModeEstimateService.from_timezone_name(timezone or settings.local_timezone)
    result = service.estimate(RouteEstimate(distance_km, duration_min, time_of_day))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.is_empty:
        click.echo("Nothing to show")
        return

    header = f"{format_distance_km(distance_km)} by car in {duration_min:g} min"
    if result.peak_hour:
        header += " (peak hour)"
    click.echo(header)

    for mode in result.modes:
        click.echo(f"  {mode.label:<8} {mode.display}")


if __name__ == "__main__":
    cli()
