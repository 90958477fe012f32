"""
CLI interface for route estimates.

Usage:
    guidepace estimate --distance 12 --gain 900 --season fall
    guidepace estimate --distance 5 --gain 1200 --loss 1200 \
        --activity climbing --grade 5.7 --pitches 6 --weather 1.2
    guidepace estimate --gpx route.gpx --activity hiking
    guidepace demo --json
"""

import json
from dataclasses import asdict
from pathlib import Path

import click

from guidepace.features.estimation import EstimationService, demo_route, describe_adjustment
from guidepace.features.gpx import GPXParserService, GPXRouteSummary
from guidepace.shared.calculator_types import PaceFactors, RouteData, RouteEstimate
from guidepace.shared.constants import ActivityType, Season
from guidepace.shared.formatters import (
    format_daylight_margin,
    format_distance_km,
    format_duration,
    format_duration_long,
    format_elevation,
    format_time_range,
)


def _print_estimate(estimate: RouteEstimate) -> None:
    click.echo("Detected route segments:")
    for segment in estimate.segments:
        click.echo(
            f"  {segment.name:<30} {format_duration(segment.estimated_time):>10}"
            f"  via {segment.calculation_method}"
        )
        click.echo(f"    {segment.details}")

    click.echo()
    click.echo(f"Estimated total time: {format_duration_long(estimate.total_hours)}")
    click.echo(f"Range: {format_time_range(estimate.optimistic_hours, estimate.conservative_hours)}")
    click.echo(f"Pace adjustment: {describe_adjustment(estimate.pace_factors)}")

    safety = estimate.safety
    click.echo()
    click.echo(f"Recommended start: {safety.recommended_start_time}")
    click.echo(f"Latest start:      {safety.latest_start_time}")
    click.echo(f"Turnaround:        {safety.turnaround_time} elapsed")
    if safety.sunrise and safety.sunset:
        click.echo(f"Sunrise / sunset:  {safety.sunrise} / {safety.sunset}")
    click.echo(f"Daylight margin:   {format_daylight_margin(safety.daylight_margin)}")
    for warning in safety.warnings:
        click.echo(f"  • {warning}")
    if not safety.warnings:
        click.echo("Route timing looks good with adequate daylight margin.")


def _print_gpx_summary(summary: GPXRouteSummary) -> None:
    click.echo(
        f"GPX: {summary.name or 'unnamed route'}  "
        f"{format_distance_km(summary.distance_km)}  "
        f"{format_elevation(summary.elevation_gain_m)} / {format_elevation(-summary.elevation_loss_m)}"
    )
    click.echo()


def _estimate_to_json(estimate: RouteEstimate) -> str:
    payload = asdict(estimate)
    payload["total_hours"] = estimate.total_hours
    payload["optimistic_hours"] = estimate.optimistic_hours
    payload["conservative_hours"] = estimate.conservative_hours
    payload["safety"]["alert_level"] = estimate.safety.alert_level.value
    return json.dumps(payload, indent=2, default=str, ensure_ascii=False)


def _emit(estimate: RouteEstimate, as_json: bool) -> None:
    if as_json:
        click.echo(_estimate_to_json(estimate))
    else:
        _print_estimate(estimate)


@click.group()
def cli():
    """GuidePace route time estimates."""
    pass


@cli.command()
@click.option("--distance", type=float, help="Total distance in km")
@click.option("--gain", type=float, default=0.0, show_default=True, help="Elevation gain in m")
@click.option("--loss", type=float, default=0.0, show_default=True, help="Elevation loss in m")
@click.option(
    "--gpx", "gpx_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read distance and elevation from a GPX file instead"
)
@click.option(
    "--activity",
    type=click.Choice([a.value for a in ActivityType]),
    default=ActivityType.HIKING.value,
    show_default=True,
)
@click.option("--grade", default=None, help="Climbing grade, e.g. 5.7 or 5.10a")
@click.option("--pitches", type=int, default=None, help="Number of roped pitches")
@click.option("--season", type=click.Choice([s.value for s in Season]), default=None)
@click.option("--fitness", type=float, default=1.0, show_default=True)
@click.option("--weather", type=float, default=1.0, show_default=True)
@click.option("--party-size", type=float, default=1.0, show_default=True)
@click.option("--pack-weight", type=float, default=1.0, show_default=True)
@click.option("--experience", type=float, default=1.0, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Print the estimate as JSON")
def estimate(
    distance, gain, loss, gpx_path, activity, grade, pitches, season,
    fitness, weather, party_size, pack_weight, experience, as_json
):
    """Estimate time for a route."""
    service = EstimationService.from_settings()
    start_lat = start_lon = None

    try:
        factors = PaceFactors(
            fitness=fitness,
            weather=weather,
            party_size=party_size,
            pack_weight=pack_weight,
            experience=experience,
        )

        if gpx_path is not None:
            summary = GPXParserService.parse(gpx_path.read_bytes())
            route = summary.to_route_data(
                activity_type=activity,
                season=season,
                climbing_grade=grade,
                number_of_pitches=pitches,
            )
            start_lat, start_lon = summary.start_lat, summary.start_lon
            if not as_json:
                _print_gpx_summary(summary)
        elif distance is None:
            raise click.UsageError("Either --distance or --gpx is required")
        else:
            route = RouteData(
                distance_km=distance,
                elevation_gain_m=gain,
                elevation_loss_m=loss,
                activity_type=activity,
                climbing_grade=grade,
                number_of_pitches=pitches,
                season=season,
            )

        result = service.estimate(route, factors, start_lat=start_lat, start_lon=start_lon)
    except ValueError as e:
        raise click.BadParameter(str(e))

    _emit(result, as_json)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the estimate as JSON")
def demo(as_json):
    """Estimate the built-in multi-pitch demo route."""
    service = EstimationService.from_settings()
    _emit(service.estimate(demo_route()), as_json)


if __name__ == "__main__":
    cli()
