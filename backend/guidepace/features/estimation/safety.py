"""
Safety recommendations.

Start and turnaround times plus daylight warnings for a planned total time.
"""

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from guidepace.services.sun import get_sun_times
from guidepace.shared.calculator_types import SafetyRecommendations
from guidepace.shared.constants import (
    Season,
    DAYLIGHT_HOURS,
    SAFETY_BUFFER_HOURS,
    RECOMMENDED_START_LEAD_HOURS,
    EARLIEST_START_HOUR,
    TURNAROUND_FRACTION,
    TIGHT_TURNAROUND_FRACTION,
    HEADLAMP_WARNING,
    EXCEEDS_DAYLIGHT_WARNING,
    TIGHT_TURNAROUND_WARNING,
)
from guidepace.shared.formatters import format_clock_time

logger = logging.getLogger(__name__)


def recommendations_for_daylight(total_hours: float, daylight_hours: float) -> SafetyRecommendations:
    """
    Build recommendations for a known amount of daylight.

    latest start = daylight - total - 2h buffer
    recommended start = max(latest start - 1h, 5:00)
    turnaround = 60% of the total time

    Args:
        total_hours: Realistic total route time
        daylight_hours: Hours of usable daylight

    Returns:
        SafetyRecommendations; daylight_margin is negative when the route
        does not fit. A non-finite total yields '--:--' times and every
        warning that applies.
    """
    latest_start = daylight_hours - total_hours - SAFETY_BUFFER_HOURS
    recommended_start = max(latest_start - RECOMMENDED_START_LEAD_HOURS, EARLIEST_START_HOUR)
    turnaround = total_hours * TURNAROUND_FRACTION

    warnings = []
    if total_hours > daylight_hours - SAFETY_BUFFER_HOURS:
        warnings.append(HEADLAMP_WARNING)
    if total_hours > daylight_hours:
        warnings.append(EXCEEDS_DAYLIGHT_WARNING)
    if turnaround > daylight_hours * TIGHT_TURNAROUND_FRACTION:
        warnings.append(TIGHT_TURNAROUND_WARNING)

    return SafetyRecommendations(
        recommended_start_time=format_clock_time(recommended_start),
        latest_start_time=format_clock_time(latest_start),
        turnaround_time=format_clock_time(turnaround),
        daylight_margin=latest_start,
        daylight_hours=daylight_hours,
        warnings=warnings,
    )


def get_safety_recommendations(
    total_hours: float,
    season: Optional[Season] = Season.SUMMER
) -> SafetyRecommendations:
    """
    Recommendations using the seasonal daylight table.

    Args:
        total_hours: Realistic total route time
        season: Planned season; summer when not given
    """
    season = Season(season) if season is not None else Season.SUMMER
    return recommendations_for_daylight(total_hours, DAYLIGHT_HOURS[season])


def get_safety_recommendations_for_location(
    total_hours: float,
    lat: float,
    lon: float,
    date_: Optional[date] = None,
    fallback_season: Season = Season.SUMMER,
) -> SafetyRecommendations:
    """
    Recommendations using actual daylight at the route start.

    Falls back to the seasonal table when the sun does not rise or set
    on that date at that latitude; sunrise/sunset are only set when the
    sun times are known.
    """
    try:
        sun_times = get_sun_times(lat, lon, date_)
    except ValueError:
        logger.info(f"Using {fallback_season.value} daylight table for ({lat:.3f}, {lon:.3f})")
        return get_safety_recommendations(total_hours, fallback_season)

    safety = recommendations_for_daylight(total_hours, sun_times.daylight_hours)
    return replace(safety, sunrise=sun_times.sunrise, sunset=sun_times.sunset)
