"""
Formatting utilities for display.

Used by the API, the CLI and the safety recommendations.
"""

import math

UNKNOWN_CLOCK_TIME = "--:--"
UNKNOWN_DURATION = "--"


def format_clock_time(hours: float) -> str:
    """
    Format fractional hours as 'H:MM'.

    Hours are floored; minutes come from the fractional part
    (value % 1) * 60, rounded to whole minutes.

    Args:
        hours: Time in hours (e.g., 6.5, or -4.0 for a start time
            that has already passed)

    Returns:
        Formatted string (e.g., '6:30', '-4:00'); '--:--' when hours is
        not finite
    """
    if not math.isfinite(hours):
        return UNKNOWN_CLOCK_TIME

    whole = math.floor(hours)
    minutes = round((hours % 1) * 60)

    if minutes == 60:
        whole += 1
        minutes = 0

    return f"{whole}:{minutes:02d}"


def _split_hours(hours: float) -> tuple[int, int]:
    h = math.floor(hours)
    m = round((hours - h) * 60)
    if m == 60:
        h += 1
        m = 0
    return h, m


def format_duration(hours: float) -> str:
    """
    Format a duration compactly.

    Args:
        hours: Duration in hours (e.g., 2.5)

    Returns:
        Formatted string (e.g., '2h 30min', '3h', '45min')
    """
    if not math.isfinite(hours):
        return UNKNOWN_DURATION

    h, m = _split_hours(hours)

    if h == 0:
        return f"{m}min"
    elif m == 0:
        return f"{h}h"
    else:
        return f"{h}h {m}min"


def format_duration_long(hours: float) -> str:
    """Format a duration for the summary ('45 minutes', '1 hour', '2h 30min')."""
    if not math.isfinite(hours):
        return UNKNOWN_DURATION

    h, m = _split_hours(hours)

    if h == 0:
        return f"{m} minutes"
    elif m == 0:
        return f"{h} hour{'s' if h != 1 else ''}"
    else:
        return f"{h}h {m}min"


def format_time_range(optimistic: float, conservative: float) -> str:
    """Format an estimate band (e.g., '2h 8min - 3h 8min')."""
    return f"{format_duration_long(optimistic)} - {format_duration_long(conservative)}"


def format_daylight_margin(margin_hours: float) -> str:
    """
    Format remaining daylight.

    Returns:
        '+2h 30min' when there is spare daylight, '1h short' otherwise
    """
    if margin_hours > 0:
        return f"+{format_duration_long(margin_hours)}"
    return f"{format_duration_long(abs(margin_hours))} short"


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


def format_elevation(meters: float) -> str:
    """
    Format elevation with sign.

    Args:
        meters: Elevation in meters

    Returns:
        Formatted string (e.g., '+850 m')
    """
    if meters >= 0:
        return f"+{int(meters)} m"
    return f"{int(meters)} m"
