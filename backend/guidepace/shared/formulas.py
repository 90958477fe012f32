"""
Mathematical formulas for guide time estimation.

These formulas are used by the calculators in features/estimation.
Centralizing them here keeps the base-time math testable on its own.
"""

import math
import re

from .constants import (
    MUNTER_METERS_PER_KM_EQUIVALENT,
    CHAUVIN_PITCH_LENGTH_M,
)

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def munter_base_time(distance_km: float, elevation_m: float, rate: float) -> float:
    """
    Base time using the Munter method.

    Formula: time = (distance + elevation / 100) / rate

    Args:
        distance_km: Horizontal distance in kilometers
        elevation_m: Elevation gain in meters
        rate: Terrain rate in km-equivalent per hour

    Returns:
        Time in hours
    """
    return (distance_km + elevation_m / MUNTER_METERS_PER_KM_EQUIVALENT) / rate


def chauvin_pitch_equivalents(distance_km: float, elevation_m: float) -> float:
    """Number of 60 m pitch equivalents: (distance * 1000 + elevation) / 60."""
    return (distance_km * 1000 + elevation_m) / CHAUVIN_PITCH_LENGTH_M


def chauvin_base_time(distance_km: float, elevation_m: float, rate_min: float) -> float:
    """
    Base time using the Chauvin system.

    Args:
        distance_km: Distance in kilometers
        elevation_m: Elevation gain in meters
        rate_min: Minutes per 60 m pitch equivalent

    Returns:
        Time in hours
    """
    return chauvin_pitch_equivalents(distance_km, elevation_m) * rate_min / 60


def technical_base_time(pitches: float, rate_min: float) -> float:
    """Base time for roped climbing: pitches * minutes per pitch / 60."""
    return pitches * rate_min / 60


def parse_leading_float(text: str) -> float:
    """
    Parse the numeric prefix of a string.

    '10a' -> 10.0, '7' -> 7.0, '9+' -> 9.0. Returns NaN when the string
    does not start with a number.
    """
    match = _LEADING_NUMBER.match(text)
    if not match:
        return math.nan
    return float(match.group(0))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)
