"""
Sun Times Service

Daylight at a route's start point, for location-aware safety planning.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from astral import LocationInfo
from astral.sun import sun

logger = logging.getLogger(__name__)


@dataclass
class SunTimes:
    """Sunrise and sunset times."""
    sunrise: str  # HH:MM, approximate local time
    sunset: str   # HH:MM, approximate local time
    daylight_hours: float


def get_sun_times(
    lat: float,
    lon: float,
    date_: Optional[date] = None
) -> SunTimes:
    """
    Calculate sunrise, sunset and daylight length for a location.

    Args:
        lat: Latitude
        lon: Longitude
        date_: Date for calculation (defaults to today)

    Returns:
        SunTimes with sunrise/sunset in HH:MM format

    Raises:
        ValueError: The sun does not rise or set on that date
            (polar day or night)
    """
    if date_ is None:
        date_ = date.today()

    location = LocationInfo(
        name="Route",
        region="",
        timezone="UTC",
        latitude=lat,
        longitude=lon
    )

    try:
        s = sun(location.observer, date=date_)
    except ValueError as e:
        logger.warning(f"No sunrise/sunset at ({lat:.3f}, {lon:.3f}) on {date_}: {e}")
        raise

    sunrise_utc = s["sunrise"]
    sunset_utc = s["sunset"]

    # Local clock time estimated from longitude
    utc_offset_hours = _estimate_utc_offset(lon)
    sunrise_local = (sunrise_utc.hour + utc_offset_hours) % 24
    sunset_local = (sunset_utc.hour + utc_offset_hours) % 24

    daylight = (sunset_utc - sunrise_utc).total_seconds() / 3600
    if daylight < 0:
        daylight += 24

    return SunTimes(
        sunrise=f"{int(sunrise_local):02d}:{sunrise_utc.minute:02d}",
        sunset=f"{int(sunset_local):02d}:{sunset_utc.minute:02d}",
        daylight_hours=round(daylight, 1)
    )


def _estimate_utc_offset(longitude: float) -> int:
    """
    Estimate UTC offset from longitude.

    Simple approximation: 15 degrees per hour.
    """
    return round(longitude / 15)
