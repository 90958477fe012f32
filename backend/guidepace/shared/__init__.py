"""
Shared utilities and base types (NOT business logic).

Usage:
    from guidepace.shared import PaceFactors, RouteData
    from guidepace.shared.formatters import format_clock_time
"""
from .constants import (
    ActivityType,
    Season,
    TerrainType,
    MunterTerrain,
    ScramblingDifficulty,
    ClimbingGradeBucket,
    AlertLevel,
    DAYLIGHT_HOURS,
)
from .calculator_types import (
    PaceFactors,
    TimeEstimate,
    RouteData,
    RouteSegment,
    SafetyRecommendations,
    RouteEstimate,
    PACE_FACTOR_RANGES,
)
from .formatters import (
    format_clock_time,
    format_duration,
    format_duration_long,
    format_time_range,
    format_daylight_margin,
    format_distance_km,
    format_elevation,
)
from .formulas import (
    munter_base_time,
    chauvin_pitch_equivalents,
    chauvin_base_time,
    technical_base_time,
)
from .geo import haversine, calculate_total_distance, EARTH_RADIUS_KM
from .elevation import calculate_elevation_changes

__all__ = [
    # constants
    "ActivityType",
    "Season",
    "TerrainType",
    "MunterTerrain",
    "ScramblingDifficulty",
    "ClimbingGradeBucket",
    "AlertLevel",
    "DAYLIGHT_HOURS",
    # types
    "PaceFactors",
    "TimeEstimate",
    "RouteData",
    "RouteSegment",
    "SafetyRecommendations",
    "RouteEstimate",
    "PACE_FACTOR_RANGES",
    # formatters
    "format_clock_time",
    "format_duration",
    "format_duration_long",
    "format_time_range",
    "format_daylight_margin",
    "format_distance_km",
    "format_elevation",
    # formulas
    "munter_base_time",
    "chauvin_pitch_equivalents",
    "chauvin_base_time",
    "technical_base_time",
    # geo / elevation
    "haversine",
    "calculate_total_distance",
    "EARTH_RADIUS_KM",
    "calculate_elevation_changes",
]
