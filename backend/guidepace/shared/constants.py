"""
Unified constants for route analysis and time estimation.

This module provides a single source of truth for the enums and the
fixed guide-methodology tables used across the application.
"""

from enum import Enum


class ActivityType(str, Enum):
    """Activity type of a planned route."""
    HIKING = "hiking"
    CLIMBING = "climbing"
    SKIING = "skiing"
    OTHER = "other"


class Season(str, Enum):
    """Season the route is planned for."""
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class TerrainType(str, Enum):
    """Which formula family a segment was calculated with."""
    MUNTER = "munter"
    CHAUVIN = "chauvin"
    TECHNICAL = "technical"


class MunterTerrain(str, Enum):
    """Class 1-2 terrain for the Munter method."""
    UPHILL = "uphill"
    FLAT = "flat"
    DOWNHILL = "downhill"
    BUSHWHACKING = "bushwhacking"
    SKIING = "skiing"


class ScramblingDifficulty(str, Enum):
    """Class 3-4 and snow terrain for the Chauvin system."""
    CLASS3_EASY = "class3_easy"
    CLASS3_HARD = "class3_hard"
    CLASS4_EASY = "class4_easy"
    CLASS4_HARD = "class4_hard"
    SNOW_MODERATE = "snow_moderate"
    SNOW_STEEP = "snow_steep"


class ClimbingGradeBucket(str, Enum):
    """Yosemite Decimal System class 5 grade buckets."""
    GRADE_5_0_TO_5_4 = "5.0-5.4"
    GRADE_5_5_TO_5_7 = "5.5-5.7"
    GRADE_5_8_TO_5_9 = "5.8-5.9"
    GRADE_5_10_TO_5_11 = "5.10-5.11"
    GRADE_5_12_PLUS = "5.12+"


class AlertLevel(str, Enum):
    """Severity of the safety summary."""
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


# =============================================================================
# Munter method: km-equivalent per hour
# =============================================================================

MUNTER_RATES: dict[MunterTerrain, float] = {
    MunterTerrain.UPHILL: 4,
    MunterTerrain.FLAT: 6,
    MunterTerrain.DOWNHILL: 6,
    MunterTerrain.BUSHWHACKING: 2,
    MunterTerrain.SKIING: 10,
}

# 100 m of elevation counts as 1 km of distance
MUNTER_METERS_PER_KM_EQUIVALENT = 100.0

# =============================================================================
# Chauvin system: minutes per 60 m pitch equivalent
# =============================================================================

CHAUVIN_RATES: dict[ScramblingDifficulty, float] = {
    ScramblingDifficulty.CLASS3_EASY: 10,
    ScramblingDifficulty.CLASS3_HARD: 15,
    ScramblingDifficulty.CLASS4_EASY: 20,
    ScramblingDifficulty.CLASS4_HARD: 25,
    ScramblingDifficulty.SNOW_MODERATE: 18,
    ScramblingDifficulty.SNOW_STEEP: 30,
}

CHAUVIN_PITCH_LENGTH_M = 60.0

# =============================================================================
# Technical system: minutes per roped pitch
# =============================================================================

TECHNICAL_RATES: dict[ClimbingGradeBucket, float] = {
    ClimbingGradeBucket.GRADE_5_0_TO_5_4: 30,
    ClimbingGradeBucket.GRADE_5_5_TO_5_7: 45,
    ClimbingGradeBucket.GRADE_5_8_TO_5_9: 60,
    ClimbingGradeBucket.GRADE_5_10_TO_5_11: 75,
    ClimbingGradeBucket.GRADE_5_12_PLUS: 90,
}

# =============================================================================
# Optimistic / conservative bands per method
# =============================================================================

MUNTER_BAND = (0.85, 1.25)
CHAUVIN_BAND = (0.8, 1.3)
TECHNICAL_BAND = (0.75, 1.4)

# Range quoted for a whole route, independent of the segment methods
ROUTE_RANGE_BAND = MUNTER_BAND

MUNTER_METHOD_NAME = "Munter Method"
CHAUVIN_METHOD_NAME = "Chauvin System"
TECHNICAL_METHOD_NAME = "Technical System"

# =============================================================================
# Daylight and safety margins
# =============================================================================

DAYLIGHT_HOURS: dict[Season, float] = {
    Season.SPRING: 12,
    Season.SUMMER: 14,
    Season.FALL: 10,
    Season.WINTER: 8,
}

SAFETY_BUFFER_HOURS = 2.0
RECOMMENDED_START_LEAD_HOURS = 1.0
EARLIEST_START_HOUR = 5.0
TURNAROUND_FRACTION = 0.6
TIGHT_TURNAROUND_FRACTION = 0.5

HEADLAMP_WARNING = "⚠️ Route may require headlamp/early start"
EXCEEDS_DAYLIGHT_WARNING = "🚨 Route exceeds daylight hours - consider splitting"
TIGHT_TURNAROUND_WARNING = "⏰ Tight turnaround schedule - monitor progress"
DANGER_MARKER = "🚨"
