"""
Base types for the estimation engine.

This module contains only dataclasses and enums with NO imports from the
feature packages to avoid circular dependencies.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional
import math

from .constants import (
    ActivityType,
    AlertLevel,
    Season,
    TerrainType,
    DANGER_MARKER,
    ROUTE_RANGE_BAND,
)


# Documented UI slider ranges per factor (min, max).
# Not enforced by the calculators; see PaceFactors.clamped().
PACE_FACTOR_RANGES: dict[str, tuple[float, float]] = {
    "fitness": (0.8, 1.2),       # below average .. above average
    "weather": (0.9, 1.3),       # perfect .. poor conditions
    "party_size": (1.0, 1.4),    # solo .. large group
    "pack_weight": (0.95, 1.15), # light .. heavy
    "experience": (0.9, 1.1),    # expert .. beginner
}


@dataclass(frozen=True)
class PaceFactors:
    """
    Human factors applied to every formula.

    All five factors are independent multipliers on the base time.
    1.0 is the neutral baseline; values above 1.0 slow the party down.
    """
    fitness: float = 1.0
    weather: float = 1.0
    party_size: float = 1.0
    pack_weight: float = 1.0
    experience: float = 1.0

    def __post_init__(self):
        for name in PACE_FACTOR_RANGES:
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Pace factor '{name}' must be a positive number, got {value}")

        total = self.total_multiplier
        if not math.isfinite(total) or total <= 0:
            raise ValueError(f"Combined pace multiplier must be a positive number, got {total}")

    @classmethod
    def default(cls) -> "PaceFactors":
        """Neutral baseline."""
        return cls()

    @property
    def total_multiplier(self) -> float:
        """Product of all factors."""
        return (
            self.fitness *
            self.weather *
            self.party_size *
            self.pack_weight *
            self.experience
        )

    def clamped(self) -> "PaceFactors":
        """Copy with every factor clamped to its documented range."""
        values = {}
        for name, (low, high) in PACE_FACTOR_RANGES.items():
            values[name] = min(max(getattr(self, name), low), high)
        return replace(self, **values)


@dataclass(frozen=True)
class TimeEstimate:
    """Result of one formula: three time bands in hours."""
    optimistic: float
    realistic: float
    conservative: float
    method: str


@dataclass(frozen=True)
class RouteData:
    """
    Description of a planned route, the input of one analysis.

    Raises:
        ValueError: distance is not positive, elevations or pitch count
            are negative.
    """
    distance_km: float
    elevation_gain_m: float
    elevation_loss_m: float = 0.0
    activity_type: ActivityType = ActivityType.HIKING
    climbing_grade: Optional[str] = None  # "5.7", "5.10a", ...
    number_of_pitches: Optional[int] = None
    route_description: Optional[str] = None
    season: Optional[Season] = None

    def __post_init__(self):
        # Accept plain strings from the CLI and API layers
        object.__setattr__(self, "activity_type", ActivityType(self.activity_type))
        if self.season is not None:
            object.__setattr__(self, "season", Season(self.season))

        if not math.isfinite(self.distance_km) or self.distance_km <= 0:
            raise ValueError(f"Route distance must be positive, got {self.distance_km} km")
        if not math.isfinite(self.elevation_gain_m) or self.elevation_gain_m < 0:
            raise ValueError(f"Elevation gain cannot be negative, got {self.elevation_gain_m} m")
        if not math.isfinite(self.elevation_loss_m) or self.elevation_loss_m < 0:
            raise ValueError(f"Elevation loss cannot be negative, got {self.elevation_loss_m} m")
        if self.number_of_pitches is not None and self.number_of_pitches < 0:
            raise ValueError(f"Number of pitches cannot be negative, got {self.number_of_pitches}")

    @property
    def average_grade(self) -> float:
        """Elevation gain per horizontal meter, as decimal (0.25 = 25%)."""
        return self.elevation_gain_m / (self.distance_km * 1000)


@dataclass(frozen=True)
class RouteSegment:
    """One section of an analyzed route."""
    id: str
    name: str
    terrain_type: TerrainType
    distance_km: float
    elevation_gain_m: float
    elevation_loss_m: float
    estimated_time: float  # realistic hours
    calculation_method: str
    details: str
    estimate: TimeEstimate
    difficulty: Optional[str] = None
    pitches: Optional[int] = None


@dataclass(frozen=True)
class SafetyRecommendations:
    """Start/turnaround times and daylight warnings for a planned total."""
    recommended_start_time: str  # H:MM
    latest_start_time: str       # H:MM
    turnaround_time: str         # H:MM elapsed
    daylight_margin: float       # hours, negative when short
    daylight_hours: float
    warnings: List[str] = field(default_factory=list)
    # HH:MM at the route start, only for location-based daylight
    sunrise: Optional[str] = None
    sunset: Optional[str] = None

    @property
    def alert_level(self) -> AlertLevel:
        """success without warnings, danger when any warning is critical."""
        if not self.warnings:
            return AlertLevel.SUCCESS
        if any(DANGER_MARKER in w for w in self.warnings):
            return AlertLevel.DANGER
        return AlertLevel.WARNING


@dataclass(frozen=True)
class RouteEstimate:
    """Complete estimate with all segments and totals."""
    route: RouteData
    pace_factors: PaceFactors
    segments: List[RouteSegment]
    safety: SafetyRecommendations

    @property
    def total_hours(self) -> float:
        """Sum of realistic segment times."""
        return sum(s.estimated_time for s in self.segments)

    @property
    def optimistic_hours(self) -> float:
        """Route range low end: 0.85x the total."""
        return self.total_hours * ROUTE_RANGE_BAND[0]

    @property
    def conservative_hours(self) -> float:
        """Route range high end: 1.25x the total."""
        return self.total_hours * ROUTE_RANGE_BAND[1]

    def get_segment(self, segment_id: str) -> Optional[RouteSegment]:
        """Get segment by id."""
        for s in self.segments:
            if s.id == segment_id:
                return s
        return None
