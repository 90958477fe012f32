"""
Estimation schemas.

Pydantic models for API request/response.
"""
from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from guidepace.shared.calculator_types import (
    PaceFactors,
    RouteData,
    RouteEstimate,
    RouteSegment,
    SafetyRecommendations,
    TimeEstimate,
)
from guidepace.shared.constants import ActivityType, AlertLevel, Season, TerrainType
from guidepace.shared.formatters import (
    format_daylight_margin,
    format_duration,
    format_duration_long,
    format_time_range,
)


# === Request Models ===

class RouteDataSchema(BaseModel):
    """Route description."""
    model_config = ConfigDict(allow_inf_nan=False)

    distance_km: float = Field(..., gt=0, description="Total distance in km")
    elevation_gain_m: float = Field(..., ge=0)
    elevation_loss_m: float = Field(default=0, ge=0)
    activity_type: ActivityType = ActivityType.HIKING
    climbing_grade: Optional[str] = Field(default=None, max_length=16, examples=["5.7", "5.10a"])
    number_of_pitches: Optional[int] = Field(default=None, ge=0, le=100)
    route_description: Optional[str] = None
    season: Optional[Season] = None

    def to_route_data(self) -> RouteData:
        return RouteData(**self.model_dump())


class PaceFactorsSchema(BaseModel):
    """Pace factors; 1.0 is neutral, higher is slower."""
    model_config = ConfigDict(allow_inf_nan=False)

    fitness: float = Field(default=1.0, gt=0)
    weather: float = Field(default=1.0, gt=0)
    party_size: float = Field(default=1.0, gt=0)
    pack_weight: float = Field(default=1.0, gt=0)
    experience: float = Field(default=1.0, gt=0)

    def to_pace_factors(self) -> PaceFactors:
        return PaceFactors(**self.model_dump())


class EstimateRequest(BaseModel):
    """Request for a route estimate."""
    model_config = ConfigDict(allow_inf_nan=False)

    route: RouteDataSchema
    pace_factors: PaceFactorsSchema = Field(default_factory=PaceFactorsSchema)

    # Optional: daylight from the start point instead of the season table
    start_lat: Optional[float] = Field(default=None, ge=-90, le=90)
    start_lon: Optional[float] = Field(default=None, ge=-180, le=180)
    trip_date: Optional[date] = None


class SafetyRequest(BaseModel):
    """Request for safety recommendations for a planned total time."""
    model_config = ConfigDict(allow_inf_nan=False)

    total_hours: float = Field(..., ge=0)
    season: Optional[Season] = None
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lon: Optional[float] = Field(default=None, ge=-180, le=180)
    trip_date: Optional[date] = None

    @model_validator(mode="after")
    def check_coordinates(self):
        if (self.lat is None) != (self.lon is None):
            raise ValueError("lat and lon must be given together")
        return self


# === Response Models ===

class TimeEstimateSchema(BaseModel):
    """Three time bands from one formula."""
    optimistic: float
    realistic: float
    conservative: float
    method: str

    @classmethod
    def from_estimate(cls, estimate: TimeEstimate) -> "TimeEstimateSchema":
        return cls(
            optimistic=estimate.optimistic,
            realistic=estimate.realistic,
            conservative=estimate.conservative,
            method=estimate.method,
        )


class RouteSegmentSchema(BaseModel):
    """Single segment of an analyzed route."""
    id: str
    name: str
    terrain_type: TerrainType
    distance_km: float
    elevation_gain_m: float
    elevation_loss_m: float
    difficulty: Optional[str] = None
    pitches: Optional[int] = None
    estimated_time: float = Field(..., description="Realistic time in hours")
    estimated_time_formatted: str
    calculation_method: str
    details: str
    estimate: TimeEstimateSchema

    @classmethod
    def from_segment(cls, segment: RouteSegment) -> "RouteSegmentSchema":
        return cls(
            id=segment.id,
            name=segment.name,
            terrain_type=segment.terrain_type,
            distance_km=segment.distance_km,
            elevation_gain_m=segment.elevation_gain_m,
            elevation_loss_m=segment.elevation_loss_m,
            difficulty=segment.difficulty,
            pitches=segment.pitches,
            estimated_time=segment.estimated_time,
            estimated_time_formatted=format_duration(segment.estimated_time),
            calculation_method=segment.calculation_method,
            details=segment.details,
            estimate=TimeEstimateSchema.from_estimate(segment.estimate),
        )


class SafetyRecommendationsSchema(BaseModel):
    """Start/turnaround times and daylight warnings."""
    recommended_start_time: str
    latest_start_time: str
    turnaround_time: str
    daylight_hours: float
    daylight_margin: float
    daylight_margin_formatted: str
    warnings: List[str] = []
    alert_level: AlertLevel
    sunrise: Optional[str] = None
    sunset: Optional[str] = None

    @classmethod
    def from_recommendations(cls, safety: SafetyRecommendations) -> "SafetyRecommendationsSchema":
        return cls(
            recommended_start_time=safety.recommended_start_time,
            latest_start_time=safety.latest_start_time,
            turnaround_time=safety.turnaround_time,
            daylight_hours=safety.daylight_hours,
            daylight_margin=safety.daylight_margin,
            daylight_margin_formatted=format_daylight_margin(safety.daylight_margin),
            warnings=list(safety.warnings),
            alert_level=safety.alert_level,
            sunrise=safety.sunrise,
            sunset=safety.sunset,
        )


class RouteEstimateResponse(BaseModel):
    """Complete route estimate."""
    segments: List[RouteSegmentSchema]
    total_hours: float
    total_formatted: str
    optimistic_hours: float
    conservative_hours: float
    range_formatted: str
    pace_factors: PaceFactorsSchema
    pace_multiplier: float
    safety: SafetyRecommendationsSchema

    @classmethod
    def from_estimate(cls, estimate: RouteEstimate) -> "RouteEstimateResponse":
        factors = estimate.pace_factors
        return cls(
            segments=[RouteSegmentSchema.from_segment(s) for s in estimate.segments],
            total_hours=estimate.total_hours,
            total_formatted=format_duration_long(estimate.total_hours),
            optimistic_hours=estimate.optimistic_hours,
            conservative_hours=estimate.conservative_hours,
            range_formatted=format_time_range(estimate.optimistic_hours, estimate.conservative_hours),
            pace_factors=PaceFactorsSchema(
                fitness=factors.fitness,
                weather=factors.weather,
                party_size=factors.party_size,
                pack_weight=factors.pack_weight,
                experience=factors.experience,
            ),
            pace_multiplier=factors.total_multiplier,
            safety=SafetyRecommendationsSchema.from_recommendations(estimate.safety),
        )


class FactorLabelSchema(BaseModel):
    label: str
    variant: str


class PaceFactorRange(BaseModel):
    min: float
    max: float


class PaceFactorDefaultsResponse(BaseModel):
    """Neutral factors and documented slider ranges."""
    defaults: PaceFactorsSchema
    ranges: Dict[str, PaceFactorRange]


class PaceFactorDescription(BaseModel):
    """Labels for a set of pace factors."""
    labels: Dict[str, FactorLabelSchema]
    total_multiplier: float
    summary: str


class MethodDescription(BaseModel):
    """One guide method and the terrain it covers."""
    name: str
    description: str
