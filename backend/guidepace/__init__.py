"""
GuidePace - mountain guide time estimation for upto trip plans.

Usage:
    from guidepace import analyze, recommend, RouteData, PaceFactors

    segments = analyze(RouteData(distance_km=5, elevation_gain_m=500), PaceFactors())
    safety = recommend(sum(s.estimated_time for s in segments), "summer")
"""
from guidepace.shared.calculator_types import (
    PaceFactors,
    RouteData,
    RouteSegment,
    TimeEstimate,
    SafetyRecommendations,
    RouteEstimate,
)
from guidepace.shared.constants import ActivityType, Season
from guidepace.features.estimation import (
    EstimationService,
    analyze_route as analyze,
    get_safety_recommendations as recommend,
)

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "recommend",
    "EstimationService",
    "PaceFactors",
    "RouteData",
    "RouteSegment",
    "TimeEstimate",
    "SafetyRecommendations",
    "RouteEstimate",
    "ActivityType",
    "Season",
]
