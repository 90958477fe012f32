"""
GuidePace estimation module.

Usage:
    from guidepace.features.estimation import EstimationService, RouteAnalyzer
    from guidepace.features.estimation.calculators import munter_method

Available components:
- RouteAnalyzer: terrain classification and segmentation
- EstimationService: segments + totals + safety recommendations
- get_safety_recommendations: daylight warnings for a planned total
- describe_factors / describe_adjustment: pace factor labels
"""
from .analyzer import (
    RouteAnalyzer,
    GradeInfo,
    analyze_route,
    demo_route,
    parse_climbing_grade,
    estimate_scrambling_difficulty,
)
from .safety import (
    get_safety_recommendations,
    get_safety_recommendations_for_location,
    recommendations_for_daylight,
)
from .pace_factors import FactorLabel, get_factor_label, describe_factors, describe_adjustment
from .service import EstimationService

__all__ = [
    # Analyzer
    "RouteAnalyzer",
    "GradeInfo",
    "analyze_route",
    "demo_route",
    "parse_climbing_grade",
    "estimate_scrambling_difficulty",
    # Safety
    "get_safety_recommendations",
    "get_safety_recommendations_for_location",
    "recommendations_for_daylight",
    # Pace factors
    "FactorLabel",
    "get_factor_label",
    "describe_factors",
    "describe_adjustment",
    # Service
    "EstimationService",
]
