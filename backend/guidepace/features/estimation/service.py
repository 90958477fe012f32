"""
Estimation service.

Main entry point for route time estimates: analysis, totals and safety.
"""

import logging
from datetime import date
from typing import Optional

from guidepace.shared.calculator_types import PaceFactors, RouteData, RouteEstimate
from guidepace.shared.constants import Season

from .analyzer import RouteAnalyzer
from .safety import get_safety_recommendations, get_safety_recommendations_for_location

logger = logging.getLogger(__name__)


class EstimationService:
    """
    Service for complete route estimates.

    Usage:
        service = EstimationService()
        estimate = service.estimate(route, PaceFactors(weather=1.2))
        print(estimate.total_hours, estimate.safety.warnings)
    """

    def __init__(
        self,
        default_season: Season = Season.SUMMER,
        clamp_pace_factors: bool = False,
    ):
        self.default_season = default_season
        self.clamp_pace_factors = clamp_pace_factors

    @classmethod
    def from_settings(cls) -> "EstimationService":
        """Build a service configured from application settings."""
        from guidepace.config import settings

        return cls(
            default_season=settings.default_season,
            clamp_pace_factors=settings.clamp_pace_factors,
        )

    def prepare_factors(self, pace_factors: Optional[PaceFactors]) -> PaceFactors:
        """Default and optionally clamp the factors used for an estimate."""
        factors = pace_factors or PaceFactors.default()
        if self.clamp_pace_factors:
            clamped = factors.clamped()
            if clamped != factors:
                logger.info(f"Pace factors clamped to documented ranges: {clamped}")
            return clamped
        return factors

    def estimate(
        self,
        route: RouteData,
        pace_factors: Optional[PaceFactors] = None,
        start_lat: Optional[float] = None,
        start_lon: Optional[float] = None,
        trip_date: Optional[date] = None,
    ) -> RouteEstimate:
        """
        Analyze a route and derive totals and safety recommendations.

        Daylight comes from the route's season (or the default season),
        or from sunrise/sunset at the start point when coordinates are
        given.

        Args:
            route: Route description
            pace_factors: Human factors; neutral when omitted
            start_lat, start_lon: Optional start coordinates
            trip_date: Date used with coordinates (defaults to today)

        Returns:
            RouteEstimate with segments, totals and safety
        """
        factors = self.prepare_factors(pace_factors)
        segments = RouteAnalyzer.analyze(route, factors)
        total_hours = sum(s.estimated_time for s in segments)
        season = route.season or self.default_season

        if start_lat is not None and start_lon is not None:
            safety = get_safety_recommendations_for_location(
                total_hours, start_lat, start_lon, trip_date, fallback_season=season
            )
        else:
            safety = get_safety_recommendations(total_hours, season)

        logger.debug(
            f"Estimated {len(segments)} segments, total {total_hours:.2f}h, "
            f"{len(safety.warnings)} warnings"
        )

        return RouteEstimate(
            route=route,
            pace_factors=factors,
            segments=segments,
            safety=safety,
        )
