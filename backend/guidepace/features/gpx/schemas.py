"""
GPX-related schemas.

Pydantic models for GPX route summaries.
"""

from pydantic import BaseModel
from typing import Optional

from guidepace.shared.calculator_types import RouteData
from guidepace.shared.constants import ActivityType, Season


class GPXRouteSummary(BaseModel):
    """Distance and elevation totals of a GPX track."""

    name: Optional[str] = None
    description: Optional[str] = None

    # Metrics
    distance_km: float
    elevation_gain_m: float
    elevation_loss_m: float
    max_elevation_m: float
    min_elevation_m: float

    # Start point (for location-aware daylight)
    start_lat: float
    start_lon: float

    points_count: int = 0
    is_loop: bool = False  # start and end within 500m

    def to_route_data(
        self,
        activity_type: ActivityType = ActivityType.HIKING,
        season: Optional[Season] = None,
        climbing_grade: Optional[str] = None,
        number_of_pitches: Optional[int] = None,
    ) -> RouteData:
        """
        Build estimation input from this summary.

        Raises:
            ValueError: The track has zero length
        """
        return RouteData(
            distance_km=self.distance_km,
            elevation_gain_m=self.elevation_gain_m,
            elevation_loss_m=self.elevation_loss_m,
            activity_type=activity_type,
            climbing_grade=climbing_grade,
            number_of_pitches=number_of_pitches,
            route_description=self.description or self.name,
            season=season,
        )
