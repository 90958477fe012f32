"""
GPX Parser Service

Parses GPX files into route summaries for estimation.
"""

import logging
from typing import List, Tuple

import gpxpy
import gpxpy.gpx

from guidepace.shared.elevation import calculate_elevation_changes
from guidepace.shared.geo import calculate_total_distance, is_loop

from .schemas import GPXRouteSummary

logger = logging.getLogger(__name__)

Point = Tuple[float, float, float]


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def extract_points(gpx: gpxpy.gpx.GPX) -> List[Point]:
        """
        Collect (lat, lon, elevation) from tracks, or from routes when the
        file has no tracks. Missing elevations count as 0.
        """
        points: List[Point] = []

        for track in gpx.tracks:
            for segment in track.segments:
                for point in segment.points:
                    points.append((point.latitude, point.longitude, point.elevation or 0))

        if not points:
            for route in gpx.routes:
                for point in route.points:
                    points.append((point.latitude, point.longitude, point.elevation or 0))

        return points

    @staticmethod
    def parse(content: bytes) -> GPXRouteSummary:
        """
        Parse GPX content and summarize the route.

        Args:
            content: GPX file content as bytes

        Returns:
            GPXRouteSummary with distance and elevation totals

        Raises:
            ValueError: If GPX is invalid or has no points
        """
        try:
            gpx = gpxpy.parse(content.decode('utf-8'))
        except (ValueError, gpxpy.gpx.GPXException) as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise ValueError(f"Invalid GPX file: {e}") from e

        points = GPXParserService.extract_points(gpx)
        if not points:
            raise ValueError("GPX file contains no track or route points")

        elevations = [p[2] for p in points]
        gain, loss = calculate_elevation_changes(elevations)

        name = gpx.name
        if not name and gpx.tracks:
            name = gpx.tracks[0].name

        summary = GPXRouteSummary(
            name=name,
            description=gpx.description,
            distance_km=round(calculate_total_distance(points), 2),
            elevation_gain_m=round(gain, 0),
            elevation_loss_m=round(loss, 0),
            max_elevation_m=round(max(elevations), 0),
            min_elevation_m=round(min(elevations), 0),
            start_lat=points[0][0],
            start_lon=points[0][1],
            points_count=len(points),
            is_loop=is_loop(points),
        )
        logger.info(
            f"Parsed GPX '{summary.name}': {summary.distance_km} km, "
            f"+{summary.elevation_gain_m:.0f}/-{summary.elevation_loss_m:.0f} m"
        )
        return summary
