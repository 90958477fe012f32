"""
GPX route summaries.

Usage:
    from guidepace.features.gpx import GPXParserService

    summary = GPXParserService.parse(content)
    route = summary.to_route_data(activity_type="hiking", season="fall")
"""

from .parser import GPXParserService
from .schemas import GPXRouteSummary

__all__ = [
    "GPXParserService",
    "GPXRouteSummary",
]
