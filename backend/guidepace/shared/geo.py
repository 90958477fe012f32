"""
Geographic utility functions.

Used by the GPX route summary.
"""
import math

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0

# Start and end closer than this make a loop
LOOP_THRESHOLD_KM = 0.5


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(d_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def calculate_total_distance(points: list[tuple[float, float, float]]) -> float:
    """
    Total length of a track.

    Args:
        points: List of (lat, lon, elevation) tuples

    Returns:
        Distance in kilometers
    """
    return sum(
        haversine(a[0], a[1], b[0], b[1])
        for a, b in zip(points, points[1:])
    )


def is_loop(points: list[tuple[float, float, float]]) -> bool:
    """True when the track ends within 500 m of its start."""
    if len(points) < 2:
        return False
    start, end = points[0], points[-1]
    return haversine(start[0], start[1], end[0], end[1]) < LOOP_THRESHOLD_KM
