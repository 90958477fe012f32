"""
Tests for shared geographic and elevation functions.

Tests the haversine distance, track length, loop detection and
elevation gain/loss used by the GPX route summary.
"""

import pytest

from guidepace.shared.geo import (
    haversine,
    calculate_total_distance,
    is_loop,
)
from guidepace.shared.elevation import calculate_elevation_changes


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        assert haversine(46.5, 7.9, 46.5, 7.9) == 0.0

    def test_north_south_distance(self):
        """1 degree latitude is about 111 km everywhere."""
        dist = haversine(46.0, 7.9, 47.0, 7.9)
        assert 110 < dist < 112

    def test_small_distance(self):
        """0.001 degree latitude is about 111 meters."""
        dist = haversine(46.0, 7.9, 46.001, 7.9)
        assert 0.1 < dist < 0.12

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        dist_ab = haversine(46.0, 7.0, 47.0, 8.0)
        dist_ba = haversine(47.0, 8.0, 46.0, 7.0)
        assert dist_ab == pytest.approx(dist_ba)


# =============================================================================
# Test Track Helpers
# =============================================================================

class TestTrack:
    """Tests for track length and loop detection."""

    def test_total_distance_sums_legs(self):
        points = [(46.0, 7.9, 0), (46.001, 7.9, 0), (46.002, 7.9, 0)]
        expected = haversine(46.0, 7.9, 46.002, 7.9)
        assert calculate_total_distance(points) == pytest.approx(expected, rel=1e-6)

    def test_total_distance_single_point(self):
        assert calculate_total_distance([(46.0, 7.9, 0)]) == 0

    def test_out_and_back_is_loop(self):
        points = [(46.0, 7.9, 0), (46.01, 7.9, 0), (46.0001, 7.9, 0)]
        assert is_loop(points) is True

    def test_point_to_point_is_not_loop(self):
        points = [(46.0, 7.9, 0), (46.01, 7.9, 0)]
        assert is_loop(points) is False

    def test_single_point_is_not_loop(self):
        assert is_loop([(46.0, 7.9, 0)]) is False


# =============================================================================
# Test Elevation Changes
# =============================================================================

class TestElevationChanges:
    """Tests for calculate_elevation_changes function."""

    def test_up_then_down(self):
        gain, loss = calculate_elevation_changes([1000, 1100, 1300, 1200, 1000])
        assert gain == pytest.approx(300)
        assert loss == pytest.approx(300)

    def test_flat(self):
        assert calculate_elevation_changes([500, 500, 500]) == (0, 0)

    def test_empty(self):
        assert calculate_elevation_changes([]) == (0, 0)
