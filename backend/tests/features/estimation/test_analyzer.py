"""
Tests for RouteAnalyzer.

Terrain classification, grade parsing and the per-regime segment splits.
"""

import math

import pytest

from guidepace.features.estimation.analyzer import (
    RouteAnalyzer,
    analyze_route,
    demo_route,
    estimate_scrambling_difficulty,
    parse_climbing_grade,
)
from guidepace.shared.calculator_types import PaceFactors, RouteData
from guidepace.shared.constants import (
    ActivityType,
    ClimbingGradeBucket,
    ScramblingDifficulty,
    Season,
    TerrainType,
)


def _ids(segments):
    return [s.id for s in segments]


# =============================================================================
# Grade Parsing
# =============================================================================

class TestParseClimbingGrade:
    """Tests for Yosemite Decimal System bucketing."""

    @pytest.mark.parametrize("grade,bucket", [
        ("5.0", ClimbingGradeBucket.GRADE_5_0_TO_5_4),
        ("5.4", ClimbingGradeBucket.GRADE_5_0_TO_5_4),
        ("5.5", ClimbingGradeBucket.GRADE_5_5_TO_5_7),
        ("5.7", ClimbingGradeBucket.GRADE_5_5_TO_5_7),
        ("5.8", ClimbingGradeBucket.GRADE_5_8_TO_5_9),
        ("5.9", ClimbingGradeBucket.GRADE_5_8_TO_5_9),
        ("5.10a", ClimbingGradeBucket.GRADE_5_10_TO_5_11),
        ("5.11d", ClimbingGradeBucket.GRADE_5_10_TO_5_11),
        ("5.12a", ClimbingGradeBucket.GRADE_5_12_PLUS),
        ("5.14", ClimbingGradeBucket.GRADE_5_12_PLUS),
    ])
    def test_buckets(self, grade, bucket):
        info = parse_climbing_grade(grade)
        assert info.is_class5 is True
        assert info.difficulty == bucket

    def test_exponent_is_part_of_the_number(self):
        """'5.1e1' reads as 10, like a JavaScript parseFloat."""
        assert parse_climbing_grade("5.1e1").difficulty == ClimbingGradeBucket.GRADE_5_10_TO_5_11

    def test_unparseable_number_is_hardest(self):
        """'5.x' has no numeric part and lands in the top bucket."""
        assert parse_climbing_grade("5.x").difficulty == ClimbingGradeBucket.GRADE_5_12_PLUS

    @pytest.mark.parametrize("grade", ["WI4", "4", "III", "M5", ""])
    def test_not_class5(self, grade):
        assert parse_climbing_grade(grade).is_class5 is False


# =============================================================================
# Classification
# =============================================================================

class TestClassification:
    """Which regime a route falls into."""

    def test_class5_with_pitches_is_technical(self):
        route = RouteData(
            distance_km=1, elevation_gain_m=800,
            activity_type=ActivityType.CLIMBING, climbing_grade="5.9", number_of_pitches=4,
        )
        segments = analyze_route(route)

        assert _ids(segments) == ["approach", "technical", "descent"]
        technical = segments[1]
        assert technical.terrain_type == TerrainType.TECHNICAL
        assert technical.estimated_time == pytest.approx(4.0)

    def test_technical_needs_climbing_activity(self):
        """Same grade and pitches on a hiking route is not technical."""
        route = RouteData(
            distance_km=10, elevation_gain_m=600,
            activity_type=ActivityType.HIKING, climbing_grade="5.7", number_of_pitches=6,
        )
        assert not RouteAnalyzer.is_technical_climbing(route)

    def test_technical_needs_pitches(self):
        route = RouteData(
            distance_km=2, elevation_gain_m=800,
            activity_type=ActivityType.CLIMBING, climbing_grade="5.7",
        )
        assert not RouteAnalyzer.is_technical_climbing(route)
        assert _ids(analyze_route(route)) == ["approach", "scrambling", "descent"]

    def test_zero_pitches_means_none(self):
        route = RouteData(
            distance_km=2, elevation_gain_m=800,
            activity_type=ActivityType.CLIMBING, climbing_grade="5.7", number_of_pitches=0,
        )
        assert not RouteAnalyzer.is_technical_climbing(route)

    def test_non_class5_grade_not_technical(self):
        route = RouteData(
            distance_km=2, elevation_gain_m=800,
            activity_type=ActivityType.CLIMBING, climbing_grade="WI4", number_of_pitches=5,
        )
        assert not RouteAnalyzer.is_technical_climbing(route)

    def test_grade_exactly_25_percent_is_hiking(self):
        """Scrambling needs the grade strictly above 25%."""
        route = RouteData(distance_km=2, elevation_gain_m=500)
        assert not RouteAnalyzer.has_scrambling(route)
        assert _ids(analyze_route(route)) == ["uphill", "downhill"]

    def test_gain_exactly_300m_is_hiking(self):
        """Steep but only 300 m of gain."""
        route = RouteData(distance_km=1, elevation_gain_m=300)
        assert not RouteAnalyzer.has_scrambling(route)

    def test_steep_hiking_route_scrambles(self):
        """Activity type does not matter for scrambling detection."""
        route = RouteData(distance_km=2, elevation_gain_m=800, activity_type=ActivityType.HIKING)
        assert RouteAnalyzer.has_scrambling(route)


# =============================================================================
# Technical Regime
# =============================================================================

class TestTechnicalRegime:
    """Demo route: 5 km, 1200/1200 m, 6 pitches of 5.7."""

    @pytest.fixture
    def segments(self):
        return analyze_route(demo_route(), PaceFactors())

    def test_approach(self, segments):
        approach = segments[0]
        assert approach.name == "Approach Hike"
        assert approach.distance_km == pytest.approx(1.5)
        assert approach.elevation_gain_m == pytest.approx(360)
        assert approach.estimated_time == pytest.approx(1.275)
        assert approach.details == "1.5 km, +360m"
        assert approach.calculation_method == "Munter Method"

    def test_technical(self, segments):
        technical = segments[1]
        assert technical.name == "Technical Climbing"
        assert technical.estimated_time == pytest.approx(4.5)
        assert technical.details == "6 pitches, 5.7"
        assert technical.difficulty == "5.7"
        assert technical.pitches == 6
        assert technical.distance_km == pytest.approx(2.0)
        assert technical.elevation_gain_m == pytest.approx(480)

    def test_descent_uses_recorded_loss(self, segments):
        descent = segments[2]
        assert descent.name == "Descent"
        assert descent.distance_km == pytest.approx(1.5)
        assert descent.elevation_loss_m == pytest.approx(1200)
        assert descent.estimated_time == pytest.approx(0.25)
        assert descent.details == "1.5 km, -1200m"

    def test_total(self, segments):
        assert sum(s.estimated_time for s in segments) == pytest.approx(6.025)

    def test_descent_without_loss_assumes_70_percent(self):
        route = RouteData(
            distance_km=5, elevation_gain_m=1000,
            activity_type=ActivityType.CLIMBING, climbing_grade="5.6", number_of_pitches=3,
        )
        descent = analyze_route(route)[-1]
        assert descent.elevation_loss_m == pytest.approx(700)


# =============================================================================
# Scrambling Regime
# =============================================================================

class TestScramblingRegime:
    """2 km, +800 m climbing route without pitches."""

    @pytest.fixture
    def route(self):
        return RouteData(distance_km=2, elevation_gain_m=800, activity_type=ActivityType.CLIMBING)

    def test_segments(self, route):
        approach, scrambling, descent = analyze_route(route)

        assert approach.distance_km == pytest.approx(0.8)
        assert approach.elevation_gain_m == pytest.approx(240)
        assert approach.estimated_time == pytest.approx(0.8)

        assert scrambling.name == "Scrambling/Technical Terrain"
        assert scrambling.terrain_type == TerrainType.CHAUVIN
        assert scrambling.difficulty == "class4_easy"
        assert scrambling.distance_km == pytest.approx(0.8)
        assert scrambling.elevation_gain_m == pytest.approx(480)
        assert scrambling.estimated_time == pytest.approx((800 + 480) / 60 * 20 / 60)
        assert scrambling.details == "0.8 km, +480m, class4 easy"

        assert descent.distance_km == pytest.approx(0.4)
        assert descent.elevation_loss_m == pytest.approx(720)
        assert descent.estimated_time == pytest.approx(0.4 / 6)

    def test_winter_is_snow(self, route):
        winter = RouteData(
            distance_km=2, elevation_gain_m=800,
            activity_type=ActivityType.CLIMBING, season=Season.WINTER,
        )
        assert estimate_scrambling_difficulty(winter) == ScramblingDifficulty.SNOW_MODERATE

    def test_steep_winter_is_steep_snow(self):
        route = RouteData(distance_km=2, elevation_gain_m=1000, season=Season.WINTER)
        assert estimate_scrambling_difficulty(route) == ScramblingDifficulty.SNOW_STEEP

    @pytest.mark.parametrize("gain,difficulty", [
        (300, ScramblingDifficulty.CLASS3_EASY),
        (310, ScramblingDifficulty.CLASS3_HARD),
        (360, ScramblingDifficulty.CLASS4_EASY),
        (510, ScramblingDifficulty.CLASS4_HARD),
    ])
    def test_difficulty_from_grade(self, gain, difficulty):
        route = RouteData(distance_km=1, elevation_gain_m=gain)
        assert estimate_scrambling_difficulty(route) == difficulty


# =============================================================================
# Hiking Regime
# =============================================================================

class TestHikingRegime:
    """10 km, +600 m."""

    def test_hiking_segments(self):
        uphill, downhill = analyze_route(RouteData(distance_km=10, elevation_gain_m=600))

        assert uphill.name == "Uphill Hiking"
        assert uphill.distance_km == pytest.approx(6)
        assert uphill.elevation_gain_m == pytest.approx(600)
        assert uphill.estimated_time == pytest.approx(3.0)
        assert uphill.details == "6.0 km, +600m"

        assert downhill.name == "Descent/Return"
        assert downhill.distance_km == pytest.approx(4)
        assert downhill.elevation_loss_m == pytest.approx(480)
        assert downhill.estimated_time == pytest.approx(4 / 6)
        assert downhill.details == "4.0 km, -480m"

    def test_skiing_uses_skiing_rate(self):
        route = RouteData(distance_km=10, elevation_gain_m=600, activity_type=ActivityType.SKIING)
        uphill, downhill = analyze_route(route)

        assert uphill.name == "Ascent (Skiing)"
        assert uphill.estimated_time == pytest.approx(1.2)
        assert downhill.name == "Descent (Skiing)"
        assert downhill.estimated_time == pytest.approx(0.4)

    def test_flat_route_has_only_return_leg(self):
        segments = analyze_route(RouteData(distance_km=8, elevation_gain_m=0))

        assert _ids(segments) == ["downhill"]
        assert segments[0].elevation_loss_m == 0
        assert segments[0].estimated_time == pytest.approx(3.2 / 6)

    def test_segment_times_positive(self):
        for segment in analyze_route(RouteData(distance_km=10, elevation_gain_m=600)):
            assert segment.estimated_time > 0
            assert math.isfinite(segment.estimated_time)


class TestPaceFactorsApplied:
    """Pace factors scale every segment the same way."""

    def test_total_scales_by_multiplier(self):
        route = demo_route()
        base = sum(s.estimated_time for s in analyze_route(route))
        factors = PaceFactors(weather=1.2, experience=1.1)
        slowed = sum(s.estimated_time for s in analyze_route(route, factors))

        assert slowed == pytest.approx(base * 1.2 * 1.1)

    @pytest.mark.parametrize("field", ["fitness", "weather", "party_size", "pack_weight", "experience"])
    def test_raising_a_factor_never_speeds_up(self, field):
        route = RouteData(distance_km=2, elevation_gain_m=800)
        base = sum(s.estimated_time for s in analyze_route(route))
        slowed = sum(s.estimated_time for s in analyze_route(route, PaceFactors(**{field: 1.1})))
        assert slowed > base

    def test_analysis_is_repeatable(self):
        route = demo_route()
        assert analyze_route(route) == analyze_route(route)

    def test_segment_times_match_estimates(self):
        for segment in analyze_route(demo_route()):
            assert segment.estimated_time == segment.estimate.realistic
            assert segment.estimate.optimistic <= segment.estimated_time <= segment.estimate.conservative
