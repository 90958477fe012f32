"""
Route Analyzer

Classifies a route's terrain regime and breaks it into segments with
time estimates.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from guidepace.shared.calculator_types import (
    PaceFactors,
    RouteData,
    RouteSegment,
    TimeEstimate,
)
from guidepace.shared.constants import (
    ActivityType,
    ClimbingGradeBucket,
    MunterTerrain,
    ScramblingDifficulty,
    Season,
    TerrainType,
)
from guidepace.shared.formulas import parse_leading_float, round_half_up

from .calculators import munter_method, chauvin_system, technical_system
from .splits import (
    HIKING_SPLIT,
    SCRAMBLING_SPLIT,
    TECHNICAL_SPLIT,
    SCRAMBLING_MIN_GRADE,
    SCRAMBLING_MIN_GAIN_M,
    SNOW_STEEP_MIN_GRADE,
    CLASS4_HARD_MIN_GRADE,
    CLASS4_EASY_MIN_GRADE,
    CLASS3_HARD_MIN_GRADE,
)

logger = logging.getLogger(__name__)

CLASS5_PREFIX = "5."


@dataclass(frozen=True)
class GradeInfo:
    """Parsed climbing grade."""
    difficulty: ClimbingGradeBucket
    is_class5: bool


def parse_climbing_grade(grade: str) -> GradeInfo:
    """
    Bucket a Yosemite Decimal System grade.

    Only grades starting with '5.' are class 5. The number after the
    prefix is read up to the first non-numeric character, so letter
    suffixes ('5.10a') are ignored.

    Args:
        grade: Grade string, e.g. '5.7', '5.10a'

    Returns:
        GradeInfo; non class 5 grades get the lowest bucket
    """
    if not grade.startswith(CLASS5_PREFIX):
        return GradeInfo(ClimbingGradeBucket.GRADE_5_0_TO_5_4, is_class5=False)

    numeric = parse_leading_float(grade[len(CLASS5_PREFIX):])

    # NaN fails every comparison and lands in the top bucket
    if numeric <= 4:
        bucket = ClimbingGradeBucket.GRADE_5_0_TO_5_4
    elif numeric <= 7:
        bucket = ClimbingGradeBucket.GRADE_5_5_TO_5_7
    elif numeric <= 9:
        bucket = ClimbingGradeBucket.GRADE_5_8_TO_5_9
    elif numeric <= 11:
        bucket = ClimbingGradeBucket.GRADE_5_10_TO_5_11
    else:
        bucket = ClimbingGradeBucket.GRADE_5_12_PLUS

    return GradeInfo(bucket, is_class5=True)


def estimate_scrambling_difficulty(route: RouteData) -> ScramblingDifficulty:
    """
    Pick a Chauvin terrain class from the route's average grade.

    Winter routes are treated as snow climbs.
    """
    grade = route.average_grade

    if route.season == Season.WINTER:
        if grade > SNOW_STEEP_MIN_GRADE:
            return ScramblingDifficulty.SNOW_STEEP
        return ScramblingDifficulty.SNOW_MODERATE

    if grade > CLASS4_HARD_MIN_GRADE:
        return ScramblingDifficulty.CLASS4_HARD
    if grade > CLASS4_EASY_MIN_GRADE:
        return ScramblingDifficulty.CLASS4_EASY
    if grade > CLASS3_HARD_MIN_GRADE:
        return ScramblingDifficulty.CLASS3_HARD
    return ScramblingDifficulty.CLASS3_EASY


def _ascent_details(distance_km: float, elevation_m: float) -> str:
    return f"{distance_km:.1f} km, +{round_half_up(elevation_m)}m"


def _descent_details(distance_km: float, elevation_m: float) -> str:
    return f"{distance_km:.1f} km, -{round_half_up(elevation_m)}m"


def _munter_segment(
    segment_id: str,
    name: str,
    distance_km: float,
    elevation_gain_m: float,
    elevation_loss_m: float,
    estimate: TimeEstimate,
    details: str,
) -> RouteSegment:
    return RouteSegment(
        id=segment_id,
        name=name,
        terrain_type=TerrainType.MUNTER,
        distance_km=distance_km,
        elevation_gain_m=elevation_gain_m,
        elevation_loss_m=elevation_loss_m,
        estimated_time=estimate.realistic,
        calculation_method=estimate.method,
        details=details,
        estimate=estimate,
    )


class RouteAnalyzer:
    """
    Terrain detection and route segmentation.

    Classification, first match wins:
    1. Technical climbing: climbing activity with a class 5 grade and pitches
    2. Scrambling: average grade > 25% and more than 300m of gain
    3. Hiking (or skiing) otherwise

    Usage:
        segments = RouteAnalyzer.analyze(route, PaceFactors())
    """

    @classmethod
    def analyze(cls, route: RouteData, pace_factors: PaceFactors) -> List[RouteSegment]:
        """
        Analyze a route and break it into segments with time estimates.

        Args:
            route: Route description
            pace_factors: Human factors applied to every segment

        Returns:
            Ordered list of 1-3 segments
        """
        if cls.is_technical_climbing(route):
            logger.debug(f"Route classified as technical climbing ({route.climbing_grade})")
            return cls._analyze_technical(route, pace_factors)

        if cls.has_scrambling(route):
            logger.debug(f"Route classified as scrambling (grade {route.average_grade:.2f})")
            return cls._analyze_scrambling(route, pace_factors)

        logger.debug(f"Route classified as {route.activity_type.value} terrain")
        return cls._analyze_hiking(route, pace_factors)

    @staticmethod
    def is_technical_climbing(route: RouteData) -> bool:
        """Roped climbing needs a class 5 grade and a pitch count."""
        return bool(
            route.activity_type == ActivityType.CLIMBING
            and route.climbing_grade
            and route.number_of_pitches
            and parse_climbing_grade(route.climbing_grade).is_class5
        )

    @staticmethod
    def has_scrambling(route: RouteData) -> bool:
        """Steep (>25%) with more than 300m of gain."""
        return (
            route.average_grade > SCRAMBLING_MIN_GRADE
            and route.elevation_gain_m > SCRAMBLING_MIN_GAIN_M
        )

    @staticmethod
    def _descent_elevation(route: RouteData, gain_fraction: float) -> float:
        # No recorded loss: assume most of the gain is lost again
        return route.elevation_loss_m or route.elevation_gain_m * gain_fraction

    @staticmethod
    def _approach(
        route: RouteData,
        distance_fraction: float,
        gain_fraction: float,
        pace_factors: PaceFactors,
    ) -> Optional[RouteSegment]:
        distance = route.distance_km * distance_fraction
        elevation = route.elevation_gain_m * gain_fraction

        if not (distance > 0 or elevation > 0):
            return None

        estimate = munter_method(distance, elevation, MunterTerrain.UPHILL, pace_factors)
        return _munter_segment(
            "approach", "Approach Hike",
            distance, elevation, 0,
            estimate, _ascent_details(distance, elevation),
        )

    @classmethod
    def _descent(
        cls,
        route: RouteData,
        distance_fraction: float,
        gain_fraction: float,
        pace_factors: PaceFactors,
    ) -> RouteSegment:
        distance = route.distance_km * distance_fraction
        elevation_loss = cls._descent_elevation(route, gain_fraction)

        # Elevation loss does not slow the Munter descent rate
        estimate = munter_method(distance, 0, MunterTerrain.DOWNHILL, pace_factors)
        return _munter_segment(
            "descent", "Descent",
            distance, 0, elevation_loss,
            estimate, _descent_details(distance, elevation_loss),
        )

    @classmethod
    def _analyze_technical(cls, route: RouteData, pace_factors: PaceFactors) -> List[RouteSegment]:
        split = TECHNICAL_SPLIT
        segments: List[RouteSegment] = []
        grade_info = parse_climbing_grade(route.climbing_grade)

        approach = cls._approach(route, split.approach_distance, split.approach_gain, pace_factors)
        if approach:
            segments.append(approach)

        estimate = technical_system(route.number_of_pitches, grade_info.difficulty, pace_factors)
        segments.append(RouteSegment(
            id="technical",
            name="Technical Climbing",
            terrain_type=TerrainType.TECHNICAL,
            distance_km=route.distance_km * split.main_distance,
            elevation_gain_m=route.elevation_gain_m * split.main_gain,
            elevation_loss_m=0,
            estimated_time=estimate.realistic,
            calculation_method=estimate.method,
            details=f"{route.number_of_pitches} pitches, {route.climbing_grade}",
            estimate=estimate,
            difficulty=route.climbing_grade,
            pitches=route.number_of_pitches,
        ))

        segments.append(cls._descent(
            route, split.descent_distance, split.descent_gain_fraction, pace_factors
        ))
        return segments

    @classmethod
    def _analyze_scrambling(cls, route: RouteData, pace_factors: PaceFactors) -> List[RouteSegment]:
        split = SCRAMBLING_SPLIT
        segments: List[RouteSegment] = []

        approach = cls._approach(route, split.approach_distance, split.approach_gain, pace_factors)
        if approach:
            segments.append(approach)

        distance = route.distance_km * split.main_distance
        elevation = route.elevation_gain_m * split.main_gain
        difficulty = estimate_scrambling_difficulty(route)
        estimate = chauvin_system(distance, elevation, difficulty, pace_factors)

        segments.append(RouteSegment(
            id="scrambling",
            name="Scrambling/Technical Terrain",
            terrain_type=TerrainType.CHAUVIN,
            distance_km=distance,
            elevation_gain_m=elevation,
            elevation_loss_m=0,
            estimated_time=estimate.realistic,
            calculation_method=estimate.method,
            details=f"{_ascent_details(distance, elevation)}, {difficulty.value.replace('_', ' ', 1)}",
            estimate=estimate,
            difficulty=difficulty.value,
        ))

        segments.append(cls._descent(
            route, split.descent_distance, split.descent_gain_fraction, pace_factors
        ))
        return segments

    @classmethod
    def _analyze_hiking(cls, route: RouteData, pace_factors: PaceFactors) -> List[RouteSegment]:
        split = HIKING_SPLIT
        segments: List[RouteSegment] = []
        skiing = route.activity_type == ActivityType.SKIING

        total_gain = route.elevation_gain_m * split.main_gain
        if total_gain > 0:
            distance = route.distance_km * split.main_distance
            estimate = munter_method(
                distance,
                total_gain,
                MunterTerrain.SKIING if skiing else MunterTerrain.UPHILL,
                pace_factors,
            )
            segments.append(_munter_segment(
                "uphill",
                "Ascent (Skiing)" if skiing else "Uphill Hiking",
                distance, total_gain, 0,
                estimate, _ascent_details(distance, total_gain),
            ))

        distance = route.distance_km * split.descent_distance
        elevation_loss = cls._descent_elevation(route, split.descent_gain_fraction)
        if distance > 0:
            estimate = munter_method(
                distance,
                0,
                MunterTerrain.SKIING if skiing else MunterTerrain.DOWNHILL,
                pace_factors,
            )
            segments.append(_munter_segment(
                "downhill",
                "Descent (Skiing)" if skiing else "Descent/Return",
                distance, 0, elevation_loss,
                estimate, _descent_details(distance, elevation_loss),
            ))

        return segments


def analyze_route(route: RouteData, pace_factors: Optional[PaceFactors] = None) -> List[RouteSegment]:
    """Analyze a route; neutral pace factors when none are given."""
    return RouteAnalyzer.analyze(route, pace_factors or PaceFactors.default())


def demo_route() -> RouteData:
    """Multi-pitch demo route shown when no route has been entered yet."""
    return RouteData(
        distance_km=5.0,
        elevation_gain_m=1200,
        elevation_loss_m=1200,
        activity_type=ActivityType.CLIMBING,
        climbing_grade="5.7",
        number_of_pitches=6,
        route_description="Multi-pitch granite route with approach hike",
        season=Season.SUMMER,
    )
