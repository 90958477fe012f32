"""
Time calculator entry points.

Function-style access to the three guide methods, used by the route
analyzer and the API.
"""

from guidepace.shared.calculator_types import PaceFactors, TimeEstimate
from guidepace.shared.constants import (
    MunterTerrain,
    ScramblingDifficulty,
    ClimbingGradeBucket,
)

from .munter import MunterCalculator
from .chauvin import ChauvinCalculator
from .technical import TechnicalCalculator

_munter = MunterCalculator()
_chauvin = ChauvinCalculator()
_technical = TechnicalCalculator()


def munter_method(
    distance_km: float,
    elevation_m: float,
    terrain: MunterTerrain,
    pace_factors: PaceFactors
) -> TimeEstimate:
    """Munter method for class 1-2 terrain."""
    return _munter.calculate(distance_km, elevation_m, terrain, pace_factors)


def chauvin_system(
    distance_km: float,
    elevation_m: float,
    difficulty: ScramblingDifficulty,
    pace_factors: PaceFactors
) -> TimeEstimate:
    """Chauvin system for class 3-4 and snow terrain."""
    return _chauvin.calculate(distance_km, elevation_m, difficulty, pace_factors)


def technical_system(
    pitches: int,
    difficulty: ClimbingGradeBucket,
    pace_factors: PaceFactors
) -> TimeEstimate:
    """Technical system for roped class 5 climbing."""
    return _technical.calculate(pitches, difficulty, pace_factors)


def method_descriptions() -> dict[str, str]:
    """Display name -> description for every method."""
    return {m.name: m.description for m in (_munter, _chauvin, _technical)}
