"""
Munter Calculator

Munter method for hiking and skiing on class 1-2 terrain.
"""

from guidepace.shared.calculator_types import PaceFactors, TimeEstimate
from guidepace.shared.constants import (
    MunterTerrain,
    MUNTER_RATES,
    MUNTER_BAND,
    MUNTER_METHOD_NAME,
)
from guidepace.shared.formulas import munter_base_time

from .base import GuideMethod


class MunterCalculator(GuideMethod):
    """
    Munter method (Werner Munter).

    Formula: time = (distance_km + elevation_m / 100) / rate

    Rates in km-equivalent per hour:
    - uphill 4, flat 6, downhill 6
    - bushwhacking 2
    - skiing 10

    Optimistic band is 0.85x, conservative 1.25x.
    """

    BAND = MUNTER_BAND

    @property
    def name(self) -> str:
        return MUNTER_METHOD_NAME

    @property
    def description(self) -> str:
        return "Munter Method - hiking and skiing, class 1-2 terrain"

    def calculate(
        self,
        distance_km: float,
        elevation_m: float,
        terrain: MunterTerrain,
        pace_factors: PaceFactors
    ) -> TimeEstimate:
        """
        Estimate time for a stretch of class 1-2 terrain.

        Args:
            distance_km: Distance in kilometers
            elevation_m: Elevation gain in meters
            terrain: Terrain type selecting the rate
            pace_factors: Adjustment factors
        """
        rate = MUNTER_RATES[MunterTerrain(terrain)]
        base_hours = munter_base_time(distance_km, elevation_m, rate)
        return self.apply_factors(base_hours, pace_factors)
