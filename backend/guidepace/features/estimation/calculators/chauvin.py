"""
Chauvin Calculator

Chauvin system for scrambling and snow climbing (class 3-4 terrain).
"""

from guidepace.shared.calculator_types import PaceFactors, TimeEstimate
from guidepace.shared.constants import (
    ScramblingDifficulty,
    CHAUVIN_RATES,
    CHAUVIN_BAND,
    CHAUVIN_METHOD_NAME,
)
from guidepace.shared.formulas import chauvin_base_time

from .base import GuideMethod


class ChauvinCalculator(GuideMethod):
    """
    Chauvin system.

    Terrain is converted into 60 m pitch equivalents:
        pitch_eq = (distance_km * 1000 + elevation_m) / 60
        time_h = pitch_eq * minutes_per_pitch / 60

    Minutes per pitch: class 3 easy/hard 10/15, class 4 easy/hard 20/25,
    moderate/steep snow 18/30.
    """

    BAND = CHAUVIN_BAND

    @property
    def name(self) -> str:
        return CHAUVIN_METHOD_NAME

    @property
    def description(self) -> str:
        return "Chauvin System - scrambling and snow, class 3-4 terrain"

    def calculate(
        self,
        distance_km: float,
        elevation_m: float,
        difficulty: ScramblingDifficulty,
        pace_factors: PaceFactors
    ) -> TimeEstimate:
        rate = CHAUVIN_RATES[ScramblingDifficulty(difficulty)]
        base_hours = chauvin_base_time(distance_km, elevation_m, rate)
        return self.apply_factors(base_hours, pace_factors)
