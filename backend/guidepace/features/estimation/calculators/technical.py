"""
Technical Calculator

Pitch-based estimate for roped climbing (class 5 terrain).
"""

from guidepace.shared.calculator_types import PaceFactors, TimeEstimate
from guidepace.shared.constants import (
    ClimbingGradeBucket,
    TECHNICAL_RATES,
    TECHNICAL_BAND,
    TECHNICAL_METHOD_NAME,
)
from guidepace.shared.formulas import technical_base_time

from .base import GuideMethod


class TechnicalCalculator(GuideMethod):
    """
    Technical system.

    Formula: time = pitches * minutes_per_pitch / 60

    Minutes per pitch by grade: 5.0-5.4 30, 5.5-5.7 45, 5.8-5.9 60,
    5.10-5.11 75, 5.12+ 90. Widest band of the three methods
    (0.75x / 1.4x) since belays and route finding vary the most.
    """

    BAND = TECHNICAL_BAND

    @property
    def name(self) -> str:
        return TECHNICAL_METHOD_NAME

    @property
    def description(self) -> str:
        return "Technical System - roped climbing, class 5 terrain"

    def calculate(
        self,
        pitches: int,
        difficulty: ClimbingGradeBucket,
        pace_factors: PaceFactors
    ) -> TimeEstimate:
        rate = TECHNICAL_RATES[ClimbingGradeBucket(difficulty)]
        base_hours = technical_base_time(pitches, rate)
        return self.apply_factors(base_hours, pace_factors)
