"""
Base Guide Method

Abstract base class for the three guide pace formulas.
"""

from abc import ABC, abstractmethod

from guidepace.shared.calculator_types import PaceFactors, TimeEstimate


class GuideMethod(ABC):
    """
    Abstract base class for guide time formulas.

    Each method computes a base time from its own table, then applies
    the pace-factor product and the method's optimistic/conservative band.
    """

    # (optimistic, conservative) multipliers on the realistic time
    BAND: tuple[float, float] = (1.0, 1.0)

    @property
    @abstractmethod
    def name(self) -> str:
        """Method name for display."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description of the method."""
        pass

    def apply_factors(self, base_hours: float, pace_factors: PaceFactors) -> TimeEstimate:
        """
        Turn a base time into the three estimate bands.

        Args:
            base_hours: Unadjusted time in hours
            pace_factors: Human factors; their product scales the base time

        Returns:
            TimeEstimate with optimistic/realistic/conservative hours
        """
        realistic = base_hours * pace_factors.total_multiplier
        optimistic_mult, conservative_mult = self.BAND

        return TimeEstimate(
            optimistic=realistic * optimistic_mult,
            realistic=realistic,
            conservative=realistic * conservative_mult,
            method=self.name,
        )
