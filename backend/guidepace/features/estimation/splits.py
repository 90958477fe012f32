"""
Fixed segment splits per terrain regime.

Each regime divides the route's total distance and elevation by constant
fractions. These are guide-methodology constants, not derived from the
terrain itself.
"""

from dataclasses import dataclass

# Classification thresholds
SCRAMBLING_MIN_GRADE = 0.25       # average grade, decimal
SCRAMBLING_MIN_GAIN_M = 300.0

# Scrambling difficulty thresholds (average grade, decimal)
SNOW_STEEP_MIN_GRADE = 0.4
CLASS4_HARD_MIN_GRADE = 0.5
CLASS4_EASY_MIN_GRADE = 0.35
CLASS3_HARD_MIN_GRADE = 0.3


@dataclass(frozen=True)
class RegimeSplit:
    """
    Fractions of the route assigned to each segment.

    descent_gain_fraction is the share of elevation gain assumed lost on
    the descent when the route has no elevation loss recorded.
    """
    approach_distance: float
    approach_gain: float
    main_distance: float
    main_gain: float
    descent_distance: float
    descent_gain_fraction: float


TECHNICAL_SPLIT = RegimeSplit(
    approach_distance=0.3,
    approach_gain=0.3,
    main_distance=0.4,
    main_gain=0.4,
    descent_distance=0.3,
    descent_gain_fraction=0.7,
)

SCRAMBLING_SPLIT = RegimeSplit(
    approach_distance=0.4,
    approach_gain=0.3,
    main_distance=0.4,
    main_gain=0.6,
    descent_distance=0.2,
    descent_gain_fraction=0.9,
)

# Hiking has no approach: the uphill leg carries the full gain
HIKING_SPLIT = RegimeSplit(
    approach_distance=0.0,
    approach_gain=0.0,
    main_distance=0.6,
    main_gain=1.0,
    descent_distance=0.4,
    descent_gain_fraction=0.8,
)
