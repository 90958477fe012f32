"""
Pace factor descriptions.

Human-readable labels for the five factors and for their combined effect.
"""

from dataclasses import dataclass

from guidepace.shared.calculator_types import PaceFactors


@dataclass(frozen=True)
class FactorLabel:
    """Label and display variant for one factor value."""
    label: str
    variant: str  # success / info / secondary / warning / danger


# factor -> (low threshold, low label, high threshold, high label, middle label)
# A value <= low threshold gets the low label, >= high threshold the high label.
_LABEL_TABLE: dict[str, tuple] = {
    "fitness": (0.85, FactorLabel("Below Average", "warning"),
                1.15, FactorLabel("Above Average", "success"),
                FactorLabel("Average", "secondary")),
    "weather": (0.95, FactorLabel("Perfect", "success"),
                1.2, FactorLabel("Poor", "danger"),
                FactorLabel("Good", "info")),
    "party_size": (1.05, FactorLabel("Solo/Pair", "info"),
                   1.25, FactorLabel("Large Group", "warning"),
                   FactorLabel("Small Group", "secondary")),
    "pack_weight": (0.98, FactorLabel("Light Pack", "success"),
                    1.1, FactorLabel("Heavy Pack", "warning"),
                    FactorLabel("Normal Pack", "secondary")),
    "experience": (0.95, FactorLabel("Expert", "success"),
                   1.05, FactorLabel("Beginner", "info"),
                   FactorLabel("Intermediate", "secondary")),
}

NORMAL_LABEL = FactorLabel("Normal", "secondary")


def get_factor_label(factor: str, value: float) -> FactorLabel:
    """
    Label a single factor value.

    Args:
        factor: Field name of PaceFactors (e.g. 'party_size')
        value: Factor value

    Returns:
        FactorLabel; 'Normal' for unknown factor names
    """
    entry = _LABEL_TABLE.get(factor)
    if entry is None:
        return NORMAL_LABEL

    low, low_label, high, high_label, middle_label = entry
    if value <= low:
        return low_label
    if value >= high:
        return high_label
    return middle_label


def describe_factors(pace_factors: PaceFactors) -> dict[str, FactorLabel]:
    """Labels for every factor."""
    return {
        name: get_factor_label(name, getattr(pace_factors, name))
        for name in _LABEL_TABLE
    }


def describe_adjustment(pace_factors: PaceFactors) -> str:
    """
    Summarize the combined multiplier.

    Returns:
        'N% faster', 'N% slower' or 'Normal pace'
    """
    total = pace_factors.total_multiplier
    if total < 1:
        return f"{round((1 - total) * 100)}% faster"
    if total > 1:
        return f"{round((total - 1) * 100)}% slower"
    return "Normal pace"
