"""
Elevation processing utilities.
"""
from typing import List, Tuple


def calculate_elevation_changes(
    elevations: List[float]
) -> Tuple[float, float]:
    """
    Calculate total elevation gain and loss.

    Returns:
        Tuple of (gain_m, loss_m), both non-negative
    """
    gain = 0.0
    loss = 0.0

    for prev, curr in zip(elevations, elevations[1:]):
        diff = curr - prev
        if diff > 0:
            gain += diff
        else:
            loss -= diff

    return gain, loss
