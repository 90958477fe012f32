"""
Guide time calculators.

Available calculators:
- MunterCalculator: hiking/skiing, class 1-2 terrain
- ChauvinCalculator: scrambling/snow, class 3-4 terrain
- TechnicalCalculator: roped climbing, class 5 terrain
"""
from .base import GuideMethod
from .munter import MunterCalculator
from .chauvin import ChauvinCalculator
from .technical import TechnicalCalculator
from .time_calculator import (
    munter_method,
    chauvin_system,
    technical_system,
    method_descriptions,
)

__all__ = [
    "GuideMethod",
    "MunterCalculator",
    "ChauvinCalculator",
    "TechnicalCalculator",
    "munter_method",
    "chauvin_system",
    "technical_system",
    "method_descriptions",
]
