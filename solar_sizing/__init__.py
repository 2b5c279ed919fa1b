"""
Solar Sizing Package
Photovoltaic system sizing, cost and payback estimation from monthly consumption.
"""

__version__ = "1.0.0"
__author__ = "Solar Model Team"

from .calculator import (SolarSystemConfig, SolarSystemResult, DEFAULT_CONFIG,
                         calculate_solar_system)
from .simulator import SolarSimulator
from .runner import run_model

__all__ = [
    "SolarSystemConfig",
    "SolarSystemResult",
    "DEFAULT_CONFIG",
    "calculate_solar_system",
    "SolarSimulator",
    "run_model",
]
