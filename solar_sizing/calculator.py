"""
Solar system sizing calculation module.
Derives system power, panel count, cost, savings and payback from monthly consumption.
"""

from dataclasses import dataclass, asdict, replace, fields
from typing import Dict, Any

import numpy as np

DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class SolarSystemConfig:
    """Technical and economic parameters of the installation."""

    panel_kw: float                 # kW per panel (0.55 for a 550 W panel)
    monthly_save_per_kwh: float     # COP saved per kWh
    cost_per_installation: float    # COP per installed panel
    hsp: float                      # peak sun hours per day
    area_per_panel: float           # m² per panel

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    def with_field(self, name: str, value: float) -> "SolarSystemConfig":
        """Return a copy with one field replaced."""
        if name not in self.field_names():
            raise KeyError(f"Unknown configuration field: {name}")
        return replace(self, **{name: value})

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_CONFIG = SolarSystemConfig(
    panel_kw=0.55,
    monthly_save_per_kwh=926.0,
    cost_per_installation=2100000.0,
    hsp=3.9,
    area_per_panel=2.0,
)


@dataclass(frozen=True)
class SolarSystemResult:
    """Sizing and financial outcome for one consumption/config pair."""

    daily_consumption: float    # kWh/day
    system_power: float         # kW
    number_of_panels: float     # whole panels, kept as float so inf/nan survive
    monthly_savings: float      # COP
    annual_savings: float       # COP
    total_cost: float           # COP
    return_on_investment: float # years
    required_area: float        # m²

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def calculate_solar_system(monthly_consumption: float,
                           config: SolarSystemConfig) -> SolarSystemResult:
    """
    Size a photovoltaic system for an average monthly consumption.

    Division by zero yields inf/nan following IEEE-754 rather than raising,
    so degenerate configurations (hsp=0, zero savings) produce non-finite
    fields instead of errors.

    Args:
        monthly_consumption: Average monthly energy use (kWh)
        config: System configuration

    Returns:
        SolarSystemResult
    """
    consumption = np.float64(monthly_consumption)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        # Daily consumption (kWh/day), fixed 30-day month
        daily_consumption = consumption / DAYS_PER_MONTH

        # Required power (kW) to cover daily draw within peak sun hours
        system_power = daily_consumption / np.float64(config.hsp)

        # Never under-provision: fractional panels round up
        number_of_panels = np.ceil(system_power / np.float64(config.panel_kw))

        monthly_savings = consumption * np.float64(config.monthly_save_per_kwh)
        annual_savings = monthly_savings * MONTHS_PER_YEAR

        total_cost = number_of_panels * np.float64(config.cost_per_installation)

        # Payback period (years)
        return_on_investment = total_cost / annual_savings

        required_area = number_of_panels * np.float64(config.area_per_panel)

    return SolarSystemResult(
        daily_consumption=float(daily_consumption),
        system_power=float(system_power),
        number_of_panels=float(number_of_panels),
        monthly_savings=float(monthly_savings),
        annual_savings=float(annual_savings),
        total_cost=float(total_cost),
        return_on_investment=float(return_on_investment),
        required_area=float(required_area),
    )
