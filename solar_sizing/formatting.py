"""
Display formatting for sizing results.
Currency is Colombian pesos with es-CO digit grouping.
"""

import math
from typing import List, Tuple

from .calculator import SolarSystemConfig, SolarSystemResult, MONTHS_PER_YEAR

NOT_AVAILABLE = "N/A"


def format_currency(value: float) -> str:
    """Format COP without decimals, e.g. 10500000 -> '$ 10.500.000'."""
    if not math.isfinite(value):
        return NOT_AVAILABLE
    grouped = f"{abs(value):,.0f}".replace(",", ".")
    sign = "-" if round(value) < 0 else ""
    return f"{sign}$ {grouped}"


def format_number(value: float, decimals: int = 2) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}"


def format_years(value: float) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.1f} years"


def format_months(years: float) -> str:
    """Payback expressed in whole months."""
    if not math.isfinite(years):
        return NOT_AVAILABLE
    return f"{years * MONTHS_PER_YEAR:.0f} months"


def format_panels(value: float) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.0f}"


def summary_cards(result: SolarSystemResult,
                  config: SolarSystemConfig) -> List[Tuple[str, str, str]]:
    """
    Build the executive summary cards.

    Returns:
        List of (title, value, caption)
    """
    return [
        ("Required System",
         f"{format_number(result.system_power)} kW",
         f"with {format_panels(result.number_of_panels)} panels"),
        ("Total Investment",
         format_currency(result.total_cost),
         f"{format_currency(config.cost_per_installation)} per panel"),
        ("Estimated Savings",
         format_currency(result.annual_savings),
         "per year"),
        ("Payback",
         format_years(result.return_on_investment),
         format_months(result.return_on_investment)),
        ("Required Space",
         f"{format_number(result.required_area, 1)} m²",
         f"{config.area_per_panel:g} m² per panel"),
        ("Monthly Savings",
         format_currency(result.monthly_savings),
         f"{config.monthly_save_per_kwh:g} COP/kWh"),
    ]


def additional_info(result: SolarSystemResult, config: SolarSystemConfig) -> List[str]:
    """Explanatory lines shown under the summary cards."""
    return [
        f"Daily consumption is {format_number(result.daily_consumption)} kWh",
        f"Each panel delivers about {config.panel_kw:g} kW under optimal conditions",
        f"Peak sun hours (HSP) for the site are {config.hsp:g} hours",
        f"After {format_years(result.return_on_investment)} all savings are net gain",
    ]
