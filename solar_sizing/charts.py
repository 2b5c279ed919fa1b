"""
Chart series module.
Builds the tabular data behind the summary and projection charts.
"""

import math

import pandas as pd

from .calculator import SolarSystemResult

PROJECTION_EXTRA_YEARS = 3
MAX_PROJECTION_YEARS = 50


def metrics_data(result: SolarSystemResult) -> pd.DataFrame:
    """System metrics bar chart: power, panels, area and payback years."""
    return pd.DataFrame({
        'name': ['System Power', 'Panels', 'Area', 'ROI Years'],
        'value': [
            result.system_power,
            result.number_of_panels,
            result.required_area,
            round(result.return_on_investment, 1),
        ],
        'unit': ['kW', 'panels', 'm²', 'years'],
    })


def financial_data(result: SolarSystemResult) -> pd.DataFrame:
    """Initial investment versus annual savings."""
    return pd.DataFrame({
        'category': ['Initial Investment', 'Annual Savings'],
        'value': [result.total_cost, result.annual_savings],
    })


def consumption_data(result: SolarSystemResult, monthly_consumption: float) -> pd.DataFrame:
    """Daily versus monthly consumption (kWh)."""
    return pd.DataFrame({
        'name': ['Daily Consumption', 'Monthly Consumption'],
        'value': [round(result.daily_consumption, 2), monthly_consumption],
    })


def projection_years(result: SolarSystemResult) -> int:
    """Years shown in the savings projection: payback rounded up plus three, at most 50."""
    roi = result.return_on_investment
    if not math.isfinite(roi):
        return 0
    return min(max(0, math.ceil(roi) + PROJECTION_EXTRA_YEARS), MAX_PROJECTION_YEARS)


def projection_data(result: SolarSystemResult) -> pd.DataFrame:
    """
    Cumulative savings projection.

    Returns:
        DataFrame with columns: year, savings, cost, net
    """
    years = list(range(1, projection_years(result) + 1))

    df = pd.DataFrame({'year': years}, dtype='int64')
    df['savings'] = result.annual_savings * df['year'].astype(float)
    df['cost'] = float(result.total_cost)

    # Net gain only counts once the investment is recovered
    df['net'] = (df['savings'] - df['cost']).clip(lower=0.0)

    return df
