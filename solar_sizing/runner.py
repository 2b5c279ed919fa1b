"""
Main runner module.
Loads inputs, sizes the system and generates outputs.
"""

from typing import Dict, Tuple

import pandas as pd

from .inputs import load_inputs, build_config
from .calculator import SolarSystemResult, calculate_solar_system
from .charts import metrics_data, financial_data, consumption_data, projection_data
from .formatting import format_currency, format_number, format_panels, format_years
from .writer_excel import ExcelWriter


class SolarSizingModel:
    """Solar sizing orchestrator."""

    def __init__(self, inputs_path: str):
        """
        Initialize model with inputs.

        Args:
            inputs_path: Path to inputs JSON file
        """
        self.inputs_path = inputs_path
        self.inputs, self.defaults_used, self.warnings = load_inputs(inputs_path)

        self.monthly_consumption = self.inputs['consumption']['monthly_kwh']
        self.config = build_config(self.inputs)

        # Results storage
        self.result = None
        self.charts = None

    def run(self) -> Tuple[SolarSystemResult, Dict[str, pd.DataFrame]]:
        """
        Run the sizing calculation.

        Returns:
            (result, chart_dataframes)
        """
        print("Running Solar Sizing Model...")

        for warning in self.warnings:
            print(f"  WARNING: {warning}")

        print("  1. Sizing system...")
        self.result = calculate_solar_system(self.monthly_consumption, self.config)

        print("  2. Building chart data...")
        self.charts = {
            'metrics': metrics_data(self.result),
            'financial': financial_data(self.result),
            'consumption': consumption_data(self.result, self.monthly_consumption),
            'projection': projection_data(self.result),
        }

        print("Model run complete!")
        print(f"  System Power: {format_number(self.result.system_power)} kW")
        print(f"  Panels: {format_panels(self.result.number_of_panels)}")
        print(f"  Total Cost: {format_currency(self.result.total_cost)}")
        print(f"  Annual Savings: {format_currency(self.result.annual_savings)}")
        print(f"  Payback: {format_years(self.result.return_on_investment)}")

        return self.result, self.charts

    def export_to_excel(self, output_path: str):
        """
        Export model to Excel workbook.

        Args:
            output_path: Path for output Excel file
        """
        if self.result is None:
            raise RuntimeError("run() must be called before export_to_excel()")

        print(f"Exporting to Excel: {output_path}")

        writer = ExcelWriter(
            self.inputs, self.config, self.result, self.monthly_consumption,
            self.defaults_used, self.warnings
        )

        writer.write_workbook(output_path)

        print("Export complete!")


def run_model(inputs_path: str, output_path: str = "SolarSizing.xlsx") -> Tuple[SolarSystemResult, Dict[str, pd.DataFrame]]:
    """
    Convenience function to run model and export to Excel.

    Args:
        inputs_path: Path to inputs JSON
        output_path: Path for output Excel (default: SolarSizing.xlsx)

    Returns:
        (result, chart_dataframes)
    """
    model = SolarSizingModel(inputs_path)
    result, charts = model.run()
    model.export_to_excel(output_path)

    return result, charts
