"""
Excel workbook writer module.
Generates the sizing report with summary cards, inputs, chart data and charts.
"""

import math
from typing import Dict, Any, List

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils.dataframe import dataframe_to_rows
from openpyxl.chart import LineChart, BarChart, Reference

from .calculator import SolarSystemConfig, SolarSystemResult
from .charts import metrics_data, financial_data, consumption_data, projection_data
from .formatting import summary_cards, additional_info


class ExcelWriter:
    """Writes a solar sizing result to an Excel workbook with multiple tabs."""

    def __init__(self, inputs: Dict[str, Any], config: SolarSystemConfig,
                 result: SolarSystemResult, monthly_consumption: float,
                 defaults_used: List[str], warnings: List[str]):
        self.inputs = inputs
        self.config = config
        self.result = result
        self.monthly_consumption = monthly_consumption
        self.defaults_used = defaults_used
        self.warnings = warnings

        # Styling
        self.header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
        self.header_font = Font(color="FFFFFF", bold=True)
        self.section_fill = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")
        self.section_font = Font(bold=True)
        self.card_value_font = Font(size=13, bold=True)

    def write_workbook(self, output_path: str):
        """Write complete workbook to file."""
        wb = Workbook()

        # Remove default sheet
        if 'Sheet' in wb.sheetnames:
            wb.remove(wb['Sheet'])

        self._create_summary_tab(wb)
        self._create_inputs_tab(wb)
        self._create_charts_tab(wb)
        self._create_audit_trace_tab(wb)
        self._create_notes_tab(wb)

        wb.save(output_path)

    def _create_summary_tab(self, wb: Workbook):
        """Create Summary tab with the executive summary cards."""
        ws = wb.create_sheet("Summary")

        ws['A1'] = f"{self.inputs['project']['name']} - Solar System Summary"
        ws['A1'].font = Font(size=14, bold=True)

        row = 3
        for col, header in enumerate(["Metric", "Value", "Detail"], start=1):
            self._apply_header_style(ws.cell(row=row, column=col, value=header))
        row += 1

        for title, value, caption in summary_cards(self.result, self.config):
            ws[f'A{row}'] = title
            ws[f'B{row}'] = value
            ws[f'B{row}'].font = self.card_value_font
            ws[f'C{row}'] = caption
            row += 1

        row += 1
        ws[f'A{row}'] = "ADDITIONAL INFORMATION"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        for line in additional_info(self.result, self.config):
            ws[f'A{row}'] = line
            row += 1

        ws.column_dimensions['A'].width = 30
        ws.column_dimensions['B'].width = 22
        ws.column_dimensions['C'].width = 30

    def _create_inputs_tab(self, wb: Workbook):
        """Create Inputs tab with consumption and configuration values."""
        ws = wb.create_sheet("Inputs")

        ws['A1'] = "Inputs"
        ws['A1'].font = Font(size=14, bold=True)

        row = 3
        ws[f'A{row}'] = "CONSUMPTION"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        ws[f'A{row}'] = "Monthly Consumption (kWh)"
        ws[f'B{row}'] = _cell_value(self.monthly_consumption)
        row += 2

        ws[f'A{row}'] = "SYSTEM"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        system_data = [
            ("Panel Power (kW)", self.config.panel_kw, '0.00'),
            ("Savings per kWh (COP)", self.config.monthly_save_per_kwh, '#,##0'),
            ("Installation Cost per Panel (COP)", self.config.cost_per_installation, '#,##0'),
            ("Peak Sun Hours (HSP)", self.config.hsp, '0.0'),
            ("Area per Panel (m²)", self.config.area_per_panel, '0.0'),
        ]

        for label, value, number_format in system_data:
            ws[f'A{row}'] = label
            ws[f'B{row}'] = _cell_value(value)
            ws[f'B{row}'].number_format = number_format
            row += 1

        ws.column_dimensions['A'].width = 36
        ws.column_dimensions['B'].width = 18

    def _create_charts_tab(self, wb: Workbook):
        """Create Charts tab with chart tables and native Excel charts."""
        ws = wb.create_sheet("Charts")

        ws['A1'] = "Sizing Charts"
        ws['A1'].font = Font(size=14, bold=True)

        # Tables stacked in columns A-D, charts anchored to the right
        row = 3
        metrics_df = metrics_data(self.result)
        metrics_row = row
        self._write_dataframe_to_sheet(ws, metrics_df, start_row=row)
        row += len(metrics_df) + 2

        financial_df = financial_data(self.result)
        financial_row = row
        self._write_dataframe_to_sheet(ws, financial_df, start_row=row)
        row += len(financial_df) + 2

        consumption_df = consumption_data(self.result, self.monthly_consumption)
        consumption_row = row
        self._write_dataframe_to_sheet(ws, consumption_df, start_row=row)
        row += len(consumption_df) + 2

        projection_df = projection_data(self.result)
        projection_row = row
        self._write_dataframe_to_sheet(ws, projection_df, start_row=row)

        ws.add_chart(self._bar_chart(ws, "System Metrics", metrics_row, len(metrics_df)), "G3")
        ws.add_chart(self._bar_chart(ws, "Investment vs Annual Savings", financial_row,
                                     len(financial_df)), "G19")
        ws.add_chart(self._bar_chart(ws, "Energy Consumption (kWh)", consumption_row,
                                     len(consumption_df)), "G35")

        if len(projection_df) > 0:
            ws.add_chart(self._projection_chart(ws, projection_row, len(projection_df)), "G51")

    def _bar_chart(self, ws, title: str, header_row: int, n_rows: int) -> BarChart:
        """Bar chart of column B against labels in column A."""
        chart = BarChart()
        chart.type = "col"
        chart.title = title
        chart.legend = None

        data = Reference(ws, min_col=2, min_row=header_row, max_row=header_row + n_rows)
        labels = Reference(ws, min_col=1, min_row=header_row + 1, max_row=header_row + n_rows)
        chart.add_data(data, titles_from_data=True)
        chart.set_categories(labels)
        chart.height = 7.5
        chart.width = 15
        return chart

    def _projection_chart(self, ws, header_row: int, n_rows: int) -> LineChart:
        """Cumulative savings, investment and net gain by year."""
        chart = LineChart()
        chart.title = "Savings Projection"
        chart.y_axis.title = "COP"
        chart.x_axis.title = "Year"

        data = Reference(ws, min_col=2, max_col=4, min_row=header_row, max_row=header_row + n_rows)
        years = Reference(ws, min_col=1, min_row=header_row + 1, max_row=header_row + n_rows)
        chart.add_data(data, titles_from_data=True)
        chart.set_categories(years)
        chart.height = 7.5
        chart.width = 15
        return chart

    def _create_audit_trace_tab(self, wb: Workbook):
        """Create Audit_Trace tab."""
        ws = wb.create_sheet("Audit_Trace")

        ws['A1'] = "Audit Trail - Defaults and Warnings"
        ws['A1'].font = Font(size=14, bold=True)

        row = 3

        # Defaults used
        ws[f'A{row}'] = "DEFAULTS APPLIED"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        if self.defaults_used:
            for default in self.defaults_used:
                ws[f'A{row}'] = default
                row += 1
        else:
            ws[f'A{row}'] = "No defaults applied - all inputs provided"
            row += 1

        row += 1

        # Warnings
        ws[f'A{row}'] = "WARNINGS"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        if self.warnings:
            for warning in self.warnings:
                ws[f'A{row}'] = warning
                row += 1
        else:
            ws[f'A{row}'] = "No warnings"
            row += 1

        ws.column_dimensions['A'].width = 80

    def _create_notes_tab(self, wb: Workbook):
        """Create Notes tab."""
        ws = wb.create_sheet("Notes")

        ws['A1'] = "Model Notes and Documentation"
        ws['A1'].font = Font(size=14, bold=True)

        notes = [
            "",
            "UNITS AND CONVENTIONS:",
            "- Currency: COP",
            "- Energy: kWh; power: kW; area: m²",
            "- Months are a fixed 30 days",
            "",
            "METHODOLOGY:",
            "- Daily consumption = monthly consumption / 30",
            "- System power = daily consumption / peak sun hours",
            "- Panels = system power / panel power, rounded up",
            "- Savings = monthly consumption x savings per kWh (x12 per year)",
            "- Total cost = panels x installation cost per panel",
            "- Payback (years) = total cost / annual savings",
            "- Area = panels x area per panel",
            "",
            "LIMITATIONS:",
            "- Results are estimates using standard industry values",
            "- Zero or negative inputs are not rejected; undefined results are shown as N/A",
            "- For an exact quote, consult a certified installer",
        ]

        for i, note in enumerate(notes, start=3):
            ws[f'A{i}'] = note

        ws.column_dimensions['A'].width = 100

    def _write_dataframe_to_sheet(self, ws, df: pd.DataFrame, start_row: int = 1):
        """Helper to write DataFrame to sheet with formatting."""
        # Write headers
        for col_idx, col_name in enumerate(df.columns, start=1):
            cell = ws.cell(row=start_row, column=col_idx, value=col_name)
            self._apply_header_style(cell)

        # Write data
        for row_idx, row in enumerate(dataframe_to_rows(df, index=False, header=False), start=start_row + 1):
            for col_idx, value in enumerate(row, start=1):
                cell = ws.cell(row=row_idx, column=col_idx, value=_cell_value(value))

                # Currency columns
                col_name = df.columns[col_idx - 1]
                is_currency_table = df.columns[0] == 'category'
                if col_name in ('savings', 'cost', 'net') or (is_currency_table and col_idx > 1):
                    cell.number_format = '#,##0'

        for col_idx in range(1, len(df.columns) + 1):
            letter = ws.cell(row=start_row, column=col_idx).column_letter
            ws.column_dimensions[letter].width = max(ws.column_dimensions[letter].width or 0, 20)

    def _apply_header_style(self, cell):
        """Apply header style to cell."""
        cell.fill = self.header_fill
        cell.font = self.header_font
        cell.alignment = Alignment(horizontal='center', vertical='center')

    def _apply_section_style(self, cell):
        """Apply section header style to cell."""
        cell.fill = self.section_fill
        cell.font = self.section_font


def _cell_value(value):
    """Excel has no inf/nan; leave such cells empty."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
