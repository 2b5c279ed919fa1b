"""Unit tests for calculator module."""

import unittest
import sys
import os
import math
from dataclasses import FrozenInstanceError

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from solar_sizing.calculator import (SolarSystemConfig, DEFAULT_CONFIG,
                                     calculate_solar_system)


class TestCalculateSolarSystem(unittest.TestCase):
    """Test sizing and financial derivations."""

    def setUp(self):
        """Set up default configuration."""
        self.config = SolarSystemConfig(
            panel_kw=0.55,
            monthly_save_per_kwh=926,
            cost_per_installation=2100000,
            hsp=3.9,
            area_per_panel=2,
        )

    def test_residential_300_kwh(self):
        """Test 300 kWh/month with default parameters."""
        result = calculate_solar_system(300, self.config)

        self.assertEqual(result.daily_consumption, 10)
        self.assertAlmostEqual(result.system_power, 2.5641, places=4)

        # 2.5641 / 0.55 = 4.66 panels -> 5
        self.assertEqual(result.number_of_panels, 5)
        self.assertEqual(result.monthly_savings, 277800)
        self.assertEqual(result.annual_savings, 3333600)
        self.assertEqual(result.total_cost, 10500000)
        self.assertAlmostEqual(result.return_on_investment, 3.15, places=2)
        self.assertEqual(result.required_area, 10)

    def test_default_config_matches_residential_defaults(self):
        """Test that DEFAULT_CONFIG holds the standard parameters."""
        self.assertEqual(DEFAULT_CONFIG, self.config)

    def test_zero_consumption_gives_nan_payback(self):
        """Test zero consumption: all zeros and 0/0 payback."""
        result = calculate_solar_system(0, self.config)

        self.assertEqual(result.daily_consumption, 0)
        self.assertEqual(result.system_power, 0)
        self.assertEqual(result.number_of_panels, 0)
        self.assertEqual(result.monthly_savings, 0)
        self.assertEqual(result.annual_savings, 0)
        self.assertEqual(result.total_cost, 0)
        self.assertTrue(math.isnan(result.return_on_investment))
        self.assertEqual(result.required_area, 0)

    def test_exact_panel_requirement_not_rounded_up(self):
        """Test that an integral panel requirement stays as is."""
        config = SolarSystemConfig(panel_kw=1, monthly_save_per_kwh=926,
                                   cost_per_installation=2100000, hsp=1,
                                   area_per_panel=2)

        # 120 kWh/month -> 4 kWh/day -> 4 kW -> 4 panels
        result = calculate_solar_system(120, config)

        self.assertEqual(result.system_power, 4)
        self.assertEqual(result.number_of_panels, 4)

    def test_rounding_is_ceiling(self):
        """Test that panel count is the smallest integer covering the requirement."""
        for consumption in [1, 17, 99.5, 150, 300, 733, 1000, 4321]:
            result = calculate_solar_system(consumption, self.config)
            required = result.system_power / self.config.panel_kw

            self.assertEqual(result.number_of_panels, int(result.number_of_panels))
            self.assertGreaterEqual(result.number_of_panels, required)
            self.assertLess(result.number_of_panels - 1, required)

    def test_derived_fields_consistent(self):
        """Test cost and area are exact multiples of the panel count."""
        for consumption in [0, 50, 300, 1234.5, 10000]:
            result = calculate_solar_system(consumption, self.config)

            self.assertEqual(result.total_cost,
                             result.number_of_panels * self.config.cost_per_installation)
            self.assertEqual(result.required_area,
                             result.number_of_panels * self.config.area_per_panel)
            self.assertEqual(result.annual_savings, result.monthly_savings * 12)

    def test_monotonic_in_consumption(self):
        """Test that more consumption never shrinks the system or savings."""
        previous = calculate_solar_system(0, self.config)

        for consumption in range(10, 3000, 37):
            result = calculate_solar_system(consumption, self.config)

            self.assertGreaterEqual(result.system_power, previous.system_power)
            self.assertGreaterEqual(result.number_of_panels, previous.number_of_panels)
            self.assertGreaterEqual(result.monthly_savings, previous.monthly_savings)
            self.assertGreaterEqual(result.annual_savings, previous.annual_savings)
            self.assertGreaterEqual(result.total_cost, previous.total_cost)
            self.assertGreaterEqual(result.required_area, previous.required_area)

            previous = result

    def test_deterministic(self):
        """Test repeated calls give identical results."""
        first = calculate_solar_system(456.7, self.config)
        second = calculate_solar_system(456.7, self.config)

        self.assertEqual(first, second)
        self.assertEqual(first.to_dict(), second.to_dict())

    def test_zero_hsp_gives_infinite_system(self):
        """Test that zero peak sun hours propagates infinity without raising."""
        config = self.config.with_field('hsp', 0)
        result = calculate_solar_system(300, config)

        self.assertTrue(math.isinf(result.system_power))
        self.assertTrue(math.isinf(result.number_of_panels))
        self.assertTrue(math.isinf(result.total_cost))
        self.assertTrue(math.isinf(result.required_area))

    def test_zero_panel_power_gives_infinite_panels(self):
        """Test zero panel power."""
        config = self.config.with_field('panel_kw', 0)
        result = calculate_solar_system(300, config)

        self.assertTrue(math.isinf(result.number_of_panels))
        self.assertTrue(math.isinf(result.return_on_investment))

    def test_zero_savings_rate_gives_infinite_payback(self):
        """Test that no savings means the investment is never recovered."""
        config = self.config.with_field('monthly_save_per_kwh', 0)
        result = calculate_solar_system(300, config)

        self.assertEqual(result.annual_savings, 0)
        self.assertEqual(result.total_cost, 10500000)
        self.assertEqual(result.return_on_investment, math.inf)

    def test_negative_consumption_propagates(self):
        """Test negative consumption is not rejected."""
        result = calculate_solar_system(-300, self.config)

        self.assertEqual(result.daily_consumption, -10)
        # ceil(-4.66) = -4
        self.assertEqual(result.number_of_panels, -4)
        self.assertEqual(result.total_cost, -8400000)
        self.assertLess(result.monthly_savings, 0)

    def test_result_fields_are_plain_floats(self):
        """Test results hold built-in floats."""
        result = calculate_solar_system(300, self.config)

        for value in result.to_dict().values():
            self.assertIs(type(value), float)


class TestSolarSystemConfig(unittest.TestCase):
    """Test configuration value type."""

    def test_config_is_immutable(self):
        with self.assertRaises(FrozenInstanceError):
            DEFAULT_CONFIG.hsp = 5.0

    def test_with_field_returns_copy(self):
        """Test with_field leaves the original untouched."""
        updated = DEFAULT_CONFIG.with_field('hsp', 4.5)

        self.assertEqual(updated.hsp, 4.5)
        self.assertEqual(DEFAULT_CONFIG.hsp, 3.9)
        self.assertEqual(updated.panel_kw, DEFAULT_CONFIG.panel_kw)

    def test_with_unknown_field(self):
        with self.assertRaises(KeyError):
            DEFAULT_CONFIG.with_field('inverter_kw', 5)

    def test_field_names(self):
        self.assertEqual(SolarSystemConfig.field_names(), [
            'panel_kw', 'monthly_save_per_kwh', 'cost_per_installation',
            'hsp', 'area_per_panel'
        ])


if __name__ == '__main__':
    unittest.main()
