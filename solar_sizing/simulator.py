"""
Interactive simulator state.
Keeps the current configuration, consumption and result, recomputing on every change.
"""

from typing import Any, Optional

from .calculator import (SolarSystemConfig, SolarSystemResult, DEFAULT_CONFIG,
                         DAYS_PER_MONTH, calculate_solar_system)
from .inputs import coerce_number


class SolarSimulator:
    """State container for a single interactive sizing session."""

    def __init__(self, config: SolarSystemConfig = DEFAULT_CONFIG):
        self.config = config
        self.monthly_consumption = 0.0
        self.result: Optional[SolarSystemResult] = None

    @property
    def approximate_daily_consumption(self) -> float:
        return self.monthly_consumption / DAYS_PER_MONTH

    def set_consumption(self, value: Any) -> Optional[SolarSystemResult]:
        """Store a new consumption value; a non-positive value clears the result."""
        consumption = coerce_number(value)
        self.monthly_consumption = consumption

        if consumption > 0:
            self.result = calculate_solar_system(consumption, self.config)
        else:
            self.result = None

        return self.result

    def update_config(self, config: SolarSystemConfig) -> Optional[SolarSystemResult]:
        """Replace the configuration, recomputing only for a positive consumption."""
        self.config = config

        if self.monthly_consumption > 0:
            self.result = calculate_solar_system(self.monthly_consumption, config)

        return self.result

    def update_field(self, name: str, value: Any) -> Optional[SolarSystemResult]:
        """Set one configuration field from raw form input."""
        return self.update_config(self.config.with_field(name, coerce_number(value)))

    def reset_config(self) -> Optional[SolarSystemResult]:
        return self.update_config(DEFAULT_CONFIG)
