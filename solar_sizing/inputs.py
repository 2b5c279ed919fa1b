"""
Input loading module.
Handles JSON inputs, defaults, numeric coercion and audit trail.
"""

import json
import math
import re
from typing import Dict, Any, List, Tuple
from copy import deepcopy

from .calculator import SolarSystemConfig, DEFAULT_CONFIG

# Leading decimal number, optionally signed, with optional exponent
_NUMBER_PREFIX = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_INFINITY_PREFIX = re.compile(r'^([+-]?)Infinity')


def coerce_number(value: Any) -> float:
    """
    Coerce a form value to a float.

    Strings are read from their leading numeric prefix ("12.5kWh" -> 12.5).
    Anything that does not parse, including empty strings, None and NaN,
    becomes 0.0.
    """
    if isinstance(value, bool) or value is None:
        return 0.0

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # ints beyond float range
            number = math.inf if value > 0 else -math.inf
    elif isinstance(value, str):
        text = value.lstrip()
        match = _NUMBER_PREFIX.match(text)
        if match:
            number = float(match.group(0))
        else:
            inf_match = _INFINITY_PREFIX.match(text)
            if not inf_match:
                return 0.0
            number = -math.inf if inf_match.group(1) == '-' else math.inf
    else:
        return 0.0

    if math.isnan(number):
        return 0.0
    return number


class InputValidator:
    """Loads input JSON, applies defaults and tracks coercions."""

    def __init__(self):
        self.defaults_used = []
        self.warnings = []

    def load_and_validate(self, json_path: str) -> Dict[str, Any]:
        """Load JSON and apply defaults."""
        with open(json_path, 'r') as f:
            data = json.load(f)

        return self.validate(data)

    def validate(self, data: Any) -> Dict[str, Any]:
        """Apply defaults and coerce numeric fields of already parsed input."""
        if not isinstance(data, dict):
            raise ValueError(f"Inputs must be a JSON object, got {type(data).__name__}")

        for section in ('project', 'consumption', 'system'):
            if section in data and not isinstance(data[section], dict):
                raise ValueError(f"Input section '{section}' must be an object")

        validated = self._apply_defaults(data)
        self._coerce_numbers(validated)
        return validated

    def _apply_defaults(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply defaults for missing values."""
        result = deepcopy(data)

        # Project defaults
        if 'project' not in result:
            result['project'] = {}
        self._set_default(result['project'], 'name', 'Solar Sizing', 'project.name')

        # Consumption defaults
        if 'consumption' not in result:
            result['consumption'] = {}
        self._set_default(result['consumption'], 'monthly_kwh', 0.0, 'consumption.monthly_kwh')

        # System defaults
        if 'system' not in result:
            result['system'] = {}
        for key, default in DEFAULT_CONFIG.to_dict().items():
            self._set_default(result['system'], key, default, f'system.{key}')

        return result

    def _set_default(self, section: Dict, key: str, default: Any, path: str):
        """Set a default value and track it."""
        if key not in section or section[key] is None:
            section[key] = default
            self.defaults_used.append(f"{path} = {default}")

    def _coerce_numbers(self, data: Dict[str, Any]):
        """Coerce numeric fields; values that do not parse become 0."""
        numeric_paths = [('consumption', 'monthly_kwh')]
        numeric_paths += [('system', key) for key in SolarSystemConfig.field_names()]

        for section, key in numeric_paths:
            raw = data[section][key]
            number = coerce_number(raw)
            if not _same_number(raw, number):
                self.warnings.append(f"{section}.{key}: {raw!r} coerced to {number}")
            data[section][key] = number


def _same_number(raw: Any, number: float) -> bool:
    return (isinstance(raw, (int, float)) and not isinstance(raw, bool)
            and not math.isnan(raw) and raw == number)


def build_config(data: Dict[str, Any]) -> SolarSystemConfig:
    """Build the system configuration from validated inputs."""
    system = data['system']
    return SolarSystemConfig(**{key: system[key] for key in SolarSystemConfig.field_names()})


def load_inputs(json_path: str) -> Tuple[Dict[str, Any], List[str], List[str]]:
    """
    Load inputs from JSON file.

    Returns:
        (validated_data, defaults_used, warnings)
    """
    validator = InputValidator()
    data = validator.load_and_validate(json_path)
    return data, validator.defaults_used, validator.warnings
