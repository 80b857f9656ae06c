"""Display formatting settings"""

import json
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class FormatSettings:
    """
    Thresholds and precision used when rendering conversion results

    Values at or above ``scientific_upper`` or below ``scientific_lower``
    (but non-zero) are shown in scientific notation with ``mantissa_digits``
    decimals. Everything else keeps ``significant_digits`` significant digits.
    """
    scientific_upper: float = 1e9
    scientific_lower: float = 1e-4
    mantissa_digits: int = 6
    significant_digits: int = 10

    def __post_init__(self):
        """Validate settings after creation"""
        self.validate()

    def validate(self) -> bool:
        """
        Validate format settings

        Returns:
            True if valid

        Raises:
            ConfigurationError: If a threshold or precision is invalid
        """
        for name in ('scientific_upper', 'scientific_lower'):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be a number, got {value!r}",
                                         'format', name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be positive and finite, got {value}",
                                         'format', name)

        if self.scientific_lower >= self.scientific_upper:
            raise ConfigurationError(
                f"scientific_lower ({self.scientific_lower}) must be below "
                f"scientific_upper ({self.scientific_upper})",
                'format', 'scientific_lower'
            )

        if not isinstance(self.mantissa_digits, int) or not 0 <= self.mantissa_digits <= 20:
            raise ConfigurationError(f"mantissa_digits must be an integer in [0, 20], "
                                     f"got {self.mantissa_digits!r}", 'format', 'mantissa_digits')

        if not isinstance(self.significant_digits, int) or not 1 <= self.significant_digits <= 17:
            raise ConfigurationError(f"significant_digits must be an integer in [1, 17], "
                                     f"got {self.significant_digits!r}", 'format', 'significant_digits')

        return True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FormatSettings':
        """Build settings from a mapping, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown format settings: {', '.join(unknown)}",
                                     'format', unknown[0])
        return cls(**data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'FormatSettings':
        """
        Load settings from a JSON file

        The file may hold the settings at top level or under a ``format`` key.
        """
        config_path = Path(path)
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file '{config_path}': {e}", 'format')
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in '{config_path}': {e}", 'format')

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in '{config_path}' must be a JSON object", 'format')

        return cls.from_dict(data.get('format', data))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_FORMAT_SETTINGS = FormatSettings()
