"""
Configuration for ordinate conversion behaviour.

Controls the two places where the converter can either reproduce the
legacy latlng-formatter behaviour or use corrected behaviour, plus the
rounding applied to seconds.

Example YAML:

    converter:
      strict_compat: false
      negative_decimal_mode: magnitude
      seconds_precision: 3
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict
import logging

import yaml

logger = logging.getLogger(__name__)

CONFIG_SECTION = 'converter'

DEFAULT_SECONDS_PRECISION = 3
MAX_SECONDS_PRECISION = 12


class NegativeDecimalMode(Enum):
    """How decimal -> DMS splits a negative decimal ordinate."""

    MAGNITUDE = "magnitude"
    """Decompose the absolute value and restore the sign afterwards.
    -45.5 becomes -45° 30' 0", matching the sign convention of DMS -> decimal."""

    FLOOR = "floor"
    """Floor toward negative infinity, as legacy latlng-formatter does.
    -45.5 becomes -46° 30' 0", which does not convert back to -45.5."""


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration for an OrdinateConverter.

    Attributes:
        strict_compat: Treat zero minutes/seconds (and zero degrees) in DMS and
            GPS input as missing fields, like legacy latlng-formatter. Off by
            default, so 45° 30' 0" is a valid ordinate.
        negative_decimal_mode: Decomposition used for negative decimals in
            decimal -> DMS and decimal -> GPS.
        seconds_precision: Number of decimal places seconds are rounded to
            when converting from decimal.
    """
    strict_compat: bool = False
    negative_decimal_mode: NegativeDecimalMode = NegativeDecimalMode.MAGNITUDE
    seconds_precision: int = DEFAULT_SECONDS_PRECISION

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check field types and ranges.

        Raises:
            ValueError: If any field holds an invalid value
        """
        if not isinstance(self.strict_compat, bool):
            raise ValueError(
                f"'strict_compat' must be a boolean, got {type(self.strict_compat).__name__}"
            )
        if not isinstance(self.negative_decimal_mode, NegativeDecimalMode):
            raise ValueError(
                f"'negative_decimal_mode' must be a NegativeDecimalMode, "
                f"got {type(self.negative_decimal_mode).__name__}"
            )
        if isinstance(self.seconds_precision, bool) or not isinstance(self.seconds_precision, int):
            raise ValueError(
                f"'seconds_precision' must be an integer, got {type(self.seconds_precision).__name__}"
            )
        if not 0 <= self.seconds_precision <= MAX_SECONDS_PRECISION:
            raise ValueError(
                f"'seconds_precision' must be between 0 and {MAX_SECONDS_PRECISION}, "
                f"got {self.seconds_precision}"
            )

    @classmethod
    def from_yaml(cls, path: str) -> 'ConverterConfig':
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ConverterConfig instance loaded from file

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If configuration file is malformed or contains invalid values

        Example:
            >>> config = ConverterConfig.from_yaml('latlng.yaml')
            >>> print(config.negative_decimal_mode)
            NegativeDecimalMode.MAGNITUDE
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a '{CONFIG_SECTION}' section"
            )

        if not isinstance(data, dict) or CONFIG_SECTION not in data:
            raise ValueError(
                f"Configuration file missing '{CONFIG_SECTION}' section: {path}\n"
                f"Expected structure: {CONFIG_SECTION}:\n  strict_compat: ...\n  ..."
            )

        logger.debug(f"Loaded converter configuration from {config_path}")
        return cls.from_dict(data[CONFIG_SECTION] or {})

    @staticmethod
    def _parse_negative_decimal_mode(mode_str: str) -> NegativeDecimalMode:
        """Parse a mode string into NegativeDecimalMode enum.

        Raises:
            ValueError: If mode_str is not a valid mode
        """
        try:
            return NegativeDecimalMode(mode_str)
        except ValueError:
            valid_modes = [m.value for m in NegativeDecimalMode]
            raise ValueError(
                f"Invalid negative_decimal_mode '{mode_str}'. "
                f"Must be one of: {', '.join(valid_modes)}"
            ) from None

    @classmethod
    def from_dict(cls, config: dict) -> 'ConverterConfig':
        """Create configuration from dictionary.

        Args:
            config: Dictionary with any of the keys 'strict_compat',
                'negative_decimal_mode' and 'seconds_precision'. Missing keys
                take their defaults.

        Returns:
            ConverterConfig instance

        Raises:
            ValueError: If configuration is invalid or contains unknown keys

        Example:
            >>> config = ConverterConfig.from_dict({'strict_compat': True})
            >>> config.strict_compat
            True
        """
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a dictionary, got {type(config)}")

        known_keys = {'strict_compat', 'negative_decimal_mode', 'seconds_precision'}
        unknown_keys = set(config) - known_keys
        if unknown_keys:
            raise ValueError(
                f"Unknown configuration keys: {', '.join(sorted(unknown_keys))}. "
                f"Allowed keys: {', '.join(sorted(known_keys))}"
            )

        kwargs: Dict[str, Any] = {}
        if 'strict_compat' in config:
            kwargs['strict_compat'] = config['strict_compat']
        if 'negative_decimal_mode' in config:
            kwargs['negative_decimal_mode'] = cls._parse_negative_decimal_mode(
                config['negative_decimal_mode']
            )
        if 'seconds_precision' in config:
            kwargs['seconds_precision'] = config['seconds_precision']

        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary suitable for YAML serialization."""
        return {
            'strict_compat': self.strict_compat,
            'negative_decimal_mode': self.negative_decimal_mode.value,
            'seconds_precision': self.seconds_precision,
        }

    def save_to_yaml(self, path: str) -> None:
        """Save configuration to YAML file.

        Args:
            path: Path where configuration file should be written

        Raises:
            IOError: If file cannot be written
        """
        config_path = Path(path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Wrap in section for consistency with from_yaml
        output = {CONFIG_SECTION: self.to_dict()}

        try:
            with open(config_path, 'w') as f:
                yaml.safe_dump(output, f, default_flow_style=False, sort_keys=False)
        except IOError as e:
            raise IOError(f"Failed to write configuration file: {e}") from e

        logger.info(f"Saved converter configuration to {config_path}")


def get_default_config() -> ConverterConfig:
    """Return the default configuration (corrected behaviour, 3-place seconds)."""
    return ConverterConfig()
