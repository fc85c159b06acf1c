"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    DefaultConfig,
    DisplayParams,
    PricingParams,
    SimulationParams,
    get_default_config,
)
from .validation import ConfigValidator

# Sections that may be overridden from file or per call
MERGEABLE_SECTIONS = ("pricing", "simulation", "display")


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_market_config(self) -> dict[str, Any]:
        """Load file-level overrides from market.yaml, empty if absent."""
        market_file = self.config_dir / "market.yaml"

        if not market_file.exists():
            return {}

        with open(market_file) as f:
            market_config = yaml.safe_load(f) or {}

        if not isinstance(market_config, dict):
            raise ConfigurationError(
                "market.yaml must contain a mapping",
                context={"path": str(market_file)}
            )

        return {key: value for key, value in market_config.items() if key in MERGEABLE_SECTIONS and value is not None}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. market.yaml overrides
        3. Global defaults (lowest priority)
        """
        config = {
            section: self._dataclass_to_dict(getattr(self.defaults, section))
            for section in MERGEABLE_SECTIONS
        }

        config = self._deep_merge(config, self.load_market_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and build a typed configuration."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {len(errors)} error(s)",
                errors=errors
            )

        try:
            return DefaultConfig(
                pricing=PricingParams(**config["pricing"]),
                simulation=SimulationParams(**config["simulation"]),
                display=DisplayParams(**config["display"]),
                instruments=self.defaults.instruments,
            )
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}") from e

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
