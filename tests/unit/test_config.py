"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from sss_app.config.defaults import DEFAULT_INSTRUMENTS, get_default_config
from sss_app.config.loader import ConfigLoader
from sss_app.config.validation import ConfigValidator
from sss_app.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()
        assert config.pricing.window_seconds == 900
        assert config.simulation.max_quantity == 109
        assert config.display.index_precision == 4
        assert config.instruments == DEFAULT_INSTRUMENTS

    def test_default_seed_list(self) -> None:
        symbols = [seed.symbol for seed in DEFAULT_INSTRUMENTS]
        assert symbols == ["TEA", "POP", "ALE", "GIN", "JOE"]
        preferred = [seed for seed in DEFAULT_INSTRUMENTS if seed.stock_class == "preferred"]
        assert [seed.symbol for seed in preferred] == ["GIN"]
        assert preferred[0].fixed_dividend_rate == 2.0


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["pricing"]["window_seconds"] == 900
        assert config["simulation"]["base_price"] == 0.41
        assert "instruments" not in config

    def test_merge_config_from_file(self, tmp_path) -> None:
        (tmp_path / "market.yaml").write_text(
            "pricing:\n  window_seconds: 300\nunrelated:\n  key: 1\n"
        )
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["pricing"]["window_seconds"] == 300
        assert "unrelated" not in config

    def test_merge_config_with_overrides(self, tmp_path) -> None:
        (tmp_path / "market.yaml").write_text("pricing:\n  window_seconds: 300\n")
        overrides = {"pricing": {"window_seconds": 60}, "display": {"price_precision": 3}}

        config = ConfigLoader.create(tmp_path).merge_config(overrides)

        assert config["pricing"]["window_seconds"] == 60
        assert config["display"]["price_precision"] == 3
        # Other defaults should remain
        assert config["display"]["index_precision"] == 4

    def test_empty_file(self, tmp_path) -> None:
        (tmp_path / "market.yaml").write_text("")
        config = ConfigLoader.create(tmp_path).merge_config()
        assert config["pricing"]["window_seconds"] == 900

    def test_non_mapping_file(self, tmp_path) -> None:
        (tmp_path / "market.yaml").write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).merge_config()

    def test_load_config_typed(self, tmp_path) -> None:
        (tmp_path / "market.yaml").write_text("simulation:\n  max_quantity: 50\n")
        config = ConfigLoader.create(tmp_path).load_config({"pricing": {"window_seconds": 120}})

        assert config.simulation.max_quantity == 50
        assert config.pricing.window_seconds == 120
        assert config.instruments == DEFAULT_INSTRUMENTS

    def test_load_config_invalid_value(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load_config({"pricing": {"window_seconds": -5}})

        assert exc_info.value.errors[0].field == "window_seconds"
        assert exc_info.value.recoverable is False

    def test_load_config_scalar_section(self, tmp_path) -> None:
        (tmp_path / "market.yaml").write_text("pricing: 900\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load_config()

        assert [(e.field, e.value) for e in exc_info.value.errors] == [("pricing", 900)]

    def test_load_config_unknown_key(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load_config({"pricing": {"window_minutes": 5}})

    def test_repository_config_is_valid(self) -> None:
        config = ConfigLoader.create().load_config()
        assert config.pricing.window_seconds == 900


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_pricing_params(self) -> None:
        assert ConfigValidator.validate_pricing_params({"window_seconds": 900}) == []
        assert ConfigValidator.validate_pricing_params({"window_seconds": 0}) == []

    @pytest.mark.parametrize("value", [-1, "900", True, None])
    def test_invalid_window(self, value) -> None:
        errors = ConfigValidator.validate_pricing_params({"window_seconds": value})
        assert len(errors) == 1
        assert errors[0].field == "window_seconds"

    def test_invalid_quantity_range(self) -> None:
        errors = ConfigValidator.validate_simulation_params({"min_quantity": 10, "max_quantity": 5})
        assert [e.field for e in errors] == ["max_quantity"]

    def test_invalid_simulation_values(self) -> None:
        errors = ConfigValidator.validate_simulation_params({
            "min_quantity": 0,
            "price_steps": 2.5,
            "base_price": -0.1,
        })
        assert {e.field for e in errors} == {"min_quantity", "price_steps", "base_price"}

    def test_invalid_display_precision(self) -> None:
        errors = ConfigValidator.validate_display_params({"price_precision": -1})
        assert errors[0].field == "price_precision"

    def test_validate_config(self) -> None:
        errors = ConfigValidator.validate_config({
            "pricing": {"window_seconds": -1},
            "display": {"index_precision": "four"},
        })
        assert {e.field for e in errors} == {"window_seconds", "index_precision"}

    def test_validate_config_non_mapping_section(self) -> None:
        errors = ConfigValidator.validate_config({
            "pricing": [900],
            "simulation": "fast",
            "display": {"price_precision": -1},
        })
        assert [(e.field, e.message) for e in errors] == [
            ("pricing", "Must be a mapping"),
            ("simulation", "Must be a mapping"),
            ("price_precision", "Must be a non-negative integer"),
        ]
