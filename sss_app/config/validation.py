"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_pricing_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trailing price parameters."""
        errors = []

        if "window_seconds" in params:
            value = params["window_seconds"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="window_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_simulation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate random trade parameters."""
        errors = []

        for name in ("min_quantity", "max_quantity", "price_steps"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        min_qty = params.get("min_quantity")
        max_qty = params.get("max_quantity")
        if isinstance(min_qty, int) and isinstance(max_qty, int) and min_qty > max_qty:
            errors.append(ValidationError(
                field="max_quantity",
                message="Must be greater than or equal to min_quantity",
                value=max_qty
            ))

        for name in ("base_price", "price_tick"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate console output parameters."""
        errors = []

        for name in ("price_precision", "index_precision"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        section_validators = {
            "pricing": ConfigValidator.validate_pricing_params,
            "simulation": ConfigValidator.validate_simulation_params,
            "display": ConfigValidator.validate_display_params,
        }

        for section, validate in section_validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
