"""
System failure errors for unrecoverable conditions.

These represent broken static data or configuration and require fixing
the inputs before the market can be built.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InstrumentDefinitionError(SystemFailureError):
    """Instrument seed data is invalid or inconsistent."""

    def __init__(self, message: str, symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
