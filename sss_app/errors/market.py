"""
Recoverable market errors.

Raised while validating caller input for trades and lookups. The market
boundary catches these and reports a failed operation instead.
"""

from typing import Any, Optional


class MarketError(Exception):
    """Base class for market input issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TradeValidationError(MarketError):
    """Trade parameters failed validation."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class UnknownSymbolError(MarketError):
    """Symbol is not listed in the index."""

    def __init__(self, symbol: str, **kwargs):
        super().__init__(f"Unknown symbol {symbol}", **kwargs)
        self.symbol = symbol
