"""
Error classification for the reference market.

Validation problems with caller input are recoverable and are translated
into boolean or sentinel results at the market boundary. Definition and
configuration problems are unrecoverable and propagate.
"""

from .market import (
    MarketError,
    TradeValidationError,
    UnknownSymbolError,
)
from .system_failures import (
    ConfigurationError,
    SystemFailureError,
    InstrumentDefinitionError,
)

__all__ = [
    # Recoverable input errors
    "MarketError",
    "TradeValidationError",
    "UnknownSymbolError",
    # Unrecoverable failures
    "SystemFailureError",
    "ConfigurationError",
    "InstrumentDefinitionError",
]
