"""
Trade parameter validation.

Checks applied before a trade is appended to the ledger. Symbol
existence is not checked here; that is the registry's concern.
"""

import math
from typing import Any

from ..errors import TradeValidationError


def validate_trade_params(symbol: Any, quantity: Any, price: Any) -> None:
    """
    Validate trade parameters.

    Args:
        symbol: Instrument identifier
        quantity: Number of shares, non-negative integer
        price: Price per share, non-negative finite number

    Raises:
        TradeValidationError: If any parameter is invalid
    """
    if not isinstance(symbol, str) or not symbol:
        raise TradeValidationError("Symbol must be a non-empty string", field="symbol", value=symbol)

    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise TradeValidationError("Quantity must be an integer", field="quantity", value=quantity)

    if quantity < 0:
        raise TradeValidationError("Quantity must be non-negative", field="quantity", value=quantity)

    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise TradeValidationError("Price must be a number", field="price", value=price)

    if not math.isfinite(price):
        raise TradeValidationError("Price must be finite", field="price", value=price)

    if price < 0:
        raise TradeValidationError("Price must be non-negative", field="price", value=price)
