"""Trailing-window volume weighted price"""

from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from ..models.trade import TradeRecord
from ..utils.time import within_window


def select_trailing_trades(records: Iterable[TradeRecord], symbol: str,
                           window_seconds: float, now: datetime) -> list[TradeRecord]:
    """
    Select the trades of one symbol recorded within the trailing window.

    A trade is inside the window when now - timestamp <= window_seconds.
    Order of the input is preserved.
    """
    return [
        record for record in records
        if record.symbol == symbol and within_window(record.timestamp, window_seconds, now)
    ]


def calculate_vwap(records: Iterable[TradeRecord]) -> Optional[float]:
    """
    Calculate volume weighted average price

    VWAP = sum(price * quantity) / sum(quantity)

    Args:
        records: Trades to average

    Returns:
        VWAP or None if there are no trades or no traded quantity
    """
    total_value = 0.0
    total_quantity = 0

    for record in records:
        total_value += record.notional
        total_quantity += record.quantity

    if total_quantity <= 0:
        return None

    return total_value / total_quantity
