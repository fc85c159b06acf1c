"""Append-only trade ledger shared by all instruments."""

import threading
from collections.abc import Iterator
from datetime import datetime
from typing import Optional

from ..errors import TradeValidationError
from ..logging.config import get_ledger_logger, log_trade_recorded
from ..models.trade import TradeRecord, TradeSide
from ..utils.time import utc_now
from .validators import validate_trade_params

logger = get_ledger_logger(__name__)


class Ledger:
    """
    Insertion-ordered history of every trade in the process.

    Records are never mutated or removed. Filtering by symbol happens at
    read time, there are no per-instrument sub-ledgers.
    """

    def __init__(self):
        self.logger = logger
        self._records: list[TradeRecord] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[TradeRecord]:
        return iter(self.records())

    def append(self, symbol: str, side: "str | TradeSide", quantity: int, price: float,
               timestamp: Optional[datetime] = None) -> TradeRecord:
        """
        Validate and record a trade.

        Args:
            symbol: Instrument identifier
            side: Buy or sell
            quantity: Number of shares
            price: Price per share
            timestamp: Trade time, now if omitted

        Returns:
            The recorded trade

        Raises:
            TradeValidationError: If the parameters are invalid
        """
        validate_trade_params(symbol, quantity, price)
        try:
            trade_side = TradeSide.parse(side)
        except ValueError as e:
            raise TradeValidationError(str(e), field="side", value=side) from e
        if timestamp is not None and not isinstance(timestamp, datetime):
            raise TradeValidationError("Timestamp must be a datetime", field="timestamp", value=timestamp)

        record = TradeRecord(
            timestamp=utc_now(timestamp),
            symbol=symbol,
            side=trade_side,
            quantity=quantity,
            price=float(price),
        )

        with self._lock:
            self._records.append(record)
            size = len(self._records)

        log_trade_recorded(
            self.logger,
            symbol=symbol,
            side=trade_side.value,
            quantity=quantity,
            price=record.price,
            ledger_size=size,
        )

        return record

    def records(self) -> tuple[TradeRecord, ...]:
        """Snapshot of all trades in insertion order."""
        with self._lock:
            return tuple(self._records)
