"""Trade records stored in the ledger"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ..utils.time import format_trade_time


class TradeSide(Enum):
    """Direction of a trade."""
    BUY = "buy"
    SELL = "sell"

    @classmethod
    def parse(cls, value: "str | TradeSide") -> "TradeSide":
        """Accept an enum member or its case-insensitive name/value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown trade side: {value!r}") from None

    @property
    def verb(self) -> str:
        return "BOUGHT" if self is TradeSide.BUY else "SOLD"


@dataclass(frozen=True)
class TradeRecord:
    """Immutable record of one executed trade."""
    timestamp: datetime     # UTC time the trade was recorded
    symbol: str             # Instrument identifier, not an ownership link
    side: TradeSide
    quantity: int           # Shares
    price: float            # Price per share

    @property
    def notional(self) -> float:
        """Traded value, quantity times price."""
        return self.quantity * self.price

    def describe(self, precision: int = 2, local_time: bool = True) -> str:
        """Render the record as a console history line."""
        return (
            f"[{format_trade_time(self.timestamp, local=local_time)}] "
            f"{self.side.verb} {self.quantity} shares of {self.symbol} "
            f"at {self.price:.{precision}f}"
        )
