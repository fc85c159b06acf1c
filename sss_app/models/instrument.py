"""
Listed instrument with its dividend metrics and trailing price.

Identity and dividend terms are fixed at construction. The current price
starts at par value and only moves through recompute_price.
"""

import math
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from ..errors import InstrumentDefinitionError
from ..logging.config import get_pricing_logger, log_price_update
from ..metrics.dividends import calculate_dividend_yield, calculate_pe_ratio
from ..metrics.vwap import calculate_vwap, select_trailing_trades
from ..utils.time import utc_now
from .terms import CommonTerms, DividendTerms, PreferredTerms, StockClass

if TYPE_CHECKING:
    from ..data.ledger import Ledger

pricing_logger = get_pricing_logger(__name__)


class Instrument:
    """A stock in the index."""

    __slots__ = ("_symbol", "_last_dividend", "_par_value", "_terms", "_price")

    def __init__(self, symbol: str, last_dividend: float, par_value: float,
                 terms: Optional[DividendTerms] = None):
        terms = terms if terms is not None else CommonTerms()

        if not symbol:
            raise InstrumentDefinitionError("Instrument symbol must not be empty", symbol=symbol)
        if not math.isfinite(last_dividend) or last_dividend < 0:
            raise InstrumentDefinitionError(
                "Last dividend must be non-negative", symbol=symbol,
                context={"last_dividend": last_dividend}
            )
        if not math.isfinite(par_value) or par_value <= 0:
            raise InstrumentDefinitionError(
                "Par value must be positive", symbol=symbol,
                context={"par_value": par_value}
            )
        if isinstance(terms, PreferredTerms) and terms.fixed_dividend_rate < 0:
            raise InstrumentDefinitionError(
                "Fixed dividend rate must be non-negative", symbol=symbol,
                context={"fixed_dividend_rate": terms.fixed_dividend_rate}
            )

        self._symbol = symbol
        self._last_dividend = float(last_dividend)
        self._par_value = float(par_value)
        self._terms = terms
        self._price = float(par_value)

    def __repr__(self) -> str:
        return (f"Instrument(symbol={self._symbol!r}, class={self.stock_class.value}, "
                f"price={self._price!r})")

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def last_dividend(self) -> float:
        return self._last_dividend

    @property
    def par_value(self) -> float:
        return self._par_value

    @property
    def terms(self) -> DividendTerms:
        return self._terms

    @property
    def stock_class(self) -> StockClass:
        return self._terms.stock_class

    @property
    def fixed_dividend_rate(self) -> float:
        """Fixed rate in percent, 0 for common stock."""
        return self._terms.fixed_dividend_rate

    @property
    def price(self) -> float:
        """Current trading price."""
        return self._price

    def dividend_yield(self) -> float:
        """Dividend yield at the current price, 0.0 if price is zero."""
        return calculate_dividend_yield(self._terms, self._last_dividend, self._par_value, self._price)

    def pe_ratio(self) -> float:
        """Price/Earnings ratio, 0.0 if no dividend was declared."""
        return calculate_pe_ratio(self._price, self._last_dividend)

    def recompute_price(self, ledger: "Ledger", window_seconds: float,
                        now: Optional[datetime] = None) -> float:
        """
        Set the price to the volume weighted price of recent trades.

        Args:
            ledger: Shared trade ledger to scan
            window_seconds: Trailing window; trades at most this old count
            now: Current time, wall clock if omitted

        Returns:
            The resulting price, unchanged when no trades fall in the window
        """
        now = utc_now(now)
        trades = select_trailing_trades(ledger.records(), self._symbol, window_seconds, now)
        vwap = calculate_vwap(trades)

        old_price = self._price
        if vwap is not None:
            self._price = vwap

        log_price_update(
            pricing_logger,
            symbol=self._symbol,
            old_price=old_price,
            new_price=self._price,
            trade_count=len(trades) if vwap is not None else 0,
            window_seconds=window_seconds,
        )

        return self._price

    def snapshot(self) -> dict[str, Any]:
        """Current state for display and logging."""
        return {
            "symbol": self._symbol,
            "stock_class": self.stock_class.value,
            "last_dividend": self._last_dividend,
            "fixed_dividend_rate": self.fixed_dividend_rate,
            "par_value": self._par_value,
            "price": self._price,
        }
