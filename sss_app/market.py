"""
GBCE all-share market registry.

Owns the fixed set of listed instruments and the shared trade ledger, and
coordinates trade submission, trailing price recomputation and the
aggregate index.
"""

import threading
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from .config.defaults import DefaultConfig, InstrumentSeed, get_default_config
from .data.ledger import Ledger
from .errors import InstrumentDefinitionError, MarketError, UnknownSymbolError
from .logging.config import get_ledger_logger, get_logger
from .metrics.index import calculate_geometric_index
from .models.instrument import Instrument
from .models.terms import terms_for
from .models.trade import TradeRecord, TradeSide
from .utils.time import utc_now

logger = get_logger(__name__)
ledger_logger = get_ledger_logger(__name__)


def build_instruments(seeds: Iterable[InstrumentSeed]) -> list[Instrument]:
    """Create instruments from static seed definitions."""
    instruments = []
    for seed in seeds:
        try:
            terms = terms_for(seed.stock_class, seed.fixed_dividend_rate)
        except ValueError as e:
            raise InstrumentDefinitionError(
                f"Unknown stock class {seed.stock_class!r}", symbol=seed.symbol
            ) from e
        instruments.append(Instrument(
            symbol=seed.symbol,
            last_dividend=seed.last_dividend,
            par_value=seed.par_value,
            terms=terms,
        ))
    return instruments


class MarketIndex:
    """
    Registry of listed instruments sharing one trade ledger.

    Every public operation runs under a single re-entrant lock so a price
    recomputation never interleaves with a trade submission.
    """

    def __init__(self, instruments: Iterable[Instrument], ledger: Optional[Ledger] = None,
                 config: Optional[DefaultConfig] = None) -> None:
        self.logger = logger
        self.ledger_logger = ledger_logger
        self.config = config or get_default_config()
        self.ledger = ledger if ledger is not None else Ledger()
        self._lock = threading.RLock()

        self._instruments: dict[str, Instrument] = {}
        for instrument in instruments:
            if instrument.symbol in self._instruments:
                raise InstrumentDefinitionError(
                    f"Duplicate symbol {instrument.symbol}", symbol=instrument.symbol
                )
            self._instruments[instrument.symbol] = instrument

        self.logger.info(
            "Market index initialized",
            symbols=list(self._instruments),
            window_seconds=self.config.pricing.window_seconds,
        )

    @classmethod
    def create(cls, config: Optional[DefaultConfig] = None,
               ledger: Optional[Ledger] = None) -> "MarketIndex":
        """Build the index from the configured instrument seed list."""
        config = config or get_default_config()
        return cls(build_instruments(config.instruments), ledger=ledger, config=config)

    def __len__(self) -> int:
        return len(self._instruments)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._instruments

    def exists(self, symbol: str) -> bool:
        """True if the symbol is listed."""
        return symbol in self._instruments

    def lookup(self, symbol: str) -> Optional[Instrument]:
        """Listed instrument for the symbol, None if unknown."""
        return self._instruments.get(symbol)

    def get(self, symbol: str) -> Instrument:
        """
        Listed instrument for the symbol.

        Raises:
            UnknownSymbolError: If the symbol is not listed
        """
        instrument = self._instruments.get(symbol)
        if instrument is None:
            raise UnknownSymbolError(symbol)
        return instrument

    def instruments(self) -> tuple[Instrument, ...]:
        """All listed instruments in listing order."""
        return tuple(self._instruments.values())

    def submit_trade(self, symbol: str, side: "str | TradeSide", quantity: int, price: float,
                     timestamp: Optional[datetime] = None) -> bool:
        """
        Record a trade in the shared ledger.

        Args:
            symbol: Listed instrument identifier
            side: Buy or sell
            quantity: Number of shares, non-negative
            price: Price per share, non-negative
            timestamp: Trade time, now if omitted

        Returns:
            True if recorded, False if rejected (ledger unchanged)
        """
        with self._lock:
            try:
                if symbol and not self.exists(symbol):
                    raise UnknownSymbolError(symbol)
                self.ledger.append(symbol, side, quantity, price, timestamp=timestamp)
            except MarketError as e:
                self.ledger_logger.warning(
                    "Trade rejected",
                    symbol=symbol,
                    side=getattr(side, "value", side),
                    quantity=quantity,
                    price=price,
                    reason=str(e),
                    field=getattr(e, "field", "symbol"),
                )
                return False

        return True

    def list_trades(self) -> tuple[TradeRecord, ...]:
        """Full trade history in submission order."""
        return self.ledger.records()

    def trade_count(self) -> int:
        """Number of trades recorded so far."""
        with self._lock:
            return len(self.ledger)

    def _resolve(self, instrument: "str | Instrument") -> Instrument:
        if isinstance(instrument, Instrument):
            return instrument
        return self.get(instrument)

    def recompute_price(self, instrument: "str | Instrument", window_seconds: Optional[float] = None,
                        now: Optional[datetime] = None) -> float:
        """
        Recompute one instrument's price from trades in the trailing window.

        Args:
            instrument: Instrument or its symbol
            window_seconds: Trailing window, configured default if omitted
            now: Current time, wall clock if omitted

        Returns:
            The resulting price
        """
        if window_seconds is None:
            window_seconds = self.config.pricing.window_seconds

        with self._lock:
            return self._resolve(instrument).recompute_price(self.ledger, window_seconds, now=now)

    def recompute_prices(self, window_seconds: Optional[float] = None,
                         now: Optional[datetime] = None) -> dict[str, float]:
        """Recompute every instrument's price against the same point in time."""
        now = utc_now(now)
        with self._lock:
            return {
                symbol: self.recompute_price(instrument, window_seconds, now=now)
                for symbol, instrument in self._instruments.items()
            }

    def dividend_yield(self, instrument: "str | Instrument") -> float:
        with self._lock:
            return self._resolve(instrument).dividend_yield()

    def pe_ratio(self, instrument: "str | Instrument") -> float:
        with self._lock:
            return self._resolve(instrument).pe_ratio()

    def dividend_yields(self) -> dict[str, float]:
        """Dividend yield of every instrument."""
        with self._lock:
            return {symbol: inst.dividend_yield() for symbol, inst in self._instruments.items()}

    def pe_ratios(self) -> dict[str, float]:
        """Price/Earnings ratio of every instrument."""
        with self._lock:
            return {symbol: inst.pe_ratio() for symbol, inst in self._instruments.items()}

    def aggregate_index(self) -> float:
        """GBCE all-share index, the geometric mean of all current prices."""
        with self._lock:
            return calculate_geometric_index(inst.price for inst in self._instruments.values())
