"""Random demo trades for exercising the market without manual input."""

import random
from typing import TYPE_CHECKING, Optional

from .config.defaults import SimulationParams
from .logging.config import get_logger
from .models.trade import TradeSide

if TYPE_CHECKING:
    from .market import MarketIndex

logger = get_logger(__name__)


class RandomTradeGenerator:
    """Generates random trade parameters within configured bounds."""

    def __init__(self, params: Optional[SimulationParams] = None,
                 rng: Optional[random.Random] = None):
        self.params = params or SimulationParams()
        self.rng = rng or random.Random()

    def generate(self) -> tuple[TradeSide, int, float]:
        """
        Draw one random trade.

        Returns:
            (side, quantity, price) with quantity in [min_quantity, max_quantity]
            and price base_price plus a whole number of ticks below price_steps
        """
        side = TradeSide.BUY if self.rng.random() < 0.5 else TradeSide.SELL
        quantity = self.rng.randint(self.params.min_quantity, self.params.max_quantity)
        ticks = self.rng.randrange(self.params.price_steps)
        price = round(self.params.base_price + ticks * self.params.price_tick, 2)
        return side, quantity, price

    def populate(self, index: "MarketIndex") -> int:
        """Submit one random trade per listed instrument, returns the number recorded."""
        recorded = 0
        for instrument in index.instruments():
            side, quantity, price = self.generate()
            if index.submit_trade(instrument.symbol, side, quantity, price):
                recorded += 1

        logger.info("Random trades generated", recorded=recorded, ledger_size=index.trade_count())
        return recorded
