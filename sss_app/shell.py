"""
Interactive command shell for the reference market.

A thin loop that splits each input line on whitespace and dispatches to
the MarketIndex public interface. All state lives in the index.

Run: sss [--config-dir DIR] [--log-level LEVEL] [--seed N]
"""

import argparse
import random
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from .config.defaults import DisplayParams
from .config.loader import ConfigLoader
from .errors import ConfigurationError
from .logging.config import configure_logging, get_logger
from .market import MarketIndex
from .models.terms import StockClass
from .models.trade import TradeSide
from .simulation import RandomTradeGenerator

logger = get_logger(__name__)

HELP_TEXT = """
COMMANDS:

    help   - Show this help.
    index  - Show the list of stock and the All-share index.
    trade  - Add random trading.
    buy    - Buy stock. eg. buy 22 ALE 3.12
    sell   - Sell stock. eg. sell 22 ALE 3.12
    list   - Show trading database.
    price  - Recalculate price of stock based on last 15 mins trade
    yield  - Show the dividend yield of all stock
    pe     - Show the P/E Ratio of all stock
    quit   - end the program
"""

TABLE_RULE = "=== ==== ======== ==== ======== ========"
TABLE_HEADER = "Sym Type Last Div Fix  PAR Val. T. Price"


class CommandShell:
    """Parses command lines and renders results of market operations."""

    def __init__(self, index: MarketIndex, generator: Optional[RandomTradeGenerator] = None,
                 out: Optional[TextIO] = None, display: Optional[DisplayParams] = None):
        self.index = index
        self.generator = generator or RandomTradeGenerator(index.config.simulation)
        self.out = out or sys.stdout
        self.display = display or index.config.display

        self.commands: dict[str, Callable[[list[str]], None]] = {
            "help": self.cmd_help,
            "index": self.cmd_index,
            "trade": self.cmd_trade,
            "buy": self.cmd_trade_side,
            "sell": self.cmd_trade_side,
            "list": self.cmd_list,
            "price": self.cmd_price,
            "yield": self.cmd_yield,
            "pe": self.cmd_pe,
        }

    def write(self, text: str = "") -> None:
        print(text, file=self.out)

    def _fmt(self, value: float) -> str:
        return f"{value:.{self.display.price_precision}f}"

    def execute(self, line: str) -> bool:
        """
        Execute one command line.

        Returns:
            False when the shell should stop, True otherwise
        """
        args = line.split()
        if not args:
            return True

        command = args[0]
        if command == "quit":
            return False

        handler = self.commands.get(command)
        if handler is None:
            self.write(f"ERROR: Unknown command {command}")
            return True

        logger.debug("Executing command", command=command, args=args[1:])
        handler(args)
        return True

    def run(self, stdin: Optional[TextIO] = None) -> None:
        """Read and execute commands until quit or end of input."""
        stdin = stdin or sys.stdin

        self.write()
        self.write("Super Simple Stocks")
        self.write()
        self.write("Use 'help' for instructions")
        self.write()

        while True:
            self.out.write("->")
            self.out.flush()
            line = stdin.readline()
            if not line:
                break
            if not self.execute(line):
                break

    def cmd_help(self, args: list[str]) -> None:
        self.write(HELP_TEXT)

    def cmd_index(self, args: list[str]) -> None:
        value = self.index.aggregate_index()
        self.write()
        self.write(f"GBCE Index {value:.{self.display.index_precision}f}")
        self.write()
        self.write(TABLE_RULE)
        self.write(TABLE_HEADER)
        self.write(TABLE_RULE)
        for instrument in self.index.instruments():
            kind = "PREF" if instrument.stock_class is StockClass.PREFERRED else "COMM"
            self.write(
                f"{instrument.symbol:>3} {kind:>4} "
                f"{self._fmt(instrument.last_dividend):>8} "
                f"{self._fmt(instrument.fixed_dividend_rate):>4} "
                f"{self._fmt(instrument.par_value):>8} "
                f"{self._fmt(instrument.price):>8}"
            )
        self.write()

    def cmd_trade(self, args: list[str]) -> None:
        self.generator.populate(self.index)
        self.write(f"Done. {self.index.trade_count()} trading operations in the database")

    def cmd_trade_side(self, args: list[str]) -> None:
        command = args[0]
        if len(args) < 4:
            self.write(f"ERROR: syntax is '{command} <quantity> <symbol> <price>'")
            return

        _, raw_quantity, symbol, raw_price = args[:4]
        if not self.index.exists(symbol):
            self.write(f"ERROR: Unknown symbol {symbol}")
            return

        try:
            quantity = int(raw_quantity)
            price = float(raw_price)
        except ValueError:
            self.write(f"ERROR: syntax is '{command} <quantity> <symbol> <price>'")
            return

        if self.index.submit_trade(symbol, TradeSide.parse(command), quantity, price):
            self.write(f"Done. {self.index.trade_count()} Trading operations in the database")
        else:
            self.write(f"ERROR: Cannot {command} {raw_quantity} shares of {symbol} at {raw_price}")

    def cmd_list(self, args: list[str]) -> None:
        trades = self.index.list_trades()
        for record in trades:
            self.write(record.describe(precision=self.display.price_precision))
        self.write()
        self.write(f"{len(trades)} trading operations in the database")

    def cmd_price(self, args: list[str]) -> None:
        for symbol, price in self.index.recompute_prices().items():
            self.write(f"Price of {symbol} is {self._fmt(price)}")

    def cmd_yield(self, args: list[str]) -> None:
        for symbol, value in self.index.dividend_yields().items():
            self.write(f"Dividend Yield of {symbol} is {self._fmt(value)}")

    def cmd_pe(self, args: list[str]) -> None:
        for symbol, value in self.index.pe_ratios().items():
            self.write(f"Price/Earnings Ratio of {symbol} is {self._fmt(value)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sss",
        description="Super Simple Stocks interactive market shell",
    )
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory containing market.yaml overrides")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Log level (default: WARNING)")
    parser.add_argument("--log-json", action="store_true",
                        help="Emit logs as JSON")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for random demo trades")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Console entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.log_json)

    try:
        config = ConfigLoader.create(args.config_dir).load_config()
    except ConfigurationError as e:
        for error in e.errors:
            logger.error("Invalid configuration value", field=error.field,
                         message=error.message, value=error.value)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    index = MarketIndex.create(config)
    generator = RandomTradeGenerator(config.simulation, rng=random.Random(args.seed))
    CommandShell(index, generator=generator).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
