#!/usr/bin/env python3
"""
Basic Usage Example - Super Simple Stocks

This script demonstrates the library API of the reference market:
- Build the market from the default seed list
- Record trades against listed stocks
- Recompute trailing prices
- Read dividend yield, P/E ratio and the GBCE all-share index

Run: python examples/basic_usage.py
"""

from datetime import datetime, timedelta, timezone

from sss_app.logging.config import configure_logging
from sss_app.market import MarketIndex


def print_metrics(market: MarketIndex) -> None:
    """Print the per-stock metrics table."""
    yields = market.dividend_yields()
    ratios = market.pe_ratios()
    for instrument in market.instruments():
        print(f"   {instrument.symbol}: price={instrument.price:.2f} "
              f"yield={yields[instrument.symbol]:.4f} pe={ratios[instrument.symbol]:.2f}")


def main():
    """Walk through a trading session."""
    configure_logging(level="WARNING")

    print("1. Building market from seed list...")
    market = MarketIndex.create()
    print(f"   GBCE index at par: {market.aggregate_index():.4f}")
    print_metrics(market)
    print()

    now = datetime.now(timezone.utc)
    trades = [
        ("ALE", "buy", 100, 0.65, now - timedelta(minutes=1)),
        ("ALE", "sell", 50, 0.70, now - timedelta(minutes=4)),
        ("JOE", "buy", 20, 2.80, now - timedelta(minutes=2)),
        ("JOE", "buy", 10, 9.99, now - timedelta(minutes=30)),   # Outside the window
        ("GIN", "sell", 5, 1.10, now),
    ]

    print("2. Recording trades...")
    for symbol, side, quantity, price, timestamp in trades:
        market.submit_trade(symbol, side, quantity, price, timestamp=timestamp)
    print(f"   {len(market.list_trades())} trades recorded")

    print("3. Rejected trades leave the ledger untouched...")
    print(f"   negative quantity accepted: {market.submit_trade('TEA', 'buy', -5, 1.0)}")
    print(f"   unknown symbol accepted:    {market.submit_trade('XYZ', 'buy', 5, 1.0)}")
    print(f"   {len(market.list_trades())} trades recorded")
    print()

    print("4. Recomputing prices over the last 15 minutes...")
    for symbol, price in market.recompute_prices(now=now).items():
        print(f"   {symbol}: {price:.4f}")
    print()

    print("5. Metrics after trading:")
    print_metrics(market)
    print(f"   GBCE index: {market.aggregate_index():.4f}")
    print()

    print("6. Trade history:")
    for record in market.list_trades():
        print(f"   {record.describe()}")


if __name__ == "__main__":
    main()
