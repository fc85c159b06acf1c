"""Tests for trailing trade selection and VWAP"""

from datetime import timedelta

import pytest

from sss_app.metrics.vwap import calculate_vwap, select_trailing_trades
from sss_app.models.trade import TradeRecord, TradeSide


def make_trade(ts, symbol="TEA", quantity=10, price=1.0, side=TradeSide.BUY):
    return TradeRecord(timestamp=ts, symbol=symbol, side=side, quantity=quantity, price=price)


class TestCalculateVWAP:

    def test_vwap_basic(self, fixed_now):
        trades = [make_trade(fixed_now, quantity=10, price=100.0),
                  make_trade(fixed_now, quantity=30, price=80.0)]
        assert calculate_vwap(trades) == pytest.approx(85.0)

    def test_vwap_single_trade(self, fixed_now):
        assert calculate_vwap([make_trade(fixed_now, quantity=7, price=1.23)]) == pytest.approx(1.23)

    def test_vwap_no_trades(self):
        assert calculate_vwap([]) is None

    def test_vwap_zero_quantity(self, fixed_now):
        assert calculate_vwap([make_trade(fixed_now, quantity=0, price=5.0)]) is None

    def test_vwap_ignores_side(self, fixed_now):
        trades = [make_trade(fixed_now, quantity=10, price=2.0, side=TradeSide.BUY),
                  make_trade(fixed_now, quantity=10, price=4.0, side=TradeSide.SELL)]
        assert calculate_vwap(trades) == pytest.approx(3.0)


class TestSelectTrailingTrades:

    def test_filters_symbol_and_window(self, fixed_now):
        recent_tea = make_trade(fixed_now - timedelta(minutes=1))
        old_tea = make_trade(fixed_now - timedelta(minutes=20))
        recent_pop = make_trade(fixed_now - timedelta(minutes=1), symbol="POP")

        selected = select_trailing_trades([recent_tea, old_tea, recent_pop], "TEA", 900, fixed_now)

        assert selected == [recent_tea]

    def test_preserves_order(self, fixed_now):
        trades = [make_trade(fixed_now - timedelta(seconds=s), price=float(s)) for s in (5, 50, 1)]
        selected = select_trailing_trades(trades, "TEA", 60, fixed_now)
        assert [t.price for t in selected] == [5.0, 50.0, 1.0]

    def test_future_trades_are_included(self, fixed_now):
        future = make_trade(fixed_now + timedelta(seconds=30))
        assert select_trailing_trades([future], "TEA", 900, fixed_now) == [future]

    def test_zero_window_keeps_only_current(self, fixed_now):
        now_trade = make_trade(fixed_now)
        earlier = make_trade(fixed_now - timedelta(seconds=1))
        assert select_trailing_trades([now_trade, earlier], "TEA", 0, fixed_now) == [now_trade]
