"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from sss_app.data.ledger import Ledger
from sss_app.market import MarketIndex
from sss_app.models.instrument import Instrument
from sss_app.models.terms import CommonTerms, PreferredTerms


@pytest.fixture
def fixed_now() -> datetime:
    """Pinned current time for trailing-window tests."""
    return datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def ledger() -> Ledger:
    return Ledger()


@pytest.fixture
def market() -> MarketIndex:
    """Market built from the default five-stock seed list."""
    return MarketIndex.create()


@pytest.fixture
def common_stock() -> Instrument:
    return Instrument("POP", last_dividend=0.08, par_value=1.00, terms=CommonTerms())


@pytest.fixture
def preferred_stock() -> Instrument:
    return Instrument("GIN", last_dividend=0.08, par_value=1.00,
                      terms=PreferredTerms(fixed_dividend_rate=2.0))


@pytest.fixture
def minutes_ago(fixed_now):
    """Factory returning a timestamp the given number of minutes before fixed_now."""
    def _minutes_ago(minutes: float) -> datetime:
        return fixed_now - timedelta(minutes=minutes)
    return _minutes_ago
