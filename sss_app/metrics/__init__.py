"""Metrics calculations for instruments and the all-share index"""

from .dividends import calculate_dividend_yield, calculate_pe_ratio
from .index import calculate_geometric_index
from .vwap import calculate_vwap, select_trailing_trades

__all__ = [
    "calculate_dividend_yield",
    "calculate_pe_ratio",
    "calculate_geometric_index",
    "calculate_vwap",
    "select_trailing_trades",
]
