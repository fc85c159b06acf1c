"""Dividend terms distinguishing common from preferred stock"""

from dataclasses import dataclass
from enum import Enum


class StockClass(Enum):
    """Stock classification."""
    COMMON = "common"
    PREFERRED = "preferred"


@dataclass(frozen=True)
class CommonTerms:
    """Common stock pays its last declared dividend."""

    @property
    def stock_class(self) -> StockClass:
        return StockClass.COMMON

    @property
    def fixed_dividend_rate(self) -> float:
        return 0.0


@dataclass(frozen=True)
class PreferredTerms:
    """Preferred stock pays a fixed percentage of par value."""
    fixed_dividend_rate: float    # Percentage, 2.0 means 2%

    @property
    def stock_class(self) -> StockClass:
        return StockClass.PREFERRED


DividendTerms = CommonTerms | PreferredTerms


def terms_for(stock_class: "str | StockClass", fixed_dividend_rate: float = 0.0) -> DividendTerms:
    """Build dividend terms from a classification and optional fixed rate."""
    if StockClass(stock_class) is StockClass.PREFERRED:
        return PreferredTerms(fixed_dividend_rate=fixed_dividend_rate)
    return CommonTerms()
