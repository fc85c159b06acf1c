"""Dividend yield and Price/Earnings calculations"""

from ..models.terms import CommonTerms, DividendTerms, PreferredTerms


def calculate_dividend_yield(terms: DividendTerms, last_dividend: float,
                             par_value: float, price: float) -> float:
    """
    Calculate dividend yield for the given dividend terms.

    Common:    last_dividend / price
    Preferred: (fixed_dividend_rate / 100 * par_value) / price

    Args:
        terms: Common or preferred dividend terms
        last_dividend: Last declared dividend
        par_value: Par value of the stock
        price: Current price

    Returns:
        Dividend yield, or 0.0 when price is zero
    """
    if not price:
        return 0.0

    match terms:
        case PreferredTerms(fixed_dividend_rate=rate):
            return (rate / 100.0 * par_value) / price
        case CommonTerms():
            return last_dividend / price

    raise TypeError(f"Unsupported dividend terms: {terms!r}")


def calculate_pe_ratio(price: float, last_dividend: float) -> float:
    """
    Calculate Price/Earnings ratio using the last dividend as earnings.

    Returns:
        price / last_dividend, or 0.0 when no dividend was declared
    """
    if not last_dividend:
        return 0.0

    return price / last_dividend
