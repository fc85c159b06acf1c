"""Tests for dividend yield and P/E calculations"""

import pytest

from sss_app.metrics.dividends import calculate_dividend_yield, calculate_pe_ratio
from sss_app.models.terms import CommonTerms, PreferredTerms


class TestDividendYield:
    """Test dividend yield formulas"""

    @pytest.mark.parametrize("last_dividend,price", [
        (0.0, 1.0),
        (0.08, 1.0),
        (0.23, 0.6),
        (0.13, 2.5),
        (0.13, 1.7),
    ])
    def test_common_yield(self, last_dividend, price):
        result = calculate_dividend_yield(CommonTerms(), last_dividend, par_value=1.0, price=price)
        assert result == pytest.approx(last_dividend / price)

    def test_common_yield_zero_price(self):
        assert calculate_dividend_yield(CommonTerms(), 0.08, par_value=1.0, price=0.0) == 0.0

    def test_preferred_yield(self):
        terms = PreferredTerms(fixed_dividend_rate=2.0)
        result = calculate_dividend_yield(terms, 0.08, par_value=1.0, price=0.5)
        assert result == pytest.approx(0.02 * 1.0 / 0.5)

    def test_preferred_yield_ignores_last_dividend(self):
        terms = PreferredTerms(fixed_dividend_rate=2.0)
        low = calculate_dividend_yield(terms, 0.01, par_value=1.0, price=1.0)
        high = calculate_dividend_yield(terms, 9.99, par_value=1.0, price=1.0)
        assert low == high

    def test_preferred_yield_zero_price(self):
        terms = PreferredTerms(fixed_dividend_rate=2.0)
        assert calculate_dividend_yield(terms, 0.08, par_value=1.0, price=0.0) == 0.0

    def test_unsupported_terms(self):
        with pytest.raises(TypeError):
            calculate_dividend_yield(object(), 0.08, par_value=1.0, price=1.0)


class TestPERatio:
    """Test Price/Earnings ratio"""

    def test_pe_ratio(self):
        assert calculate_pe_ratio(2.5, 0.13) == pytest.approx(2.5 / 0.13)

    def test_pe_ratio_no_dividend(self):
        assert calculate_pe_ratio(1.0, 0.0) == 0.0

    def test_pe_ratio_zero_price(self):
        assert calculate_pe_ratio(0.0, 0.08) == 0.0
