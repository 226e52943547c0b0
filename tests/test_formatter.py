# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Text Formatting Functions

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxgraph.adapters.formatting.formatter (all formatter functions for testing)
- fxgraph.domain (Currency, ExactRational, RateQuote for test data)
"""
from fxgraph.adapters.formatting.formatter import (
    amount_line,
    conversion_line,
    rate_line,
    rate_table,
)
from fxgraph.domain.models import Currency, RateQuote
from fxgraph.domain.rational import ExactRational


def _quote(src, dst, n, d, rendered):
    return RateQuote(src, dst, ExactRational(n, d), rendered)


class TestRateLines:
    def test_rate_line(self):
        q = _quote(Currency.USD, Currency.EUR, 91, 100, "0.91000000")
        assert rate_line(q) == "USD -> EUR : 0.91000000"

    def test_rate_table(self):
        quotes = [
            _quote(Currency.BTC, Currency.ETH, 13, 1, "13.00000000"),
            _quote(Currency.USD, Currency.RUB, 75, 1, "75.00000000"),
        ]
        assert rate_table(quotes) == "BTC -> ETH : 13.00000000\nUSD -> RUB : 75.00000000\n"

    def test_rate_table_empty(self):
        assert rate_table([]) == ""


class TestAmountLines:
    def test_amount_line(self):
        assert amount_line(100_000_000_000, Currency.USD) == "1000.00000000 USD"

    def test_amount_line_missing(self):
        assert amount_line(None, Currency.EUR) == "N/A EUR"

    def test_conversion_line(self):
        line = conversion_line(100_000_000_000, Currency.USD, 7_500_000_000_000, Currency.RUB)
        assert line == "1000.00000000 USD -> 75000.00000000 RUB"
