# src/fxgraph/adapters/formatting/formatter.py
"""
Rate Table Formatter - Text Presentation of Rates and Amounts

This module handles the plain text layout used when the rate table or a
conversion is shown to a person or written to the log.

Files that USE this module:
- fxgraph.application.exchange_service (show_rates)
- fxgraph.app (logs the startup rate table)
- tests.test_formatter (unit tests)

Files that this module USES:
- fxgraph.domain.models (RateQuote, Currency)
- fxgraph.adapters.formatting.fixed_point (render for amounts)
"""
from __future__ import annotations

from typing import Iterable, Optional

from fxgraph.adapters.formatting.fixed_point import render
from fxgraph.domain.models import Currency, RateQuote


def rate_line(quote: RateQuote) -> str:
    """Format a single quote as 'USD -> EUR : 0.91000000'."""
    return f"{quote.from_currency} -> {quote.to_currency} : {quote.rendered}"


def rate_table(quotes: Iterable[RateQuote]) -> str:
    """
    Format quotes as one line each, in the order given.

    Args:
        quotes: Rate quotes, typically the output of RateGraph.dump()

    Returns:
        Newline-terminated lines, or an empty string for an empty table
    """
    return "".join(f"{rate_line(q)}\n" for q in quotes)


def amount_line(amount: Optional[int], currency: Currency) -> str:
    """Format a scaled amount with its currency code, e.g. '1000.00000000 USD'."""
    if amount is None:
        return f"N/A {currency}"
    return f"{render(amount)} {currency}"


def conversion_line(amount: int, from_currency: Currency, converted: int, to_currency: Currency) -> str:
    """Format a completed conversion as 'spent -> received'."""
    return f"{amount_line(amount, from_currency)} -> {amount_line(converted, to_currency)}"
