# src/fxgraph/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- The closed set of supported currencies
- Rate quotes produced when dumping the rate table
- Conversion outcomes (amount or typed failure)

Files that USE this module:
- fxgraph.application.* (graph and service use these models)
- fxgraph.adapters.formatting.formatter (renders RateQuote lines)
- fxgraph.config.settings (resolves currency codes)
- tests.* (tests use domain models for test data)

Files that this module USES:
- fxgraph.domain.errors (DomainError carried by ConversionResult)
- fxgraph.domain.rational (ExactRational carried by RateQuote)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Closed enumeration of currencies
from typing import Optional  # Type hints for optional values

from fxgraph.domain.errors import DomainError
from fxgraph.domain.rational import ExactRational


class Currency(Enum):
    """Supported currencies, identified by their 3-letter code."""
    USD = "USD"
    EUR = "EUR"
    RUB = "RUB"
    BTC = "BTC"
    ETH = "ETH"

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Optional["Currency"]:
        """
        Case-insensitive lookup of a currency by code.

        Args:
            code: Currency code such as 'usd' or 'EUR'

        Returns:
            Matching Currency, or None if the code is unknown
        """
        if not code:
            return None
        wanted = code.strip().upper()
        for member in cls:
            if member.value == wanted:
                return member
        return None


@dataclass(frozen=True)
class RateQuote:
    """
    One stored edge of the rate table.

    Attributes:
        from_currency: Source currency
        to_currency: Target currency
        rate: Exact rate (units of to_currency per 1 from_currency)
        rendered: Rate rendered with exactly 8 fractional digits
    """
    from_currency: Currency
    to_currency: Currency
    rate: ExactRational
    rendered: str


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a conversion: a scaled amount or a typed failure.

    Attributes:
        amount: Converted amount in fixed-point units (None on failure)
        error: DomainError describing the failure (None on success)
    """
    amount: Optional[int] = None
    error: Optional[DomainError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        """Return the amount or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.amount

    @classmethod
    def success(cls, amount: int) -> "ConversionResult":
        return cls(amount=amount)

    @classmethod
    def failure(cls, error: DomainError) -> "ConversionResult":
        return cls(error=error)
