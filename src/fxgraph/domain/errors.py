# src/fxgraph/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and domain errors.
"""
from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidArgumentError(DomainError):
    """Raised for a zero denominator, a non-positive amount or a bad parameter."""
    pass


class InvalidFormatError(InvalidArgumentError):
    """Raised when decimal or rate text cannot be parsed."""
    pass


class NoRouteError(DomainError):
    """Raised (or returned) when no directed path links two currencies."""

    def __init__(self, from_currency: Any, to_currency: Any):
        super().__init__(f"No conversion path from {from_currency} to {to_currency}")
        self.from_currency = from_currency
        self.to_currency = to_currency
