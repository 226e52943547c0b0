# src/fxgraph/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from fxgraph.domain.rational import ExactRational, trunc_div
from fxgraph.domain.models import (
    ConversionResult,
    Currency,
    RateQuote,
)
from fxgraph.domain.errors import (
    DomainError,
    InvalidArgumentError,
    InvalidFormatError,
    NoRouteError,
)

__all__ = [
    "ExactRational",
    "trunc_div",
    "Currency",
    "RateQuote",
    "ConversionResult",
    "DomainError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "NoRouteError",
]
