# src/fxgraph/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies.
"""

from fxgraph.application.rate_graph import RateGraph
from fxgraph.application.exchange_service import (
    DEFAULT_MAX_PERCENT,
    Exchange,
    ExchangeService,
)

__all__ = [
    "RateGraph",
    "Exchange",
    "ExchangeService",
    "DEFAULT_MAX_PERCENT",
]
