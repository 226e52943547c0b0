# src/fxgraph/application/exchange_service.py
"""
Exchange Service - Rate Lookup, Conversion, Randomization and Reporting

This module contains the capability surface consumed by whatever session
layer sits on top of the engine. It composes a RateGraph with the
fixed-point codec; it never reads input or prints.

Files that USE this module:
- fxgraph.app (build_exchange wires an ExchangeService from settings)
- tests.test_exchange_service (unit tests)

Files that this module USES:
- fxgraph.application.rate_graph (RateGraph for storage and path search)
- fxgraph.adapters.formatting.formatter (rate_table for show_rates)
- fxgraph.domain.* (Currency, ExactRational, ConversionResult, errors)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library logging
import random  # Seedable random source for perturbation
from typing import List, Mapping, Optional, Protocol, Tuple  # Type hints

from fxgraph.adapters.formatting.formatter import rate_table
from fxgraph.application.rate_graph import RateGraph
from fxgraph.domain.errors import InvalidArgumentError, NoRouteError
from fxgraph.domain.models import ConversionResult, Currency, RateQuote
from fxgraph.domain.rational import ExactRational

logger = logging.getLogger(__name__)

#: Default bound (inclusive, in whole percent) for a perturbation pass.
DEFAULT_MAX_PERCENT = 5


class Exchange(Protocol):
    """Capabilities an exchange offers to its callers."""
    def rate(self, from_currency: Currency, to_currency: Currency) -> Optional[ExactRational]:
        ...

    def convert(self, amount: int, from_currency: Currency, to_currency: Currency) -> ConversionResult:
        ...

    def perturb(self, max_percent: Optional[int] = None) -> int:
        ...

    def dump(self) -> List[RateQuote]:
        ...


class ExchangeService:
    """
    The single production Exchange: an in-memory rate graph.
    """
    def __init__(
        self,
        initial_rates: Mapping[Tuple[Currency, Currency], ExactRational],
        rng: Optional[random.Random] = None,
        max_percent: int = DEFAULT_MAX_PERCENT,
    ):
        """
        Initialize the service with its starting rate table.

        Args:
            initial_rates: Mapping of (from, to) to rate, copied into a new graph
            rng: Random source for perturb(); a fresh unseeded one if omitted
            max_percent: Default bound used by perturb()
        """
        if max_percent < 0:
            raise InvalidArgumentError(f"max_percent must be >= 0, got {max_percent}")
        self.graph = RateGraph(initial_rates)
        self.rng = rng if rng is not None else random.Random()
        self.max_percent = max_percent

    def rate(self, from_currency: Currency, to_currency: Currency) -> Optional[ExactRational]:
        """Exact rate from one currency to another, or None if there is no route."""
        return self.graph.rate(from_currency, to_currency)

    def convert(self, amount: int, from_currency: Currency, to_currency: Currency) -> ConversionResult:
        """
        Convert a fixed-point amount between currencies.

        The result is truncated toward zero at 8 fractional digits. The
        graph is not modified.

        Args:
            amount: Amount in scaled units (value * SCALE), must be > 0
            from_currency: Currency being sold
            to_currency: Currency being bought

        Returns:
            ConversionResult with the scaled amount, or with an
            InvalidArgumentError / NoRouteError
        """
        if amount <= 0:
            logger.warning("rejected conversion %s -> %s: non-positive amount %d",
                           from_currency, to_currency, amount)
            return ConversionResult.failure(InvalidArgumentError("Amount must be positive"))

        rate = self.graph.rate(from_currency, to_currency)
        if rate is None:
            logger.warning("rejected conversion %s -> %s: no route", from_currency, to_currency)
            return ConversionResult.failure(NoRouteError(from_currency, to_currency))

        return ConversionResult.success(rate.apply_to(amount))

    def perturb(self, max_percent: Optional[int] = None) -> int:
        """
        Randomize every stored rate within ±max_percent.

        Args:
            max_percent: Bound for this pass; the configured default if None

        Returns:
            Number of edges perturbed
        """
        bound = self.max_percent if max_percent is None else max_percent
        return self.graph.perturb_all(self.rng, bound)

    def complete_inverses(self) -> None:
        """Make every quoted pair convertible in both directions."""
        self.graph.complete_inverses()

    def dump(self) -> List[RateQuote]:
        return self.graph.dump()

    def show_rates(self) -> str:
        """Rate table as text, one 'FROM -> TO : rate' line per stored edge."""
        return rate_table(self.dump())
