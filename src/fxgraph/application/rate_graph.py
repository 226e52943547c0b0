# src/fxgraph/application/rate_graph.py
"""
Rate Graph - Directed Currency Graph with Exact Rate Derivation

Vertices are currencies; each stored edge (from, to) carries a normalized
ExactRational meaning "1 unit of `from` is worth `rate` units of `to`".

The graph keeps two views of the same edge set, a flat pair map for direct
lookups and an adjacency map for traversal. Both are written only through
set_rate() so they can never disagree.

Ordering contract:
- BFS visits neighbours in ascending currency-code order.
- perturb_all() and complete_inverses() walk a snapshot of the edges
  sorted by (from code, to code); when two writes hit the same pair the
  later one in that order wins.

Mutating methods read a snapshot and then write back; callers sharing a
graph across threads must hold exclusive access for the whole call.

Files that USE this module:
- fxgraph.application.exchange_service (ExchangeService owns one graph)
- tests.test_rate_graph (unit tests)

Files that this module USES:
- fxgraph.domain.models (Currency, RateQuote)
- fxgraph.domain.rational (ExactRational)
- fxgraph.adapters.formatting.fixed_point (render_rate for dump)
"""
from __future__ import annotations

import logging
import random
from collections import deque
from typing import Dict, List, Mapping, Optional, Tuple

from fxgraph.adapters.formatting.fixed_point import render_rate
from fxgraph.domain.errors import InvalidArgumentError
from fxgraph.domain.models import Currency, RateQuote
from fxgraph.domain.rational import ExactRational

logger = logging.getLogger(__name__)

Pair = Tuple[Currency, Currency]


def _pair_key(pair: Pair) -> str:
    return pair[0].code + pair[1].code


class RateGraph:
    """Directed, weighted graph of exchange rates."""

    def __init__(self, initial_rates: Optional[Mapping[Pair, ExactRational]] = None):
        """
        Initialize the graph from an optional rate table.

        Args:
            initial_rates: Mapping of (from, to) to rate; rates are normalized on insert
        """
        self._rates: Dict[Pair, ExactRational] = {}
        self._adjacency: Dict[Currency, Dict[Currency, ExactRational]] = {}
        for (src, dst), rate in (initial_rates or {}).items():
            self.set_rate(src, dst, rate)

    # ------------- storage -------------

    def set_rate(self, from_currency: Currency, to_currency: Currency, rate: ExactRational) -> None:
        """Normalize `rate` and store it for (from, to), replacing any previous value."""
        normalized = rate.normalized()
        self._rates[(from_currency, to_currency)] = normalized
        self._adjacency.setdefault(from_currency, {})[to_currency] = normalized
        logger.debug("set %s -> %s = %s", from_currency, to_currency, normalized)

    def direct_rate(self, from_currency: Currency, to_currency: Currency) -> Optional[ExactRational]:
        """Return the stored rate for (from, to), or None if no edge exists."""
        return self._rates.get((from_currency, to_currency))

    def edges(self) -> List[Tuple[Pair, ExactRational]]:
        """Snapshot of all stored edges sorted by concatenated currency codes."""
        return sorted(self._rates.items(), key=lambda item: _pair_key(item[0]))

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, pair: object) -> bool:
        return pair in self._rates

    # ------------- lookup -------------

    def path(self, from_currency: Currency, to_currency: Currency) -> Optional[List[Currency]]:
        """
        Breadth-first search for the fewest-hops path from one currency to another.

        Returns:
            List of currencies from source to target inclusive, or None if unreachable
        """
        if from_currency == to_currency:
            return [from_currency]

        prev: Dict[Currency, Optional[Currency]] = {from_currency: None}
        queue = deque([from_currency])
        while queue:
            cur = queue.popleft()
            neighbors = self._adjacency.get(cur)
            if not neighbors:
                continue
            for nb in sorted(neighbors, key=lambda c: c.code):
                if nb in prev:
                    continue
                prev[nb] = cur
                if nb == to_currency:
                    hops: List[Currency] = []
                    node: Optional[Currency] = nb
                    while node is not None:
                        hops.append(node)
                        node = prev[node]
                    hops.reverse()
                    return hops
                queue.append(nb)
        return None

    def rate(self, from_currency: Currency, to_currency: Currency) -> Optional[ExactRational]:
        """
        Rate for converting `from_currency` into `to_currency`.

        Identity for equal currencies, the stored edge when present, otherwise
        the product of the edges along the BFS path.

        Returns:
            Normalized ExactRational, or None if there is no route
        """
        if from_currency == to_currency:
            return ExactRational.one()

        direct = self.direct_rate(from_currency, to_currency)
        if direct is not None:
            return direct

        hops = self.path(from_currency, to_currency)
        if hops is None:
            logger.debug("no route %s -> %s", from_currency, to_currency)
            return None

        acc = ExactRational.one()
        for a, b in zip(hops, hops[1:]):
            acc = acc * self._adjacency[a][b]
        return acc.normalized()

    # ------------- mutation -------------

    def perturb_all(self, rng: random.Random, max_percent: int) -> int:
        """
        Move every stored rate by a random whole percentage in [-max_percent, +max_percent].

        Each delta is applied to the rate as it was before this pass began.
        The reverse edge of every perturbed pair is overwritten with the
        exact inverse, so rate(A, B) * rate(B, A) == 1 afterwards.

        Args:
            rng: Random source (pass a seeded random.Random for reproducibility)
            max_percent: Inclusive bound on the absolute percentage change

        Returns:
            Number of edges perturbed

        Raises:
            InvalidArgumentError: If max_percent is negative
        """
        if max_percent < 0:
            raise InvalidArgumentError(f"max_percent must be >= 0, got {max_percent}")

        written = 0
        for (src, dst), rate in self.edges():
            delta = rng.randint(-max_percent, max_percent)
            multiplier = ExactRational.of(100 + delta, 100)
            new_rate = (rate * multiplier).normalized()
            if new_rate.numerator != 0 and new_rate.denominator != 0:
                self.set_rate(src, dst, new_rate)
                self.set_rate(dst, src, new_rate.invert().normalized())
                written += 1
            else:
                logger.warning("skipping collapsed rate %s -> %s (delta=%d%%)", src, dst, delta)
        logger.info("perturbed %d rates (max ±%d%%)", written, max_percent)
        return written

    def complete_inverses(self) -> None:
        """Store the exact inverse of every edge, overwriting existing reverse edges."""
        for (src, dst), rate in self.edges():
            self.set_rate(dst, src, rate.invert().normalized())
        logger.info("completed inverse rates, %d edges stored", len(self._rates))

    # ------------- reporting -------------

    def dump(self) -> List[RateQuote]:
        """All stored edges as RateQuote records, sorted by concatenated codes."""
        return [
            RateQuote(
                from_currency=src,
                to_currency=dst,
                rate=rate,
                rendered=render_rate(rate),
            )
            for (src, dst), rate in self.edges()
        ]
