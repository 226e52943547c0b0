# src/fxgraph/domain/rational.py
"""
Exact Rational - Arbitrary-Precision Fractions for Exchange Rates

Rates are stored as numerator/denominator pairs of Python ints so that
chains of conversions never accumulate floating-point drift.

Construction does NOT normalize. Call normalized() (or use ExactRational.of)
before relying on the canonical form: denominator > 0 and
gcd(|numerator|, denominator) == 1, with zero stored as 0/1.

Files that USE this module:
- fxgraph.application.rate_graph (edge weights and path folding)
- fxgraph.adapters.formatting.fixed_point (render_rate)
- fxgraph.config.settings (parsing the initial rate table)

Files that this module USES:
- fxgraph.domain.errors (InvalidArgumentError)
"""
from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from math import gcd

from fxgraph.domain.errors import InvalidArgumentError


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True)
class ExactRational:
    """Immutable fraction numerator/denominator."""
    numerator: int
    denominator: int

    def __post_init__(self):
        if self.denominator == 0:
            raise InvalidArgumentError("Denominator must not be zero")

    # ------------- constructors -------------

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> "ExactRational":
        return cls(numerator, denominator).normalized()

    @classmethod
    def one(cls) -> "ExactRational":
        return cls(1, 1)

    # ------------- arithmetic -------------

    def normalized(self) -> "ExactRational":
        """Reduce to lowest terms with a positive denominator."""
        g = gcd(self.numerator, self.denominator)
        n = self.numerator // g
        d = self.denominator // g
        if d < 0:
            return ExactRational(-n, -d)
        return ExactRational(n, d)

    def multiply(self, other: "ExactRational") -> "ExactRational":
        if not isinstance(other, ExactRational):
            raise InvalidArgumentError("ExactRational arithmetic requires ExactRational operands")
        return ExactRational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        ).normalized()

    def __mul__(self, other: "ExactRational") -> "ExactRational":
        if not isinstance(other, ExactRational):
            return NotImplemented
        return self.multiply(other)

    def invert(self) -> "ExactRational":
        """Swap numerator and denominator.

        The result is not normalized (the sign may sit on the denominator).
        Precondition: numerator != 0; a zero rate has no inverse and the
        constructor rejects the resulting zero denominator.
        """
        return ExactRational(self.denominator, self.numerator)

    def apply_to(self, scaled_amount: int) -> int:
        """Return scaled_amount * numerator / denominator, truncated toward zero.

        Any remainder below one scaled unit is discarded, never rounded.
        """
        return trunc_div(scaled_amount * self.numerator, self.denominator)

    # ------------- predicates / views -------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


__all__ = [
    "ExactRational",
    "trunc_div",
]
