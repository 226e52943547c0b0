# src/fxgraph/adapters/formatting/fixed_point.py
"""
Fixed-Point Decimal Codec - Scaled Integers <-> Decimal Text

Amounts are plain ints holding value * SCALE (8 fractional digits). This
module converts between that representation and human decimal strings
without ever going through float.

Rendering takes the whole part truncated toward zero and the fraction as the
non-negative remainder modulo SCALE. For negative values the two parts do
not agree ("-1.25" scaled renders as "-1.75000000", "-0.5" as "0.50000000");
no user-facing flow produces negative amounts and the behaviour is pinned by
tests.

Files that USE this module:
- fxgraph.application.rate_graph (dump renders each rate)
- fxgraph.adapters.formatting.formatter (amount lines)
- fxgraph.shared.validators (validate_amount_text delegates to parse)
- tests.test_fixed_point (unit tests)

Files that this module USES:
- fxgraph.domain.rational (ExactRational, trunc_div)
- fxgraph.domain.errors (InvalidFormatError)
"""
from __future__ import annotations

import re

from fxgraph.domain.errors import InvalidFormatError
from fxgraph.domain.rational import ExactRational, trunc_div

#: Number of fractional digits carried by every amount and rendered rate.
FRACTION_DIGITS: int = 8

#: Fixed-point resolution: 1 unit == SCALE scaled units.
SCALE: int = 10 ** FRACTION_DIGITS

_WHOLE_RE = re.compile(r"[+-]?[0-9]+")
_FRAC_RE = re.compile(r"[0-9]*")


def from_whole(units: int) -> int:
    """Scale a whole number of units into the fixed-point domain."""
    return units * SCALE


def render(scaled: int) -> str:
    """Render a scaled integer as '<whole>.<8 digits>'."""
    whole = trunc_div(scaled, SCALE)
    frac = scaled % SCALE
    return f"{whole}.{frac:0{FRACTION_DIGITS}d}"


def render_rate(rate: ExactRational) -> str:
    """Render a rational rate with exactly 8 fractional digits (truncated)."""
    scaled = trunc_div(rate.numerator * SCALE, rate.denominator)
    return render(scaled)


def parse(text: str) -> int:
    """
    Parse decimal text into a scaled integer.

    The integer part may carry a sign. The fractional part is right-padded
    with zeros, or truncated, to exactly 8 digits.

    Args:
        text: Decimal text such as '12.34' or '1000'

    Returns:
        whole * SCALE + fraction

    Raises:
        InvalidFormatError: If the text is not a plain decimal number
    """
    if text is None:
        raise InvalidFormatError("amount text is missing")
    parts = text.strip().split(".")
    if len(parts) > 2:
        raise InvalidFormatError(f"malformed amount: {text!r}")
    whole_txt = parts[0]
    frac_txt = parts[1] if len(parts) == 2 else "0"
    if not _WHOLE_RE.fullmatch(whole_txt) or not _FRAC_RE.fullmatch(frac_txt):
        raise InvalidFormatError(f"malformed amount: {text!r}")
    frac = int(frac_txt.ljust(FRACTION_DIGITS, "0")[:FRACTION_DIGITS])
    return int(whole_txt) * SCALE + frac


__all__ = [
    "FRACTION_DIGITS",
    "SCALE",
    "from_whole",
    "render",
    "render_rate",
    "parse",
]
