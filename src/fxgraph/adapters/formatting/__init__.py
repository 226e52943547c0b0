# src/fxgraph/adapters/formatting/__init__.py
"""
Formatting Adapters - Fixed-Point Codec and Text Layout

This package contains the fixed-point decimal codec and the text
formatting used for rate tables and conversions.
"""

from fxgraph.adapters.formatting.fixed_point import (
    FRACTION_DIGITS,
    SCALE,
    from_whole,
    parse,
    render,
    render_rate,
)
from fxgraph.adapters.formatting.formatter import (
    amount_line,
    conversion_line,
    rate_line,
    rate_table,
)

__all__ = [
    "FRACTION_DIGITS",
    "SCALE",
    "from_whole",
    "parse",
    "render",
    "render_rate",
    "amount_line",
    "conversion_line",
    "rate_line",
    "rate_table",
]
