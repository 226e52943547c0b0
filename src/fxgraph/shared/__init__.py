# src/fxgraph/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from fxgraph.shared.validators import (
    sanitize_user_input,
    validate_amount_text,
    validate_currency_code,
    validate_pair_code,
    validate_rate_text,
)
from fxgraph.shared.logging_conf import setup_logging

__all__ = [
    "validate_currency_code",
    "validate_pair_code",
    "validate_rate_text",
    "validate_amount_text",
    "sanitize_user_input",
    "setup_logging",
]
