# src/fxgraph/shared/validators.py
"""
Input Validation Utilities - Configuration and Data Validation

This module provides validation functions for currency codes, currency
pairs, rate fractions and amount text, so that bad configuration or input
is rejected before it reaches the rate graph.

Files that USE this module:
- fxgraph.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- fxgraph.adapters.formatting.fixed_point (parse, for amount text)
- fxgraph.domain.errors (InvalidFormatError)
"""
import re

from fxgraph.adapters.formatting.fixed_point import parse
from fxgraph.domain.errors import InvalidFormatError

_PAIR_SEPARATOR = "/"


def validate_currency_code(code: str, known_codes=None) -> bool:
    """
    Validate a 3-letter currency code.

    Args:
        code: Code to validate (case-insensitive)
        known_codes: Optional collection of accepted upper-case codes

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False

    if not re.match(r'^[A-Za-z]{3}$', code.strip()):
        return False

    if known_codes is not None:
        return code.strip().upper() in known_codes
    return True


def validate_pair_code(pair: str, known_codes=None) -> bool:
    """
    Validate a currency pair written as 'FROM/TO', e.g. 'USD/EUR'.

    Args:
        pair: Pair text to validate
        known_codes: Optional collection of accepted upper-case codes

    Returns:
        True if valid, False otherwise
    """
    if not pair or pair.count(_PAIR_SEPARATOR) != 1:
        return False

    src, dst = pair.split(_PAIR_SEPARATOR)
    return validate_currency_code(src, known_codes) and validate_currency_code(dst, known_codes)


def validate_rate_text(rate: str) -> bool:
    """
    Validate a rate written as an integer fraction 'N/D' (or a bare integer 'N').

    The value must be positive: numerator and denominator non-zero and of
    the same sign.

    Args:
        rate: Rate text to validate

    Returns:
        True if valid, False otherwise
    """
    if not rate:
        return False

    match = re.match(r'^\s*(-?[0-9]+)\s*(?:/\s*(-?[0-9]+)\s*)?$', rate)
    if not match:
        return False

    numerator = int(match.group(1))
    denominator = int(match.group(2) or 1)
    return numerator * denominator > 0


def validate_amount_text(value: str) -> bool:
    """
    Validate fixed-point amount text such as '12', '12.5' or '0.00000001'.

    Args:
        value: Amount text to validate

    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False

    try:
        parse(value)
    except InvalidFormatError:
        return False
    return True


def sanitize_user_input(text: str, max_length: int = 64) -> str:
    """
    Sanitize user input text.

    Args:
        text: Input text to sanitize
        max_length: Maximum allowed length

    Returns:
        Sanitized text
    """
    if not text:
        return ""

    # Drop control characters
    sanitized = re.sub(r'[\x00-\x1f\x7f]', '', text)

    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized.strip()
