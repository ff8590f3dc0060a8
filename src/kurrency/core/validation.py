"""Input validation for currency codes and amounts.

Both validators are pure and stateless, safe to call from any thread.

Currency codes:
    ``is_valid_currency_code`` is a syntactic check only (3 letters). Whether a
    well-formed code names a real currency is a question for the formatting
    backend, which consults CLDR.

Amounts:
    ``normalize_amount`` accepts either '.' or ',' as the decimal separator
    regardless of the output locale. The normalized string (not a
    re-serialized number) is what reaches the backend, so no precision is
    lost on the way.

Python 3.13+. Zero external dependencies.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import TypeIs

from kurrency.constants import ISO_CURRENCY_CODE_LENGTH

__all__ = [
    "is_valid_amount",
    "is_valid_currency_code",
    "normalize_amount",
    "to_decimal",
]

# Plain decimal literal: optional sign, digits with at most one '.', optional exponent.
# Deliberately rejects '_' grouping, 'inf', 'nan', and a bare sign.
_DECIMAL_LITERAL_PATTERN = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)


def is_valid_currency_code(code: str) -> TypeIs[str]:
    """Check if string is shaped like an ISO 4217 code.

    Args:
        code: Candidate currency code. Case-insensitive.

    Returns:
        True if code is exactly 3 alphabetic characters

    Examples:
        >>> is_valid_currency_code("USD")
        True
        >>> is_valid_currency_code("usd")
        True
        >>> is_valid_currency_code("US1")
        False
    """
    if not isinstance(code, str) or len(code) != ISO_CURRENCY_CODE_LENGTH:
        return False
    return all(ch.isalpha() for ch in code)


def normalize_amount(amount: str) -> str | None:
    """Normalize an amount string for formatting.

    Steps, in order:
    1. Reject empty or whitespace-only input
    2. Replace every ',' with '.'
    3. Strip surrounding whitespace
    4. Require a finite decimal literal (no grouping separators) whose
       magnitude fits a double

    Args:
        amount: Raw amount such as "1234.56" or "1234,56"

    Returns:
        The normalized string, or None if amount is not a finite decimal

    Examples:
        >>> normalize_amount(" 1234,56 ")
        '1234.56'
        >>> normalize_amount("1,234.56") is None
        True
        >>> normalize_amount("Infinity") is None
        True
    """
    if not isinstance(amount, str) or not amount.strip():
        return None

    normalized = amount.replace(",", ".").strip()
    if _DECIMAL_LITERAL_PATTERN.fullmatch(normalized) is None:
        return None

    try:
        value = Decimal(normalized)
    except InvalidOperation:
        return None
    # Magnitudes beyond double range count as infinite
    if not value.is_finite() or not math.isfinite(float(value)):
        return None

    return normalized


def is_valid_amount(amount: str) -> TypeIs[str]:
    """Check if amount normalizes to a finite decimal.

    Args:
        amount: Raw amount string

    Returns:
        True if normalize_amount() accepts the amount
    """
    return normalize_amount(amount) is not None


def to_decimal(normalized_amount: str) -> Decimal:
    """Convert a normalized amount to Decimal.

    Args:
        normalized_amount: Output of normalize_amount()

    Returns:
        Exact Decimal value

    Raises:
        decimal.InvalidOperation: If the string is not a decimal literal
    """
    return Decimal(normalized_amount)
