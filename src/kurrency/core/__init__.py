"""Core utilities shared across the runtime and metadata layers.

This package provides foundational utilities with no Babel dependency:

    core <- metadata <- runtime

Exports:
    Lazy: Thread-safe at-most-once lazy value
    is_valid_currency_code: Syntactic ISO 4217 code check
    normalize_amount: Amount validation and separator normalization

Python 3.13+.
"""

from .lazy import Lazy
from .validation import is_valid_amount, is_valid_currency_code, normalize_amount, to_decimal

__all__ = [
    "Lazy",
    "is_valid_amount",
    "is_valid_currency_code",
    "normalize_amount",
    "to_decimal",
]
