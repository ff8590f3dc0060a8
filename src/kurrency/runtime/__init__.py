"""Kurrency runtime package.

Provides the resolved locale handle, the formatting backend contract with its
Babel implementation, and the CurrencyFormatter orchestrator.

Python 3.13+.
"""

from .backend import BabelFormattingBackend, BackendFactory, FormattingBackend
from .formatter import Amount, CurrencyFormatter, is_valid_currency
from .locale_context import KurrencyLocale

__all__ = [
    "Amount",
    "BabelFormattingBackend",
    "BackendFactory",
    "CurrencyFormatter",
    "FormattingBackend",
    "KurrencyLocale",
    "is_valid_currency",
]
