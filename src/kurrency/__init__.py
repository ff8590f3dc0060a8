"""Kurrency - locale-aware currency formatting with typed errors.

Validates raw amount and currency-code inputs, resolves canonical fraction
digits, and renders amounts through Babel's CLDR data. Every failure is a
typed value inside a Result; nothing raises across the public API.

Public API:
    CurrencyFormatter - Locale-bound formatter (symbol and ISO-code styles)
    Currency - ISO 4217 code with canonical fraction digits
    CurrencyMetadata - Registry of common currencies (name, symbol, flag)
    KurrencyLocale - Resolved locale handle with predefined locales
    FormattingBackend - Backend contract; BabelFormattingBackend is the default
    Result - Success | Failure, with is_success/is_failure type guards

Errors:
    KurrencyError - Base of the closed error taxonomy
    InvalidCurrencyCode, InvalidAmount - Validation failures
    FormattingFailure, FractionDigitsFailure - Backend failures
    KurrencyException - Raisable wrapper used by Result.get_or_raise()

Logging:
    The library logs through the standard logging module under the
    "kurrency" logger and is silent until the application configures logging.
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .currency import Currency
from .diagnostics import (
    FormattingFailure,
    FractionDigitsFailure,
    InvalidAmount,
    InvalidCurrencyCode,
    KurrencyError,
    KurrencyException,
)
from .enums import CurrencyStyle
from .metadata import CurrencyMetadata
from .result import Failure, Result, Success, is_failure, is_success
from .runtime import (
    BabelFormattingBackend,
    CurrencyFormatter,
    FormattingBackend,
    KurrencyLocale,
    is_valid_currency,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("kurrency")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


def is_valid_currency_code(code: str) -> bool:
    """Check if a code is shaped like an ISO 4217 code (3 letters)."""
    return CurrencyFormatter.is_valid_currency_code(code)


__all__ = [
    "BabelFormattingBackend",
    "Currency",
    "CurrencyFormatter",
    "CurrencyMetadata",
    "CurrencyStyle",
    "Failure",
    "FormattingBackend",
    "FormattingFailure",
    "FractionDigitsFailure",
    "InvalidAmount",
    "InvalidCurrencyCode",
    "KurrencyError",
    "KurrencyException",
    "KurrencyLocale",
    "Result",
    "Success",
    "__version__",
    "is_failure",
    "is_success",
    "is_valid_currency",
    "is_valid_currency_code",
]
