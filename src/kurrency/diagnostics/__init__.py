"""Diagnostic system for Kurrency errors.

Provides the closed error taxonomy, diagnostic codes, and message templates.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory, ErrorCode
from .errors import (
    FormattingFailure,
    FractionDigitsFailure,
    InvalidAmount,
    InvalidCurrencyCode,
    KurrencyError,
    KurrencyException,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "ErrorCategory",
    "ErrorCode",
    "ErrorTemplate",
    "FormattingFailure",
    "FractionDigitsFailure",
    "InvalidAmount",
    "InvalidCurrencyCode",
    "KurrencyError",
    "KurrencyException",
]
