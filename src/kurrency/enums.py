"""Enumerations for Kurrency type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class CurrencyStyle(StrEnum):
    """How the currency is designated in formatted output.

    StrEnum provides automatic string conversion: str(CurrencyStyle.ISO) == "iso"
    """

    STANDARD = "standard"
    """Currency symbol: $1,234.56"""

    ISO = "iso"
    """ISO 4217 code: USD 1,234.56"""


__all__ = [
    "CurrencyStyle",
]
