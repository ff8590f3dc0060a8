"""Shared constants for Kurrency.

Centralized configuration constants used across the validation, runtime and
metadata layers. Placing them here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Currency codes: ISO 4217 shape and defaults
- Cache limits: Memory bounds for the locale cache
- Locales: Fallback locale used when resolution fails

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Currency codes
    "ISO_CURRENCY_CODE_LENGTH",
    "DEFAULT_FRACTION_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locales
    "FALLBACK_LOCALE",
    "DEFAULT_FORMATTER_LOCALE",
]

# ============================================================================
# CURRENCY CODES
# ============================================================================

# ISO 4217 currency codes are exactly 3 letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# Fraction digits reported when a lookup fails (the common ISO 4217 value).
DEFAULT_FRACTION_DIGITS: int = 2

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached KurrencyLocale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALES
# ============================================================================

# Locale used when a requested locale is unknown to CLDR.
FALLBACK_LOCALE: str = "en_US"

# Locale bound to the shared formatter used by locale-independent operations.
# Fraction digits are a currency property, so the choice does not affect results.
DEFAULT_FORMATTER_LOCALE: str = "en_US"
