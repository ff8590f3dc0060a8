"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization and system locale discovery.

Python 3.13+.
"""

from __future__ import annotations

import locale as locale_module
import os

from kurrency.constants import FALLBACK_LOCALE

__all__ = [
    "get_system_locale",
    "normalize_locale",
]

# Checked in precedence order after the OS locale
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Normalize at the system boundary, then use the normalized form for cache
    keys and lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale(" de-DE ")
        'de_DE'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


def _strip_suffixes(value: str) -> str:
    """Drop the encoding (".UTF-8") and modifier ("@euro") parts."""
    return value.split(".", 1)[0].split("@", 1)[0]


def get_system_locale() -> str:
    """Locale of the running process, in POSIX form.

    The OS locale wins; otherwise the first of LC_ALL, LC_MESSAGES, LANG
    naming a real locale. Returns FALLBACK_LOCALE when none does.
    """
    try:
        os_locale, _ = locale_module.getlocale()
    except ValueError:
        os_locale = None

    candidates = [os_locale, *(os.environ.get(var) for var in _LOCALE_ENV_VARS)]
    for candidate in candidates:
        if candidate and (code := _strip_suffixes(candidate)) not in _PSEUDO_LOCALES:
            return normalize_locale(code)
    return FALLBACK_LOCALE
