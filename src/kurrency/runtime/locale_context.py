"""Resolved locale handle for formatting.

KurrencyLocale is the opaque "resolved locale" threaded through the
formatter and its backend. It wraps a pre-validated Babel Locale so that
backends never parse locale tags themselves.

Architecture:
    - KurrencyLocale: Immutable locale handle (frozen dataclass)
    - Instances are cached per normalized tag (bounded LRU, RLock-guarded)
    - No dependency on Python's locale module for formatting (avoids global state)

Python 3.13+. Uses Babel for CLDR locale data.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError

from kurrency.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE
from kurrency.locale_utils import get_system_locale, normalize_locale

__all__ = ["KurrencyLocale"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KurrencyLocale:
    """Immutable locale handle for currency formatting.

    Use KurrencyLocale.create() to construct instances with validation.
    Direct construction via __init__ bypasses validation and caching.

    Examples:
        >>> loc = KurrencyLocale.create("de-DE")
        >>> loc.language_tag
        'de-DE'
        >>> loc.babel_locale
        Locale('de', territory='DE')

        >>> # Invalid locales fall back to en_US with warning logged
        >>> loc = KurrencyLocale.create("invalid-locale")
        >>> loc.language_tag  # Original tag preserved
        'invalid-locale'
        >>> loc.is_fallback
        True

    Thread Safety:
        KurrencyLocale is immutable and thread-safe. Cache operations are
        protected by RLock; concurrent create() calls for the same tag return
        the same instance.
    """

    # Class-level cache for instances (identity caching, LRU order)
    _cache: ClassVar[OrderedDict[str, "KurrencyLocale"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    # Predefined handles, assigned after the class body
    US: ClassVar["KurrencyLocale"]
    UK: ClassVar["KurrencyLocale"]
    CANADA: ClassVar["KurrencyLocale"]
    GERMANY: ClassVar["KurrencyLocale"]
    FRANCE: ClassVar["KurrencyLocale"]
    ITALY: ClassVar["KurrencyLocale"]
    SPAIN: ClassVar["KurrencyLocale"]
    JAPAN: ClassVar["KurrencyLocale"]
    CHINA: ClassVar["KurrencyLocale"]
    KOREA: ClassVar["KurrencyLocale"]
    INDIA: ClassVar["KurrencyLocale"]
    BRAZIL: ClassVar["KurrencyLocale"]
    RUSSIA: ClassVar["KurrencyLocale"]
    MEXICO: ClassVar["KurrencyLocale"]
    AUSTRALIA: ClassVar["KurrencyLocale"]
    SWITZERLAND: ClassVar["KurrencyLocale"]

    language_tag: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale cache.

        Predefined handles stay valid; they are plain class attributes.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, language_tag: str) -> "KurrencyLocale":
        """Create KurrencyLocale with graceful fallback for invalid locales.

        For unknown or malformed tags, logs a warning and falls back to en_US.
        This method always succeeds; use create_or_raise() for strict
        validation.

        Args:
            language_tag: BCP-47 tag (e.g., 'en-US', 'de-DE') or POSIX code

        Returns:
            KurrencyLocale instance. For unknown tags, uses en_US rules while
            preserving the original tag for debugging.
        """
        # "en-US" and "en_US" share a cache entry
        cache_key = normalize_locale(language_tag)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        # Locale.parse is thread-safe; build outside the lock
        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except UnknownLocaleError as e:
            logger.warning("Unknown locale '%s': %s. Falling back to %s", language_tag, e, FALLBACK_LOCALE)
            babel_locale = Locale.parse(FALLBACK_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s", language_tag, e, FALLBACK_LOCALE
            )
            babel_locale = Locale.parse(FALLBACK_LOCALE)
            used_fallback = True

        loc = cls(language_tag=language_tag, _babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            # Double-check: another thread may have won the race
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = loc
            return loc

    @classmethod
    def create_or_raise(cls, language_tag: str) -> "KurrencyLocale":
        """Create KurrencyLocale or raise on validation failure.

        Args:
            language_tag: BCP-47 tag (e.g., 'en-US', 'de-DE')

        Returns:
            KurrencyLocale instance with a valid locale

        Raises:
            ValueError: If the tag is malformed or unknown to CLDR
        """
        try:
            babel_locale = Locale.parse(normalize_locale(language_tag))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{language_tag}': {e}"
            raise ValueError(msg) from None
        except (ValueError, TypeError) as e:
            msg = f"Invalid locale format '{language_tag}': {e}"
            raise ValueError(msg) from None
        return cls(language_tag=language_tag, _babel_locale=babel_locale)

    @classmethod
    def system(cls) -> "KurrencyLocale":
        """Resolve the process locale (LC_ALL, LC_MESSAGES, LANG)."""
        return cls.create(get_system_locale())

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale for this handle."""
        return self._babel_locale

    def __str__(self) -> str:
        return self.language_tag


KurrencyLocale.US = KurrencyLocale.create("en-US")
KurrencyLocale.UK = KurrencyLocale.create("en-GB")
KurrencyLocale.CANADA = KurrencyLocale.create("en-CA")
KurrencyLocale.GERMANY = KurrencyLocale.create("de-DE")
KurrencyLocale.FRANCE = KurrencyLocale.create("fr-FR")
KurrencyLocale.ITALY = KurrencyLocale.create("it-IT")
KurrencyLocale.SPAIN = KurrencyLocale.create("es-ES")
KurrencyLocale.JAPAN = KurrencyLocale.create("ja-JP")
KurrencyLocale.CHINA = KurrencyLocale.create("zh-CN")
KurrencyLocale.KOREA = KurrencyLocale.create("ko-KR")
KurrencyLocale.INDIA = KurrencyLocale.create("hi-IN")
KurrencyLocale.BRAZIL = KurrencyLocale.create("pt-BR")
KurrencyLocale.RUSSIA = KurrencyLocale.create("ru-RU")
KurrencyLocale.MEXICO = KurrencyLocale.create("es-MX")
KurrencyLocale.AUSTRALIA = KurrencyLocale.create("en-AU")
KurrencyLocale.SWITZERLAND = KurrencyLocale.create("de-CH")
