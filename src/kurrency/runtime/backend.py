"""Formatting backend contract and the Babel (CLDR) implementation.

The orchestrator is written against FormattingBackend only. Each runtime
supplies one implementation; in Python that is BabelFormattingBackend, which
renders with Unicode CLDR data. Alternative backends are injected through
CurrencyFormatter(backend_factory=...).

Contract:
    - fraction_digits_or_default() never raises; any failure yields default
    - render_symbol_style()/render_iso_style() receive amounts already
      normalized by the validation layer; on internal failure they return the
      amount unchanged instead of raising
    - is_currency_supported() is the authoritative semantic code check

Python 3.13+. Uses Babel for i18n.
"""

import decimal
import logging
import re
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Protocol, runtime_checkable

from babel import numbers as babel_numbers

from kurrency.core.validation import to_decimal

from .locale_context import KurrencyLocale

__all__ = [
    "BabelFormattingBackend",
    "BackendFactory",
    "FormattingBackend",
]

logger = logging.getLogger(__name__)

# Single currency sign = symbol, double = ISO code (CLDR pattern syntax)
_CURRENCY_SIGN = "\xa4"
_ISO_CODE_SIGN = "\xa4\xa4"

# CLDR currencySpacing: separate an alphabetic code from adjacent digits
_CODE_BEFORE_DIGIT = re.compile(r"\xa4\xa4(?=[#0-9])")
_CODE_AFTER_DIGIT = re.compile(r"(?<=[#0-9])\xa4\xa4")
_CURRENCY_SPACE = "\xa0"

# Headroom over the integer digits for fraction digits and rounding
_PRECISION_MARGIN = 10


# pylint: disable=unnecessary-ellipsis
@runtime_checkable
class FormattingBackend(Protocol):
    """Per-runtime currency formatting capability.

    Implementations are bound to one locale at construction and must be
    safe for concurrent use.
    """

    def fraction_digits_or_default(self, currency_code: str, default: int) -> int:
        """Canonical fraction digits for the code, or default if unknown."""
        ...

    def render_symbol_style(self, normalized_amount: str, currency_code: str) -> str:
        """Render with the currency symbol ($1,234.56)."""
        ...

    def render_iso_style(self, normalized_amount: str, currency_code: str) -> str:
        """Render with the ISO 4217 code (USD 1,234.56)."""
        ...

    def is_currency_supported(self, currency_code: str) -> bool:
        """Whether the runtime's currency database knows the code."""
        ...
# pylint: enable=unnecessary-ellipsis


type BackendFactory = Callable[[KurrencyLocale], FormattingBackend]
"""Builds the backend for a formatter's locale."""


class BabelFormattingBackend:
    """FormattingBackend over Babel's CLDR number formatting.

    Thread Safety:
        Stateless apart from the immutable locale handle. Babel formatting
        functions do not touch global locale state.

    Examples:
        >>> backend = BabelFormattingBackend(KurrencyLocale.US)
        >>> backend.render_symbol_style("1234.56", "USD")
        '$1,234.56'
        >>> backend.render_iso_style("1234.56", "USD")
        'USD\\xa01,234.56'
        >>> backend.fraction_digits_or_default("JPY", 2)
        0
    """

    __slots__ = ("_locale",)

    # Babel raises these for unknown currencies, bad patterns, and bad numbers
    _FORMAT_ERRORS: tuple[type[Exception], ...] = (
        ValueError,
        TypeError,
        InvalidOperation,
        AttributeError,
        KeyError,
        babel_numbers.UnknownCurrencyError,
    )

    def __init__(self, locale: KurrencyLocale) -> None:
        self._locale = locale

    @property
    def locale(self) -> KurrencyLocale:
        return self._locale

    def is_currency_supported(self, currency_code: str) -> bool:
        """Check the code against CLDR's list of all currencies.

        Args:
            currency_code: ISO 4217 code. Case-insensitive.

        Returns:
            True if CLDR knows the currency (including historic ones)
        """
        if not isinstance(currency_code, str) or not currency_code:
            return False
        return bool(babel_numbers.is_currency(currency_code.upper()))

    def fraction_digits_or_default(self, currency_code: str, default: int) -> int:
        """Get CLDR fraction digits for a currency.

        Args:
            currency_code: ISO 4217 code. Case-insensitive.
            default: Value returned for unknown codes or lookup errors

        Returns:
            Fraction digits (e.g., 2 for USD, 0 for JPY, 3 for KWD)
        """
        try:
            code = currency_code.upper()
            if not babel_numbers.is_currency(code):
                logger.warning("Failed to get fraction digits for %s: unknown currency", currency_code)
                return default
            digits = babel_numbers.get_currency_precision(code)
        except self._FORMAT_ERRORS as e:
            logger.warning("Failed to get fraction digits for %s: %s", currency_code, e)
            return default
        return digits if digits >= 0 else default

    def render_symbol_style(self, normalized_amount: str, currency_code: str) -> str:
        """Format with the locale's standard currency pattern.

        Args:
            normalized_amount: Dot-decimal amount from normalize_amount()
            currency_code: ISO 4217 code

        Returns:
            Formatted string, or normalized_amount if formatting fails
        """
        return self._render_or_original(normalized_amount, currency_code, use_iso_code=False)

    def render_iso_style(self, normalized_amount: str, currency_code: str) -> str:
        """Format with the ISO code in place of the symbol.

        Args:
            normalized_amount: Dot-decimal amount from normalize_amount()
            currency_code: ISO 4217 code

        Returns:
            Formatted string, or normalized_amount if formatting fails
        """
        return self._render_or_original(normalized_amount, currency_code, use_iso_code=True)

    def _render_or_original(
        self,
        normalized_amount: str,
        currency_code: str,
        *,
        use_iso_code: bool,
    ) -> str:
        try:
            value = to_decimal(normalized_amount)
            if not value.is_finite():
                msg = "Amount must be a finite number"
                raise ValueError(msg)

            code = currency_code.upper()
            # Babel formats unknown codes verbatim; treat them as failures
            babel_numbers.validate_currency(code)

            # Babel quantizes in the active context; widen it for large magnitudes
            with decimal.localcontext() as ctx:
                ctx.prec = max(ctx.prec, value.adjusted() + _PRECISION_MARGIN)
                if use_iso_code:
                    return self._format_iso(value, code)
                return str(
                    babel_numbers.format_currency(
                        value,
                        code,
                        locale=self._locale.babel_locale,
                        currency_digits=True,
                        format_type="standard",
                    )
                )
        except self._FORMAT_ERRORS as e:
            logger.warning(
                "Formatting failed for %s with amount %s: %s", currency_code, normalized_amount, e
            )
            return normalized_amount

    def _format_iso(self, value: Decimal, code: str) -> str:
        """Format using the standard pattern with the ISO code designator."""
        babel_locale = self._locale.babel_locale
        standard_pattern = babel_locale.currency_formats.get("standard")
        raw_pattern = getattr(standard_pattern, "pattern", None)

        if raw_pattern and _CURRENCY_SIGN in raw_pattern:
            code_pattern = raw_pattern.replace(_CURRENCY_SIGN, _ISO_CODE_SIGN)
            code_pattern = _CODE_BEFORE_DIGIT.sub(_ISO_CODE_SIGN + _CURRENCY_SPACE, code_pattern)
            code_pattern = _CODE_AFTER_DIGIT.sub(_CURRENCY_SPACE + _ISO_CODE_SIGN, code_pattern)
            return str(
                babel_numbers.format_currency(
                    value,
                    code,
                    format=code_pattern,
                    locale=babel_locale,
                    currency_digits=True,
                )
            )

        # Pattern lacks a currency placeholder: prefix the code to the number
        logger.debug("Currency pattern for locale %s lacks placeholder", self._locale.language_tag)
        digits = babel_numbers.get_currency_precision(code)
        number_pattern = "#,##0" + ("." + "0" * digits if digits > 0 else "")
        number = babel_numbers.format_decimal(value, format=number_pattern, locale=babel_locale)
        return f"{code}{_CURRENCY_SPACE}{number}"

    def __repr__(self) -> str:
        return f"BabelFormattingBackend(locale={self._locale.language_tag!r})"
