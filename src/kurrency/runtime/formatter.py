"""CurrencyFormatter: validation-and-formatting orchestrator.

The formatter owns one locale and lazily owns one FormattingBackend bound to
it. Every format call runs the same pipeline:

    1. Currency code shape check   -> InvalidCurrencyCode
    2. Amount normalization         -> InvalidAmount
    3. Backend render               -> FormattingFailure

Validation failures never reach the backend. Backend exceptions are caught
here and surface only as the ``cause`` of a FormattingFailure.

Two API flavors:
    - ``*_result`` methods return Result[str] and never raise
    - plain methods return the formatted string, or the input amount
      unchanged on any failure (use the Result flavor to tell them apart)

Locale-independent operations (fraction digits, code validity) are static
and go through a process-wide default formatter built on first use.

Thread Safety:
    Formatter instances are safe to share between threads. The backend is
    built at most once per formatter (Lazy) and never replaced.

Python 3.13+. Uses Babel through BabelFormattingBackend.
"""

import logging
from collections.abc import Callable
from decimal import Decimal

from kurrency.constants import DEFAULT_FORMATTER_LOCALE, DEFAULT_FRACTION_DIGITS
from kurrency.core.lazy import Lazy
from kurrency.core.validation import is_valid_currency_code, normalize_amount
from kurrency.diagnostics import (
    FormattingFailure,
    FractionDigitsFailure,
    InvalidAmount,
    InvalidCurrencyCode,
)
from kurrency.metadata import CurrencyMetadata
from kurrency.result import Failure, Result, Success

from .backend import BabelFormattingBackend, BackendFactory, FormattingBackend
from .locale_context import KurrencyLocale

__all__ = [
    "Amount",
    "CurrencyFormatter",
    "is_valid_currency",
]

logger = logging.getLogger(__name__)

type Amount = str | int | Decimal
"""Accepted amount types. Non-strings are converted with str()."""

type _Render = Callable[[FormattingBackend, str, str], object]


class CurrencyFormatter:
    """Locale-bound currency formatter.

    Examples:
        >>> formatter = CurrencyFormatter(KurrencyLocale.US)
        >>> formatter.format_currency_style_result("1234.56", "USD")
        Success(value='$1,234.56')
        >>> formatter.format_currency_style("abc", "USD")
        'abc'
        >>> CurrencyFormatter.get_fraction_digits("JPY")
        Success(value=0)

    Args:
        locale: KurrencyLocale, BCP-47 tag, or None for the system locale
        backend_factory: Builds the backend for the locale. Defaults to
            BabelFormattingBackend.
        logger: Logger (or adapter) for this formatter's diagnostics.
            Defaults to the module logger.
    """

    __slots__ = ("_backend", "_backend_factory", "_locale", "_logger")

    def __init__(
        self,
        locale: KurrencyLocale | str | None = None,
        *,
        backend_factory: BackendFactory | None = None,
        logger: logging.Logger | logging.LoggerAdapter[logging.Logger] | None = None,
    ) -> None:
        match locale:
            case None:
                resolved = KurrencyLocale.system()
            case KurrencyLocale():
                resolved = locale
            case str():
                resolved = KurrencyLocale.create(locale)
            case _:
                msg = f"locale must be KurrencyLocale, str, or None, got {type(locale).__name__}"
                raise TypeError(msg)

        self._locale = resolved
        self._backend_factory: BackendFactory = backend_factory or BabelFormattingBackend
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._backend: Lazy[FormattingBackend] = Lazy(self._create_backend)

    def _create_backend(self) -> FormattingBackend:
        self._logger.debug("Initializing CurrencyFormatter with locale: %s", self._locale.language_tag)
        backend = self._backend_factory(self._locale)
        if not isinstance(backend, FormattingBackend):
            msg = f"backend_factory returned {type(backend).__name__}, not a FormattingBackend"
            raise TypeError(msg)
        return backend

    @property
    def locale(self) -> KurrencyLocale:
        """Locale this formatter renders for."""
        return self._locale

    @property
    def backend(self) -> FormattingBackend:
        """Backend bound to this formatter's locale (built on first access)."""
        return self._backend.get()

    # ==========================================================================
    # Result API
    # ==========================================================================

    def format_currency_style_result(self, amount: Amount, currency_code: str) -> Result[str]:
        """Format with the currency symbol.

        Args:
            amount: Amount such as "1234.56", "1234,56", 100, or Decimal("9.99")
            currency_code: ISO 4217 code (e.g., "USD", "eur")

        Returns:
            Success with the formatted string, or Failure with
            InvalidCurrencyCode, InvalidAmount, or FormattingFailure
        """
        return self._format_with_validation(amount, currency_code, _render_symbol)

    def format_iso_currency_style_result(self, amount: Amount, currency_code: str) -> Result[str]:
        """Format with the ISO 4217 code in place of the symbol.

        Args:
            amount: Amount such as "1234.56", "1234,56", 100, or Decimal("9.99")
            currency_code: ISO 4217 code (e.g., "USD", "eur")

        Returns:
            Success with the formatted string, or Failure with
            InvalidCurrencyCode, InvalidAmount, or FormattingFailure
        """
        return self._format_with_validation(amount, currency_code, _render_iso)

    # ==========================================================================
    # Convenience API
    # ==========================================================================

    def format_currency_style(self, amount: Amount, currency_code: str) -> str:
        """Format with the currency symbol, falling back to the input.

        Never raises. On any failure returns ``str(amount)``, which cannot be
        told apart from a formatted value that happens to be identical.
        """
        amount_text = _amount_text(amount)
        return self.format_currency_style_result(amount, currency_code).get_or_else(
            lambda _: amount_text
        )

    def format_iso_currency_style(self, amount: Amount, currency_code: str) -> str:
        """Format with the ISO code, falling back to the input.

        Never raises. On any failure returns ``str(amount)``.
        """
        amount_text = _amount_text(amount)
        return self.format_iso_currency_style_result(amount, currency_code).get_or_else(
            lambda _: amount_text
        )

    def _format_with_validation(
        self,
        amount: Amount,
        currency_code: str,
        render: _Render,
    ) -> Result[str]:
        if not is_valid_currency_code(currency_code):
            code_error = InvalidCurrencyCode(str(currency_code))
            self._logger.warning("%s", code_error.message)
            return Failure(code_error)

        amount_text = _amount_text(amount)
        normalized = normalize_amount(amount_text)
        if normalized is None:
            amount_error = InvalidAmount(amount_text)
            self._logger.warning("%s", amount_error.message)
            return Failure(amount_error)

        self._logger.debug("Formatting: amount=%s, currency=%s", amount_text, currency_code)

        try:
            rendered = render(self._backend.get(), normalized, currency_code)
        except Exception as e:  # noqa: BLE001 - backend boundary, exposed as cause
            return self._formatting_failure(currency_code, amount_text, e)

        if not isinstance(rendered, str) or not rendered:
            cause = TypeError(f"Backend returned {rendered!r} instead of a formatted string")
            return self._formatting_failure(currency_code, amount_text, cause)

        # Backends echo the amount when they cannot format it
        if rendered in (normalized, amount_text):
            cause = ValueError(f"Backend could not format {currency_code}; amount returned unchanged")
            self._logger.warning("Formatting degraded for %s: %s", currency_code, amount_text)
            return self._formatting_failure(currency_code, amount_text, cause)

        return Success(rendered)

    def _formatting_failure(self, currency_code: str, amount: str, cause: Exception) -> Failure:
        error = FormattingFailure(currency_code, amount, cause)
        self._logger.error("%s", error.message, exc_info=cause)
        return Failure(error)

    # ==========================================================================
    # Locale-independent operations
    # ==========================================================================

    @staticmethod
    def get_fraction_digits(currency_code: str) -> Result[int]:
        """Get canonical fraction digits for a registered currency.

        Fraction digits are an ISO 4217 property and do not vary by locale.
        The registry gates the lookup; the backend supplies the value.

        Args:
            currency_code: ISO 4217 code. Case-insensitive.

        Returns:
            Success with the digit count (2 for USD, 0 for JPY, 3 for KWD),
            Failure(InvalidCurrencyCode) for unregistered codes, or
            Failure(FractionDigitsFailure) if the backend fails unexpectedly
        """
        metadata = CurrencyMetadata.parse(currency_code)
        if isinstance(metadata, Failure):
            return metadata

        normalized_code = metadata.value.code.upper()
        logger.debug("Getting fraction digits for: %s", normalized_code)
        try:
            backend = _default_formatter.get().backend
            digits = backend.fraction_digits_or_default(normalized_code, DEFAULT_FRACTION_DIGITS)
        except Exception as e:  # noqa: BLE001 - backend boundary, exposed as cause
            error = FractionDigitsFailure(currency_code, e)
            logger.error("%s", error.message, exc_info=e)
            return Failure(error)
        return Success(digits)

    @staticmethod
    def get_fraction_digits_or_default(currency_code: str) -> int:
        """Get fraction digits, or DEFAULT_FRACTION_DIGITS on any failure."""
        return CurrencyFormatter.get_fraction_digits(currency_code).get_or_default(
            DEFAULT_FRACTION_DIGITS
        )

    @staticmethod
    def is_valid_currency_code(code: str) -> bool:
        """Syntactic check: exactly 3 letters."""
        return is_valid_currency_code(code)

    def __repr__(self) -> str:
        return f"CurrencyFormatter(locale={self._locale.language_tag!r})"


def is_valid_currency(currency_code: str) -> bool:
    """Check that a code is well formed and known to the default backend.

    Args:
        currency_code: ISO 4217 code. Case-insensitive.

    Returns:
        True if the code is 3 letters and the backend's currency data knows it
    """
    if not is_valid_currency_code(currency_code):
        return False
    try:
        return bool(_default_formatter.get().backend.is_currency_supported(currency_code))
    except Exception:  # noqa: BLE001 - semantic check degrades to False
        logger.warning("Currency support check failed for %s", currency_code, exc_info=True)
        return False


def _amount_text(amount: Amount) -> str:
    return amount if isinstance(amount, str) else str(amount)


def _render_symbol(backend: FormattingBackend, normalized: str, currency_code: str) -> object:
    return backend.render_symbol_style(normalized, currency_code)


def _render_iso(backend: FormattingBackend, normalized: str, currency_code: str) -> object:
    return backend.render_iso_style(normalized, currency_code)


def _create_default_formatter() -> CurrencyFormatter:
    logger.debug("Initializing default CurrencyFormatter")
    return CurrencyFormatter(KurrencyLocale.create(DEFAULT_FORMATTER_LOCALE))


_default_formatter: Lazy[CurrencyFormatter] = Lazy(_create_default_formatter)
