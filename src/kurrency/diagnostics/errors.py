"""Kurrency error taxonomy.

Errors are immutable values, not exceptions. Every Result-returning
operation reports failure by returning one of the four variants below inside
a ``Failure``; nothing crosses the public API boundary as a raised exception.

The set is closed. Callers pattern-match on the variant and read the context
fields directly instead of parsing the message:

    >>> match result.error:
    ...     case InvalidCurrencyCode(code=code):
    ...         show(f"Unknown currency {code}")
    ...     case InvalidAmount(amount=amount):
    ...         show(f"Not a number: {amount}")
    ...     case FormattingFailure() | FractionDigitsFailure():
    ...         show("Formatting unavailable")

Callers that prefer exceptions convert with ``to_exception()``, which is what
``Result.get_or_raise()`` does.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from .codes import Diagnostic, ErrorCategory, ErrorCode
from .templates import ErrorTemplate

__all__ = [
    "FormattingFailure",
    "FractionDigitsFailure",
    "InvalidAmount",
    "InvalidCurrencyCode",
    "KurrencyError",
    "KurrencyException",
]


class KurrencyError:
    """Base of the closed error taxonomy.

    Subclasses are frozen dataclasses and must provide ``diagnostic``.
    ``cause`` is None for validation errors; backend errors carry the
    exception raised by the backend.
    """

    __slots__ = ()

    @property
    def diagnostic(self) -> Diagnostic:
        """Structured diagnostic for this error."""
        raise NotImplementedError

    @property
    def cause(self) -> BaseException | None:
        """Underlying backend exception, if any."""
        return None

    @property
    def error_code(self) -> ErrorCode:
        """Diagnostic code identifying the variant."""
        return self.diagnostic.code

    @property
    def category(self) -> ErrorCategory:
        """Pipeline stage that produced the error."""
        return self.error_code.category

    @property
    def message(self) -> str:
        """Human-readable error description."""
        return self.diagnostic.message

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> "KurrencyException":
        """Wrap this error in a raisable exception."""
        return KurrencyException(self)


@dataclass(frozen=True, slots=True)
class InvalidCurrencyCode(KurrencyError):
    """Currency code is invalid or not recognized.

    Occurs when:
    - Code is not exactly 3 letters
    - Code contains non-alphabetic characters
    - Code is not in the metadata registry (fraction-digit lookups)

    Attributes:
        code: The currency code exactly as provided
    """

    code: str

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.invalid_currency_code(self.code)


@dataclass(frozen=True, slots=True)
class InvalidAmount(KurrencyError):
    """Amount value is invalid or cannot be parsed.

    Occurs when:
    - Amount is blank or empty
    - Amount contains invalid characters
    - Amount cannot be parsed as a number
    - Amount is infinity or NaN

    Attributes:
        amount: The amount exactly as provided
    """

    amount: str

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.invalid_amount(self.amount)


@dataclass(frozen=True, slots=True)
class FormattingFailure(KurrencyError):
    """Backend formatting failed after input passed validation.

    Attributes:
        currency_code: The currency code being formatted
        amount: The amount being formatted, as provided
        cause: Exception raised by (or describing) the backend failure
    """

    currency_code: str
    amount: str
    cause: BaseException = field(compare=False)  # type: ignore[assignment]

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.formatting_failed(self.currency_code, self.amount)


@dataclass(frozen=True, slots=True)
class FractionDigitsFailure(KurrencyError):
    """Fraction-digit lookup failed unexpectedly.

    Distinct from an unknown code, which is reported as InvalidCurrencyCode.

    Attributes:
        currency_code: The currency code that was looked up
        cause: Exception raised by the backend
    """

    currency_code: str
    cause: BaseException = field(compare=False)  # type: ignore[assignment]

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.fraction_digits_failed(self.currency_code)


class KurrencyException(Exception):
    """Raisable wrapper around a KurrencyError value.

    Never raised by the library itself; produced on request by
    ``KurrencyError.to_exception()`` and ``Result.get_or_raise()``.

    Attributes:
        error: The wrapped error value
    """

    def __init__(self, error: KurrencyError) -> None:
        super().__init__(error.diagnostic.format_error())
        self.error = error
        if error.cause is not None:
            self.__cause__ = error.cause
