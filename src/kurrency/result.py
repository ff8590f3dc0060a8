"""Result type for operations that never raise.

Every fallible public operation returns ``Result[T]``: either ``Success``
holding the value or ``Failure`` holding a KurrencyError. Both are frozen,
hashable, and safe to share between threads.

Type guards narrow the union for mypy (PEP 742):

    >>> result = formatter.format_currency_style_result("1234.56", "USD")
    >>> if is_success(result):
    ...     render(result.value)  # mypy knows result is Success[str]
    ... else:
    ...     log(result.error.message)

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn, TypeIs

from kurrency.diagnostics import KurrencyError

__all__ = [
    "Failure",
    "Result",
    "Success",
    "is_failure",
    "is_success",
]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def get_or_none(self) -> T:
        return self.value

    def get_or_default[D](self, default: D) -> T | D:  # noqa: ARG002
        return self.value

    def get_or_else[D](self, on_failure: Callable[[KurrencyError], D]) -> T | D:  # noqa: ARG002
        return self.value

    def get_or_raise(self) -> T:
        return self.value

    def error_or_none(self) -> None:
        return None

    def map[U](self, transform: Callable[[T], U]) -> "Success[U]":
        return Success(transform(self.value))


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed outcome carrying a KurrencyError."""

    error: KurrencyError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def get_or_none(self) -> None:
        return None

    def get_or_default[D](self, default: D) -> D:
        return default

    def get_or_else[D](self, on_failure: Callable[[KurrencyError], D]) -> D:
        """Compute a replacement value from the error."""
        return on_failure(self.error)

    def get_or_raise(self) -> NoReturn:
        """Raise the error wrapped in KurrencyException."""
        raise self.error.to_exception()

    def error_or_none(self) -> KurrencyError:
        return self.error

    def map(self, transform: Callable[..., object]) -> "Failure":  # noqa: ARG002
        return self


type Result[T] = Success[T] | Failure
"""Outcome of a fallible operation."""


def is_success[T](result: Result[T]) -> TypeIs[Success[T]]:
    """Type guard: Check if result holds a value.

    Args:
        result: Any Result

    Returns:
        True if result is a Success
    """
    return isinstance(result, Success)


def is_failure[T](result: Result[T]) -> TypeIs[Failure]:
    """Type guard: Check if result holds an error.

    Args:
        result: Any Result

    Returns:
        True if result is a Failure
    """
    return isinstance(result, Failure)
