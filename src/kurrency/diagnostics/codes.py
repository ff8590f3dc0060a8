"""Diagnostic codes and data structures.

Defines error codes, categories, and the structured diagnostic message
carried by every Kurrency error.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "ErrorCategory",
    "ErrorCode",
]


class ErrorCategory(StrEnum):
    """Where in the pipeline an error was detected.

    Inherits from ``StrEnum`` so log aggregation receives plain strings
    (``"validation"``, ``"backend"``) rather than enum reprs.

    Categories:
        VALIDATION: Input rejected before any backend call
        BACKEND: Backend call failed after input passed validation
    """

    VALIDATION = "validation"
    BACKEND = "backend"


class ErrorCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Validation errors (malformed currency codes and amounts)
        2000-2999: Backend errors (rendering and fraction-digit lookups)
    """

    # Validation errors (1000-1999)
    INVALID_CURRENCY_CODE = 1001
    INVALID_AMOUNT = 1002

    # Backend errors (2000-2999)
    FORMATTING_FAILED = 2001
    FRACTION_DIGITS_FAILED = 2002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 2000:
            return ErrorCategory.VALIDATION
        return ErrorCategory.BACKEND


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: ErrorCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Control characters in the message are escaped so that user-supplied
        amounts cannot inject line breaks into logs.

        Example output:
            error[INVALID_AMOUNT]: Invalid amount: abc
              = help: Use digits with an optional sign and one '.' or ',' separator

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape_control_chars(self.message)}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)


def _escape_control_chars(text: str) -> str:
    """Replace non-printable characters with their escape sequences."""
    return "".join(ch if ch.isprintable() else ch.encode("unicode_escape").decode() for ch in text)
