"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. Error variants build their
    diagnostics through these methods instead of formatting strings inline,
    which keeps the wording testable and in one place.
    """

    @staticmethod
    def invalid_currency_code(code: str) -> Diagnostic:
        """Currency code is malformed or not recognized.

        Args:
            code: The currency code as provided by the caller

        Returns:
            Diagnostic for INVALID_CURRENCY_CODE
        """
        msg = f"Invalid currency code: {code}"
        return Diagnostic(
            code=ErrorCode.INVALID_CURRENCY_CODE,
            message=msg,
            hint="Use a 3-letter ISO 4217 code such as 'USD' or 'EUR'",
        )

    @staticmethod
    def invalid_amount(amount: str) -> Diagnostic:
        """Amount is blank, not numeric, or not finite.

        Args:
            amount: The amount as provided by the caller

        Returns:
            Diagnostic for INVALID_AMOUNT
        """
        msg = f"Invalid amount: {amount}"
        return Diagnostic(
            code=ErrorCode.INVALID_AMOUNT,
            message=msg,
            hint="Use digits with an optional sign and one '.' or ',' separator",
        )

    @staticmethod
    def formatting_failed(currency_code: str, amount: str) -> Diagnostic:
        """Backend rendering failed after validation passed.

        Args:
            currency_code: The currency code being formatted
            amount: The amount being formatted

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Formatting failed for {currency_code}: {amount}"
        return Diagnostic(
            code=ErrorCode.FORMATTING_FAILED,
            message=msg,
            hint="Check that the currency is known to the formatting backend",
        )

    @staticmethod
    def fraction_digits_failed(currency_code: str) -> Diagnostic:
        """Backend fraction-digit lookup failed unexpectedly.

        Args:
            currency_code: The currency code that was looked up

        Returns:
            Diagnostic for FRACTION_DIGITS_FAILED
        """
        msg = f"Failed to get fraction digits for {currency_code}"
        return Diagnostic(
            code=ErrorCode.FRACTION_DIGITS_FAILED,
            message=msg,
        )
