"""Currency value entity.

A Currency pairs an ISO 4217 code with its canonical fraction digits. Build
one with Currency.from_code() for validated, registry-backed instances; the
raw constructor accepts any code and is meant for tests and currencies the
registry does not list.

Python 3.13+.
"""

from dataclasses import dataclass

from kurrency.enums import CurrencyStyle
from kurrency.metadata import CurrencyMetadata
from kurrency.result import Failure, Result, Success
from kurrency.runtime import Amount, CurrencyFormatter, KurrencyLocale

__all__ = ["Currency"]


@dataclass(frozen=True, slots=True)
class Currency:
    """ISO 4217 currency with canonical fraction digits.

    Attributes:
        code: ISO 4217 code
        fraction_digits: Digits after the decimal separator (2 for USD, 0 for JPY)

    Examples:
        >>> usd = Currency.from_code("usd").get_or_raise()
        >>> usd
        Currency(code='USD', fraction_digits=2)
        >>> usd.format_amount("1234.5", locale=KurrencyLocale.US).get_or_raise()
        '$1,234.50'
    """

    code: str
    fraction_digits: int

    def __post_init__(self) -> None:
        if self.fraction_digits < 0:
            msg = f"fraction_digits must be non-negative, got {self.fraction_digits}"
            raise ValueError(msg)

    @classmethod
    def from_code(cls, code: str) -> Result["Currency"]:
        """Create a Currency for a registered code.

        Args:
            code: ISO 4217 code. Case-insensitive; surrounding whitespace ignored.

        Returns:
            Success with the Currency, or Failure(InvalidCurrencyCode) for
            unregistered codes, or Failure(FractionDigitsFailure)
        """
        metadata = CurrencyMetadata.parse(code)
        if isinstance(metadata, Failure):
            return metadata

        digits = CurrencyFormatter.get_fraction_digits(metadata.value.code)
        if isinstance(digits, Failure):
            return digits
        return Success(cls(code=metadata.value.code, fraction_digits=digits.value))

    @property
    def metadata(self) -> CurrencyMetadata | None:
        """Registry entry for this code, or None if unregistered."""
        return CurrencyMetadata.parse(self.code).get_or_none()

    def format_amount(
        self,
        amount: Amount,
        style: CurrencyStyle = CurrencyStyle.STANDARD,
        locale: KurrencyLocale | str | None = None,
    ) -> Result[str]:
        """Format an amount in this currency.

        Args:
            amount: Amount such as "1234.56", "1234,56", 100, or Decimal("9.99")
            style: STANDARD for the symbol, ISO for the ISO code
            locale: Output locale; None uses the system locale

        Returns:
            Result with the formatted string
        """
        formatter = CurrencyFormatter(locale)
        match style:
            case CurrencyStyle.ISO:
                return formatter.format_iso_currency_style_result(amount, self.code)
            case _:
                return formatter.format_currency_style_result(amount, self.code)

    def __str__(self) -> str:
        return self.code
