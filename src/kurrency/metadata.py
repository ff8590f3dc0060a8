"""Static registry of commonly used currencies.

CurrencyMetadata is a closed enum of display data (name, symbol, flag,
canonical fraction digits) keyed by ISO 4217 code. It is locale-independent
and does not touch Babel; the formatting backend stays authoritative for
fraction digits at format time.

The code lookup map is built once, on first parse(), under Lazy.

Python 3.13+. Zero external dependencies.
"""

import logging
from enum import Enum

from kurrency.core.lazy import Lazy
from kurrency.diagnostics import InvalidCurrencyCode
from kurrency.result import Failure, Result, Success

__all__ = ["CurrencyMetadata"]

logger = logging.getLogger(__name__)


class CurrencyMetadata(Enum):
    """Registry entry for a supported currency.

    Members are named by their uppercase ISO 4217 code.

    Examples:
        >>> CurrencyMetadata.JPY.fraction_digits
        0
        >>> CurrencyMetadata.parse("eur").get_or_raise() is CurrencyMetadata.EUR
        True
    """

    # (code, display_name, symbol, country_iso, flag, fraction_digits)
    USD = ("USD", "US Dollar", "$", "US", "\U0001f1fa\U0001f1f8", 2)
    EUR = ("EUR", "Euro", "€", "EU", "\U0001f1ea\U0001f1fa", 2)
    GBP = ("GBP", "British Pound", "£", "GB", "\U0001f1ec\U0001f1e7", 2)
    JPY = ("JPY", "Japanese Yen", "¥", "JP", "\U0001f1ef\U0001f1f5", 0)
    CNY = ("CNY", "Chinese Yuan", "¥", "CN", "\U0001f1e8\U0001f1f3", 2)
    AUD = ("AUD", "Australian Dollar", "$", "AU", "\U0001f1e6\U0001f1fa", 2)
    CAD = ("CAD", "Canadian Dollar", "$", "CA", "\U0001f1e8\U0001f1e6", 2)
    CHF = ("CHF", "Swiss Franc", "CHF", "CH", "\U0001f1e8\U0001f1ed", 2)
    INR = ("INR", "Indian Rupee", "₹", "IN", "\U0001f1ee\U0001f1f3", 2)
    MXN = ("MXN", "Mexican Peso", "$", "MX", "\U0001f1f2\U0001f1fd", 2)
    BRL = ("BRL", "Brazilian Real", "R$", "BR", "\U0001f1e7\U0001f1f7", 2)
    ZAR = ("ZAR", "South African Rand", "R", "ZA", "\U0001f1ff\U0001f1e6", 2)
    SGD = ("SGD", "Singapore Dollar", "$", "SG", "\U0001f1f8\U0001f1ec", 2)
    HKD = ("HKD", "Hong Kong Dollar", "$", "HK", "\U0001f1ed\U0001f1f0", 2)
    NZD = ("NZD", "New Zealand Dollar", "$", "NZ", "\U0001f1f3\U0001f1ff", 2)
    SEK = ("SEK", "Swedish Krona", "kr", "SE", "\U0001f1f8\U0001f1ea", 2)
    NOK = ("NOK", "Norwegian Krone", "kr", "NO", "\U0001f1f3\U0001f1f4", 2)
    DKK = ("DKK", "Danish Krone", "kr", "DK", "\U0001f1e9\U0001f1f0", 2)
    PLN = ("PLN", "Polish Zloty", "zł", "PL", "\U0001f1f5\U0001f1f1", 2)
    TRY = ("TRY", "Turkish Lira", "₺", "TR", "\U0001f1f9\U0001f1f7", 2)
    RUB = ("RUB", "Russian Ruble", "₽", "RU", "\U0001f1f7\U0001f1fa", 2)
    THB = ("THB", "Thai Baht", "฿", "TH", "\U0001f1f9\U0001f1ed", 2)
    IDR = ("IDR", "Indonesian Rupiah", "Rp", "ID", "\U0001f1ee\U0001f1e9", 2)
    MYR = ("MYR", "Malaysian Ringgit", "RM", "MY", "\U0001f1f2\U0001f1fe", 2)
    PHP = ("PHP", "Philippine Peso", "₱", "PH", "\U0001f1f5\U0001f1ed", 2)
    CZK = ("CZK", "Czech Koruna", "Kč", "CZ", "\U0001f1e8\U0001f1ff", 2)
    ILS = ("ILS", "Israeli Shekel", "₪", "IL", "\U0001f1ee\U0001f1f1", 2)
    CLP = ("CLP", "Chilean Peso", "$", "CL", "\U0001f1e8\U0001f1f1", 0)
    AED = ("AED", "UAE Dirham", "د.إ", "AE", "\U0001f1e6\U0001f1ea", 2)
    SAR = ("SAR", "Saudi Riyal", "﷼", "SA", "\U0001f1f8\U0001f1e6", 2)
    KRW = ("KRW", "South Korean Won", "₩", "KR", "\U0001f1f0\U0001f1f7", 0)
    TWD = ("TWD", "Taiwan Dollar", "NT$", "TW", "\U0001f1f9\U0001f1fc", 2)
    VND = ("VND", "Vietnamese Dong", "₫", "VN", "\U0001f1fb\U0001f1f3", 0)
    ARS = ("ARS", "Argentine Peso", "$", "AR", "\U0001f1e6\U0001f1f7", 2)
    COP = ("COP", "Colombian Peso", "$", "CO", "\U0001f1e8\U0001f1f4", 2)
    PEN = ("PEN", "Peruvian Sol", "S/", "PE", "\U0001f1f5\U0001f1ea", 2)
    UAH = ("UAH", "Ukrainian Hryvnia", "₴", "UA", "\U0001f1fa\U0001f1e6", 2)
    RON = ("RON", "Romanian Leu", "lei", "RO", "\U0001f1f7\U0001f1f4", 2)
    HUF = ("HUF", "Hungarian Forint", "Ft", "HU", "\U0001f1ed\U0001f1fa", 2)
    BGN = ("BGN", "Bulgarian Lev", "лв", "BG", "\U0001f1e7\U0001f1ec", 2)
    PKR = ("PKR", "Pakistani Rupee", "₨", "PK", "\U0001f1f5\U0001f1f0", 2)
    BDT = ("BDT", "Bangladeshi Taka", "৳", "BD", "\U0001f1e7\U0001f1e9", 2)
    LKR = ("LKR", "Sri Lankan Rupee", "Rs", "LK", "\U0001f1f1\U0001f1f0", 2)
    EGP = ("EGP", "Egyptian Pound", "£", "EG", "\U0001f1ea\U0001f1ec", 2)
    NGN = ("NGN", "Nigerian Naira", "₦", "NG", "\U0001f1f3\U0001f1ec", 2)
    KES = ("KES", "Kenyan Shilling", "KSh", "KE", "\U0001f1f0\U0001f1ea", 2)
    TZS = ("TZS", "Tanzanian Shilling", "TSh", "TZ", "\U0001f1f9\U0001f1ff", 2)
    QAR = ("QAR", "Qatari Riyal", "﷼", "QA", "\U0001f1f6\U0001f1e6", 2)
    KWD = ("KWD", "Kuwaiti Dinar", "د.ك", "KW", "\U0001f1f0\U0001f1fc", 3)
    OMR = ("OMR", "Omani Rial", "﷼", "OM", "\U0001f1f4\U0001f1f2", 3)

    def __init__(  # noqa: PLR0913 - one parameter per table column
        self,
        code: str,
        display_name: str,
        symbol: str,
        country_iso: str,
        flag: str,
        fraction_digits: int,
    ) -> None:
        self.code = code
        self.display_name = display_name
        self.symbol = symbol
        self.country_iso = country_iso
        self.flag = flag
        self.fraction_digits = fraction_digits

    @classmethod
    def parse(cls, code: str) -> Result["CurrencyMetadata"]:
        """Look up a currency by ISO 4217 code.

        Args:
            code: Currency code. Case-insensitive; surrounding whitespace ignored.

        Returns:
            Success with the entry, or Failure(InvalidCurrencyCode) carrying the
            code exactly as given
        """
        if not isinstance(code, str) or not code.strip():
            error = InvalidCurrencyCode(str(code))
            logger.warning("%s", error.message)
            return Failure(error)

        normalized = code.strip().upper()
        logger.debug("Parsing currency code: %s", normalized)

        metadata = _CODE_MAP.get().get(normalized)
        if metadata is None:
            error = InvalidCurrencyCode(code)
            logger.warning("%s", error.message)
            return Failure(error)

        logger.debug("Parsed currency: %s %s", metadata.display_name, metadata.flag)
        return Success(metadata)

    @classmethod
    def get_all(cls) -> tuple["CurrencyMetadata", ...]:
        """All registered currencies in declaration order."""
        return tuple(cls)

    def __str__(self) -> str:
        return self.code


def _build_code_map() -> dict[str, CurrencyMetadata]:
    logger.debug("Initializing CurrencyMetadata map with %d currencies", len(CurrencyMetadata))
    return {member.code.upper(): member for member in CurrencyMetadata}


_CODE_MAP: Lazy[dict[str, CurrencyMetadata]] = Lazy(_build_code_map)
