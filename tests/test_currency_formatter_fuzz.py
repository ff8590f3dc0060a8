"""Wide-range property sweeps over locales, currencies and magnitudes.

Marked fuzz: skipped in normal runs, executed with ``pytest -m fuzz``.
"""

from decimal import Decimal

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from kurrency import CurrencyFormatter, KurrencyLocale
from tests.strategies import decimal_amounts, large_amount_strings, registered_codes

PREDEFINED_LOCALES = [
    KurrencyLocale.US,
    KurrencyLocale.UK,
    KurrencyLocale.CANADA,
    KurrencyLocale.GERMANY,
    KurrencyLocale.FRANCE,
    KurrencyLocale.ITALY,
    KurrencyLocale.SPAIN,
    KurrencyLocale.JAPAN,
    KurrencyLocale.CHINA,
    KurrencyLocale.KOREA,
    KurrencyLocale.INDIA,
    KurrencyLocale.BRAZIL,
    KurrencyLocale.RUSSIA,
    KurrencyLocale.MEXICO,
    KurrencyLocale.AUSTRALIA,
    KurrencyLocale.SWITZERLAND,
]

_FORMATTERS = {loc.language_tag: CurrencyFormatter(loc) for loc in PREDEFINED_LOCALES}

locales = st.sampled_from(PREDEFINED_LOCALES)


@pytest.mark.fuzz
class TestLocaleSweep:
    """Every predefined locale formats every registered currency."""

    @given(loc=locales, code=registered_codes, amount=decimal_amounts)
    @settings(max_examples=1000)
    def test_symbol_style_succeeds(self, loc: KurrencyLocale, code: str, amount: Decimal) -> None:
        event(f"locale={loc.language_tag}")
        result = _FORMATTERS[loc.language_tag].format_currency_style_result(amount, code)
        assert result.is_success
        assert result.get_or_raise() != str(amount)

    @given(loc=locales, code=registered_codes, amount=decimal_amounts)
    @settings(max_examples=1000)
    def test_iso_style_shows_code(self, loc: KurrencyLocale, code: str, amount: Decimal) -> None:
        event(f"locale={loc.language_tag}")
        rendered = _FORMATTERS[loc.language_tag].format_iso_currency_style_result(amount, code)
        assert code in rendered.get_or_raise()


@pytest.mark.fuzz
class TestMagnitudeSweep:
    """Magnitudes up to the double range never fall back."""

    @given(amount=large_amount_strings, code=registered_codes)
    @settings(max_examples=500)
    def test_large_amounts_keep_every_integer_digit(self, amount: str, code: str) -> None:
        rendered = _FORMATTERS["en-US"].format_currency_style_result(amount, code).get_or_raise()
        digits = CurrencyFormatter.get_fraction_digits(code).get_or_raise()
        integer_digits = Decimal(amount).adjusted() + 1
        assert sum(ch.isdigit() for ch in rendered) == integer_digits + digits

    @given(loc=locales, amount=large_amount_strings)
    @settings(max_examples=500)
    def test_large_amounts_both_styles(self, loc: KurrencyLocale, amount: str) -> None:
        formatter = _FORMATTERS[loc.language_tag]
        assert formatter.format_currency_style_result(amount, "EUR").is_success
        assert formatter.format_iso_currency_style_result(amount, "EUR").is_success
