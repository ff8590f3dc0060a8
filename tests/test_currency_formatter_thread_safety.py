"""Thread safety tests for CurrencyFormatter.

Validates concurrent use of a shared formatter, per-thread formatters,
at-most-once backend construction, and the shared default formatter.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest

from kurrency import CurrencyFormatter, KurrencyLocale
from kurrency.core import Lazy
from kurrency.runtime import formatter as formatter_module
from tests.helpers.backends import CountingFactory
from tests.helpers.text import normalize_spaces


class TestSharedFormatter:
    """One formatter used from many threads."""

    def test_concurrent_symbol_formatting(self) -> None:
        formatter = CurrencyFormatter(KurrencyLocale.US)

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [
                executor.submit(formatter.format_currency_style_result, "1234.56", "USD")
                for _ in range(100)
            ]
            results = [future.result() for future in as_completed(futures)]

        assert all(r.get_or_none() == "$1,234.56" for r in results)

    def test_concurrent_mixed_operations(self) -> None:
        formatter = CurrencyFormatter(KurrencyLocale.US)

        def work(i: int) -> tuple[str, str]:
            match i % 3:
                case 0:
                    return "symbol", formatter.format_currency_style_result("500.25", "USD").get_or_raise()
                case 1:
                    return "iso", formatter.format_iso_currency_style_result("750", "EUR").get_or_raise()
                case _:
                    digits = CurrencyFormatter.get_fraction_digits("JPY").get_or_raise()
                    return "digits", str(digits)

        with ThreadPoolExecutor(max_workers=12) as executor:
            results = list(executor.map(work, range(90)))

        for kind, value in results:
            match kind:
                case "symbol":
                    assert value == "$500.25"
                case "iso":
                    assert "EUR" in value
                    assert "750.00" in normalize_spaces(value)
                case _:
                    assert value == "0"

    def test_backend_built_once_under_contention(self) -> None:
        factory = CountingFactory(delay=0.05)
        formatter = CurrencyFormatter(KurrencyLocale.US, backend_factory=factory)
        barrier = threading.Barrier(20)

        def first_use() -> str:
            barrier.wait()
            return formatter.format_currency_style("1", "USD")

        with ThreadPoolExecutor(max_workers=20) as executor:
            futures = [executor.submit(first_use) for _ in range(20)]
            results = [future.result() for future in futures]

        assert factory.count == 1
        assert len(set(results)) == 1
        assert len(factory.built[0].calls) == 20


class TestPerThreadFormatters:
    """Independent formatters created inside threads."""

    def test_formatters_per_thread(self) -> None:
        locales = [KurrencyLocale.US, KurrencyLocale.GERMANY, KurrencyLocale.JAPAN, KurrencyLocale.UK]

        def work(i: int) -> tuple[KurrencyLocale, str]:
            loc = locales[i % len(locales)]
            return loc, CurrencyFormatter(loc).format_currency_style("100", "USD")

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(work, range(80)))

        by_locale: dict[str, set[str]] = {}
        for loc, value in results:
            by_locale.setdefault(loc.language_tag, set()).add(value)

        # Each locale renders deterministically
        assert all(len(values) == 1 for values in by_locale.values())
        assert by_locale["en-US"] == {"$100.00"}


class TestDefaultFormatter:
    """Process-wide formatter behind the static operations."""

    def test_default_formatter_built_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        builds: list[int] = []
        lock = threading.Lock()

        def build() -> CurrencyFormatter:
            with lock:
                builds.append(1)
            return CurrencyFormatter(KurrencyLocale.US)

        monkeypatch.setattr(formatter_module, "_default_formatter", Lazy(build))
        barrier = threading.Barrier(16)

        def lookup(code: str) -> int:
            barrier.wait()
            return CurrencyFormatter.get_fraction_digits_or_default(code)

        codes = ["USD", "JPY", "KWD", "EUR"] * 4
        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(lookup, codes))

        assert len(builds) == 1
        assert results == [2, 0, 3, 2] * 4
