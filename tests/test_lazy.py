"""Tests for the at-most-once lazy initialization primitive."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from kurrency.core import Lazy


class TestLazyBasics:
    """Single-threaded behavior."""

    def test_not_built_until_get(self) -> None:
        calls: list[int] = []
        lazy = Lazy(lambda: calls.append(1) or "value")
        assert not lazy.is_initialized
        assert calls == []

    def test_get_builds_once(self) -> None:
        calls: list[int] = []

        def factory() -> object:
            calls.append(1)
            return object()

        lazy = Lazy(factory)
        first = lazy.get()
        assert lazy.get() is first
        assert lazy.is_initialized
        assert calls == [1]

    def test_none_value_cached(self) -> None:
        calls: list[int] = []

        def factory() -> None:
            calls.append(1)

        lazy = Lazy(factory)
        assert lazy.get() is None
        assert lazy.get() is None
        assert calls == [1]

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError, match="callable"):
            Lazy("not callable")  # type: ignore[arg-type]

    def test_failed_factory_leaves_value_unset(self) -> None:
        attempts: list[int] = []

        def flaky() -> str:
            attempts.append(1)
            if len(attempts) == 1:
                msg = "first attempt fails"
                raise RuntimeError(msg)
            return "ok"

        lazy = Lazy(flaky)
        with pytest.raises(RuntimeError, match="first attempt fails"):
            lazy.get()
        assert not lazy.is_initialized
        assert lazy.get() == "ok"
        assert len(attempts) == 2

    def test_repr(self) -> None:
        lazy = Lazy(lambda: 42)
        assert repr(lazy) == "Lazy(<unset>)"
        lazy.get()
        assert repr(lazy) == "Lazy(42)"


class TestLazyConcurrency:
    """Concurrent first access."""

    def test_concurrent_first_access_builds_once(self) -> None:
        calls: list[int] = []
        calls_lock = threading.Lock()

        def slow_factory() -> object:
            with calls_lock:
                calls.append(1)
            time.sleep(0.05)
            return object()

        lazy = Lazy(slow_factory)
        barrier = threading.Barrier(16)

        def access() -> object:
            barrier.wait()
            return lazy.get()

        with ThreadPoolExecutor(max_workers=16) as executor:
            futures = [executor.submit(access) for _ in range(16)]
            results = [future.result() for future in futures]

        assert len(calls) == 1
        assert all(result is results[0] for result in results)
