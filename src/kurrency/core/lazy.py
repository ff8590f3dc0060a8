"""At-most-once lazy initialization.

Lazy wraps a zero-argument factory and builds its value on first access.
Concurrent first accesses race safely: exactly one thread runs the factory,
every caller observes the same instance afterward, and the value is never
replaced.

Architecture:
    Double-checked locking. The fast path reads the published value without
    taking the lock; the slow path re-checks under a threading.Lock before
    calling the factory. Publication is a single attribute store, which is
    atomic in CPython and in free-threaded builds.

    If the factory raises, nothing is published and the exception propagates
    to the caller; the next access tries again.

Python 3.13+.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["Lazy"]


class _Unset:
    """Sentinel type for an unbuilt value (None is a legal value)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Final = _Unset()


class Lazy[T]:
    """Thread-safe lazily computed value.

    Example:
        >>> backend = Lazy(lambda: BabelFormattingBackend(KurrencyLocale.US))
        >>> backend.is_initialized
        False
        >>> backend.get() is backend.get()
        True
    """

    __slots__ = ("_factory", "_lock", "_value")

    def __init__(self, factory: Callable[[], T]) -> None:
        """Initialize with an unbuilt value.

        Args:
            factory: Zero-argument callable producing the value

        Raises:
            TypeError: If factory is not callable
        """
        if not callable(factory):
            msg = f"Lazy factory must be callable, got {type(factory).__name__}"
            raise TypeError(msg)
        self._factory: Callable[[], T] | None = factory
        self._lock = threading.Lock()
        self._value: T | _Unset = _UNSET

    @property
    def is_initialized(self) -> bool:
        """Whether the value has been built."""
        return self._value is not _UNSET

    def get(self) -> T:
        """Return the value, building it on first call.

        Returns:
            The single instance produced by the factory

        Raises:
            Exception: Whatever the factory raises (value stays unbuilt)
        """
        value = self._value
        if not isinstance(value, _Unset):
            return value

        with self._lock:
            # Double-check after acquiring lock
            value = self._value
            if not isinstance(value, _Unset):
                return value

            factory = self._factory
            assert factory is not None  # noqa: S101 - cleared only after publish
            built = factory()
            self._value = built
            # Release closure references once published
            self._factory = None
            return built

    def __repr__(self) -> str:
        state = repr(self._value) if self.is_initialized else "<unset>"
        return f"Lazy({state})"
