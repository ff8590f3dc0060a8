"""Tests for the Result type and its type guards."""

import pytest

from kurrency import (
    Failure,
    InvalidAmount,
    InvalidCurrencyCode,
    KurrencyException,
    Success,
    is_failure,
    is_success,
)
from kurrency.result import Result


class TestSuccess:
    """Success accessors."""

    def test_flags(self) -> None:
        result = Success("x")
        assert result.is_success
        assert not result.is_failure

    def test_accessors_return_value(self) -> None:
        result = Success(3)
        assert result.get_or_none() == 3
        assert result.get_or_default(0) == 3
        assert result.get_or_else(lambda _: 0) == 3
        assert result.get_or_raise() == 3
        assert result.error_or_none() is None

    def test_map_transforms_value(self) -> None:
        assert Success(2).map(lambda v: v * 10) == Success(20)

    def test_none_is_a_legal_value(self) -> None:
        result = Success(None)
        assert result.is_success
        assert result.get_or_default("fallback") is None


class TestFailure:
    """Failure accessors."""

    def test_flags(self) -> None:
        result = Failure(InvalidAmount("x"))
        assert result.is_failure
        assert not result.is_success

    def test_accessors_return_fallbacks(self) -> None:
        error = InvalidAmount("x")
        result = Failure(error)
        assert result.get_or_none() is None
        assert result.get_or_default(0) == 0
        assert result.error_or_none() is error

    def test_get_or_else_receives_error(self) -> None:
        result = Failure(InvalidCurrencyCode("US1"))
        assert result.get_or_else(lambda error: error.message) == "Invalid currency code: US1"

    def test_get_or_raise_raises_wrapped_error(self) -> None:
        error = InvalidAmount("abc")
        with pytest.raises(KurrencyException) as exc_info:
            Failure(error).get_or_raise()
        assert exc_info.value.error is error

    def test_map_is_identity(self) -> None:
        result = Failure(InvalidAmount("x"))
        assert result.map(lambda v: v * 10) is result


class TestTypeGuards:
    """PEP 742 guards over the union."""

    def test_guards_on_success(self) -> None:
        result: Result[int] = Success(1)
        assert is_success(result)
        assert not is_failure(result)

    def test_guards_on_failure(self) -> None:
        result: Result[int] = Failure(InvalidAmount("x"))
        assert is_failure(result)
        assert not is_success(result)

    def test_match_statement(self) -> None:
        result: Result[str] = Failure(InvalidCurrencyCode("US1"))
        match result:
            case Success(value=value):
                outcome = value
            case Failure(error=InvalidCurrencyCode(code=code)):
                outcome = f"bad code {code}"
            case _:
                outcome = "other"
        assert outcome == "bad code US1"


class TestImmutability:
    """Results are frozen and hashable."""

    def test_success_frozen(self) -> None:
        result = Success(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({Success(1), Success(1), Failure(InvalidAmount("x"))}) == 2

    @pytest.mark.parametrize("result", [Success(1), Failure(InvalidAmount("x"))])
    def test_slotted(self, result: Result[int]) -> None:
        assert not hasattr(result, "__dict__")
