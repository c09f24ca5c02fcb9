"""Tests for imgver.core.result module."""

import pytest

from imgver.core.result import Err, Ok, Result


class TestOk:
    def test_value(self) -> None:
        assert Ok(42).value == 42

    def test_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Ok(1) != Err(1)

    def test_repr(self) -> None:
        assert repr(Ok("a")) == "Ok('a')"

    def test_frozen(self) -> None:
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]


class TestErr:
    def test_error(self) -> None:
        assert Err("boom").error == "boom"

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


def test_pattern_matching() -> None:
    result: Result[int, str] = Err("no")
    match result:
        case Ok(value):
            pytest.fail(f"unexpected Ok({value})")
        case Err(error):
            assert error == "no"
