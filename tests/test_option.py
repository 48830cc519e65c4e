"""Tests for the Option type."""

import pytest

import pyoresult as pr


def test_variants() -> None:
    """Test that Some and NONE report their own variant."""
    assert pr.Some(1).is_some()
    assert not pr.Some(1).is_none()
    assert pr.NONE.is_none()
    assert not pr.NONE.is_some()


def test_some_none_is_some() -> None:
    """Test that a Some holding Python's None is still Some."""
    opt = pr.Some(None)
    assert opt.is_some()
    assert opt.unwrap() is None


def test_none_is_shared() -> None:
    """Test that every None variant compares equal to the singleton."""
    assert pr.NoneOption() == pr.NONE
    assert pr.Some(1) != pr.NONE
    assert isinstance(pr.NONE, pr.Option)


def test_unwrap() -> None:
    """Test unwrap on both variants."""
    value = object()
    assert pr.Some(value).unwrap() is value
    with pytest.raises(pr.OptionUnwrapError, match="called `unwrap` on a `None`"):
        pr.NONE.unwrap()


def test_unwrap_error_is_runtime_error() -> None:
    """Test that OptionUnwrapError can be caught as a RuntimeError."""
    with pytest.raises(RuntimeError):
        pr.NONE.unwrap()


def test_unwrap_or() -> None:
    """Test unwrap_or returns the value or the default."""
    assert pr.Some(1).unwrap_or(2) == 1
    assert pr.NONE.unwrap_or(2) == 2


def test_unwrap_or_else_is_lazy() -> None:
    """Test unwrap_or_else only calls the function on None."""
    calls: list[int] = []

    def _fallback() -> int:
        calls.append(1)
        return 2

    assert pr.Some(1).unwrap_or_else(_fallback) == 1
    assert calls == []
    assert pr.NONE.unwrap_or_else(_fallback) == 2
    assert calls == [1]


def test_map() -> None:
    """Test map transforms Some and leaves None untouched."""
    calls: list[int] = []

    def _double(x: int) -> int:
        calls.append(x)
        return x * 2

    assert pr.Some(2).map(_double) == pr.Some(4)
    assert pr.NONE.map(_double) == pr.NONE
    assert calls == [2]


def test_map_does_not_mutate() -> None:
    """Test map returns a new Option and keeps the input as is."""
    original = pr.Some(2)
    mapped = original.map(lambda x: x + 1)
    assert original == pr.Some(2)
    assert mapped == pr.Some(3)


def test_map_or() -> None:
    """Test map_or applies the function or returns the default."""
    assert pr.Some(2).map_or(8, lambda x: x * 2) == 4
    assert pr.NONE.map_or(8, lambda x: x * 2) == 8


def test_map_or_skips_function_on_none() -> None:
    """Test map_or never calls the function on None."""

    def _fail(_: int) -> int:
        raise AssertionError

    assert pr.NONE.map_or(0, _fail) == 0


def test_from() -> None:
    """Test Option.from_ maps Python's None to NONE."""
    assert pr.Option.from_(None) is pr.NONE
    assert pr.Option.from_(0) == pr.Some(0)
    assert pr.Option.from_("") == pr.Some("")


def test_and_then() -> None:
    """Test and_then chains and short-circuits on None."""

    def _positive(x: int) -> pr.Option[int]:
        return pr.Some(x) if x > 0 else pr.NONE

    assert pr.Some(3).and_then(_positive) == pr.Some(3)
    assert pr.Some(-3).and_then(_positive) == pr.NONE
    assert pr.NONE.and_then(_positive) == pr.NONE


def test_or_else() -> None:
    """Test or_else only calls the function on None."""
    assert pr.Some(1).or_else(lambda: pr.Some(2)) == pr.Some(1)
    assert pr.NONE.or_else(lambda: pr.Some(2)) == pr.Some(2)


def test_iter() -> None:
    """Test iter yields the value once, and is restartable."""
    values = pr.Some(5).iter()
    assert list(values) == [5]
    assert list(values) == [5]
    assert list(pr.NONE.iter()) == []


def test_frozen() -> None:
    """Test that the contained value cannot be reassigned."""
    opt = pr.Some(1)
    with pytest.raises(AttributeError):
        opt.value = 2  # type: ignore[misc]


def test_repr() -> None:
    """Test the repr of both variants."""
    assert repr(pr.Some("a")) == "Some(value='a')"
    assert repr(pr.NONE) == "NONE"
