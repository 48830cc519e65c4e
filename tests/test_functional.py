"""Tests for the free-function combinators in `pyoresult.option` and `pyoresult.result`."""

import pytest

import pyoresult as pr
from pyoresult import option, result


class TestOptionFunctions:
    """Free functions over Option."""

    def test_tags(self) -> None:
        """Test is_some and is_none."""
        assert option.is_some(pr.Some(0))
        assert not option.is_none(pr.Some(0))
        assert option.is_none(pr.NONE)
        assert not option.is_some(pr.NONE)

    def test_unwrap(self) -> None:
        """Test unwrap and its non-raising counterparts."""
        assert option.unwrap(pr.Some(1)) == 1
        with pytest.raises(pr.OptionUnwrapError):
            option.unwrap(pr.NONE)
        assert option.unwrap_or(pr.NONE, 2) == 2
        assert option.unwrap_or_else(pr.NONE, lambda: 3) == 3

    def test_map(self) -> None:
        """Test map and map_or."""
        assert option.map(pr.Some(2), lambda x: x * 2) == pr.Some(4)
        assert option.map(pr.NONE, lambda x: x * 2) == pr.NONE
        assert option.map_or(pr.Some(2), 8, lambda x: x * 2) == 4
        assert option.map_or(pr.NONE, 8, lambda x: x * 2) == 8

    def test_chaining(self) -> None:
        """Test and_then, or_else and iter."""
        assert option.and_then(pr.Some(2), lambda x: pr.Some(x + 1)) == pr.Some(3)
        assert option.or_else(pr.NONE, lambda: pr.Some(0)) == pr.Some(0)
        assert list(option.iter(pr.Some("a"))) == ["a"]

    def test_into(self) -> None:
        """Test the functions can be piped with into."""
        assert pr.Some(3).into(option.map, str).into(option.unwrap) == "3"


class TestResultFunctions:
    """Free functions over Result."""

    def test_tags_and_projections(self) -> None:
        """Test is_ok, is_err, ok and err."""
        assert result.is_ok(pr.Ok(1))
        assert result.is_err(pr.Err("e"))
        assert result.ok(pr.Ok(1)) == pr.Some(1)
        assert result.ok(pr.Err("e")) == pr.NONE
        assert result.err(pr.Ok(1)) == pr.NONE
        assert result.err(pr.Err("e")) == pr.Some("e")

    def test_maps(self) -> None:
        """Test map, map_or, map_or_else and map_else."""
        assert result.map(pr.Ok(1), lambda x: x + 1) == pr.Ok(2)
        assert result.map_or(pr.Err("e"), 0, lambda x: x + 1) == 0
        assert result.map_or_else(pr.Err("abc"), len, lambda x: x) == 3
        assert result.map_else(pr.Err("e"), str.upper) == pr.Err("E")

    def test_map_then_map_else_ignores_map(self) -> None:
        """Test map_else(map(err, f), g) equals Err(g(e)) whatever f is."""
        err: pr.Result[int, int] = pr.Err(2)
        for f in (str, lambda x: x * 100):
            assert result.map_else(result.map(err, f), lambda e: e + 1) == pr.Err(3)

    def test_and_or(self) -> None:
        """Test and_, and_then, or_ and or_else."""
        assert result.and_(pr.Ok(1), pr.Ok(2)) == pr.Ok(2)
        assert result.and_(pr.Err("e"), pr.Ok(2)) == pr.Err("e")
        assert result.and_then(pr.Ok(1), lambda x: pr.Ok(x * 10)) == pr.Ok(10)
        assert result.or_(pr.Err("e"), pr.Ok(2)) == pr.Ok(2)
        assert result.or_else(pr.Err("e"), lambda e: pr.Err(len(e))) == pr.Err(1)

    def test_unwraps(self) -> None:
        """Test unwrap, unwrap_or and unwrap_or_else never raise."""
        assert result.unwrap(pr.Ok(1), 0) == 1
        assert result.unwrap(pr.Err("e"), 0) == 0
        assert result.unwrap_or(pr.Err("e"), 5) == 5
        assert result.unwrap_or_else(pr.Err("abc"), len) == 3

    def test_iter_and_flatten(self) -> None:
        """Test iter and flatten."""
        assert list(result.iter(pr.Ok(5))) == [5]
        assert list(result.iter(pr.Err("e"))) == []
        assert result.flatten(pr.Ok(pr.Ok(5))) == pr.Ok(5)
        assert result.flatten(pr.Err("y")) == pr.Err("y")
