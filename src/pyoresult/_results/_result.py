from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeIs, cast

from .._core import Pipeable, get_config
from .._types import ValueIter
from ._option import NONE, Option, Some


class Result[T, E](ABC, Pipeable):
    """An outcome that is either a success (`Ok`) or a failure (`Err`).

    No method of `Result` raises: failures stay in the `Err` variant and are passed through untouched
    by the combinators that only act on `Ok`.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> def parse(text: str) -> pr.Result[int, str]:
    ...     return pr.Ok(int(text)) if text.isdigit() else pr.Err(f"not a number: {text!r}")
    >>> parse("21").map(lambda x: x * 2)
    Ok(value=42)
    >>> parse("abc").map(lambda x: x * 2)
    Err(error="not a number: 'abc'")

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Err.

        Equivalent to Rust's Result::is_err().
        """
        ...

    def ok(self) -> Option[T]:
        """
        Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to None.

        Returns:
            Option[T]: Some(value) if Ok, otherwise None.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(2).ok()
        Some(value=2)
        >>> pr.Err("nothing here").ok()
        NONE

        ```
        """
        if self.is_ok():
            return Some(self.value)
        return NONE

    def err(self) -> Option[E]:
        """
        Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to None.

        Returns:
            Option[E]: Some(error) if Err, otherwise None.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(2).err()
        NONE
        >>> pr.Err("nothing here").err()
        Some(value='nothing here')

        ```
        """
        if self.is_err():
            return Some(self.error)
        return NONE

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Args:
            f: Callable to apply to the Ok value.

        Returns:
            Result[U, E]: Ok(f(value)) if Ok, otherwise the original Err.

        Equivalent to Rust's Result::map().
        """
        if self.is_ok():
            return Ok(f(self.value))
        return cast(Result[U, E], self)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """
        Applies a function to the contained Ok value, or returns the provided default if Err.

        Args:
            default: The value to return if the result is Err.
            f: Callable to apply to the Ok value.

        Returns:
            f(value) if Ok, otherwise the default.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok("foo").map_or(42, len)
        3
        >>> pr.Err("bar").map_or(42, len)
        42

        ```
        """
        return f(self.value) if self.is_ok() else default

    def map_or_else[U](self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """
        Maps the Ok value with f, or the Err value with default. Exactly one of the two is called.

        Args:
            default: Callable to handle the Err value.
            f: Callable to handle the Ok value.

        Returns:
            The result of the called function.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> k = 21
        >>> pr.Ok("foo").map_or_else(lambda e: k * 2, len)
        3
        >>> pr.Err("bar").map_or_else(lambda e: k * 2, len)
        42

        ```
        """
        if self.is_ok():
            return f(self.value)
        return default(self.error)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Args:
            f: Callable to apply to the Err value.

        Returns:
            Result[T, F]: Err(f(error)) if Err, otherwise the original Ok.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(2).map_err(str.upper)
        Ok(value=2)
        >>> pr.Err("oops").map_err(str.upper)
        Err(error='OOPS')

        ```
        """
        if self.is_err():
            return Err(f(self.error))
        return cast(Result[T, F], self)

    def iter(self) -> ValueIter[T]:
        """
        Returns a restartable sequence over the possibly contained Ok value.

        The sequence yields the value once if Ok, otherwise nothing.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> list(pr.Ok(5).iter())
        [5]
        >>> list(pr.Err("e").iter())
        []

        ```
        """
        return ValueIter(self.ok())

    def and_[U](self, res: Result[U, E]) -> Result[U, E]:
        """
        Returns res if the result is Ok, otherwise the original Err.

        `res` is evaluated by the caller, use `and_then` to compute it lazily.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(2).and_(pr.Err("late error"))
        Err(error='late error')
        >>> pr.Err("early error").and_(pr.Ok("foo"))
        Err(error='early error')

        ```
        """
        if self.is_ok():
            return res
        return cast(Result[U, E], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls f if the result is Ok, otherwise returns the original Err.

        Args:
            f: Callable that takes the Ok value and returns a Result.

        Returns:
            Result[U, E]: The result of f(value) if Ok, otherwise the original Err.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> def half(x: int) -> pr.Result[int, str]:
        ...     return pr.Ok(x // 2) if x % 2 == 0 else pr.Err(f"{x} is odd")
        >>> pr.Ok(8).and_then(half).and_then(half)
        Ok(value=2)
        >>> pr.Ok(6).and_then(half).and_then(half)
        Err(error='3 is odd')

        ```
        """
        if self.is_ok():
            return f(self.value)
        return cast(Result[U, E], self)

    def or_[F](self, res: Result[T, F]) -> Result[T, F]:
        """
        Returns the original Ok if the result is Ok, otherwise res.

        `res` is evaluated by the caller, use `or_else` to compute it lazily.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(2).or_(pr.Ok(100))
        Ok(value=2)
        >>> pr.Err("early error").or_(pr.Ok(2))
        Ok(value=2)

        ```
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return res

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """
        Calls f if the result is Err, otherwise returns the original Ok.

        Args:
            f: Callable that takes the Err value and returns a Result.

        Returns:
            Result[T, F]: self if Ok, otherwise the result of f(error).

        Equivalent to Rust's Result::or_else().
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return f(self.error)

    def unwrap(self, fallback: T) -> T:
        """
        Returns the contained Ok value, or the fallback if Err.

        Unlike `Option.unwrap`, this never raises: the fallback is required.
        `unwrap_or` is the same operation under its conventional name.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(9).unwrap(0)
        9
        >>> pr.Err("missing").unwrap(0)
        0

        ```
        """
        return self.value if self.is_ok() else fallback

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Equivalent to Rust's Result::unwrap_or().
        """
        return self.unwrap(default)

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes it from the Err value.

        Args:
            f: Callable that takes the Err value and returns a T.

        Returns:
            The contained Ok value or the result of f(error).

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(2).unwrap_or_else(len)
        2
        >>> pr.Err("foo").unwrap_or_else(len)
        3

        ```
        """
        return self.value if self.is_ok() else f(self.error)

    def flatten[U](self: Result[Result[U, E], E]) -> Result[U, E]:
        """
        Converts a Result[Result[U, E], E] to Result[U, E].

        Only one level of nesting is removed.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(pr.Ok(5)).flatten()
        Ok(value=5)
        >>> pr.Ok(pr.Err("x")).flatten()
        Err(error='x')
        >>> pr.Ok(pr.Ok(pr.Ok(1))).flatten()
        Ok(value=Ok(value=1))
        >>> pr.Err("y").flatten()
        Err(error='y')

        ```
        """
        if self.is_ok():
            return self.value
        return cast(Result[U, E], self)


@dataclass(slots=True, frozen=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok(value={get_config().value_repr(self.value)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False


@dataclass(slots=True, frozen=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err(error={get_config().value_repr(self.error)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True
