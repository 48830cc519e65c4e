from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs

from .._core import Pipeable, get_config
from .._types import ValueIter


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC, Pipeable):
    """A value that is either present (`Some`) or absent (`NONE`).

    `Option` is closed: `Some` and `NoneOption` are its only variants, and both can be pattern matched.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> def describe(opt: pr.Option[int]) -> str:
    ...     match opt:
    ...         case pr.Some(value):
    ...             return f"got {value}"
    ...         case _:
    ...             return "nothing"
    >>> describe(pr.Some(3))
    'got 3'
    >>> describe(pr.NONE)
    'nothing'

    ```
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """
        Creates an `Option` from a value that may be `None`.

        Args:
            value: The value to wrap.

        Returns:
            `Some(value)` if the value is not `None`, otherwise `NONE`.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> pr.Option.from_(2)
            Some(value=2)
            >>> pr.Option.from_({"a": 1}.get("b"))
            NONE

            ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> x: pr.Option[int] = pr.Some(2)
            >>> x.is_some()
            True
            >>> y: pr.Option[int] = pr.NONE
            >>> y.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `None` value.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> pr.Some(2).is_none()
            False
            >>> pr.NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> pr.Some("car").unwrap()
            'car'
            >>> pr.NONE.unwrap()
            Traceback (most recent call last):
                ...
            pyoresult._results._option.OptionUnwrapError: called `unwrap` on a `None`

            ```
        """
        ...

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        The default is evaluated by the caller, use `unwrap_or_else` to compute it lazily.

        Args:
            default: The value to return if the option is `None`.

        Returns:
            The contained `Some` value or the provided default.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> pr.Some("car").unwrap_or("bike")
            'car'
            >>> pr.NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        Args:
            f: A function that returns a default value if the option is `None`.

        Returns:
            The contained `Some` value or the result of the function.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> k = 10
            >>> pr.Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> pr.NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        Args:
            f: The function to apply to the `Some` value.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `None`.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> pr.Some("Hello, World!").map(len)
            Some(value=13)
            >>> pr.NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """
        Applies a function to the contained value if `Some`, or returns the provided default.

        Args:
            default: The value to return if the option is `None`.
            f: The function to apply to the `Some` value.

        Returns:
            The result of the function if `Some`, otherwise the default.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> pr.Some("foo").map_or(42, len)
            3
            >>> pr.NONE.map_or(42, len)
            42

            ```
        """
        return f(self.unwrap()) if self.is_some() else default

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `None`.
        Some languages call this operation flatmap.

        Args:
            f: The function to call with the `Some` value.

        Returns:
            The result of the function if `Some`, otherwise `None`.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> def sq(x: int) -> pr.Option[int]:
            ...     return pr.Some(x * x)
            >>> def nope(x: int) -> pr.Option[int]:
            ...     return pr.NONE
            >>> pr.Some(2).and_then(sq).and_then(sq)
            Some(value=16)
            >>> pr.Some(2).and_then(nope).and_then(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Args:
            f: The function to call if the option is `None`.

        Returns:
            The original `Option` if it is `Some`, otherwise the result of the function.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> def vikings() -> pr.Option[str]:
            ...     return pr.Some("vikings")
            >>> pr.Some("barbarians").or_else(vikings)
            Some(value='barbarians')
            >>> pr.NONE.or_else(vikings)
            Some(value='vikings')

            ```
        """
        return self if self.is_some() else f()

    def iter(self) -> ValueIter[T]:
        """
        Returns a restartable sequence over the possibly contained value.

        Example:
            ```python
            >>> import pyoresult as pr
            >>> list(pr.Some(4).iter())
            [4]
            >>> list(pr.NONE.iter())
            []

            ```
        """
        return ValueIter(self)


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Some(value={get_config().value_repr(self.value)})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
