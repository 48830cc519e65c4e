"""Free-function versions of the `Option` combinators.

Every function takes the option as first argument, so they can be called directly or piped with `Option.into`.

Example:
```python
>>> import pyoresult as pr
>>> from pyoresult import option
>>> option.map(pr.Some(2), lambda x: x * 2)
Some(value=4)
>>> pr.NONE.into(option.unwrap_or, 7)
7

```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeIs

if TYPE_CHECKING:
    from ._results import NoneOption, Option, Some
    from ._types import ValueIter

__all__ = [
    "and_then",
    "is_none",
    "is_some",
    "iter",
    "map",
    "map_or",
    "or_else",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
]


def is_some[T](opt: Option[T]) -> TypeIs[Some[T]]:
    """Returns `True` if the option is a `Some` value."""
    return opt.is_some()


def is_none[T](opt: Option[T]) -> TypeIs[NoneOption]:
    """Returns `True` if the option is a `None` value."""
    return opt.is_none()


def unwrap[T](opt: Option[T]) -> T:
    """Returns the contained `Some` value.

    Raises:
        OptionUnwrapError: If the option is `None`.
    """
    return opt.unwrap()


def unwrap_or[T](opt: Option[T], default: T) -> T:
    """Returns the contained `Some` value or a provided default."""
    return opt.unwrap_or(default)


def unwrap_or_else[T](opt: Option[T], f: Callable[[], T]) -> T:
    """Returns the contained `Some` value or computes it from `f`, called only on `None`."""
    return opt.unwrap_or_else(f)


def map[T, U](opt: Option[T], f: Callable[[T], U]) -> Option[U]:  # noqa: A001
    """Maps an `Option[T]` to `Option[U]`, leaving `None` untouched."""
    return opt.map(f)


def map_or[T, U](opt: Option[T], default: U, f: Callable[[T], U]) -> U:
    """Returns `f(value)` if `Some`, otherwise the default."""
    return opt.map_or(default, f)


def and_then[T, U](opt: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    """Returns `f(value)` if `Some`, otherwise `None`."""
    return opt.and_then(f)


def or_else[T](opt: Option[T], f: Callable[[], Option[T]]) -> Option[T]:
    """Returns the option if `Some`, otherwise `f()`."""
    return opt.or_else(f)


def iter[T](opt: Option[T]) -> ValueIter[T]:  # noqa: A001
    """Returns a restartable sequence over the possibly contained value."""
    return opt.iter()
