"""Free-function versions of the `Result` combinators.

Every function takes the result as first argument, so they can be called directly or piped with `Result.into`.

Example:
```python
>>> import pyoresult as pr
>>> from pyoresult import result
>>> result.map_else(pr.Err("boom"), str.upper)
Err(error='BOOM')
>>> pr.Ok(pr.Ok(1)).into(result.flatten)
Ok(value=1)

```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeIs

if TYPE_CHECKING:
    from ._results import Err, Ok, Option, Result
    from ._types import ValueIter

__all__ = [
    "and_",
    "and_then",
    "err",
    "flatten",
    "is_err",
    "is_ok",
    "iter",
    "map",
    "map_else",
    "map_or",
    "map_or_else",
    "ok",
    "or_",
    "or_else",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
]


def is_ok[T, E](res: Result[T, E]) -> TypeIs[Ok[T, E]]:
    """Returns True if the result is Ok."""
    return res.is_ok()


def is_err[T, E](res: Result[T, E]) -> TypeIs[Err[T, E]]:
    """Returns True if the result is Err."""
    return res.is_err()


def ok[T, E](res: Result[T, E]) -> Option[T]:
    """Converts to `Some(value)` if Ok, otherwise `None`, discarding the error."""
    return res.ok()


def err[T, E](res: Result[T, E]) -> Option[E]:
    """Converts to `Some(error)` if Err, otherwise `None`, discarding the value."""
    return res.err()


def map[T, E, U](res: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Maps the Ok value, leaving Err untouched."""
    return res.map(f)


def map_or[T, E, U](res: Result[T, E], default: U, f: Callable[[T], U]) -> U:
    """Returns `f(value)` if Ok, otherwise the default."""
    return res.map_or(default, f)


def map_or_else[T, E, U](
    res: Result[T, E], default: Callable[[E], U], f: Callable[[T], U]
) -> U:
    """Returns `f(value)` if Ok, otherwise `default(error)`."""
    return res.map_or_else(default, f)


def map_else[T, E, F](res: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Maps the Err value, leaving Ok untouched.

    Same as `Result.map_err`.
    """
    return res.map_err(f)


def iter[T, E](res: Result[T, E]) -> ValueIter[T]:  # noqa: A001
    """Returns a restartable sequence yielding the Ok value once, or nothing."""
    return res.iter()


def and_[T, E, U](res: Result[T, E], then: Result[U, E]) -> Result[U, E]:
    """Returns `then` if Ok, otherwise the original Err."""
    return res.and_(then)


def and_then[T, E, U](
    res: Result[T, E], op: Callable[[T], Result[U, E]]
) -> Result[U, E]:
    """Returns `op(value)` if Ok, otherwise the original Err."""
    return res.and_then(op)


def or_[T, E, F](res: Result[T, E], fallback: Result[T, F]) -> Result[T, F]:
    """Returns the result if Ok, otherwise `fallback`."""
    return res.or_(fallback)


def or_else[T, E, F](
    res: Result[T, E], op: Callable[[E], Result[T, F]]
) -> Result[T, F]:
    """Returns the result if Ok, otherwise `op(error)`."""
    return res.or_else(op)


def unwrap[T, E](res: Result[T, E], fallback: T) -> T:
    """Returns the Ok value, or the fallback if Err. Never raises."""
    return res.unwrap(fallback)


def unwrap_or[T, E](res: Result[T, E], default: T) -> T:
    """Returns the Ok value, or the default if Err."""
    return res.unwrap_or(default)


def unwrap_or_else[T, E](res: Result[T, E], op: Callable[[E], T]) -> T:
    """Returns the Ok value, or `op(error)` if Err."""
    return res.unwrap_or_else(op)


def flatten[T, E](res: Result[Result[T, E], E]) -> Result[T, E]:
    """Removes one level of nesting."""
    return res.flatten()
