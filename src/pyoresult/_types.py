from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._core import Pipeable

if TYPE_CHECKING:
    from ._results import Option


@dataclass(slots=True, frozen=True)
class ValueIter[T](Pipeable):
    """A restartable sequence of at most one element.

    See `Option.iter()` and `Result.iter()` for details.

    Each call to `iter()` starts from the beginning, and abandoning an iterator before exhaustion has no effect.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> values = pr.Ok(5).iter()
    >>> list(values)
    [5]
    >>> list(values)
    [5]
    >>> len(pr.Err("e").iter())
    0

    ```
    """

    item: Option[T]
    """The element, if any."""

    def __iter__(self) -> Iterator[T]:
        if self.item.is_some():
            yield self.item.unwrap()

    def __len__(self) -> int:
        return 1 if self.item.is_some() else 0
