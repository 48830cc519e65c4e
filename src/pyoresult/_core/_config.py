from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

_ELLIPSIS = "..."
_MIN_REPR_LEN = len(_ELLIPSIS) + 1


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings shared by every tagged value.

    Args:
        max_repr_len (int): Maximum length of the `repr` of a contained value. Defaults to 80.
    """

    max_repr_len: int = 80

    def __post_init__(self) -> None:
        if self.max_repr_len < _MIN_REPR_LEN:
            msg = f"max_repr_len must be at least {_MIN_REPR_LEN}, got {self.max_repr_len}"
            raise ValueError(msg)

    def value_repr(self, value: Any) -> str:
        """Return the `repr` of a contained value, truncated to `max_repr_len`.

        Example:
        ```python
        >>> from pyoresult import Config
        >>> Config(max_repr_len=8).value_repr("abcdefghij")
        "'abcd..."
        >>> Config().value_repr([1, 2])
        '[1, 2]'

        ```
        """
        text = repr(value)
        if len(text) <= self.max_repr_len:
            return text
        return text[: self.max_repr_len - len(_ELLIPSIS)] + _ELLIPSIS


_CONFIG = Config()


def get_config() -> Config:
    """Return the active display configuration."""
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace the active display configuration.

    Unspecified settings keep their current value.

    Args:
        **changes (Any): Settings to change, as `Config` field names.

    Returns:
        Config: The new active configuration.

    Raises:
        ValueError: If a setting is out of range.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> previous = pr.get_config()
    >>> _ = pr.set_config(max_repr_len=10)
    >>> pr.Some("a long string value")
    Some(value='a long...)
    >>> _ = pr.set_config(max_repr_len=previous.max_repr_len)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
