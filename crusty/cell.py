"""A mutable container whose value is swapped in and out whole."""

from __future__ import annotations

from typing import Any


class Cell:
    """Holds one value that can be read and replaced through a shared handle.

    It hands out no references to its contents; reads return the stored value
    and writes replace it. It does no locking, so a read followed by a write
    from two threads can lose an update.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    def get(self) -> Any:
        """Return the stored value."""
        return self._value

    def set(self, value: Any) -> None:
        """Replace the stored value."""
        self._value = value

    def __repr__(self) -> str:
        return f"Cell({self._value!r})"