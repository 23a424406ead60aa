"""A value that is borrowed until it first needs changing."""

from __future__ import annotations

import copy
from typing import Any


class Cow:
    """Either a borrowed value or an owned one.

    A borrowed value is shared with its owner and left untouched; asking to
    change it first takes a shallow copy and owns that instead.
    """

    __slots__ = ("_value", "_owned")

    def __init__(self, value: Any, *, owned: bool = False) -> None:
        self._value = value
        self._owned = owned

    @classmethod
    def borrowed(cls, value: Any) -> "Cow":
        """Wrap ``value`` without taking ownership of it."""
        return cls(value, owned=False)

    @classmethod
    def owned(cls, value: Any) -> "Cow":
        """Wrap ``value`` as owned."""
        return cls(value, owned=True)

    @property
    def value(self) -> Any:
        """The wrapped value, borrowed or owned."""
        return self._value

    def is_borrowed(self) -> bool:
        """Whether the value is borrowed."""
        return not self._owned

    def is_owned(self) -> bool:
        """Whether the value is owned."""
        return self._owned

    def to_mut(self) -> Any:
        """Return the owned value, copying a borrowed one first."""
        if not self._owned:
            self._value = copy.copy(self._value)
            self._owned = True
        return self._value

    def into_owned(self) -> Any:
        """Return an owned value: the owned one itself, or a copy of a borrowed one."""
        if self._owned:
            return self._value
        return copy.copy(self._value)

    def clone(self) -> "Cow":
        """Return a borrow of the same value, or an owned copy of an owned one."""
        if self._owned:
            return Cow(copy.copy(self._value), owned=True)
        return Cow(self._value, owned=False)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({self._value!r})"