"""A container that tracks shared and exclusive borrows at run time."""

from __future__ import annotations

from typing import Any, Optional


class RefCell:
    """Hands out any number of shared borrows, or a single exclusive one.

    A borrow that would conflict with an outstanding one is refused with
    ``None``.
    """

    __slots__ = ("_value", "_readers", "_exclusive")

    def __init__(self, value: Any) -> None:
        self._value = value
        self._readers = 0
        self._exclusive = False

    def borrow(self) -> Optional["Ref"]:
        """Return a shared borrow, or ``None`` while exclusively borrowed."""
        if self._exclusive:
            return None
        self._readers += 1
        return Ref(self)

    def borrow_mut(self) -> Optional["RefMut"]:
        """Return an exclusive borrow, or ``None`` while any borrow is outstanding."""
        if self._exclusive or self._readers:
            return None
        self._exclusive = True
        return RefMut(self)

    def _release_shared(self) -> None:
        if self._exclusive or self._readers == 0:
            raise RuntimeError("shared borrow released without being held")
        self._readers -= 1

    def _release_exclusive(self) -> None:
        if not self._exclusive or self._readers:
            raise RuntimeError("exclusive borrow released without being held")
        self._exclusive = False

    def __repr__(self) -> str:
        if self._exclusive:
            state = "exclusive"
        elif self._readers:
            state = f"shared({self._readers})"
        else:
            state = "unshared"
        return f"RefCell(<{state}>)"


class Ref:
    """A shared borrow of a ``RefCell``; release it to give the borrow back."""

    def __init__(self, cell: RefCell) -> None:
        self._cell: Optional[RefCell] = cell

    @property
    def value(self) -> Any:
        """The borrowed value."""
        if self._cell is None:
            raise RuntimeError("borrow already released")
        return self._cell._value

    def release(self) -> None:
        """End the borrow. Releasing again has no effect."""
        cell, self._cell = self._cell, None
        if cell is not None:
            cell._release_shared()

    def __enter__(self) -> "Ref":
        return self

    def __exit__(self, *args: Any) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_cell", None) is not None:
            self.release()


class RefMut:
    """An exclusive borrow of a ``RefCell``; its value may be replaced."""

    def __init__(self, cell: RefCell) -> None:
        self._cell: Optional[RefCell] = cell

    def _held(self) -> RefCell:
        if self._cell is None:
            raise RuntimeError("borrow already released")
        return self._cell

    @property
    def value(self) -> Any:
        """The borrowed value."""
        return self._held()._value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._held()._value = new_value

    def release(self) -> None:
        """End the borrow. Releasing again has no effect."""
        cell, self._cell = self._cell, None
        if cell is not None:
            cell._release_exclusive()

    def __enter__(self) -> "RefMut":
        return self

    def __exit__(self, *args: Any) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_cell", None) is not None:
            self.release()