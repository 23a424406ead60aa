"""A reference-counted shared handle to a single value."""

from __future__ import annotations

from typing import Any, Optional


class _RcBox:
    __slots__ = ("value", "count")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.count = 1


class Rc:
    """Shares one value between handles and lets go of it with the last one.

    ``clone`` adds a handle; ``drop`` (or the handle being collected) removes
    one. A dropped handle can no longer reach the value.
    """

    __slots__ = ("_inner",)

    def __init__(self, value: Any) -> None:
        self._inner: Optional[_RcBox] = _RcBox(value)

    def _box(self) -> _RcBox:
        if self._inner is None:
            raise RuntimeError("handle already dropped")
        return self._inner

    @property
    def value(self) -> Any:
        """The shared value."""
        return self._box().value

    def clone(self) -> "Rc":
        """Return a new handle to the same value."""
        inner = self._box()
        inner.count += 1
        handle = Rc.__new__(Rc)
        handle._inner = inner
        return handle

    def drop(self) -> None:
        """Give up this handle; the value is released with the last one.

        Dropping an already dropped handle has no effect.
        """
        inner, self._inner = self._inner, None
        if inner is None:
            return
        if inner.count == 1:
            inner.count = 0
            inner.value = None
        else:
            inner.count -= 1

    def strong_count(self) -> int:
        """Return how many live handles share the value."""
        return self._box().count

    def __del__(self) -> None:
        if getattr(self, "_inner", None) is not None:
            self.drop()

    def __repr__(self) -> str:
        if self._inner is None:
            return "Rc(<dropped>)"
        return f"Rc({self._inner.value!r})"