"""Flattening one level of nesting, from either end."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterable, Iterator, Optional

_END = object()


class _TwoEnded:
    """Wraps an iterable so it can be consumed from the front and the back.

    The front stays lazy until the back is first asked for, at which point the
    rest is collected.
    """

    __slots__ = ("_iterator", "_rest")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iterator = iter(iterable)
        self._rest: Optional[Deque[Any]] = None

    def next_front(self) -> Any:
        if self._rest is None:
            return next(self._iterator, _END)
        return self._rest.popleft() if self._rest else _END

    def next_back(self) -> Any:
        if self._rest is None:
            self._rest = deque(self._iterator)
        return self._rest.pop() if self._rest else _END


class Flatten:
    """Yield the items of each inner iterable of ``iterable`` in turn."""

    def __init__(self, iterable: Iterable[Iterable[Any]]) -> None:
        self._outer = _TwoEnded(iterable)
        self._front: Optional[_TwoEnded] = None
        self._back: Optional[_TwoEnded] = None

    def __iter__(self) -> "Flatten":
        return self

    def __next__(self) -> Any:
        while True:
            if self._front is not None:
                item = self._front.next_front()
                if item is not _END:
                    return item
                self._front = None
            inner = self._outer.next_front()
            if inner is _END:
                if self._back is None:
                    raise StopIteration
                item = self._back.next_front()
                if item is _END:
                    raise StopIteration
                return item
            self._front = _TwoEnded(inner)

    def next_back(self) -> Any:
        """Return the next item from the back; raises ``StopIteration`` when done."""
        while True:
            if self._back is not None:
                item = self._back.next_back()
                if item is not _END:
                    return item
                self._back = None
            inner = self._outer.next_back()
            if inner is _END:
                if self._front is None:
                    raise StopIteration
                item = self._front.next_back()
                if item is _END:
                    raise StopIteration
                return item
            self._back = _TwoEnded(inner)

    def __reversed__(self) -> Iterator[Any]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return


def flatten(iterable: Iterable[Iterable[Any]]) -> Flatten:
    """Return a double-ended iterator over the items of each inner iterable."""
    return Flatten(iterable)