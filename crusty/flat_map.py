"""Lazy mapping followed by flattening."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class FlatMap:
    """Apply ``func`` to each item of ``iterable`` and yield from each result."""

    def __init__(self, iterable: Iterable[Any], func: Callable[[Any], Iterable[Any]]) -> None:
        self._outer = iter(iterable)
        self._func = func
        self._inner: Optional[Iterator[Any]] = None

    def __iter__(self) -> "FlatMap":
        return self

    def __next__(self) -> Any:
        while True:
            if self._inner is not None:
                for item in self._inner:
                    return item
                self._inner = None
            outer_item = next(self._outer)
            self._inner = iter(self._func(outer_item))


def flat_map(iterable: Iterable[Any], func: Callable[[Any], Iterable[Any]]) -> FlatMap:
    """Return a lazy iterator over every item of ``func(x)`` for ``x`` in ``iterable``."""
    return FlatMap(iterable, func)