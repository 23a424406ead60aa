"""Lazy, nested comprehensions built from ``for ... in ... if ...`` clauses."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Tuple, Union

Source = Union[Iterable[Any], Callable[..., Iterable[Any]]]


class ForIf:
    """One ``for <item> in <sequence> if <condition>...`` clause.

    ``sequence`` is an iterable, or a callable that receives the values bound
    by the enclosing clauses and returns one. Each condition receives every
    value bound so far, this clause's included. With ``unpack`` each item is
    spread into several bound values instead of one.
    """

    def __init__(
        self, sequence: Source, *conditions: Callable[..., Any], unpack: bool = False
    ) -> None:
        self.sequence = sequence
        self.conditions = conditions
        self.unpack = unpack

    def items(self, bound: Tuple[Any, ...]) -> Iterable[Any]:
        if callable(self.sequence):
            return self.sequence(*bound)
        return self.sequence

    def bind(self, bound: Tuple[Any, ...], item: Any) -> Tuple[Any, ...]:
        return bound + (tuple(item) if self.unpack else (item,))

    def accepts(self, bound: Tuple[Any, ...]) -> bool:
        return all(condition(*bound) for condition in self.conditions)

    def __repr__(self) -> str:
        return (
            f"ForIf({self.sequence!r}, {len(self.conditions)} condition(s), "
            f"unpack={self.unpack})"
        )


def comp(mapping: Callable[..., Any], clause: ForIf, *args: ForIf) -> Iterator[Any]:
    """Lazily yield ``mapping(*bound)`` for every binding the clauses produce.

    Clauses nest outermost first, like the ``for`` parts of a comprehension.
    """
    clauses = (clause, *args)
    for each in clauses:
        if not isinstance(each, ForIf):
            raise TypeError(f"expected a ForIf clause, got {type(each).__name__}")

    def expand(depth: int, bound: Tuple[Any, ...]) -> Iterator[Any]:
        if depth == len(clauses):
            yield mapping(*bound)
            return
        current = clauses[depth]
        for item in current.items(bound):
            new_bound = current.bind(bound, item)
            if current.accepts(new_bound):
                yield from expand(depth + 1, new_bound)

    return expand(0, ())