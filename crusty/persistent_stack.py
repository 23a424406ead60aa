"""An immutable, structurally shared singly linked list."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from .bad_stack import _iter_nodes, _Node


class ImmutableList:
    """A persistent list: operations return new lists that share nodes."""

    __slots__ = ("_head",)

    def __init__(self, _head: Optional[_Node] = None) -> None:
        self._head = _head

    def prepend(self, elem: Any) -> "ImmutableList":
        """Return a new list with ``elem`` in front of this one."""
        return ImmutableList(_Node(elem, self._head))

    def tail(self) -> "ImmutableList":
        """Return the list without its first element (empty stays empty)."""
        return ImmutableList(None if self._head is None else self._head.next)

    def head(self) -> Optional[Any]:
        """Return the first element, or ``None`` when empty."""
        return None if self._head is None else self._head.elem

    def __iter__(self) -> Iterator[Any]:
        return (node.elem for node in _iter_nodes(self._head))

    def __repr__(self) -> str:
        return f"ImmutableList({list(self)!r})"