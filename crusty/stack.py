"""A singly linked last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from .bad_stack import _iter_nodes, _Node


class StackList:
    """A stack of linked nodes; iteration runs from the top down."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    def push(self, elem: Any) -> None:
        """Put ``elem`` on top of the stack."""
        self._head = _Node(elem, self._head)

    def pop(self) -> Optional[Any]:
        """Remove and return the top element, or ``None`` when empty."""
        head = self._head
        if head is None:
            return None
        self._head = head.next
        return head.elem

    def peek(self) -> Optional[Any]:
        """Return the top element without removing it, or ``None``."""
        return None if self._head is None else self._head.elem

    def map_peek(self, func: Callable[[Any], Any]) -> Optional[Any]:
        """Replace the top element with ``func(top)`` and return the new value.

        Returns ``None`` and calls nothing when the stack is empty.
        """
        head = self._head
        if head is None:
            return None
        head.elem = func(head.elem)
        return head.elem

    def update_all(self, func: Callable[[Any], Any]) -> None:
        """Replace every element with ``func(element)``, top first."""
        for node in _iter_nodes(self._head):
            node.elem = func(node.elem)

    def drain(self) -> Iterator[Any]:
        """Yield elements by popping them, emptying the stack."""
        while self._head is not None:
            yield self.pop()

    def __iter__(self) -> Iterator[Any]:
        return (node.elem for node in _iter_nodes(self._head))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"