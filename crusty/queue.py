"""A singly linked first-in, first-out queue with a tail pointer."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from .bad_stack import _iter_nodes, _Node


class UnsafeQueue:
    """A queue: elements are pushed at the back and popped from the front."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None

    def push(self, elem: Any) -> None:
        """Append ``elem`` to the back of the queue."""
        node = _Node(elem)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def pop(self) -> Optional[Any]:
        """Remove and return the front element, or ``None`` when empty."""
        head = self._head
        if head is None:
            return None
        self._head = head.next
        if self._head is None:
            self._tail = None
        return head.elem

    def peek(self) -> Optional[Any]:
        """Return the front element without removing it, or ``None``."""
        return None if self._head is None else self._head.elem

    def map_peek(self, func: Callable[[Any], Any]) -> Optional[Any]:
        """Replace the front element with ``func(front)`` and return the new value.

        Returns ``None`` and calls nothing when the queue is empty.
        """
        head = self._head
        if head is None:
            return None
        head.elem = func(head.elem)
        return head.elem

    def update_all(self, func: Callable[[Any], Any]) -> None:
        """Replace every element with ``func(element)``, front first."""
        for node in _iter_nodes(self._head):
            node.elem = func(node.elem)

    def drain(self) -> Iterator[Any]:
        """Yield elements by popping them, emptying the queue."""
        while self._head is not None:
            yield self.pop()

    def __iter__(self) -> Iterator[Any]:
        return (node.elem for node in _iter_nodes(self._head))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"