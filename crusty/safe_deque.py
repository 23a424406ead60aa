"""A doubly linked double-ended queue."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from .bad_stack import _iter_nodes
from .bad_stack import _Node as _LinkNode


class _Node(_LinkNode):
    __slots__ = ("prev",)

    def __init__(self, elem: Any) -> None:
        super().__init__(elem)
        self.prev: Optional[_Node] = None


class SafeDequeList:
    """A deque supporting pushes, pops and peeks at both ends."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None

    def push_front(self, elem: Any) -> None:
        """Add ``elem`` at the front."""
        node = _Node(elem)
        old_head = self._head
        if old_head is None:
            self._tail = node
        else:
            old_head.prev = node
            node.next = old_head
        self._head = node

    def pop_front(self) -> Optional[Any]:
        """Remove and return the front element, or ``None`` when empty."""
        old_head = self._head
        if old_head is None:
            return None
        new_head = old_head.next
        if new_head is None:
            self._tail = None
        else:
            new_head.prev = None
        old_head.next = None
        self._head = new_head
        return old_head.elem

    def push_back(self, elem: Any) -> None:
        """Add ``elem`` at the back."""
        node = _Node(elem)
        old_tail = self._tail
        if old_tail is None:
            self._head = node
        else:
            old_tail.next = node
            node.prev = old_tail
        self._tail = node

    def pop_back(self) -> Optional[Any]:
        """Remove and return the back element, or ``None`` when empty."""
        old_tail = self._tail
        if old_tail is None:
            return None
        new_tail = old_tail.prev
        if new_tail is None:
            self._head = None
        else:
            new_tail.next = None
        old_tail.prev = None
        self._tail = new_tail
        return old_tail.elem

    def peek_front(self) -> Optional[Any]:
        """Return the front element, or ``None`` when empty."""
        return None if self._head is None else self._head.elem

    def peek_back(self) -> Optional[Any]:
        """Return the back element, or ``None`` when empty."""
        return None if self._tail is None else self._tail.elem

    def drain(self) -> "DequeDrain":
        """Return an iterator that pops elements from either end."""
        return DequeDrain(self)

    def __repr__(self) -> str:
        items = [node.elem for node in _iter_nodes(self._head)]
        return f"SafeDequeList({items!r})"


class DequeDrain:
    """Consumes a deque from the front with ``next`` and from the back with ``next_back``."""

    def __init__(self, deque: SafeDequeList) -> None:
        self._deque = deque

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._deque._head is None:
            raise StopIteration
        return self._deque.pop_front()

    def next_back(self) -> Any:
        """Pop from the back; raises ``StopIteration`` when exhausted."""
        if self._deque._tail is None:
            raise StopIteration
        return self._deque.pop_back()