"""A doubly linked list with length tracking and double-ended iteration."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("elem", "prev", "next")

    def __init__(self, elem: Any) -> None:
        self.elem = elem
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


def _partial_cmp(left: Iterable[Any], right: Iterable[Any]) -> Optional[int]:
    """Compare two sequences lexicographically.

    Returns -1, 0 or 1, or ``None`` when a pair of elements is unordered
    (such as NaN against anything).
    """
    left_iter = iter(left)
    right_iter = iter(right)
    sentinel = object()
    while True:
        x = next(left_iter, sentinel)
        y = next(right_iter, sentinel)
        if x is sentinel and y is sentinel:
            return 0
        if x is sentinel:
            return -1
        if y is sentinel:
            return 1
        if x < y:
            return -1
        if x > y:
            return 1
        if x == y:
            continue
        return None


class LinkedList:
    """A double-ended list of linked nodes.

    Comparison is lexicographic; if any compared pair is unordered, every
    ordering comparison between the two lists is false.
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._front: Optional[_Node] = None
        self._back: Optional[_Node] = None
        self._len = 0
        if iterable is not None:
            self.extend(iterable)

    def push_front(self, elem: Any) -> None:
        """Add ``elem`` at the front."""
        node = _Node(elem)
        old = self._front
        if old is None:
            self._back = node
        else:
            node.next = old
            old.prev = node
        self._front = node
        self._len += 1

    def pop_front(self) -> Optional[Any]:
        """Remove and return the front element, or ``None`` when empty."""
        node = self._front
        if node is None:
            return None
        self._front = node.next
        if self._front is None:
            self._back = None
        else:
            self._front.prev = None
        node.next = None
        self._len -= 1
        return node.elem

    def push_back(self, elem: Any) -> None:
        """Add ``elem`` at the back."""
        node = _Node(elem)
        old = self._back
        if old is None:
            self._front = node
        else:
            node.prev = old
            old.next = node
        self._back = node
        self._len += 1

    def pop_back(self) -> Optional[Any]:
        """Remove and return the back element, or ``None`` when empty."""
        node = self._back
        if node is None:
            return None
        self._back = node.prev
        if self._back is None:
            self._front = None
        else:
            self._back.next = None
        node.prev = None
        self._len -= 1
        return node.elem

    def front(self) -> Optional[Any]:
        """Return the front element, or ``None`` when empty."""
        return None if self._front is None else self._front.elem

    def back(self) -> Optional[Any]:
        """Return the back element, or ``None`` when empty."""
        return None if self._back is None else self._back.elem

    def replace_front(self, value: Any) -> Any:
        """Set the front element to ``value`` and return the old one."""
        if self._front is None:
            raise IndexError("replace_front on an empty list")
        old, self._front.elem = self._front.elem, value
        return old

    def replace_back(self, value: Any) -> Any:
        """Set the back element to ``value`` and return the old one."""
        if self._back is None:
            raise IndexError("replace_back on an empty list")
        old, self._back.elem = self._back.elem, value
        return old

    def clear(self) -> None:
        """Remove every element."""
        while self._front is not None:
            self.pop_front()

    def extend(self, iterable: Iterable[Any]) -> None:
        """Append every item of ``iterable`` at the back."""
        for item in iterable:
            self.push_back(item)

    def copy(self) -> "LinkedList":
        """Return a shallow copy."""
        return LinkedList(self)

    def iter(self) -> "LinkedListIter":
        """Return a double-ended iterator over the elements."""
        return LinkedListIter(self)

    def drain(self) -> Iterator[Any]:
        """Yield elements by popping them from the front, emptying the list."""
        while self._front is not None:
            yield self.pop_front()

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    def __reversed__(self) -> Iterator[Any]:
        node = self._back
        while node is not None:
            yield node.elem
            node = node.prev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(x == y for x, y in zip(self, other))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return _partial_cmp(self, other) == -1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return _partial_cmp(self, other) in (-1, 0)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return _partial_cmp(self, other) == 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return _partial_cmp(self, other) in (1, 0)

    def __hash__(self) -> int:
        return hash((self._len, tuple(self)))

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(item) for item in self) + "]"


class LinkedListIter:
    """Iterates a list from both ends until the ends meet."""

    def __init__(self, linked_list: LinkedList) -> None:
        self._front = linked_list._front
        self._back = linked_list._back
        self._remaining = len(linked_list)

    def __iter__(self) -> "LinkedListIter":
        return self

    def __next__(self) -> Any:
        node = self._front
        if self._remaining == 0 or node is None:
            raise StopIteration
        self._remaining -= 1
        self._front = node.next
        return node.elem

    def next_back(self) -> Any:
        """Return the next element from the back; raises ``StopIteration`` when done."""
        node = self._back
        if self._remaining == 0 or node is None:
            raise StopIteration
        self._remaining -= 1
        self._back = node.prev
        return node.elem

    def __len__(self) -> int:
        return self._remaining