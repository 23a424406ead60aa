"""A minimal singly linked stack, and the node type shared by the linked containers."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class _Node:
    __slots__ = ("elem", "next")

    def __init__(self, elem: Any, next_node: Optional["_Node"] = None) -> None:
        self.elem = elem
        self.next = next_node


def _iter_nodes(node: Optional[_Node]) -> Iterator[_Node]:
    """Walk a chain of nodes by their ``next`` links."""
    while node is not None:
        yield node
        node = node.next


class BadStackList:
    """A last-in, first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    def push(self, elem: Any) -> None:
        """Put ``elem`` on top of the stack."""
        self._head = _Node(elem, self._head)

    def pop(self) -> Optional[Any]:
        """Remove and return the top element, or ``None`` when empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        return node.elem