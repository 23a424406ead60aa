"""Shorthand constructors for dicts, sets and lists."""

from __future__ import annotations

import copy
import operator
from typing import Any, Dict, List, Set, Tuple


def hashmap(*args: Tuple[Any, Any]) -> Dict[Any, Any]:
    """Build a dict from ``(key, value)`` pairs; later keys overwrite earlier ones."""
    result: Dict[Any, Any] = {}
    for pair in args:
        try:
            key, value = pair
        except (TypeError, ValueError):
            raise TypeError(f"expected a (key, value) pair, got {pair!r}") from None
        result[key] = value
    return result


def hashset(*args: Any) -> Set[Any]:
    """Build a set of the given elements."""
    return set(args)


def avec(*args: Any) -> List[Any]:
    """Build a list of the given elements, in order."""
    return list(args)


def avec_repeat(element: Any, count: int) -> List[Any]:
    """Build a list of ``count`` copies of ``element``.

    ``element`` is evaluated once by the caller; every slot but the last holds
    a shallow copy of it, and the last holds the element itself.
    """
    count = operator.index(count)
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if count == 0:
        return []
    return [copy.copy(element) for _ in range(count - 1)] + [element]