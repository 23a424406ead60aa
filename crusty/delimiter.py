"""Locating a delimiter inside a string."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple, Union, runtime_checkable


@runtime_checkable
class Delimiter(Protocol):
    """Anything able to locate its next occurrence inside a string."""

    def find_next(self, haystack: str) -> Optional[Tuple[int, int]]:
        """Return ``(start, end)`` of the first match, or ``None``."""


def find_next(
    delimiter: Union[str, Delimiter], haystack: str
) -> Optional[Tuple[int, int]]:
    """Return the ``(start, end)`` span of the first ``delimiter`` in ``haystack``.

    ``delimiter`` may be a string (a single character works too) or any object
    with a ``find_next(haystack)`` method. ``None`` means there is no match.
    """
    if isinstance(delimiter, str):
        start = haystack.find(delimiter)
        if start < 0:
            return None
        return start, start + len(delimiter)
    if isinstance(delimiter, Delimiter):
        return delimiter.find_next(haystack)
    raise TypeError(f"unsupported delimiter type: {type(delimiter).__name__}")