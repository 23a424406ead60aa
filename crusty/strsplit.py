"""Lazy string splitting on a delimiter."""

from __future__ import annotations

from typing import Iterator, Optional, Union

from crusty.delimiter import Delimiter, find_next


class StrSplit:
    """Iterate over the pieces of ``haystack`` separated by ``delimiter``.

    A trailing delimiter yields a final empty piece.
    """

    def __init__(self, haystack: str, delimiter: Union[str, Delimiter]) -> None:
        self._remainder: Optional[str] = haystack
        self._delimiter = delimiter

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        remainder = self._remainder
        if remainder is None:
            raise StopIteration
        span = find_next(self._delimiter, remainder)
        if span is None:
            self._remainder = None
            return remainder
        start, end = span
        self._remainder = remainder[end:]
        return remainder[:start]

    def __repr__(self) -> str:
        return f"StrSplit(remainder={self._remainder!r}, delimiter={self._delimiter!r})"


def until_char(haystack: str, char: str) -> str:
    """Return the part of ``haystack`` before the first ``char``."""
    return next(StrSplit(haystack, char))