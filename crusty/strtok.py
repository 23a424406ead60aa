"""Take the next token off the front of a string."""

from __future__ import annotations

from typing import Tuple, Union

from crusty.delimiter import Delimiter, find_next


def strtok(haystack: str, delimiter: Union[str, Delimiter]) -> Tuple[str, str]:
    """Split off the text before the first ``delimiter``.

    Returns ``(token, rest)``. Without a match the whole string is the token
    and the rest is empty.
    """
    span = find_next(delimiter, haystack)
    if span is None:
        return haystack, ""
    start, end = span
    return haystack[:start], haystack[end:]