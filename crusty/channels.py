"""An unbounded multi-producer, single-consumer channel."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque, Iterator, Optional, Tuple

_CLOSED = object()


class _Shared:
    __slots__ = ("available", "queue", "senders")

    def __init__(self) -> None:
        self.available = threading.Condition()
        self.queue: Deque[Any] = deque()
        self.senders = 1


class Sender:
    """The sending half of a channel; clone it to get more producers.

    The channel counts as closed for the receiver once every sender is closed.
    """

    def __init__(self, shared: _Shared) -> None:
        self._shared = shared
        self._closed = False

    def send(self, value: Any) -> None:
        """Queue ``value`` for the receiver; never blocks."""
        if self._closed:
            raise ValueError("send on a closed sender")
        with self._shared.available:
            self._shared.queue.append(value)
            self._shared.available.notify()

    def clone(self) -> "Sender":
        """Return another sender feeding the same channel."""
        if self._closed:
            raise ValueError("clone of a closed sender")
        with self._shared.available:
            self._shared.senders += 1
        return Sender(self._shared)

    def close(self) -> None:
        """Give up this sender. Closing twice has no further effect."""
        if self._closed:
            return
        self._closed = True
        with self._shared.available:
            self._shared.senders -= 1
            if self._shared.senders == 0:
                self._shared.available.notify_all()

    def __enter__(self) -> "Sender":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __del__(self) -> None:
        if not getattr(self, "_closed", True):
            self.close()


class Receiver:
    """The receiving half of a channel."""

    def __init__(self, shared: _Shared) -> None:
        self._shared = shared
        self._buffer: Deque[Any] = deque()

    def _receive(self) -> Any:
        if self._buffer:
            return self._buffer.popleft()
        shared = self._shared
        with shared.available:
            while True:
                if shared.queue:
                    item = shared.queue.popleft()
                    if shared.queue:
                        # Take everything still queued in one go.
                        self._buffer, shared.queue = shared.queue, self._buffer
                    return item
                if shared.senders == 0:
                    return _CLOSED
                shared.available.wait()

    def recv(self) -> Optional[Any]:
        """Block until a value arrives; return ``None`` once all senders are closed."""
        item = self._receive()
        return None if item is _CLOSED else item

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        item = self._receive()
        if item is _CLOSED:
            raise StopIteration
        return item


def channel() -> Tuple[Sender, Receiver]:
    """Create a channel and return its ``(sender, receiver)`` pair."""
    shared = _Shared()
    return Sender(shared), Receiver(shared)