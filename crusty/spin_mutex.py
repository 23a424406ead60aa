"""A mutual-exclusion lock that spins while waiting."""

from __future__ import annotations

import os
import threading
from typing import Any, Callable


class _Slot:
    """The locked value as handed to the callback; assign ``value`` to change it."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value


class SpinMutex:
    """Guards one value; waiters spin instead of sleeping.

    Spinning wastes processor time while the lock is held, so this only makes
    sense for very short critical sections.
    """

    def __init__(self, value: Any) -> None:
        self._flag = threading.Lock()
        self._slot = _Slot(value)

    def with_lock(self, func: Callable[[_Slot], Any]) -> Any:
        """Run ``func`` on the guarded slot while holding the lock.

        ``func`` receives an object whose ``value`` attribute holds the guarded
        value and may be reassigned. Its return value is returned; the lock is
        released even if it raises.
        """
        while not self._flag.acquire(blocking=False):
            # Wait with plain reads until the lock looks free, then retry.
            while self._flag.locked():
                os.sched_yield() if hasattr(os, "sched_yield") else None
        try:
            return func(self._slot)
        finally:
            self._flag.release()

    def __repr__(self) -> str:
        state = "locked" if self._flag.locked() else "unlocked"
        return f"SpinMutex(<{state}>)"