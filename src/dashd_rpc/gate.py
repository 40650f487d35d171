"""Opt-in limits on how many calls a client may have in flight."""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager, nullcontext
from types import TracebackType


class ConcurrencyGate(AbstractContextManager):
    """Allow at most ``limit`` calls through at once.

    With ``limit=1`` every call on the client waits for the one in flight.
    """

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._semaphore = threading.BoundedSemaphore(limit)

    def __enter__(self) -> ConcurrencyGate:
        self._semaphore.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._semaphore.release()


def make_gate(limit: int | None) -> AbstractContextManager[object]:
    """Return a gate for ``limit`` concurrent calls, or a no-op when ``limit`` is None."""
    if limit is None:
        return nullcontext()
    return ConcurrencyGate(limit)
