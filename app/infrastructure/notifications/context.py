"""Push context: cancellation and deadline for one dispatch.

The caller owns the deadline. The dispatcher imposes no timeout of its own;
it checks the context before starting each transport, and transports can
check it (or read ``remaining()``) while they work.

Usage:
    from infrastructure.notifications.context import PushContext

    context = PushContext.with_timeout(5.0)
    dispatcher.push(notification, context)

    # From another thread
    context.cancel()
"""

import time
from threading import Event
from typing import Optional

from infrastructure.operations.errors import PushCancelledError


class PushContext:
    """Thread-safe cancellation signal with an optional deadline.

    Attributes:
        deadline: ``time.monotonic()`` value after which the context counts
            as cancelled, or None for no deadline
    """

    def __init__(self, deadline: Optional[float] = None):
        self.deadline = deadline
        self._cancelled = Event()

    @classmethod
    def background(cls) -> "PushContext":
        """A context that is never cancelled unless ``cancel()`` is called."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "PushContext":
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def deadline_exceeded(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set() or self.deadline_exceeded

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline (never negative), or None."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def check(self) -> None:
        """Raise ``PushCancelledError`` if the context is no longer live."""
        if self._cancelled.is_set():
            raise PushCancelledError("push cancelled")
        if self.deadline_exceeded:
            raise PushCancelledError("push deadline exceeded")

    def __repr__(self) -> str:
        return f"PushContext(cancelled={self.cancelled}, remaining={self.remaining()})"
