"""Per-call cancellation and deadline context"""

import threading
import time
from typing import Optional

from redshiftlib.errors import DeadlineExceededError, OperationCancelledError


class CallContext:
    """Cancellable, deadline-bearing context passed to every remote operation.

    Operations call :meth:`check` before each request they send (and before
    each page of a listing), so cancelling from another thread stops the work
    at the next request boundary. Socket-level bounds for a request already in
    flight come from the botocore client config.

    Example:
        >>> ctx = CallContext(timeout=30)
        >>> handle = api.execute("SELECT 1", ctx=ctx)
        >>> # from another thread
        >>> ctx.cancel()
    """

    def __init__(self, timeout: Optional[float] = None):
        """Create a context, optionally expiring ``timeout`` seconds from now"""
        self._cancelled = threading.Event()
        self._deadline: Optional[float] = None
        if timeout is not None:
            self._deadline = time.monotonic() + timeout

    @classmethod
    def with_deadline(cls, deadline: float) -> "CallContext":
        """Create a context expiring at a ``time.monotonic()`` timestamp"""
        ctx = cls()
        ctx._deadline = deadline
        return ctx

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def _remaining(self) -> Optional[float]:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def check(self) -> None:
        """Raise if the context has been cancelled or its deadline has passed"""
        if self.cancelled:
            raise OperationCancelledError("operation cancelled")
        if self.expired:
            raise DeadlineExceededError("deadline exceeded")

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "active"
        remaining = self._remaining()
        if remaining is None:
            return f"CallContext({state})"
        return f"CallContext({state}, remaining={remaining:.1f}s)"


def check(ctx: Optional[CallContext]) -> None:
    """Check ``ctx`` if one was supplied"""
    if ctx is not None:
        ctx.check()
