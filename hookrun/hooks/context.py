"""Cancellation and deadline state shared by one hooks run."""

import threading
import time
from typing import Optional

from ..errors import ContextCancelledError


class RunContext:
    """Cooperative cancellation handle threaded through every invocation.

    Usage:
        context = RunContext(timeout=300)
        orchestrator.run("predeploy", context=context)
        # from a signal handler or another thread:
        context.cancel()
    """

    def __init__(self, timeout: Optional[float] = None):
        self._event = threading.Event()
        self._reason = "context cancelled"
        self._deadline: Optional[float] = None
        if timeout:
            self._deadline = time.monotonic() + timeout

    def cancel(self, reason: str = "context cancelled") -> None:
        self._reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._reason = "context deadline exceeded"
            return True
        return False

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None when there is none."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def check(self) -> None:
        """Raise ContextCancelledError if the run should stop."""
        if self.cancelled:
            raise ContextCancelledError(self._reason)
