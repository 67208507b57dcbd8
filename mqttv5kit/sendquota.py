"""Send quota honouring the Receive Maximum advertised by the server."""

from __future__ import annotations

import threading
import time
from collections import deque


class UnexpectedReleaseError(RuntimeError):
    """Raised when a slot is released while the quota is already at its initial value."""


class QuotaCancelledError(Exception):
    """Raised when waiting for a slot is cancelled or times out."""


class SendQuota:
    """Bounds the number of QoS 1/2 PUBLISH transactions in flight.

    Waiters are served strictly in the order in which they asked for a slot.
    """

    _POLL_INTERVAL = 0.005

    def __init__(self, quota: int) -> None:
        self._initial = quota
        self._quota = quota
        self._waiters: deque[threading.Event] = deque()
        self._lock = threading.Lock()

    @property
    def quota(self) -> int:
        """Slots currently available (negative after over-committed retransmits)."""
        with self._lock:
            return self._quota

    @property
    def waiting(self) -> int:
        """Number of callers currently queued for a slot."""
        with self._lock:
            return len(self._waiters)

    def retransmit(self) -> None:
        """Take a slot for a redelivered message without ever blocking."""
        with self._lock:
            self._quota -= 1

    def acquire(self, timeout: float | None = None, cancel: threading.Event | None = None) -> None:
        """Wait for a free slot.

        A free slot is taken immediately even if ``cancel`` is already set.
        Raises QuotaCancelledError if ``cancel`` is set or ``timeout`` seconds
        pass before a slot becomes available.
        """
        with self._lock:
            if self._quota > 0 and not self._waiters:
                self._quota -= 1
                return
            ready = threading.Event()
            self._waiters.append(ready)

        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            wait = self._POLL_INTERVAL if cancel is not None else None
            if deadline is not None:
                remaining = max(deadline - time.monotonic(), 0.0)
                wait = remaining if wait is None else min(wait, remaining)
            if ready.wait(wait):
                return
            cancelled = cancel is not None and cancel.is_set()
            expired = deadline is not None and time.monotonic() >= deadline
            if cancelled or expired:
                with self._lock:
                    if ready.is_set():
                        # Slot was handed over as we gave up; keep it.
                        return
                    self._waiters.remove(ready)
                reason = "cancelled" if cancelled else "timed out"
                raise QuotaCancelledError(f"waiting for send quota {reason}")

    def release(self) -> None:
        """Free a slot, handing it to the longest waiting caller if there is one."""
        with self._lock:
            if self._quota >= 0 and self._waiters:
                self._waiters.popleft().set()
                return
            if self._quota < self._initial:
                self._quota += 1
                return
        raise UnexpectedReleaseError("release called when quota at initial value")