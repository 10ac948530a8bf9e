"""Token-bucket pacing of outbound requests."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable
from enum import IntEnum

from .cancellation import CancelToken
from .errors import AlphaVantageCancelledError

# Non-head waiters re-check their cancel token at this interval.
_QUEUE_POLL_SECONDS = 0.05


class RequestsPerMinute(IntEnum):
    """Call allowances of the premium plans."""

    PLAN_75 = 75
    PLAN_150 = 150
    PLAN_300 = 300
    PLAN_600 = 600
    PLAN_1200 = 1200


def parse_requests_per_minute(text: str) -> int:
    """Parse a positive integer rate such as ``"75"`` (``"0"`` disables pacing)."""
    stripped = text.strip()
    if not stripped.isdigit():
        raise ValueError(f"requests per minute must be a non-negative integer, got {text!r}")
    return int(stripped)


class TokenBucket:
    """Continuously refilled bucket; not thread-safe on its own."""

    def __init__(
        self,
        requests_per_minute: int,
        *,
        burst: int = 1,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if requests_per_minute <= 0:
            raise ValueError("requests_per_minute must be > 0")
        if burst < 1:
            raise ValueError("burst must be >= 1")
        self._rate_per_second = requests_per_minute / 60.0
        self._capacity = float(burst)
        self._clock = clock or time.monotonic
        self._tokens = self._capacity
        self._last_refill = self._clock()

    @property
    def tokens(self) -> float:
        self._refill()
        return self._tokens

    def try_acquire(self) -> float:
        """Take one token and return ``0.0``, or return the seconds until one is due."""
        self._refill()
        if self._tokens >= 1.0:
            self._tokens -= 1.0
            return 0.0
        return (1.0 - self._tokens) / self._rate_per_second

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_refill
        if elapsed > 0:
            self._tokens = min(self._capacity, self._tokens + elapsed * self._rate_per_second)
        self._last_refill = now


class TokenBucketPacer:
    """Blocks callers until the configured request rate allows another call.

    Waiters are served in arrival order. Only the waiter at the head of the
    queue sleeps on the bucket; everyone else waits for their turn.
    """

    def __init__(
        self,
        requests_per_minute: int | None,
        *,
        burst: int = 1,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        self._bucket = (
            TokenBucket(requests_per_minute, burst=burst, clock=clock)
            if requests_per_minute
            else None
        )
        self._sleep = sleeper
        self._condition = threading.Condition()
        self._queue: deque[object] = deque()

    @property
    def enabled(self) -> bool:
        return self._bucket is not None

    def wait(self, cancel: CancelToken | None = None) -> None:
        if cancel is not None:
            cancel.raise_if_cancelled()
        if self._bucket is None:
            return

        ticket = object()
        with self._condition:
            self._queue.append(ticket)
        try:
            while True:
                with self._condition:
                    if cancel is not None:
                        cancel.raise_if_cancelled()
                    if self._queue[0] is not ticket:
                        self._condition.wait(_QUEUE_POLL_SECONDS)
                        continue
                    delay = self._bucket.try_acquire()
                    if delay <= 0:
                        return
                self._pause(delay, cancel)
        finally:
            with self._condition:
                self._queue.remove(ticket)
                self._condition.notify_all()

    def _pause(self, delay: float, cancel: CancelToken | None) -> None:
        if self._sleep is not None:
            self._sleep(delay)
            return
        if cancel is None:
            time.sleep(delay)
            return
        if cancel.wait(delay):
            raise AlphaVantageCancelledError()


__all__ = [
    "RequestsPerMinute",
    "parse_requests_per_minute",
    "TokenBucket",
    "TokenBucketPacer",
]
