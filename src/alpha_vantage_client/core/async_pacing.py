"""Async token-bucket pacing of outbound requests."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from .pacing import TokenBucket


class AsyncTokenBucketPacer:
    """Awaits until the configured request rate allows another call (async).

    ``asyncio.Lock`` wakes waiters in FIFO order, which gives first-come
    service. Task cancellation propagates as ``asyncio.CancelledError`` and never
    consumes a token.
    """

    def __init__(
        self,
        requests_per_minute: int | None,
        *,
        burst: int = 1,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self._bucket = (
            TokenBucket(requests_per_minute, burst=burst, clock=clock)
            if requests_per_minute
            else None
        )
        self._sleep = sleeper or asyncio.sleep
        self._lock = asyncio.Lock()

    @property
    def enabled(self) -> bool:
        return self._bucket is not None

    async def wait(self) -> None:
        if self._bucket is None:
            return
        async with self._lock:
            while True:
                delay = self._bucket.try_acquire()
                if delay <= 0:
                    return
                await self._sleep(delay)


__all__ = [
    "AsyncTokenBucketPacer",
]
