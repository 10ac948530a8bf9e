"""Cooperative cancellation for blocking calls."""

from __future__ import annotations

import threading

from .errors import AlphaVantageCancelledError


class CancelToken:
    """Thread-safe flag observed by the pacer, the transport and body streams.

    A token can be cancelled explicitly or, when created with ``timeout``,
    automatically once that many seconds have elapsed.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        self._event = threading.Event()
        self._timer: threading.Timer | None = None
        if timeout is not None:
            if timeout <= 0:
                self._event.set()
            else:
                self._timer = threading.Timer(timeout, self._event.set)
                self._timer.daemon = True
                self._timer.start()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()
        if self._timer is not None:
            self._timer.cancel()

    def wait(self, timeout: float | None = None) -> bool:
        """Block up to ``timeout`` seconds; return ``True`` if cancelled meanwhile."""
        return self._event.wait(timeout)

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise AlphaVantageCancelledError()


__all__ = [
    "CancelToken",
]
