"""Readable response bodies that never buffer the whole payload."""

from __future__ import annotations

import io
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from types import TracebackType

import httpx

from .cancellation import CancelToken
from .errors import AlphaVantageTransportError


class BodyStream(io.RawIOBase):
    """Binary stream over an iterator of byte chunks.

    Reads honour the optional cancel token; closing the stream releases the
    underlying HTTP response.
    """

    def __init__(
        self,
        chunks: Iterator[bytes],
        *,
        on_close: Callable[[], None] | None = None,
        cancel: CancelToken | None = None,
    ) -> None:
        super().__init__()
        self._chunks = chunks
        self._on_close = on_close
        self._cancel = cancel
        self._pending = b""

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        *,
        cancel: CancelToken | None = None,
    ) -> "BodyStream":
        return cls(response.iter_bytes(), on_close=response.close, cancel=cancel)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:  # type: ignore[override]
        if self._cancel is not None:
            self._cancel.raise_if_cancelled()
        while not self._pending:
            try:
                self._pending = next(self._chunks)
            except StopIteration:
                return 0
            except httpx.HTTPError as exc:
                raise AlphaVantageTransportError(
                    "failed to read response body",
                    cause="network",
                ) from exc
        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size

    def close(self) -> None:
        if self.closed:
            return
        try:
            if self._on_close is not None:
                self._on_close()
        finally:
            super().close()


class PrefixedStream(io.RawIOBase):
    """Replays an already-consumed prefix, then continues with the source stream."""

    def __init__(self, prefix: bytes, source: io.RawIOBase | io.BufferedIOBase) -> None:
        super().__init__()
        self._prefix = prefix
        self._source = source

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:  # type: ignore[override]
        if self._prefix:
            size = min(len(buffer), len(self._prefix))
            buffer[:size] = self._prefix[:size]
            self._prefix = self._prefix[size:]
            return size
        data = self._source.read(len(buffer))
        if not data:
            return 0
        buffer[: len(data)] = data
        return len(data)

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._source.close()
        finally:
            super().close()


class AsyncBodyStream:
    """Async byte stream over an async iterator of chunks."""

    def __init__(
        self,
        chunks: AsyncIterator[bytes],
        *,
        on_close: Callable[[], Awaitable[None]] | None = None,
        prefix: bytes = b"",
    ) -> None:
        self._chunks = chunks
        self._on_close = on_close
        self._pending = prefix
        self._closed = False

    @classmethod
    def from_response(cls, response: httpx.Response) -> "AsyncBodyStream":
        return cls(response.aiter_bytes(), on_close=response.aclose)

    @property
    def closed(self) -> bool:
        return self._closed

    async def read(self, size: int = -1) -> bytes:
        """Return up to ``size`` bytes (everything left when negative); ``b""`` at EOF."""
        if size < 0:
            parts = [self._pending]
            self._pending = b""
            async for chunk in self:
                parts.append(chunk)
            return b"".join(parts)
        while not self._pending:
            chunk = await self._next_chunk()
            if chunk is None:
                return b""
            self._pending = chunk
        data = self._pending[:size]
        self._pending = self._pending[size:]
        return data

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[bytes]:
        if self._pending:
            pending, self._pending = self._pending, b""
            yield pending
        while True:
            chunk = await self._next_chunk()
            if chunk is None:
                return
            yield chunk

    async def _next_chunk(self) -> bytes | None:
        try:
            return await self._chunks.__anext__()
        except StopAsyncIteration:
            return None
        except httpx.HTTPError as exc:
            raise AlphaVantageTransportError(
                "failed to read response body",
                cause="network",
            ) from exc

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._on_close is not None:
            await self._on_close()

    async def __aenter__(self) -> "AsyncBodyStream":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.aclose()
        return False


__all__ = [
    "BodyStream",
    "PrefixedStream",
    "AsyncBodyStream",
]
