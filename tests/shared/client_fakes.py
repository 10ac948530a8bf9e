from __future__ import annotations

import io

from alpha_vantage_client.core.streams import AsyncBodyStream, BodyStream
from alpha_vantage_client.query.base import Query


class RecordingTransport:
    """Sync transport stand-in returning a fixed body per call."""

    def __init__(self, *bodies: bytes):
        self.bodies = list(bodies)
        self.queries: list[Query] = []
        self.closed = False

    def close(self):
        self.closed = True

    def send(self, query: Query, *, cancel=None) -> BodyStream:
        self.queries.append(query)
        body = self.bodies.pop(0)
        return BodyStream(iter([body[i : i + 7] for i in range(0, len(body), 7)]))


class RecordingAsyncTransport:
    def __init__(self, *bodies: bytes):
        self.bodies = list(bodies)
        self.queries: list[Query] = []
        self.closed = False

    async def close(self):
        self.closed = True

    async def send(self, query: Query) -> AsyncBodyStream:
        self.queries.append(query)
        body = self.bodies.pop(0)
        return AsyncBodyStream(_chunks(body))


async def _chunks(body: bytes, size: int = 7):
    for start in range(0, len(body), size):
        yield body[start : start + size]


def tracked_stream(body: bytes) -> tuple[BodyStream, list[bool]]:
    closed: list[bool] = []
    stream = BodyStream(iter([body]), on_close=lambda: closed.append(True))
    return stream, closed


def text_source(text: str) -> io.BytesIO:
    return io.BytesIO(text.encode("utf-8"))
