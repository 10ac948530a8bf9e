from __future__ import annotations

import json
from collections.abc import AsyncIterator

import httpx
import pytest

from alpha_vantage_client.core.error_detection import adetect_service_error
from alpha_vantage_client.core.errors import AlphaVantageServiceError, AlphaVantageTransportError
from alpha_vantage_client.core.streams import AsyncBodyStream
from tests.shared.payloads import DAILY_ADJUSTED_CSV, INVALID_KEY


class CloseRecorder:
    def __init__(self):
        self.calls = 0

    async def __call__(self):
        self.calls += 1


async def _chunks(*parts: bytes) -> AsyncIterator[bytes]:
    for part in parts:
        yield part


async def _broken() -> AsyncIterator[bytes]:
    yield b"timestamp,"
    raise httpx.ReadError("reset")


@pytest.mark.asyncio
async def test_async_envelope_raises_and_closes():
    recorder = CloseRecorder()
    stream = AsyncBodyStream(_chunks(json.dumps(INVALID_KEY).encode()), on_close=recorder)
    with pytest.raises(AlphaVantageServiceError):
        await adetect_service_error(stream)
    assert recorder.calls == 1


@pytest.mark.asyncio
async def test_async_csv_body_is_replayed():
    body = DAILY_ADJUSTED_CSV.encode()
    stream = await adetect_service_error(AsyncBodyStream(_chunks(body[:5], body[5:])))
    assert await stream.read() == body


@pytest.mark.asyncio
async def test_async_failed_prefix_read_closes_the_stream():
    recorder = CloseRecorder()
    stream = AsyncBodyStream(_broken(), on_close=recorder)
    with pytest.raises(AlphaVantageTransportError):
        await adetect_service_error(stream)
    assert recorder.calls == 1
    assert stream.closed
