from __future__ import annotations

import io

import httpx
import pytest

from alpha_vantage_client.core.cancellation import CancelToken
from alpha_vantage_client.core.errors import AlphaVantageCancelledError, AlphaVantageTransportError
from alpha_vantage_client.core.streams import BodyStream, PrefixedStream


def test_body_stream_returns_at_most_one_chunk_per_read():
    stream = BodyStream(iter([b"ab", b"", b"cde", b"f"]))
    assert stream.read(4) == b"ab"
    assert stream.read(2) == b"cd"
    assert stream.read(4) == b"e"
    assert stream.read() == b"f"
    assert stream.read() == b""


def test_buffered_reader_fills_across_chunks():
    stream = io.BufferedReader(BodyStream(iter([b"ab", b"", b"cde", b"f"])))
    assert stream.read(4) == b"abcd"
    assert stream.read() == b"ef"


def test_body_stream_supports_buffered_line_reading():
    stream = BodyStream(iter([b"a,b\r\n1,", b"2\r\n"]))
    reader = io.TextIOWrapper(io.BufferedReader(stream), encoding="utf-8", newline="")
    assert reader.readlines() == ["a,b\r\n", "1,2\r\n"]


def test_close_runs_callback_once():
    calls: list[int] = []
    stream = BodyStream(iter([b"x"]), on_close=lambda: calls.append(1))
    with stream:
        pass
    stream.close()
    assert calls == [1]
    assert stream.closed


def test_cancelled_token_stops_reads():
    token = CancelToken()
    stream = BodyStream(iter([b"abc", b"def"]), cancel=token)
    assert stream.read(3) == b"abc"
    token.cancel()
    with pytest.raises(AlphaVantageCancelledError):
        stream.read(3)


def test_http_errors_while_reading_become_transport_errors():
    def chunks():
        yield b"ok"
        raise httpx.ReadError("reset")

    stream = BodyStream(chunks())
    assert stream.read(2) == b"ok"
    with pytest.raises(AlphaVantageTransportError) as exc_info:
        stream.read(2)
    assert exc_info.value.cause == "network"
    assert isinstance(exc_info.value.__cause__, httpx.ReadError)


def test_body_stream_from_response_closes_response():
    response = httpx.Response(200, content=b"payload")
    stream = BodyStream.from_response(response)
    assert stream.read() == b"payload"
    stream.close()
    assert response.is_closed


def test_prefixed_stream_replays_prefix_then_source():
    source = io.BytesIO(b"world")
    stream = PrefixedStream(b"hello ", source)
    assert stream.read(3) == b"hel"
    assert stream.read() == b"lo world"
    stream.close()
    assert source.closed
