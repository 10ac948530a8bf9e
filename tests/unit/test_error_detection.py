from __future__ import annotations

import json

import pytest

from alpha_vantage_client.core.cancellation import CancelToken
from alpha_vantage_client.core.error_detection import DEFAULT_PREFIX_SIZE, detect_service_error
from alpha_vantage_client.core.errors import (
    AlphaVantageCancelledError,
    AlphaVantageRateLimitError,
    AlphaVantageServiceError,
    classify_service_payload,
)
from alpha_vantage_client.core.streams import BodyStream
from tests.shared.client_fakes import tracked_stream
from tests.shared.payloads import DAILY_ADJUSTED_CSV, INVALID_KEY, RATE_LIMIT_NOTE


def test_error_message_envelope_raises_and_closes():
    stream, closed = tracked_stream(json.dumps(INVALID_KEY).encode())
    with pytest.raises(AlphaVantageServiceError) as exc_info:
        detect_service_error(stream)
    assert not isinstance(exc_info.value, AlphaVantageRateLimitError)
    assert exc_info.value.key == "Error Message"
    assert "apikey is invalid" in str(exc_info.value)
    assert closed == [True]


def test_rate_limit_note_is_classified():
    stream, closed = tracked_stream(json.dumps(RATE_LIMIT_NOTE).encode())
    with pytest.raises(AlphaVantageRateLimitError) as exc_info:
        detect_service_error(stream)
    assert exc_info.value.key == "Note"
    assert closed == [True]


def test_information_envelope_with_byte_order_mark():
    body = b"\xef\xbb\xbf" + json.dumps({"Information": "premium endpoint"}).encode()
    stream, _ = tracked_stream(body)
    with pytest.raises(AlphaVantageServiceError) as exc_info:
        detect_service_error(stream)
    assert exc_info.value.key == "Information"


def test_csv_body_is_replayed_unchanged():
    body = DAILY_ADJUSTED_CSV.encode()
    stream, closed = tracked_stream(body)
    replay = detect_service_error(stream, prefix_size=16)
    assert replay.read() == body
    replay.close()
    assert closed == [True]


def test_ordinary_json_is_replayed_unchanged():
    body = json.dumps({"Symbol": "IBM", "Name": "International Business Machines"}).encode()
    stream, _ = tracked_stream(body)
    assert detect_service_error(stream).read() == body


def test_large_json_document_is_not_mistaken_for_an_error():
    payload = {"Meta Data": {"1. Information": "x"}, "rows": ["y" * 100] * 100}
    body = json.dumps(payload).encode()
    assert len(body) > DEFAULT_PREFIX_SIZE
    stream, _ = tracked_stream(body)
    assert detect_service_error(stream).read() == body


def test_empty_body_is_not_an_error():
    stream, _ = tracked_stream(b"")
    assert detect_service_error(stream).read() == b""


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ([], None),
        ({"Global Quote": {}}, None),
        ({"Information": "Please consider the rate limit of our plans."}, AlphaVantageRateLimitError),
        ({"Error Message": "Invalid API call. call frequency"}, AlphaVantageServiceError),
    ],
)
def test_classify_service_payload(payload, expected):
    error = classify_service_payload(payload)
    if expected is None:
        assert error is None
    else:
        assert type(error) is expected


def test_failed_prefix_read_closes_the_stream():
    token = CancelToken()
    token.cancel()
    closed: list[bool] = []
    stream = BodyStream(
        iter([DAILY_ADJUSTED_CSV.encode()]),
        on_close=lambda: closed.append(True),
        cancel=token,
    )
    with pytest.raises(AlphaVantageCancelledError):
        detect_service_error(stream)
    assert closed == [True]
