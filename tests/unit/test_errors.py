from __future__ import annotations

import pytest

from alpha_vantage_client.core.errors import (
    AlphaVantageError,
    AlphaVantageHTTPStatusError,
    AlphaVantageMissingParameterError,
    AlphaVantageRateLimitError,
    AlphaVantageServiceError,
    AlphaVantageTransportError,
    AlphaVantageUnknownFunctionError,
    AlphaVantageValidationError,
    classify_service_payload,
)


def test_error_hierarchy():
    assert issubclass(AlphaVantageMissingParameterError, AlphaVantageValidationError)
    assert issubclass(AlphaVantageHTTPStatusError, AlphaVantageTransportError)
    assert issubclass(AlphaVantageRateLimitError, AlphaVantageServiceError)
    for error_type in (
        AlphaVantageValidationError,
        AlphaVantageUnknownFunctionError,
        AlphaVantageTransportError,
        AlphaVantageServiceError,
    ):
        assert issubclass(error_type, AlphaVantageError)


def test_unknown_function_message():
    error = AlphaVantageUnknownFunctionError("NOPE")
    assert str(error) == "unknown function: NOPE"
    assert error.function == "NOPE"
    assert error.cause == "unknown_function"


def test_http_status_error_carries_status_and_excerpt():
    error = AlphaVantageHTTPStatusError("bad", http_status=503, body_excerpt="busy")
    assert error.http_status == 503
    assert error.body_excerpt == "busy"
    assert error.cause == "http_status"


@pytest.mark.parametrize(
    ("payload", "expected_type", "expected_key"),
    [
        ({"Error Message": "Invalid API call."}, AlphaVantageServiceError, "Error Message"),
        ({"Information": "premium endpoint"}, AlphaVantageServiceError, "Information"),
        (
            {"Note": "Our standard API call frequency is 5 calls per minute."},
            AlphaVantageRateLimitError,
            "Note",
        ),
        (
            {"Information": "You have exceeded the rate limit per second."},
            AlphaVantageRateLimitError,
            "Information",
        ),
    ],
    ids=["error-message", "information", "note-frequency", "information-rate-limit"],
)
def test_classify_service_payload(payload, expected_type, expected_key):
    error = classify_service_payload(payload, http_status=200)
    assert type(error) is expected_type
    assert error.key == expected_key
    assert error.http_status == 200
    assert str(error) == next(iter(payload.values()))


def test_classify_service_payload_prefers_error_message():
    error = classify_service_payload({"Note": "call frequency", "Error Message": "broken"})
    assert type(error) is AlphaVantageServiceError
    assert str(error) == "broken"


@pytest.mark.parametrize(
    "payload",
    [
        {"Meta Data": {}},
        {"detail": "not an envelope"},
        [{"Error Message": "inside a list"}],
        "Error Message",
    ],
)
def test_classify_service_payload_ignores_ordinary_data(payload):
    assert classify_service_payload(payload) is None
