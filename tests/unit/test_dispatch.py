from __future__ import annotations

import io

import pytest

from alpha_vantage_client import AlphaVantageClient
from alpha_vantage_client.core.errors import (
    AlphaVantageMissingParameterError,
    AlphaVantageServiceError,
    AlphaVantageUnknownFunctionError,
    AlphaVantageValidationError,
)
from alpha_vantage_client.dispatch import build_query, execute
from alpha_vantage_client.functions import SimpleMovingAverageQuery
from tests.shared.client_fakes import RecordingTransport
from tests.shared.transport import build_config


def test_build_query_from_flag_values():
    query = build_query(
        "SMA",
        {"symbol": "IBM", "interval": "daily", "time_period": "20", "series_type": "close"},
    )
    assert query == SimpleMovingAverageQuery("daily", "close", "IBM", 20)


def test_build_query_reports_every_missing_flag():
    with pytest.raises(AlphaVantageMissingParameterError) as exc_info:
        build_query("SMA", {"symbol": "IBM", "interval": " "})
    error = exc_info.value
    assert str(error) == 'required flag(s) "--interval", "--series_type", "--time_period" not set'
    assert error.parameter == "interval"
    assert isinstance(error, AlphaVantageValidationError)


def test_build_query_validates_values():
    with pytest.raises(AlphaVantageValidationError) as exc_info:
        build_query("GLOBAL_QUOTE", {"symbol": "IBM", "datatype": "xml"})
    assert exc_info.value.parameter == "datatype"


def test_build_query_accepts_repeated_values():
    query = build_query("NEWS_SENTIMENT", {"tickers": ["IBM", "AAPL"]})
    assert query.values()["tickers"] == ["IBM", "AAPL"]


def test_build_query_unknown_function():
    with pytest.raises(AlphaVantageUnknownFunctionError):
        build_query("NOPE", {})


def test_execute_copies_body_to_sink():
    body = b"timestamp,SMA\r\n" + b"2025-06-20,230.1\r\n" * 5000
    transport = RecordingTransport(body)
    client = AlphaVantageClient(config=build_config(), transport=transport)
    sink = io.BytesIO()
    written = execute(
        client,
        "SMA",
        {"symbol": "IBM", "interval": "daily", "time_period": "20", "series_type": "close"},
        sink,
    )
    assert written == len(body)
    assert sink.getvalue() == body
    assert transport.queries[0].get("function") == "SMA"


def test_execute_propagates_service_errors():
    transport = RecordingTransport(b'{"Error Message": "Invalid API call."}')
    client = AlphaVantageClient(config=build_config(), transport=transport)
    sink = io.BytesIO()
    with pytest.raises(AlphaVantageServiceError):
        execute(client, "GLOBAL_QUOTE", {"symbol": "IBM"}, sink)
    assert sink.getvalue() == b""
