from __future__ import annotations

import json
from datetime import date, datetime, timezone

import pytest

from alpha_vantage_client import AlphaVantageClient, AlphaVantageClientConfig
from alpha_vantage_client.core.errors import (
    AlphaVantageClientClosedError,
    AlphaVantageDecodeError,
    AlphaVantageRateLimitError,
    AlphaVantageServiceError,
    AlphaVantageValidationError,
)
from alpha_vantage_client.functions import (
    GlobalQuoteQuery,
    GlobalQuoteRow,
    ListingStatusQuery,
    RealtimeBulkQuotesQuery,
    TimeSeriesIntradayQuery,
)
from alpha_vantage_client.models import Quote, QuoteFunction
from tests.shared.client_fakes import RecordingTransport
from tests.shared.payloads import (
    DAILY_ADJUSTED_CSV,
    ETF_PROFILE,
    GLOBAL_QUOTE_CSV,
    INVALID_KEY,
    MONTHLY_ADJUSTED_CSV,
    OVERVIEW,
    RATE_LIMIT_NOTE,
)
from tests.shared.transport import build_config


def _client(*bodies: bytes | str | dict) -> tuple[AlphaVantageClient, RecordingTransport]:
    encoded = [
        body if isinstance(body, bytes)
        else json.dumps(body).encode() if isinstance(body, dict)
        else body.encode()
        for body in bodies
    ]
    transport = RecordingTransport(*encoded)
    return AlphaVantageClient(config=build_config(), transport=transport), transport


def test_api_key_argument_overrides_config():
    client = AlphaVantageClient("explicit", config=build_config(), transport=RecordingTransport())
    assert client.config.api_key == "explicit"


def test_api_key_defaults_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ALPHA_VANTAGE_TOKEN", "from-env")
    client = AlphaVantageClient(transport=RecordingTransport())
    assert client.config.api_key == "from-env"


def test_invalid_config_raises_validation_error():
    with pytest.raises(AlphaVantageValidationError, match="base_url"):
        AlphaVantageClient(config=AlphaVantageClientConfig(base_url="localhost"))


def test_fetch_returns_raw_body():
    client, transport = _client(GLOBAL_QUOTE_CSV)
    assert client.fetch(GlobalQuoteQuery("IBM")) == GLOBAL_QUOTE_CSV.encode()
    assert transport.queries == [GlobalQuoteQuery("IBM")]


def test_invalid_query_is_rejected_before_sending():
    client, transport = _client()
    with pytest.raises(AlphaVantageValidationError) as exc_info:
        client.fetch(TimeSeriesIntradayQuery("2min", "IBM"))
    assert exc_info.value.parameter == "interval"
    assert transport.queries == []


def test_symbol_limit_on_bulk_quotes():
    client, transport = _client()
    symbols = ",".join(f"S{i}" for i in range(101))
    with pytest.raises(AlphaVantageValidationError, match="at most 100"):
        client.fetch(RealtimeBulkQuotesQuery(symbols))
    assert transport.queries == []


def test_service_error_envelope_is_raised():
    client, _ = _client(INVALID_KEY)
    with pytest.raises(AlphaVantageServiceError, match="apikey is invalid"):
        client.fetch(GlobalQuoteQuery("IBM"))


def test_rate_limit_envelope_is_raised_from_row_helpers():
    client, _ = _client(RATE_LIMIT_NOTE)
    with pytest.raises(AlphaVantageRateLimitError):
        client.global_quote_rows(GlobalQuoteQuery("IBM"))


def test_row_helper_forces_csv_and_decodes():
    client, transport = _client(GLOBAL_QUOTE_CSV)
    (row,) = client.global_quote_rows(GlobalQuoteQuery("IBM"))
    assert transport.queries[0].get("datatype") == "csv"
    assert row == GlobalQuoteRow(
        symbol="IBM",
        open=233.56,
        high=235.99,
        low=232.81,
        price=235.24,
        volume=3461244,
        latest_day=datetime(2025, 6, 20, tzinfo=timezone.utc),
        previous_close=234.5,
        change=0.74,
        change_percent="0.3156%",
    )


def test_csv_only_function_is_sent_unchanged():
    client, transport = _client("symbol,name\r\nIBM,International Business Machines\r\n")
    rows = client.listing_status_rows(ListingStatusQuery())
    assert rows[0].symbol == "IBM"
    assert "datatype" not in transport.queries[0]


def test_fetch_json_rejects_non_json():
    client, _ = _client("not json")
    with pytest.raises(AlphaVantageDecodeError, match="not valid JSON"):
        client.fetch_json(GlobalQuoteQuery("IBM"))


def test_company_overview():
    client, transport = _client(OVERVIEW)
    overview = client.company_overview("IBM")
    assert transport.queries[0].get("function") == "OVERVIEW"
    assert overview.symbol == "IBM"
    assert overview.market_capitalization == 218628506000
    assert overview.pe_ratio == 36.66
    assert overview.peg_ratio is None
    assert overview.latest_quarter == date(2025, 3, 31)
    assert overview.ex_dividend_date is None


def test_etf_profile():
    client, _ = _client(ETF_PROFILE)
    profile = client.etf_profile("QQQ")
    assert profile.symbol == "QQQ"
    assert profile.net_assets == 532000000000
    assert [sector.sector for sector in profile.sectors] == [
        "INFORMATION TECHNOLOGY",
        "COMMUNICATION SERVICES",
    ]
    assert profile.holdings[1].weight is None


def test_quotes_request_full_adjusted_history():
    client, transport = _client(DAILY_ADJUSTED_CSV)
    quotes = client.quotes("IBM")
    query = transport.queries[0]
    assert query.get("function") == "TIME_SERIES_DAILY_ADJUSTED"
    assert query.get("outputsize") == "full"
    assert query.get("datatype") == "csv"
    assert [quote.timestamp.day for quote in quotes] == [20, 19]


def test_quotes_monthly_without_output_size():
    client, transport = _client(MONTHLY_ADJUSTED_CSV)
    (quote,) = client.quotes("IBM", QuoteFunction.TIME_SERIES_MONTHLY_ADJUSTED)
    assert "outputsize" not in transport.queries[0]
    assert isinstance(quote, Quote)
    assert quote.adjusted_close == 259.06


def test_quotes_rejects_non_quote_function():
    client, _ = _client()
    with pytest.raises(AlphaVantageValidationError) as exc_info:
        client.quotes("IBM", "TIME_SERIES_INTRADAY")
    assert exc_info.value.parameter == "function"


def test_iter_rows_is_lazy_and_reports_errors():
    body = "symbol,open\r\nIBM,1.0\r\nMSFT,bad\r\nAAPL,3.0\r\n"
    client, transport = _client(body)
    rows = client.iter_rows(GlobalQuoteQuery("IBM"), GlobalQuoteRow, on_error=lambda error: True)
    assert transport.queries == []
    assert [row.symbol for row in rows] == ["IBM", "AAPL"]


def test_close_is_idempotent_and_blocks_further_calls():
    client, transport = _client()
    with client:
        pass
    client.close()
    assert transport.closed
    with pytest.raises(AlphaVantageClientClosedError, match="already closed"):
        client.fetch(GlobalQuoteQuery("IBM"))
