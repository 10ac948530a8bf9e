from __future__ import annotations

import io
from datetime import datetime, timezone
from pathlib import Path

import httpx
import pytest

from alpha_vantage_client import AlphaVantageClient
from alpha_vantage_client.cli import main
from alpha_vantage_client.config import AlphaVantageClientConfig
from alpha_vantage_client.core.errors import AlphaVantageHTTPStatusError, AlphaVantageServiceError
from alpha_vantage_client.core.transport import SyncTransport
from alpha_vantage_client.functions import (
    FxDailyQuery,
    GlobalQuoteQuery,
    ListingStatusQuery,
    SimpleMovingAverageQuery,
)
from alpha_vantage_client.specification.testdata import (
    example_id,
    load_example_index,
    prune_missing,
    save_example_index,
    url_parameters,
)
from tests.shared.replay import ExampleReplayHandler
from tests.shared.transport import build_config


def _replay_client(config: AlphaVantageClientConfig, handler: ExampleReplayHandler) -> AlphaVantageClient:
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return AlphaVantageClient(config=config, transport=SyncTransport(config, client=http))


@pytest.fixture
def replay(example_index_path: Path) -> ExampleReplayHandler:
    return ExampleReplayHandler(example_index_path)


@pytest.fixture
def client(replay: ExampleReplayHandler):
    with _replay_client(build_config(), replay) as value:
        yield value


def test_index_entries_are_consistent(example_index_path: Path):
    entries = load_example_index(example_index_path)
    assert entries
    for entry in entries:
        (function,) = url_parameters(entry.url)["function"]
        assert entry.id == example_id(function, entry.url)
        assert entry.function == function
        assert entry.fetched.tzinfo is not None
    assert prune_missing(example_index_path, entries) == entries


def test_index_file_is_in_canonical_form(example_index_path: Path, tmp_path: Path):
    copy = tmp_path / "index.json"
    save_example_index(copy, load_example_index(example_index_path))
    assert copy.read_bytes() == example_index_path.read_bytes()


def test_global_quote_rows(client: AlphaVantageClient, replay: ExampleReplayHandler):
    (row,) = client.global_quote_rows(GlobalQuoteQuery("IBM"))
    assert row.symbol == "IBM"
    assert row.price == 235.24
    assert row.latest_day == datetime(2025, 6, 20, tzinfo=timezone.utc)
    assert replay.requests[0].url.params["datatype"] == "csv"


def test_daily_adjusted_quotes(client: AlphaVantageClient):
    quotes = client.quotes("IBM")
    assert len(quotes) == 4
    assert quotes[0].timestamp == datetime(2025, 6, 20, tzinfo=timezone.utc)
    assert quotes[-1].dividend_amount == 1.68
    assert quotes[-1].adjusted_close == 247.53


def test_company_overview(client: AlphaVantageClient):
    overview = client.company_overview("IBM")
    assert overview.industry == "COMPUTER & OFFICE EQUIPMENT"
    assert overview.peg_ratio == 2.103
    assert overview.revenue_ttm == 62832001000
    assert overview.forward_pe is None
    assert overview.ex_dividend_date is None


def test_listing_status_rows(client: AlphaVantageClient):
    rows = client.listing_status_rows(ListingStatusQuery())
    assert [row.symbol for row in rows] == ["A", "AA", "AAA"]
    assert rows[2].name == "Alternative Access First Priority CLO Bond ETF"
    assert rows[0].ipo_date == datetime(1999, 11, 18, tzinfo=timezone.utc)
    assert all(row.delisting_date is None for row in rows)


def test_moving_average_rows(client: AlphaVantageClient):
    rows = client.sma_rows(SimpleMovingAverageQuery("weekly", "open", "IBM", 10))
    assert [(row.time, row.value) for row in rows] == [
        ("2025-06-20", 250.462),
        ("2025-06-13", 248.917),
        ("2025-06-06", 246.599),
    ]


def test_forex_rows(client: AlphaVantageClient):
    rows = client.fx_daily_rows(FxDailyQuery("EUR", "USD"))
    assert [row.close for row in rows] == [1.1525, 1.1493]


def test_recorded_error_envelope(client: AlphaVantageClient):
    with pytest.raises(AlphaVantageServiceError, match="Invalid API call"):
        client.global_quote_rows(GlobalQuoteQuery("NOPE"))


def test_unrecorded_request_surfaces_http_status(client: AlphaVantageClient):
    with pytest.raises(AlphaVantageHTTPStatusError) as exc_info:
        client.fetch(GlobalQuoteQuery("MSFT"))
    assert exc_info.value.http_status == 404


def test_cli_replays_recorded_body(replay: ExampleReplayHandler, example_index_path: Path):
    stdout = io.BytesIO()
    stderr = io.StringIO()
    code = main(
        [
            "--apikey",
            "replay-key",
            "SMA",
            "--symbol",
            "IBM",
            "--interval",
            "weekly",
            "--time_period",
            "10",
            "--series_type",
            "open",
        ],
        stdout=stdout,
        stderr=stderr,
        client_factory=lambda config: _replay_client(config, replay),
    )
    assert (code, stderr.getvalue()) == (0, "")
    body_path = example_index_path.parent / "technical_moving_averages" / "SMA_2e3849d5.csv"
    assert stdout.getvalue() == body_path.read_bytes()
    assert replay.requests[0].url.params["apikey"] == "replay-key"
