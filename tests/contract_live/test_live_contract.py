from __future__ import annotations

import os

import pytest

from alpha_vantage_client import AlphaVantageClient, AlphaVantageClientConfig, PacingConfig
from alpha_vantage_client.functions import GlobalQuoteQuery, SimpleMovingAverageQuery

pytestmark = pytest.mark.live

# Read at import time; the autouse fixture clears ALPHA_VANTAGE_* for each test.
_LIVE_TOKEN = os.getenv("ALPHA_VANTAGE_TOKEN")


def _require_live_flag() -> None:
    if os.getenv("ALPHA_VANTAGE_RUN_LIVE") != "1" or not _LIVE_TOKEN:
        pytest.skip("Set ALPHA_VANTAGE_RUN_LIVE=1 and ALPHA_VANTAGE_TOKEN to run live contract tests")


def _live_client() -> AlphaVantageClient:
    cfg = AlphaVantageClientConfig(
        api_key=_LIVE_TOKEN,
        pacing=PacingConfig(requests_per_minute=5),
    )
    cfg.validate()
    return AlphaVantageClient(config=cfg)


def test_live_global_quote_contract_minimum():
    _require_live_flag()
    with _live_client() as client:
        rows = client.global_quote_rows(GlobalQuoteQuery("IBM"))

    assert len(rows) == 1
    assert rows[0].symbol == "IBM"
    assert rows[0].price > 0
    assert rows[0].latest_day is not None


def test_live_daily_quotes_contract_minimum():
    _require_live_flag()
    with _live_client() as client:
        quotes = client.quotes("IBM", "TIME_SERIES_DAILY")

    assert len(quotes) > 100
    assert all(quote.timestamp is not None for quote in quotes[:5])
    assert quotes[0].timestamp > quotes[-1].timestamp


def test_live_overview_contract_minimum():
    _require_live_flag()
    with _live_client() as client:
        overview = client.company_overview("IBM")

    assert overview.symbol == "IBM"
    assert overview.market_capitalization is not None


def test_live_moving_average_contract_minimum():
    _require_live_flag()
    with _live_client() as client:
        rows = client.sma_rows(SimpleMovingAverageQuery("weekly", "open", "IBM", 10))

    assert rows
    assert isinstance(rows[0].value, float)
