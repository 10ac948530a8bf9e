from __future__ import annotations

import json

import pytest

from alpha_vantage_client import AsyncAlphaVantageClient
from alpha_vantage_client.core.errors import (
    AlphaVantageClientClosedError,
    AlphaVantageRateLimitError,
    AlphaVantageServiceError,
    AlphaVantageValidationError,
)
from alpha_vantage_client.functions import GlobalQuoteQuery, GlobalQuoteRow, TimeSeriesIntradayQuery
from alpha_vantage_client.models import Quote
from tests.shared.client_fakes import RecordingAsyncTransport
from tests.shared.payloads import (
    DAILY_ADJUSTED_CSV,
    ETF_PROFILE,
    GLOBAL_QUOTE_CSV,
    INVALID_KEY,
    OVERVIEW,
    RATE_LIMIT_NOTE,
)
from tests.shared.transport import build_config


def _client(*bodies: bytes) -> tuple[AsyncAlphaVantageClient, RecordingAsyncTransport]:
    transport = RecordingAsyncTransport(*bodies)
    return AsyncAlphaVantageClient(config=build_config(), transport=transport), transport


@pytest.mark.asyncio
async def test_async_fetch_and_row_helper():
    client, transport = _client(GLOBAL_QUOTE_CSV.encode(), GLOBAL_QUOTE_CSV.encode())
    assert await client.fetch(GlobalQuoteQuery("IBM")) == GLOBAL_QUOTE_CSV.encode()
    (row,) = await client.global_quote_rows(GlobalQuoteQuery("IBM"))
    assert isinstance(row, GlobalQuoteRow)
    assert row.price == 235.24
    assert transport.queries[1].get("datatype") == "csv"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "error"),
    [(INVALID_KEY, AlphaVantageServiceError), (RATE_LIMIT_NOTE, AlphaVantageRateLimitError)],
    ids=["error-message", "rate-limit-note"],
)
async def test_async_service_errors(payload, error):
    client, _ = _client(json.dumps(payload).encode())
    with pytest.raises(error):
        await client.fetch(GlobalQuoteQuery("IBM"))


@pytest.mark.asyncio
async def test_async_validation_happens_before_send():
    client, transport = _client()
    with pytest.raises(AlphaVantageValidationError):
        await client.fetch(TimeSeriesIntradayQuery("7min", "IBM"))
    assert transport.queries == []


@pytest.mark.asyncio
async def test_async_company_overview_and_etf_profile():
    client, _ = _client(json.dumps(OVERVIEW).encode(), json.dumps(ETF_PROFILE).encode())
    overview = await client.company_overview("IBM")
    profile = await client.etf_profile("QQQ")
    assert overview.name == "International Business Machines"
    assert profile.symbol == "QQQ"
    assert len(profile.holdings) == 2


@pytest.mark.asyncio
async def test_async_quotes_and_iter_rows():
    client, transport = _client(DAILY_ADJUSTED_CSV.encode(), DAILY_ADJUSTED_CSV.encode())
    quotes = await client.quotes("IBM")
    assert len(quotes) == 2
    assert transport.queries[0].get("outputsize") == "full"

    closes = [quote.close async for quote in client.iter_rows(transport.queries[0], Quote)]
    assert closes == [235.24, 234.5]


@pytest.mark.asyncio
async def test_async_close_is_idempotent():
    client, transport = _client()
    async with client:
        pass
    await client.close()
    assert transport.closed
    with pytest.raises(AlphaVantageClientClosedError, match="already closed"):
        await client.fetch(GlobalQuoteQuery("IBM"))
