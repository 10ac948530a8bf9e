from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from alpha_vantage_client import AlphaVantageClient, AsyncAlphaVantageClient
from alpha_vantage_client.core.async_transport import AsyncTransport
from alpha_vantage_client.core.errors import AlphaVantageServiceError
from alpha_vantage_client.core.transport import SyncTransport
from alpha_vantage_client.functions import (
    FxDailyQuery,
    GlobalQuoteQuery,
    ListingStatusQuery,
    SimpleMovingAverageQuery,
)
from tests.shared.replay import ExampleReplayHandler
from tests.shared.transport import build_config


def _build_clients(index_path: Path) -> tuple[AlphaVantageClient, AsyncAlphaVantageClient]:
    config = build_config()
    sync_http = httpx.Client(transport=httpx.MockTransport(ExampleReplayHandler(index_path)))
    async_handler = ExampleReplayHandler(index_path)
    async_http = httpx.AsyncClient(transport=httpx.MockTransport(async_handler.handle_async))
    return (
        AlphaVantageClient(config=config, transport=SyncTransport(config, client=sync_http)),
        AsyncAlphaVantageClient(config=config, transport=AsyncTransport(config, client=async_http)),
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "scenario",
    ["global_quote", "quotes", "listing_status", "sma", "fx_daily", "overview"],
)
async def test_sync_async_equivalence_with_recorded_examples(example_index_path: Path, scenario: str):
    sync_client, async_client = _build_clients(example_index_path)
    try:
        if scenario == "global_quote":
            expected = sync_client.global_quote_rows(GlobalQuoteQuery("IBM"))
            actual = await async_client.global_quote_rows(GlobalQuoteQuery("IBM"))
        elif scenario == "quotes":
            expected = sync_client.quotes("IBM")
            actual = await async_client.quotes("IBM")
        elif scenario == "listing_status":
            expected = sync_client.listing_status_rows(ListingStatusQuery())
            actual = await async_client.listing_status_rows(ListingStatusQuery())
        elif scenario == "sma":
            query = SimpleMovingAverageQuery("weekly", "open", "IBM", 10)
            expected = sync_client.sma_rows(query)
            actual = await async_client.sma_rows(query)
        elif scenario == "fx_daily":
            expected = sync_client.fx_daily_rows(FxDailyQuery("EUR", "USD"))
            actual = await async_client.fx_daily_rows(FxDailyQuery("EUR", "USD"))
        else:
            expected = sync_client.company_overview("IBM")
            actual = await async_client.company_overview("IBM")
    finally:
        sync_client.close()
        await async_client.close()

    assert actual == expected
    assert actual


@pytest.mark.asyncio
async def test_sync_async_error_equivalence(example_index_path: Path):
    sync_client, async_client = _build_clients(example_index_path)
    with pytest.raises(AlphaVantageServiceError) as sync_error:
        sync_client.fetch(GlobalQuoteQuery("NOPE"))
    with pytest.raises(AlphaVantageServiceError) as async_error:
        await async_client.fetch(GlobalQuoteQuery("NOPE"))
    assert str(sync_error.value) == str(async_error.value)
    assert sync_error.value.key == async_error.value.key == "Error Message"
    sync_client.close()
    await async_client.close()
