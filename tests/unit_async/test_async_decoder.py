from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime, timezone

import pytest

from alpha_vantage_client.core.csv_decoder import acollect, aiterate
from alpha_vantage_client.core.errors import AlphaVantageDecodeError
from alpha_vantage_client.functions import ListingStatusRow
from alpha_vantage_client.models import Quote
from tests.shared.payloads import DAILY_ADJUSTED_CSV


async def _chunks(data: bytes, size: int) -> AsyncIterator[bytes]:
    for start in range(0, len(data), size):
        yield data[start : start + size]


@pytest.mark.asyncio
@pytest.mark.parametrize("size", [1, 3, 64, 4096])
async def test_async_decode_independent_of_chunking(size):
    quotes = await acollect(_chunks(DAILY_ADJUSTED_CSV.encode(), size), Quote)
    assert [quote.timestamp for quote in quotes] == [
        datetime(2025, 6, 20, tzinfo=timezone.utc),
        datetime(2025, 6, 19, tzinfo=timezone.utc),
    ]
    assert quotes[1].dividend_amount == 1.68


@pytest.mark.asyncio
async def test_async_decode_handles_multibyte_and_quoted_newlines():
    text = (
        "\ufeffsymbol,name,exchange\r\n"
        'NESN,"Nestlé\r\nHolding",SIX\r\n'
        "7203,トヨタ,TSE"
    )
    rows = await acollect(_chunks(text.encode("utf-8"), 2), ListingStatusRow)
    assert [(row.symbol, row.name, row.exchange) for row in rows] == [
        ("NESN", "Nestlé\r\nHolding", "SIX"),
        ("7203", "トヨタ", "TSE"),
    ]


@pytest.mark.asyncio
async def test_async_error_hook_skips_rows():
    text = "timestamp,close\r\n2025-06-20,1.0\r\n2025-06-19,bad\r\n2025-06-18,3.0\r\n"
    errors: list[AlphaVantageDecodeError] = []

    def hook(error: AlphaVantageDecodeError) -> bool:
        errors.append(error)
        return True

    rows = [row async for row in aiterate(_chunks(text.encode(), 5), Quote, on_error=hook)]
    assert [row.close for row in rows] == [1.0, 3.0]
    assert [(error.row, error.column_name) for error in errors] == [(2, "close")]


@pytest.mark.asyncio
async def test_async_empty_input_raises():
    with pytest.raises(AlphaVantageDecodeError, match="failed to read header row"):
        await acollect(_chunks(b"", 1), Quote)
