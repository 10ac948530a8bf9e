"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import tzinfo
from types import TracebackType
from typing import TypeVar

from .client_shared import (
    build_quote_query,
    decode_json_body,
    resolve_client_config,
    validate_client_config,
)
from .config import AlphaVantageClientConfig
from .core.async_transport import AsyncTransport
from .core.csv_decoder import ErrorHook, acollect, aiterate
from .core.error_detection import adetect_service_error
from .core.errors import AlphaVantageClientClosedError
from .core.streams import AsyncBodyStream
from .functions import EtfProfileQuery, OverviewQuery
from .functions.rows import AsyncCSVRowsMixin
from .models import CompanyOverview, ETFProfile, Quote, QuoteFunction
from .query.base import Query

RowT = TypeVar("RowT")


class AsyncAlphaVantageClient(AsyncCSVRowsMixin):
    """Public async Alpha Vantage client; cancel work by cancelling the task."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: AlphaVantageClientConfig | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = resolve_client_config(api_key=api_key, config=config)
        validate_client_config(self._config)
        self._transport = transport or AsyncTransport(self._config)
        self._closed = False

    @property
    def config(self) -> AlphaVantageClientConfig:
        return self._config

    async def stream(self, query: Query) -> AsyncBodyStream:
        self._ensure_open()
        query.validate()
        body = await self._transport.send(query)
        return await adetect_service_error(body)

    async def fetch(self, query: Query) -> bytes:
        async with await self.stream(query) as body:
            return await body.read()

    async def fetch_json(self, query: Query) -> object:
        return decode_json_body(await self.fetch(query))

    async def collect_rows(
        self,
        query: Query,
        record_type: type[RowT],
        *,
        tz: tzinfo | None = None,
    ) -> list[RowT]:
        async with await self.stream(query) as body:
            return await acollect(body, record_type, tz=tz)

    async def iter_rows(
        self,
        query: Query,
        record_type: type[RowT],
        *,
        tz: tzinfo | None = None,
        on_error: ErrorHook | None = None,
    ) -> AsyncIterator[RowT]:
        async with await self.stream(query) as body:
            async for record in aiterate(body, record_type, tz=tz, on_error=on_error):
                yield record

    async def company_overview(self, symbol: str) -> CompanyOverview:
        return CompanyOverview.from_json(await self.fetch_json(OverviewQuery(symbol)))

    async def etf_profile(self, symbol: str) -> ETFProfile:
        payload = await self.fetch_json(EtfProfileQuery(symbol))
        return ETFProfile.from_json(payload, symbol=symbol)

    async def quotes(
        self,
        symbol: str,
        function: QuoteFunction | str = QuoteFunction.TIME_SERIES_DAILY_ADJUSTED,
        *,
        tz: tzinfo | None = None,
    ) -> list[Quote]:
        return await self.collect_rows(build_quote_query(symbol, function), Quote, tz=tz)

    def _ensure_open(self) -> None:
        if self._closed:
            raise AlphaVantageClientClosedError("AsyncAlphaVantageClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncAlphaVantageClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncAlphaVantageClient",
]
