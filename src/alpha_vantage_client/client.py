"""Public client entrypoint."""

from __future__ import annotations

import io
from collections.abc import Iterator
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
from .core.cancellation import CancelToken
from .core.csv_decoder import ErrorHook, collect, iterate
from .core.error_detection import detect_service_error
from .core.errors import AlphaVantageClientClosedError
from .core.transport import SyncTransport
from .functions import EtfProfileQuery, OverviewQuery
from .functions.rows import CSVRowsMixin
from .models import CompanyOverview, ETFProfile, Quote, QuoteFunction
from .query.base import Query

RowT = TypeVar("RowT")


class AlphaVantageClient(CSVRowsMixin):
    """Public Alpha Vantage client.

    Instances are safe to share between threads; the pacer is the only shared
    mutable state. ``api_key`` overrides the configured key, and the
    configuration defaults to ``AlphaVantageClientConfig.from_env()``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: AlphaVantageClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = resolve_client_config(api_key=api_key, config=config)
        validate_client_config(self._config)
        self._transport = transport or SyncTransport(self._config)
        self._closed = False

    @property
    def config(self) -> AlphaVantageClientConfig:
        return self._config

    def stream(self, query: Query, *, cancel: CancelToken | None = None) -> io.RawIOBase:
        """Validate and send ``query``; the caller must close the returned body."""
        self._ensure_open()
        query.validate()
        body = self._transport.send(query, cancel=cancel)
        return detect_service_error(body)

    def fetch(self, query: Query, *, cancel: CancelToken | None = None) -> bytes:
        with self.stream(query, cancel=cancel) as body:
            return body.read()

    def fetch_json(self, query: Query, *, cancel: CancelToken | None = None) -> object:
        return decode_json_body(self.fetch(query, cancel=cancel))

    def collect_rows(
        self,
        query: Query,
        record_type: type[RowT],
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[RowT]:
        with self.stream(query, cancel=cancel) as body:
            return collect(body, record_type, tz=tz)

    def iter_rows(
        self,
        query: Query,
        record_type: type[RowT],
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
        on_error: ErrorHook | None = None,
    ) -> Iterator[RowT]:
        """Decode rows lazily; the request is sent on the first ``next()``."""
        with self.stream(query, cancel=cancel) as body:
            yield from iterate(body, record_type, tz=tz, on_error=on_error)

    def company_overview(
        self,
        symbol: str,
        *,
        cancel: CancelToken | None = None,
    ) -> CompanyOverview:
        return CompanyOverview.from_json(self.fetch_json(OverviewQuery(symbol), cancel=cancel))

    def etf_profile(self, symbol: str, *, cancel: CancelToken | None = None) -> ETFProfile:
        payload = self.fetch_json(EtfProfileQuery(symbol), cancel=cancel)
        return ETFProfile.from_json(payload, symbol=symbol)

    def quotes(
        self,
        symbol: str,
        function: QuoteFunction | str = QuoteFunction.TIME_SERIES_DAILY_ADJUSTED,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[Quote]:
        """Full quote history of ``symbol``, newest first as served."""
        return self.collect_rows(build_quote_query(symbol, function), Quote, tz=tz, cancel=cancel)

    def _ensure_open(self) -> None:
        if self._closed:
            raise AlphaVantageClientClosedError("AlphaVantageClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "AlphaVantageClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "AlphaVantageClient",
]
