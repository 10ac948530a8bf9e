"""Async HTTP transport with pacing and a single host fallback."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import AlphaVantageClientConfig
from ..query.base import FUNCTION_PARAMETER, Query
from .async_pacing import AsyncTokenBucketPacer
from .errors import AlphaVantageHTTPStatusError, AlphaVantageTransportError
from .streams import AsyncBodyStream
from .transport_shared import (
    MAX_ERROR_BODY_BYTES,
    build_default_headers,
    build_default_timeout,
    build_query_string,
    compose_url,
    describe_host,
    format_status_error,
)

logger = logging.getLogger("alpha_vantage_client")


class AsyncTransportClient(Protocol):
    def build_request(self, method: str, url: str) -> httpx.Request: ...
    async def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the ``/query`` endpoint."""

    def __init__(
        self,
        config: AlphaVantageClientConfig,
        *,
        client: AsyncTransportClient | None = None,
        pacer: AsyncTokenBucketPacer | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._pacer = pacer or AsyncTokenBucketPacer(
            config.pacing.requests_per_minute,
            burst=config.pacing.burst,
        )
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
            follow_redirects=True,
        )

    @property
    def pacer(self) -> AsyncTokenBucketPacer:
        return self._pacer

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def send(self, query: Query) -> AsyncBodyStream:
        if self._closed:
            raise AlphaVantageTransportError("transport is already closed")

        await self._pacer.wait()
        function = query.get(FUNCTION_PARAMETER)
        query_string = build_query_string(query, self._config.api_key)
        hosts = [self._config.base_url]
        if self._config.fallback_base_url:
            hosts.append(self._config.fallback_base_url)

        for attempt, base_url in enumerate(hosts, start=1):
            host = describe_host(base_url)
            logger.debug("request start function=%s host=%s attempt=%s", function, host, attempt)
            request = self._client.build_request("GET", compose_url(base_url, query_string))
            try:
                response = await self._client.send(request, stream=True)
            except httpx.RequestError as exc:
                if attempt < len(hosts):
                    logger.warning(
                        "request network error; trying fallback function=%s host=%s error=%s",
                        function,
                        host,
                        exc.__class__.__name__,
                    )
                    continue
                logger.error(
                    "request network error; giving up function=%s host=%s attempt=%s error=%s",
                    function,
                    host,
                    attempt,
                    exc.__class__.__name__,
                )
                raise AlphaVantageTransportError(
                    "network/transport error",
                    cause="network",
                ) from exc
            return await self._accept(response, function=function, host=host)

        raise AlphaVantageTransportError("no host configured")

    async def _accept(
        self,
        response: httpx.Response,
        *,
        function: str | None,
        host: str,
    ) -> AsyncBodyStream:
        http_status = response.status_code
        logger.debug(
            "response received function=%s host=%s http_status=%s",
            function,
            host,
            http_status,
        )
        if 200 <= http_status < 300:
            return AsyncBodyStream.from_response(response)

        try:
            excerpt = await _read_excerpt(response)
        finally:
            await response.aclose()
        logger.error(
            "request failed function=%s host=%s http_status=%s",
            function,
            host,
            http_status,
        )
        message, body = format_status_error(http_status, excerpt)
        raise AlphaVantageHTTPStatusError(message, http_status=http_status, body_excerpt=body)


async def _read_excerpt(response: httpx.Response) -> bytes:
    collected = b""
    try:
        async for chunk in response.aiter_bytes():
            collected += chunk
            if len(collected) >= MAX_ERROR_BODY_BYTES:
                break
    except httpx.HTTPError as exc:
        logger.debug("error body unreadable error=%s", exc.__class__.__name__)
    return collected[:MAX_ERROR_BODY_BYTES]


__all__ = [
    "AsyncTransportClient",
    "AsyncTransport",
]
