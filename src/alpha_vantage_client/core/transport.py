"""Sync HTTP transport with pacing and a single host fallback."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import AlphaVantageClientConfig
from ..query.base import FUNCTION_PARAMETER, Query
from .cancellation import CancelToken
from .errors import AlphaVantageHTTPStatusError, AlphaVantageTransportError
from .pacing import TokenBucketPacer
from .streams import BodyStream
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


class TransportClient(Protocol):
    def build_request(self, method: str, url: str) -> httpx.Request: ...
    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for the ``/query`` endpoint.

    Every call takes exactly one pacer token. A network failure against the
    primary host is retried once against ``fallback_base_url`` when configured;
    HTTP status errors are never retried.
    """

    def __init__(
        self,
        config: AlphaVantageClientConfig,
        *,
        client: TransportClient | None = None,
        pacer: TokenBucketPacer | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._pacer = pacer or TokenBucketPacer(
            config.pacing.requests_per_minute,
            burst=config.pacing.burst,
        )
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
            follow_redirects=True,
        )

    @property
    def pacer(self) -> TokenBucketPacer:
        return self._pacer

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def send(self, query: Query, *, cancel: CancelToken | None = None) -> BodyStream:
        """Send ``query`` and return the streaming body of a 2xx response."""
        if self._closed:
            raise AlphaVantageTransportError("transport is already closed")

        self._pacer.wait(cancel)
        function = query.get(FUNCTION_PARAMETER)
        query_string = build_query_string(query, self._config.api_key)
        hosts = [self._config.base_url]
        if self._config.fallback_base_url:
            hosts.append(self._config.fallback_base_url)

        for attempt, base_url in enumerate(hosts, start=1):
            if cancel is not None:
                cancel.raise_if_cancelled()
            host = describe_host(base_url)
            logger.debug("request start function=%s host=%s attempt=%s", function, host, attempt)
            request = self._client.build_request("GET", compose_url(base_url, query_string))
            try:
                response = self._client.send(request, stream=True)
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
            return self._accept(response, function=function, host=host, cancel=cancel)

        raise AlphaVantageTransportError("no host configured")

    def _accept(
        self,
        response: httpx.Response,
        *,
        function: str | None,
        host: str,
        cancel: CancelToken | None,
    ) -> BodyStream:
        http_status = response.status_code
        logger.debug(
            "response received function=%s host=%s http_status=%s",
            function,
            host,
            http_status,
        )
        if 200 <= http_status < 300:
            return BodyStream.from_response(response, cancel=cancel)

        try:
            excerpt = _read_excerpt(response)
        finally:
            response.close()
        logger.error(
            "request failed function=%s host=%s http_status=%s",
            function,
            host,
            http_status,
        )
        message, body = format_status_error(http_status, excerpt)
        raise AlphaVantageHTTPStatusError(message, http_status=http_status, body_excerpt=body)


def _read_excerpt(response: httpx.Response) -> bytes:
    collected = b""
    try:
        for chunk in response.iter_bytes():
            collected += chunk
            if len(collected) >= MAX_ERROR_BODY_BYTES:
                break
    except httpx.HTTPError as exc:
        logger.debug("error body unreadable error=%s", exc.__class__.__name__)
    return collected[:MAX_ERROR_BODY_BYTES]


__all__ = [
    "TransportClient",
    "SyncTransport",
]
