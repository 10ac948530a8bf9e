"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote, urlsplit

import httpx

from ..config import AlphaVantageClientConfig
from ..query.base import API_KEY_PARAMETER, Query

QUERY_PATH = "/query"
MAX_ERROR_BODY_BYTES = 1024


def build_default_headers(config: AlphaVantageClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: AlphaVantageClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_query_string(query: Query, api_key: str | None) -> str:
    """Encode ``query``, appending the client key unless the query carries one."""
    encoded = query.encode()
    if api_key and API_KEY_PARAMETER not in query:
        encoded = f"{encoded}&{API_KEY_PARAMETER}={quote(api_key, safe='')}"
    return encoded


def compose_url(base_url: str, query_string: str) -> str:
    return f"{base_url.rstrip('/')}{QUERY_PATH}?{query_string}"


def describe_host(base_url: str) -> str:
    """Host part of ``base_url`` for log records."""
    return urlsplit(base_url).netloc or base_url


def format_status_error(http_status: int, excerpt: bytes) -> tuple[str, str]:
    body = excerpt[:MAX_ERROR_BODY_BYTES].decode("utf-8", errors="replace")
    return f"unexpected HTTP status {http_status}", body


__all__ = [
    "QUERY_PATH",
    "MAX_ERROR_BODY_BYTES",
    "build_default_headers",
    "build_default_timeout",
    "build_query_string",
    "compose_url",
    "describe_host",
    "format_status_error",
]
