"""Run one catalogue function end to end for the command line."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import BinaryIO

from .catalogue import query_type
from .client import AlphaVantageClient
from .core.cancellation import CancelToken
from .core.errors import AlphaVantageMissingParameterError
from .query.base import Query

logger = logging.getLogger("alpha_vantage_client")

COPY_CHUNK_SIZE = 64 * 1024


def build_query(function: str, params: Mapping[str, str | Sequence[str]]) -> Query:
    """Construct and validate the query for ``function`` from flag values."""
    query_cls = query_type(function)
    missing = [name for name in query_cls.required if not _has_value(params.get(name))]
    if missing:
        flags = ", ".join(f'"--{name}"' for name in missing)
        raise AlphaVantageMissingParameterError(
            f"required flag(s) {flags} not set",
            parameter=missing[0],
        )
    query = query_cls.from_params(params)
    query.validate()
    return query


def execute(
    client: AlphaVantageClient,
    function: str,
    params: Mapping[str, str | Sequence[str]],
    sink: BinaryIO,
    *,
    cancel: CancelToken | None = None,
) -> int:
    """Copy the response body of ``function`` into ``sink``; returns the byte count."""
    query = build_query(function, params)
    with client.stream(query, cancel=cancel) as body:
        written = copy_body(body, sink)
    logger.debug("dispatch complete function=%s bytes=%s", function, written)
    return written


def copy_body(body: BinaryIO, sink: BinaryIO) -> int:
    written = 0
    while True:
        chunk = body.read(COPY_CHUNK_SIZE)
        if not chunk:
            return written
        sink.write(chunk)
        written += len(chunk)


def _has_value(raw: str | Sequence[str] | None) -> bool:
    if raw is None:
        return False
    if isinstance(raw, str):
        return raw.strip() != ""
    return any(item.strip() for item in raw)


__all__ = [
    "COPY_CHUNK_SIZE",
    "build_query",
    "execute",
    "copy_body",
]
