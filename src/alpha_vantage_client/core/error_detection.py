"""Detect the service's JSON error envelope without consuming the body."""

from __future__ import annotations

import json
import logging

from .errors import AlphaVantageServiceError, classify_service_payload
from .streams import AsyncBodyStream, PrefixedStream

logger = logging.getLogger("alpha_vantage_client")

DEFAULT_PREFIX_SIZE = 4096
_BOM = b"\xef\xbb\xbf"


def detect_service_error(stream, *, prefix_size: int = DEFAULT_PREFIX_SIZE) -> PrefixedStream:
    """Peek at up to ``prefix_size`` bytes of ``stream``.

    Raises ``AlphaVantageServiceError`` (closing ``stream``) when the prefix is a
    complete error envelope. Otherwise returns a stream that yields exactly the
    bytes ``stream`` would have produced; closing it closes ``stream``.
    """
    try:
        prefix = _read_prefix(stream, prefix_size)
    except BaseException:
        stream.close()
        raise
    error = _classify_prefix(prefix)
    if error is not None:
        stream.close()
        raise error
    return PrefixedStream(prefix, stream)


async def adetect_service_error(
    stream: AsyncBodyStream,
    *,
    prefix_size: int = DEFAULT_PREFIX_SIZE,
) -> AsyncBodyStream:
    """Async counterpart of ``detect_service_error``."""
    try:
        prefix = await _aread_prefix(stream, prefix_size)
    except BaseException:
        await stream.aclose()
        raise
    error = _classify_prefix(prefix)
    if error is not None:
        await stream.aclose()
        raise error
    return AsyncBodyStream(stream.__aiter__(), on_close=stream.aclose, prefix=prefix)


def _read_prefix(stream, limit: int) -> bytes:
    parts: list[bytes] = []
    remaining = limit
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


async def _aread_prefix(stream: AsyncBodyStream, limit: int) -> bytes:
    parts: list[bytes] = []
    remaining = limit
    while remaining > 0:
        chunk = await stream.read(remaining)
        if not chunk:
            break
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


def _classify_prefix(prefix: bytes) -> AlphaVantageServiceError | None:
    text = prefix[len(_BOM) :] if prefix.startswith(_BOM) else prefix
    if not text.lstrip().startswith(b"{"):
        return None
    try:
        payload = json.loads(text)
    except ValueError:
        # Truncated or non-JSON prefix: an ordinary (large) data response.
        return None
    error = classify_service_payload(payload)
    if error is not None:
        logger.warning("service reported error key=%s", error.key)
    return error


__all__ = [
    "DEFAULT_PREFIX_SIZE",
    "detect_service_error",
    "adetect_service_error",
]
