"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

import dataclasses
import json

from .config import AlphaVantageClientConfig
from .core.errors import AlphaVantageDecodeError, AlphaVantageValidationError
from .functions import QUERY_TYPES
from .models import QuoteFunction
from .query.base import Query


def resolve_client_config(
    *,
    api_key: str | None,
    config: AlphaVantageClientConfig | None,
) -> AlphaVantageClientConfig:
    resolved = config if config is not None else AlphaVantageClientConfig.from_env()
    if api_key is not None:
        resolved = dataclasses.replace(resolved, api_key=api_key)
    return resolved


def validate_client_config(config: AlphaVantageClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise AlphaVantageValidationError(str(exc)) from exc


def build_quote_query(symbol: str, function: QuoteFunction | str) -> Query:
    """CSV query for the full history of ``symbol`` in one of the quote series."""
    try:
        resolved = QuoteFunction(function)
    except ValueError as exc:
        raise AlphaVantageValidationError(
            f"unsupported quote function: {function}",
            parameter="function",
        ) from exc
    query = QUERY_TYPES[resolved.value](symbol).data_type_csv()
    if "outputsize" in query.optional:
        query = query.output_size_full()
    return query


def decode_json_body(raw: bytes) -> object:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise AlphaVantageDecodeError("response body is not valid JSON") from exc


__all__ = [
    "resolve_client_config",
    "validate_client_config",
    "build_quote_query",
    "decode_json_body",
]
