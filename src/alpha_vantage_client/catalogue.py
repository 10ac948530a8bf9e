"""Introspection and by-name construction over the generated catalogue."""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .core.errors import AlphaVantageUnknownFunctionError
from .functions import QUERY_TYPES, ROW_TYPES
from .query.base import Query


@dataclass(slots=True, frozen=True)
class FunctionDescription:
    """Parameters and row type of one catalogue function."""

    name: str
    group: str
    summary: str
    required: tuple[str, ...]
    optional: tuple[str, ...]
    row_type: type | None

    @property
    def parameters(self) -> tuple[str, ...]:
        return self.required + self.optional


def function_names() -> list[str]:
    """Every catalogue function name in ascending order."""
    return sorted(QUERY_TYPES)


def query_type(name: str) -> type[Query]:
    try:
        return QUERY_TYPES[name]
    except KeyError:
        raise AlphaVantageUnknownFunctionError(name) from None


def row_type(name: str) -> type | None:
    query_type(name)
    return ROW_TYPES.get(name)


def describe(name: str) -> FunctionDescription:
    query_cls = query_type(name)
    return FunctionDescription(
        name=name,
        group=query_cls.__module__.rsplit(".", 1)[-1],
        summary=(inspect.getdoc(query_cls) or "").split("\n", 1)[0],
        required=tuple(query_cls.required),
        optional=tuple(query_cls.optional),
        row_type=ROW_TYPES.get(name),
    )


def new_query(name: str, params: Mapping[str, str | Sequence[str]] | None = None) -> Query:
    """Construct the query for ``name`` from raw parameter values."""
    return query_type(name).from_params(params or {})


__all__ = [
    "FunctionDescription",
    "function_names",
    "query_type",
    "row_type",
    "describe",
    "new_query",
]
