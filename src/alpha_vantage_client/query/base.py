"""Mutable multimap queries shared by every generated function type."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import ClassVar, TypeVar
from urllib.parse import urlencode

from .validators import (
    validate_boolean,
    validate_enum,
    validate_ma_type,
    validate_max_items,
    validate_required,
)

API_KEY_PARAMETER = "apikey"
FUNCTION_PARAMETER = "function"
_REDACTED = "***"

QueryT = TypeVar("QueryT", bound="Query")


def format_parameter_value(value: object) -> str:
    """Render a setter argument the way the service expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # Shortest round-trip digits, never in exponent notation.
        return format(Decimal(repr(value)), "f")
    if isinstance(value, str):
        return value
    raise TypeError(f"unsupported parameter value type: {type(value).__name__}")


class Query:
    """A single function call: ``function`` plus its parameters.

    Subclasses describe their function through class attributes; ``validate``
    is driven entirely by those tables. Unknown parameters are carried through
    unchanged so callers can use options the catalogue does not know yet.
    """

    function: ClassVar[str] = ""
    required: ClassVar[tuple[str, ...]] = ()
    optional: ClassVar[tuple[str, ...]] = ()
    enums: ClassVar[Mapping[str, type[Enum]]] = {}
    booleans: ClassVar[tuple[str, ...]] = ()
    ma_types: ClassVar[tuple[str, ...]] = ()
    max_items: ClassVar[Mapping[str, int]] = {}

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {FUNCTION_PARAMETER: [type(self).function]}

    @classmethod
    def from_params(
        cls: type[QueryT],
        params: Mapping[str, str | Sequence[str]],
    ) -> QueryT:
        """Build a query by parameter name without calling the typed constructor."""
        query = cls.__new__(cls)
        Query.__init__(query)
        for key, raw in params.items():
            if key == FUNCTION_PARAMETER:
                continue
            if isinstance(raw, str):
                query._values[key] = [raw]
            else:
                query._values[key] = [str(item) for item in raw]
        return query

    def _put(self: QueryT, key: str, value: object) -> QueryT:
        self._values[key] = [format_parameter_value(value)]
        return self

    def _put_time(self: QueryT, key: str, value: date, layout: str) -> QueryT:
        self._values[key] = [value.strftime(layout)]
        return self

    def api_key(self: QueryT, value: str) -> QueryT:
        return self._put(API_KEY_PARAMETER, value)

    def get(self, key: str) -> str | None:
        values = self._values.get(key)
        return values[0] if values else None

    def values(self) -> dict[str, list[str]]:
        return copy.deepcopy(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return type(self) is type(other) and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        shown = {
            key: ([_REDACTED] if key == API_KEY_PARAMETER else list(values))
            for key, values in sorted(self._values.items())
        }
        return f"{type(self).__name__}({shown!r})"

    def validate(self) -> None:
        """Raise ``AlphaVantageValidationError`` on the first violated rule."""
        for name in self.required:
            validate_required(self._values, name)
        for name, enum_type in self.enums.items():
            validate_enum(self._values, name, enum_type)
        for name in self.booleans:
            validate_boolean(self._values, name)
        for name in self.ma_types:
            validate_ma_type(self._values, name)
        for name, limit in self.max_items.items():
            validate_max_items(self._values, name, limit)

    def encode(self) -> str:
        """URL-encode in ascending key order; empty values are kept as ``key=``."""
        pairs = [(key, value) for key in sorted(self._values) for value in self._values[key]]
        return urlencode(pairs)


__all__ = [
    "API_KEY_PARAMETER",
    "FUNCTION_PARAMETER",
    "format_parameter_value",
    "Query",
]
