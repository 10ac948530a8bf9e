"""Parameter validators shared by every generated query."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum

from ..core.errors import AlphaVantageValidationError

MA_TYPE_RANGE = range(0, 9)

Values = Mapping[str, Sequence[str]]


def _present(values: Values, name: str) -> list[str]:
    return [value for value in values.get(name, ()) if value != ""]


def validate_required(values: Values, name: str) -> None:
    if not any(value.strip() for value in values.get(name, ())):
        raise AlphaVantageValidationError(
            f'required field "{name}" is missing or empty',
            parameter=name,
        )


def validate_enum(values: Values, name: str, allowed: type[Enum] | Sequence[str]) -> None:
    if isinstance(allowed, type) and issubclass(allowed, Enum):
        permitted = [str(member.value) for member in allowed]
    else:
        permitted = list(allowed)
    for value in _present(values, name):
        if value not in permitted:
            raise AlphaVantageValidationError(
                f"{name} must be one of [{', '.join(permitted)}], got '{value}'",
                parameter=name,
            )


def validate_boolean(values: Values, name: str) -> None:
    for value in _present(values, name):
        if value not in ("true", "false"):
            raise AlphaVantageValidationError(
                f"{name} must be true or false, got '{value}'",
                parameter=name,
            )


def validate_ma_type(values: Values, name: str) -> None:
    for value in _present(values, name):
        if not (value.isdigit() and int(value) in MA_TYPE_RANGE):
            raise AlphaVantageValidationError(
                f"{name} must be an integer between 0 and 8, got '{value}'",
                parameter=name,
            )


def validate_max_items(values: Values, name: str, limit: int) -> None:
    for value in _present(values, name):
        items = [item for item in value.split(",") if item.strip()]
        if len(items) > limit:
            raise AlphaVantageValidationError(
                f"{name} accepts at most {limit} comma-separated values, got {len(items)}",
                parameter=name,
            )


__all__ = [
    "MA_TYPE_RANGE",
    "validate_required",
    "validate_enum",
    "validate_boolean",
    "validate_ma_type",
    "validate_max_items",
]
