"""Map CSV responses onto record dataclasses.

Record types are plain dataclasses whose fields name their column through
field metadata::

    @dataclass(slots=True)
    class Bar:
        timestamp: datetime | None = csv_column("timestamp", None)
        close: float = csv_column("close", 0.0)

Supported field types are ``str``, ``int``, ``float`` and ``datetime``
(optionally ``| None``). Columns missing from the header keep the field default;
header columns without a field are ignored.
"""

from __future__ import annotations

import codecs
import csv
import dataclasses
import io
import re
import threading
import types
import typing
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import Any, TypeVar

from .errors import AlphaVantageDecodeError

COLUMN_METADATA = "column_name"
ALIASES_METADATA = "column_aliases"
TIME_LAYOUT_METADATA = "time_layout"
DEFAULT_TIME_LAYOUT = "%Y-%m-%d"
NULL_TIMESTAMPS = frozenset({"", "null", "None"})

RecordT = TypeVar("RecordT")
ErrorHook = Callable[[AlphaVantageDecodeError], bool]

_INTEGER = re.compile(r"[+-]?\d+")
_BOM = "\ufeff"


class FieldKind(Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    TIME = "time"


_KIND_BY_TYPE: dict[object, FieldKind] = {
    str: FieldKind.STRING,
    int: FieldKind.INT,
    float: FieldKind.FLOAT,
    datetime: FieldKind.TIME,
}
_KIND_BY_NAME = {
    "str": FieldKind.STRING,
    "int": FieldKind.INT,
    "float": FieldKind.FLOAT,
    "datetime": FieldKind.TIME,
    "datetime|None": FieldKind.TIME,
    "Optional[datetime]": FieldKind.TIME,
}
_ZERO_VALUES: dict[FieldKind, object] = {
    FieldKind.STRING: "",
    FieldKind.INT: 0,
    FieldKind.FLOAT: 0.0,
    FieldKind.TIME: None,
}


def csv_column(
    name: str,
    default: Any,
    *,
    time_layout: str | None = None,
    aliases: tuple[str, ...] = (),
) -> Any:
    """Declare a dataclass field bound to the CSV column ``name``."""
    metadata: dict[str, object] = {COLUMN_METADATA: name}
    if time_layout is not None:
        metadata[TIME_LAYOUT_METADATA] = time_layout
    if aliases:
        metadata[ALIASES_METADATA] = tuple(aliases)
    return dataclasses.field(default=default, metadata=metadata)


@dataclasses.dataclass(slots=True, frozen=True)
class SchemaField:
    attribute: str
    column: str
    kind: FieldKind
    time_layout: str = DEFAULT_TIME_LAYOUT
    aliases: tuple[str, ...] = ()
    has_default: bool = True

    @property
    def names(self) -> tuple[str, ...]:
        return (self.column, *self.aliases)


_schema_cache: dict[type, tuple[SchemaField, ...]] = {}
_schema_lock = threading.Lock()


def record_schema(record_type: type) -> tuple[SchemaField, ...]:
    """Derive (once per type) the column bindings of ``record_type``."""
    with _schema_lock:
        cached = _schema_cache.get(record_type)
        if cached is None:
            cached = _derive_schema(record_type)
            _schema_cache[record_type] = cached
        return cached


def _derive_schema(record_type: type) -> tuple[SchemaField, ...]:
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise TypeError(f"record type must be a dataclass, got {record_type!r}")
    try:
        hints = typing.get_type_hints(record_type)
    except (NameError, TypeError):
        hints = {}

    schema: list[SchemaField] = []
    for item in dataclasses.fields(record_type):
        has_default = (
            item.default is not dataclasses.MISSING
            or item.default_factory is not dataclasses.MISSING
        )
        column = item.metadata.get(COLUMN_METADATA)
        if column is None:
            if item.init and not has_default:
                raise TypeError(
                    f"{record_type.__name__}.{item.name} has no column and no default"
                )
            continue
        schema.append(
            SchemaField(
                attribute=item.name,
                column=column,
                kind=_kind_of(hints.get(item.name, item.type), record_type, item.name),
                time_layout=item.metadata.get(TIME_LAYOUT_METADATA, DEFAULT_TIME_LAYOUT),
                aliases=tuple(item.metadata.get(ALIASES_METADATA, ())),
                has_default=has_default,
            )
        )
    return tuple(schema)


def _kind_of(annotation: object, record_type: type, name: str) -> FieldKind:
    if isinstance(annotation, str):
        kind = _KIND_BY_NAME.get(annotation.replace(" ", ""))
        if kind is not None:
            return kind
    elif annotation in _KIND_BY_TYPE:
        return _KIND_BY_TYPE[annotation]
    elif typing.get_origin(annotation) in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1 and members[0] in _KIND_BY_TYPE:
            return _KIND_BY_TYPE[members[0]]
    raise TypeError(f"unsupported column type {annotation!r} for {record_type.__name__}.{name}")


class _RecordBuilder:
    """Converts raw CSV rows into records once the header is known."""

    def __init__(self, record_type: type, header: list[str], zone: tzinfo) -> None:
        self._record_type = record_type
        self._header = header
        self._zone = zone
        schema = record_schema(record_type)
        by_name = {name: item for item in schema for name in item.names}
        self._bindings = [
            (index, by_name[name]) for index, name in enumerate(header) if name in by_name
        ]
        bound = {item.attribute for _, item in self._bindings}
        self._fallbacks = {
            item.attribute: _ZERO_VALUES[item.kind]
            for item in schema
            if not item.has_default and item.attribute not in bound
        }

    def build(self, row: list[str], row_number: int) -> Any:
        if len(row) != len(self._header):
            raise AlphaVantageDecodeError(
                f"row {row_number}: expected {len(self._header)} fields, got {len(row)}",
                row=row_number,
            )
        values: dict[str, object] = dict(self._fallbacks)
        for index, item in self._bindings:
            raw = row[index]
            try:
                if item.kind is FieldKind.TIME:
                    if raw in NULL_TIMESTAMPS:
                        if not item.has_default:
                            values[item.attribute] = None
                        continue
                    values[item.attribute] = self._parse_time(raw, item.time_layout)
                else:
                    values[item.attribute] = _convert(raw, item.kind)
            except ValueError as exc:
                raise AlphaVantageDecodeError(
                    f'row {row_number} column {index} ("{self._header[index]}"): {exc}',
                    row=row_number,
                    column=index,
                    column_name=self._header[index],
                ) from exc
        return self._record_type(**values)

    def _parse_time(self, raw: str, layout: str) -> datetime:
        parsed = datetime.strptime(raw, layout)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self._zone)
        return parsed


def _convert(raw: str, kind: FieldKind) -> object:
    if kind is FieldKind.STRING:
        return raw
    if kind is FieldKind.INT:
        if not _INTEGER.fullmatch(raw):
            raise ValueError(f"invalid integer {raw!r}")
        return int(raw)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"invalid float {raw!r}") from None


def _normalize_header(row: list[str]) -> list[str]:
    if row and row[0].startswith(_BOM):
        return [row[0][len(_BOM) :], *row[1:]]
    return row


def _report(error: AlphaVantageDecodeError, on_error: ErrorHook | None) -> None:
    if on_error is None:
        raise error
    on_error(error)


@contextmanager
def _text_lines(source) -> Iterator[Iterable[str]]:
    if isinstance(source, str):
        yield io.StringIO(source, newline="")
        return
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    if isinstance(source, io.RawIOBase):
        buffered = io.BufferedReader(source)
        text = io.TextIOWrapper(buffered, encoding="utf-8", newline="")
        try:
            yield text
        finally:
            text.detach()
            buffered.detach()
        return
    if isinstance(source, io.BufferedIOBase):
        text = io.TextIOWrapper(source, encoding="utf-8", newline="")
        try:
            yield text
        finally:
            text.detach()
        return
    yield source


def iterate(
    source,
    record_type: type[RecordT],
    *,
    tz: tzinfo | None = None,
    on_error: ErrorHook | None = None,
) -> Iterator[RecordT]:
    """Lazily decode ``source`` row by row.

    ``source`` may be a binary or text stream, ``bytes``/``str`` or an iterable
    of text lines. Per-row failures go to ``on_error``; returning ``False`` ends
    iteration. Without a hook the first failure is raised. A header failure
    always ends iteration.
    """
    zone = tz or timezone.utc
    record_schema(record_type)
    with _text_lines(source) as lines:
        reader = csv.reader(lines, skipinitialspace=True)
        try:
            header = _normalize_header(next(reader))
        except StopIteration:
            _report(AlphaVantageDecodeError("failed to read header row: empty input"), on_error)
            return
        except (csv.Error, UnicodeDecodeError) as exc:
            _report(AlphaVantageDecodeError(f"failed to read header row: {exc}"), on_error)
            return

        builder = _RecordBuilder(record_type, header, zone)
        row_number = 0
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as exc:
                _report(
                    AlphaVantageDecodeError(f"row {row_number + 1}: {exc}", row=row_number + 1),
                    on_error,
                )
                return
            if not row:
                continue
            row_number += 1
            try:
                record = builder.build(row, row_number)
            except AlphaVantageDecodeError as error:
                if on_error is None:
                    raise
                if not on_error(error):
                    return
                continue
            yield record


def collect(
    source,
    record_type: type[RecordT],
    *,
    tz: tzinfo | None = None,
) -> list[RecordT]:
    """Decode every row of ``source``; the first failure is raised."""
    return list(iterate(source, record_type, tz=tz))


async def _async_rows(chunks: AsyncIterable[bytes]) -> AsyncIterator[list[str]]:
    decoder = codecs.getincrementaldecoder("utf-8")()
    buffer = ""
    record = ""
    async for chunk in chunks:
        buffer += decoder.decode(chunk)
        *lines, buffer = buffer.split("\n")
        for line in lines:
            record += line + "\n"
            # An odd number of quotes means a quoted field spans lines.
            if record.count('"') % 2 == 0:
                yield _parse_record(record)
                record = ""
    record += buffer + decoder.decode(b"", final=True)
    if record:
        yield _parse_record(record)


def _parse_record(text: str) -> list[str]:
    for row in csv.reader([text], skipinitialspace=True):
        return row
    return []


async def aiterate(
    source: AsyncIterable[bytes],
    record_type: type[RecordT],
    *,
    tz: tzinfo | None = None,
    on_error: ErrorHook | None = None,
) -> AsyncIterator[RecordT]:
    """Async counterpart of ``iterate`` over a byte-chunk stream."""
    zone = tz or timezone.utc
    record_schema(record_type)
    rows = _async_rows(source).__aiter__()
    try:
        header = _normalize_header(await rows.__anext__())
    except StopAsyncIteration:
        _report(AlphaVantageDecodeError("failed to read header row: empty input"), on_error)
        return
    except (csv.Error, UnicodeDecodeError) as exc:
        _report(AlphaVantageDecodeError(f"failed to read header row: {exc}"), on_error)
        return

    builder = _RecordBuilder(record_type, header, zone)
    row_number = 0
    while True:
        try:
            row = await rows.__anext__()
        except StopAsyncIteration:
            return
        except (csv.Error, UnicodeDecodeError) as exc:
            _report(
                AlphaVantageDecodeError(f"row {row_number + 1}: {exc}", row=row_number + 1),
                on_error,
            )
            return
        if not row:
            continue
        row_number += 1
        try:
            record = builder.build(row, row_number)
        except AlphaVantageDecodeError as error:
            if on_error is None:
                raise
            if not on_error(error):
                return
            continue
        yield record


async def acollect(
    source: AsyncIterable[bytes],
    record_type: type[RecordT],
    *,
    tz: tzinfo | None = None,
) -> list[RecordT]:
    return [record async for record in aiterate(source, record_type, tz=tz)]


__all__ = [
    "COLUMN_METADATA",
    "ALIASES_METADATA",
    "TIME_LAYOUT_METADATA",
    "DEFAULT_TIME_LAYOUT",
    "NULL_TIMESTAMPS",
    "ErrorHook",
    "FieldKind",
    "SchemaField",
    "csv_column",
    "record_schema",
    "iterate",
    "collect",
    "aiterate",
    "acollect",
]
