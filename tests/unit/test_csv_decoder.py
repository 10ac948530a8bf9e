from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest

from alpha_vantage_client.core.csv_decoder import (
    FieldKind,
    collect,
    csv_column,
    iterate,
    record_schema,
)
from alpha_vantage_client.core.errors import AlphaVantageDecodeError
from alpha_vantage_client.core.streams import BodyStream
from alpha_vantage_client.models import Quote
from tests.shared.payloads import DAILY_ADJUSTED_CSV, MONTHLY_ADJUSTED_CSV


@dataclass(slots=True)
class Bar:
    timestamp: datetime | None = csv_column("timestamp", None, time_layout="%Y-%m-%d %H:%M:%S")
    close: float = csv_column("close", 0.0)
    volume: int = csv_column("volume", 0)
    note: str = csv_column("note", "")


@dataclass(slots=True)
class Strict:
    name: str = csv_column("name", "")
    when: datetime | None = csv_column("when", datetime(1970, 1, 1, tzinfo=timezone.utc))


@dataclass
class Unsupported:
    amount: complex = csv_column("amount", 0j)


class NotADataclass:
    pass


BARS = (
    "timestamp,close,volume,extra\r\n"
    "2025-06-20 16:00:00,235.24,3461244,ignored\r\n"
    "2025-06-20 15:55:00,235.10,120000,ignored\r\n"
)


def test_schema_binds_declared_columns():
    schema = record_schema(Bar)
    assert [(item.attribute, item.column, item.kind) for item in schema] == [
        ("timestamp", "timestamp", FieldKind.TIME),
        ("close", "close", FieldKind.FLOAT),
        ("volume", "volume", FieldKind.INT),
        ("note", "note", FieldKind.STRING),
    ]
    assert record_schema(Bar) is schema


@pytest.mark.parametrize("record_type", [Unsupported, NotADataclass])
def test_schema_rejects_unsupported_types(record_type):
    with pytest.raises(TypeError):
        record_schema(record_type)


def test_collect_maps_columns_and_keeps_defaults():
    bars = collect(BARS, Bar)
    assert bars[0] == Bar(
        timestamp=datetime(2025, 6, 20, 16, 0, tzinfo=timezone.utc),
        close=235.24,
        volume=3461244,
        note="",
    )
    assert bars[1].volume == 120000


def test_timestamps_use_requested_zone():
    eastern = timezone(timedelta(hours=-4))
    (first, _) = collect(BARS, Bar, tz=eastern)
    assert first.timestamp.tzinfo is eastern


@pytest.mark.parametrize(
    "source",
    [
        BARS,
        BARS.encode("utf-8"),
        io.BytesIO(BARS.encode("utf-8")),
        BodyStream(iter([BARS.encode("utf-8")[i : i + 5] for i in range(0, len(BARS), 5)])),
        BARS.splitlines(keepends=True),
    ],
    ids=["str", "bytes", "buffered", "raw", "lines"],
)
def test_accepts_every_source_kind(source):
    assert [bar.volume for bar in collect(source, Bar)] == [3461244, 120000]


def test_binary_source_stays_open_after_decoding():
    source = io.BytesIO(BARS.encode("utf-8"))
    collect(source, Bar)
    assert not source.closed


def test_byte_order_mark_and_blank_lines_are_ignored():
    text = "\ufefftimestamp,close,volume\r\n\r\n2025-06-20 16:00:00,1.5,2\r\n\r\n"
    assert collect(text, Bar) == [
        Bar(timestamp=datetime(2025, 6, 20, 16, tzinfo=timezone.utc), close=1.5, volume=2)
    ]


def test_quoted_fields_with_separators():
    text = 'timestamp,close,volume,note\r\n2025-06-20 16:00:00,1,2,"split, 2:1"\r\n'
    assert collect(text, Bar)[0].note == "split, 2:1"


def test_null_timestamp_keeps_field_default():
    text = "name,when\r\nx,None\r\ny,\r\n"
    records = collect(text, Strict)
    assert [record.when for record in records] == [datetime(1970, 1, 1, tzinfo=timezone.utc)] * 2


def test_width_mismatch_reports_row():
    text = "timestamp,close,volume\r\n2025-06-20 16:00:00,1.0\r\n"
    with pytest.raises(AlphaVantageDecodeError, match="row 1: expected 3 fields, got 2") as exc_info:
        collect(text, Bar)
    assert exc_info.value.row == 1


def test_conversion_error_reports_row_and_column():
    text = "timestamp,close,volume\r\n2025-06-20 16:00:00,1.0,2\r\n2025-06-20 16:01:00,abc,3\r\n"
    with pytest.raises(AlphaVantageDecodeError) as exc_info:
        collect(text, Bar)
    error = exc_info.value
    assert (error.row, error.column, error.column_name) == (2, 1, "close")
    assert "invalid float 'abc'" in str(error)


def test_integer_columns_reject_fractions():
    with pytest.raises(AlphaVantageDecodeError, match="invalid integer '2.5'"):
        collect("volume\r\n2.5\r\n", Bar)


def test_error_hook_can_skip_rows():
    text = "close,volume\r\n1.0,1\r\nbad,2\r\n3.0,3\r\n"
    seen: list[AlphaVantageDecodeError] = []

    def skip(error: AlphaVantageDecodeError) -> bool:
        seen.append(error)
        return True

    records = list(iterate(text, Bar, on_error=skip))
    assert [record.volume for record in records] == [1, 3]
    assert [error.row for error in seen] == [2]


def test_error_hook_can_stop_iteration():
    text = "close,volume\r\n1.0,1\r\nbad,2\r\n3.0,3\r\n"
    records = list(iterate(text, Bar, on_error=lambda error: False))
    assert [record.volume for record in records] == [1]


def test_empty_input_reports_missing_header():
    with pytest.raises(AlphaVantageDecodeError, match="failed to read header row"):
        collect("", Bar)
    errors: list[AlphaVantageDecodeError] = []
    assert list(iterate("", Bar, on_error=errors.append)) == []
    assert len(errors) == 1


def test_iteration_is_lazy():
    rows = iterate(BARS + "not-a-time,1,1,x\r\n", Bar)
    assert next(rows).volume == 3461244
    assert next(rows).volume == 120000
    with pytest.raises(AlphaVantageDecodeError):
        next(rows)


def test_quote_reads_daily_adjusted_columns():
    quotes = collect(DAILY_ADJUSTED_CSV, Quote)
    assert quotes[1] == Quote(
        timestamp=datetime(2025, 6, 19, tzinfo=timezone.utc),
        open=230.0,
        high=234.1,
        low=229.5,
        close=234.5,
        adjusted_close=234.5,
        volume=2871000.0,
        dividend_amount=1.68,
        split_coefficient=1.0,
    )


def test_quote_accepts_spaced_monthly_headers():
    (quote,) = collect(MONTHLY_ADJUSTED_CSV, Quote)
    assert quote.adjusted_close == 259.06
    assert quote.dividend_amount == 1.68
    assert quote.split_coefficient == 0.0


def test_invalid_utf8_is_a_decode_error():
    with pytest.raises(AlphaVantageDecodeError):
        collect(io.BytesIO(b"close,volume\r\n\xff\xfe,1\r\n"), Bar)


def test_invalid_utf8_in_a_later_chunk_goes_to_the_hook():
    body = BodyStream(iter([b"close,volume\r\n1.0,1\r\n", b"\xff\xfe,2\r\n3.0,3\r\n"]))
    seen: list[AlphaVantageDecodeError] = []

    def keep_going(error: AlphaVantageDecodeError) -> bool:
        seen.append(error)
        return True

    records = list(iterate(body, Bar, on_error=keep_going))
    assert [record.volume for record in records] == [1]
    assert [error.row for error in seen] == [2]
