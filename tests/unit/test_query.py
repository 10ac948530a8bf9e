from __future__ import annotations

from datetime import date, datetime

import pytest

from alpha_vantage_client.core.errors import AlphaVantageValidationError
from alpha_vantage_client.functions import (
    AbsolutePriceOscillatorQuery,
    GlobalQuoteQuery,
    NewsSentimentQuery,
    ParabolicSarQuery,
    RealtimeBulkQuotesQuery,
    TimeSeriesIntradayQuery,
)
from alpha_vantage_client.query import (
    DataType,
    IntradayInterval,
    MovingAverageType,
    NewsSort,
    Query,
    SeriesType,
    format_parameter_value,
)


def test_global_quote_encodes_in_key_order():
    query = GlobalQuoteQuery("IBM").data_type_csv()
    assert query.encode() == "datatype=csv&function=GLOBAL_QUOTE&symbol=IBM"


def test_constructor_stores_required_values_verbatim():
    query = TimeSeriesIntradayQuery(IntradayInterval.MIN_5, "BRK.B")
    assert query.get("function") == "TIME_SERIES_INTRADAY"
    assert query.get("interval") == "5min"
    assert query.get("symbol") == "BRK.B"
    assert "apikey" not in query


def test_constructor_never_validates():
    query = GlobalQuoteQuery("")
    assert query.get("symbol") == ""
    with pytest.raises(AlphaVantageValidationError, match='required field "symbol"'):
        query.validate()


def test_setters_return_the_query_for_chaining():
    query = TimeSeriesIntradayQuery("5min", "IBM")
    assert query.adjusted(False).extended_hours(True).output_size_full() is query
    assert query.get("adjusted") == "false"
    assert query.get("extended_hours") == "true"
    assert query.get("outputsize") == "full"


def test_time_setter_uses_declared_layout():
    query = TimeSeriesIntradayQuery("5min", "IBM").month(date(2009, 1, 15))
    assert query.get("month") == "2009-01"
    news = NewsSentimentQuery().time_from(datetime(2022, 4, 10, 13, 5))
    assert news.get("time_from") == "20220410T1305"


def test_string_variants_store_raw_values():
    query = ParabolicSarQuery("daily", "IBM").acceleration_string("0.05").month_string("2020-01")
    assert query.get("acceleration") == "0.05"
    assert query.get("month") == "2020-01"


def test_float_setter_uses_shortest_plain_form():
    query = ParabolicSarQuery("daily", "IBM").acceleration(0.05).maximum(1e-7)
    assert query.get("acceleration") == "0.05"
    assert query.get("maximum") == "0.0000001"


def test_enum_and_ma_type_setters():
    query = AbsolutePriceOscillatorQuery("daily", SeriesType.CLOSE, "IBM").ma_type(
        MovingAverageType.T3
    )
    assert query.get("series_type") == "close"
    assert query.get("matype") == "6"
    query.validate()


def test_empty_values_are_kept_when_encoding():
    query = NewsSentimentQuery().tickers("")
    assert query.encode() == "function=NEWS_SENTIMENT&tickers="


def test_api_key_is_redacted_in_repr():
    query = GlobalQuoteQuery("IBM").api_key("hunter2")
    assert query.get("apikey") == "hunter2"
    assert "hunter2" not in repr(query)
    assert "***" in repr(query)


def test_values_returns_a_copy():
    query = GlobalQuoteQuery("IBM")
    values = query.values()
    values["symbol"].append("MSFT")
    assert query.get("symbol") == "IBM"
    assert query.values() == {"function": ["GLOBAL_QUOTE"], "symbol": ["IBM"]}


def test_from_params_matches_typed_construction():
    typed = TimeSeriesIntradayQuery("5min", "IBM").output_size_compact()
    by_name = TimeSeriesIntradayQuery.from_params(
        {"symbol": "IBM", "interval": "5min", "outputsize": "compact", "function": "IGNORED"}
    )
    assert by_name == typed


def test_queries_are_unhashable_and_compare_by_type():
    assert GlobalQuoteQuery("IBM") != RealtimeBulkQuotesQuery("IBM")
    with pytest.raises(TypeError):
        hash(GlobalQuoteQuery("IBM"))


@pytest.mark.parametrize(
    ("query", "parameter"),
    [
        (GlobalQuoteQuery("IBM").data_type("xml"), "datatype"),
        (TimeSeriesIntradayQuery("2min", "IBM"), "interval"),
        (TimeSeriesIntradayQuery("5min", "IBM").output_size("huge"), "outputsize"),
        (
            TimeSeriesIntradayQuery.from_params(
                {"symbol": "IBM", "interval": "5min", "adjusted": "yes"}
            ),
            "adjusted",
        ),
        (AbsolutePriceOscillatorQuery("daily", "close", "IBM").ma_type(9), "matype"),
        (AbsolutePriceOscillatorQuery("daily", "median", "IBM"), "series_type"),
        (NewsSentimentQuery().sort("OLDEST"), "sort"),
    ],
    ids=["datatype", "interval", "outputsize", "boolean", "ma-type", "series-type", "sort"],
)
def test_validate_rejects_out_of_set_values(query, parameter):
    with pytest.raises(AlphaVantageValidationError) as exc_info:
        query.validate()
    assert exc_info.value.parameter == parameter


def test_validate_enforces_bulk_symbol_cap():
    symbols = ",".join(f"S{i}" for i in range(101))
    with pytest.raises(AlphaVantageValidationError, match="at most 100"):
        RealtimeBulkQuotesQuery(symbols).validate()
    RealtimeBulkQuotesQuery(",".join(f"S{i}" for i in range(100))).validate()


def test_validate_ignores_unknown_parameters():
    query = GlobalQuoteQuery.from_params({"symbol": "IBM", "brand_new_option": "x"})
    query.validate()
    assert "brand_new_option=x" in query.encode()


def test_validate_accepts_enum_members():
    query = GlobalQuoteQuery("IBM").data_type(DataType.JSON)
    query.validate()
    assert NewsSentimentQuery().sort(NewsSort.LATEST).get("sort") == "LATEST"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (14, "14"),
        (0.1, "0.1"),
        (2.0, "2.0"),
        (1e-7, "0.0000001"),
        (MovingAverageType.KAMA, "7"),
        (IntradayInterval.MIN_60, "60min"),
        ("raw", "raw"),
    ],
)
def test_format_parameter_value(value, expected):
    assert format_parameter_value(value) == expected


def test_format_parameter_value_rejects_other_types():
    with pytest.raises(TypeError):
        format_parameter_value(object())


def test_base_query_has_only_the_function():
    assert Query().values() == {"function": [""]}
