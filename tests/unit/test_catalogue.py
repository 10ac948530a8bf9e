from __future__ import annotations

import pytest

from alpha_vantage_client.catalogue import (
    describe,
    function_names,
    new_query,
    query_type,
    row_type,
)
from alpha_vantage_client.core.errors import AlphaVantageUnknownFunctionError
from alpha_vantage_client.functions import (
    QUERY_TYPES,
    ROW_TYPES,
    GlobalQuoteQuery,
    GlobalQuoteRow,
    MarketStatusQuery,
)
from alpha_vantage_client.specification import load_corpus


def test_function_names_cover_the_corpus():
    names = function_names()
    assert names == sorted(names)
    assert set(names) == {spec.name for spec in load_corpus().functions}


def test_every_query_type_declares_its_function():
    for name, query_cls in QUERY_TYPES.items():
        assert query_cls.function == name
        assert query_cls.from_params({}).get("function") == name


def test_row_types_exist_only_for_csv_functions():
    corpus = load_corpus()
    expected = {spec.name for spec in corpus.functions if spec.has_rows()}
    assert set(ROW_TYPES) == expected


def test_describe_reports_parameters_and_rows():
    description = describe("GLOBAL_QUOTE")
    assert description.required == ("symbol",)
    assert "datatype" in description.optional
    assert description.row_type is GlobalQuoteRow
    assert description.group == "time_series"
    assert description.summary
    assert description.parameters[0] == "symbol"


def test_describe_function_without_rows():
    assert describe("MARKET_STATUS").row_type is None
    assert row_type("MARKET_STATUS") is None


def test_new_query_builds_by_name():
    query = new_query("GLOBAL_QUOTE", {"symbol": "IBM", "datatype": "csv"})
    assert isinstance(query, GlobalQuoteQuery)
    assert query == GlobalQuoteQuery("IBM").data_type_csv()
    assert isinstance(new_query("MARKET_STATUS"), MarketStatusQuery)


@pytest.mark.parametrize("call", [query_type, row_type, describe, new_query])
def test_unknown_function_is_rejected(call):
    with pytest.raises(AlphaVantageUnknownFunctionError, match="unknown function: NOPE"):
        call("NOPE")
