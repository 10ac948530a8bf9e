from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from alpha_vantage_client.core.errors import AlphaVantageDecodeError
from alpha_vantage_client.models import (
    CompanyOverview,
    ETFHolding,
    ETFProfile,
    QuoteFunction,
    decode_json_record,
)
from tests.shared.payloads import ETF_PROFILE, OVERVIEW


def test_overview_types_and_null_markers():
    overview = CompanyOverview.from_json(OVERVIEW)
    assert overview.cik == "51143"
    assert overview.ebitda == 14646000000
    assert overview.beta == 0.697
    assert overview.fifty_two_week_high == 266.45
    assert overview.dividend_date == date(2025, 6, 10)
    assert overview.shares_outstanding == 929397000
    assert overview.peg_ratio is None
    assert overview.forward_pe is None
    assert overview.ex_dividend_date is None


def test_absent_members_keep_defaults():
    overview = CompanyOverview.from_json({"Symbol": "IBM"})
    assert overview.name == ""
    assert overview.market_capitalization is None


def test_overview_is_immutable():
    overview = CompanyOverview.from_json(OVERVIEW)
    with pytest.raises(FrozenInstanceError):
        overview.symbol = "MSFT"  # type: ignore[misc]


def test_unparseable_member_names_the_key():
    with pytest.raises(AlphaVantageDecodeError, match="failed to parse MarketCapitalization") as exc_info:
        CompanyOverview.from_json({"MarketCapitalization": "lots"})
    assert exc_info.value.column_name == "MarketCapitalization"


def test_non_object_payload_is_rejected():
    with pytest.raises(AlphaVantageDecodeError, match="expected a JSON object"):
        decode_json_record(CompanyOverview, ["not", "an", "object"])  # type: ignore[arg-type]


def test_etf_profile_nested_lists():
    profile = ETFProfile.from_json(ETF_PROFILE, symbol="QQQ")
    assert profile.inception_date == date(1999, 3, 10)
    assert profile.net_expense_ratio == 0.002
    assert profile.leveraged == "NO"
    assert profile.sectors[0].weight == 0.517
    assert profile.holdings == (
        ETFHolding(symbol="NVDA", description="NVIDIA CORP", weight=0.0914),
        ETFHolding(symbol="n/a", description="OTHER", weight=None),
    )


def test_etf_profile_tolerates_missing_lists():
    profile = ETFProfile.from_json({"net_assets": "10"})
    assert profile.symbol == ""
    assert profile.sectors == ()
    assert profile.holdings == ()


def test_quote_functions_render_as_wire_names():
    assert str(QuoteFunction.TIME_SERIES_WEEKLY) == "TIME_SERIES_WEEKLY"
    assert QuoteFunction("TIME_SERIES_MONTHLY") is QuoteFunction.TIME_SERIES_MONTHLY
    assert len(QuoteFunction) == 6
