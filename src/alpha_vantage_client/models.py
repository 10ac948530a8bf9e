"""Typed records for the JSON-only fundamentals and the canonical quote row."""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from .core.csv_decoder import csv_column
from .core.errors import AlphaVantageDecodeError

JSON_KEY_METADATA = "json_key"
JSON_NULL_MARKERS = frozenset({"", "None", "-", "0000-00-00"})
JSON_DATE_LAYOUT = "%Y-%m-%d"


def json_field(key: str, default: object = None) -> typing.Any:
    """Declare a dataclass field read from the JSON member ``key``."""
    return field(default=default, metadata={JSON_KEY_METADATA: key})


class QuoteFunction(str, Enum):
    """Time-series functions whose CSV output maps onto ``Quote``."""

    TIME_SERIES_DAILY = "TIME_SERIES_DAILY"
    TIME_SERIES_DAILY_ADJUSTED = "TIME_SERIES_DAILY_ADJUSTED"
    TIME_SERIES_WEEKLY = "TIME_SERIES_WEEKLY"
    TIME_SERIES_WEEKLY_ADJUSTED = "TIME_SERIES_WEEKLY_ADJUSTED"
    TIME_SERIES_MONTHLY = "TIME_SERIES_MONTHLY"
    TIME_SERIES_MONTHLY_ADJUSTED = "TIME_SERIES_MONTHLY_ADJUSTED"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class Quote:
    """One OHLCV bar; adjusted series fill the adjustment columns."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    adjusted_close: float = csv_column("adjusted_close", 0.0, aliases=("adjusted close",))
    volume: float = csv_column("volume", 0.0)
    dividend_amount: float = csv_column("dividend_amount", 0.0, aliases=("dividend amount",))
    split_coefficient: float = csv_column("split_coefficient", 0.0)


@dataclass(slots=True, frozen=True)
class CompanyOverview:
    """Decoded ``OVERVIEW`` response."""

    cik: str = json_field("CIK", "")
    symbol: str = json_field("Symbol", "")
    asset_type: str = json_field("AssetType", "")
    name: str = json_field("Name", "")
    description: str = json_field("Description", "")
    exchange: str = json_field("Exchange", "")
    currency: str = json_field("Currency", "")
    country: str = json_field("Country", "")
    sector: str = json_field("Sector", "")
    industry: str = json_field("Industry", "")
    address: str = json_field("Address", "")
    official_site: str = json_field("OfficialSite", "")
    fiscal_year_end: str = json_field("FiscalYearEnd", "")
    latest_quarter: date | None = json_field("LatestQuarter")
    market_capitalization: int | None = json_field("MarketCapitalization")
    ebitda: int | None = json_field("EBITDA")
    pe_ratio: float | None = json_field("PERatio")
    peg_ratio: float | None = json_field("PEGRatio")
    book_value: float | None = json_field("BookValue")
    dividend_per_share: float | None = json_field("DividendPerShare")
    dividend_yield: float | None = json_field("DividendYield")
    eps: float | None = json_field("EPS")
    revenue_per_share_ttm: float | None = json_field("RevenuePerShareTTM")
    profit_margin: float | None = json_field("ProfitMargin")
    operating_margin_ttm: float | None = json_field("OperatingMarginTTM")
    return_on_assets_ttm: float | None = json_field("ReturnOnAssetsTTM")
    return_on_equity_ttm: float | None = json_field("ReturnOnEquityTTM")
    revenue_ttm: int | None = json_field("RevenueTTM")
    gross_profit_ttm: int | None = json_field("GrossProfitTTM")
    diluted_eps_ttm: float | None = json_field("DilutedEPSTTM")
    quarterly_earnings_growth_yoy: float | None = json_field("QuarterlyEarningsGrowthYOY")
    quarterly_revenue_growth_yoy: float | None = json_field("QuarterlyRevenueGrowthYOY")
    analyst_target_price: float | None = json_field("AnalystTargetPrice")
    trailing_pe: float | None = json_field("TrailingPE")
    forward_pe: float | None = json_field("ForwardPE")
    price_to_sales_ratio_ttm: float | None = json_field("PriceToSalesRatioTTM")
    price_to_book_ratio: float | None = json_field("PriceToBookRatio")
    ev_to_revenue: float | None = json_field("EVToRevenue")
    ev_to_ebitda: float | None = json_field("EVToEBITDA")
    beta: float | None = json_field("Beta")
    fifty_two_week_high: float | None = json_field("52WeekHigh")
    fifty_two_week_low: float | None = json_field("52WeekLow")
    fifty_day_moving_average: float | None = json_field("50DayMovingAverage")
    two_hundred_day_moving_average: float | None = json_field("200DayMovingAverage")
    shares_outstanding: int | None = json_field("SharesOutstanding")
    shares_float: int | None = json_field("SharesFloat")
    percent_insiders: float | None = json_field("PercentInsiders")
    percent_institutions: float | None = json_field("PercentInstitutions")
    dividend_date: date | None = json_field("DividendDate")
    ex_dividend_date: date | None = json_field("ExDividendDate")

    @classmethod
    def from_json(cls, payload: Mapping[str, object]) -> "CompanyOverview":
        return decode_json_record(cls, payload)


@dataclass(slots=True, frozen=True)
class ETFSector:
    sector: str = json_field("sector", "")
    weight: float | None = json_field("weight")


@dataclass(slots=True, frozen=True)
class ETFHolding:
    symbol: str = json_field("symbol", "")
    description: str = json_field("description", "")
    weight: float | None = json_field("weight")


@dataclass(slots=True, frozen=True)
class ETFProfile:
    """Decoded ``ETF_PROFILE`` response."""

    symbol: str = ""
    net_assets: int | None = json_field("net_assets")
    net_expense_ratio: float | None = json_field("net_expense_ratio")
    portfolio_turnover: float | None = json_field("portfolio_turnover")
    dividend_yield: float | None = json_field("dividend_yield")
    inception_date: date | None = json_field("inception_date")
    leveraged: str = json_field("leveraged", "")
    sectors: tuple[ETFSector, ...] = ()
    holdings: tuple[ETFHolding, ...] = ()

    @classmethod
    def from_json(cls, payload: Mapping[str, object], *, symbol: str = "") -> "ETFProfile":
        profile = decode_json_record(cls, payload)
        sectors = tuple(
            decode_json_record(ETFSector, item) for item in _json_list(payload, "sectors")
        )
        holdings = tuple(
            decode_json_record(ETFHolding, item) for item in _json_list(payload, "holdings")
        )
        return dataclasses.replace(profile, symbol=symbol, sectors=sectors, holdings=holdings)


RecordT = typing.TypeVar("RecordT")


def decode_json_record(record_type: type[RecordT], payload: Mapping[str, object]) -> RecordT:
    """Build ``record_type`` from the string members of a JSON object.

    Members that are absent or hold a null marker (``"None"``, ``"-"``, empty,
    ``"0000-00-00"``) keep the field default.
    """
    if not isinstance(payload, Mapping):
        raise AlphaVantageDecodeError(
            f"expected a JSON object for {record_type.__name__}, got {type(payload).__name__}"
        )
    hints = typing.get_type_hints(record_type)
    values: dict[str, object] = {}
    for item in dataclasses.fields(record_type):
        key = item.metadata.get(JSON_KEY_METADATA)
        if key is None or key not in payload:
            continue
        raw = payload[key]
        if raw is None or (isinstance(raw, str) and raw.strip() in JSON_NULL_MARKERS):
            continue
        try:
            values[item.name] = _coerce(str(raw).strip(), hints[item.name])
        except ValueError as exc:
            raise AlphaVantageDecodeError(
                f"failed to parse {key}: {exc}",
                column_name=key,
            ) from exc
    return record_type(**values)


def _coerce(raw: str, annotation: object) -> object:
    members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    target = members[0] if members else annotation
    if target is str:
        return raw
    if target is int:
        return int(raw)
    if target is float:
        return float(raw)
    if target is date:
        return datetime.strptime(raw, JSON_DATE_LAYOUT).date()
    raise TypeError(f"unsupported JSON field type {annotation!r}")


def _json_list(payload: Mapping[str, object], key: str) -> list[Mapping[str, object]]:
    items = payload.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, Mapping)]


__all__ = [
    "JSON_KEY_METADATA",
    "JSON_NULL_MARKERS",
    "json_field",
    "QuoteFunction",
    "Quote",
    "CompanyOverview",
    "ETFSector",
    "ETFHolding",
    "ETFProfile",
    "decode_json_record",
]
