# AUTO-GENERATED FROM specification/functions/fundamental_data.json. DO NOT EDIT.

"""Query types and CSV rows for the ``fundamental_data`` function group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.csv_decoder import csv_column
from ..query.base import Query
from ..query.enums import (
    DataType,
    EarningsHorizon,
    ListingState,
)


class BalanceSheetQuery(Query):
    """Annual and quarterly balance sheets."""

    function = "BALANCE_SHEET"
    required = ("symbol",)
    optional = ()

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)


class CashFlowQuery(Query):
    """Annual and quarterly cash flow statements."""

    function = "CASH_FLOW"
    required = ("symbol",)
    optional = ()

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)


class DividendsQuery(Query):
    """Historical and declared future dividend distributions."""

    function = "DIVIDENDS"
    required = ("symbol",)
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> DividendsQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> DividendsQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> DividendsQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class DividendsRow:
    """CSV row of ``DIVIDENDS``."""

    ex_dividend_date: datetime | None = csv_column("ex_dividend_date", None)
    declaration_date: datetime | None = csv_column("declaration_date", None)
    record_date: datetime | None = csv_column("record_date", None)
    payment_date: datetime | None = csv_column("payment_date", None)
    amount: float = csv_column("amount", 0.0)


class EarningsQuery(Query):
    """Annual and quarterly earnings per share."""

    function = "EARNINGS"
    required = ("symbol",)
    optional = ()

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)


class EarningsCalendarQuery(Query):
    """Company earnings expected in the next months."""

    function = "EARNINGS_CALENDAR"
    required = ()
    optional = ("horizon", "symbol")
    enums = {
        "horizon": EarningsHorizon,
    }

    def horizon(self, value: EarningsHorizon | str) -> EarningsCalendarQuery:
        return self._put("horizon", value)

    def horizon_3month(self) -> EarningsCalendarQuery:
        return self._put("horizon", "3month")

    def horizon_6month(self) -> EarningsCalendarQuery:
        return self._put("horizon", "6month")

    def horizon_12month(self) -> EarningsCalendarQuery:
        return self._put("horizon", "12month")

    def symbol(self, value: str) -> EarningsCalendarQuery:
        return self._put("symbol", value)


@dataclass(slots=True)
class EarningsCalendarRow:
    """CSV row of ``EARNINGS_CALENDAR``."""

    symbol: str = csv_column("symbol", "")
    name: str = csv_column("name", "")
    report_date: datetime | None = csv_column("reportDate", None)
    fiscal_date_ending: datetime | None = csv_column("fiscalDateEnding", None)
    estimate: str = csv_column("estimate", "")
    currency: str = csv_column("currency", "")
    time_of_the_day: str = csv_column("timeOfTheDay", "")


class EarningsEstimatesQuery(Query):
    """Analyst EPS and revenue estimates."""

    function = "EARNINGS_ESTIMATES"
    required = ("symbol",)
    optional = ()

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)


class EtfProfileQuery(Query):
    """Key ETF metrics, sector allocation and holdings."""

    function = "ETF_PROFILE"
    required = ("symbol",)
    optional = ()

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)


class IncomeStatementQuery(Query):
    """Annual and quarterly income statements."""

    function = "INCOME_STATEMENT"
    required = ("symbol",)
    optional = ()

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)


class IpoCalendarQuery(Query):
    """IPOs expected in the next three months."""

    function = "IPO_CALENDAR"
    required = ()
    optional = ()


@dataclass(slots=True)
class IpoCalendarRow:
    """CSV row of ``IPO_CALENDAR``."""

    symbol: str = csv_column("symbol", "")
    name: str = csv_column("name", "")
    ipo_date: datetime | None = csv_column("ipoDate", None)
    price_range_low: str = csv_column("priceRangeLow", "")
    price_range_high: str = csv_column("priceRangeHigh", "")
    currency: str = csv_column("currency", "")
    exchange: str = csv_column("exchange", "")


class ListingStatusQuery(Query):
    """Active or delisted US stocks and ETFs."""

    function = "LISTING_STATUS"
    required = ()
    optional = ("date", "state")
    enums = {
        "state": ListingState,
    }

    def date(self, value: date) -> ListingStatusQuery:
        return self._put_time("date", value, "%Y-%m-%d")

    def date_string(self, value: str) -> ListingStatusQuery:
        return self._put("date", value)

    def state(self, value: ListingState | str) -> ListingStatusQuery:
        return self._put("state", value)

    def state_active(self) -> ListingStatusQuery:
        return self._put("state", "active")

    def state_delisted(self) -> ListingStatusQuery:
        return self._put("state", "delisted")


@dataclass(slots=True)
class ListingStatusRow:
    """CSV row of ``LISTING_STATUS``."""

    symbol: str = csv_column("symbol", "")
    name: str = csv_column("name", "")
    exchange: str = csv_column("exchange", "")
    asset_type: str = csv_column("assetType", "")
    ipo_date: datetime | None = csv_column("ipoDate", None)
    delisting_date: datetime | None = csv_column("delistingDate", None)
    status: str = csv_column("status", "")


class OverviewQuery(Query):
    """Company information, financial ratios and key metrics."""

    function = "OVERVIEW"
    required = ("symbol",)
    optional = ()

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)


class SharesOutstandingQuery(Query):
    """Quarterly diluted and basic shares outstanding."""

    function = "SHARES_OUTSTANDING"
    required = ("symbol",)
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> SharesOutstandingQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> SharesOutstandingQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> SharesOutstandingQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class SharesOutstandingRow:
    """CSV row of ``SHARES_OUTSTANDING``."""

    date: datetime | None = csv_column("date", None)
    shares_outstanding_diluted: str = csv_column("shares_outstanding_diluted", "")
    shares_outstanding_basic: str = csv_column("shares_outstanding_basic", "")


class SplitsQuery(Query):
    """Historical split events."""

    function = "SPLITS"
    required = ("symbol",)
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> SplitsQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> SplitsQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> SplitsQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class SplitsRow:
    """CSV row of ``SPLITS``."""

    effective_date: datetime | None = csv_column("effective_date", None)
    split_factor: float = csv_column("split_factor", 0.0)


__all__ = [
    "BalanceSheetQuery",
    "CashFlowQuery",
    "DividendsQuery",
    "DividendsRow",
    "EarningsQuery",
    "EarningsCalendarQuery",
    "EarningsCalendarRow",
    "EarningsEstimatesQuery",
    "EtfProfileQuery",
    "IncomeStatementQuery",
    "IpoCalendarQuery",
    "IpoCalendarRow",
    "ListingStatusQuery",
    "ListingStatusRow",
    "OverviewQuery",
    "SharesOutstandingQuery",
    "SharesOutstandingRow",
    "SplitsQuery",
    "SplitsRow",
]
