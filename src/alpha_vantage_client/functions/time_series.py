# AUTO-GENERATED FROM specification/functions/time_series.json. DO NOT EDIT.

"""Query types and CSV rows for the ``time_series`` function group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.csv_decoder import csv_column
from ..query.base import Query
from ..query.enums import (
    DataType,
    Entitlement,
    IntradayInterval,
    OutputSize,
)


class GlobalQuoteQuery(Query):
    """Latest price and volume for a ticker."""

    function = "GLOBAL_QUOTE"
    required = ("symbol",)
    optional = ("datatype", "entitlement")
    enums = {
        "datatype": DataType,
        "entitlement": Entitlement,
    }

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> GlobalQuoteQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> GlobalQuoteQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> GlobalQuoteQuery:
        return self._put("datatype", "csv")

    def entitlement(self, value: Entitlement | str) -> GlobalQuoteQuery:
        return self._put("entitlement", value)

    def entitlement_realtime(self) -> GlobalQuoteQuery:
        return self._put("entitlement", "realtime")

    def entitlement_delayed(self) -> GlobalQuoteQuery:
        return self._put("entitlement", "delayed")


@dataclass(slots=True)
class GlobalQuoteRow:
    """CSV row of ``GLOBAL_QUOTE``."""

    symbol: str = csv_column("symbol", "")
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    price: float = csv_column("price", 0.0)
    volume: int = csv_column("volume", 0)
    latest_day: datetime | None = csv_column("latestDay", None)
    previous_close: float = csv_column("previousClose", 0.0)
    change: float = csv_column("change", 0.0)
    change_percent: str = csv_column("changePercent", "")


class MarketStatusQuery(Query):
    """Current open or closed status of the major trading venues."""

    function = "MARKET_STATUS"
    required = ()
    optional = ()


class RealtimeBulkQuotesQuery(Query):
    """Realtime quotes for up to 100 symbols in one call."""

    function = "REALTIME_BULK_QUOTES"
    required = ("symbol",)
    optional = ("datatype", "entitlement")
    enums = {
        "datatype": DataType,
        "entitlement": Entitlement,
    }
    max_items = {
        "symbol": 100,
    }

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> RealtimeBulkQuotesQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> RealtimeBulkQuotesQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> RealtimeBulkQuotesQuery:
        return self._put("datatype", "csv")

    def entitlement(self, value: Entitlement | str) -> RealtimeBulkQuotesQuery:
        return self._put("entitlement", value)

    def entitlement_realtime(self) -> RealtimeBulkQuotesQuery:
        return self._put("entitlement", "realtime")

    def entitlement_delayed(self) -> RealtimeBulkQuotesQuery:
        return self._put("entitlement", "delayed")


class SymbolSearchQuery(Query):
    """Best-matching symbols and market information for keywords."""

    function = "SYMBOL_SEARCH"
    required = ("keywords",)
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        keywords: str,
    ) -> None:
        super().__init__()
        self._put("keywords", keywords)

    def data_type(self, value: DataType | str) -> SymbolSearchQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> SymbolSearchQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> SymbolSearchQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class SymbolSearchRow:
    """CSV row of ``SYMBOL_SEARCH``."""

    symbol: str = csv_column("symbol", "")
    name: str = csv_column("name", "")
    type: str = csv_column("type", "")
    region: str = csv_column("region", "")
    market_open: str = csv_column("marketOpen", "")
    market_close: str = csv_column("marketClose", "")
    timezone: str = csv_column("timezone", "")
    currency: str = csv_column("currency", "")
    match_score: float = csv_column("matchScore", 0.0)


class TimeSeriesDailyQuery(Query):
    """Daily OHLCV bars for an equity."""

    function = "TIME_SERIES_DAILY"
    required = ("symbol",)
    optional = ("datatype", "outputsize")
    enums = {
        "datatype": DataType,
        "outputsize": OutputSize,
    }

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> TimeSeriesDailyQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TimeSeriesDailyQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TimeSeriesDailyQuery:
        return self._put("datatype", "csv")

    def output_size(self, value: OutputSize | str) -> TimeSeriesDailyQuery:
        return self._put("outputsize", value)

    def output_size_compact(self) -> TimeSeriesDailyQuery:
        return self._put("outputsize", "compact")

    def output_size_full(self) -> TimeSeriesDailyQuery:
        return self._put("outputsize", "full")


@dataclass(slots=True)
class TimeSeriesDailyRow:
    """CSV row of ``TIME_SERIES_DAILY``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    volume: int = csv_column("volume", 0)


class TimeSeriesDailyAdjustedQuery(Query):
    """Daily OHLCV bars with split and dividend adjustments."""

    function = "TIME_SERIES_DAILY_ADJUSTED"
    required = ("symbol",)
    optional = ("datatype", "entitlement", "outputsize")
    enums = {
        "datatype": DataType,
        "entitlement": Entitlement,
        "outputsize": OutputSize,
    }

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> TimeSeriesDailyAdjustedQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TimeSeriesDailyAdjustedQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TimeSeriesDailyAdjustedQuery:
        return self._put("datatype", "csv")

    def entitlement(self, value: Entitlement | str) -> TimeSeriesDailyAdjustedQuery:
        return self._put("entitlement", value)

    def entitlement_realtime(self) -> TimeSeriesDailyAdjustedQuery:
        return self._put("entitlement", "realtime")

    def entitlement_delayed(self) -> TimeSeriesDailyAdjustedQuery:
        return self._put("entitlement", "delayed")

    def output_size(self, value: OutputSize | str) -> TimeSeriesDailyAdjustedQuery:
        return self._put("outputsize", value)

    def output_size_compact(self) -> TimeSeriesDailyAdjustedQuery:
        return self._put("outputsize", "compact")

    def output_size_full(self) -> TimeSeriesDailyAdjustedQuery:
        return self._put("outputsize", "full")


@dataclass(slots=True)
class TimeSeriesDailyAdjustedRow:
    """CSV row of ``TIME_SERIES_DAILY_ADJUSTED``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    adjusted_close: float = csv_column("adjusted_close", 0.0)
    volume: int = csv_column("volume", 0)
    dividend_amount: float = csv_column("dividend_amount", 0.0)
    split_coefficient: float = csv_column("split_coefficient", 0.0)


class TimeSeriesIntradayQuery(Query):
    """Intraday OHLCV bars for an equity."""

    function = "TIME_SERIES_INTRADAY"
    required = ("interval", "symbol")
    optional = ("adjusted", "datatype", "entitlement", "extended_hours", "month", "outputsize")
    enums = {
        "datatype": DataType,
        "entitlement": Entitlement,
        "interval": IntradayInterval,
        "outputsize": OutputSize,
    }
    booleans = ("adjusted", "extended_hours")

    def __init__(
        self,
        interval: IntradayInterval | str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)

    def adjusted(self, value: bool) -> TimeSeriesIntradayQuery:
        return self._put("adjusted", value)

    def data_type(self, value: DataType | str) -> TimeSeriesIntradayQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TimeSeriesIntradayQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TimeSeriesIntradayQuery:
        return self._put("datatype", "csv")

    def entitlement(self, value: Entitlement | str) -> TimeSeriesIntradayQuery:
        return self._put("entitlement", value)

    def entitlement_realtime(self) -> TimeSeriesIntradayQuery:
        return self._put("entitlement", "realtime")

    def entitlement_delayed(self) -> TimeSeriesIntradayQuery:
        return self._put("entitlement", "delayed")

    def extended_hours(self, value: bool) -> TimeSeriesIntradayQuery:
        return self._put("extended_hours", value)

    def month(self, value: date) -> TimeSeriesIntradayQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> TimeSeriesIntradayQuery:
        return self._put("month", value)

    def output_size(self, value: OutputSize | str) -> TimeSeriesIntradayQuery:
        return self._put("outputsize", value)

    def output_size_compact(self) -> TimeSeriesIntradayQuery:
        return self._put("outputsize", "compact")

    def output_size_full(self) -> TimeSeriesIntradayQuery:
        return self._put("outputsize", "full")


@dataclass(slots=True)
class TimeSeriesIntradayRow:
    """CSV row of ``TIME_SERIES_INTRADAY``."""

    timestamp: datetime | None = csv_column("timestamp", None, time_layout="%Y-%m-%d %H:%M:%S")
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    volume: int = csv_column("volume", 0)


class TimeSeriesMonthlyQuery(Query):
    """Monthly OHLCV bars for an equity."""

    function = "TIME_SERIES_MONTHLY"
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

    def data_type(self, value: DataType | str) -> TimeSeriesMonthlyQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TimeSeriesMonthlyQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TimeSeriesMonthlyQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class TimeSeriesMonthlyRow:
    """CSV row of ``TIME_SERIES_MONTHLY``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    volume: int = csv_column("volume", 0)


class TimeSeriesMonthlyAdjustedQuery(Query):
    """Monthly adjusted OHLCV bars with dividends."""

    function = "TIME_SERIES_MONTHLY_ADJUSTED"
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

    def data_type(self, value: DataType | str) -> TimeSeriesMonthlyAdjustedQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TimeSeriesMonthlyAdjustedQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TimeSeriesMonthlyAdjustedQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class TimeSeriesMonthlyAdjustedRow:
    """CSV row of ``TIME_SERIES_MONTHLY_ADJUSTED``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    adjusted_close: float = csv_column("adjusted close", 0.0)
    volume: int = csv_column("volume", 0)
    dividend_amount: float = csv_column("dividend amount", 0.0)


class TimeSeriesWeeklyQuery(Query):
    """Weekly OHLCV bars for an equity."""

    function = "TIME_SERIES_WEEKLY"
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

    def data_type(self, value: DataType | str) -> TimeSeriesWeeklyQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TimeSeriesWeeklyQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TimeSeriesWeeklyQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class TimeSeriesWeeklyRow:
    """CSV row of ``TIME_SERIES_WEEKLY``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    volume: int = csv_column("volume", 0)


class TimeSeriesWeeklyAdjustedQuery(Query):
    """Weekly adjusted OHLCV bars with dividends."""

    function = "TIME_SERIES_WEEKLY_ADJUSTED"
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

    def data_type(self, value: DataType | str) -> TimeSeriesWeeklyAdjustedQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TimeSeriesWeeklyAdjustedQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TimeSeriesWeeklyAdjustedQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class TimeSeriesWeeklyAdjustedRow:
    """CSV row of ``TIME_SERIES_WEEKLY_ADJUSTED``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    adjusted_close: float = csv_column("adjusted close", 0.0)
    volume: int = csv_column("volume", 0)
    dividend_amount: float = csv_column("dividend amount", 0.0)


__all__ = [
    "GlobalQuoteQuery",
    "GlobalQuoteRow",
    "MarketStatusQuery",
    "RealtimeBulkQuotesQuery",
    "SymbolSearchQuery",
    "SymbolSearchRow",
    "TimeSeriesDailyQuery",
    "TimeSeriesDailyRow",
    "TimeSeriesDailyAdjustedQuery",
    "TimeSeriesDailyAdjustedRow",
    "TimeSeriesIntradayQuery",
    "TimeSeriesIntradayRow",
    "TimeSeriesMonthlyQuery",
    "TimeSeriesMonthlyRow",
    "TimeSeriesMonthlyAdjustedQuery",
    "TimeSeriesMonthlyAdjustedRow",
    "TimeSeriesWeeklyQuery",
    "TimeSeriesWeeklyRow",
    "TimeSeriesWeeklyAdjustedQuery",
    "TimeSeriesWeeklyAdjustedRow",
]
