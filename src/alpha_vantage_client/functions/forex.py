# AUTO-GENERATED FROM specification/functions/forex.json. DO NOT EDIT.

"""Query types and CSV rows for the ``forex`` function group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.csv_decoder import csv_column
from ..query.base import Query
from ..query.enums import (
    DataType,
    IntradayInterval,
    OutputSize,
)


class CurrencyExchangeRateQuery(Query):
    """Realtime exchange rate for a pair of digital or physical currencies."""

    function = "CURRENCY_EXCHANGE_RATE"
    required = ("from_currency", "to_currency")
    optional = ()

    def __init__(
        self,
        from_currency: str,
        to_currency: str,
    ) -> None:
        super().__init__()
        self._put("from_currency", from_currency)
        self._put("to_currency", to_currency)


class FxDailyQuery(Query):
    """Daily OHLC bars for a currency pair."""

    function = "FX_DAILY"
    required = ("from_symbol", "to_symbol")
    optional = ("datatype", "outputsize")
    enums = {
        "datatype": DataType,
        "outputsize": OutputSize,
    }

    def __init__(
        self,
        from_symbol: str,
        to_symbol: str,
    ) -> None:
        super().__init__()
        self._put("from_symbol", from_symbol)
        self._put("to_symbol", to_symbol)

    def data_type(self, value: DataType | str) -> FxDailyQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> FxDailyQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> FxDailyQuery:
        return self._put("datatype", "csv")

    def output_size(self, value: OutputSize | str) -> FxDailyQuery:
        return self._put("outputsize", value)

    def output_size_compact(self) -> FxDailyQuery:
        return self._put("outputsize", "compact")

    def output_size_full(self) -> FxDailyQuery:
        return self._put("outputsize", "full")


@dataclass(slots=True)
class FxDailyRow:
    """CSV row of ``FX_DAILY``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)


class FxIntradayQuery(Query):
    """Intraday OHLC bars for a currency pair."""

    function = "FX_INTRADAY"
    required = ("from_symbol", "interval", "to_symbol")
    optional = ("datatype", "outputsize")
    enums = {
        "datatype": DataType,
        "interval": IntradayInterval,
        "outputsize": OutputSize,
    }

    def __init__(
        self,
        from_symbol: str,
        interval: IntradayInterval | str,
        to_symbol: str,
    ) -> None:
        super().__init__()
        self._put("from_symbol", from_symbol)
        self._put("interval", interval)
        self._put("to_symbol", to_symbol)

    def data_type(self, value: DataType | str) -> FxIntradayQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> FxIntradayQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> FxIntradayQuery:
        return self._put("datatype", "csv")

    def output_size(self, value: OutputSize | str) -> FxIntradayQuery:
        return self._put("outputsize", value)

    def output_size_compact(self) -> FxIntradayQuery:
        return self._put("outputsize", "compact")

    def output_size_full(self) -> FxIntradayQuery:
        return self._put("outputsize", "full")


@dataclass(slots=True)
class FxIntradayRow:
    """CSV row of ``FX_INTRADAY``."""

    timestamp: datetime | None = csv_column("timestamp", None, time_layout="%Y-%m-%d %H:%M:%S")
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)


class FxMonthlyQuery(Query):
    """Monthly OHLC bars for a currency pair."""

    function = "FX_MONTHLY"
    required = ("from_symbol", "to_symbol")
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        from_symbol: str,
        to_symbol: str,
    ) -> None:
        super().__init__()
        self._put("from_symbol", from_symbol)
        self._put("to_symbol", to_symbol)

    def data_type(self, value: DataType | str) -> FxMonthlyQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> FxMonthlyQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> FxMonthlyQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class FxMonthlyRow:
    """CSV row of ``FX_MONTHLY``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)


class FxWeeklyQuery(Query):
    """Weekly OHLC bars for a currency pair."""

    function = "FX_WEEKLY"
    required = ("from_symbol", "to_symbol")
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        from_symbol: str,
        to_symbol: str,
    ) -> None:
        super().__init__()
        self._put("from_symbol", from_symbol)
        self._put("to_symbol", to_symbol)

    def data_type(self, value: DataType | str) -> FxWeeklyQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> FxWeeklyQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> FxWeeklyQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class FxWeeklyRow:
    """CSV row of ``FX_WEEKLY``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)


__all__ = [
    "CurrencyExchangeRateQuery",
    "FxDailyQuery",
    "FxDailyRow",
    "FxIntradayQuery",
    "FxIntradayRow",
    "FxMonthlyQuery",
    "FxMonthlyRow",
    "FxWeeklyQuery",
    "FxWeeklyRow",
]
