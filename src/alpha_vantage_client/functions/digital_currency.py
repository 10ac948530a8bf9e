# AUTO-GENERATED FROM specification/functions/digital_currency.json. DO NOT EDIT.

"""Query types and CSV rows for the ``digital_currency`` function group."""

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


class CryptoIntradayQuery(Query):
    """Intraday OHLCV bars for a cryptocurrency."""

    function = "CRYPTO_INTRADAY"
    required = ("interval", "market", "symbol")
    optional = ("datatype", "outputsize")
    enums = {
        "datatype": DataType,
        "interval": IntradayInterval,
        "outputsize": OutputSize,
    }

    def __init__(
        self,
        interval: IntradayInterval | str,
        market: str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("market", market)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> CryptoIntradayQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> CryptoIntradayQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> CryptoIntradayQuery:
        return self._put("datatype", "csv")

    def output_size(self, value: OutputSize | str) -> CryptoIntradayQuery:
        return self._put("outputsize", value)

    def output_size_compact(self) -> CryptoIntradayQuery:
        return self._put("outputsize", "compact")

    def output_size_full(self) -> CryptoIntradayQuery:
        return self._put("outputsize", "full")


@dataclass(slots=True)
class CryptoIntradayRow:
    """CSV row of ``CRYPTO_INTRADAY``."""

    timestamp: datetime | None = csv_column("timestamp", None, time_layout="%Y-%m-%d %H:%M:%S")
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    volume: float = csv_column("volume", 0.0)


class DigitalCurrencyDailyQuery(Query):
    """Daily OHLCV bars for a cryptocurrency."""

    function = "DIGITAL_CURRENCY_DAILY"
    required = ("market", "symbol")
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        market: str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("market", market)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> DigitalCurrencyDailyQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> DigitalCurrencyDailyQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> DigitalCurrencyDailyQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class DigitalCurrencyDailyRow:
    """CSV row of ``DIGITAL_CURRENCY_DAILY``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    volume: float = csv_column("volume", 0.0)


class DigitalCurrencyMonthlyQuery(Query):
    """Monthly OHLCV bars for a cryptocurrency."""

    function = "DIGITAL_CURRENCY_MONTHLY"
    required = ("market", "symbol")
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        market: str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("market", market)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> DigitalCurrencyMonthlyQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> DigitalCurrencyMonthlyQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> DigitalCurrencyMonthlyQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class DigitalCurrencyMonthlyRow:
    """CSV row of ``DIGITAL_CURRENCY_MONTHLY``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    volume: float = csv_column("volume", 0.0)


class DigitalCurrencyWeeklyQuery(Query):
    """Weekly OHLCV bars for a cryptocurrency."""

    function = "DIGITAL_CURRENCY_WEEKLY"
    required = ("market", "symbol")
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        market: str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("market", market)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> DigitalCurrencyWeeklyQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> DigitalCurrencyWeeklyQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> DigitalCurrencyWeeklyQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class DigitalCurrencyWeeklyRow:
    """CSV row of ``DIGITAL_CURRENCY_WEEKLY``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    open: float = csv_column("open", 0.0)
    high: float = csv_column("high", 0.0)
    low: float = csv_column("low", 0.0)
    close: float = csv_column("close", 0.0)
    volume: float = csv_column("volume", 0.0)


__all__ = [
    "CryptoIntradayQuery",
    "CryptoIntradayRow",
    "DigitalCurrencyDailyQuery",
    "DigitalCurrencyDailyRow",
    "DigitalCurrencyMonthlyQuery",
    "DigitalCurrencyMonthlyRow",
    "DigitalCurrencyWeeklyQuery",
    "DigitalCurrencyWeeklyRow",
]
