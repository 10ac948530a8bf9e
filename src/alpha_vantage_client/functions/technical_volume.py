# AUTO-GENERATED FROM specification/functions/technical_volume.json. DO NOT EDIT.

"""Query types and CSV rows for the ``technical_volume`` function group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.csv_decoder import csv_column
from ..query.base import Query
from ..query.enums import (
    DataType,
    IntradayDailyWeeklyMonthlyInterval,
)


class ChaikinAdLineQuery(Query):
    """Chaikin A/D line."""

    function = "AD"
    required = ("interval", "symbol")
    optional = ("datatype", "month")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
    }

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> ChaikinAdLineQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> ChaikinAdLineQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> ChaikinAdLineQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> ChaikinAdLineQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> ChaikinAdLineQuery:
        return self._put("month", value)


@dataclass(slots=True)
class ChaikinAdLineRow:
    """CSV row of ``AD``."""

    time: str = csv_column("time", "")
    value: float = csv_column("Chaikin A/D", 0.0)


class ChaikinAdOscillatorQuery(Query):
    """Chaikin A/D oscillator."""

    function = "ADOSC"
    required = ("interval", "symbol")
    optional = ("datatype", "fastperiod", "month", "slowperiod")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
    }

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> ChaikinAdOscillatorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> ChaikinAdOscillatorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> ChaikinAdOscillatorQuery:
        return self._put("datatype", "csv")

    def fast_period(self, value: int) -> ChaikinAdOscillatorQuery:
        return self._put("fastperiod", value)

    def month(self, value: date) -> ChaikinAdOscillatorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> ChaikinAdOscillatorQuery:
        return self._put("month", value)

    def slow_period(self, value: int) -> ChaikinAdOscillatorQuery:
        return self._put("slowperiod", value)


@dataclass(slots=True)
class ChaikinAdOscillatorRow:
    """CSV row of ``ADOSC``."""

    time: str = csv_column("time", "")
    value: float = csv_column("ADOSC", 0.0)


class OnBalanceVolumeQuery(Query):
    """On balance volume."""

    function = "OBV"
    required = ("interval", "symbol")
    optional = ("datatype", "month")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
    }

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> OnBalanceVolumeQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> OnBalanceVolumeQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> OnBalanceVolumeQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> OnBalanceVolumeQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> OnBalanceVolumeQuery:
        return self._put("month", value)


@dataclass(slots=True)
class OnBalanceVolumeRow:
    """CSV row of ``OBV``."""

    time: str = csv_column("time", "")
    value: float = csv_column("OBV", 0.0)


__all__ = [
    "ChaikinAdLineQuery",
    "ChaikinAdLineRow",
    "ChaikinAdOscillatorQuery",
    "ChaikinAdOscillatorRow",
    "OnBalanceVolumeQuery",
    "OnBalanceVolumeRow",
]
