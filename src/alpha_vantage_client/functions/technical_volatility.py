# AUTO-GENERATED FROM specification/functions/technical_volatility.json. DO NOT EDIT.

"""Query types and CSV rows for the ``technical_volatility`` function group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.csv_decoder import csv_column
from ..query.base import Query
from ..query.enums import (
    DataType,
    IntradayDailyWeeklyMonthlyInterval,
    MovingAverageType,
    SeriesType,
)


class AverageTrueRangeQuery(Query):
    """Average true range."""

    function = "ATR"
    required = ("interval", "symbol", "time_period")
    optional = ("datatype", "month")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
    }

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        symbol: str,
        time_period: int,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)
        self._put("time_period", time_period)

    def data_type(self, value: DataType | str) -> AverageTrueRangeQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> AverageTrueRangeQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> AverageTrueRangeQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> AverageTrueRangeQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> AverageTrueRangeQuery:
        return self._put("month", value)


@dataclass(slots=True)
class AverageTrueRangeRow:
    """CSV row of ``ATR``."""

    time: str = csv_column("time", "")
    value: float = csv_column("ATR", 0.0)


class BollingerBandsQuery(Query):
    """Bollinger bands."""

    function = "BBANDS"
    required = ("interval", "series_type", "symbol", "time_period")
    optional = ("datatype", "matype", "month", "nbdevdn", "nbdevup")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
        "series_type": SeriesType,
    }
    ma_types = ("matype",)

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        series_type: SeriesType | str,
        symbol: str,
        time_period: int,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)
        self._put("time_period", time_period)

    def data_type(self, value: DataType | str) -> BollingerBandsQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> BollingerBandsQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> BollingerBandsQuery:
        return self._put("datatype", "csv")

    def ma_type(self, value: MovingAverageType | int) -> BollingerBandsQuery:
        return self._put("matype", value)

    def month(self, value: date) -> BollingerBandsQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> BollingerBandsQuery:
        return self._put("month", value)

    def nb_dev_dn(self, value: int) -> BollingerBandsQuery:
        return self._put("nbdevdn", value)

    def nb_dev_up(self, value: int) -> BollingerBandsQuery:
        return self._put("nbdevup", value)


@dataclass(slots=True)
class BollingerBandsRow:
    """CSV row of ``BBANDS``."""

    time: str = csv_column("time", "")
    real_lower_band: float = csv_column("Real Lower Band", 0.0)
    real_middle_band: float = csv_column("Real Middle Band", 0.0)
    real_upper_band: float = csv_column("Real Upper Band", 0.0)


class MidpointQuery(Query):
    """Midpoint of the highest and lowest value."""

    function = "MIDPOINT"
    required = ("interval", "series_type", "symbol", "time_period")
    optional = ("datatype", "month")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
        "series_type": SeriesType,
    }

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        series_type: SeriesType | str,
        symbol: str,
        time_period: int,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)
        self._put("time_period", time_period)

    def data_type(self, value: DataType | str) -> MidpointQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> MidpointQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> MidpointQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> MidpointQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> MidpointQuery:
        return self._put("month", value)


@dataclass(slots=True)
class MidpointRow:
    """CSV row of ``MIDPOINT``."""

    time: str = csv_column("time", "")
    value: float = csv_column("MIDPOINT", 0.0)


class MidpriceQuery(Query):
    """Midpoint of the highest high and lowest low."""

    function = "MIDPRICE"
    required = ("interval", "symbol", "time_period")
    optional = ("datatype", "month")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
    }

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        symbol: str,
        time_period: int,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)
        self._put("time_period", time_period)

    def data_type(self, value: DataType | str) -> MidpriceQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> MidpriceQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> MidpriceQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> MidpriceQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> MidpriceQuery:
        return self._put("month", value)


@dataclass(slots=True)
class MidpriceRow:
    """CSV row of ``MIDPRICE``."""

    time: str = csv_column("time", "")
    value: float = csv_column("MIDPRICE", 0.0)


class NormalizedAverageTrueRangeQuery(Query):
    """Normalized average true range."""

    function = "NATR"
    required = ("interval", "symbol", "time_period")
    optional = ("datatype", "month")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
    }

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        symbol: str,
        time_period: int,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)
        self._put("time_period", time_period)

    def data_type(self, value: DataType | str) -> NormalizedAverageTrueRangeQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> NormalizedAverageTrueRangeQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> NormalizedAverageTrueRangeQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> NormalizedAverageTrueRangeQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> NormalizedAverageTrueRangeQuery:
        return self._put("month", value)


@dataclass(slots=True)
class NormalizedAverageTrueRangeRow:
    """CSV row of ``NATR``."""

    time: str = csv_column("time", "")
    value: float = csv_column("NATR", 0.0)


class ParabolicSarQuery(Query):
    """Parabolic SAR."""

    function = "SAR"
    required = ("interval", "symbol")
    optional = ("acceleration", "datatype", "maximum", "month")
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

    def acceleration(self, value: float) -> ParabolicSarQuery:
        return self._put("acceleration", value)

    def acceleration_string(self, value: str) -> ParabolicSarQuery:
        return self._put("acceleration", value)

    def data_type(self, value: DataType | str) -> ParabolicSarQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> ParabolicSarQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> ParabolicSarQuery:
        return self._put("datatype", "csv")

    def maximum(self, value: float) -> ParabolicSarQuery:
        return self._put("maximum", value)

    def maximum_string(self, value: str) -> ParabolicSarQuery:
        return self._put("maximum", value)

    def month(self, value: date) -> ParabolicSarQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> ParabolicSarQuery:
        return self._put("month", value)


@dataclass(slots=True)
class ParabolicSarRow:
    """CSV row of ``SAR``."""

    time: str = csv_column("time", "")
    value: float = csv_column("SAR", 0.0)


class TrueRangeQuery(Query):
    """True range."""

    function = "TRANGE"
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

    def data_type(self, value: DataType | str) -> TrueRangeQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TrueRangeQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TrueRangeQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> TrueRangeQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> TrueRangeQuery:
        return self._put("month", value)


@dataclass(slots=True)
class TrueRangeRow:
    """CSV row of ``TRANGE``."""

    time: str = csv_column("time", "")
    value: float = csv_column("TRANGE", 0.0)


__all__ = [
    "AverageTrueRangeQuery",
    "AverageTrueRangeRow",
    "BollingerBandsQuery",
    "BollingerBandsRow",
    "MidpointQuery",
    "MidpointRow",
    "MidpriceQuery",
    "MidpriceRow",
    "NormalizedAverageTrueRangeQuery",
    "NormalizedAverageTrueRangeRow",
    "ParabolicSarQuery",
    "ParabolicSarRow",
    "TrueRangeQuery",
    "TrueRangeRow",
]
