# AUTO-GENERATED FROM specification/functions/technical_moving_averages.json. DO NOT EDIT.

"""Query types and CSV rows for the ``technical_moving_averages`` function group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.csv_decoder import csv_column
from ..query.base import Query
from ..query.enums import (
    DataType,
    IntradayDailyWeeklyMonthlyInterval,
    IntradayInterval,
    SeriesType,
)


class DoubleExponentialMovingAverageQuery(Query):
    """Double exponential moving average."""

    function = "DEMA"
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

    def data_type(self, value: DataType | str) -> DoubleExponentialMovingAverageQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> DoubleExponentialMovingAverageQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> DoubleExponentialMovingAverageQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> DoubleExponentialMovingAverageQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> DoubleExponentialMovingAverageQuery:
        return self._put("month", value)


@dataclass(slots=True)
class DoubleExponentialMovingAverageRow:
    """CSV row of ``DEMA``."""

    time: str = csv_column("time", "")
    value: float = csv_column("DEMA", 0.0)


class ExponentialMovingAverageQuery(Query):
    """Exponential moving average."""

    function = "EMA"
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

    def data_type(self, value: DataType | str) -> ExponentialMovingAverageQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> ExponentialMovingAverageQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> ExponentialMovingAverageQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> ExponentialMovingAverageQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> ExponentialMovingAverageQuery:
        return self._put("month", value)


@dataclass(slots=True)
class ExponentialMovingAverageRow:
    """CSV row of ``EMA``."""

    time: str = csv_column("time", "")
    value: float = csv_column("EMA", 0.0)


class KaufmanAdaptiveMovingAverageQuery(Query):
    """Kaufman adaptive moving average."""

    function = "KAMA"
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

    def data_type(self, value: DataType | str) -> KaufmanAdaptiveMovingAverageQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> KaufmanAdaptiveMovingAverageQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> KaufmanAdaptiveMovingAverageQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> KaufmanAdaptiveMovingAverageQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> KaufmanAdaptiveMovingAverageQuery:
        return self._put("month", value)


@dataclass(slots=True)
class KaufmanAdaptiveMovingAverageRow:
    """CSV row of ``KAMA``."""

    time: str = csv_column("time", "")
    value: float = csv_column("KAMA", 0.0)


class MesaAdaptiveMovingAverageQuery(Query):
    """MESA adaptive moving average."""

    function = "MAMA"
    required = ("interval", "series_type", "symbol")
    optional = ("datatype", "fastlimit", "month", "slowlimit")
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
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> MesaAdaptiveMovingAverageQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> MesaAdaptiveMovingAverageQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> MesaAdaptiveMovingAverageQuery:
        return self._put("datatype", "csv")

    def fast_limit(self, value: float) -> MesaAdaptiveMovingAverageQuery:
        return self._put("fastlimit", value)

    def fast_limit_string(self, value: str) -> MesaAdaptiveMovingAverageQuery:
        return self._put("fastlimit", value)

    def month(self, value: date) -> MesaAdaptiveMovingAverageQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> MesaAdaptiveMovingAverageQuery:
        return self._put("month", value)

    def slow_limit(self, value: float) -> MesaAdaptiveMovingAverageQuery:
        return self._put("slowlimit", value)

    def slow_limit_string(self, value: str) -> MesaAdaptiveMovingAverageQuery:
        return self._put("slowlimit", value)


@dataclass(slots=True)
class MesaAdaptiveMovingAverageRow:
    """CSV row of ``MAMA``."""

    time: str = csv_column("time", "")
    fama: float = csv_column("FAMA", 0.0)
    mama: float = csv_column("MAMA", 0.0)


class SimpleMovingAverageQuery(Query):
    """Simple moving average."""

    function = "SMA"
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

    def data_type(self, value: DataType | str) -> SimpleMovingAverageQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> SimpleMovingAverageQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> SimpleMovingAverageQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> SimpleMovingAverageQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> SimpleMovingAverageQuery:
        return self._put("month", value)


@dataclass(slots=True)
class SimpleMovingAverageRow:
    """CSV row of ``SMA``."""

    time: str = csv_column("time", "")
    value: float = csv_column("SMA", 0.0)


class TillsonT3Query(Query):
    """Tillson T3 triple exponential moving average."""

    function = "T3"
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

    def data_type(self, value: DataType | str) -> TillsonT3Query:
        return self._put("datatype", value)

    def data_type_json(self) -> TillsonT3Query:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TillsonT3Query:
        return self._put("datatype", "csv")

    def month(self, value: date) -> TillsonT3Query:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> TillsonT3Query:
        return self._put("month", value)


@dataclass(slots=True)
class TillsonT3Row:
    """CSV row of ``T3``."""

    time: str = csv_column("time", "")
    value: float = csv_column("T3", 0.0)


class TriangularMovingAverageQuery(Query):
    """Triangular moving average."""

    function = "TRIMA"
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

    def data_type(self, value: DataType | str) -> TriangularMovingAverageQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TriangularMovingAverageQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TriangularMovingAverageQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> TriangularMovingAverageQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> TriangularMovingAverageQuery:
        return self._put("month", value)


@dataclass(slots=True)
class TriangularMovingAverageRow:
    """CSV row of ``TRIMA``."""

    time: str = csv_column("time", "")
    value: float = csv_column("TRIMA", 0.0)


class TripleExponentialMovingAverageQuery(Query):
    """Triple exponential moving average."""

    function = "TEMA"
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

    def data_type(self, value: DataType | str) -> TripleExponentialMovingAverageQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TripleExponentialMovingAverageQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TripleExponentialMovingAverageQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> TripleExponentialMovingAverageQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> TripleExponentialMovingAverageQuery:
        return self._put("month", value)


@dataclass(slots=True)
class TripleExponentialMovingAverageRow:
    """CSV row of ``TEMA``."""

    time: str = csv_column("time", "")
    value: float = csv_column("TEMA", 0.0)


class VolumeWeightedAveragePriceQuery(Query):
    """Volume weighted average price for intraday series."""

    function = "VWAP"
    required = ("interval", "symbol")
    optional = ("datatype", "month")
    enums = {
        "datatype": DataType,
        "interval": IntradayInterval,
    }

    def __init__(
        self,
        interval: IntradayInterval | str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> VolumeWeightedAveragePriceQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> VolumeWeightedAveragePriceQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> VolumeWeightedAveragePriceQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> VolumeWeightedAveragePriceQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> VolumeWeightedAveragePriceQuery:
        return self._put("month", value)


@dataclass(slots=True)
class VolumeWeightedAveragePriceRow:
    """CSV row of ``VWAP``."""

    time: str = csv_column("time", "")
    value: float = csv_column("VWAP", 0.0)


class WeightedMovingAverageQuery(Query):
    """Weighted moving average."""

    function = "WMA"
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

    def data_type(self, value: DataType | str) -> WeightedMovingAverageQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> WeightedMovingAverageQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> WeightedMovingAverageQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> WeightedMovingAverageQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> WeightedMovingAverageQuery:
        return self._put("month", value)


@dataclass(slots=True)
class WeightedMovingAverageRow:
    """CSV row of ``WMA``."""

    time: str = csv_column("time", "")
    value: float = csv_column("WMA", 0.0)


__all__ = [
    "DoubleExponentialMovingAverageQuery",
    "DoubleExponentialMovingAverageRow",
    "ExponentialMovingAverageQuery",
    "ExponentialMovingAverageRow",
    "KaufmanAdaptiveMovingAverageQuery",
    "KaufmanAdaptiveMovingAverageRow",
    "MesaAdaptiveMovingAverageQuery",
    "MesaAdaptiveMovingAverageRow",
    "SimpleMovingAverageQuery",
    "SimpleMovingAverageRow",
    "TillsonT3Query",
    "TillsonT3Row",
    "TriangularMovingAverageQuery",
    "TriangularMovingAverageRow",
    "TripleExponentialMovingAverageQuery",
    "TripleExponentialMovingAverageRow",
    "VolumeWeightedAveragePriceQuery",
    "VolumeWeightedAveragePriceRow",
    "WeightedMovingAverageQuery",
    "WeightedMovingAverageRow",
]
