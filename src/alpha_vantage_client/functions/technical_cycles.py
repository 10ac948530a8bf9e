# AUTO-GENERATED FROM specification/functions/technical_cycles.json. DO NOT EDIT.

"""Query types and CSV rows for the ``technical_cycles`` function group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.csv_decoder import csv_column
from ..query.base import Query
from ..query.enums import (
    DataType,
    IntradayDailyWeeklyMonthlyInterval,
    SeriesType,
)


class HilbertTransformDominantCyclePeriodQuery(Query):
    """Hilbert transform dominant cycle period."""

    function = "HT_DCPERIOD"
    required = ("interval", "series_type", "symbol")
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
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> HilbertTransformDominantCyclePeriodQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> HilbertTransformDominantCyclePeriodQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> HilbertTransformDominantCyclePeriodQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> HilbertTransformDominantCyclePeriodQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> HilbertTransformDominantCyclePeriodQuery:
        return self._put("month", value)


@dataclass(slots=True)
class HilbertTransformDominantCyclePeriodRow:
    """CSV row of ``HT_DCPERIOD``."""

    time: str = csv_column("time", "")
    value: float = csv_column("DCPERIOD", 0.0)


class HilbertTransformDominantCyclePhaseQuery(Query):
    """Hilbert transform dominant cycle phase."""

    function = "HT_DCPHASE"
    required = ("interval", "series_type", "symbol")
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
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> HilbertTransformDominantCyclePhaseQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> HilbertTransformDominantCyclePhaseQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> HilbertTransformDominantCyclePhaseQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> HilbertTransformDominantCyclePhaseQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> HilbertTransformDominantCyclePhaseQuery:
        return self._put("month", value)


@dataclass(slots=True)
class HilbertTransformDominantCyclePhaseRow:
    """CSV row of ``HT_DCPHASE``."""

    time: str = csv_column("time", "")
    value: float = csv_column("HT_DCPHASE", 0.0)


class HilbertTransformPhasorQuery(Query):
    """Hilbert transform phasor components."""

    function = "HT_PHASOR"
    required = ("interval", "series_type", "symbol")
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
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> HilbertTransformPhasorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> HilbertTransformPhasorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> HilbertTransformPhasorQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> HilbertTransformPhasorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> HilbertTransformPhasorQuery:
        return self._put("month", value)


@dataclass(slots=True)
class HilbertTransformPhasorRow:
    """CSV row of ``HT_PHASOR``."""

    time: str = csv_column("time", "")
    phase: float = csv_column("PHASE", 0.0)
    quadrature: float = csv_column("QUADRATURE", 0.0)


class HilbertTransformSineWaveQuery(Query):
    """Hilbert transform sine wave."""

    function = "HT_SINE"
    required = ("interval", "series_type", "symbol")
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
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> HilbertTransformSineWaveQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> HilbertTransformSineWaveQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> HilbertTransformSineWaveQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> HilbertTransformSineWaveQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> HilbertTransformSineWaveQuery:
        return self._put("month", value)


@dataclass(slots=True)
class HilbertTransformSineWaveRow:
    """CSV row of ``HT_SINE``."""

    time: str = csv_column("time", "")
    lead_sine: float = csv_column("LEAD SINE", 0.0)
    sine: float = csv_column("SINE", 0.0)


class HilbertTransformTrendModeQuery(Query):
    """Hilbert transform trend versus cycle mode."""

    function = "HT_TRENDMODE"
    required = ("interval", "series_type", "symbol")
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
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> HilbertTransformTrendModeQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> HilbertTransformTrendModeQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> HilbertTransformTrendModeQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> HilbertTransformTrendModeQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> HilbertTransformTrendModeQuery:
        return self._put("month", value)


@dataclass(slots=True)
class HilbertTransformTrendModeRow:
    """CSV row of ``HT_TRENDMODE``."""

    time: str = csv_column("time", "")
    value: float = csv_column("TRENDMODE", 0.0)


class HilbertTransformTrendlineQuery(Query):
    """Hilbert transform instantaneous trendline."""

    function = "HT_TRENDLINE"
    required = ("interval", "series_type", "symbol")
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
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> HilbertTransformTrendlineQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> HilbertTransformTrendlineQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> HilbertTransformTrendlineQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> HilbertTransformTrendlineQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> HilbertTransformTrendlineQuery:
        return self._put("month", value)


@dataclass(slots=True)
class HilbertTransformTrendlineRow:
    """CSV row of ``HT_TRENDLINE``."""

    time: str = csv_column("time", "")
    value: float = csv_column("HT_TRENDLINE", 0.0)


__all__ = [
    "HilbertTransformDominantCyclePeriodQuery",
    "HilbertTransformDominantCyclePeriodRow",
    "HilbertTransformDominantCyclePhaseQuery",
    "HilbertTransformDominantCyclePhaseRow",
    "HilbertTransformPhasorQuery",
    "HilbertTransformPhasorRow",
    "HilbertTransformSineWaveQuery",
    "HilbertTransformSineWaveRow",
    "HilbertTransformTrendModeQuery",
    "HilbertTransformTrendModeRow",
    "HilbertTransformTrendlineQuery",
    "HilbertTransformTrendlineRow",
]
