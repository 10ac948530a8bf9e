# AUTO-GENERATED FROM specification/functions/technical_oscillators.json. DO NOT EDIT.

"""Query types and CSV rows for the ``technical_oscillators`` function group."""

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


class AbsolutePriceOscillatorQuery(Query):
    """Absolute price oscillator."""

    function = "APO"
    required = ("interval", "series_type", "symbol")
    optional = ("datatype", "fastperiod", "matype", "month", "slowperiod")
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
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> AbsolutePriceOscillatorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> AbsolutePriceOscillatorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> AbsolutePriceOscillatorQuery:
        return self._put("datatype", "csv")

    def fast_period(self, value: int) -> AbsolutePriceOscillatorQuery:
        return self._put("fastperiod", value)

    def ma_type(self, value: MovingAverageType | int) -> AbsolutePriceOscillatorQuery:
        return self._put("matype", value)

    def month(self, value: date) -> AbsolutePriceOscillatorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> AbsolutePriceOscillatorQuery:
        return self._put("month", value)

    def slow_period(self, value: int) -> AbsolutePriceOscillatorQuery:
        return self._put("slowperiod", value)


@dataclass(slots=True)
class AbsolutePriceOscillatorRow:
    """CSV row of ``APO``."""

    time: str = csv_column("time", "")
    value: float = csv_column("APO", 0.0)


class AroonQuery(Query):
    """Aroon indicator."""

    function = "AROON"
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

    def data_type(self, value: DataType | str) -> AroonQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> AroonQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> AroonQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> AroonQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> AroonQuery:
        return self._put("month", value)


@dataclass(slots=True)
class AroonRow:
    """CSV row of ``AROON``."""

    time: str = csv_column("time", "")
    aroon_down: float = csv_column("Aroon Down", 0.0)
    aroon_up: float = csv_column("Aroon Up", 0.0)


class AroonOscillatorQuery(Query):
    """Aroon oscillator."""

    function = "AROONOSC"
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

    def data_type(self, value: DataType | str) -> AroonOscillatorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> AroonOscillatorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> AroonOscillatorQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> AroonOscillatorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> AroonOscillatorQuery:
        return self._put("month", value)


@dataclass(slots=True)
class AroonOscillatorRow:
    """CSV row of ``AROONOSC``."""

    time: str = csv_column("time", "")
    value: float = csv_column("AROONOSC", 0.0)


class AverageDirectionalMovementIndexQuery(Query):
    """Average directional movement index."""

    function = "ADX"
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

    def data_type(self, value: DataType | str) -> AverageDirectionalMovementIndexQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> AverageDirectionalMovementIndexQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> AverageDirectionalMovementIndexQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> AverageDirectionalMovementIndexQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> AverageDirectionalMovementIndexQuery:
        return self._put("month", value)


@dataclass(slots=True)
class AverageDirectionalMovementIndexRow:
    """CSV row of ``ADX``."""

    time: str = csv_column("time", "")
    value: float = csv_column("ADX", 0.0)


class AverageDirectionalMovementIndexRatingQuery(Query):
    """Average directional movement index rating."""

    function = "ADXR"
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

    def data_type(self, value: DataType | str) -> AverageDirectionalMovementIndexRatingQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> AverageDirectionalMovementIndexRatingQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> AverageDirectionalMovementIndexRatingQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> AverageDirectionalMovementIndexRatingQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> AverageDirectionalMovementIndexRatingQuery:
        return self._put("month", value)


@dataclass(slots=True)
class AverageDirectionalMovementIndexRatingRow:
    """CSV row of ``ADXR``."""

    time: str = csv_column("time", "")
    value: float = csv_column("ADXR", 0.0)


class BalanceOfPowerQuery(Query):
    """Balance of power."""

    function = "BOP"
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

    def data_type(self, value: DataType | str) -> BalanceOfPowerQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> BalanceOfPowerQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> BalanceOfPowerQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> BalanceOfPowerQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> BalanceOfPowerQuery:
        return self._put("month", value)


@dataclass(slots=True)
class BalanceOfPowerRow:
    """CSV row of ``BOP``."""

    time: str = csv_column("time", "")
    value: float = csv_column("BOP", 0.0)


class ChandeMomentumOscillatorQuery(Query):
    """Chande momentum oscillator."""

    function = "CMO"
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

    def data_type(self, value: DataType | str) -> ChandeMomentumOscillatorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> ChandeMomentumOscillatorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> ChandeMomentumOscillatorQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> ChandeMomentumOscillatorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> ChandeMomentumOscillatorQuery:
        return self._put("month", value)


@dataclass(slots=True)
class ChandeMomentumOscillatorRow:
    """CSV row of ``CMO``."""

    time: str = csv_column("time", "")
    value: float = csv_column("CMO", 0.0)


class CommodityChannelIndexQuery(Query):
    """Commodity channel index."""

    function = "CCI"
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

    def data_type(self, value: DataType | str) -> CommodityChannelIndexQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> CommodityChannelIndexQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> CommodityChannelIndexQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> CommodityChannelIndexQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> CommodityChannelIndexQuery:
        return self._put("month", value)


@dataclass(slots=True)
class CommodityChannelIndexRow:
    """CSV row of ``CCI``."""

    time: str = csv_column("time", "")
    value: float = csv_column("CCI", 0.0)


class DirectionalMovementIndexQuery(Query):
    """Directional movement index."""

    function = "DX"
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

    def data_type(self, value: DataType | str) -> DirectionalMovementIndexQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> DirectionalMovementIndexQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> DirectionalMovementIndexQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> DirectionalMovementIndexQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> DirectionalMovementIndexQuery:
        return self._put("month", value)


@dataclass(slots=True)
class DirectionalMovementIndexRow:
    """CSV row of ``DX``."""

    time: str = csv_column("time", "")
    value: float = csv_column("DX", 0.0)


class MinusDirectionalIndicatorQuery(Query):
    """Minus directional indicator."""

    function = "MINUS_DI"
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

    def data_type(self, value: DataType | str) -> MinusDirectionalIndicatorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> MinusDirectionalIndicatorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> MinusDirectionalIndicatorQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> MinusDirectionalIndicatorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> MinusDirectionalIndicatorQuery:
        return self._put("month", value)


@dataclass(slots=True)
class MinusDirectionalIndicatorRow:
    """CSV row of ``MINUS_DI``."""

    time: str = csv_column("time", "")
    value: float = csv_column("MINUS_DI", 0.0)


class MinusDirectionalMovementQuery(Query):
    """Minus directional movement."""

    function = "MINUS_DM"
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

    def data_type(self, value: DataType | str) -> MinusDirectionalMovementQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> MinusDirectionalMovementQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> MinusDirectionalMovementQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> MinusDirectionalMovementQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> MinusDirectionalMovementQuery:
        return self._put("month", value)


@dataclass(slots=True)
class MinusDirectionalMovementRow:
    """CSV row of ``MINUS_DM``."""

    time: str = csv_column("time", "")
    value: float = csv_column("MINUS_DM", 0.0)


class MomentumQuery(Query):
    """Momentum."""

    function = "MOM"
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

    def data_type(self, value: DataType | str) -> MomentumQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> MomentumQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> MomentumQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> MomentumQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> MomentumQuery:
        return self._put("month", value)


@dataclass(slots=True)
class MomentumRow:
    """CSV row of ``MOM``."""

    time: str = csv_column("time", "")
    value: float = csv_column("MOM", 0.0)


class MoneyFlowIndexQuery(Query):
    """Money flow index."""

    function = "MFI"
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

    def data_type(self, value: DataType | str) -> MoneyFlowIndexQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> MoneyFlowIndexQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> MoneyFlowIndexQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> MoneyFlowIndexQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> MoneyFlowIndexQuery:
        return self._put("month", value)


@dataclass(slots=True)
class MoneyFlowIndexRow:
    """CSV row of ``MFI``."""

    time: str = csv_column("time", "")
    value: float = csv_column("MFI", 0.0)


class MovingAverageConvergenceDivergenceQuery(Query):
    """Moving average convergence divergence."""

    function = "MACD"
    required = ("interval", "series_type", "symbol")
    optional = ("datatype", "fastperiod", "month", "signalperiod", "slowperiod")
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

    def data_type(self, value: DataType | str) -> MovingAverageConvergenceDivergenceQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> MovingAverageConvergenceDivergenceQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> MovingAverageConvergenceDivergenceQuery:
        return self._put("datatype", "csv")

    def fast_period(self, value: int) -> MovingAverageConvergenceDivergenceQuery:
        return self._put("fastperiod", value)

    def month(self, value: date) -> MovingAverageConvergenceDivergenceQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> MovingAverageConvergenceDivergenceQuery:
        return self._put("month", value)

    def signal_period(self, value: int) -> MovingAverageConvergenceDivergenceQuery:
        return self._put("signalperiod", value)

    def slow_period(self, value: int) -> MovingAverageConvergenceDivergenceQuery:
        return self._put("slowperiod", value)


@dataclass(slots=True)
class MovingAverageConvergenceDivergenceRow:
    """CSV row of ``MACD``."""

    time: str = csv_column("time", "")
    macd: float = csv_column("MACD", 0.0)
    macd_hist: float = csv_column("MACD_Hist", 0.0)
    macd_signal: float = csv_column("MACD_Signal", 0.0)


class MovingAverageConvergenceDivergenceExtendedQuery(Query):
    """MACD with controllable moving average types."""

    function = "MACDEXT"
    required = ("interval", "series_type", "symbol")
    optional = ("datatype", "fastmatype", "fastperiod", "month", "signalmatype", "signalperiod", "slowmatype", "slowperiod")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
        "series_type": SeriesType,
    }
    ma_types = ("fastmatype", "signalmatype", "slowmatype")

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

    def data_type(self, value: DataType | str) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("datatype", "csv")

    def fast_ma_type(self, value: MovingAverageType | int) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("fastmatype", value)

    def fast_period(self, value: int) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("fastperiod", value)

    def month(self, value: date) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("month", value)

    def signal_ma_type(self, value: MovingAverageType | int) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("signalmatype", value)

    def signal_period(self, value: int) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("signalperiod", value)

    def slow_ma_type(self, value: MovingAverageType | int) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("slowmatype", value)

    def slow_period(self, value: int) -> MovingAverageConvergenceDivergenceExtendedQuery:
        return self._put("slowperiod", value)


@dataclass(slots=True)
class MovingAverageConvergenceDivergenceExtendedRow:
    """CSV row of ``MACDEXT``."""

    time: str = csv_column("time", "")
    macd: float = csv_column("MACD", 0.0)
    macd_hist: float = csv_column("MACD_Hist", 0.0)
    macd_signal: float = csv_column("MACD_Signal", 0.0)


class PercentagePriceOscillatorQuery(Query):
    """Percentage price oscillator."""

    function = "PPO"
    required = ("interval", "series_type", "symbol")
    optional = ("datatype", "fastperiod", "matype", "month", "slowperiod")
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
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("series_type", series_type)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> PercentagePriceOscillatorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> PercentagePriceOscillatorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> PercentagePriceOscillatorQuery:
        return self._put("datatype", "csv")

    def fast_period(self, value: int) -> PercentagePriceOscillatorQuery:
        return self._put("fastperiod", value)

    def ma_type(self, value: MovingAverageType | int) -> PercentagePriceOscillatorQuery:
        return self._put("matype", value)

    def month(self, value: date) -> PercentagePriceOscillatorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> PercentagePriceOscillatorQuery:
        return self._put("month", value)

    def slow_period(self, value: int) -> PercentagePriceOscillatorQuery:
        return self._put("slowperiod", value)


@dataclass(slots=True)
class PercentagePriceOscillatorRow:
    """CSV row of ``PPO``."""

    time: str = csv_column("time", "")
    value: float = csv_column("PPO", 0.0)


class PlusDirectionalIndicatorQuery(Query):
    """Plus directional indicator."""

    function = "PLUS_DI"
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

    def data_type(self, value: DataType | str) -> PlusDirectionalIndicatorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> PlusDirectionalIndicatorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> PlusDirectionalIndicatorQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> PlusDirectionalIndicatorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> PlusDirectionalIndicatorQuery:
        return self._put("month", value)


@dataclass(slots=True)
class PlusDirectionalIndicatorRow:
    """CSV row of ``PLUS_DI``."""

    time: str = csv_column("time", "")
    value: float = csv_column("PLUS_DI", 0.0)


class PlusDirectionalMovementQuery(Query):
    """Plus directional movement."""

    function = "PLUS_DM"
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

    def data_type(self, value: DataType | str) -> PlusDirectionalMovementQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> PlusDirectionalMovementQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> PlusDirectionalMovementQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> PlusDirectionalMovementQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> PlusDirectionalMovementQuery:
        return self._put("month", value)


@dataclass(slots=True)
class PlusDirectionalMovementRow:
    """CSV row of ``PLUS_DM``."""

    time: str = csv_column("time", "")
    value: float = csv_column("PLUS_DM", 0.0)


class RateOfChangeQuery(Query):
    """Rate of change."""

    function = "ROC"
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

    def data_type(self, value: DataType | str) -> RateOfChangeQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> RateOfChangeQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> RateOfChangeQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> RateOfChangeQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> RateOfChangeQuery:
        return self._put("month", value)


@dataclass(slots=True)
class RateOfChangeRow:
    """CSV row of ``ROC``."""

    time: str = csv_column("time", "")
    value: float = csv_column("ROC", 0.0)


class RateOfChangeRatioQuery(Query):
    """Rate of change ratio."""

    function = "ROCR"
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

    def data_type(self, value: DataType | str) -> RateOfChangeRatioQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> RateOfChangeRatioQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> RateOfChangeRatioQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> RateOfChangeRatioQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> RateOfChangeRatioQuery:
        return self._put("month", value)


@dataclass(slots=True)
class RateOfChangeRatioRow:
    """CSV row of ``ROCR``."""

    time: str = csv_column("time", "")
    value: float = csv_column("ROCR", 0.0)


class RelativeStrengthIndexQuery(Query):
    """Relative strength index."""

    function = "RSI"
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

    def data_type(self, value: DataType | str) -> RelativeStrengthIndexQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> RelativeStrengthIndexQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> RelativeStrengthIndexQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> RelativeStrengthIndexQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> RelativeStrengthIndexQuery:
        return self._put("month", value)


@dataclass(slots=True)
class RelativeStrengthIndexRow:
    """CSV row of ``RSI``."""

    time: str = csv_column("time", "")
    value: float = csv_column("RSI", 0.0)


class StochasticFastQuery(Query):
    """Stochastic fast oscillator."""

    function = "STOCHF"
    required = ("interval", "symbol")
    optional = ("datatype", "fastdmatype", "fastdperiod", "fastkperiod", "month")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
    }
    ma_types = ("fastdmatype",)

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> StochasticFastQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> StochasticFastQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> StochasticFastQuery:
        return self._put("datatype", "csv")

    def fast_d_ma_type(self, value: MovingAverageType | int) -> StochasticFastQuery:
        return self._put("fastdmatype", value)

    def fast_d_period(self, value: int) -> StochasticFastQuery:
        return self._put("fastdperiod", value)

    def fast_k_period(self, value: int) -> StochasticFastQuery:
        return self._put("fastkperiod", value)

    def month(self, value: date) -> StochasticFastQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> StochasticFastQuery:
        return self._put("month", value)


@dataclass(slots=True)
class StochasticFastRow:
    """CSV row of ``STOCHF``."""

    time: str = csv_column("time", "")
    fast_k: float = csv_column("FastK", 0.0)
    fast_d: float = csv_column("FastD", 0.0)


class StochasticOscillatorQuery(Query):
    """Stochastic oscillator."""

    function = "STOCH"
    required = ("interval", "symbol")
    optional = ("datatype", "fastkperiod", "month", "slowdmatype", "slowdperiod", "slowkmatype", "slowkperiod")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
    }
    ma_types = ("slowdmatype", "slowkmatype")

    def __init__(
        self,
        interval: IntradayDailyWeeklyMonthlyInterval | str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("interval", interval)
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> StochasticOscillatorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> StochasticOscillatorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> StochasticOscillatorQuery:
        return self._put("datatype", "csv")

    def fast_k_period(self, value: int) -> StochasticOscillatorQuery:
        return self._put("fastkperiod", value)

    def month(self, value: date) -> StochasticOscillatorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> StochasticOscillatorQuery:
        return self._put("month", value)

    def slow_d_ma_type(self, value: MovingAverageType | int) -> StochasticOscillatorQuery:
        return self._put("slowdmatype", value)

    def slow_d_period(self, value: int) -> StochasticOscillatorQuery:
        return self._put("slowdperiod", value)

    def slow_k_ma_type(self, value: MovingAverageType | int) -> StochasticOscillatorQuery:
        return self._put("slowkmatype", value)

    def slow_k_period(self, value: int) -> StochasticOscillatorQuery:
        return self._put("slowkperiod", value)


@dataclass(slots=True)
class StochasticOscillatorRow:
    """CSV row of ``STOCH``."""

    time: str = csv_column("time", "")
    slow_k: float = csv_column("SlowK", 0.0)
    slow_d: float = csv_column("SlowD", 0.0)


class StochasticRelativeStrengthIndexQuery(Query):
    """Stochastic relative strength index."""

    function = "STOCHRSI"
    required = ("interval", "series_type", "symbol", "time_period")
    optional = ("datatype", "fastdmatype", "fastdperiod", "fastkperiod", "month")
    enums = {
        "datatype": DataType,
        "interval": IntradayDailyWeeklyMonthlyInterval,
        "series_type": SeriesType,
    }
    ma_types = ("fastdmatype",)

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

    def data_type(self, value: DataType | str) -> StochasticRelativeStrengthIndexQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> StochasticRelativeStrengthIndexQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> StochasticRelativeStrengthIndexQuery:
        return self._put("datatype", "csv")

    def fast_d_ma_type(self, value: MovingAverageType | int) -> StochasticRelativeStrengthIndexQuery:
        return self._put("fastdmatype", value)

    def fast_d_period(self, value: int) -> StochasticRelativeStrengthIndexQuery:
        return self._put("fastdperiod", value)

    def fast_k_period(self, value: int) -> StochasticRelativeStrengthIndexQuery:
        return self._put("fastkperiod", value)

    def month(self, value: date) -> StochasticRelativeStrengthIndexQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> StochasticRelativeStrengthIndexQuery:
        return self._put("month", value)


@dataclass(slots=True)
class StochasticRelativeStrengthIndexRow:
    """CSV row of ``STOCHRSI``."""

    time: str = csv_column("time", "")
    fast_k: float = csv_column("FastK", 0.0)
    fast_d: float = csv_column("FastD", 0.0)


class TrixQuery(Query):
    """One-day rate of change of a triple smooth EMA."""

    function = "TRIX"
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

    def data_type(self, value: DataType | str) -> TrixQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TrixQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TrixQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> TrixQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> TrixQuery:
        return self._put("month", value)


@dataclass(slots=True)
class TrixRow:
    """CSV row of ``TRIX``."""

    time: str = csv_column("time", "")
    value: float = csv_column("TRIX", 0.0)


class UltimateOscillatorQuery(Query):
    """Ultimate oscillator."""

    function = "ULTOSC"
    required = ("interval", "symbol")
    optional = ("datatype", "month", "timeperiod1", "timeperiod2", "timeperiod3")
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

    def data_type(self, value: DataType | str) -> UltimateOscillatorQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> UltimateOscillatorQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> UltimateOscillatorQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> UltimateOscillatorQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> UltimateOscillatorQuery:
        return self._put("month", value)

    def time_period_1(self, value: int) -> UltimateOscillatorQuery:
        return self._put("timeperiod1", value)

    def time_period_2(self, value: int) -> UltimateOscillatorQuery:
        return self._put("timeperiod2", value)

    def time_period_3(self, value: int) -> UltimateOscillatorQuery:
        return self._put("timeperiod3", value)


@dataclass(slots=True)
class UltimateOscillatorRow:
    """CSV row of ``ULTOSC``."""

    time: str = csv_column("time", "")
    value: float = csv_column("ULTOSC", 0.0)


class WilliamsPercentRangeQuery(Query):
    """Williams' %R."""

    function = "WILLR"
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

    def data_type(self, value: DataType | str) -> WilliamsPercentRangeQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> WilliamsPercentRangeQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> WilliamsPercentRangeQuery:
        return self._put("datatype", "csv")

    def month(self, value: date) -> WilliamsPercentRangeQuery:
        return self._put_time("month", value, "%Y-%m")

    def month_string(self, value: str) -> WilliamsPercentRangeQuery:
        return self._put("month", value)


@dataclass(slots=True)
class WilliamsPercentRangeRow:
    """CSV row of ``WILLR``."""

    time: str = csv_column("time", "")
    value: float = csv_column("WILLR", 0.0)


__all__ = [
    "AbsolutePriceOscillatorQuery",
    "AbsolutePriceOscillatorRow",
    "AroonQuery",
    "AroonRow",
    "AroonOscillatorQuery",
    "AroonOscillatorRow",
    "AverageDirectionalMovementIndexQuery",
    "AverageDirectionalMovementIndexRow",
    "AverageDirectionalMovementIndexRatingQuery",
    "AverageDirectionalMovementIndexRatingRow",
    "BalanceOfPowerQuery",
    "BalanceOfPowerRow",
    "ChandeMomentumOscillatorQuery",
    "ChandeMomentumOscillatorRow",
    "CommodityChannelIndexQuery",
    "CommodityChannelIndexRow",
    "DirectionalMovementIndexQuery",
    "DirectionalMovementIndexRow",
    "MinusDirectionalIndicatorQuery",
    "MinusDirectionalIndicatorRow",
    "MinusDirectionalMovementQuery",
    "MinusDirectionalMovementRow",
    "MomentumQuery",
    "MomentumRow",
    "MoneyFlowIndexQuery",
    "MoneyFlowIndexRow",
    "MovingAverageConvergenceDivergenceQuery",
    "MovingAverageConvergenceDivergenceRow",
    "MovingAverageConvergenceDivergenceExtendedQuery",
    "MovingAverageConvergenceDivergenceExtendedRow",
    "PercentagePriceOscillatorQuery",
    "PercentagePriceOscillatorRow",
    "PlusDirectionalIndicatorQuery",
    "PlusDirectionalIndicatorRow",
    "PlusDirectionalMovementQuery",
    "PlusDirectionalMovementRow",
    "RateOfChangeQuery",
    "RateOfChangeRow",
    "RateOfChangeRatioQuery",
    "RateOfChangeRatioRow",
    "RelativeStrengthIndexQuery",
    "RelativeStrengthIndexRow",
    "StochasticFastQuery",
    "StochasticFastRow",
    "StochasticOscillatorQuery",
    "StochasticOscillatorRow",
    "StochasticRelativeStrengthIndexQuery",
    "StochasticRelativeStrengthIndexRow",
    "TrixQuery",
    "TrixRow",
    "UltimateOscillatorQuery",
    "UltimateOscillatorRow",
    "WilliamsPercentRangeQuery",
    "WilliamsPercentRangeRow",
]
