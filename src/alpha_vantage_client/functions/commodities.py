# AUTO-GENERATED FROM specification/functions/commodities.json. DO NOT EDIT.

"""Query types and CSV rows for the ``commodities`` function group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.csv_decoder import csv_column
from ..query.base import Query
from ..query.enums import (
    DailyWeeklyMonthlyInterval,
    DataType,
    MonthlyQuarterlyAnnualInterval,
)


class AllCommoditiesQuery(Query):
    """Global price index of all commodities."""

    function = "ALL_COMMODITIES"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": MonthlyQuarterlyAnnualInterval,
    }

    def data_type(self, value: DataType | str) -> AllCommoditiesQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> AllCommoditiesQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> AllCommoditiesQuery:
        return self._put("datatype", "csv")

    def interval(self, value: MonthlyQuarterlyAnnualInterval | str) -> AllCommoditiesQuery:
        return self._put("interval", value)

    def interval_monthly(self) -> AllCommoditiesQuery:
        return self._put("interval", "monthly")

    def interval_quarterly(self) -> AllCommoditiesQuery:
        return self._put("interval", "quarterly")

    def interval_annual(self) -> AllCommoditiesQuery:
        return self._put("interval", "annual")


@dataclass(slots=True)
class AllCommoditiesRow:
    """CSV row of ``ALL_COMMODITIES``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class AluminumQuery(Query):
    """Global price of aluminum."""

    function = "ALUMINUM"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": MonthlyQuarterlyAnnualInterval,
    }

    def data_type(self, value: DataType | str) -> AluminumQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> AluminumQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> AluminumQuery:
        return self._put("datatype", "csv")

    def interval(self, value: MonthlyQuarterlyAnnualInterval | str) -> AluminumQuery:
        return self._put("interval", value)

    def interval_monthly(self) -> AluminumQuery:
        return self._put("interval", "monthly")

    def interval_quarterly(self) -> AluminumQuery:
        return self._put("interval", "quarterly")

    def interval_annual(self) -> AluminumQuery:
        return self._put("interval", "annual")


@dataclass(slots=True)
class AluminumRow:
    """CSV row of ``ALUMINUM``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class CoffeeQuery(Query):
    """Global price of coffee."""

    function = "COFFEE"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": MonthlyQuarterlyAnnualInterval,
    }

    def data_type(self, value: DataType | str) -> CoffeeQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> CoffeeQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> CoffeeQuery:
        return self._put("datatype", "csv")

    def interval(self, value: MonthlyQuarterlyAnnualInterval | str) -> CoffeeQuery:
        return self._put("interval", value)

    def interval_monthly(self) -> CoffeeQuery:
        return self._put("interval", "monthly")

    def interval_quarterly(self) -> CoffeeQuery:
        return self._put("interval", "quarterly")

    def interval_annual(self) -> CoffeeQuery:
        return self._put("interval", "annual")


@dataclass(slots=True)
class CoffeeRow:
    """CSV row of ``COFFEE``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class CopperQuery(Query):
    """Global price of copper."""

    function = "COPPER"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": MonthlyQuarterlyAnnualInterval,
    }

    def data_type(self, value: DataType | str) -> CopperQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> CopperQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> CopperQuery:
        return self._put("datatype", "csv")

    def interval(self, value: MonthlyQuarterlyAnnualInterval | str) -> CopperQuery:
        return self._put("interval", value)

    def interval_monthly(self) -> CopperQuery:
        return self._put("interval", "monthly")

    def interval_quarterly(self) -> CopperQuery:
        return self._put("interval", "quarterly")

    def interval_annual(self) -> CopperQuery:
        return self._put("interval", "annual")


@dataclass(slots=True)
class CopperRow:
    """CSV row of ``COPPER``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class CornQuery(Query):
    """Global price of corn."""

    function = "CORN"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": MonthlyQuarterlyAnnualInterval,
    }

    def data_type(self, value: DataType | str) -> CornQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> CornQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> CornQuery:
        return self._put("datatype", "csv")

    def interval(self, value: MonthlyQuarterlyAnnualInterval | str) -> CornQuery:
        return self._put("interval", value)

    def interval_monthly(self) -> CornQuery:
        return self._put("interval", "monthly")

    def interval_quarterly(self) -> CornQuery:
        return self._put("interval", "quarterly")

    def interval_annual(self) -> CornQuery:
        return self._put("interval", "annual")


@dataclass(slots=True)
class CornRow:
    """CSV row of ``CORN``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class CottonQuery(Query):
    """Global price of cotton."""

    function = "COTTON"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": MonthlyQuarterlyAnnualInterval,
    }

    def data_type(self, value: DataType | str) -> CottonQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> CottonQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> CottonQuery:
        return self._put("datatype", "csv")

    def interval(self, value: MonthlyQuarterlyAnnualInterval | str) -> CottonQuery:
        return self._put("interval", value)

    def interval_monthly(self) -> CottonQuery:
        return self._put("interval", "monthly")

    def interval_quarterly(self) -> CottonQuery:
        return self._put("interval", "quarterly")

    def interval_annual(self) -> CottonQuery:
        return self._put("interval", "annual")


@dataclass(slots=True)
class CottonRow:
    """CSV row of ``COTTON``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class CrudeOilBrentQuery(Query):
    """Brent crude oil prices."""

    function = "BRENT"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": DailyWeeklyMonthlyInterval,
    }

    def data_type(self, value: DataType | str) -> CrudeOilBrentQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> CrudeOilBrentQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> CrudeOilBrentQuery:
        return self._put("datatype", "csv")

    def interval(self, value: DailyWeeklyMonthlyInterval | str) -> CrudeOilBrentQuery:
        return self._put("interval", value)

    def interval_daily(self) -> CrudeOilBrentQuery:
        return self._put("interval", "daily")

    def interval_weekly(self) -> CrudeOilBrentQuery:
        return self._put("interval", "weekly")

    def interval_monthly(self) -> CrudeOilBrentQuery:
        return self._put("interval", "monthly")


@dataclass(slots=True)
class CrudeOilBrentRow:
    """CSV row of ``BRENT``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class CrudeOilWtiQuery(Query):
    """West Texas Intermediate crude oil prices."""

    function = "WTI"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": DailyWeeklyMonthlyInterval,
    }

    def data_type(self, value: DataType | str) -> CrudeOilWtiQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> CrudeOilWtiQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> CrudeOilWtiQuery:
        return self._put("datatype", "csv")

    def interval(self, value: DailyWeeklyMonthlyInterval | str) -> CrudeOilWtiQuery:
        return self._put("interval", value)

    def interval_daily(self) -> CrudeOilWtiQuery:
        return self._put("interval", "daily")

    def interval_weekly(self) -> CrudeOilWtiQuery:
        return self._put("interval", "weekly")

    def interval_monthly(self) -> CrudeOilWtiQuery:
        return self._put("interval", "monthly")


@dataclass(slots=True)
class CrudeOilWtiRow:
    """CSV row of ``WTI``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class NaturalGasQuery(Query):
    """Henry Hub natural gas spot prices."""

    function = "NATURAL_GAS"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": DailyWeeklyMonthlyInterval,
    }

    def data_type(self, value: DataType | str) -> NaturalGasQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> NaturalGasQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> NaturalGasQuery:
        return self._put("datatype", "csv")

    def interval(self, value: DailyWeeklyMonthlyInterval | str) -> NaturalGasQuery:
        return self._put("interval", value)

    def interval_daily(self) -> NaturalGasQuery:
        return self._put("interval", "daily")

    def interval_weekly(self) -> NaturalGasQuery:
        return self._put("interval", "weekly")

    def interval_monthly(self) -> NaturalGasQuery:
        return self._put("interval", "monthly")


@dataclass(slots=True)
class NaturalGasRow:
    """CSV row of ``NATURAL_GAS``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class SugarQuery(Query):
    """Global price of sugar."""

    function = "SUGAR"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": MonthlyQuarterlyAnnualInterval,
    }

    def data_type(self, value: DataType | str) -> SugarQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> SugarQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> SugarQuery:
        return self._put("datatype", "csv")

    def interval(self, value: MonthlyQuarterlyAnnualInterval | str) -> SugarQuery:
        return self._put("interval", value)

    def interval_monthly(self) -> SugarQuery:
        return self._put("interval", "monthly")

    def interval_quarterly(self) -> SugarQuery:
        return self._put("interval", "quarterly")

    def interval_annual(self) -> SugarQuery:
        return self._put("interval", "annual")


@dataclass(slots=True)
class SugarRow:
    """CSV row of ``SUGAR``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class WheatQuery(Query):
    """Global price of wheat."""

    function = "WHEAT"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": MonthlyQuarterlyAnnualInterval,
    }

    def data_type(self, value: DataType | str) -> WheatQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> WheatQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> WheatQuery:
        return self._put("datatype", "csv")

    def interval(self, value: MonthlyQuarterlyAnnualInterval | str) -> WheatQuery:
        return self._put("interval", value)

    def interval_monthly(self) -> WheatQuery:
        return self._put("interval", "monthly")

    def interval_quarterly(self) -> WheatQuery:
        return self._put("interval", "quarterly")

    def interval_annual(self) -> WheatQuery:
        return self._put("interval", "annual")


@dataclass(slots=True)
class WheatRow:
    """CSV row of ``WHEAT``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


__all__ = [
    "AllCommoditiesQuery",
    "AllCommoditiesRow",
    "AluminumQuery",
    "AluminumRow",
    "CoffeeQuery",
    "CoffeeRow",
    "CopperQuery",
    "CopperRow",
    "CornQuery",
    "CornRow",
    "CottonQuery",
    "CottonRow",
    "CrudeOilBrentQuery",
    "CrudeOilBrentRow",
    "CrudeOilWtiQuery",
    "CrudeOilWtiRow",
    "NaturalGasQuery",
    "NaturalGasRow",
    "SugarQuery",
    "SugarRow",
    "WheatQuery",
    "WheatRow",
]
