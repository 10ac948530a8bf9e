# AUTO-GENERATED FROM specification/functions/economic_indicators.json. DO NOT EDIT.

"""Query types and CSV rows for the ``economic_indicators`` function group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.csv_decoder import csv_column
from ..query.base import Query
from ..query.enums import (
    DailyWeeklyMonthlyInterval,
    DataType,
    MonthlySemiannualInterval,
    QuarterlyAnnualInterval,
    TreasuryMaturity,
)


class ConsumerPriceIndexQuery(Query):
    """Consumer price index of the United States."""

    function = "CPI"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": MonthlySemiannualInterval,
    }

    def data_type(self, value: DataType | str) -> ConsumerPriceIndexQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> ConsumerPriceIndexQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> ConsumerPriceIndexQuery:
        return self._put("datatype", "csv")

    def interval(self, value: MonthlySemiannualInterval | str) -> ConsumerPriceIndexQuery:
        return self._put("interval", value)

    def interval_monthly(self) -> ConsumerPriceIndexQuery:
        return self._put("interval", "monthly")

    def interval_semiannual(self) -> ConsumerPriceIndexQuery:
        return self._put("interval", "semiannual")


@dataclass(slots=True)
class ConsumerPriceIndexRow:
    """CSV row of ``CPI``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class DurablesQuery(Query):
    """Monthly manufacturers' new orders of durable goods."""

    function = "DURABLES"
    required = ()
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def data_type(self, value: DataType | str) -> DurablesQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> DurablesQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> DurablesQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class DurablesRow:
    """CSV row of ``DURABLES``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class FederalFundsRateQuery(Query):
    """Federal funds rate of the United States."""

    function = "FEDERAL_FUNDS_RATE"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": DailyWeeklyMonthlyInterval,
    }

    def data_type(self, value: DataType | str) -> FederalFundsRateQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> FederalFundsRateQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> FederalFundsRateQuery:
        return self._put("datatype", "csv")

    def interval(self, value: DailyWeeklyMonthlyInterval | str) -> FederalFundsRateQuery:
        return self._put("interval", value)

    def interval_daily(self) -> FederalFundsRateQuery:
        return self._put("interval", "daily")

    def interval_weekly(self) -> FederalFundsRateQuery:
        return self._put("interval", "weekly")

    def interval_monthly(self) -> FederalFundsRateQuery:
        return self._put("interval", "monthly")


@dataclass(slots=True)
class FederalFundsRateRow:
    """CSV row of ``FEDERAL_FUNDS_RATE``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class InflationQuery(Query):
    """Annual inflation rates of the United States."""

    function = "INFLATION"
    required = ()
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def data_type(self, value: DataType | str) -> InflationQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> InflationQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> InflationQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class InflationRow:
    """CSV row of ``INFLATION``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class NonfarmPayrollQuery(Query):
    """Monthly total nonfarm payroll of the United States."""

    function = "NONFARM_PAYROLL"
    required = ()
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def data_type(self, value: DataType | str) -> NonfarmPayrollQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> NonfarmPayrollQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> NonfarmPayrollQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class NonfarmPayrollRow:
    """CSV row of ``NONFARM_PAYROLL``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class RealGdpQuery(Query):
    """Annual and quarterly real GDP of the United States."""

    function = "REAL_GDP"
    required = ()
    optional = ("datatype", "interval")
    enums = {
        "datatype": DataType,
        "interval": QuarterlyAnnualInterval,
    }

    def data_type(self, value: DataType | str) -> RealGdpQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> RealGdpQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> RealGdpQuery:
        return self._put("datatype", "csv")

    def interval(self, value: QuarterlyAnnualInterval | str) -> RealGdpQuery:
        return self._put("interval", value)

    def interval_quarterly(self) -> RealGdpQuery:
        return self._put("interval", "quarterly")

    def interval_annual(self) -> RealGdpQuery:
        return self._put("interval", "annual")


@dataclass(slots=True)
class RealGdpRow:
    """CSV row of ``REAL_GDP``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class RealGdpPerCapitaQuery(Query):
    """Quarterly real GDP per capita of the United States."""

    function = "REAL_GDP_PER_CAPITA"
    required = ()
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def data_type(self, value: DataType | str) -> RealGdpPerCapitaQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> RealGdpPerCapitaQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> RealGdpPerCapitaQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class RealGdpPerCapitaRow:
    """CSV row of ``REAL_GDP_PER_CAPITA``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class RetailSalesQuery(Query):
    """Monthly advance retail sales of the United States."""

    function = "RETAIL_SALES"
    required = ()
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def data_type(self, value: DataType | str) -> RetailSalesQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> RetailSalesQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> RetailSalesQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class RetailSalesRow:
    """CSV row of ``RETAIL_SALES``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class TreasuryYieldQuery(Query):
    """US treasury yield of a given maturity."""

    function = "TREASURY_YIELD"
    required = ()
    optional = ("datatype", "interval", "maturity")
    enums = {
        "datatype": DataType,
        "interval": DailyWeeklyMonthlyInterval,
        "maturity": TreasuryMaturity,
    }

    def data_type(self, value: DataType | str) -> TreasuryYieldQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> TreasuryYieldQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> TreasuryYieldQuery:
        return self._put("datatype", "csv")

    def interval(self, value: DailyWeeklyMonthlyInterval | str) -> TreasuryYieldQuery:
        return self._put("interval", value)

    def interval_daily(self) -> TreasuryYieldQuery:
        return self._put("interval", "daily")

    def interval_weekly(self) -> TreasuryYieldQuery:
        return self._put("interval", "weekly")

    def interval_monthly(self) -> TreasuryYieldQuery:
        return self._put("interval", "monthly")

    def maturity(self, value: TreasuryMaturity | str) -> TreasuryYieldQuery:
        return self._put("maturity", value)

    def maturity_3month(self) -> TreasuryYieldQuery:
        return self._put("maturity", "3month")

    def maturity_2year(self) -> TreasuryYieldQuery:
        return self._put("maturity", "2year")

    def maturity_5year(self) -> TreasuryYieldQuery:
        return self._put("maturity", "5year")

    def maturity_7year(self) -> TreasuryYieldQuery:
        return self._put("maturity", "7year")

    def maturity_10year(self) -> TreasuryYieldQuery:
        return self._put("maturity", "10year")

    def maturity_30year(self) -> TreasuryYieldQuery:
        return self._put("maturity", "30year")


@dataclass(slots=True)
class TreasuryYieldRow:
    """CSV row of ``TREASURY_YIELD``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


class UnemploymentQuery(Query):
    """Monthly unemployment rate of the United States."""

    function = "UNEMPLOYMENT"
    required = ()
    optional = ("datatype",)
    enums = {
        "datatype": DataType,
    }

    def data_type(self, value: DataType | str) -> UnemploymentQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> UnemploymentQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> UnemploymentQuery:
        return self._put("datatype", "csv")


@dataclass(slots=True)
class UnemploymentRow:
    """CSV row of ``UNEMPLOYMENT``."""

    timestamp: datetime | None = csv_column("timestamp", None)
    value: str = csv_column("value", "")


__all__ = [
    "ConsumerPriceIndexQuery",
    "ConsumerPriceIndexRow",
    "DurablesQuery",
    "DurablesRow",
    "FederalFundsRateQuery",
    "FederalFundsRateRow",
    "InflationQuery",
    "InflationRow",
    "NonfarmPayrollQuery",
    "NonfarmPayrollRow",
    "RealGdpQuery",
    "RealGdpRow",
    "RealGdpPerCapitaQuery",
    "RealGdpPerCapitaRow",
    "RetailSalesQuery",
    "RetailSalesRow",
    "TreasuryYieldQuery",
    "TreasuryYieldRow",
    "UnemploymentQuery",
    "UnemploymentRow",
]
