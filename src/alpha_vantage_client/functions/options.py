# AUTO-GENERATED FROM specification/functions/options.json. DO NOT EDIT.

"""Query types and CSV rows for the ``options`` function group."""

from __future__ import annotations

from datetime import date

from ..query.base import Query
from ..query.enums import DataType


class HistoricalOptionsQuery(Query):
    """Full historical options chain for a symbol on a trading day."""

    function = "HISTORICAL_OPTIONS"
    required = ("symbol",)
    optional = ("datatype", "date")
    enums = {
        "datatype": DataType,
    }

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)

    def data_type(self, value: DataType | str) -> HistoricalOptionsQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> HistoricalOptionsQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> HistoricalOptionsQuery:
        return self._put("datatype", "csv")

    def date(self, value: date) -> HistoricalOptionsQuery:
        return self._put_time("date", value, "%Y-%m-%d")

    def date_string(self, value: str) -> HistoricalOptionsQuery:
        return self._put("date", value)


class RealtimeOptionsQuery(Query):
    """Realtime US options chain for a symbol."""

    function = "REALTIME_OPTIONS"
    required = ("symbol",)
    optional = ("contract", "datatype", "require_greeks")
    enums = {
        "datatype": DataType,
    }
    booleans = ("require_greeks",)

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)

    def contract(self, value: str) -> RealtimeOptionsQuery:
        return self._put("contract", value)

    def data_type(self, value: DataType | str) -> RealtimeOptionsQuery:
        return self._put("datatype", value)

    def data_type_json(self) -> RealtimeOptionsQuery:
        return self._put("datatype", "json")

    def data_type_csv(self) -> RealtimeOptionsQuery:
        return self._put("datatype", "csv")

    def require_greeks(self, value: bool) -> RealtimeOptionsQuery:
        return self._put("require_greeks", value)


__all__ = [
    "HistoricalOptionsQuery",
    "RealtimeOptionsQuery",
]
