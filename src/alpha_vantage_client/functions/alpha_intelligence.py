# AUTO-GENERATED FROM specification/functions/alpha_intelligence.json. DO NOT EDIT.

"""Query types and CSV rows for the ``alpha_intelligence`` function group."""

from __future__ import annotations

from datetime import datetime

from ..query.base import Query
from ..query.enums import (
    NewsSort,
    SeriesType,
)


class AnalyticsFixedWindowQuery(Query):
    """Advanced analytics metrics over a fixed temporal window."""

    function = "ANALYTICS_FIXED_WINDOW"
    required = ("INTERVAL", "CALCULATIONS", "RANGE", "SYMBOLS")
    optional = ("OHLC",)
    enums = {
        "OHLC": SeriesType,
    }

    def __init__(
        self,
        analytics_interval: str,
        calculations: str,
        date_range: str,
        symbols: str,
    ) -> None:
        super().__init__()
        self._put("INTERVAL", analytics_interval)
        self._put("CALCULATIONS", calculations)
        self._put("RANGE", date_range)
        self._put("SYMBOLS", symbols)

    def ohlc(self, value: SeriesType | str) -> AnalyticsFixedWindowQuery:
        return self._put("OHLC", value)

    def ohlc_close(self) -> AnalyticsFixedWindowQuery:
        return self._put("OHLC", "close")

    def ohlc_open(self) -> AnalyticsFixedWindowQuery:
        return self._put("OHLC", "open")

    def ohlc_high(self) -> AnalyticsFixedWindowQuery:
        return self._put("OHLC", "high")

    def ohlc_low(self) -> AnalyticsFixedWindowQuery:
        return self._put("OHLC", "low")


class AnalyticsSlidingWindowQuery(Query):
    """Advanced analytics metrics over sliding temporal windows."""

    function = "ANALYTICS_SLIDING_WINDOW"
    required = ("INTERVAL", "CALCULATIONS", "RANGE", "SYMBOLS", "WINDOW_SIZE")
    optional = ("OHLC",)
    enums = {
        "OHLC": SeriesType,
    }

    def __init__(
        self,
        analytics_interval: str,
        calculations: str,
        date_range: str,
        symbols: str,
        window_size: int,
    ) -> None:
        super().__init__()
        self._put("INTERVAL", analytics_interval)
        self._put("CALCULATIONS", calculations)
        self._put("RANGE", date_range)
        self._put("SYMBOLS", symbols)
        self._put("WINDOW_SIZE", window_size)

    def ohlc(self, value: SeriesType | str) -> AnalyticsSlidingWindowQuery:
        return self._put("OHLC", value)

    def ohlc_close(self) -> AnalyticsSlidingWindowQuery:
        return self._put("OHLC", "close")

    def ohlc_open(self) -> AnalyticsSlidingWindowQuery:
        return self._put("OHLC", "open")

    def ohlc_high(self) -> AnalyticsSlidingWindowQuery:
        return self._put("OHLC", "high")

    def ohlc_low(self) -> AnalyticsSlidingWindowQuery:
        return self._put("OHLC", "low")


class EarningsCallTranscriptQuery(Query):
    """Earnings call transcript for a company and fiscal quarter."""

    function = "EARNINGS_CALL_TRANSCRIPT"
    required = ("quarter", "symbol")
    optional = ()

    def __init__(
        self,
        quarter: str,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("quarter", quarter)
        self._put("symbol", symbol)


class InsiderTransactionsQuery(Query):
    """Latest and historical insider transactions for a company."""

    function = "INSIDER_TRANSACTIONS"
    required = ("symbol",)
    optional = ()

    def __init__(
        self,
        symbol: str,
    ) -> None:
        super().__init__()
        self._put("symbol", symbol)


class NewsSentimentQuery(Query):
    """Market news and sentiment scores."""

    function = "NEWS_SENTIMENT"
    required = ()
    optional = ("limit", "sort", "tickers", "time_from", "time_to", "topics")
    enums = {
        "sort": NewsSort,
    }

    def limit(self, value: int) -> NewsSentimentQuery:
        return self._put("limit", value)

    def sort(self, value: NewsSort | str) -> NewsSentimentQuery:
        return self._put("sort", value)

    def sort_latest(self) -> NewsSentimentQuery:
        return self._put("sort", "LATEST")

    def sort_earliest(self) -> NewsSentimentQuery:
        return self._put("sort", "EARLIEST")

    def sort_relevance(self) -> NewsSentimentQuery:
        return self._put("sort", "RELEVANCE")

    def tickers(self, value: str) -> NewsSentimentQuery:
        return self._put("tickers", value)

    def time_from(self, value: datetime) -> NewsSentimentQuery:
        return self._put_time("time_from", value, "%Y%m%dT%H%M")

    def time_from_string(self, value: str) -> NewsSentimentQuery:
        return self._put("time_from", value)

    def time_to(self, value: datetime) -> NewsSentimentQuery:
        return self._put_time("time_to", value, "%Y%m%dT%H%M")

    def time_to_string(self, value: str) -> NewsSentimentQuery:
        return self._put("time_to", value)

    def topics(self, value: str) -> NewsSentimentQuery:
        return self._put("topics", value)


class TopGainersLosersQuery(Query):
    """Top 20 gainers, losers and most actively traded US tickers."""

    function = "TOP_GAINERS_LOSERS"
    required = ()
    optional = ()


__all__ = [
    "AnalyticsFixedWindowQuery",
    "AnalyticsSlidingWindowQuery",
    "EarningsCallTranscriptQuery",
    "InsiderTransactionsQuery",
    "NewsSentimentQuery",
    "TopGainersLosersQuery",
]
