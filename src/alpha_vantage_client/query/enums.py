"""Enumerated parameter values accepted by the service."""

from __future__ import annotations

from enum import Enum, IntEnum


class ParameterEnum(str, Enum):
    """String enum whose value is the literal sent on the wire."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def wire_values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


class DataType(ParameterEnum):
    JSON = "json"
    CSV = "csv"


class OutputSize(ParameterEnum):
    COMPACT = "compact"
    FULL = "full"


class SeriesType(ParameterEnum):
    CLOSE = "close"
    OPEN = "open"
    HIGH = "high"
    LOW = "low"


class Entitlement(ParameterEnum):
    REALTIME = "realtime"
    DELAYED = "delayed"


class ListingState(ParameterEnum):
    ACTIVE = "active"
    DELISTED = "delisted"


class EarningsHorizon(ParameterEnum):
    THREE_MONTHS = "3month"
    SIX_MONTHS = "6month"
    TWELVE_MONTHS = "12month"


class NewsSort(ParameterEnum):
    LATEST = "LATEST"
    EARLIEST = "EARLIEST"
    RELEVANCE = "RELEVANCE"


class NewsTopic(ParameterEnum):
    BLOCKCHAIN = "blockchain"
    EARNINGS = "earnings"
    IPO = "ipo"
    MERGERS_AND_ACQUISITIONS = "mergers_and_acquisitions"
    FINANCIAL_MARKETS = "financial_markets"
    ECONOMY_FISCAL = "economy_fiscal"
    ECONOMY_MONETARY = "economy_monetary"
    ECONOMY_MACRO = "economy_macro"
    ENERGY_TRANSPORTATION = "energy_transportation"
    FINANCE = "finance"
    LIFE_SCIENCES = "life_sciences"
    MANUFACTURING = "manufacturing"
    REAL_ESTATE = "real_estate"
    RETAIL_WHOLESALE = "retail_wholesale"
    TECHNOLOGY = "technology"


class AnalyticsCalculation(ParameterEnum):
    MIN = "MIN"
    MAX = "MAX"
    MEAN = "MEAN"
    MEDIAN = "MEDIAN"
    CUMULATIVE_RETURN = "CUMULATIVE_RETURN"
    VARIANCE = "VARIANCE"
    STDDEV = "STDDEV"
    MAX_DRAWDOWN = "MAX_DRAWDOWN"
    HISTOGRAM = "HISTOGRAM"
    AUTOCORRELATION = "AUTOCORRELATION"
    COVARIANCE = "COVARIANCE"
    CORRELATION = "CORRELATION"


class TreasuryMaturity(ParameterEnum):
    THREE_MONTHS = "3month"
    TWO_YEARS = "2year"
    FIVE_YEARS = "5year"
    SEVEN_YEARS = "7year"
    TEN_YEARS = "10year"
    THIRTY_YEARS = "30year"


# Interval families. Each function accepts exactly one of these sets.


class Interval(ParameterEnum):
    MIN_1 = "1min"
    MIN_5 = "5min"
    MIN_15 = "15min"
    MIN_30 = "30min"
    MIN_60 = "60min"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    ANNUAL = "annual"


class IntradayInterval(ParameterEnum):
    MIN_1 = "1min"
    MIN_5 = "5min"
    MIN_15 = "15min"
    MIN_30 = "30min"
    MIN_60 = "60min"


class DailyWeeklyMonthlyInterval(ParameterEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class MonthlyQuarterlyAnnualInterval(ParameterEnum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"


class QuarterlyAnnualInterval(ParameterEnum):
    QUARTERLY = "quarterly"
    ANNUAL = "annual"


class MonthlySemiannualInterval(ParameterEnum):
    MONTHLY = "monthly"
    SEMIANNUAL = "semiannual"


class IntradayDailyWeeklyMonthlyInterval(ParameterEnum):
    MIN_1 = "1min"
    MIN_5 = "5min"
    MIN_15 = "15min"
    MIN_30 = "30min"
    MIN_60 = "60min"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class MovingAverageType(IntEnum):
    """Moving average kinds accepted by the ``*matype`` parameters."""

    SMA = 0
    EMA = 1
    WMA = 2
    DEMA = 3
    TEMA = 4
    TRIMA = 5
    T3 = 6
    KAMA = 7
    MAMA = 8


PARAMETER_ENUMS: dict[str, type[ParameterEnum]] = {
    enum_type.__name__: enum_type
    for enum_type in (
        AnalyticsCalculation,
        DailyWeeklyMonthlyInterval,
        DataType,
        EarningsHorizon,
        Entitlement,
        Interval,
        IntradayDailyWeeklyMonthlyInterval,
        IntradayInterval,
        ListingState,
        MonthlyQuarterlyAnnualInterval,
        MonthlySemiannualInterval,
        NewsSort,
        NewsTopic,
        OutputSize,
        QuarterlyAnnualInterval,
        SeriesType,
        TreasuryMaturity,
    )
}


__all__ = [
    "ParameterEnum",
    "DataType",
    "OutputSize",
    "SeriesType",
    "Entitlement",
    "ListingState",
    "EarningsHorizon",
    "NewsSort",
    "NewsTopic",
    "AnalyticsCalculation",
    "TreasuryMaturity",
    "Interval",
    "IntradayInterval",
    "DailyWeeklyMonthlyInterval",
    "MonthlyQuarterlyAnnualInterval",
    "QuarterlyAnnualInterval",
    "MonthlySemiannualInterval",
    "IntradayDailyWeeklyMonthlyInterval",
    "MovingAverageType",
    "PARAMETER_ENUMS",
]
