"""Query base type, enumerations and validators."""

from .base import API_KEY_PARAMETER, FUNCTION_PARAMETER, Query, format_parameter_value
from .enums import (
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
    MovingAverageType,
    NewsSort,
    NewsTopic,
    OutputSize,
    ParameterEnum,
    QuarterlyAnnualInterval,
    SeriesType,
    TreasuryMaturity,
)

__all__ = [
    "API_KEY_PARAMETER",
    "FUNCTION_PARAMETER",
    "Query",
    "format_parameter_value",
    "ParameterEnum",
    "AnalyticsCalculation",
    "DailyWeeklyMonthlyInterval",
    "DataType",
    "EarningsHorizon",
    "Entitlement",
    "Interval",
    "IntradayDailyWeeklyMonthlyInterval",
    "IntradayInterval",
    "ListingState",
    "MonthlyQuarterlyAnnualInterval",
    "MonthlySemiannualInterval",
    "MovingAverageType",
    "NewsSort",
    "NewsTopic",
    "OutputSize",
    "QuarterlyAnnualInterval",
    "SeriesType",
    "TreasuryMaturity",
]
