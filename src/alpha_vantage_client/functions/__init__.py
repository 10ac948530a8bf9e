# AUTO-GENERATED FROM specification/functions/*.json. DO NOT EDIT.

"""Registry of generated query and row types keyed by wire function name."""

from __future__ import annotations

from ..query.base import Query
from .alpha_intelligence import (
    AnalyticsFixedWindowQuery,
    AnalyticsSlidingWindowQuery,
    EarningsCallTranscriptQuery,
    InsiderTransactionsQuery,
    NewsSentimentQuery,
    TopGainersLosersQuery,
)
from .commodities import (
    AllCommoditiesQuery,
    AllCommoditiesRow,
    AluminumQuery,
    AluminumRow,
    CoffeeQuery,
    CoffeeRow,
    CopperQuery,
    CopperRow,
    CornQuery,
    CornRow,
    CottonQuery,
    CottonRow,
    CrudeOilBrentQuery,
    CrudeOilBrentRow,
    CrudeOilWtiQuery,
    CrudeOilWtiRow,
    NaturalGasQuery,
    NaturalGasRow,
    SugarQuery,
    SugarRow,
    WheatQuery,
    WheatRow,
)
from .digital_currency import (
    CryptoIntradayQuery,
    CryptoIntradayRow,
    DigitalCurrencyDailyQuery,
    DigitalCurrencyDailyRow,
    DigitalCurrencyMonthlyQuery,
    DigitalCurrencyMonthlyRow,
    DigitalCurrencyWeeklyQuery,
    DigitalCurrencyWeeklyRow,
)
from .economic_indicators import (
    ConsumerPriceIndexQuery,
    ConsumerPriceIndexRow,
    DurablesQuery,
    DurablesRow,
    FederalFundsRateQuery,
    FederalFundsRateRow,
    InflationQuery,
    InflationRow,
    NonfarmPayrollQuery,
    NonfarmPayrollRow,
    RealGdpQuery,
    RealGdpRow,
    RealGdpPerCapitaQuery,
    RealGdpPerCapitaRow,
    RetailSalesQuery,
    RetailSalesRow,
    TreasuryYieldQuery,
    TreasuryYieldRow,
    UnemploymentQuery,
    UnemploymentRow,
)
from .forex import (
    CurrencyExchangeRateQuery,
    FxDailyQuery,
    FxDailyRow,
    FxIntradayQuery,
    FxIntradayRow,
    FxMonthlyQuery,
    FxMonthlyRow,
    FxWeeklyQuery,
    FxWeeklyRow,
)
from .fundamental_data import (
    BalanceSheetQuery,
    CashFlowQuery,
    DividendsQuery,
    DividendsRow,
    EarningsQuery,
    EarningsCalendarQuery,
    EarningsCalendarRow,
    EarningsEstimatesQuery,
    EtfProfileQuery,
    IncomeStatementQuery,
    IpoCalendarQuery,
    IpoCalendarRow,
    ListingStatusQuery,
    ListingStatusRow,
    OverviewQuery,
    SharesOutstandingQuery,
    SharesOutstandingRow,
    SplitsQuery,
    SplitsRow,
)
from .options import (
    HistoricalOptionsQuery,
    RealtimeOptionsQuery,
)
from .technical_cycles import (
    HilbertTransformDominantCyclePeriodQuery,
    HilbertTransformDominantCyclePeriodRow,
    HilbertTransformDominantCyclePhaseQuery,
    HilbertTransformDominantCyclePhaseRow,
    HilbertTransformPhasorQuery,
    HilbertTransformPhasorRow,
    HilbertTransformSineWaveQuery,
    HilbertTransformSineWaveRow,
    HilbertTransformTrendModeQuery,
    HilbertTransformTrendModeRow,
    HilbertTransformTrendlineQuery,
    HilbertTransformTrendlineRow,
)
from .technical_moving_averages import (
    DoubleExponentialMovingAverageQuery,
    DoubleExponentialMovingAverageRow,
    ExponentialMovingAverageQuery,
    ExponentialMovingAverageRow,
    KaufmanAdaptiveMovingAverageQuery,
    KaufmanAdaptiveMovingAverageRow,
    MesaAdaptiveMovingAverageQuery,
    MesaAdaptiveMovingAverageRow,
    SimpleMovingAverageQuery,
    SimpleMovingAverageRow,
    TillsonT3Query,
    TillsonT3Row,
    TriangularMovingAverageQuery,
    TriangularMovingAverageRow,
    TripleExponentialMovingAverageQuery,
    TripleExponentialMovingAverageRow,
    VolumeWeightedAveragePriceQuery,
    VolumeWeightedAveragePriceRow,
    WeightedMovingAverageQuery,
    WeightedMovingAverageRow,
)
from .technical_oscillators import (
    AbsolutePriceOscillatorQuery,
    AbsolutePriceOscillatorRow,
    AroonQuery,
    AroonRow,
    AroonOscillatorQuery,
    AroonOscillatorRow,
    AverageDirectionalMovementIndexQuery,
    AverageDirectionalMovementIndexRow,
    AverageDirectionalMovementIndexRatingQuery,
    AverageDirectionalMovementIndexRatingRow,
    BalanceOfPowerQuery,
    BalanceOfPowerRow,
    ChandeMomentumOscillatorQuery,
    ChandeMomentumOscillatorRow,
    CommodityChannelIndexQuery,
    CommodityChannelIndexRow,
    DirectionalMovementIndexQuery,
    DirectionalMovementIndexRow,
    MinusDirectionalIndicatorQuery,
    MinusDirectionalIndicatorRow,
    MinusDirectionalMovementQuery,
    MinusDirectionalMovementRow,
    MomentumQuery,
    MomentumRow,
    MoneyFlowIndexQuery,
    MoneyFlowIndexRow,
    MovingAverageConvergenceDivergenceQuery,
    MovingAverageConvergenceDivergenceRow,
    MovingAverageConvergenceDivergenceExtendedQuery,
    MovingAverageConvergenceDivergenceExtendedRow,
    PercentagePriceOscillatorQuery,
    PercentagePriceOscillatorRow,
    PlusDirectionalIndicatorQuery,
    PlusDirectionalIndicatorRow,
    PlusDirectionalMovementQuery,
    PlusDirectionalMovementRow,
    RateOfChangeQuery,
    RateOfChangeRow,
    RateOfChangeRatioQuery,
    RateOfChangeRatioRow,
    RelativeStrengthIndexQuery,
    RelativeStrengthIndexRow,
    StochasticFastQuery,
    StochasticFastRow,
    StochasticOscillatorQuery,
    StochasticOscillatorRow,
    StochasticRelativeStrengthIndexQuery,
    StochasticRelativeStrengthIndexRow,
    TrixQuery,
    TrixRow,
    UltimateOscillatorQuery,
    UltimateOscillatorRow,
    WilliamsPercentRangeQuery,
    WilliamsPercentRangeRow,
)
from .technical_volatility import (
    AverageTrueRangeQuery,
    AverageTrueRangeRow,
    BollingerBandsQuery,
    BollingerBandsRow,
    MidpointQuery,
    MidpointRow,
    MidpriceQuery,
    MidpriceRow,
    NormalizedAverageTrueRangeQuery,
    NormalizedAverageTrueRangeRow,
    ParabolicSarQuery,
    ParabolicSarRow,
    TrueRangeQuery,
    TrueRangeRow,
)
from .technical_volume import (
    ChaikinAdLineQuery,
    ChaikinAdLineRow,
    ChaikinAdOscillatorQuery,
    ChaikinAdOscillatorRow,
    OnBalanceVolumeQuery,
    OnBalanceVolumeRow,
)
from .time_series import (
    GlobalQuoteQuery,
    GlobalQuoteRow,
    MarketStatusQuery,
    RealtimeBulkQuotesQuery,
    SymbolSearchQuery,
    SymbolSearchRow,
    TimeSeriesDailyQuery,
    TimeSeriesDailyRow,
    TimeSeriesDailyAdjustedQuery,
    TimeSeriesDailyAdjustedRow,
    TimeSeriesIntradayQuery,
    TimeSeriesIntradayRow,
    TimeSeriesMonthlyQuery,
    TimeSeriesMonthlyRow,
    TimeSeriesMonthlyAdjustedQuery,
    TimeSeriesMonthlyAdjustedRow,
    TimeSeriesWeeklyQuery,
    TimeSeriesWeeklyRow,
    TimeSeriesWeeklyAdjustedQuery,
    TimeSeriesWeeklyAdjustedRow,
)


QUERY_TYPES: dict[str, type[Query]] = {
    "AD": ChaikinAdLineQuery,
    "ADOSC": ChaikinAdOscillatorQuery,
    "ADX": AverageDirectionalMovementIndexQuery,
    "ADXR": AverageDirectionalMovementIndexRatingQuery,
    "ALL_COMMODITIES": AllCommoditiesQuery,
    "ALUMINUM": AluminumQuery,
    "ANALYTICS_FIXED_WINDOW": AnalyticsFixedWindowQuery,
    "ANALYTICS_SLIDING_WINDOW": AnalyticsSlidingWindowQuery,
    "APO": AbsolutePriceOscillatorQuery,
    "AROON": AroonQuery,
    "AROONOSC": AroonOscillatorQuery,
    "ATR": AverageTrueRangeQuery,
    "BALANCE_SHEET": BalanceSheetQuery,
    "BBANDS": BollingerBandsQuery,
    "BOP": BalanceOfPowerQuery,
    "BRENT": CrudeOilBrentQuery,
    "CASH_FLOW": CashFlowQuery,
    "CCI": CommodityChannelIndexQuery,
    "CMO": ChandeMomentumOscillatorQuery,
    "COFFEE": CoffeeQuery,
    "COPPER": CopperQuery,
    "CORN": CornQuery,
    "COTTON": CottonQuery,
    "CPI": ConsumerPriceIndexQuery,
    "CRYPTO_INTRADAY": CryptoIntradayQuery,
    "CURRENCY_EXCHANGE_RATE": CurrencyExchangeRateQuery,
    "DEMA": DoubleExponentialMovingAverageQuery,
    "DIGITAL_CURRENCY_DAILY": DigitalCurrencyDailyQuery,
    "DIGITAL_CURRENCY_MONTHLY": DigitalCurrencyMonthlyQuery,
    "DIGITAL_CURRENCY_WEEKLY": DigitalCurrencyWeeklyQuery,
    "DIVIDENDS": DividendsQuery,
    "DURABLES": DurablesQuery,
    "DX": DirectionalMovementIndexQuery,
    "EARNINGS": EarningsQuery,
    "EARNINGS_CALENDAR": EarningsCalendarQuery,
    "EARNINGS_CALL_TRANSCRIPT": EarningsCallTranscriptQuery,
    "EARNINGS_ESTIMATES": EarningsEstimatesQuery,
    "EMA": ExponentialMovingAverageQuery,
    "ETF_PROFILE": EtfProfileQuery,
    "FEDERAL_FUNDS_RATE": FederalFundsRateQuery,
    "FX_DAILY": FxDailyQuery,
    "FX_INTRADAY": FxIntradayQuery,
    "FX_MONTHLY": FxMonthlyQuery,
    "FX_WEEKLY": FxWeeklyQuery,
    "GLOBAL_QUOTE": GlobalQuoteQuery,
    "HISTORICAL_OPTIONS": HistoricalOptionsQuery,
    "HT_DCPERIOD": HilbertTransformDominantCyclePeriodQuery,
    "HT_DCPHASE": HilbertTransformDominantCyclePhaseQuery,
    "HT_PHASOR": HilbertTransformPhasorQuery,
    "HT_SINE": HilbertTransformSineWaveQuery,
    "HT_TRENDLINE": HilbertTransformTrendlineQuery,
    "HT_TRENDMODE": HilbertTransformTrendModeQuery,
    "INCOME_STATEMENT": IncomeStatementQuery,
    "INFLATION": InflationQuery,
    "INSIDER_TRANSACTIONS": InsiderTransactionsQuery,
    "IPO_CALENDAR": IpoCalendarQuery,
    "KAMA": KaufmanAdaptiveMovingAverageQuery,
    "LISTING_STATUS": ListingStatusQuery,
    "MACD": MovingAverageConvergenceDivergenceQuery,
    "MACDEXT": MovingAverageConvergenceDivergenceExtendedQuery,
    "MAMA": MesaAdaptiveMovingAverageQuery,
    "MARKET_STATUS": MarketStatusQuery,
    "MFI": MoneyFlowIndexQuery,
    "MIDPOINT": MidpointQuery,
    "MIDPRICE": MidpriceQuery,
    "MINUS_DI": MinusDirectionalIndicatorQuery,
    "MINUS_DM": MinusDirectionalMovementQuery,
    "MOM": MomentumQuery,
    "NATR": NormalizedAverageTrueRangeQuery,
    "NATURAL_GAS": NaturalGasQuery,
    "NEWS_SENTIMENT": NewsSentimentQuery,
    "NONFARM_PAYROLL": NonfarmPayrollQuery,
    "OBV": OnBalanceVolumeQuery,
    "OVERVIEW": OverviewQuery,
    "PLUS_DI": PlusDirectionalIndicatorQuery,
    "PLUS_DM": PlusDirectionalMovementQuery,
    "PPO": PercentagePriceOscillatorQuery,
    "REALTIME_BULK_QUOTES": RealtimeBulkQuotesQuery,
    "REALTIME_OPTIONS": RealtimeOptionsQuery,
    "REAL_GDP": RealGdpQuery,
    "REAL_GDP_PER_CAPITA": RealGdpPerCapitaQuery,
    "RETAIL_SALES": RetailSalesQuery,
    "ROC": RateOfChangeQuery,
    "ROCR": RateOfChangeRatioQuery,
    "RSI": RelativeStrengthIndexQuery,
    "SAR": ParabolicSarQuery,
    "SHARES_OUTSTANDING": SharesOutstandingQuery,
    "SMA": SimpleMovingAverageQuery,
    "SPLITS": SplitsQuery,
    "STOCH": StochasticOscillatorQuery,
    "STOCHF": StochasticFastQuery,
    "STOCHRSI": StochasticRelativeStrengthIndexQuery,
    "SUGAR": SugarQuery,
    "SYMBOL_SEARCH": SymbolSearchQuery,
    "T3": TillsonT3Query,
    "TEMA": TripleExponentialMovingAverageQuery,
    "TIME_SERIES_DAILY": TimeSeriesDailyQuery,
    "TIME_SERIES_DAILY_ADJUSTED": TimeSeriesDailyAdjustedQuery,
    "TIME_SERIES_INTRADAY": TimeSeriesIntradayQuery,
    "TIME_SERIES_MONTHLY": TimeSeriesMonthlyQuery,
    "TIME_SERIES_MONTHLY_ADJUSTED": TimeSeriesMonthlyAdjustedQuery,
    "TIME_SERIES_WEEKLY": TimeSeriesWeeklyQuery,
    "TIME_SERIES_WEEKLY_ADJUSTED": TimeSeriesWeeklyAdjustedQuery,
    "TOP_GAINERS_LOSERS": TopGainersLosersQuery,
    "TRANGE": TrueRangeQuery,
    "TREASURY_YIELD": TreasuryYieldQuery,
    "TRIMA": TriangularMovingAverageQuery,
    "TRIX": TrixQuery,
    "ULTOSC": UltimateOscillatorQuery,
    "UNEMPLOYMENT": UnemploymentQuery,
    "VWAP": VolumeWeightedAveragePriceQuery,
    "WHEAT": WheatQuery,
    "WILLR": WilliamsPercentRangeQuery,
    "WMA": WeightedMovingAverageQuery,
    "WTI": CrudeOilWtiQuery,
}

ROW_TYPES: dict[str, type] = {
    "AD": ChaikinAdLineRow,
    "ADOSC": ChaikinAdOscillatorRow,
    "ADX": AverageDirectionalMovementIndexRow,
    "ADXR": AverageDirectionalMovementIndexRatingRow,
    "ALL_COMMODITIES": AllCommoditiesRow,
    "ALUMINUM": AluminumRow,
    "APO": AbsolutePriceOscillatorRow,
    "AROON": AroonRow,
    "AROONOSC": AroonOscillatorRow,
    "ATR": AverageTrueRangeRow,
    "BBANDS": BollingerBandsRow,
    "BOP": BalanceOfPowerRow,
    "BRENT": CrudeOilBrentRow,
    "CCI": CommodityChannelIndexRow,
    "CMO": ChandeMomentumOscillatorRow,
    "COFFEE": CoffeeRow,
    "COPPER": CopperRow,
    "CORN": CornRow,
    "COTTON": CottonRow,
    "CPI": ConsumerPriceIndexRow,
    "CRYPTO_INTRADAY": CryptoIntradayRow,
    "DEMA": DoubleExponentialMovingAverageRow,
    "DIGITAL_CURRENCY_DAILY": DigitalCurrencyDailyRow,
    "DIGITAL_CURRENCY_MONTHLY": DigitalCurrencyMonthlyRow,
    "DIGITAL_CURRENCY_WEEKLY": DigitalCurrencyWeeklyRow,
    "DIVIDENDS": DividendsRow,
    "DURABLES": DurablesRow,
    "DX": DirectionalMovementIndexRow,
    "EARNINGS_CALENDAR": EarningsCalendarRow,
    "EMA": ExponentialMovingAverageRow,
    "FEDERAL_FUNDS_RATE": FederalFundsRateRow,
    "FX_DAILY": FxDailyRow,
    "FX_INTRADAY": FxIntradayRow,
    "FX_MONTHLY": FxMonthlyRow,
    "FX_WEEKLY": FxWeeklyRow,
    "GLOBAL_QUOTE": GlobalQuoteRow,
    "HT_DCPERIOD": HilbertTransformDominantCyclePeriodRow,
    "HT_DCPHASE": HilbertTransformDominantCyclePhaseRow,
    "HT_PHASOR": HilbertTransformPhasorRow,
    "HT_SINE": HilbertTransformSineWaveRow,
    "HT_TRENDLINE": HilbertTransformTrendlineRow,
    "HT_TRENDMODE": HilbertTransformTrendModeRow,
    "INFLATION": InflationRow,
    "IPO_CALENDAR": IpoCalendarRow,
    "KAMA": KaufmanAdaptiveMovingAverageRow,
    "LISTING_STATUS": ListingStatusRow,
    "MACD": MovingAverageConvergenceDivergenceRow,
    "MACDEXT": MovingAverageConvergenceDivergenceExtendedRow,
    "MAMA": MesaAdaptiveMovingAverageRow,
    "MFI": MoneyFlowIndexRow,
    "MIDPOINT": MidpointRow,
    "MIDPRICE": MidpriceRow,
    "MINUS_DI": MinusDirectionalIndicatorRow,
    "MINUS_DM": MinusDirectionalMovementRow,
    "MOM": MomentumRow,
    "NATR": NormalizedAverageTrueRangeRow,
    "NATURAL_GAS": NaturalGasRow,
    "NONFARM_PAYROLL": NonfarmPayrollRow,
    "OBV": OnBalanceVolumeRow,
    "PLUS_DI": PlusDirectionalIndicatorRow,
    "PLUS_DM": PlusDirectionalMovementRow,
    "PPO": PercentagePriceOscillatorRow,
    "REAL_GDP": RealGdpRow,
    "REAL_GDP_PER_CAPITA": RealGdpPerCapitaRow,
    "RETAIL_SALES": RetailSalesRow,
    "ROC": RateOfChangeRow,
    "ROCR": RateOfChangeRatioRow,
    "RSI": RelativeStrengthIndexRow,
    "SAR": ParabolicSarRow,
    "SHARES_OUTSTANDING": SharesOutstandingRow,
    "SMA": SimpleMovingAverageRow,
    "SPLITS": SplitsRow,
    "STOCH": StochasticOscillatorRow,
    "STOCHF": StochasticFastRow,
    "STOCHRSI": StochasticRelativeStrengthIndexRow,
    "SUGAR": SugarRow,
    "SYMBOL_SEARCH": SymbolSearchRow,
    "T3": TillsonT3Row,
    "TEMA": TripleExponentialMovingAverageRow,
    "TIME_SERIES_DAILY": TimeSeriesDailyRow,
    "TIME_SERIES_DAILY_ADJUSTED": TimeSeriesDailyAdjustedRow,
    "TIME_SERIES_INTRADAY": TimeSeriesIntradayRow,
    "TIME_SERIES_MONTHLY": TimeSeriesMonthlyRow,
    "TIME_SERIES_MONTHLY_ADJUSTED": TimeSeriesMonthlyAdjustedRow,
    "TIME_SERIES_WEEKLY": TimeSeriesWeeklyRow,
    "TIME_SERIES_WEEKLY_ADJUSTED": TimeSeriesWeeklyAdjustedRow,
    "TRANGE": TrueRangeRow,
    "TREASURY_YIELD": TreasuryYieldRow,
    "TRIMA": TriangularMovingAverageRow,
    "TRIX": TrixRow,
    "ULTOSC": UltimateOscillatorRow,
    "UNEMPLOYMENT": UnemploymentRow,
    "VWAP": VolumeWeightedAveragePriceRow,
    "WHEAT": WheatRow,
    "WILLR": WilliamsPercentRangeRow,
    "WMA": WeightedMovingAverageRow,
    "WTI": CrudeOilWtiRow,
}


__all__ = [
    "QUERY_TYPES",
    "ROW_TYPES",
    "AnalyticsFixedWindowQuery",
    "AnalyticsSlidingWindowQuery",
    "EarningsCallTranscriptQuery",
    "InsiderTransactionsQuery",
    "NewsSentimentQuery",
    "TopGainersLosersQuery",
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
    "CryptoIntradayQuery",
    "CryptoIntradayRow",
    "DigitalCurrencyDailyQuery",
    "DigitalCurrencyDailyRow",
    "DigitalCurrencyMonthlyQuery",
    "DigitalCurrencyMonthlyRow",
    "DigitalCurrencyWeeklyQuery",
    "DigitalCurrencyWeeklyRow",
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
    "CurrencyExchangeRateQuery",
    "FxDailyQuery",
    "FxDailyRow",
    "FxIntradayQuery",
    "FxIntradayRow",
    "FxMonthlyQuery",
    "FxMonthlyRow",
    "FxWeeklyQuery",
    "FxWeeklyRow",
    "BalanceSheetQuery",
    "CashFlowQuery",
    "DividendsQuery",
    "DividendsRow",
    "EarningsQuery",
    "EarningsCalendarQuery",
    "EarningsCalendarRow",
    "EarningsEstimatesQuery",
    "EtfProfileQuery",
    "IncomeStatementQuery",
    "IpoCalendarQuery",
    "IpoCalendarRow",
    "ListingStatusQuery",
    "ListingStatusRow",
    "OverviewQuery",
    "SharesOutstandingQuery",
    "SharesOutstandingRow",
    "SplitsQuery",
    "SplitsRow",
    "HistoricalOptionsQuery",
    "RealtimeOptionsQuery",
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
    "ChaikinAdLineQuery",
    "ChaikinAdLineRow",
    "ChaikinAdOscillatorQuery",
    "ChaikinAdOscillatorRow",
    "OnBalanceVolumeQuery",
    "OnBalanceVolumeRow",
    "GlobalQuoteQuery",
    "GlobalQuoteRow",
    "MarketStatusQuery",
    "RealtimeBulkQuotesQuery",
    "SymbolSearchQuery",
    "SymbolSearchRow",
    "TimeSeriesDailyQuery",
    "TimeSeriesDailyRow",
    "TimeSeriesDailyAdjustedQuery",
    "TimeSeriesDailyAdjustedRow",
    "TimeSeriesIntradayQuery",
    "TimeSeriesIntradayRow",
    "TimeSeriesMonthlyQuery",
    "TimeSeriesMonthlyRow",
    "TimeSeriesMonthlyAdjustedQuery",
    "TimeSeriesMonthlyAdjustedRow",
    "TimeSeriesWeeklyQuery",
    "TimeSeriesWeeklyRow",
    "TimeSeriesWeeklyAdjustedQuery",
    "TimeSeriesWeeklyAdjustedRow",
]
