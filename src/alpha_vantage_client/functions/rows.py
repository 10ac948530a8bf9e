# AUTO-GENERATED FROM specification/functions/*.json. DO NOT EDIT.

"""Typed operations that fetch CSV responses and decode them into rows."""

from __future__ import annotations

from datetime import tzinfo
from typing import TypeVar

from ..core.cancellation import CancelToken
from ..query.base import Query
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
    DividendsQuery,
    DividendsRow,
    EarningsCalendarQuery,
    EarningsCalendarRow,
    IpoCalendarQuery,
    IpoCalendarRow,
    ListingStatusQuery,
    ListingStatusRow,
    SharesOutstandingQuery,
    SharesOutstandingRow,
    SplitsQuery,
    SplitsRow,
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

RowT = TypeVar("RowT")


class CSVRowsMixin:
    """``<function>_rows`` helpers built on ``collect_rows``."""

    def collect_rows(
        self,
        query: Query,
        record_type: type[RowT],
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[RowT]:
        raise NotImplementedError

    def ad_rows(
        self,
        query: ChaikinAdLineQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[ChaikinAdLineRow]:
        """Fetch ``AD`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            ChaikinAdLineRow,
            tz=tz,
            cancel=cancel,
        )

    def adosc_rows(
        self,
        query: ChaikinAdOscillatorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[ChaikinAdOscillatorRow]:
        """Fetch ``ADOSC`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            ChaikinAdOscillatorRow,
            tz=tz,
            cancel=cancel,
        )

    def adx_rows(
        self,
        query: AverageDirectionalMovementIndexQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[AverageDirectionalMovementIndexRow]:
        """Fetch ``ADX`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            AverageDirectionalMovementIndexRow,
            tz=tz,
            cancel=cancel,
        )

    def adxr_rows(
        self,
        query: AverageDirectionalMovementIndexRatingQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[AverageDirectionalMovementIndexRatingRow]:
        """Fetch ``ADXR`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            AverageDirectionalMovementIndexRatingRow,
            tz=tz,
            cancel=cancel,
        )

    def all_commodities_rows(
        self,
        query: AllCommoditiesQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[AllCommoditiesRow]:
        """Fetch ``ALL_COMMODITIES`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            AllCommoditiesRow,
            tz=tz,
            cancel=cancel,
        )

    def aluminum_rows(
        self,
        query: AluminumQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[AluminumRow]:
        """Fetch ``ALUMINUM`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            AluminumRow,
            tz=tz,
            cancel=cancel,
        )

    def apo_rows(
        self,
        query: AbsolutePriceOscillatorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[AbsolutePriceOscillatorRow]:
        """Fetch ``APO`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            AbsolutePriceOscillatorRow,
            tz=tz,
            cancel=cancel,
        )

    def aroon_rows(
        self,
        query: AroonQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[AroonRow]:
        """Fetch ``AROON`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            AroonRow,
            tz=tz,
            cancel=cancel,
        )

    def aroonosc_rows(
        self,
        query: AroonOscillatorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[AroonOscillatorRow]:
        """Fetch ``AROONOSC`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            AroonOscillatorRow,
            tz=tz,
            cancel=cancel,
        )

    def atr_rows(
        self,
        query: AverageTrueRangeQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[AverageTrueRangeRow]:
        """Fetch ``ATR`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            AverageTrueRangeRow,
            tz=tz,
            cancel=cancel,
        )

    def bbands_rows(
        self,
        query: BollingerBandsQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[BollingerBandsRow]:
        """Fetch ``BBANDS`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            BollingerBandsRow,
            tz=tz,
            cancel=cancel,
        )

    def bop_rows(
        self,
        query: BalanceOfPowerQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[BalanceOfPowerRow]:
        """Fetch ``BOP`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            BalanceOfPowerRow,
            tz=tz,
            cancel=cancel,
        )

    def brent_rows(
        self,
        query: CrudeOilBrentQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[CrudeOilBrentRow]:
        """Fetch ``BRENT`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            CrudeOilBrentRow,
            tz=tz,
            cancel=cancel,
        )

    def cci_rows(
        self,
        query: CommodityChannelIndexQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[CommodityChannelIndexRow]:
        """Fetch ``CCI`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            CommodityChannelIndexRow,
            tz=tz,
            cancel=cancel,
        )

    def cmo_rows(
        self,
        query: ChandeMomentumOscillatorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[ChandeMomentumOscillatorRow]:
        """Fetch ``CMO`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            ChandeMomentumOscillatorRow,
            tz=tz,
            cancel=cancel,
        )

    def coffee_rows(
        self,
        query: CoffeeQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[CoffeeRow]:
        """Fetch ``COFFEE`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            CoffeeRow,
            tz=tz,
            cancel=cancel,
        )

    def copper_rows(
        self,
        query: CopperQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[CopperRow]:
        """Fetch ``COPPER`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            CopperRow,
            tz=tz,
            cancel=cancel,
        )

    def corn_rows(
        self,
        query: CornQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[CornRow]:
        """Fetch ``CORN`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            CornRow,
            tz=tz,
            cancel=cancel,
        )

    def cotton_rows(
        self,
        query: CottonQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[CottonRow]:
        """Fetch ``COTTON`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            CottonRow,
            tz=tz,
            cancel=cancel,
        )

    def cpi_rows(
        self,
        query: ConsumerPriceIndexQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[ConsumerPriceIndexRow]:
        """Fetch ``CPI`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            ConsumerPriceIndexRow,
            tz=tz,
            cancel=cancel,
        )

    def crypto_intraday_rows(
        self,
        query: CryptoIntradayQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[CryptoIntradayRow]:
        """Fetch ``CRYPTO_INTRADAY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            CryptoIntradayRow,
            tz=tz,
            cancel=cancel,
        )

    def dema_rows(
        self,
        query: DoubleExponentialMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[DoubleExponentialMovingAverageRow]:
        """Fetch ``DEMA`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            DoubleExponentialMovingAverageRow,
            tz=tz,
            cancel=cancel,
        )

    def digital_currency_daily_rows(
        self,
        query: DigitalCurrencyDailyQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[DigitalCurrencyDailyRow]:
        """Fetch ``DIGITAL_CURRENCY_DAILY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            DigitalCurrencyDailyRow,
            tz=tz,
            cancel=cancel,
        )

    def digital_currency_monthly_rows(
        self,
        query: DigitalCurrencyMonthlyQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[DigitalCurrencyMonthlyRow]:
        """Fetch ``DIGITAL_CURRENCY_MONTHLY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            DigitalCurrencyMonthlyRow,
            tz=tz,
            cancel=cancel,
        )

    def digital_currency_weekly_rows(
        self,
        query: DigitalCurrencyWeeklyQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[DigitalCurrencyWeeklyRow]:
        """Fetch ``DIGITAL_CURRENCY_WEEKLY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            DigitalCurrencyWeeklyRow,
            tz=tz,
            cancel=cancel,
        )

    def dividends_rows(
        self,
        query: DividendsQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[DividendsRow]:
        """Fetch ``DIVIDENDS`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            DividendsRow,
            tz=tz,
            cancel=cancel,
        )

    def durables_rows(
        self,
        query: DurablesQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[DurablesRow]:
        """Fetch ``DURABLES`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            DurablesRow,
            tz=tz,
            cancel=cancel,
        )

    def dx_rows(
        self,
        query: DirectionalMovementIndexQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[DirectionalMovementIndexRow]:
        """Fetch ``DX`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            DirectionalMovementIndexRow,
            tz=tz,
            cancel=cancel,
        )

    def earnings_calendar_rows(
        self,
        query: EarningsCalendarQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[EarningsCalendarRow]:
        """Fetch ``EARNINGS_CALENDAR`` as CSV and decode every row."""
        return self.collect_rows(
            query,
            EarningsCalendarRow,
            tz=tz,
            cancel=cancel,
        )

    def ema_rows(
        self,
        query: ExponentialMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[ExponentialMovingAverageRow]:
        """Fetch ``EMA`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            ExponentialMovingAverageRow,
            tz=tz,
            cancel=cancel,
        )

    def federal_funds_rate_rows(
        self,
        query: FederalFundsRateQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[FederalFundsRateRow]:
        """Fetch ``FEDERAL_FUNDS_RATE`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            FederalFundsRateRow,
            tz=tz,
            cancel=cancel,
        )

    def fx_daily_rows(
        self,
        query: FxDailyQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[FxDailyRow]:
        """Fetch ``FX_DAILY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            FxDailyRow,
            tz=tz,
            cancel=cancel,
        )

    def fx_intraday_rows(
        self,
        query: FxIntradayQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[FxIntradayRow]:
        """Fetch ``FX_INTRADAY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            FxIntradayRow,
            tz=tz,
            cancel=cancel,
        )

    def fx_monthly_rows(
        self,
        query: FxMonthlyQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[FxMonthlyRow]:
        """Fetch ``FX_MONTHLY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            FxMonthlyRow,
            tz=tz,
            cancel=cancel,
        )

    def fx_weekly_rows(
        self,
        query: FxWeeklyQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[FxWeeklyRow]:
        """Fetch ``FX_WEEKLY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            FxWeeklyRow,
            tz=tz,
            cancel=cancel,
        )

    def global_quote_rows(
        self,
        query: GlobalQuoteQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[GlobalQuoteRow]:
        """Fetch ``GLOBAL_QUOTE`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            GlobalQuoteRow,
            tz=tz,
            cancel=cancel,
        )

    def ht_dcperiod_rows(
        self,
        query: HilbertTransformDominantCyclePeriodQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[HilbertTransformDominantCyclePeriodRow]:
        """Fetch ``HT_DCPERIOD`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            HilbertTransformDominantCyclePeriodRow,
            tz=tz,
            cancel=cancel,
        )

    def ht_dcphase_rows(
        self,
        query: HilbertTransformDominantCyclePhaseQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[HilbertTransformDominantCyclePhaseRow]:
        """Fetch ``HT_DCPHASE`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            HilbertTransformDominantCyclePhaseRow,
            tz=tz,
            cancel=cancel,
        )

    def ht_phasor_rows(
        self,
        query: HilbertTransformPhasorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[HilbertTransformPhasorRow]:
        """Fetch ``HT_PHASOR`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            HilbertTransformPhasorRow,
            tz=tz,
            cancel=cancel,
        )

    def ht_sine_rows(
        self,
        query: HilbertTransformSineWaveQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[HilbertTransformSineWaveRow]:
        """Fetch ``HT_SINE`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            HilbertTransformSineWaveRow,
            tz=tz,
            cancel=cancel,
        )

    def ht_trendline_rows(
        self,
        query: HilbertTransformTrendlineQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[HilbertTransformTrendlineRow]:
        """Fetch ``HT_TRENDLINE`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            HilbertTransformTrendlineRow,
            tz=tz,
            cancel=cancel,
        )

    def ht_trendmode_rows(
        self,
        query: HilbertTransformTrendModeQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[HilbertTransformTrendModeRow]:
        """Fetch ``HT_TRENDMODE`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            HilbertTransformTrendModeRow,
            tz=tz,
            cancel=cancel,
        )

    def inflation_rows(
        self,
        query: InflationQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[InflationRow]:
        """Fetch ``INFLATION`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            InflationRow,
            tz=tz,
            cancel=cancel,
        )

    def ipo_calendar_rows(
        self,
        query: IpoCalendarQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[IpoCalendarRow]:
        """Fetch ``IPO_CALENDAR`` as CSV and decode every row."""
        return self.collect_rows(
            query,
            IpoCalendarRow,
            tz=tz,
            cancel=cancel,
        )

    def kama_rows(
        self,
        query: KaufmanAdaptiveMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[KaufmanAdaptiveMovingAverageRow]:
        """Fetch ``KAMA`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            KaufmanAdaptiveMovingAverageRow,
            tz=tz,
            cancel=cancel,
        )

    def listing_status_rows(
        self,
        query: ListingStatusQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[ListingStatusRow]:
        """Fetch ``LISTING_STATUS`` as CSV and decode every row."""
        return self.collect_rows(
            query,
            ListingStatusRow,
            tz=tz,
            cancel=cancel,
        )

    def macd_rows(
        self,
        query: MovingAverageConvergenceDivergenceQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[MovingAverageConvergenceDivergenceRow]:
        """Fetch ``MACD`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            MovingAverageConvergenceDivergenceRow,
            tz=tz,
            cancel=cancel,
        )

    def macdext_rows(
        self,
        query: MovingAverageConvergenceDivergenceExtendedQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[MovingAverageConvergenceDivergenceExtendedRow]:
        """Fetch ``MACDEXT`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            MovingAverageConvergenceDivergenceExtendedRow,
            tz=tz,
            cancel=cancel,
        )

    def mama_rows(
        self,
        query: MesaAdaptiveMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[MesaAdaptiveMovingAverageRow]:
        """Fetch ``MAMA`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            MesaAdaptiveMovingAverageRow,
            tz=tz,
            cancel=cancel,
        )

    def mfi_rows(
        self,
        query: MoneyFlowIndexQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[MoneyFlowIndexRow]:
        """Fetch ``MFI`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            MoneyFlowIndexRow,
            tz=tz,
            cancel=cancel,
        )

    def midpoint_rows(
        self,
        query: MidpointQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[MidpointRow]:
        """Fetch ``MIDPOINT`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            MidpointRow,
            tz=tz,
            cancel=cancel,
        )

    def midprice_rows(
        self,
        query: MidpriceQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[MidpriceRow]:
        """Fetch ``MIDPRICE`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            MidpriceRow,
            tz=tz,
            cancel=cancel,
        )

    def minus_di_rows(
        self,
        query: MinusDirectionalIndicatorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[MinusDirectionalIndicatorRow]:
        """Fetch ``MINUS_DI`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            MinusDirectionalIndicatorRow,
            tz=tz,
            cancel=cancel,
        )

    def minus_dm_rows(
        self,
        query: MinusDirectionalMovementQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[MinusDirectionalMovementRow]:
        """Fetch ``MINUS_DM`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            MinusDirectionalMovementRow,
            tz=tz,
            cancel=cancel,
        )

    def mom_rows(
        self,
        query: MomentumQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[MomentumRow]:
        """Fetch ``MOM`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            MomentumRow,
            tz=tz,
            cancel=cancel,
        )

    def natr_rows(
        self,
        query: NormalizedAverageTrueRangeQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[NormalizedAverageTrueRangeRow]:
        """Fetch ``NATR`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            NormalizedAverageTrueRangeRow,
            tz=tz,
            cancel=cancel,
        )

    def natural_gas_rows(
        self,
        query: NaturalGasQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[NaturalGasRow]:
        """Fetch ``NATURAL_GAS`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            NaturalGasRow,
            tz=tz,
            cancel=cancel,
        )

    def nonfarm_payroll_rows(
        self,
        query: NonfarmPayrollQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[NonfarmPayrollRow]:
        """Fetch ``NONFARM_PAYROLL`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            NonfarmPayrollRow,
            tz=tz,
            cancel=cancel,
        )

    def obv_rows(
        self,
        query: OnBalanceVolumeQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[OnBalanceVolumeRow]:
        """Fetch ``OBV`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            OnBalanceVolumeRow,
            tz=tz,
            cancel=cancel,
        )

    def plus_di_rows(
        self,
        query: PlusDirectionalIndicatorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[PlusDirectionalIndicatorRow]:
        """Fetch ``PLUS_DI`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            PlusDirectionalIndicatorRow,
            tz=tz,
            cancel=cancel,
        )

    def plus_dm_rows(
        self,
        query: PlusDirectionalMovementQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[PlusDirectionalMovementRow]:
        """Fetch ``PLUS_DM`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            PlusDirectionalMovementRow,
            tz=tz,
            cancel=cancel,
        )

    def ppo_rows(
        self,
        query: PercentagePriceOscillatorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[PercentagePriceOscillatorRow]:
        """Fetch ``PPO`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            PercentagePriceOscillatorRow,
            tz=tz,
            cancel=cancel,
        )

    def real_gdp_rows(
        self,
        query: RealGdpQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[RealGdpRow]:
        """Fetch ``REAL_GDP`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            RealGdpRow,
            tz=tz,
            cancel=cancel,
        )

    def real_gdp_per_capita_rows(
        self,
        query: RealGdpPerCapitaQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[RealGdpPerCapitaRow]:
        """Fetch ``REAL_GDP_PER_CAPITA`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            RealGdpPerCapitaRow,
            tz=tz,
            cancel=cancel,
        )

    def retail_sales_rows(
        self,
        query: RetailSalesQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[RetailSalesRow]:
        """Fetch ``RETAIL_SALES`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            RetailSalesRow,
            tz=tz,
            cancel=cancel,
        )

    def roc_rows(
        self,
        query: RateOfChangeQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[RateOfChangeRow]:
        """Fetch ``ROC`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            RateOfChangeRow,
            tz=tz,
            cancel=cancel,
        )

    def rocr_rows(
        self,
        query: RateOfChangeRatioQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[RateOfChangeRatioRow]:
        """Fetch ``ROCR`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            RateOfChangeRatioRow,
            tz=tz,
            cancel=cancel,
        )

    def rsi_rows(
        self,
        query: RelativeStrengthIndexQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[RelativeStrengthIndexRow]:
        """Fetch ``RSI`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            RelativeStrengthIndexRow,
            tz=tz,
            cancel=cancel,
        )

    def sar_rows(
        self,
        query: ParabolicSarQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[ParabolicSarRow]:
        """Fetch ``SAR`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            ParabolicSarRow,
            tz=tz,
            cancel=cancel,
        )

    def shares_outstanding_rows(
        self,
        query: SharesOutstandingQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[SharesOutstandingRow]:
        """Fetch ``SHARES_OUTSTANDING`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            SharesOutstandingRow,
            tz=tz,
            cancel=cancel,
        )

    def sma_rows(
        self,
        query: SimpleMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[SimpleMovingAverageRow]:
        """Fetch ``SMA`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            SimpleMovingAverageRow,
            tz=tz,
            cancel=cancel,
        )

    def splits_rows(
        self,
        query: SplitsQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[SplitsRow]:
        """Fetch ``SPLITS`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            SplitsRow,
            tz=tz,
            cancel=cancel,
        )

    def stoch_rows(
        self,
        query: StochasticOscillatorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[StochasticOscillatorRow]:
        """Fetch ``STOCH`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            StochasticOscillatorRow,
            tz=tz,
            cancel=cancel,
        )

    def stochf_rows(
        self,
        query: StochasticFastQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[StochasticFastRow]:
        """Fetch ``STOCHF`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            StochasticFastRow,
            tz=tz,
            cancel=cancel,
        )

    def stochrsi_rows(
        self,
        query: StochasticRelativeStrengthIndexQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[StochasticRelativeStrengthIndexRow]:
        """Fetch ``STOCHRSI`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            StochasticRelativeStrengthIndexRow,
            tz=tz,
            cancel=cancel,
        )

    def sugar_rows(
        self,
        query: SugarQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[SugarRow]:
        """Fetch ``SUGAR`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            SugarRow,
            tz=tz,
            cancel=cancel,
        )

    def symbol_search_rows(
        self,
        query: SymbolSearchQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[SymbolSearchRow]:
        """Fetch ``SYMBOL_SEARCH`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            SymbolSearchRow,
            tz=tz,
            cancel=cancel,
        )

    def t3_rows(
        self,
        query: TillsonT3Query,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TillsonT3Row]:
        """Fetch ``T3`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TillsonT3Row,
            tz=tz,
            cancel=cancel,
        )

    def tema_rows(
        self,
        query: TripleExponentialMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TripleExponentialMovingAverageRow]:
        """Fetch ``TEMA`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TripleExponentialMovingAverageRow,
            tz=tz,
            cancel=cancel,
        )

    def time_series_daily_rows(
        self,
        query: TimeSeriesDailyQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TimeSeriesDailyRow]:
        """Fetch ``TIME_SERIES_DAILY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TimeSeriesDailyRow,
            tz=tz,
            cancel=cancel,
        )

    def time_series_daily_adjusted_rows(
        self,
        query: TimeSeriesDailyAdjustedQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TimeSeriesDailyAdjustedRow]:
        """Fetch ``TIME_SERIES_DAILY_ADJUSTED`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TimeSeriesDailyAdjustedRow,
            tz=tz,
            cancel=cancel,
        )

    def time_series_intraday_rows(
        self,
        query: TimeSeriesIntradayQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TimeSeriesIntradayRow]:
        """Fetch ``TIME_SERIES_INTRADAY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TimeSeriesIntradayRow,
            tz=tz,
            cancel=cancel,
        )

    def time_series_monthly_rows(
        self,
        query: TimeSeriesMonthlyQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TimeSeriesMonthlyRow]:
        """Fetch ``TIME_SERIES_MONTHLY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TimeSeriesMonthlyRow,
            tz=tz,
            cancel=cancel,
        )

    def time_series_monthly_adjusted_rows(
        self,
        query: TimeSeriesMonthlyAdjustedQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TimeSeriesMonthlyAdjustedRow]:
        """Fetch ``TIME_SERIES_MONTHLY_ADJUSTED`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TimeSeriesMonthlyAdjustedRow,
            tz=tz,
            cancel=cancel,
        )

    def time_series_weekly_rows(
        self,
        query: TimeSeriesWeeklyQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TimeSeriesWeeklyRow]:
        """Fetch ``TIME_SERIES_WEEKLY`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TimeSeriesWeeklyRow,
            tz=tz,
            cancel=cancel,
        )

    def time_series_weekly_adjusted_rows(
        self,
        query: TimeSeriesWeeklyAdjustedQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TimeSeriesWeeklyAdjustedRow]:
        """Fetch ``TIME_SERIES_WEEKLY_ADJUSTED`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TimeSeriesWeeklyAdjustedRow,
            tz=tz,
            cancel=cancel,
        )

    def trange_rows(
        self,
        query: TrueRangeQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TrueRangeRow]:
        """Fetch ``TRANGE`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TrueRangeRow,
            tz=tz,
            cancel=cancel,
        )

    def treasury_yield_rows(
        self,
        query: TreasuryYieldQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TreasuryYieldRow]:
        """Fetch ``TREASURY_YIELD`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TreasuryYieldRow,
            tz=tz,
            cancel=cancel,
        )

    def trima_rows(
        self,
        query: TriangularMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TriangularMovingAverageRow]:
        """Fetch ``TRIMA`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TriangularMovingAverageRow,
            tz=tz,
            cancel=cancel,
        )

    def trix_rows(
        self,
        query: TrixQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[TrixRow]:
        """Fetch ``TRIX`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            TrixRow,
            tz=tz,
            cancel=cancel,
        )

    def ultosc_rows(
        self,
        query: UltimateOscillatorQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[UltimateOscillatorRow]:
        """Fetch ``ULTOSC`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            UltimateOscillatorRow,
            tz=tz,
            cancel=cancel,
        )

    def unemployment_rows(
        self,
        query: UnemploymentQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[UnemploymentRow]:
        """Fetch ``UNEMPLOYMENT`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            UnemploymentRow,
            tz=tz,
            cancel=cancel,
        )

    def vwap_rows(
        self,
        query: VolumeWeightedAveragePriceQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[VolumeWeightedAveragePriceRow]:
        """Fetch ``VWAP`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            VolumeWeightedAveragePriceRow,
            tz=tz,
            cancel=cancel,
        )

    def wheat_rows(
        self,
        query: WheatQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[WheatRow]:
        """Fetch ``WHEAT`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            WheatRow,
            tz=tz,
            cancel=cancel,
        )

    def willr_rows(
        self,
        query: WilliamsPercentRangeQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[WilliamsPercentRangeRow]:
        """Fetch ``WILLR`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            WilliamsPercentRangeRow,
            tz=tz,
            cancel=cancel,
        )

    def wma_rows(
        self,
        query: WeightedMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[WeightedMovingAverageRow]:
        """Fetch ``WMA`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            WeightedMovingAverageRow,
            tz=tz,
            cancel=cancel,
        )

    def wti_rows(
        self,
        query: CrudeOilWtiQuery,
        *,
        tz: tzinfo | None = None,
        cancel: CancelToken | None = None,
    ) -> list[CrudeOilWtiRow]:
        """Fetch ``WTI`` as CSV and decode every row."""
        return self.collect_rows(
            query.data_type_csv(),
            CrudeOilWtiRow,
            tz=tz,
            cancel=cancel,
        )


class AsyncCSVRowsMixin:
    """Async ``<function>_rows`` helpers built on ``collect_rows``."""

    async def collect_rows(
        self,
        query: Query,
        record_type: type[RowT],
        *,
        tz: tzinfo | None = None,
    ) -> list[RowT]:
        raise NotImplementedError

    async def ad_rows(
        self,
        query: ChaikinAdLineQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[ChaikinAdLineRow]:
        """Fetch ``AD`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            ChaikinAdLineRow,
            tz=tz,
        )

    async def adosc_rows(
        self,
        query: ChaikinAdOscillatorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[ChaikinAdOscillatorRow]:
        """Fetch ``ADOSC`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            ChaikinAdOscillatorRow,
            tz=tz,
        )

    async def adx_rows(
        self,
        query: AverageDirectionalMovementIndexQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[AverageDirectionalMovementIndexRow]:
        """Fetch ``ADX`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            AverageDirectionalMovementIndexRow,
            tz=tz,
        )

    async def adxr_rows(
        self,
        query: AverageDirectionalMovementIndexRatingQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[AverageDirectionalMovementIndexRatingRow]:
        """Fetch ``ADXR`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            AverageDirectionalMovementIndexRatingRow,
            tz=tz,
        )

    async def all_commodities_rows(
        self,
        query: AllCommoditiesQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[AllCommoditiesRow]:
        """Fetch ``ALL_COMMODITIES`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            AllCommoditiesRow,
            tz=tz,
        )

    async def aluminum_rows(
        self,
        query: AluminumQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[AluminumRow]:
        """Fetch ``ALUMINUM`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            AluminumRow,
            tz=tz,
        )

    async def apo_rows(
        self,
        query: AbsolutePriceOscillatorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[AbsolutePriceOscillatorRow]:
        """Fetch ``APO`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            AbsolutePriceOscillatorRow,
            tz=tz,
        )

    async def aroon_rows(
        self,
        query: AroonQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[AroonRow]:
        """Fetch ``AROON`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            AroonRow,
            tz=tz,
        )

    async def aroonosc_rows(
        self,
        query: AroonOscillatorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[AroonOscillatorRow]:
        """Fetch ``AROONOSC`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            AroonOscillatorRow,
            tz=tz,
        )

    async def atr_rows(
        self,
        query: AverageTrueRangeQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[AverageTrueRangeRow]:
        """Fetch ``ATR`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            AverageTrueRangeRow,
            tz=tz,
        )

    async def bbands_rows(
        self,
        query: BollingerBandsQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[BollingerBandsRow]:
        """Fetch ``BBANDS`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            BollingerBandsRow,
            tz=tz,
        )

    async def bop_rows(
        self,
        query: BalanceOfPowerQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[BalanceOfPowerRow]:
        """Fetch ``BOP`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            BalanceOfPowerRow,
            tz=tz,
        )

    async def brent_rows(
        self,
        query: CrudeOilBrentQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[CrudeOilBrentRow]:
        """Fetch ``BRENT`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            CrudeOilBrentRow,
            tz=tz,
        )

    async def cci_rows(
        self,
        query: CommodityChannelIndexQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[CommodityChannelIndexRow]:
        """Fetch ``CCI`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            CommodityChannelIndexRow,
            tz=tz,
        )

    async def cmo_rows(
        self,
        query: ChandeMomentumOscillatorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[ChandeMomentumOscillatorRow]:
        """Fetch ``CMO`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            ChandeMomentumOscillatorRow,
            tz=tz,
        )

    async def coffee_rows(
        self,
        query: CoffeeQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[CoffeeRow]:
        """Fetch ``COFFEE`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            CoffeeRow,
            tz=tz,
        )

    async def copper_rows(
        self,
        query: CopperQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[CopperRow]:
        """Fetch ``COPPER`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            CopperRow,
            tz=tz,
        )

    async def corn_rows(
        self,
        query: CornQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[CornRow]:
        """Fetch ``CORN`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            CornRow,
            tz=tz,
        )

    async def cotton_rows(
        self,
        query: CottonQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[CottonRow]:
        """Fetch ``COTTON`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            CottonRow,
            tz=tz,
        )

    async def cpi_rows(
        self,
        query: ConsumerPriceIndexQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[ConsumerPriceIndexRow]:
        """Fetch ``CPI`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            ConsumerPriceIndexRow,
            tz=tz,
        )

    async def crypto_intraday_rows(
        self,
        query: CryptoIntradayQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[CryptoIntradayRow]:
        """Fetch ``CRYPTO_INTRADAY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            CryptoIntradayRow,
            tz=tz,
        )

    async def dema_rows(
        self,
        query: DoubleExponentialMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[DoubleExponentialMovingAverageRow]:
        """Fetch ``DEMA`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            DoubleExponentialMovingAverageRow,
            tz=tz,
        )

    async def digital_currency_daily_rows(
        self,
        query: DigitalCurrencyDailyQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[DigitalCurrencyDailyRow]:
        """Fetch ``DIGITAL_CURRENCY_DAILY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            DigitalCurrencyDailyRow,
            tz=tz,
        )

    async def digital_currency_monthly_rows(
        self,
        query: DigitalCurrencyMonthlyQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[DigitalCurrencyMonthlyRow]:
        """Fetch ``DIGITAL_CURRENCY_MONTHLY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            DigitalCurrencyMonthlyRow,
            tz=tz,
        )

    async def digital_currency_weekly_rows(
        self,
        query: DigitalCurrencyWeeklyQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[DigitalCurrencyWeeklyRow]:
        """Fetch ``DIGITAL_CURRENCY_WEEKLY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            DigitalCurrencyWeeklyRow,
            tz=tz,
        )

    async def dividends_rows(
        self,
        query: DividendsQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[DividendsRow]:
        """Fetch ``DIVIDENDS`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            DividendsRow,
            tz=tz,
        )

    async def durables_rows(
        self,
        query: DurablesQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[DurablesRow]:
        """Fetch ``DURABLES`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            DurablesRow,
            tz=tz,
        )

    async def dx_rows(
        self,
        query: DirectionalMovementIndexQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[DirectionalMovementIndexRow]:
        """Fetch ``DX`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            DirectionalMovementIndexRow,
            tz=tz,
        )

    async def earnings_calendar_rows(
        self,
        query: EarningsCalendarQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[EarningsCalendarRow]:
        """Fetch ``EARNINGS_CALENDAR`` as CSV and decode every row."""
        return await self.collect_rows(
            query,
            EarningsCalendarRow,
            tz=tz,
        )

    async def ema_rows(
        self,
        query: ExponentialMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[ExponentialMovingAverageRow]:
        """Fetch ``EMA`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            ExponentialMovingAverageRow,
            tz=tz,
        )

    async def federal_funds_rate_rows(
        self,
        query: FederalFundsRateQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[FederalFundsRateRow]:
        """Fetch ``FEDERAL_FUNDS_RATE`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            FederalFundsRateRow,
            tz=tz,
        )

    async def fx_daily_rows(
        self,
        query: FxDailyQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[FxDailyRow]:
        """Fetch ``FX_DAILY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            FxDailyRow,
            tz=tz,
        )

    async def fx_intraday_rows(
        self,
        query: FxIntradayQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[FxIntradayRow]:
        """Fetch ``FX_INTRADAY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            FxIntradayRow,
            tz=tz,
        )

    async def fx_monthly_rows(
        self,
        query: FxMonthlyQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[FxMonthlyRow]:
        """Fetch ``FX_MONTHLY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            FxMonthlyRow,
            tz=tz,
        )

    async def fx_weekly_rows(
        self,
        query: FxWeeklyQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[FxWeeklyRow]:
        """Fetch ``FX_WEEKLY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            FxWeeklyRow,
            tz=tz,
        )

    async def global_quote_rows(
        self,
        query: GlobalQuoteQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[GlobalQuoteRow]:
        """Fetch ``GLOBAL_QUOTE`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            GlobalQuoteRow,
            tz=tz,
        )

    async def ht_dcperiod_rows(
        self,
        query: HilbertTransformDominantCyclePeriodQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[HilbertTransformDominantCyclePeriodRow]:
        """Fetch ``HT_DCPERIOD`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            HilbertTransformDominantCyclePeriodRow,
            tz=tz,
        )

    async def ht_dcphase_rows(
        self,
        query: HilbertTransformDominantCyclePhaseQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[HilbertTransformDominantCyclePhaseRow]:
        """Fetch ``HT_DCPHASE`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            HilbertTransformDominantCyclePhaseRow,
            tz=tz,
        )

    async def ht_phasor_rows(
        self,
        query: HilbertTransformPhasorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[HilbertTransformPhasorRow]:
        """Fetch ``HT_PHASOR`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            HilbertTransformPhasorRow,
            tz=tz,
        )

    async def ht_sine_rows(
        self,
        query: HilbertTransformSineWaveQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[HilbertTransformSineWaveRow]:
        """Fetch ``HT_SINE`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            HilbertTransformSineWaveRow,
            tz=tz,
        )

    async def ht_trendline_rows(
        self,
        query: HilbertTransformTrendlineQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[HilbertTransformTrendlineRow]:
        """Fetch ``HT_TRENDLINE`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            HilbertTransformTrendlineRow,
            tz=tz,
        )

    async def ht_trendmode_rows(
        self,
        query: HilbertTransformTrendModeQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[HilbertTransformTrendModeRow]:
        """Fetch ``HT_TRENDMODE`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            HilbertTransformTrendModeRow,
            tz=tz,
        )

    async def inflation_rows(
        self,
        query: InflationQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[InflationRow]:
        """Fetch ``INFLATION`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            InflationRow,
            tz=tz,
        )

    async def ipo_calendar_rows(
        self,
        query: IpoCalendarQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[IpoCalendarRow]:
        """Fetch ``IPO_CALENDAR`` as CSV and decode every row."""
        return await self.collect_rows(
            query,
            IpoCalendarRow,
            tz=tz,
        )

    async def kama_rows(
        self,
        query: KaufmanAdaptiveMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[KaufmanAdaptiveMovingAverageRow]:
        """Fetch ``KAMA`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            KaufmanAdaptiveMovingAverageRow,
            tz=tz,
        )

    async def listing_status_rows(
        self,
        query: ListingStatusQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[ListingStatusRow]:
        """Fetch ``LISTING_STATUS`` as CSV and decode every row."""
        return await self.collect_rows(
            query,
            ListingStatusRow,
            tz=tz,
        )

    async def macd_rows(
        self,
        query: MovingAverageConvergenceDivergenceQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[MovingAverageConvergenceDivergenceRow]:
        """Fetch ``MACD`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            MovingAverageConvergenceDivergenceRow,
            tz=tz,
        )

    async def macdext_rows(
        self,
        query: MovingAverageConvergenceDivergenceExtendedQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[MovingAverageConvergenceDivergenceExtendedRow]:
        """Fetch ``MACDEXT`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            MovingAverageConvergenceDivergenceExtendedRow,
            tz=tz,
        )

    async def mama_rows(
        self,
        query: MesaAdaptiveMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[MesaAdaptiveMovingAverageRow]:
        """Fetch ``MAMA`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            MesaAdaptiveMovingAverageRow,
            tz=tz,
        )

    async def mfi_rows(
        self,
        query: MoneyFlowIndexQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[MoneyFlowIndexRow]:
        """Fetch ``MFI`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            MoneyFlowIndexRow,
            tz=tz,
        )

    async def midpoint_rows(
        self,
        query: MidpointQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[MidpointRow]:
        """Fetch ``MIDPOINT`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            MidpointRow,
            tz=tz,
        )

    async def midprice_rows(
        self,
        query: MidpriceQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[MidpriceRow]:
        """Fetch ``MIDPRICE`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            MidpriceRow,
            tz=tz,
        )

    async def minus_di_rows(
        self,
        query: MinusDirectionalIndicatorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[MinusDirectionalIndicatorRow]:
        """Fetch ``MINUS_DI`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            MinusDirectionalIndicatorRow,
            tz=tz,
        )

    async def minus_dm_rows(
        self,
        query: MinusDirectionalMovementQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[MinusDirectionalMovementRow]:
        """Fetch ``MINUS_DM`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            MinusDirectionalMovementRow,
            tz=tz,
        )

    async def mom_rows(
        self,
        query: MomentumQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[MomentumRow]:
        """Fetch ``MOM`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            MomentumRow,
            tz=tz,
        )

    async def natr_rows(
        self,
        query: NormalizedAverageTrueRangeQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[NormalizedAverageTrueRangeRow]:
        """Fetch ``NATR`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            NormalizedAverageTrueRangeRow,
            tz=tz,
        )

    async def natural_gas_rows(
        self,
        query: NaturalGasQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[NaturalGasRow]:
        """Fetch ``NATURAL_GAS`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            NaturalGasRow,
            tz=tz,
        )

    async def nonfarm_payroll_rows(
        self,
        query: NonfarmPayrollQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[NonfarmPayrollRow]:
        """Fetch ``NONFARM_PAYROLL`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            NonfarmPayrollRow,
            tz=tz,
        )

    async def obv_rows(
        self,
        query: OnBalanceVolumeQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[OnBalanceVolumeRow]:
        """Fetch ``OBV`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            OnBalanceVolumeRow,
            tz=tz,
        )

    async def plus_di_rows(
        self,
        query: PlusDirectionalIndicatorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[PlusDirectionalIndicatorRow]:
        """Fetch ``PLUS_DI`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            PlusDirectionalIndicatorRow,
            tz=tz,
        )

    async def plus_dm_rows(
        self,
        query: PlusDirectionalMovementQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[PlusDirectionalMovementRow]:
        """Fetch ``PLUS_DM`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            PlusDirectionalMovementRow,
            tz=tz,
        )

    async def ppo_rows(
        self,
        query: PercentagePriceOscillatorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[PercentagePriceOscillatorRow]:
        """Fetch ``PPO`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            PercentagePriceOscillatorRow,
            tz=tz,
        )

    async def real_gdp_rows(
        self,
        query: RealGdpQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[RealGdpRow]:
        """Fetch ``REAL_GDP`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            RealGdpRow,
            tz=tz,
        )

    async def real_gdp_per_capita_rows(
        self,
        query: RealGdpPerCapitaQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[RealGdpPerCapitaRow]:
        """Fetch ``REAL_GDP_PER_CAPITA`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            RealGdpPerCapitaRow,
            tz=tz,
        )

    async def retail_sales_rows(
        self,
        query: RetailSalesQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[RetailSalesRow]:
        """Fetch ``RETAIL_SALES`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            RetailSalesRow,
            tz=tz,
        )

    async def roc_rows(
        self,
        query: RateOfChangeQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[RateOfChangeRow]:
        """Fetch ``ROC`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            RateOfChangeRow,
            tz=tz,
        )

    async def rocr_rows(
        self,
        query: RateOfChangeRatioQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[RateOfChangeRatioRow]:
        """Fetch ``ROCR`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            RateOfChangeRatioRow,
            tz=tz,
        )

    async def rsi_rows(
        self,
        query: RelativeStrengthIndexQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[RelativeStrengthIndexRow]:
        """Fetch ``RSI`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            RelativeStrengthIndexRow,
            tz=tz,
        )

    async def sar_rows(
        self,
        query: ParabolicSarQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[ParabolicSarRow]:
        """Fetch ``SAR`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            ParabolicSarRow,
            tz=tz,
        )

    async def shares_outstanding_rows(
        self,
        query: SharesOutstandingQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[SharesOutstandingRow]:
        """Fetch ``SHARES_OUTSTANDING`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            SharesOutstandingRow,
            tz=tz,
        )

    async def sma_rows(
        self,
        query: SimpleMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[SimpleMovingAverageRow]:
        """Fetch ``SMA`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            SimpleMovingAverageRow,
            tz=tz,
        )

    async def splits_rows(
        self,
        query: SplitsQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[SplitsRow]:
        """Fetch ``SPLITS`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            SplitsRow,
            tz=tz,
        )

    async def stoch_rows(
        self,
        query: StochasticOscillatorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[StochasticOscillatorRow]:
        """Fetch ``STOCH`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            StochasticOscillatorRow,
            tz=tz,
        )

    async def stochf_rows(
        self,
        query: StochasticFastQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[StochasticFastRow]:
        """Fetch ``STOCHF`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            StochasticFastRow,
            tz=tz,
        )

    async def stochrsi_rows(
        self,
        query: StochasticRelativeStrengthIndexQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[StochasticRelativeStrengthIndexRow]:
        """Fetch ``STOCHRSI`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            StochasticRelativeStrengthIndexRow,
            tz=tz,
        )

    async def sugar_rows(
        self,
        query: SugarQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[SugarRow]:
        """Fetch ``SUGAR`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            SugarRow,
            tz=tz,
        )

    async def symbol_search_rows(
        self,
        query: SymbolSearchQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[SymbolSearchRow]:
        """Fetch ``SYMBOL_SEARCH`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            SymbolSearchRow,
            tz=tz,
        )

    async def t3_rows(
        self,
        query: TillsonT3Query,
        *,
        tz: tzinfo | None = None,
    ) -> list[TillsonT3Row]:
        """Fetch ``T3`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TillsonT3Row,
            tz=tz,
        )

    async def tema_rows(
        self,
        query: TripleExponentialMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TripleExponentialMovingAverageRow]:
        """Fetch ``TEMA`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TripleExponentialMovingAverageRow,
            tz=tz,
        )

    async def time_series_daily_rows(
        self,
        query: TimeSeriesDailyQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TimeSeriesDailyRow]:
        """Fetch ``TIME_SERIES_DAILY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TimeSeriesDailyRow,
            tz=tz,
        )

    async def time_series_daily_adjusted_rows(
        self,
        query: TimeSeriesDailyAdjustedQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TimeSeriesDailyAdjustedRow]:
        """Fetch ``TIME_SERIES_DAILY_ADJUSTED`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TimeSeriesDailyAdjustedRow,
            tz=tz,
        )

    async def time_series_intraday_rows(
        self,
        query: TimeSeriesIntradayQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TimeSeriesIntradayRow]:
        """Fetch ``TIME_SERIES_INTRADAY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TimeSeriesIntradayRow,
            tz=tz,
        )

    async def time_series_monthly_rows(
        self,
        query: TimeSeriesMonthlyQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TimeSeriesMonthlyRow]:
        """Fetch ``TIME_SERIES_MONTHLY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TimeSeriesMonthlyRow,
            tz=tz,
        )

    async def time_series_monthly_adjusted_rows(
        self,
        query: TimeSeriesMonthlyAdjustedQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TimeSeriesMonthlyAdjustedRow]:
        """Fetch ``TIME_SERIES_MONTHLY_ADJUSTED`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TimeSeriesMonthlyAdjustedRow,
            tz=tz,
        )

    async def time_series_weekly_rows(
        self,
        query: TimeSeriesWeeklyQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TimeSeriesWeeklyRow]:
        """Fetch ``TIME_SERIES_WEEKLY`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TimeSeriesWeeklyRow,
            tz=tz,
        )

    async def time_series_weekly_adjusted_rows(
        self,
        query: TimeSeriesWeeklyAdjustedQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TimeSeriesWeeklyAdjustedRow]:
        """Fetch ``TIME_SERIES_WEEKLY_ADJUSTED`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TimeSeriesWeeklyAdjustedRow,
            tz=tz,
        )

    async def trange_rows(
        self,
        query: TrueRangeQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TrueRangeRow]:
        """Fetch ``TRANGE`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TrueRangeRow,
            tz=tz,
        )

    async def treasury_yield_rows(
        self,
        query: TreasuryYieldQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TreasuryYieldRow]:
        """Fetch ``TREASURY_YIELD`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TreasuryYieldRow,
            tz=tz,
        )

    async def trima_rows(
        self,
        query: TriangularMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TriangularMovingAverageRow]:
        """Fetch ``TRIMA`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TriangularMovingAverageRow,
            tz=tz,
        )

    async def trix_rows(
        self,
        query: TrixQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[TrixRow]:
        """Fetch ``TRIX`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            TrixRow,
            tz=tz,
        )

    async def ultosc_rows(
        self,
        query: UltimateOscillatorQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[UltimateOscillatorRow]:
        """Fetch ``ULTOSC`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            UltimateOscillatorRow,
            tz=tz,
        )

    async def unemployment_rows(
        self,
        query: UnemploymentQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[UnemploymentRow]:
        """Fetch ``UNEMPLOYMENT`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            UnemploymentRow,
            tz=tz,
        )

    async def vwap_rows(
        self,
        query: VolumeWeightedAveragePriceQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[VolumeWeightedAveragePriceRow]:
        """Fetch ``VWAP`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            VolumeWeightedAveragePriceRow,
            tz=tz,
        )

    async def wheat_rows(
        self,
        query: WheatQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[WheatRow]:
        """Fetch ``WHEAT`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            WheatRow,
            tz=tz,
        )

    async def willr_rows(
        self,
        query: WilliamsPercentRangeQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[WilliamsPercentRangeRow]:
        """Fetch ``WILLR`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            WilliamsPercentRangeRow,
            tz=tz,
        )

    async def wma_rows(
        self,
        query: WeightedMovingAverageQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[WeightedMovingAverageRow]:
        """Fetch ``WMA`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            WeightedMovingAverageRow,
            tz=tz,
        )

    async def wti_rows(
        self,
        query: CrudeOilWtiQuery,
        *,
        tz: tzinfo | None = None,
    ) -> list[CrudeOilWtiRow]:
        """Fetch ``WTI`` as CSV and decode every row."""
        return await self.collect_rows(
            query.data_type_csv(),
            CrudeOilWtiRow,
            tz=tz,
        )


__all__ = [
    "CSVRowsMixin",
    "AsyncCSVRowsMixin",
]
