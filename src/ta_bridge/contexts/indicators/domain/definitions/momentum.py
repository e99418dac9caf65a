"""
Catalog entries for momentum indicators.

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import FunctionId, IndicatorSpec

from ._options import ma_type, period

_GROUP = "Momentum Indicators"
_HLC = ("high", "low", "close")
_MACD_OUTPUTS = ("macd", "macd_signal", "macd_hist")


def _single(
    name: str,
    title: str,
    *,
    default: int,
    inputs: tuple[str, ...] = ("prices",),
    bounded: bool = False,
) -> IndicatorSpec:
    return IndicatorSpec(
        name=name,
        function_id=FunctionId(name),
        title=title,
        group=_GROUP,
        inputs=inputs,
        options=(period(default, bounded=bounded),),
    )


def defs() -> tuple[IndicatorSpec, ...]:
    """
    Return momentum indicator specs in stable order.

    Args:
        None.
    Returns:
        tuple[IndicatorSpec, ...]: Immutable ordered momentum specs.
    Assumptions:
        Periods validated against input length are exactly the single-series
        oscillators whose window spans the input.
    Raises:
        ValueError: If any spec violates domain invariants.
    Side Effects:
        None.
    """
    return (
        _single("rsi", "Relative Strength Index", default=14, bounded=True),
        IndicatorSpec(
            name="macd",
            function_id=FunctionId("MACD"),
            title="Moving Average Convergence/Divergence",
            group=_GROUP,
            inputs=("prices",),
            options=(
                period(12, name="fast_period", native="optInFastPeriod"),
                period(26, name="slow_period", native="optInSlowPeriod"),
                period(9, name="signal_period", native="optInSignalPeriod"),
            ),
            outputs=_MACD_OUTPUTS,
        ),
        IndicatorSpec(
            name="macdext",
            function_id=FunctionId("MACDEXT"),
            title="MACD with controllable MA type",
            group=_GROUP,
            inputs=("prices",),
            options=(
                period(12, name="fast_period", native="optInFastPeriod"),
                ma_type(name="fast_ma_type", native="optInFastMAType"),
                period(26, name="slow_period", native="optInSlowPeriod"),
                ma_type(name="slow_ma_type", native="optInSlowMAType"),
                period(9, name="signal_period", native="optInSignalPeriod"),
                ma_type(name="signal_ma_type", native="optInSignalMAType"),
            ),
            outputs=_MACD_OUTPUTS,
        ),
        IndicatorSpec(
            name="macdfix",
            function_id=FunctionId("MACDFIX"),
            title="Moving Average Convergence/Divergence Fix 12/26",
            group=_GROUP,
            inputs=("prices",),
            options=(period(9, name="signal_period", native="optInSignalPeriod"),),
            outputs=_MACD_OUTPUTS,
        ),
        IndicatorSpec(
            name="stoch",
            function_id=FunctionId("STOCH"),
            title="Stochastic",
            group=_GROUP,
            inputs=_HLC,
            options=(
                period(5, name="fastk_period", native="optInFastK_Period"),
                period(3, name="slowk_period", native="optInSlowK_Period"),
                ma_type(name="slowk_ma_type", native="optInSlowK_MAType"),
                period(3, name="slowd_period", native="optInSlowD_Period"),
                ma_type(name="slowd_ma_type", native="optInSlowD_MAType"),
            ),
            outputs=("slow_k", "slow_d"),
        ),
        IndicatorSpec(
            name="stochf",
            function_id=FunctionId("STOCHF"),
            title="Stochastic Fast",
            group=_GROUP,
            inputs=_HLC,
            options=(
                period(5, name="fastk_period", native="optInFastK_Period"),
                period(3, name="fastd_period", native="optInFastD_Period"),
                ma_type(name="fastd_ma_type", native="optInFastD_MAType"),
            ),
            outputs=("fast_k", "fast_d"),
        ),
        IndicatorSpec(
            name="stochrsi",
            function_id=FunctionId("STOCHRSI"),
            title="Stochastic Relative Strength Index",
            group=_GROUP,
            inputs=("prices",),
            options=(
                period(14),
                period(5, name="fastk_period", native="optInFastK_Period"),
                period(3, name="fastd_period", native="optInFastD_Period"),
                ma_type(name="fastd_ma_type", native="optInFastD_MAType"),
            ),
            outputs=("fast_k", "fast_d"),
        ),
        _single("mom", "Momentum", default=10, bounded=True),
        _single("cci", "Commodity Channel Index", default=14, inputs=_HLC),
        _single("willr", "Williams' %R", default=14, inputs=_HLC),
        _single("roc", "Rate of change : ((price/prevPrice)-1)*100", default=10, bounded=True),
        _single(
            "rocp",
            "Rate of change Percentage: (price-prevPrice)/prevPrice",
            default=10,
            bounded=True,
        ),
        _single("rocr", "Rate of change ratio: (price/prevPrice)", default=10, bounded=True),
        _single(
            "rocr100",
            "Rate of change ratio 100 scale: (price/prevPrice)*100",
            default=10,
            bounded=True,
        ),
        IndicatorSpec(
            name="ppo",
            function_id=FunctionId("PPO"),
            title="Percentage Price Oscillator",
            group=_GROUP,
            inputs=("prices",),
            options=(
                period(12, name="fast_period", native="optInFastPeriod"),
                period(26, name="slow_period", native="optInSlowPeriod"),
                ma_type(),
            ),
        ),
        IndicatorSpec(
            name="apo",
            function_id=FunctionId("APO"),
            title="Absolute Price Oscillator",
            group=_GROUP,
            inputs=("prices",),
            options=(
                period(12, name="fast_period", native="optInFastPeriod"),
                period(26, name="slow_period", native="optInSlowPeriod"),
                ma_type(),
            ),
        ),
        _single("adx", "Average Directional Movement Index", default=14, inputs=_HLC),
        _single("adxr", "Average Directional Movement Index Rating", default=14, inputs=_HLC),
        IndicatorSpec(
            name="aroon",
            function_id=FunctionId("AROON"),
            title="Aroon",
            group=_GROUP,
            inputs=("high", "low"),
            options=(period(14),),
            outputs=("aroon_down", "aroon_up"),
        ),
        _single("aroonosc", "Aroon Oscillator", default=14, inputs=("high", "low")),
        IndicatorSpec(
            name="bop",
            function_id=FunctionId("BOP"),
            title="Balance Of Power",
            group=_GROUP,
            inputs=("open", "high", "low", "close"),
        ),
        _single("cmo", "Chande Momentum Oscillator", default=14, bounded=True),
        _single("dx", "Directional Movement Index", default=14, inputs=_HLC),
        _single("mfi", "Money Flow Index", default=14, inputs=(*_HLC, "volume")),
        _single("minus_di", "Minus Directional Indicator", default=14, inputs=_HLC),
        _single("minus_dm", "Minus Directional Movement", default=14, inputs=("high", "low")),
        _single("plus_di", "Plus Directional Indicator", default=14, inputs=_HLC),
        _single("plus_dm", "Plus Directional Movement", default=14, inputs=("high", "low")),
        _single(
            "trix",
            "1-day Rate-Of-Change (ROC) of a Triple Smooth EMA",
            default=30,
            bounded=True,
        ),
        IndicatorSpec(
            name="ultosc",
            function_id=FunctionId("ULTOSC"),
            title="Ultimate Oscillator",
            group=_GROUP,
            inputs=_HLC,
            options=(
                period(7, name="period1", native="optInTimePeriod1"),
                period(14, name="period2", native="optInTimePeriod2"),
                period(28, name="period3", native="optInTimePeriod3"),
            ),
        ),
    )
