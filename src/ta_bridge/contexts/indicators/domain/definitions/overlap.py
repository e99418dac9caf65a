"""
Catalog entries for overlap studies (moving averages, bands, SAR).

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import FunctionId, IndicatorSpec

from ._options import ma_type, period, real

_GROUP = "Overlap Studies"


def _moving_average(name: str, title: str) -> IndicatorSpec:
    return IndicatorSpec(
        name=name,
        function_id=FunctionId(name),
        title=title,
        group=_GROUP,
        inputs=("prices",),
        options=(period(30, bounded=True),),
    )


def defs() -> tuple[IndicatorSpec, ...]:
    """
    Return overlap-study indicator specs in stable order.

    Args:
        None.
    Returns:
        tuple[IndicatorSpec, ...]: Immutable ordered overlap specs.
    Assumptions:
        Defaults mirror the documented public signatures of each indicator.
    Raises:
        ValueError: If any spec violates domain invariants.
    Side Effects:
        None.
    """
    return (
        _moving_average("sma", "Simple Moving Average"),
        _moving_average("ema", "Exponential Moving Average"),
        _moving_average("wma", "Weighted Moving Average"),
        _moving_average("dema", "Double Exponential Moving Average"),
        _moving_average("tema", "Triple Exponential Moving Average"),
        _moving_average("trima", "Triangular Moving Average"),
        _moving_average("kama", "Kaufman Adaptive Moving Average"),
        IndicatorSpec(
            name="t3",
            function_id=FunctionId("T3"),
            title="Triple Exponential Moving Average (T3)",
            group=_GROUP,
            inputs=("prices",),
            options=(
                period(5, bounded=True),
                real("vfactor", 0.7, "optInVFactor", hard_min=0.0, hard_max=1.0),
            ),
        ),
        IndicatorSpec(
            name="bbands",
            function_id=FunctionId("BBANDS"),
            title="Bollinger Bands",
            group=_GROUP,
            inputs=("prices",),
            options=(
                period(5, bounded=True),
                real("nbdev_up", 2.0, "optInNbDevUp"),
                real("nbdev_down", 2.0, "optInNbDevDn"),
                ma_type(),
            ),
            outputs=("upper_band", "middle_band", "lower_band"),
        ),
        IndicatorSpec(
            name="mama",
            function_id=FunctionId("MAMA"),
            title="MESA Adaptive Moving Average",
            group=_GROUP,
            inputs=("prices",),
            options=(
                real("fast_limit", 0.5, "optInFastLimit", hard_min=0.01, hard_max=0.99),
                real("slow_limit", 0.05, "optInSlowLimit", hard_min=0.01, hard_max=0.99),
            ),
            outputs=("mama", "fama"),
        ),
        IndicatorSpec(
            name="mavp",
            function_id=FunctionId("MAVP"),
            title="Moving average with variable period",
            group=_GROUP,
            inputs=("prices", "periods"),
            options=(
                period(2, name="min_period", native="optInMinPeriod"),
                period(30, name="max_period", native="optInMaxPeriod"),
                ma_type(),
            ),
        ),
        IndicatorSpec(
            name="ht_trendline",
            function_id=FunctionId("HT_TRENDLINE"),
            title="Hilbert Transform - Instantaneous Trendline",
            group=_GROUP,
            inputs=("prices",),
        ),
        IndicatorSpec(
            name="midpoint",
            function_id=FunctionId("MIDPOINT"),
            title="MidPoint over period",
            group=_GROUP,
            inputs=("prices",),
            options=(period(14, bounded=True),),
        ),
        IndicatorSpec(
            name="midprice",
            function_id=FunctionId("MIDPRICE"),
            title="Midpoint Price over period",
            group=_GROUP,
            inputs=("high", "low"),
            options=(period(14, bounded=True),),
        ),
        IndicatorSpec(
            name="sar",
            function_id=FunctionId("SAR"),
            title="Parabolic SAR",
            group=_GROUP,
            inputs=("high", "low"),
            options=(
                real("acceleration", 0.02, "optInAcceleration", hard_min=0.0),
                real("maximum", 0.20, "optInMaximum", hard_min=0.0),
            ),
        ),
        IndicatorSpec(
            name="sarext",
            function_id=FunctionId("SAREXT"),
            title="Parabolic SAR - Extended",
            group=_GROUP,
            inputs=("high", "low"),
            options=(
                real("start_value", 0.0, "optInStartValue"),
                real("offset_on_reverse", 0.0, "optInOffsetOnReverse", hard_min=0.0),
                real(
                    "acceleration_init",
                    0.02,
                    "optInAccelerationInitLong",
                    "optInAccelerationInitShort",
                    hard_min=0.0,
                ),
                real(
                    "acceleration_step",
                    0.02,
                    "optInAccelerationLong",
                    "optInAccelerationShort",
                    hard_min=0.0,
                ),
                real(
                    "acceleration_max",
                    0.20,
                    "optInAccelerationMaxLong",
                    "optInAccelerationMaxShort",
                    hard_min=0.0,
                ),
            ),
        ),
    )
