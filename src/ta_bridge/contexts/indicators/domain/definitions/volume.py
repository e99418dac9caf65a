"""
Catalog entries for volume indicators.

`obv` mixes a single real series with a volume-only price bundle; callers
still pass `close, volume` in that order.

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import FunctionId, IndicatorSpec

from ._options import period

_GROUP = "Volume Indicators"
_HLCV = ("high", "low", "close", "volume")


def defs() -> tuple[IndicatorSpec, ...]:
    return (
        IndicatorSpec(
            name="obv",
            function_id=FunctionId("OBV"),
            title="On Balance Volume",
            group=_GROUP,
            inputs=("close", "volume"),
        ),
        IndicatorSpec(
            name="ad",
            function_id=FunctionId("AD"),
            title="Chaikin A/D Line",
            group=_GROUP,
            inputs=_HLCV,
        ),
        IndicatorSpec(
            name="adosc",
            function_id=FunctionId("ADOSC"),
            title="Chaikin A/D Oscillator",
            group=_GROUP,
            inputs=_HLCV,
            options=(
                period(3, name="fast_period", native="optInFastPeriod"),
                period(10, name="slow_period", native="optInSlowPeriod"),
            ),
        ),
    )
