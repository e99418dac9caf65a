"""
Catalog entries for volatility indicators.

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import FunctionId, IndicatorSpec

from ._options import period

_GROUP = "Volatility Indicators"
_HLC = ("high", "low", "close")


def defs() -> tuple[IndicatorSpec, ...]:
    """
    Return volatility indicator specs in stable order.

    Args:
        None.
    Returns:
        tuple[IndicatorSpec, ...]: Immutable ordered volatility specs.
    Assumptions:
        None.
    Raises:
        ValueError: If any spec violates domain invariants.
    Side Effects:
        None.
    """
    return (
        IndicatorSpec(
            name="atr",
            function_id=FunctionId("ATR"),
            title="Average True Range",
            group=_GROUP,
            inputs=_HLC,
            options=(period(14),),
        ),
        IndicatorSpec(
            name="natr",
            function_id=FunctionId("NATR"),
            title="Normalized Average True Range",
            group=_GROUP,
            inputs=_HLC,
            options=(period(14),),
        ),
        IndicatorSpec(
            name="trange",
            function_id=FunctionId("TRANGE"),
            title="True Range",
            group=_GROUP,
            inputs=_HLC,
        ),
    )
