"""
Catalog entries for statistic functions.

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import FunctionId, IndicatorSpec

from ._options import period, real

_GROUP = "Statistic Functions"


def _regression(name: str, title: str) -> IndicatorSpec:
    return IndicatorSpec(
        name=name,
        function_id=FunctionId(name),
        title=title,
        group=_GROUP,
        inputs=("prices",),
        options=(period(14, bounded=True),),
    )


def defs() -> tuple[IndicatorSpec, ...]:
    """
    Return statistic function specs in stable order.

    Args:
        None.
    Returns:
        tuple[IndicatorSpec, ...]: Immutable ordered statistic specs.
    Assumptions:
        Two-series functions (`correl`, `beta`) take both series as separate
        single-array inputs in caller order.
    Raises:
        ValueError: If any spec violates domain invariants.
    Side Effects:
        None.
    """
    return (
        IndicatorSpec(
            name="correl",
            function_id=FunctionId("CORREL"),
            title="Pearson's Correlation Coefficient (r)",
            group=_GROUP,
            inputs=("prices1", "prices2"),
            options=(period(30, bounded=True),),
        ),
        IndicatorSpec(
            name="beta",
            function_id=FunctionId("BETA"),
            title="Beta",
            group=_GROUP,
            inputs=("prices1", "prices2"),
            options=(period(5, bounded=True),),
        ),
        IndicatorSpec(
            name="var",
            function_id=FunctionId("VAR"),
            title="Variance",
            group=_GROUP,
            inputs=("prices",),
            options=(period(5, bounded=True), real("nbdev", 1.0, "optInNbDev")),
        ),
        IndicatorSpec(
            name="stddev",
            function_id=FunctionId("STDDEV"),
            title="Standard Deviation",
            group=_GROUP,
            inputs=("prices",),
            options=(period(5, bounded=True), real("nbdev", 1.0, "optInNbDev")),
        ),
        _regression("linearreg", "Linear Regression"),
        _regression("linearreg_angle", "Linear Regression Angle"),
        _regression("linearreg_intercept", "Linear Regression Intercept"),
        _regression("linearreg_slope", "Linear Regression Slope"),
        _regression("tsf", "Time Series Forecast"),
    )
