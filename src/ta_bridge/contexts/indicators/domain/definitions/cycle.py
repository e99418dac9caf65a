"""
Catalog entries for Hilbert-transform cycle indicators.

`ht_trendmode` produces integer output, widened to float by the call adapter.

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import FunctionId, IndicatorSpec

_GROUP = "Cycle Indicators"


def _cycle(name: str, title: str, outputs: tuple[str, ...] = ("value",)) -> IndicatorSpec:
    return IndicatorSpec(
        name=name,
        function_id=FunctionId(name),
        title=title,
        group=_GROUP,
        inputs=("prices",),
        outputs=outputs,
    )


def defs() -> tuple[IndicatorSpec, ...]:
    return (
        _cycle("ht_dcperiod", "Hilbert Transform - Dominant Cycle Period"),
        _cycle("ht_dcphase", "Hilbert Transform - Dominant Cycle Phase"),
        _cycle("ht_phasor", "Hilbert Transform - Phasor Components", ("in_phase", "quadrature")),
        _cycle("ht_sine", "Hilbert Transform - SineWave", ("sine", "lead_sine")),
        _cycle("ht_trendmode", "Hilbert Transform - Trend vs Cycle Mode"),
    )
