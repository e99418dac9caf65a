"""
Catalog entries for price transforms.

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import FunctionId, IndicatorSpec

_GROUP = "Price Transform"


def defs() -> tuple[IndicatorSpec, ...]:
    return (
        IndicatorSpec(
            name="avgprice",
            function_id=FunctionId("AVGPRICE"),
            title="Average Price",
            group=_GROUP,
            inputs=("open", "high", "low", "close"),
        ),
        IndicatorSpec(
            name="medprice",
            function_id=FunctionId("MEDPRICE"),
            title="Median Price",
            group=_GROUP,
            inputs=("high", "low"),
        ),
        IndicatorSpec(
            name="typprice",
            function_id=FunctionId("TYPPRICE"),
            title="Typical Price",
            group=_GROUP,
            inputs=("high", "low", "close"),
        ),
        IndicatorSpec(
            name="wclprice",
            function_id=FunctionId("WCLPRICE"),
            title="Weighted Close Price",
            group=_GROUP,
            inputs=("high", "low", "close"),
        ),
    )
