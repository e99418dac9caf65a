"""
Arrange named caller series into the flat order a function schema consumes.

Related: ta_bridge.contexts.indicators.application.services.input_binder
"""

from __future__ import annotations

from typing import Any, Mapping

from ta_bridge.contexts.indicators.domain.entities import FunctionSchema
from ta_bridge.contexts.indicators.domain.errors import MissingBundleElementError


def arrange_inputs(schema: FunctionSchema, named: Mapping[str, Any]) -> list[Any]:
    """
    Build the flat caller input list for `schema` from named series.

    Price bundles take their arrays by role name (`open`, `high`, ...) in the
    schema's role order. Single-array parameters take the remaining names in
    the mapping's iteration order.

    Args:
        schema: Target function schema.
        named: Caller series keyed by caller-facing name, in caller order.
    Returns:
        list[Any]: Flat list ready for `InputBinder.bind`.
    Assumptions:
        Count mismatches are left for the binder to report.
    Raises:
        MissingBundleElementError: If a bundle role has no series of that name.
    Side Effects:
        None.
    """
    role_names = {
        role.value for param in schema.inputs if param.is_bundle for role in param.roles
    }
    remaining = [name for name in named if name not in role_names]

    flat: list[Any] = []
    for param in schema.inputs:
        if param.is_bundle:
            for position, role in enumerate(param.roles):
                if role.value not in named:
                    raise MissingBundleElementError(
                        function_id=str(schema.function_id),
                        role=role.value,
                        position=position,
                    )
                flat.append(named[role.value])
        elif remaining:
            flat.append(named[remaining.pop(0)])

    flat.extend(named[name] for name in remaining)
    return flat
