"""
Convenience indicator catalog grouped by TA-Lib function group.

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec,
  ta_bridge.contexts.indicators.application.services.indicators.base
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import IndicatorSpec

from .cycle import defs as cycle_defs
from .momentum import defs as momentum_defs
from .overlap import defs as overlap_defs
from .pattern import defs as pattern_defs
from .pattern import pattern_names
from .price_transform import defs as price_transform_defs
from .statistic import defs as statistic_defs
from .volatility import defs as volatility_defs
from .volume import defs as volume_defs


def all_specs() -> tuple[IndicatorSpec, ...]:
    """
    Return the full catalog in stable cross-group order.

    Args:
        None.
    Returns:
        tuple[IndicatorSpec, ...]: Immutable concatenation ordered as overlap,
            momentum, volatility, volume, price transform, cycle, statistic, pattern.
    Assumptions:
        Each group-level defs() already returns deterministic tuples.
    Raises:
        None.
    Side Effects:
        None.
    """
    return (
        *overlap_defs(),
        *momentum_defs(),
        *volatility_defs(),
        *volume_defs(),
        *price_transform_defs(),
        *cycle_defs(),
        *statistic_defs(),
        *pattern_defs(),
    )


__all__ = ["all_specs", "pattern_names"]
