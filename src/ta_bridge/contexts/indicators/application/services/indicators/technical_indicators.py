"""
Public technical-analysis facade.

Related: ta_bridge.contexts.indicators.application.services.indicators.base,
  ta_bridge.contexts.indicators.adapters.outbound.native_ctypes.bootstrap
"""

from __future__ import annotations

from .cycle import CycleIndicators
from .momentum import MomentumIndicators
from .overlap import OverlapStudies
from .pattern import PatternRecognition
from .price_transform import PriceTransforms
from .statistic import StatisticFunctions
from .volatility import VolatilityIndicators
from .volume import VolumeIndicators


class TechnicalIndicators(
    OverlapStudies,
    MomentumIndicators,
    VolatilityIndicators,
    VolumeIndicators,
    PriceTransforms,
    CycleIndicators,
    StatisticFunctions,
    PatternRecognition,
):
    """
    One method per catalog indicator plus generic `compute` entry points.

    Usage:
        ta = TechnicalIndicators(native)
        upper, middle, lower = ta.bbands(close, period=20)
        atr = ta.atr(high, low, close)
    """
