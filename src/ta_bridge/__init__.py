"""
TA-Lib indicator bindings: schema-driven input binding over the native abstract interface.
"""

from ta_bridge.contexts.indicators.adapters.outbound import (
    open_technical_indicators,
    talib_available,
)
from ta_bridge.contexts.indicators.application import IndicatorOutputs, TechnicalIndicators
from ta_bridge.contexts.indicators.domain.entities import MovingAverageType
from ta_bridge.contexts.indicators.domain.errors import (
    BindingError,
    InvalidParameterError,
    NativeCallError,
    TaLibNotInstalledError,
    UnknownIndicatorError,
)

__version__ = "0.1.0"

__all__ = [
    "BindingError",
    "IndicatorOutputs",
    "InvalidParameterError",
    "MovingAverageType",
    "NativeCallError",
    "TaLibNotInstalledError",
    "TechnicalIndicators",
    "UnknownIndicatorError",
    "open_technical_indicators",
    "talib_available",
]
