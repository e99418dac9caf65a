"""
Adapters package for indicators bounded context.
"""

from .outbound import (
    CtypesTaLibNative,
    InMemoryFunctionSchemaRegistry,
    open_technical_indicators,
    talib_available,
)

__all__ = [
    "CtypesTaLibNative",
    "InMemoryFunctionSchemaRegistry",
    "open_technical_indicators",
    "talib_available",
]
