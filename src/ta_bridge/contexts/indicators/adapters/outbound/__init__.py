from .native_ctypes import (
    CtypesTaLibNative,
    open_technical_indicators,
    talib_available,
)
from .registry import InMemoryFunctionSchemaRegistry

__all__ = [
    "CtypesTaLibNative",
    "InMemoryFunctionSchemaRegistry",
    "open_technical_indicators",
    "talib_available",
]
