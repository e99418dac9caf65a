from .bootstrap import open_technical_indicators, talib_available
from .ctypes_talib_native import CtypesNativeCall, CtypesTaLibNative
from .library_loader import library_candidates, load_talib_library

__all__ = [
    "CtypesNativeCall",
    "CtypesTaLibNative",
    "library_candidates",
    "load_talib_library",
    "open_technical_indicators",
    "talib_available",
]
