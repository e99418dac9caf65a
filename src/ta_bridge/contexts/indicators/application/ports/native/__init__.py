from .talib_native import NativeCall, TaLibNative

__all__ = ["NativeCall", "TaLibNative"]
