from __future__ import annotations


class TaLibNotInstalledError(RuntimeError):
    """
    Raised when the TA-Lib C library cannot be located or loaded.

    Related: ...adapters.outbound.native_ctypes.library_loader
    """
