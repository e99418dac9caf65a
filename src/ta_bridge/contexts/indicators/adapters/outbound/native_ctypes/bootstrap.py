"""
Composition of the ctypes native adapter, schema registry, and facade.

Related: ta_bridge.contexts.indicators.application.services.indicators.technical_indicators,
  ta_bridge.platform.config.talib_runtime
"""

from __future__ import annotations

import logging

from ta_bridge.contexts.indicators.adapters.outbound.registry import (
    InMemoryFunctionSchemaRegistry,
)
from ta_bridge.contexts.indicators.application.services import TechnicalIndicators
from ta_bridge.contexts.indicators.domain.errors import TaLibNotInstalledError
from ta_bridge.platform.config import TaLibRuntimeConfig

from .ctypes_talib_native import CtypesTaLibNative
from .library_loader import load_talib_library

log = logging.getLogger(__name__)


def open_technical_indicators(config: TaLibRuntimeConfig | None = None) -> TechnicalIndicators:
    """
    Load TA-Lib, snapshot every function schema, and build the facade.

    Args:
        config: Runtime lookup settings; defaults to `TaLibRuntimeConfig()`.
    Returns:
        TechnicalIndicators: Ready-to-use facade.
    Assumptions:
        Called once per process; the result is safe to share.
    Raises:
        TaLibNotInstalledError: If the library cannot be loaded.
        NativeCallError: If native initialization or introspection fails.
    Side Effects:
        Loads a shared library and initializes TA-Lib.
    """
    native = CtypesTaLibNative.from_config(config or TaLibRuntimeConfig())
    registry = InMemoryFunctionSchemaRegistry.from_native(native)
    return TechnicalIndicators(native, registry=registry)


def talib_available(config: TaLibRuntimeConfig | None = None) -> bool:
    """
    Report whether the TA-Lib shared library can be loaded.

    Args:
        config: Runtime lookup settings; defaults to `TaLibRuntimeConfig()`.
    Returns:
        bool: True when some candidate loads.
    Assumptions:
        Loading a library twice is harmless.
    Raises:
        None.
    Side Effects:
        May load a shared library into the process.
    """
    try:
        load_talib_library(config or TaLibRuntimeConfig())
    except TaLibNotInstalledError as error:
        log.debug("talib library unavailable", extra={"reason": str(error)})
        return False
    return True
