from .talib_runtime import TaLibRuntimeConfig, load_talib_runtime_config

__all__ = [
    "TaLibRuntimeConfig",
    "load_talib_runtime_config",
]
