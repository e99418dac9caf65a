from .indicators import build_indicators_router

__all__ = ["build_indicators_router"]
