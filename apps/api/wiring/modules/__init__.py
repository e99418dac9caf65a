from .indicators import build_technical_indicators

__all__ = ["build_technical_indicators"]
