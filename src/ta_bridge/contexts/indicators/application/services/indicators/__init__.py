from .base import IndicatorResult, TechnicalIndicatorsBase
from .technical_indicators import TechnicalIndicators

__all__ = [
    "IndicatorResult",
    "TechnicalIndicators",
    "TechnicalIndicatorsBase",
]
