from .indicators import IndicatorsCliWiring

__all__ = ["IndicatorsCliWiring"]
