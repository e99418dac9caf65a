from __future__ import annotations

from typing import Any

import numpy as np

from .base import TechnicalIndicatorsBase


class StatisticFunctions(TechnicalIndicatorsBase):
    """
    Regression, dispersion, and two-series statistics.
    """

    def correl(self, prices1: Any, prices2: Any, period: int = 30) -> np.ndarray:
        return self._series("correl", prices1, prices2, period=period)

    def beta(self, prices1: Any, prices2: Any, period: int = 5) -> np.ndarray:
        return self._series("beta", prices1, prices2, period=period)

    def var(self, prices: Any, period: int = 5, nbdev: float = 1.0) -> np.ndarray:
        return self._series("var", prices, period=period, nbdev=nbdev)

    def stddev(self, prices: Any, period: int = 5, nbdev: float = 1.0) -> np.ndarray:
        return self._series("stddev", prices, period=period, nbdev=nbdev)

    def linearreg(self, prices: Any, period: int = 14) -> np.ndarray:
        return self._series("linearreg", prices, period=period)

    def linearreg_angle(self, prices: Any, period: int = 14) -> np.ndarray:
        return self._series("linearreg_angle", prices, period=period)

    def linearreg_intercept(self, prices: Any, period: int = 14) -> np.ndarray:
        return self._series("linearreg_intercept", prices, period=period)

    def linearreg_slope(self, prices: Any, period: int = 14) -> np.ndarray:
        return self._series("linearreg_slope", prices, period=period)

    def tsf(self, prices: Any, period: int = 14) -> np.ndarray:
        return self._series("tsf", prices, period=period)
