from __future__ import annotations

from typing import Any

import numpy as np

from .base import TechnicalIndicatorsBase


class VolatilityIndicators(TechnicalIndicatorsBase):
    """
    True-range based volatility measures.
    """

    def atr(self, high: Any, low: Any, close: Any, period: int = 14) -> np.ndarray:
        """
        Average true range.

        Args:
            high: High prices.
            low: Low prices.
            close: Close prices.
            period: Smoothing length.
        Returns:
            np.ndarray: ATR values, NaN for the first `period` positions.
        Assumptions:
            Series are supplied in high, low, close order.
        Raises:
            InvalidParameterError: If series or period are invalid.
            NativeCallError: If the native call fails.
        Side Effects:
            None.
        """
        return self._series("atr", high, low, close, period=period)

    def natr(self, high: Any, low: Any, close: Any, period: int = 14) -> np.ndarray:
        return self._series("natr", high, low, close, period=period)

    def trange(self, high: Any, low: Any, close: Any) -> np.ndarray:
        return self._series("trange", high, low, close)
