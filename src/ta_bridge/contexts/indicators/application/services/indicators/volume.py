from __future__ import annotations

from typing import Any

import numpy as np

from .base import TechnicalIndicatorsBase


class VolumeIndicators(TechnicalIndicatorsBase):
    """
    Volume-weighted accumulation studies.
    """

    def obv(self, close: Any, volume: Any) -> np.ndarray:
        return self._series("obv", close, volume)

    def ad(self, high: Any, low: Any, close: Any, volume: Any) -> np.ndarray:
        return self._series("ad", high, low, close, volume)

    def adosc(
        self,
        high: Any,
        low: Any,
        close: Any,
        volume: Any,
        fast_period: int = 3,
        slow_period: int = 10,
    ) -> np.ndarray:
        return self._series(
            "adosc", high, low, close, volume, fast_period=fast_period, slow_period=slow_period
        )
