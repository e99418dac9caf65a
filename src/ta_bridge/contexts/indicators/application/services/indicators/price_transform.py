from __future__ import annotations

from typing import Any

import numpy as np

from .base import TechnicalIndicatorsBase


class PriceTransforms(TechnicalIndicatorsBase):
    def avgprice(self, open: Any, high: Any, low: Any, close: Any) -> np.ndarray:
        return self._series("avgprice", open, high, low, close)

    def medprice(self, high: Any, low: Any) -> np.ndarray:
        return self._series("medprice", high, low)

    def typprice(self, high: Any, low: Any, close: Any) -> np.ndarray:
        return self._series("typprice", high, low, close)

    def wclprice(self, high: Any, low: Any, close: Any) -> np.ndarray:
        return self._series("wclprice", high, low, close)
