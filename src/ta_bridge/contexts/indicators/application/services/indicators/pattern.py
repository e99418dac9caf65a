from __future__ import annotations

from functools import partial
from typing import Any, Callable

import numpy as np

from .base import TechnicalIndicatorsBase


class PatternRecognition(TechnicalIndicatorsBase):
    """
    Candlestick pattern recognizers.

    The most common patterns have explicit methods; every other catalog
    pattern is reachable as `cdl_<pattern>(open, high, low, close, ...)` or
    through `candle_pattern`.
    """

    def cdl_doji(self, open: Any, high: Any, low: Any, close: Any) -> np.ndarray:
        return self.candle_pattern("doji", open, high, low, close)

    def cdl_hammer(self, open: Any, high: Any, low: Any, close: Any) -> np.ndarray:
        return self.candle_pattern("hammer", open, high, low, close)

    def cdl_engulfing(self, open: Any, high: Any, low: Any, close: Any) -> np.ndarray:
        return self.candle_pattern("engulfing", open, high, low, close)

    def cdl_harami(self, open: Any, high: Any, low: Any, close: Any) -> np.ndarray:
        return self.candle_pattern("harami", open, high, low, close)

    def cdl_shootingstar(self, open: Any, high: Any, low: Any, close: Any) -> np.ndarray:
        return self.candle_pattern("shootingstar", open, high, low, close)

    def cdl_morningstar(
        self, open: Any, high: Any, low: Any, close: Any, penetration: float = 0.3
    ) -> np.ndarray:
        return self.candle_pattern("morningstar", open, high, low, close, penetration=penetration)

    def cdl_eveningstar(
        self, open: Any, high: Any, low: Any, close: Any, penetration: float = 0.3
    ) -> np.ndarray:
        return self.candle_pattern("eveningstar", open, high, low, close, penetration=penetration)

    def cdl_darkcloudcover(
        self, open: Any, high: Any, low: Any, close: Any, penetration: float = 0.5
    ) -> np.ndarray:
        return self.candle_pattern(
            "darkcloudcover", open, high, low, close, penetration=penetration
        )

    def cdl_3blackcrows(self, open: Any, high: Any, low: Any, close: Any) -> np.ndarray:
        return self.candle_pattern("3blackcrows", open, high, low, close)

    def cdl_3whitesoldiers(self, open: Any, high: Any, low: Any, close: Any) -> np.ndarray:
        return self.candle_pattern("3whitesoldiers", open, high, low, close)

    def __getattr__(self, name: str) -> Callable[..., np.ndarray]:
        """
        Resolve `cdl_<pattern>` names without an explicit method.

        Args:
            name: Attribute name.
        Returns:
            Callable[..., np.ndarray]: `candle_pattern` bound to the pattern name.
        Assumptions:
            Only called when normal attribute lookup fails.
        Raises:
            AttributeError: If the name is not a catalog pattern.
        Side Effects:
            None.
        """
        specs = self.__dict__.get("_specs")
        if specs is not None and name.startswith("cdl_") and name in specs:
            return partial(self.candle_pattern, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
