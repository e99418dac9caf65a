from __future__ import annotations

from typing import Any

import numpy as np

from ta_bridge.contexts.indicators.application.dto import IndicatorOutputs

from .base import TechnicalIndicatorsBase


class CycleIndicators(TechnicalIndicatorsBase):
    """
    Hilbert-transform cycle studies.

    These need a long warm-up (63 bars for most functions); shorter series
    produce all-NaN results rather than errors.
    """

    def ht_dcperiod(self, prices: Any) -> np.ndarray:
        return self._series("ht_dcperiod", prices)

    def ht_dcphase(self, prices: Any) -> np.ndarray:
        return self._series("ht_dcphase", prices)

    def ht_phasor(self, prices: Any) -> IndicatorOutputs:
        return self._outputs("ht_phasor", prices)

    def ht_sine(self, prices: Any) -> IndicatorOutputs:
        return self._outputs("ht_sine", prices)

    def ht_trendmode(self, prices: Any) -> np.ndarray:
        """
        Trend (1) versus cycle (0) mode, as float with NaN warm-up.
        """
        return self._series("ht_trendmode", prices)
