from __future__ import annotations

from typing import Any

import numpy as np

from ta_bridge.contexts.indicators.application.dto import IndicatorOutputs

from .base import TechnicalIndicatorsBase


class OverlapStudies(TechnicalIndicatorsBase):
    """
    Moving averages, bands, and parabolic SAR.
    """

    def sma(self, prices: Any, period: int = 30) -> np.ndarray:
        """
        Simple moving average.

        Args:
            prices: Input series.
            period: Window length; must not exceed the series length.
        Returns:
            np.ndarray: SMA values, NaN for the first `period - 1` positions.
        Assumptions:
            None.
        Raises:
            InvalidParameterError: If the series or period is invalid.
            NativeCallError: If the native call fails.
        Side Effects:
            None.
        """
        return self._series("sma", prices, period=period)

    def ema(self, prices: Any, period: int = 30) -> np.ndarray:
        return self._series("ema", prices, period=period)

    def wma(self, prices: Any, period: int = 30) -> np.ndarray:
        return self._series("wma", prices, period=period)

    def dema(self, prices: Any, period: int = 30) -> np.ndarray:
        return self._series("dema", prices, period=period)

    def tema(self, prices: Any, period: int = 30) -> np.ndarray:
        return self._series("tema", prices, period=period)

    def trima(self, prices: Any, period: int = 30) -> np.ndarray:
        return self._series("trima", prices, period=period)

    def kama(self, prices: Any, period: int = 30) -> np.ndarray:
        return self._series("kama", prices, period=period)

    def t3(self, prices: Any, period: int = 5, vfactor: float = 0.7) -> np.ndarray:
        return self._series("t3", prices, period=period, vfactor=vfactor)

    def bbands(
        self,
        prices: Any,
        period: int = 5,
        nbdev_up: float = 2.0,
        nbdev_down: float = 2.0,
        ma_type: int = 0,
    ) -> IndicatorOutputs:
        """
        Bollinger Bands.

        Args:
            prices: Input series.
            period: Window length; must not exceed the series length.
            nbdev_up: Upper band deviation multiplier.
            nbdev_down: Lower band deviation multiplier.
            ma_type: Middle band moving-average kind (`MovingAverageType`).
        Returns:
            IndicatorOutputs: `upper_band`, `middle_band`, `lower_band`; unpacks in
                that order.
        Assumptions:
            None.
        Raises:
            InvalidParameterError: If the series or options are invalid.
            NativeCallError: If the native call fails.
        Side Effects:
            None.
        """
        return self._outputs(
            "bbands",
            prices,
            period=period,
            nbdev_up=nbdev_up,
            nbdev_down=nbdev_down,
            ma_type=ma_type,
        )

    def mama(
        self, prices: Any, fast_limit: float = 0.5, slow_limit: float = 0.05
    ) -> IndicatorOutputs:
        return self._outputs("mama", prices, fast_limit=fast_limit, slow_limit=slow_limit)

    def mavp(
        self,
        prices: Any,
        periods: Any,
        min_period: int = 2,
        max_period: int = 30,
        ma_type: int = 0,
    ) -> np.ndarray:
        """
        Moving average with a per-position period taken from `periods`.
        """
        return self._series(
            "mavp",
            prices,
            periods,
            min_period=min_period,
            max_period=max_period,
            ma_type=ma_type,
        )

    def ht_trendline(self, prices: Any) -> np.ndarray:
        return self._series("ht_trendline", prices)

    def midpoint(self, prices: Any, period: int = 14) -> np.ndarray:
        return self._series("midpoint", prices, period=period)

    def midprice(self, high: Any, low: Any, period: int = 14) -> np.ndarray:
        return self._series("midprice", high, low, period=period)

    def sar(
        self, high: Any, low: Any, acceleration: float = 0.02, maximum: float = 0.20
    ) -> np.ndarray:
        return self._series("sar", high, low, acceleration=acceleration, maximum=maximum)

    def sarext(
        self,
        high: Any,
        low: Any,
        start_value: float = 0.0,
        offset_on_reverse: float = 0.0,
        acceleration_init: float = 0.02,
        acceleration_step: float = 0.02,
        acceleration_max: float = 0.20,
    ) -> np.ndarray:
        """
        Extended parabolic SAR.

        Each acceleration setting applies to both the long and the short side.
        """
        return self._series(
            "sarext",
            high,
            low,
            start_value=start_value,
            offset_on_reverse=offset_on_reverse,
            acceleration_init=acceleration_init,
            acceleration_step=acceleration_step,
            acceleration_max=acceleration_max,
        )
