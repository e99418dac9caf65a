from __future__ import annotations

from typing import Any

import numpy as np

from ta_bridge.contexts.indicators.application.dto import IndicatorOutputs

from .base import TechnicalIndicatorsBase


class MomentumIndicators(TechnicalIndicatorsBase):
    """
    Oscillators, directional movement, and rate-of-change studies.
    """

    def rsi(self, prices: Any, period: int = 14) -> np.ndarray:
        """
        Relative strength index.

        Args:
            prices: Input series.
            period: Window length; must not exceed the series length.
        Returns:
            np.ndarray: RSI in [0, 100], NaN for the first `period` positions.
        Assumptions:
            None.
        Raises:
            InvalidParameterError: If the series or period is invalid.
            NativeCallError: If the native call fails.
        Side Effects:
            None.
        """
        return self._series("rsi", prices, period=period)

    def macd(
        self,
        prices: Any,
        fast_period: int = 12,
        slow_period: int = 26,
        signal_period: int = 9,
    ) -> IndicatorOutputs:
        """
        Moving average convergence/divergence.

        Args:
            prices: Input series.
            fast_period: Fast EMA length.
            slow_period: Slow EMA length.
            signal_period: Signal EMA length.
        Returns:
            IndicatorOutputs: `macd`, `macd_signal`, `macd_hist`.
        Assumptions:
            Native code swaps fast and slow when fast exceeds slow.
        Raises:
            InvalidParameterError: If the series or periods are invalid.
            NativeCallError: If the native call fails.
        Side Effects:
            None.
        """
        return self._outputs(
            "macd",
            prices,
            fast_period=fast_period,
            slow_period=slow_period,
            signal_period=signal_period,
        )

    def macdext(
        self,
        prices: Any,
        fast_period: int = 12,
        fast_ma_type: int = 0,
        slow_period: int = 26,
        slow_ma_type: int = 0,
        signal_period: int = 9,
        signal_ma_type: int = 0,
    ) -> IndicatorOutputs:
        return self._outputs(
            "macdext",
            prices,
            fast_period=fast_period,
            fast_ma_type=fast_ma_type,
            slow_period=slow_period,
            slow_ma_type=slow_ma_type,
            signal_period=signal_period,
            signal_ma_type=signal_ma_type,
        )

    def macdfix(self, prices: Any, signal_period: int = 9) -> IndicatorOutputs:
        return self._outputs("macdfix", prices, signal_period=signal_period)

    def stoch(
        self,
        high: Any,
        low: Any,
        close: Any,
        fastk_period: int = 5,
        slowk_period: int = 3,
        slowk_ma_type: int = 0,
        slowd_period: int = 3,
        slowd_ma_type: int = 0,
    ) -> IndicatorOutputs:
        """
        Slow stochastic oscillator; returns `slow_k`, `slow_d`.
        """
        return self._outputs(
            "stoch",
            high,
            low,
            close,
            fastk_period=fastk_period,
            slowk_period=slowk_period,
            slowk_ma_type=slowk_ma_type,
            slowd_period=slowd_period,
            slowd_ma_type=slowd_ma_type,
        )

    def stochf(
        self,
        high: Any,
        low: Any,
        close: Any,
        fastk_period: int = 5,
        fastd_period: int = 3,
        fastd_ma_type: int = 0,
    ) -> IndicatorOutputs:
        return self._outputs(
            "stochf",
            high,
            low,
            close,
            fastk_period=fastk_period,
            fastd_period=fastd_period,
            fastd_ma_type=fastd_ma_type,
        )

    def stochrsi(
        self,
        prices: Any,
        period: int = 14,
        fastk_period: int = 5,
        fastd_period: int = 3,
        fastd_ma_type: int = 0,
    ) -> IndicatorOutputs:
        return self._outputs(
            "stochrsi",
            prices,
            period=period,
            fastk_period=fastk_period,
            fastd_period=fastd_period,
            fastd_ma_type=fastd_ma_type,
        )

    def mom(self, prices: Any, period: int = 10) -> np.ndarray:
        return self._series("mom", prices, period=period)

    def cci(self, high: Any, low: Any, close: Any, period: int = 14) -> np.ndarray:
        return self._series("cci", high, low, close, period=period)

    def willr(self, high: Any, low: Any, close: Any, period: int = 14) -> np.ndarray:
        return self._series("willr", high, low, close, period=period)

    def roc(self, prices: Any, period: int = 10) -> np.ndarray:
        return self._series("roc", prices, period=period)

    def rocp(self, prices: Any, period: int = 10) -> np.ndarray:
        return self._series("rocp", prices, period=period)

    def rocr(self, prices: Any, period: int = 10) -> np.ndarray:
        return self._series("rocr", prices, period=period)

    def rocr100(self, prices: Any, period: int = 10) -> np.ndarray:
        return self._series("rocr100", prices, period=period)

    def ppo(
        self, prices: Any, fast_period: int = 12, slow_period: int = 26, ma_type: int = 0
    ) -> np.ndarray:
        return self._series(
            "ppo", prices, fast_period=fast_period, slow_period=slow_period, ma_type=ma_type
        )

    def apo(
        self, prices: Any, fast_period: int = 12, slow_period: int = 26, ma_type: int = 0
    ) -> np.ndarray:
        return self._series(
            "apo", prices, fast_period=fast_period, slow_period=slow_period, ma_type=ma_type
        )

    def adx(self, high: Any, low: Any, close: Any, period: int = 14) -> np.ndarray:
        return self._series("adx", high, low, close, period=period)

    def adxr(self, high: Any, low: Any, close: Any, period: int = 14) -> np.ndarray:
        return self._series("adxr", high, low, close, period=period)

    def aroon(self, high: Any, low: Any, period: int = 14) -> IndicatorOutputs:
        return self._outputs("aroon", high, low, period=period)

    def aroonosc(self, high: Any, low: Any, period: int = 14) -> np.ndarray:
        return self._series("aroonosc", high, low, period=period)

    def bop(self, open: Any, high: Any, low: Any, close: Any) -> np.ndarray:
        return self._series("bop", open, high, low, close)

    def cmo(self, prices: Any, period: int = 14) -> np.ndarray:
        return self._series("cmo", prices, period=period)

    def dx(self, high: Any, low: Any, close: Any, period: int = 14) -> np.ndarray:
        return self._series("dx", high, low, close, period=period)

    def mfi(self, high: Any, low: Any, close: Any, volume: Any, period: int = 14) -> np.ndarray:
        return self._series("mfi", high, low, close, volume, period=period)

    def minus_di(self, high: Any, low: Any, close: Any, period: int = 14) -> np.ndarray:
        return self._series("minus_di", high, low, close, period=period)

    def minus_dm(self, high: Any, low: Any, period: int = 14) -> np.ndarray:
        return self._series("minus_dm", high, low, period=period)

    def plus_di(self, high: Any, low: Any, close: Any, period: int = 14) -> np.ndarray:
        return self._series("plus_di", high, low, close, period=period)

    def plus_dm(self, high: Any, low: Any, period: int = 14) -> np.ndarray:
        return self._series("plus_dm", high, low, period=period)

    def trix(self, prices: Any, period: int = 30) -> np.ndarray:
        return self._series("trix", prices, period=period)

    def ultosc(
        self,
        high: Any,
        low: Any,
        close: Any,
        period1: int = 7,
        period2: int = 14,
        period3: int = 28,
    ) -> np.ndarray:
        return self._series(
            "ultosc", high, low, close, period1=period1, period2=period2, period3=period3
        )
