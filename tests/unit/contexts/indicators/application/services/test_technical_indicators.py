from __future__ import annotations

import numpy as np
import pytest

from ta_bridge.contexts.indicators.application.dto import IndicatorOutputs
from ta_bridge.contexts.indicators.application.services import TechnicalIndicators
from ta_bridge.contexts.indicators.domain.entities import FunctionId, MovingAverageType
from ta_bridge.contexts.indicators.domain.errors import (
    InvalidParameterError,
    NativeCallError,
    UnknownIndicatorError,
)


def _prices(length: int = 10) -> np.ndarray:
    return np.linspace(10.0, 20.0, length)


def test_sma_returns_single_array_and_passes_period(make_native) -> None:
    """
    Verify single-output indicator returns plain ndarray and sets native period.
    """
    native = make_native()
    indicators = TechnicalIndicators(native)

    result = indicators.sma(_prices(), period=3)

    assert isinstance(result, np.ndarray)
    assert result.shape == (10,)
    assert native.last_call.function_id == FunctionId("SMA")
    assert native.last_call.opt_inputs == {0: 3}


def test_schema_is_described_once_per_function(make_native) -> None:
    native = make_native()
    indicators = TechnicalIndicators(native)

    indicators.sma(_prices(), period=3)
    indicators.sma(_prices(), period=4)

    assert native.described == [FunctionId("SMA")]


def test_bbands_returns_named_outputs_in_catalog_order(make_native) -> None:
    """
    Verify multi-output indicator exposes catalog names and unpacks in order.
    """
    native = make_native()
    indicators = TechnicalIndicators(native)

    bands = indicators.bbands(_prices(), period=5, ma_type=int(MovingAverageType.EMA))

    assert isinstance(bands, IndicatorOutputs)
    assert bands.names == ("upper_band", "middle_band", "lower_band")
    upper, middle, lower = bands
    assert upper.shape == middle.shape == lower.shape == (10,)
    assert native.last_call.opt_inputs == {0: 5, 1: 2.0, 2: 2.0, 3: 1}


def test_atr_binds_high_low_close_bundle(make_native) -> None:
    native = make_native()
    indicators = TechnicalIndicators(native)
    high, low, close = _prices() + 1.0, _prices() - 1.0, _prices()

    indicators.atr(high, low, close, period=5)

    slots = native.last_call.price_slots[0]
    np.testing.assert_array_equal(slots[1], high)
    np.testing.assert_array_equal(slots[2], low)
    np.testing.assert_array_equal(slots[3], close)


def test_obv_routes_close_to_real_input_and_volume_to_bundle(make_native) -> None:
    """
    Verify named arrangement feeds `close` to inReal and `volume` to inPriceV.
    """
    native = make_native()
    indicators = TechnicalIndicators(native)
    close = _prices(5)
    volume = np.array([100.0, 200.0, 300.0, 400.0, 500.0])

    indicators.obv(close, volume)

    call = native.last_call
    np.testing.assert_array_equal(call.inputs[0], close)
    np.testing.assert_array_equal(call.price_slots[1][4], volume)


def test_mfi_binds_four_role_bundle(make_native) -> None:
    native = make_native()
    indicators = TechnicalIndicators(native)
    high, low, close = _prices() + 1.0, _prices() - 1.0, _prices()
    volume = np.full(10, 1000.0)

    indicators.mfi(high, low, close, volume, period=3)

    slots = native.last_call.price_slots[0]
    assert [slot.shape[0] for slot in slots] == [0, 10, 10, 10, 10, 0]


def test_correl_keeps_two_series_in_caller_order(make_native) -> None:
    native = make_native()
    indicators = TechnicalIndicators(native)
    first, second = _prices(), _prices()[::-1].copy()

    indicators.correl(first, second, period=5)

    np.testing.assert_array_equal(native.last_call.inputs[0], first)
    np.testing.assert_array_equal(native.last_call.inputs[1], second)


def test_candle_pattern_accepts_name_with_or_without_prefix(make_native) -> None:
    native = make_native()
    indicators = TechnicalIndicators(native)
    ohlc = (np.ones(4), np.full(4, 2.0), np.zeros(4), np.ones(4))

    first = indicators.candle_pattern("doji", *ohlc)
    second = indicators.candle_pattern("CDL_DOJI", *ohlc)

    assert first.dtype == np.float64
    np.testing.assert_array_equal(first, second)


def test_pattern_defaults_include_penetration(make_native) -> None:
    native = make_native()
    indicators = TechnicalIndicators(native)
    ohlc = (np.ones(4), np.full(4, 2.0), np.zeros(4), np.ones(4))

    indicators.cdl_morningstar(*ohlc)

    assert native.last_call.opt_inputs == {0: 0.3}


def test_unlisted_pattern_method_resolves_through_catalog(make_native) -> None:
    """
    Verify `cdl_*` names without explicit methods still dispatch to the catalog.
    """
    indicators = TechnicalIndicators(make_native())

    method = indicators.cdl_spinningtop

    assert callable(method)
    with pytest.raises(AttributeError):
        indicators.cdl_not_a_pattern  # noqa: B018


def test_unknown_names_raise_unknown_indicator(make_native) -> None:
    indicators = TechnicalIndicators(make_native())

    with pytest.raises(UnknownIndicatorError, match="unknown indicator: 'nope'"):
        indicators.compute("nope", _prices())
    with pytest.raises(UnknownIndicatorError, match="unknown candlestick pattern"):
        indicators.candle_pattern("nope", *(np.ones(3),) * 4)


@pytest.mark.parametrize(
    ("period", "message"),
    [
        (0, "period must be positive"),
        (-3, "period must be positive"),
        (11, r"period \(11\) cannot exceed data size \(10\)"),
        (2.5, "period must be an integer"),
        (True, "period must be an integer"),
    ],
)
def test_invalid_periods_are_rejected_before_native_call(make_native, period, message) -> None:
    native = make_native()
    indicators = TechnicalIndicators(native)

    with pytest.raises(InvalidParameterError, match=message):
        indicators.sma(_prices(), period=period)

    assert native.calls == []


@pytest.mark.parametrize(
    ("value", "message"),
    [
        (None, "prices array cannot be nil"),
        ([], "prices array cannot be empty"),
        ("abc", "prices must be an array"),
        ([[1.0, 2.0]], "one-dimensional"),
        (["a", "b"], "must contain numbers"),
    ],
)
def test_invalid_series_are_rejected(make_native, value, message) -> None:
    indicators = TechnicalIndicators(make_native())

    with pytest.raises(InvalidParameterError, match=message):
        indicators.sma(value, period=1)


def test_unequal_series_lengths_are_rejected(make_native) -> None:
    indicators = TechnicalIndicators(make_native())

    with pytest.raises(InvalidParameterError, match="equal length"):
        indicators.atr(_prices(10), _prices(9), _prices(10), period=3)


def test_ma_type_out_of_range_is_rejected(make_native) -> None:
    indicators = TechnicalIndicators(make_native())

    with pytest.raises(InvalidParameterError, match="ma_type must be <= 8"):
        indicators.bbands(_prices(), ma_type=9)


def test_compute_checks_series_count(make_native) -> None:
    indicators = TechnicalIndicators(make_native())

    with pytest.raises(InvalidParameterError, match="atr expects 3 input arrays"):
        indicators.compute("atr", _prices(), _prices())


def test_compute_rejects_unknown_options(make_native) -> None:
    indicators = TechnicalIndicators(make_native())

    with pytest.raises(InvalidParameterError, match="unknown options window"):
        indicators.compute("sma", _prices(), window=3)


def test_compute_mapping_reports_missing_and_unexpected_inputs(make_native) -> None:
    indicators = TechnicalIndicators(make_native())

    with pytest.raises(InvalidParameterError) as error_info:
        indicators.compute_mapping("atr", {"high": _prices(), "low": _prices(), "open": _prices()})

    message = str(error_info.value)
    assert "missing: close" in message
    assert "unexpected: open" in message


def test_compute_mapping_ignores_key_order(make_native) -> None:
    native = make_native()
    indicators = TechnicalIndicators(native)
    volume = np.full(5, 7.0)
    close = _prices(5)

    indicators.compute_mapping("obv", {"volume": volume, "close": close})

    np.testing.assert_array_equal(native.last_call.inputs[0], close)


def test_native_failures_propagate(make_native) -> None:
    native = make_native(codes={"call": 2})
    indicators = TechnicalIndicators(native)

    with pytest.raises(NativeCallError):
        indicators.sma(_prices(), period=3)

    assert native.last_call.closed is True


def test_function_missing_from_library_surfaces_native_error(make_native) -> None:
    indicators = TechnicalIndicators(make_native(schemas=()))

    with pytest.raises(NativeCallError, match="FUNC_NOT_FOUND"):
        indicators.sma(_prices(), period=3)


def test_duplicate_catalog_names_are_rejected(make_native) -> None:
    spec = TechnicalIndicators(make_native()).get_spec("sma")

    with pytest.raises(ValueError, match="duplicate indicator name"):
        TechnicalIndicators(make_native(), specs=(spec, spec))
