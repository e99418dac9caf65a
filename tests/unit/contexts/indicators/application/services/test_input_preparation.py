from __future__ import annotations

import numpy as np
import pytest

from ta_bridge.contexts.indicators.application.services import (
    arrange_inputs,
    validate_equal_lengths,
    validate_option,
    validate_period,
    validate_series,
)
from ta_bridge.contexts.indicators.domain.entities import (
    FunctionId,
    FunctionSchema,
    InputKind,
    InputParamDef,
    OptionKind,
    OptionSpec,
    OutputDef,
    OutputKind,
    PriceRole,
)
from ta_bridge.contexts.indicators.domain.errors import (
    InvalidParameterError,
    MissingBundleElementError,
)


def _schema(*inputs: InputParamDef) -> FunctionSchema:
    return FunctionSchema(
        function_id=FunctionId("TEST"),
        group="Test",
        title="Test",
        inputs=inputs,
        outputs=(OutputDef(name="outReal", kind=OutputKind.REAL),),
    )


def test_validate_series_returns_array_view_for_ndarray() -> None:
    values = np.arange(3, dtype=np.float64)

    assert validate_series(values, name="prices") is values


def test_validate_series_accepts_lists() -> None:
    array = validate_series([1, 2, 3], name="prices")

    assert array.shape == (3,)


def test_validate_equal_lengths_lists_every_length() -> None:
    with pytest.raises(InvalidParameterError, match="high=3, low=2"):
        validate_equal_lengths({"high": np.ones(3), "low": np.ones(2)})


def test_validate_period_without_data_size_skips_upper_bound() -> None:
    assert validate_period(500) == 500
    assert validate_period(np.int64(5), 10) == 5


def test_validate_period_names_custom_option() -> None:
    with pytest.raises(InvalidParameterError, match="fast_period must be positive"):
        validate_period(0, name="fast_period")


def test_validate_option_float_converts_ints_and_rejects_non_finite() -> None:
    option = OptionSpec(
        name="nbdev",
        native_names=("optInNbDev",),
        default=1.0,
        kind=OptionKind.FLOAT,
    )

    assert validate_option(option, 2, data_size=10) == 2.0
    with pytest.raises(InvalidParameterError, match="nbdev must be finite"):
        validate_option(option, float("inf"), data_size=10)
    with pytest.raises(InvalidParameterError, match="nbdev must be a number"):
        validate_option(option, "2", data_size=10)


def test_unbounded_period_option_may_exceed_data_size() -> None:
    option = OptionSpec(
        name="period",
        native_names=("optInTimePeriod",),
        default=14,
        is_period=True,
        hard_min=1,
    )

    assert validate_option(option, 50, data_size=10) == 50


def test_arrange_inputs_takes_bundle_roles_by_name() -> None:
    """
    Verify bundle arrays are taken by role name regardless of mapping order.
    """
    schema = _schema(
        InputParamDef(
            name="inPriceHLC",
            kind=InputKind.PRICE,
            roles=(PriceRole.HIGH, PriceRole.LOW, PriceRole.CLOSE),
        )
    )
    high, low, close = np.ones(2), np.zeros(2), np.full(2, 0.5)

    flat = arrange_inputs(schema, {"close": close, "low": low, "high": high})

    assert flat[0] is high
    assert flat[1] is low
    assert flat[2] is close


def test_arrange_inputs_fills_single_parameters_in_caller_order() -> None:
    schema = _schema(
        InputParamDef(name="inReal", kind=InputKind.REAL),
        InputParamDef(name="inPriceV", kind=InputKind.PRICE, roles=(PriceRole.VOLUME,)),
    )
    close, volume = np.ones(2), np.zeros(2)

    flat = arrange_inputs(schema, {"volume": volume, "close": close})

    assert flat[0] is close
    assert flat[1] is volume


def test_arrange_inputs_appends_leftovers_for_binder_to_reject() -> None:
    schema = _schema(InputParamDef(name="inReal", kind=InputKind.REAL))

    flat = arrange_inputs(schema, {"a": 1, "b": 2})

    assert flat == [1, 2]


def test_arrange_inputs_reports_missing_bundle_role() -> None:
    schema = _schema(
        InputParamDef(
            name="inPriceHL",
            kind=InputKind.PRICE,
            roles=(PriceRole.HIGH, PriceRole.LOW),
        )
    )

    with pytest.raises(MissingBundleElementError) as error_info:
        arrange_inputs(schema, {"high": np.ones(2)})

    assert error_info.value.details["role"] == "low"
    assert error_info.value.details["position"] == 1
