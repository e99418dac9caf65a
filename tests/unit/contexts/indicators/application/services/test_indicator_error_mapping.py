from __future__ import annotations

import pytest

from ta_bridge.contexts.indicators.application.services import map_indicator_error
from ta_bridge.contexts.indicators.domain.entities import NativeRetCode
from ta_bridge.contexts.indicators.domain.errors import (
    InsufficientInputsError,
    InvalidParameterError,
    NativeCallError,
    TaLibNotInstalledError,
    UnknownFunctionError,
    UnknownIndicatorError,
    UnsupportedParameterKindError,
)
from ta_bridge.platform.errors import TaBridgeError


def test_binding_error_maps_to_validation_error_with_details() -> None:
    error = InsufficientInputsError(
        function_id="ATR",
        param_name="inPriceHLC",
        required=3,
        available=2,
        position=0,
        roles=("high", "low", "close"),
    )

    mapped = map_indicator_error(error)

    assert mapped is not None
    assert mapped.code == "validation_error"
    assert mapped.message == str(error)
    assert mapped.details is not None
    assert mapped.details["kind"] == "InsufficientInputsError"
    assert mapped.details["function"] == "ATR"
    assert mapped.details["roles"] == ["high", "low", "close"]


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (InvalidParameterError("period must be positive"), "validation_error"),
        (UnknownIndicatorError("unknown indicator: 'x'"), "not_found"),
        (UnknownFunctionError(function_id="X"), "not_found"),
        (
            NativeCallError(
                function_id="SMA",
                code=int(NativeRetCode.BAD_PARAM),
                step="TA_CallFunc",
            ),
            "native_error",
        ),
        (TaLibNotInstalledError("TA-Lib C library is not installed"), "unavailable"),
    ],
)
def test_indicator_errors_map_to_stable_codes(error: Exception, code: str) -> None:
    mapped = map_indicator_error(error)

    assert mapped is not None
    assert mapped.code == code


def test_native_error_carries_step_and_code_name() -> None:
    error = NativeCallError(function_id="SMA", code=12, step="TA_CallFunc")

    mapped = map_indicator_error(error)

    assert mapped is not None
    assert mapped.details == {
        "code": 12,
        "function": "SMA",
        "name": "OUT_OF_RANGE_START_INDEX",
        "step": "TA_CallFunc",
    }


def test_platform_error_passes_through_and_foreign_errors_are_not_mapped() -> None:
    error = TaBridgeError(code="internal_error", message="boom")

    assert map_indicator_error(error) is error
    assert map_indicator_error(KeyError("x")) is None


def test_unsupported_parameter_kind_is_an_internal_error() -> None:
    error = UnsupportedParameterKindError(function_id="ODD", param_name="inWeird", kind="bogus")

    mapped = map_indicator_error(error)

    assert mapped is not None
    assert mapped.code == "internal_error"
    assert mapped.http_status == 500
    assert mapped.exit_code == 1
    assert mapped.details == {
        "function": "ODD",
        "kind": "UnsupportedParameterKindError",
        "param": "inWeird",
        "param_kind": "bogus",
    }


def test_unknown_function_forwards_details() -> None:
    error = UnknownFunctionError(function_id="NOPE", details={"registered": 8})

    mapped = map_indicator_error(error)

    assert mapped is not None
    assert mapped.code == "not_found"
    assert mapped.details == {
        "function": "NOPE",
        "kind": "UnknownFunctionError",
        "registered": 8,
    }
