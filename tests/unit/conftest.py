from __future__ import annotations

from types import TracebackType
from typing import Callable, Mapping

import numpy as np
import pytest

from ta_bridge.contexts.indicators.domain.entities import (
    FunctionId,
    FunctionSchema,
    InputKind,
    InputParamDef,
    NativeRetCode,
    OptInputDef,
    OptInputKind,
    OutputDef,
    OutputKind,
    PriceRole,
)
from ta_bridge.contexts.indicators.domain.errors import NativeCallError

Kernel = Callable[["FakeNativeCall", int], tuple[int, int]]


class FakeNativeCall:
    """
    Recording native call: stores every buffer it receives and runs a Python kernel.
    """

    def __init__(self, owner: FakeTaLibNative, function_id: FunctionId) -> None:
        self._owner = owner
        self.function_id = function_id
        self.inputs: dict[int, np.ndarray] = {}
        self.price_slots: dict[int, tuple[np.ndarray, ...]] = {}
        self.opt_inputs: dict[int, int | float] = {}
        self.outputs: dict[int, np.ndarray] = {}
        self.steps: list[str] = []
        self.call_range: tuple[int, int] | None = None
        self.closed = False

    def _code(self, step: str) -> int:
        self.steps.append(step)
        return self._owner.codes.get(step, 0)

    def set_input_real(self, param_index: int, buffer: np.ndarray) -> int:
        self.inputs[param_index] = buffer
        return self._code("set_input_real")

    def set_input_integer(self, param_index: int, buffer: np.ndarray) -> int:
        self.inputs[param_index] = buffer
        return self._code("set_input_integer")

    def set_input_price(self, param_index: int, slots: tuple[np.ndarray, ...]) -> int:
        self.price_slots[param_index] = slots
        return self._code("set_input_price")

    def set_opt_input_integer(self, param_index: int, value: int) -> int:
        self.opt_inputs[param_index] = value
        return self._code("set_opt_input_integer")

    def set_opt_input_real(self, param_index: int, value: float) -> int:
        self.opt_inputs[param_index] = value
        return self._code("set_opt_input_real")

    def set_output_real(self, param_index: int, buffer: np.ndarray) -> int:
        self.outputs[param_index] = buffer
        return self._code("set_output_real")

    def set_output_integer(self, param_index: int, buffer: np.ndarray) -> int:
        self.outputs[param_index] = buffer
        return self._code("set_output_integer")

    def call(self, start_index: int, end_index: int) -> tuple[int, int, int]:
        self.call_range = (start_index, end_index)
        code = self._code("call")
        if code != 0:
            return code, 0, 0
        kernel = self._owner.kernels.get(self.function_id.value, _copy_first_input)
        out_begin, out_count = kernel(self, end_index - start_index + 1)
        return 0, out_begin, out_count

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeNativeCall:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class FakeTaLibNative:
    """
    In-memory `TaLibNative` double with fixed schemas and Python kernels.

    `codes` maps a step name (`set_input_real`, `call`, ...) to the code it returns.
    """

    def __init__(
        self,
        schemas: tuple[FunctionSchema, ...],
        kernels: Mapping[str, Kernel] | None = None,
        codes: Mapping[str, int] | None = None,
    ) -> None:
        self.schemas = {schema.function_id: schema for schema in schemas}
        self.kernels = dict(kernels or {})
        self.codes = dict(codes or {})
        self.calls: list[FakeNativeCall] = []
        self.described: list[FunctionId] = []

    def list_function_ids(self) -> tuple[FunctionId, ...]:
        return tuple(self.schemas)

    def describe_function(self, function_id: FunctionId) -> FunctionSchema:
        self.described.append(function_id)
        schema = self.schemas.get(function_id)
        if schema is None:
            raise NativeCallError(
                function_id=str(function_id),
                code=int(NativeRetCode.FUNC_NOT_FOUND),
                step="TA_GetFuncHandle",
            )
        return schema

    def open_call(self, function_id: FunctionId) -> FakeNativeCall:
        call = FakeNativeCall(self, function_id)
        self.calls.append(call)
        return call

    @property
    def last_call(self) -> FakeNativeCall:
        return self.calls[-1]


def _copy_first_input(call: FakeNativeCall, length: int) -> tuple[int, int]:
    """
    Default kernel: every output is the first bound input (or first used price slot).
    """
    if 0 in call.inputs:
        source = call.inputs[0].astype(np.float64)
    else:
        source = next(slot for slot in call.price_slots[0] if slot.shape[0] > 0)
    for buffer in call.outputs.values():
        buffer[:length] = source[:length]
    return 0, length


def _period(default: int, *, name: str = "optInTimePeriod", minimum: int = 2) -> OptInputDef:
    return OptInputDef(
        name=name,
        kind=OptInputKind.INTEGER,
        default=default,
        hard_min=minimum,
        hard_max=100000,
    )


def _ma_type() -> OptInputDef:
    return OptInputDef(
        name="optInMAType", kind=OptInputKind.INTEGER, default=0, hard_min=0, hard_max=8
    )


def _real(name: str) -> InputParamDef:
    return InputParamDef(name=name, kind=InputKind.REAL)


def _price(name: str, *roles: PriceRole) -> InputParamDef:
    return InputParamDef(name=name, kind=InputKind.PRICE, roles=roles)


def _out(name: str = "outReal", kind: OutputKind = OutputKind.REAL) -> OutputDef:
    return OutputDef(name=name, kind=kind)


def build_talib_schemas() -> tuple[FunctionSchema, ...]:
    """
    Schemas shaped like the native library reports them for a few functions.
    """
    return (
        FunctionSchema(
            function_id=FunctionId("SMA"),
            group="Overlap Studies",
            title="Simple Moving Average",
            inputs=(_real("inReal"),),
            opt_inputs=(_period(30),),
            outputs=(_out(),),
        ),
        FunctionSchema(
            function_id=FunctionId("BBANDS"),
            group="Overlap Studies",
            title="Bollinger Bands",
            inputs=(_real("inReal"),),
            opt_inputs=(
                _period(5),
                OptInputDef(name="optInNbDevUp", kind=OptInputKind.REAL, default=2.0),
                OptInputDef(name="optInNbDevDn", kind=OptInputKind.REAL, default=2.0),
                _ma_type(),
            ),
            outputs=(
                _out("outRealUpperBand"),
                _out("outRealMiddleBand"),
                _out("outRealLowerBand"),
            ),
        ),
        FunctionSchema(
            function_id=FunctionId("ATR"),
            group="Volatility Indicators",
            title="Average True Range",
            inputs=(_price("inPriceHLC", PriceRole.HIGH, PriceRole.LOW, PriceRole.CLOSE),),
            opt_inputs=(_period(14, minimum=1),),
            outputs=(_out(),),
        ),
        FunctionSchema(
            function_id=FunctionId("OBV"),
            group="Volume Indicators",
            title="On Balance Volume",
            inputs=(_real("inReal"), _price("inPriceV", PriceRole.VOLUME)),
            outputs=(_out(),),
        ),
        FunctionSchema(
            function_id=FunctionId("MFI"),
            group="Momentum Indicators",
            title="Money Flow Index",
            inputs=(
                _price(
                    "inPriceHLCV",
                    PriceRole.HIGH,
                    PriceRole.LOW,
                    PriceRole.CLOSE,
                    PriceRole.VOLUME,
                ),
            ),
            opt_inputs=(_period(14),),
            outputs=(_out(),),
        ),
        FunctionSchema(
            function_id=FunctionId("CORREL"),
            group="Statistic Functions",
            title="Pearson's Correlation Coefficient (r)",
            inputs=(_real("inReal0"), _real("inReal1")),
            opt_inputs=(_period(30, minimum=1),),
            outputs=(_out(),),
        ),
        FunctionSchema(
            function_id=FunctionId("CDLDOJI"),
            group="Pattern Recognition",
            title="Doji",
            inputs=(
                _price(
                    "inPriceOHLC",
                    PriceRole.OPEN,
                    PriceRole.HIGH,
                    PriceRole.LOW,
                    PriceRole.CLOSE,
                ),
            ),
            outputs=(_out("outInteger", OutputKind.INTEGER),),
        ),
        FunctionSchema(
            function_id=FunctionId("CDLMORNINGSTAR"),
            group="Pattern Recognition",
            title="Morning Star",
            inputs=(
                _price(
                    "inPriceOHLC",
                    PriceRole.OPEN,
                    PriceRole.HIGH,
                    PriceRole.LOW,
                    PriceRole.CLOSE,
                ),
            ),
            opt_inputs=(
                OptInputDef(
                    name="optInPenetration",
                    kind=OptInputKind.REAL,
                    default=0.3,
                    hard_min=0.0,
                ),
            ),
            outputs=(_out("outInteger", OutputKind.INTEGER),),
        ),
    )


@pytest.fixture
def talib_schemas() -> tuple[FunctionSchema, ...]:
    return build_talib_schemas()


@pytest.fixture
def make_native() -> Callable[..., FakeTaLibNative]:
    """
    Factory fixture for recording native doubles over the shared schemas.
    """

    def _make(
        schemas: tuple[FunctionSchema, ...] | None = None,
        kernels: Mapping[str, Kernel] | None = None,
        codes: Mapping[str, int] | None = None,
    ) -> FakeTaLibNative:
        return FakeTaLibNative(
            build_talib_schemas() if schemas is None else schemas,
            kernels=kernels,
            codes=codes,
        )

    return _make
