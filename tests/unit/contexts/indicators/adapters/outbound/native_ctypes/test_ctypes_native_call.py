from __future__ import annotations

import ctypes

import numpy as np
import pytest

from ta_bridge.contexts.indicators.adapters.outbound.native_ctypes import CtypesNativeCall
from ta_bridge.contexts.indicators.domain.entities import FunctionId, NativeRetCode
from ta_bridge.contexts.indicators.domain.errors import NativeCallError


class _FakeLibrary:
    """
    Records parameter-holder calls instead of reaching a shared library.
    """

    def __init__(self, *, alloc_code: int = 0, free_code: int = 0) -> None:
        self.alloc_code = alloc_code
        self.free_code = free_code
        self.free_calls = 0
        self.real_inputs: list[tuple[int, object]] = []
        self.price_inputs: list[tuple[int, tuple[object, ...]]] = []
        self.calls: list[tuple[int, int]] = []

    def TA_ParamHolderAlloc(self, handle: object, holder_ref: object) -> int:
        return self.alloc_code

    def TA_ParamHolderFree(self, holder: object) -> int:
        self.free_calls += 1
        return self.free_code

    def TA_SetInputParamRealPtr(self, holder: object, index: int, pointer: object) -> int:
        self.real_inputs.append((index, pointer))
        return 0

    def TA_SetInputParamPricePtr(self, holder: object, index: int, *pointers: object) -> int:
        self.price_inputs.append((index, pointers))
        return 0

    def TA_SetOutputParamRealPtr(self, holder: object, index: int, pointer: object) -> int:
        return 0

    def TA_SetOutputParamIntegerPtr(self, holder: object, index: int, pointer: object) -> int:
        return 0

    def TA_CallFunc(
        self,
        holder: object,
        start: int,
        end: int,
        out_begin: object,
        out_count: object,
    ) -> int:
        self.calls.append((start, end))
        return 0


def _open(library: _FakeLibrary) -> CtypesNativeCall:
    return CtypesNativeCall(library, FunctionId("SMA"), ctypes.c_void_p())


def test_alloc_failure_raises_native_call_error() -> None:
    library = _FakeLibrary(alloc_code=int(NativeRetCode.ALLOC_ERR))

    with pytest.raises(NativeCallError) as exc_info:
        _open(library)

    assert exc_info.value.step == "TA_ParamHolderAlloc"
    assert exc_info.value.ret_code is NativeRetCode.ALLOC_ERR


def test_real_input_is_converted_and_empty_input_passes_null_pointer() -> None:
    library = _FakeLibrary()
    call = _open(library)

    assert call.set_input_real(0, np.array([1, 2, 3], dtype=np.int64)) == 0
    assert call.set_input_real(1, np.array([], dtype=np.float64)) == 0

    assert library.real_inputs[0][1] is not None
    assert library.real_inputs[1] == (1, None)


def test_price_input_requires_six_slots() -> None:
    library = _FakeLibrary()
    call = _open(library)
    slot = np.zeros(4, dtype=np.float64)

    with pytest.raises(ValueError, match="6 slots"):
        call.set_input_price(0, (slot, slot, slot))

    assert call.set_input_price(0, (slot,) * 6) == 0
    assert len(library.price_inputs[0][1]) == 6


def test_output_buffer_must_match_dtype() -> None:
    call = _open(_FakeLibrary())

    with pytest.raises(ValueError, match="output buffer"):
        call.set_output_real(0, np.zeros(3, dtype=np.int32))
    with pytest.raises(ValueError, match="output buffer"):
        call.set_output_integer(0, np.zeros(3, dtype=np.float64))

    assert call.set_output_real(0, np.zeros(3, dtype=np.float64)) == 0
    assert call.set_output_integer(1, np.zeros(3, dtype=np.int32)) == 0


def test_call_passes_index_range() -> None:
    library = _FakeLibrary()
    call = _open(library)

    code, out_begin, out_count = call.call(0, 9)

    assert (code, out_begin, out_count) == (0, 0, 0)
    assert library.calls == [(0, 9)]


def test_context_exit_frees_holder_once() -> None:
    library = _FakeLibrary()

    with _open(library) as call:
        pass
    call.close()

    assert library.free_calls == 1


def test_free_failure_raises_native_call_error() -> None:
    library = _FakeLibrary(free_code=int(NativeRetCode.INVALID_PARAM_HOLDER))
    call = _open(library)

    with pytest.raises(NativeCallError) as exc_info:
        call.close()

    assert exc_info.value.step == "TA_ParamHolderFree"
