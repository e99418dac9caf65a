"""
TA-Lib abstract interface bound through ctypes with numpy-backed buffers.

Related: ta_bridge.contexts.indicators.application.ports.native.talib_native,
  ta_bridge.contexts.indicators.adapters.outbound.native_ctypes.structs
"""

from __future__ import annotations

import ctypes
import logging
from types import TracebackType
from typing import Any

import numpy as np

from ta_bridge.contexts.indicators.application.ports.native import NativeCall, TaLibNative
from ta_bridge.contexts.indicators.domain.entities import (
    FunctionId,
    FunctionSchema,
    InputKind,
    InputParamDef,
    NativeRetCode,
    OptInputDef,
    OptInputKind,
    OutputDef,
)
from ta_bridge.contexts.indicators.domain.errors import NativeCallError, check_return_code
from ta_bridge.platform.config import TaLibRuntimeConfig

from .library_loader import load_talib_library
from .structs import (
    INPUT_TYPES,
    OPT_INPUT_INTEGER_RANGE,
    OPT_INPUT_REAL_RANGE,
    OPT_INPUT_TYPES,
    OUTPUT_TYPES,
    TaFuncInfo,
    TaInputParameterInfo,
    TaIntegerRange,
    TaOptInputParameterInfo,
    TaOutputParameterInfo,
    TaRealRange,
    TaStringTable,
    declare_signatures,
    roles_from_flags,
)

log = logging.getLogger(__name__)


def _decode(raw: bytes | None) -> str:
    return raw.decode("ascii") if raw else ""


def _buffer_pointer(buffer: np.ndarray) -> ctypes.c_void_p | None:
    if buffer.shape[0] == 0:
        return None
    return buffer.ctypes.data_as(ctypes.c_void_p)


class CtypesNativeCall(NativeCall):
    """
    One native parameter holder plus the buffers registered with it.

    Buffers are referenced until `close()` so the native side never reads
    freed memory.
    """

    def __init__(
        self, library: ctypes.CDLL, function_id: FunctionId, handle: ctypes.c_void_p
    ) -> None:
        self._library = library
        self._function_id = str(function_id)
        self._holder = ctypes.c_void_p()
        self._buffers: list[np.ndarray] = []
        self._closed = False
        code = library.TA_ParamHolderAlloc(handle, ctypes.byref(self._holder))
        check_return_code(code, function_id=self._function_id, step="TA_ParamHolderAlloc")

    def _keep_input(self, buffer: np.ndarray, dtype: type[np.generic]) -> np.ndarray:
        kept = np.ascontiguousarray(buffer, dtype=dtype)
        self._buffers.append(kept)
        return kept

    def _keep_output(self, buffer: np.ndarray, dtype: type[np.generic]) -> np.ndarray:
        usable = (
            buffer.dtype == np.dtype(dtype)
            and buffer.flags.c_contiguous
            and buffer.flags.writeable
        )
        if not usable:
            raise ValueError(
                f"{self._function_id}: output buffer must be writeable contiguous {np.dtype(dtype)}"
            )
        self._buffers.append(buffer)
        return buffer

    def set_input_real(self, param_index: int, buffer: np.ndarray) -> int:
        kept = self._keep_input(buffer, np.float64)
        return self._library.TA_SetInputParamRealPtr(
            self._holder, param_index, _buffer_pointer(kept)
        )

    def set_input_integer(self, param_index: int, buffer: np.ndarray) -> int:
        kept = self._keep_input(buffer, np.int32)
        return self._library.TA_SetInputParamIntegerPtr(
            self._holder, param_index, _buffer_pointer(kept)
        )

    def set_input_price(self, param_index: int, slots: tuple[np.ndarray, ...]) -> int:
        if len(slots) != 6:
            raise ValueError(f"{self._function_id}: price input needs 6 slots, got {len(slots)}")
        pointers = [_buffer_pointer(self._keep_input(slot, np.float64)) for slot in slots]
        return self._library.TA_SetInputParamPricePtr(self._holder, param_index, *pointers)

    def set_opt_input_integer(self, param_index: int, value: int) -> int:
        return self._library.TA_SetOptInputParamInteger(self._holder, param_index, int(value))

    def set_opt_input_real(self, param_index: int, value: float) -> int:
        return self._library.TA_SetOptInputParamReal(self._holder, param_index, float(value))

    def set_output_real(self, param_index: int, buffer: np.ndarray) -> int:
        kept = self._keep_output(buffer, np.float64)
        return self._library.TA_SetOutputParamRealPtr(
            self._holder, param_index, _buffer_pointer(kept)
        )

    def set_output_integer(self, param_index: int, buffer: np.ndarray) -> int:
        kept = self._keep_output(buffer, np.int32)
        return self._library.TA_SetOutputParamIntegerPtr(
            self._holder, param_index, _buffer_pointer(kept)
        )

    def call(self, start_index: int, end_index: int) -> tuple[int, int, int]:
        out_begin = ctypes.c_int(0)
        out_count = ctypes.c_int(0)
        code = self._library.TA_CallFunc(
            self._holder,
            start_index,
            end_index,
            ctypes.byref(out_begin),
            ctypes.byref(out_count),
        )
        return code, out_begin.value, out_count.value

    def close(self) -> None:
        """
        Free the native parameter holder once and release buffer references.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Repeated calls are no-ops.
        Raises:
            NativeCallError: If `TA_ParamHolderFree` fails.
        Side Effects:
            Frees native memory.
        """
        if self._closed:
            return
        self._closed = True
        self._buffers.clear()
        code = self._library.TA_ParamHolderFree(self._holder)
        check_return_code(code, function_id=self._function_id, step="TA_ParamHolderFree")

    def __enter__(self) -> CtypesNativeCall:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class CtypesTaLibNative(TaLibNative):
    """
    TA-Lib abstract interface over a loaded shared library.
    """

    def __init__(self, library: ctypes.CDLL) -> None:
        """
        Declare signatures and initialize the library.

        Args:
            library: Loaded TA-Lib shared library.
        Returns:
            None.
        Assumptions:
            `TA_Initialize` is idempotent.
        Raises:
            NativeCallError: If initialization fails.
        Side Effects:
            Initializes TA-Lib global state.
        """
        declare_signatures(library)
        code = library.TA_Initialize()
        check_return_code(code, function_id="TA_Initialize", step="TA_Initialize")
        self._library = library

    @classmethod
    def from_config(cls, config: TaLibRuntimeConfig) -> CtypesTaLibNative:
        return cls(load_talib_library(config))

    def list_function_ids(self) -> tuple[FunctionId, ...]:
        """
        Enumerate every native function through group and function tables.

        Args:
            None.
        Returns:
            tuple[FunctionId, ...]: Function ids in group-table order.
        Assumptions:
            Native tables are freed on every exit path.
        Raises:
            NativeCallError: If a table allocation fails.
        Side Effects:
            Allocates and frees native string tables.
        """
        function_ids: list[FunctionId] = []
        groups = ctypes.POINTER(TaStringTable)()
        code = self._library.TA_GroupTableAlloc(ctypes.byref(groups))
        check_return_code(code, function_id="*", step="TA_GroupTableAlloc")
        try:
            for group_index in range(groups.contents.size):
                group_name = groups.contents.string[group_index]
                functions = ctypes.POINTER(TaStringTable)()
                code = self._library.TA_FuncTableAlloc(group_name, ctypes.byref(functions))
                check_return_code(code, function_id=_decode(group_name), step="TA_FuncTableAlloc")
                try:
                    for function_index in range(functions.contents.size):
                        name = _decode(functions.contents.string[function_index])
                        function_ids.append(FunctionId(name))
                finally:
                    self._library.TA_FuncTableFree(functions)
        finally:
            self._library.TA_GroupTableFree(groups)
        return tuple(function_ids)

    def describe_function(self, function_id: FunctionId) -> FunctionSchema:
        """
        Introspect one function into an ordered schema.

        Args:
            function_id: Native function to describe.
        Returns:
            FunctionSchema: Inputs, optional inputs, and outputs in native order.
        Assumptions:
            Range-typed optional inputs expose bounds; list-typed ones do not.
        Raises:
            NativeCallError: If introspection fails or a parameter type is unsupported.
        Side Effects:
            None.
        """
        name = str(function_id)
        handle = self._handle(function_id)
        info_ptr = ctypes.POINTER(TaFuncInfo)()
        code = self._library.TA_GetFuncInfo(handle, ctypes.byref(info_ptr))
        check_return_code(code, function_id=name, step="TA_GetFuncInfo")
        info = info_ptr.contents

        inputs = tuple(self._input_def(handle, name, index) for index in range(info.nbInput))
        opt_inputs = tuple(
            self._opt_input_def(handle, name, index) for index in range(info.nbOptInput)
        )
        outputs = tuple(self._output_def(handle, name, index) for index in range(info.nbOutput))
        return FunctionSchema(
            function_id=function_id,
            group=_decode(info.group),
            title=_decode(info.hint),
            inputs=inputs,
            opt_inputs=opt_inputs,
            outputs=outputs,
        )

    def open_call(self, function_id: FunctionId) -> CtypesNativeCall:
        return CtypesNativeCall(self._library, function_id, self._handle(function_id))

    def _handle(self, function_id: FunctionId) -> ctypes.c_void_p:
        handle = ctypes.c_void_p()
        code = self._library.TA_GetFuncHandle(
            str(function_id).encode("ascii"), ctypes.byref(handle)
        )
        check_return_code(code, function_id=str(function_id), step="TA_GetFuncHandle")
        return handle

    def _input_def(self, handle: ctypes.c_void_p, name: str, index: int) -> InputParamDef:
        info_ptr = ctypes.POINTER(TaInputParameterInfo)()
        code = self._library.TA_GetInputParameterInfo(handle, index, ctypes.byref(info_ptr))
        check_return_code(code, function_id=name, step="TA_GetInputParameterInfo")
        info = info_ptr.contents
        kind = _lookup_type(INPUT_TYPES, info.type, name, "TA_GetInputParameterInfo")
        roles = roles_from_flags(info.flags) if kind is InputKind.PRICE else ()
        return InputParamDef(name=_decode(info.paramName), kind=kind, roles=roles)

    def _opt_input_def(self, handle: ctypes.c_void_p, name: str, index: int) -> OptInputDef:
        info_ptr = ctypes.POINTER(TaOptInputParameterInfo)()
        code = self._library.TA_GetOptInputParameterInfo(handle, index, ctypes.byref(info_ptr))
        check_return_code(code, function_id=name, step="TA_GetOptInputParameterInfo")
        info = info_ptr.contents
        kind = _lookup_type(OPT_INPUT_TYPES, info.type, name, "TA_GetOptInputParameterInfo")

        hard_min: Any = None
        hard_max: Any = None
        if info.dataSet and info.type == OPT_INPUT_REAL_RANGE:
            real_range = ctypes.cast(info.dataSet, ctypes.POINTER(TaRealRange)).contents
            hard_min, hard_max = real_range.min, real_range.max
        elif info.dataSet and info.type == OPT_INPUT_INTEGER_RANGE:
            integer_range = ctypes.cast(info.dataSet, ctypes.POINTER(TaIntegerRange)).contents
            hard_min, hard_max = integer_range.min, integer_range.max

        default: int | float = info.defaultValue
        if kind is OptInputKind.INTEGER:
            default = int(round(info.defaultValue))
        return OptInputDef(
            name=_decode(info.paramName),
            kind=kind,
            default=default,
            hard_min=hard_min,
            hard_max=hard_max,
        )

    def _output_def(self, handle: ctypes.c_void_p, name: str, index: int) -> OutputDef:
        info_ptr = ctypes.POINTER(TaOutputParameterInfo)()
        code = self._library.TA_GetOutputParameterInfo(handle, index, ctypes.byref(info_ptr))
        check_return_code(code, function_id=name, step="TA_GetOutputParameterInfo")
        info = info_ptr.contents
        kind = _lookup_type(OUTPUT_TYPES, info.type, name, "TA_GetOutputParameterInfo")
        return OutputDef(name=_decode(info.paramName), kind=kind)


def _lookup_type(table: dict[int, Any], raw_type: int, function_id: str, step: str) -> Any:
    kind = table.get(raw_type)
    if kind is None:
        log.warning(
            "unsupported native parameter type",
            extra={"function_id": function_id, "step": step, "raw_type": raw_type},
        )
        raise NativeCallError(
            function_id=function_id,
            code=int(NativeRetCode.NOT_SUPPORTED),
            step=step,
        )
    return kind
