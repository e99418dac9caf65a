from __future__ import annotations

from types import TracebackType
from typing import Protocol

import numpy as np

from ta_bridge.contexts.indicators.domain.entities import FunctionId, FunctionSchema


class NativeCall(Protocol):
    """
    Port for one scoped invocation of a native function.

    Owns the native parameter holder; buffers handed to setters must stay
    alive until `close()`. Every setter and `call` return the raw native code.

    Related:
      - src/ta_bridge/contexts/indicators/application/services/native_call_adapter.py
      - src/ta_bridge/contexts/indicators/adapters/outbound/native_ctypes/ctypes_talib_native.py
    """

    def set_input_real(self, param_index: int, buffer: np.ndarray) -> int:
        ...

    def set_input_integer(self, param_index: int, buffer: np.ndarray) -> int:
        ...

    def set_input_price(self, param_index: int, slots: tuple[np.ndarray, ...]) -> int:
        """
        Bind a price bundle through the fixed six-slot vector.

        Args:
            param_index: Zero-based input parameter position.
            slots: Six float64 buffers in open, high, low, close, volume,
                open-interest order; zero-length buffers mark unused slots.
        Returns:
            int: Raw native return code.
        Assumptions:
            Used slots all have the call input length.
        Raises:
            None.
        Side Effects:
            Registers buffer addresses with the native parameter holder.
        """
        ...

    def set_opt_input_integer(self, param_index: int, value: int) -> int:
        ...

    def set_opt_input_real(self, param_index: int, value: float) -> int:
        ...

    def set_output_real(self, param_index: int, buffer: np.ndarray) -> int:
        ...

    def set_output_integer(self, param_index: int, buffer: np.ndarray) -> int:
        ...

    def call(self, start_index: int, end_index: int) -> tuple[int, int, int]:
        """
        Execute the native function over an inclusive index range.

        Args:
            start_index: First input index to compute.
            end_index: Last input index to compute.
        Returns:
            tuple[int, int, int]: Native code, first input index with output, and
                number of produced output elements.
        Assumptions:
            All inputs and outputs were set before the call.
        Raises:
            None.
        Side Effects:
            Writes into output buffers.
        """
        ...

    def close(self) -> None:
        """
        Release the native parameter holder and drop buffer references.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Safe to call more than once.
        Raises:
            NativeCallError: If the native free step fails on first close.
        Side Effects:
            Frees native memory.
        """
        ...

    def __enter__(self) -> NativeCall:
        ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        ...


class TaLibNative(Protocol):
    """
    Port for the native technical-analysis library abstract interface.

    Related:
      - src/ta_bridge/contexts/indicators/adapters/outbound/native_ctypes/ctypes_talib_native.py
      - src/ta_bridge/contexts/indicators/adapters/outbound/registry/
    """

    def list_function_ids(self) -> tuple[FunctionId, ...]:
        """
        Enumerate every function exposed by the native library.

        Args:
            None.
        Returns:
            tuple[FunctionId, ...]: Function ids in native table order.
        Assumptions:
            Native library is initialized.
        Raises:
            NativeCallError: If native enumeration fails.
        Side Effects:
            None.
        """
        ...

    def describe_function(self, function_id: FunctionId) -> FunctionSchema:
        """
        Introspect one native function into an ordered parameter schema.

        Args:
            function_id: Native function to describe.
        Returns:
            FunctionSchema: Inputs, optional inputs, and outputs in native order.
        Assumptions:
            Function id exists in the native table.
        Raises:
            NativeCallError: If native introspection fails.
        Side Effects:
            None.
        """
        ...

    def open_call(self, function_id: FunctionId) -> NativeCall:
        """
        Allocate a scoped native call for one function.

        Args:
            function_id: Native function to invoke.
        Returns:
            NativeCall: Call handle; use as a context manager.
        Assumptions:
            Caller closes the handle on every exit path.
        Raises:
            NativeCallError: If handle or parameter holder allocation fails.
        Side Effects:
            Allocates native memory.
        """
        ...
