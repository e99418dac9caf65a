"""
Execute binding directives against the native library and decode outputs.

Related: ta_bridge.contexts.indicators.application.services.input_binder,
  ta_bridge.contexts.indicators.application.ports.native.talib_native
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import numpy as np

from ta_bridge.contexts.indicators.application.dto import (
    BindingDirective,
    BundleBinding,
    IndicatorOutputs,
    SingleBinding,
)
from ta_bridge.contexts.indicators.application.ports.native import NativeCall, TaLibNative
from ta_bridge.contexts.indicators.domain.entities import (
    PRICE_ROLE_SLOTS,
    FunctionSchema,
    InputKind,
    NativeRetCode,
    OptInputDef,
    OptInputKind,
    OutputKind,
)
from ta_bridge.contexts.indicators.domain.errors import (
    EmptyInputError,
    InputLengthMismatchError,
    InvalidParameterError,
    MissingBundleElementError,
    NativeCallError,
    TypeMismatchError,
    check_return_code,
)

log = logging.getLogger(__name__)

_EMPTY_SLOT_DTYPE = np.float64
_INT32 = np.iinfo(np.int32)
_NUMERIC_KINDS = frozenset("iuf")


def as_numeric_vector(value: Any, *, function_id: str, label: str) -> np.ndarray:
    """
    View one raw caller value as a 1D numeric ndarray without copying when possible.

    Args:
        value: Raw caller array (list, tuple, ndarray, ...).
        function_id: Target native function for diagnostics.
        label: Human-readable input label for diagnostics.
    Returns:
        np.ndarray: One-dimensional array of integer or floating dtype.
    Assumptions:
        Booleans are not numeric series.
    Raises:
        TypeMismatchError: If the value is not a 1D numeric sequence.
    Side Effects:
        None.
    """
    try:
        array = np.asarray(value)
    except (TypeError, ValueError):
        raise TypeMismatchError(
            function_id=function_id, label=label, got=type(value).__name__
        ) from None
    if array.ndim != 1 or array.dtype.kind not in _NUMERIC_KINDS:
        got = f"{array.ndim}D {array.dtype}" if array.ndim else type(value).__name__
        raise TypeMismatchError(function_id=function_id, label=label, got=got)
    return array


def _real_buffer(value: Any, *, function_id: str, label: str) -> np.ndarray:
    vector = as_numeric_vector(value, function_id=function_id, label=label)
    return np.ascontiguousarray(vector, dtype=np.float64)


def _integer_buffer(value: Any, *, function_id: str, label: str) -> np.ndarray:
    vector = as_numeric_vector(value, function_id=function_id, label=label)
    if vector.dtype.kind == "f":
        if not np.all(np.isfinite(vector)) or not np.all(np.floor(vector) == vector):
            raise TypeMismatchError(function_id=function_id, label=label, got="non-integral float")
    if vector.size and (vector.min() < _INT32.min or vector.max() > _INT32.max):
        raise TypeMismatchError(
            function_id=function_id, label=label, got="value outside int32 range"
        )
    return np.ascontiguousarray(vector, dtype=np.int32)


def _first_raw_array(directive: BindingDirective, function_id: str) -> Any:
    if isinstance(directive, BundleBinding):
        if len(directive.arrays) == 0 or directive.arrays[0] is None:
            raise MissingBundleElementError(
                function_id=function_id,
                role=directive.param.roles[0].value,
                position=0,
            )
        return directive.arrays[0]
    return directive.array


def compute_input_length(bindings: Sequence[BindingDirective], function_id: str) -> int:
    """
    Compute the call input length from the first raw array encountered.

    Args:
        bindings: Directives in schema order.
        function_id: Target native function for diagnostics.
    Returns:
        int: Length of the first array of the first directive.
    Assumptions:
        Remaining arrays are checked against this length by the caller.
    Raises:
        EmptyInputError: If there are no directives or the length is zero.
        MissingBundleElementError: If a leading bundle has no first element.
        TypeMismatchError: If the first array is not a numeric 1D sequence.
    Side Effects:
        None.
    """
    if len(bindings) == 0:
        raise EmptyInputError(function_id=function_id)

    first = bindings[0]
    raw = _first_raw_array(first, function_id)
    length = as_numeric_vector(raw, function_id=function_id, label=first.param.name).shape[0]
    if length == 0:
        raise EmptyInputError(function_id=function_id)
    return length


def build_price_slots(directive: BundleBinding, function_id: str) -> tuple[np.ndarray, ...]:
    """
    Expand one price bundle into the fixed native slot vector.

    Args:
        directive: Bundle directive; `arrays[i]` belongs to `param.roles[i]`.
        function_id: Target native function for diagnostics.
    Returns:
        tuple[np.ndarray, ...]: One float64 buffer per `PRICE_ROLE_SLOTS` entry;
            roles the parameter does not declare get a zero-length placeholder.
    Assumptions:
        Role order of the directive matches the order the caller supplied arrays in.
    Raises:
        MissingBundleElementError: If a declared role has no array.
        TypeMismatchError: If a bundle element is not a numeric 1D sequence.
    Side Effects:
        None.
    """
    by_role: dict[Any, np.ndarray] = {}
    for position, role in enumerate(directive.param.roles):
        if position >= len(directive.arrays) or directive.arrays[position] is None:
            raise MissingBundleElementError(
                function_id=function_id, role=role.value, position=position
            )
        by_role[role] = _real_buffer(
            directive.arrays[position],
            function_id=function_id,
            label=f"{directive.param.name}.{role.value}",
        )

    return tuple(
        by_role[role] if role in by_role else np.empty(0, dtype=_EMPTY_SLOT_DTYPE)
        for role in PRICE_ROLE_SLOTS
    )


def _opt_input_value(opt_input: OptInputDef, value: Any, function_id: str) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise InvalidParameterError(
            f"{function_id}: option {opt_input.name} must be numeric, got {type(value).__name__}"
        )
    if opt_input.kind is OptInputKind.INTEGER:
        if not np.isfinite(value) or float(value) != int(value):
            raise InvalidParameterError(
                f"{function_id}: option {opt_input.name} must be an integer, got {value!r}"
            )
        normalized: int | float = int(value)
    else:
        normalized = float(value)
        if not np.isfinite(normalized):
            raise InvalidParameterError(
                f"{function_id}: option {opt_input.name} must be finite, got {value!r}"
            )

    if opt_input.hard_min is not None and normalized < opt_input.hard_min:
        raise InvalidParameterError(
            f"{function_id}: option {opt_input.name}={normalized} is below {opt_input.hard_min}"
        )
    if opt_input.hard_max is not None and normalized > opt_input.hard_max:
        raise InvalidParameterError(
            f"{function_id}: option {opt_input.name}={normalized} is above {opt_input.hard_max}"
        )
    return normalized


class NativeCallAdapter:
    """
    Run one native function call from binding directives.

    Stateless apart from the native port; safe to share between threads as long
    as the port is.
    """

    def __init__(self, native: TaLibNative) -> None:
        self._native = native

    def invoke(
        self,
        schema: FunctionSchema,
        bindings: Sequence[BindingDirective],
        options: Mapping[str, Any] | None = None,
    ) -> IndicatorOutputs:
        """
        Pack inputs, set options and outputs, call the native function, and decode.

        Args:
            schema: Schema of the target function.
            bindings: Directives produced by `InputBinder.bind` for this schema.
            options: Native optional input values keyed by native name; omitted
                options use schema defaults.
        Returns:
            IndicatorOutputs: One float64 array per schema output, input-length long,
                NaN outside the native output window.
        Assumptions:
            Directives are in schema order.
        Raises:
            EmptyInputError: If the input length is zero.
            InputLengthMismatchError: If any bound array differs from the input length.
            MissingBundleElementError: If a bundle lacks a role array.
            TypeMismatchError: If an array is not numeric or not integral where required.
            InvalidParameterError: If an option is unknown or invalid.
            NativeCallError: If any native step returns a nonzero code or an
                inconsistent output window.
        Side Effects:
            Allocates and frees one native parameter holder.
        """
        function_id = str(schema.function_id)
        input_length = compute_input_length(bindings, function_id)
        inputs = self._prepare_inputs(bindings, function_id, input_length)
        opt_values = self._prepare_options(schema, options or {}, function_id)
        outputs = tuple(
            np.zeros(
                input_length,
                dtype=np.int32 if output.kind is OutputKind.INTEGER else np.float64,
            )
            for output in schema.outputs
        )

        with self._native.open_call(schema.function_id) as call:
            self._set_inputs(call, inputs, function_id)
            for param_index, (opt_input, value) in enumerate(zip(schema.opt_inputs, opt_values)):
                if opt_input.kind is OptInputKind.INTEGER:
                    code = call.set_opt_input_integer(param_index, int(value))
                    check_return_code(
                        code, function_id=function_id, step="TA_SetOptInputParamInteger"
                    )
                else:
                    code = call.set_opt_input_real(param_index, float(value))
                    check_return_code(
                        code, function_id=function_id, step="TA_SetOptInputParamReal"
                    )
            for param_index, (output, buffer) in enumerate(zip(schema.outputs, outputs)):
                if output.kind is OutputKind.INTEGER:
                    code = call.set_output_integer(param_index, buffer)
                    check_return_code(
                        code, function_id=function_id, step="TA_SetOutputParamIntegerPtr"
                    )
                else:
                    code = call.set_output_real(param_index, buffer)
                    check_return_code(
                        code, function_id=function_id, step="TA_SetOutputParamRealPtr"
                    )

            code, out_begin, out_count = call.call(0, input_length - 1)
            check_return_code(code, function_id=function_id, step="TA_CallFunc")

        if out_begin < 0 or out_count < 0 or out_begin + out_count > input_length:
            raise NativeCallError(
                function_id=function_id,
                code=int(NativeRetCode.INTERNAL_ERROR),
                step="TA_CallFunc output window",
            )

        log.debug(
            "native call completed",
            extra={
                "function_id": function_id,
                "input_length": input_length,
                "out_begin": out_begin,
                "out_count": out_count,
            },
        )
        return IndicatorOutputs(
            function_id=schema.function_id,
            names=tuple(output.name for output in schema.outputs),
            values=tuple(
                _decode_output(buffer, input_length, out_begin, out_count) for buffer in outputs
            ),
        )

    def _prepare_inputs(
        self,
        bindings: Sequence[BindingDirective],
        function_id: str,
        input_length: int,
    ) -> tuple[tuple[BindingDirective, Any], ...]:
        """
        Convert every directive into native-ready buffers and check lengths.

        Args:
            bindings: Directives in schema order.
            function_id: Target native function for diagnostics.
            input_length: Length every buffer must have.
        Returns:
            tuple[tuple[BindingDirective, Any], ...]: Directive with its buffer (single)
                or six-slot vector (bundle).
        Assumptions:
            Conversion happens before any native allocation.
        Raises:
            InputLengthMismatchError: If any buffer length differs from `input_length`.
            MissingBundleElementError: If a bundle lacks a role array.
            TypeMismatchError: If conversion fails.
        Side Effects:
            None.
        """
        prepared: list[tuple[BindingDirective, Any]] = []
        for directive in bindings:
            if isinstance(directive, BundleBinding):
                slots = build_price_slots(directive, function_id)
                for role, slot in zip(PRICE_ROLE_SLOTS, slots):
                    if role in directive.param.roles and slot.shape[0] != input_length:
                        raise InputLengthMismatchError(
                            function_id=function_id,
                            label=f"{directive.param.name}.{role.value}",
                            expected=input_length,
                            actual=slot.shape[0],
                        )
                prepared.append((directive, slots))
                continue

            if directive.param.kind is InputKind.INTEGER:
                buffer = _integer_buffer(
                    directive.array, function_id=function_id, label=directive.param.name
                )
            else:
                buffer = _real_buffer(
                    directive.array, function_id=function_id, label=directive.param.name
                )
            if buffer.shape[0] != input_length:
                raise InputLengthMismatchError(
                    function_id=function_id,
                    label=directive.param.name,
                    expected=input_length,
                    actual=buffer.shape[0],
                )
            prepared.append((directive, buffer))
        return tuple(prepared)

    def _prepare_options(
        self,
        schema: FunctionSchema,
        options: Mapping[str, Any],
        function_id: str,
    ) -> tuple[int | float, ...]:
        known = {opt_input.name for opt_input in schema.opt_inputs}
        unknown = sorted(name for name in options if name not in known)
        if unknown:
            raise InvalidParameterError(
                f"{function_id}: unknown options {', '.join(unknown)}; "
                f"expected one of {', '.join(sorted(known)) or '<none>'}"
            )
        return tuple(
            _opt_input_value(opt_input, options.get(opt_input.name, opt_input.default), function_id)
            for opt_input in schema.opt_inputs
        )

    def _set_inputs(
        self,
        call: NativeCall,
        inputs: tuple[tuple[BindingDirective, Any], ...],
        function_id: str,
    ) -> None:
        for directive, payload in inputs:
            if isinstance(directive, SingleBinding):
                if directive.param.kind is InputKind.INTEGER:
                    code = call.set_input_integer(directive.param_index, payload)
                    step = "TA_SetInputParamIntegerPtr"
                else:
                    code = call.set_input_real(directive.param_index, payload)
                    step = "TA_SetInputParamRealPtr"
            else:
                code = call.set_input_price(directive.param_index, payload)
                step = "TA_SetInputParamPricePtr"
            check_return_code(code, function_id=function_id, step=step)


def _decode_output(
    buffer: np.ndarray, input_length: int, out_begin: int, out_count: int
) -> np.ndarray:
    """
    Align one native output buffer onto the input index space.

    Args:
        buffer: Native output buffer; the first `out_count` elements are valid.
        input_length: Length of the call input.
        out_begin: First input index the native function produced output for.
        out_count: Number of produced elements.
    Returns:
        np.ndarray: float64 array of `input_length` with NaN before `out_begin`
            and after `out_begin + out_count`.
    Assumptions:
        Window was validated against `input_length`.
    Raises:
        None.
    Side Effects:
        None.
    """
    values = np.full(input_length, np.nan, dtype=np.float64)
    values[out_begin : out_begin + out_count] = buffer[:out_count]
    return values
