"""
Generic indicator execution over the catalog, binder, and call adapter.

Related: ta_bridge.contexts.indicators.domain.definitions,
  ta_bridge.contexts.indicators.application.services.input_binder,
  ta_bridge.contexts.indicators.application.services.native_call_adapter
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Union, cast

import numpy as np

from ta_bridge.contexts.indicators.application.dto import IndicatorOutputs
from ta_bridge.contexts.indicators.application.ports.native import TaLibNative
from ta_bridge.contexts.indicators.application.ports.registry import FunctionSchemaRegistry
from ta_bridge.contexts.indicators.application.services.input_arrangement import arrange_inputs
from ta_bridge.contexts.indicators.application.services.input_binder import InputBinder
from ta_bridge.contexts.indicators.application.services.input_validation import (
    validate_equal_lengths,
    validate_option,
    validate_series,
)
from ta_bridge.contexts.indicators.application.services.native_call_adapter import (
    NativeCallAdapter,
)
from ta_bridge.contexts.indicators.domain.definitions import all_specs
from ta_bridge.contexts.indicators.domain.entities import (
    FunctionId,
    FunctionSchema,
    IndicatorSpec,
)
from ta_bridge.contexts.indicators.domain.errors import (
    InvalidParameterError,
    UnknownIndicatorError,
)

IndicatorResult = Union[np.ndarray, IndicatorOutputs]

_PATTERN_PREFIX = "cdl_"


class TechnicalIndicatorsBase:
    """
    Catalog-driven entry point shared by every indicator family.

    Resolves the indicator spec, validates series and options, arranges named
    series into schema order, binds, invokes the native function, and shapes
    the result (one ndarray for single-output indicators, `IndicatorOutputs`
    under catalog output names otherwise).
    """

    def __init__(
        self,
        native: TaLibNative,
        registry: FunctionSchemaRegistry | None = None,
        specs: Iterable[IndicatorSpec] | None = None,
    ) -> None:
        """
        Wire collaborators and index the catalog.

        Args:
            native: Native library port.
            registry: Schema registry; when omitted, schemas are described lazily
                through `native` and cached per instance.
            specs: Catalog override; defaults to the full built-in catalog.
        Returns:
            None.
        Assumptions:
            Catalog function ids exist in the native library.
        Raises:
            ValueError: If the catalog contains duplicate indicator names.
        Side Effects:
            None.
        """
        if native is None:  # type: ignore[truthy-bool]
            raise ValueError("TechnicalIndicators requires native")

        by_name: dict[str, IndicatorSpec] = {}
        for spec in all_specs() if specs is None else specs:
            if spec.name in by_name:
                raise ValueError(f"duplicate indicator name: {spec.name}")
            by_name[spec.name] = spec

        self._native = native
        self._registry = registry
        self._specs: Mapping[str, IndicatorSpec] = MappingProxyType(by_name)
        self._schemas: dict[FunctionId, FunctionSchema] = {}
        self._binder = InputBinder()
        self._adapter = NativeCallAdapter(native)

    def list_specs(self) -> tuple[IndicatorSpec, ...]:
        return tuple(self._specs.values())

    def get_spec(self, name: str) -> IndicatorSpec:
        """
        Resolve one catalog entry by indicator name.

        Args:
            name: Indicator name, case-insensitive.
        Returns:
            IndicatorSpec: Matching entry.
        Assumptions:
            Names are stored lowercase.
        Raises:
            UnknownIndicatorError: If the name is not in the catalog.
        Side Effects:
            None.
        """
        key = name.strip().lower()
        spec = self._specs.get(key)
        if spec is None:
            raise UnknownIndicatorError(f"unknown indicator: {name!r}")
        return spec

    def get_schema(self, spec: IndicatorSpec) -> FunctionSchema:
        if self._registry is not None:
            return self._registry.get_schema(spec.function_id)
        schema = self._schemas.get(spec.function_id)
        if schema is None:
            schema = self._native.describe_function(spec.function_id)
            self._schemas[spec.function_id] = schema
        return schema

    def compute(self, name: str, *inputs: Any, **options: Any) -> IndicatorResult:
        """
        Compute one indicator from positional series and keyword options.

        Args:
            name: Indicator name, e.g. `sma` or `cdl_doji`.
            *inputs: Series in the catalog's input order (e.g. high, low, close).
            **options: Caller-facing options; omitted options use catalog defaults.
        Returns:
            IndicatorResult: ndarray for single-output indicators, otherwise
                `IndicatorOutputs` named by the catalog.
        Assumptions:
            All series have equal length.
        Raises:
            UnknownIndicatorError: If `name` is not in the catalog.
            InvalidParameterError: If series count, series content, or options are invalid.
            BindingError: If series cannot be bound to the native schema.
            NativeCallError: If the native call fails.
        Side Effects:
            Allocates and frees one native call.
        """
        spec = self.get_spec(name)
        if len(inputs) != len(spec.inputs):
            raise InvalidParameterError(
                f"{spec.name} expects {len(spec.inputs)} input arrays "
                f"({', '.join(spec.inputs)}), got {len(inputs)}"
            )
        return self._run(spec, dict(zip(spec.inputs, inputs)), options)

    def compute_mapping(
        self,
        name: str,
        inputs: Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
    ) -> IndicatorResult:
        """
        Compute one indicator from series keyed by input name.

        Args:
            name: Indicator name.
            inputs: Series keyed by catalog input names; order is irrelevant.
            options: Caller-facing options.
        Returns:
            IndicatorResult: Same shape as `compute`.
        Assumptions:
            Used by the HTTP and CLI boundaries.
        Raises:
            UnknownIndicatorError: If `name` is not in the catalog.
            InvalidParameterError: If input names are missing or unexpected, or
                series and options are invalid.
            BindingError: If series cannot be bound.
            NativeCallError: If the native call fails.
        Side Effects:
            Allocates and frees one native call.
        """
        spec = self.get_spec(name)
        missing = [input_name for input_name in spec.inputs if input_name not in inputs]
        unexpected = sorted(input_name for input_name in inputs if input_name not in spec.inputs)
        if missing or unexpected:
            raise InvalidParameterError(
                f"{spec.name} expects inputs {', '.join(spec.inputs)}; "
                f"missing: {', '.join(missing) or '-'}; unexpected: {', '.join(unexpected) or '-'}"
            )
        named = {input_name: inputs[input_name] for input_name in spec.inputs}
        return self._run(spec, named, dict(options or {}))

    def candle_pattern(
        self,
        pattern: str,
        open: Any,
        high: Any,
        low: Any,
        close: Any,
        **options: Any,
    ) -> np.ndarray:
        """
        Recognize one candlestick pattern.

        Args:
            pattern: Pattern name with or without the `cdl_` prefix, e.g. `doji`.
            open: Open prices.
            high: High prices.
            low: Low prices.
            close: Close prices.
            **options: Pattern options such as `penetration`.
        Returns:
            np.ndarray: Signals (-100, 0, 100) as float64, NaN in the warm-up window.
        Assumptions:
            Pattern entries are single-output.
        Raises:
            UnknownIndicatorError: If the pattern is unknown.
            InvalidParameterError: If series or options are invalid.
            NativeCallError: If the native call fails.
        Side Effects:
            Allocates and frees one native call.
        """
        key = pattern.strip().lower()
        if not key.startswith(_PATTERN_PREFIX):
            key = f"{_PATTERN_PREFIX}{key}"
        if key not in self._specs:
            raise UnknownIndicatorError(f"unknown candlestick pattern: {pattern!r}")
        return self._series(key, open, high, low, close, **options)

    def _series(self, name: str, *inputs: Any, **options: Any) -> np.ndarray:
        return cast(np.ndarray, self.compute(name, *inputs, **options))

    def _outputs(self, name: str, *inputs: Any, **options: Any) -> IndicatorOutputs:
        return cast(IndicatorOutputs, self.compute(name, *inputs, **options))

    def _run(
        self,
        spec: IndicatorSpec,
        named: Mapping[str, Any],
        options: Mapping[str, Any],
    ) -> IndicatorResult:
        """
        Validate, arrange, bind, invoke, and shape one indicator call.

        Args:
            spec: Catalog entry.
            named: Raw series keyed by catalog input name, in catalog order.
            options: Caller-facing options.
        Returns:
            IndicatorResult: Shaped result.
        Assumptions:
            `named` keys equal `spec.inputs`.
        Raises:
            InvalidParameterError: If validation fails.
            BindingError: If binding fails.
            NativeCallError: If the native call fails.
        Side Effects:
            Allocates and frees one native call.
        """
        series = {name: validate_series(value, name=name) for name, value in named.items()}
        data_size = validate_equal_lengths(series)

        unknown = sorted(name for name in options if spec.option(name) is None)
        if unknown:
            known = ", ".join(option.name for option in spec.options) or "<none>"
            raise InvalidParameterError(
                f"{spec.name}: unknown options {', '.join(unknown)}; expected one of {known}"
            )

        native_options: dict[str, int | float] = {}
        for option in spec.options:
            value = validate_option(
                option,
                options.get(option.name, option.default),
                data_size=data_size,
            )
            for native_name in option.native_names:
                native_options[native_name] = value

        schema = self.get_schema(spec)
        bindings = self._binder.bind(schema, arrange_inputs(schema, series))
        outputs = self._adapter.invoke(schema, bindings, native_options)

        if len(spec.outputs) == 1 and len(outputs) == 1:
            return outputs[0]
        return outputs.renamed(spec.outputs)
