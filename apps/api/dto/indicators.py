"""
Pydantic API models and converters for indicators endpoints.
"""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, Field

from ta_bridge.contexts.indicators.application.dto import IndicatorOutputs
from ta_bridge.contexts.indicators.application.services import IndicatorResult
from ta_bridge.contexts.indicators.domain.entities import IndicatorSpec, OptionSpec


class OptionResponse(BaseModel):
    """
    API representation for one indicator option.
    """

    name: str
    kind: Literal["int", "float"]
    default: int | float
    is_period: bool
    bounded_by_data: bool
    hard_min: int | float | None
    hard_max: int | float | None
    native_names: list[str]


class IndicatorResponse(BaseModel):
    """
    API representation for one catalog indicator.
    """

    name: str
    function_id: str
    title: str
    group: str
    inputs: list[str]
    options: list[OptionResponse]
    outputs: list[str]


class IndicatorsResponse(BaseModel):
    """
    API response for `GET /indicators`.
    """

    schema_version: Literal[1] = 1
    items: list[IndicatorResponse]


class IndicatorComputeRequest(BaseModel):
    """
    API request for `POST /indicators/{name}/compute`.
    """

    inputs: dict[str, list[float]]
    options: dict[str, int | float] = Field(default_factory=dict)


class IndicatorComputeResponse(BaseModel):
    """
    API response for `POST /indicators/{name}/compute`.

    Positions without a value are `null`.
    """

    schema_version: Literal[1] = 1
    indicator: str
    function_id: str
    length: int
    outputs: dict[str, list[float | None]]


def build_option_response(*, option: OptionSpec) -> OptionResponse:
    return OptionResponse(
        name=option.name,
        kind=option.kind.value,
        default=option.default,
        is_period=option.is_period,
        bounded_by_data=option.bounded_by_data,
        hard_min=option.hard_min,
        hard_max=option.hard_max,
        native_names=list(option.native_names),
    )


def build_indicator_response(*, spec: IndicatorSpec) -> IndicatorResponse:
    """
    Convert one catalog entry into API model.

    Args:
        spec: Catalog entry.
    Returns:
        IndicatorResponse: API payload item.
    Assumptions:
        Option and output order is preserved.
    Raises:
        None.
    Side Effects:
        None.
    """
    return IndicatorResponse(
        name=spec.name,
        function_id=str(spec.function_id),
        title=spec.title,
        group=spec.group,
        inputs=list(spec.inputs),
        options=[build_option_response(option=option) for option in spec.options],
        outputs=list(spec.outputs),
    )


def build_indicators_response(*, specs: tuple[IndicatorSpec, ...]) -> IndicatorsResponse:
    return IndicatorsResponse(
        items=[build_indicator_response(spec=spec) for spec in specs],
    )


def build_indicator_compute_response(
    *,
    spec: IndicatorSpec,
    result: IndicatorResult,
) -> IndicatorComputeResponse:
    """
    Convert facade result into JSON-safe API model.

    Args:
        spec: Computed catalog entry.
        result: Single ndarray or named outputs.
    Returns:
        IndicatorComputeResponse: Outputs keyed by catalog output name, NaN as null.
    Assumptions:
        Single-output results map onto the only catalog output name.
    Raises:
        None.
    Side Effects:
        None.
    """
    if isinstance(result, IndicatorOutputs):
        named = result.as_dict()
    else:
        named = {spec.outputs[0]: result}

    outputs = {
        name: [None if math.isnan(value) else float(value) for value in values.tolist()]
        for name, values in named.items()
    }
    length = len(next(iter(named.values()))) if named else 0
    return IndicatorComputeResponse(
        indicator=spec.name,
        function_id=str(spec.function_id),
        length=length,
        outputs=outputs,
    )
