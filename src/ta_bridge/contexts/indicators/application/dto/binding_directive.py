from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, TypeAlias

from ta_bridge.contexts.indicators.domain.entities import InputParamDef


@dataclass(frozen=True, slots=True)
class SingleBinding:
    """
    Bind one raw caller array to a single-array native input position.

    Related: ..services.input_binder, ..services.native_call_adapter
    """

    param_index: int
    param: InputParamDef
    array: Any


@dataclass(frozen=True, slots=True)
class BundleBinding:
    """
    Bind a contiguous group of raw caller arrays to one price-bundle input position.

    `arrays[i]` is the series for `param.roles[i]`.

    Related: ..services.input_binder, ..services.native_call_adapter
    """

    param_index: int
    param: InputParamDef
    arrays: Sequence[Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "arrays", tuple(self.arrays))


BindingDirective: TypeAlias = SingleBinding | BundleBinding
