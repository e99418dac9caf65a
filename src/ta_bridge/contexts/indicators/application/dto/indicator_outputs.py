from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence

import numpy as np

from ta_bridge.contexts.indicators.domain.entities import FunctionId


@dataclass(frozen=True, slots=True)
class IndicatorOutputs:
    """
    Decoded results of one native call.

    Every value array is float64 with the call input length; positions the
    native function produced no value for hold NaN.

    Related: ..services.native_call_adapter
    """

    function_id: FunctionId
    names: tuple[str, ...]
    values: tuple[np.ndarray, ...]

    def __post_init__(self) -> None:
        """
        Validate name/value alignment.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            All value arrays share one length.
        Raises:
            ValueError: If names and values differ in count, names repeat, or
                arrays differ in shape.
        Side Effects:
            None.
        """
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "values", tuple(self.values))
        if len(self.names) != len(self.values):
            raise ValueError("IndicatorOutputs names and values must have equal length")
        if len(set(self.names)) != len(self.names):
            raise ValueError("IndicatorOutputs names must be unique")
        lengths = {value.shape for value in self.values}
        if len(lengths) > 1:
            raise ValueError("IndicatorOutputs values must share one shape")

    def __getitem__(self, key: int | str) -> np.ndarray:
        if isinstance(key, str):
            try:
                return self.values[self.names.index(key)]
            except ValueError:
                raise KeyError(key) from None
        return self.values[key]

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def as_dict(self) -> Mapping[str, np.ndarray]:
        return dict(zip(self.names, self.values))

    def renamed(self, names: Sequence[str]) -> IndicatorOutputs:
        """
        Return the same values under caller-facing names.

        Args:
            names: New names in output order.
        Returns:
            IndicatorOutputs: Copy sharing value arrays.
        Assumptions:
            Output order is stable between schema and catalog.
        Raises:
            ValueError: If name count differs from value count.
        Side Effects:
            None.
        """
        return IndicatorOutputs(
            function_id=self.function_id, names=tuple(names), values=self.values
        )
