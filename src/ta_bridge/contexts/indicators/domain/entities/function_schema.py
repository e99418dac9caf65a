from __future__ import annotations

from dataclasses import dataclass

from .function_id import FunctionId
from .input_param_def import InputParamDef
from .opt_input_def import OptInputDef
from .output_def import OutputDef


@dataclass(frozen=True, slots=True)
class FunctionSchema:
    """
    Ordered parameter schema of one native function.

    Loaded once from native introspection and shared read-only by all calls.

    Related: .input_param_def, .opt_input_def, .output_def,
      ...application.services.input_binder
    """

    function_id: FunctionId
    group: str
    title: str
    inputs: tuple[InputParamDef, ...]
    opt_inputs: tuple[OptInputDef, ...] = ()
    outputs: tuple[OutputDef, ...] = ()

    def __post_init__(self) -> None:
        """
        Validate schema consistency.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Parameter names are unique inside each parameter family.
        Raises:
            ValueError: If there are no inputs or outputs, or names repeat.
        Side Effects:
            Normalizes `group` and `title` by stripping spaces.
        """
        if self.function_id is None:  # type: ignore[truthy-bool]
            raise ValueError("FunctionSchema requires function_id")

        object.__setattr__(self, "group", self.group.strip())
        object.__setattr__(self, "title", self.title.strip())
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "opt_inputs", tuple(self.opt_inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

        if len(self.inputs) == 0:
            raise ValueError(f"FunctionSchema {self.function_id} requires at least one input")
        if len(self.outputs) == 0:
            raise ValueError(f"FunctionSchema {self.function_id} requires at least one output")

        for family, items in (
            ("input", self.inputs),
            ("optional input", self.opt_inputs),
            ("output", self.outputs),
        ):
            names = [item.name for item in items]
            if len(set(names)) != len(names):
                raise ValueError(
                    f"FunctionSchema {self.function_id} {family} names must be unique"
                )

    def total_input_width(self) -> int:
        """
        Return the number of raw caller arrays one call must supply.

        Args:
            None.
        Returns:
            int: Sum of parameter widths in schema order.
        Assumptions:
            Each input declares a `width`.
        Raises:
            None.
        Side Effects:
            None.
        """
        return sum(param.width for param in self.inputs)

    def opt_input_index(self, name: str) -> int | None:
        """
        Resolve optional input position by native name.

        Args:
            name: Native optional input name, e.g. `optInTimePeriod`.
        Returns:
            int | None: Zero-based index, or None when the function has no such option.
        Assumptions:
            Names are unique by construction.
        Raises:
            None.
        Side Effects:
            None.
        """
        for index, opt_input in enumerate(self.opt_inputs):
            if opt_input.name == name:
                return index
        return None
