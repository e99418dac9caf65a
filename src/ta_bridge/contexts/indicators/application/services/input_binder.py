"""
Cursor-based binding of a flat caller array list onto a function schema.

Related: ta_bridge.contexts.indicators.domain.entities.function_schema,
  ta_bridge.contexts.indicators.application.dto.binding_directive
"""

from __future__ import annotations

from typing import Any, Sequence

from ta_bridge.contexts.indicators.application.dto import (
    BindingDirective,
    BundleBinding,
    SingleBinding,
)
from ta_bridge.contexts.indicators.domain.entities import FunctionSchema, InputKind
from ta_bridge.contexts.indicators.domain.errors import (
    ArgumentCountMismatchError,
    InsufficientInputsError,
    UnsupportedParameterKindError,
)


class InputBinder:
    """
    Map caller arrays onto schema input parameters in declaration order.

    Price bundles consume one array per declared role, single-array kinds
    consume exactly one; the cursor is local to each `bind` call.
    """

    def bind(self, schema: FunctionSchema, inputs: Sequence[Any]) -> tuple[BindingDirective, ...]:
        """
        Produce one binding directive per schema input parameter.

        Args:
            schema: Ordered schema of the target native function.
            inputs: Flat caller input list; bundle arrays appear in role order.
        Returns:
            tuple[BindingDirective, ...]: Directives in schema order.
        Assumptions:
            Array contents are not inspected here; length and dtype checks happen
            in the call adapter.
        Raises:
            InsufficientInputsError: If the list runs out before a parameter is satisfied.
            UnsupportedParameterKindError: If a parameter kind is not price/real/integer.
            ArgumentCountMismatchError: If arrays remain after the last parameter.
        Side Effects:
            None.
        """
        function_id = str(schema.function_id)
        directives: list[BindingDirective] = []
        array_index = 0
        received = len(inputs)

        for param_index, param in enumerate(schema.inputs):
            if param.kind is InputKind.PRICE:
                width = len(param.roles)
                if array_index + width > received:
                    raise InsufficientInputsError(
                        function_id=function_id,
                        param_name=param.name,
                        required=width,
                        available=received - array_index,
                        position=array_index,
                        roles=tuple(role.value for role in param.roles),
                    )
                directives.append(
                    BundleBinding(
                        param_index=param_index,
                        param=param,
                        arrays=tuple(inputs[array_index : array_index + width]),
                    )
                )
                array_index += width
            elif param.kind in (InputKind.REAL, InputKind.INTEGER):
                if array_index >= received:
                    raise InsufficientInputsError(
                        function_id=function_id,
                        param_name=param.name,
                        required=1,
                        available=0,
                        position=array_index,
                    )
                directives.append(
                    SingleBinding(param_index=param_index, param=param, array=inputs[array_index])
                )
                array_index += 1
            else:
                raise UnsupportedParameterKindError(
                    function_id=function_id,
                    param_name=param.name,
                    kind=param.kind,
                )

        if array_index != received:
            raise ArgumentCountMismatchError(
                function_id=function_id,
                expected=array_index,
                received=received,
            )
        return tuple(directives)
