from __future__ import annotations

from typing import Protocol

from ta_bridge.contexts.indicators.domain.entities import FunctionId, FunctionSchema


class FunctionSchemaRegistry(Protocol):
    """
    Port for resolving native function schemas by identifier.

    Related:
      - src/ta_bridge/contexts/indicators/domain/entities/function_schema.py
      - src/ta_bridge/contexts/indicators/domain/errors/unknown_function_error.py
      - src/ta_bridge/contexts/indicators/adapters/outbound/registry/
    """

    def get_schema(self, function_id: FunctionId) -> FunctionSchema:
        """
        Resolve one function schema.

        Args:
            function_id: Native function identifier.
        Returns:
            FunctionSchema: Registered schema.
        Assumptions:
            Registry content is immutable after construction.
        Raises:
            UnknownFunctionError: If the function is not registered.
        Side Effects:
            None.
        """
        ...

    def list_schemas(self) -> tuple[FunctionSchema, ...]:
        ...

    def list_function_ids(self) -> tuple[FunctionId, ...]:
        ...
