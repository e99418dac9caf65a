"""
Function schema registry snapshot built once from native introspection.

Related: ta_bridge.contexts.indicators.application.ports.registry.function_schema_registry,
  ta_bridge.contexts.indicators.application.ports.native.talib_native
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from ta_bridge.contexts.indicators.application.ports.native import TaLibNative
from ta_bridge.contexts.indicators.application.ports.registry import FunctionSchemaRegistry
from ta_bridge.contexts.indicators.domain.entities import FunctionId, FunctionSchema
from ta_bridge.contexts.indicators.domain.errors import UnknownFunctionError

log = logging.getLogger(__name__)


class InMemoryFunctionSchemaRegistry(FunctionSchemaRegistry):
    """
    Read-only schema registry safe for concurrent lookups.
    """

    def __init__(self, schemas: Iterable[FunctionSchema]) -> None:
        """
        Index schemas by function id.

        Args:
            schemas: Function schemas to register.
        Returns:
            None.
        Assumptions:
            Schemas are immutable.
        Raises:
            ValueError: If two schemas share a function id.
        Side Effects:
            None.
        """
        by_id: dict[FunctionId, FunctionSchema] = {}
        for schema in schemas:
            if schema.function_id in by_id:
                raise ValueError(f"duplicate function_id in schemas: {schema.function_id}")
            by_id[schema.function_id] = schema

        ordered = tuple(sorted(by_id.values(), key=lambda schema: schema.function_id.value))
        self._schemas = ordered
        self._by_id: Mapping[FunctionId, FunctionSchema] = MappingProxyType(
            {schema.function_id: schema for schema in ordered}
        )

    @classmethod
    def from_native(
        cls,
        native: TaLibNative,
        *,
        function_ids: Iterable[FunctionId] | None = None,
    ) -> InMemoryFunctionSchemaRegistry:
        """
        Describe native functions and snapshot their schemas.

        Args:
            native: Native library port.
            function_ids: Optional subset to describe; defaults to every native function.
        Returns:
            InMemoryFunctionSchemaRegistry: Populated registry.
        Assumptions:
            Native introspection is deterministic for one library build.
        Raises:
            NativeCallError: If native enumeration or introspection fails.
            ValueError: If native enumeration yields duplicates.
        Side Effects:
            Calls native introspection once per function.
        """
        ids = tuple(native.list_function_ids() if function_ids is None else function_ids)
        registry = cls(native.describe_function(function_id) for function_id in ids)
        log.info(
            "function schema registry built",
            extra={"function_count": len(registry.list_schemas())},
        )
        return registry

    def get_schema(self, function_id: FunctionId) -> FunctionSchema:
        """
        Resolve one schema by function id.

        Args:
            function_id: Native function identifier.
        Returns:
            FunctionSchema: Registered schema.
        Assumptions:
            Registry state is immutable after construction.
        Raises:
            UnknownFunctionError: If the function is not registered.
        Side Effects:
            None.
        """
        schema = self._by_id.get(function_id)
        if schema is None:
            raise UnknownFunctionError(
                function_id=str(function_id),
                details={"registered": len(self._by_id)},
            )
        return schema

    def list_schemas(self) -> tuple[FunctionSchema, ...]:
        return self._schemas

    def list_function_ids(self) -> tuple[FunctionId, ...]:
        return tuple(schema.function_id for schema in self._schemas)
