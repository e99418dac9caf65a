from .in_memory_function_schema_registry import InMemoryFunctionSchemaRegistry

__all__ = ["InMemoryFunctionSchemaRegistry"]
