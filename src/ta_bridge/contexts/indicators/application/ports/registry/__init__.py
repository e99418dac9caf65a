from .function_schema_registry import FunctionSchemaRegistry

__all__ = ["FunctionSchemaRegistry"]
