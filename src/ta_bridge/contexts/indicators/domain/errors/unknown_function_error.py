from __future__ import annotations

from collections import OrderedDict
from typing import Any, Mapping


class UnknownFunctionError(LookupError):
    """
    Raised when a function id has no schema in the registry.

    Related: ..entities.function_id, ...application.ports.registry.function_schema_registry
    """

    def __init__(self, *, function_id: str, details: Mapping[str, Any] | None = None) -> None:
        self.function_id = str(function_id)
        self.details: Mapping[str, Any] = OrderedDict(
            [("function", self.function_id), *(details or {}).items()]
        )
        super().__init__(f"unknown function_id: {self.function_id}")
