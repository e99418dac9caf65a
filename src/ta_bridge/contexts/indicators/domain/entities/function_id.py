from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FunctionId:
    """
    Stable identifier of one native TA-Lib function.

    Related: .function_schema, ...application.ports.registry.function_schema_registry
    """

    value: str

    def __post_init__(self) -> None:
        """
        Normalize and validate the identifier.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Native function names are case-insensitive ASCII tokens such as `ATR`
            or `HT_DCPERIOD`.
        Raises:
            ValueError: If the normalized identifier is empty or contains unsupported symbols.
        Side Effects:
            Normalizes `value` by stripping spaces and converting to uppercase.
        """
        normalized = self.value.strip().upper()
        object.__setattr__(self, "value", normalized)
        if not normalized:
            raise ValueError("FunctionId must be non-empty")

        compact = normalized.replace("_", "")
        if not compact.isascii() or not compact.isalnum():
            raise ValueError("FunctionId may contain only letters, digits, and underscore")

    def __str__(self) -> str:
        return self.value
