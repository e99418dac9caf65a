from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OptInputKind(str, Enum):
    """
    Scalar kinds of optional native inputs.
    """

    INTEGER = "integer"
    REAL = "real"


@dataclass(frozen=True, slots=True)
class OptInputDef:
    """
    Declaration of one optional native input (e.g. `optInTimePeriod`).

    Related: .function_schema
    """

    name: str
    kind: OptInputKind
    default: float | int
    hard_min: float | int | None = None
    hard_max: float | int | None = None

    def __post_init__(self) -> None:
        """
        Validate bounds and default.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Bounds come from native range metadata and may be absent for list types.
        Raises:
            ValueError: If name is blank or bounds are inconsistent.
        Side Effects:
            Normalizes `name` by stripping spaces.
        """
        normalized_name = self.name.strip()
        object.__setattr__(self, "name", normalized_name)
        if not normalized_name:
            raise ValueError("OptInputDef requires a non-empty name")
        if (
            self.hard_min is not None
            and self.hard_max is not None
            and self.hard_min > self.hard_max
        ):
            raise ValueError(f"OptInputDef {normalized_name!r} requires hard_min <= hard_max")
