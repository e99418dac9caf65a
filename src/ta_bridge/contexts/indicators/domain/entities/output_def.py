from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputKind(str, Enum):
    """
    Element kinds of native output buffers.
    """

    REAL = "real"
    INTEGER = "integer"


@dataclass(frozen=True, slots=True)
class OutputDef:
    """
    Declaration of one native output buffer.
    """

    name: str
    kind: OutputKind

    def __post_init__(self) -> None:
        normalized_name = self.name.strip()
        object.__setattr__(self, "name", normalized_name)
        if not normalized_name:
            raise ValueError("OutputDef requires a non-empty name")
