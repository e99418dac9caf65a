"""
Boundary error contract shared by the HTTP API and the CLI.

Related: ta_bridge.contexts.indicators.application.services.indicator_error_mapping,
  apps/api/common/errors.py, apps/cli/commands/compute.py
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class ErrorCode(str, Enum):
    """
    Machine-readable boundary error codes.
    """

    VALIDATION = "validation_error"
    NOT_FOUND = "not_found"
    NATIVE = "native_error"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal_error"


# Caller mistakes exit 2; library and runtime failures exit 1.
_HTTP_STATUS: Mapping[ErrorCode, int] = {
    ErrorCode.VALIDATION: 422,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.NATIVE: 502,
    ErrorCode.UNAVAILABLE: 503,
    ErrorCode.INTERNAL: 500,
}
_EXIT_CODE: Mapping[ErrorCode, int] = {
    ErrorCode.VALIDATION: 2,
    ErrorCode.NOT_FOUND: 2,
    ErrorCode.NATIVE: 1,
    ErrorCode.UNAVAILABLE: 1,
    ErrorCode.INTERNAL: 1,
}


@dataclass(frozen=True, slots=True)
class TaBridgeError(Exception):
    """
    Error raised at process boundaries with a code, a message, and plain-data details.

    `details` is frozen into JSON-ready values at construction so API and CLI
    renderings of the same error are identical.
    """

    code: ErrorCode
    message: str
    details: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        """
        Coerce the code and snapshot details.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Binding and native errors pass their ordered `details` mappings verbatim.
        Raises:
            ValueError: If `code` is not a known `ErrorCode` or `message` is blank.
        Side Effects:
            Replaces `code` and `details` with normalized values.
        """
        object.__setattr__(self, "code", ErrorCode(self.code))
        if not self.message.strip():
            raise ValueError(f"{self.code.value}: message must be non-empty")
        snapshot = {} if self.details is None else _plain(dict(self.details))
        object.__setattr__(self, "details", snapshot)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self.code]

    @property
    def exit_code(self) -> int:
        return _EXIT_CODE[self.code]

    def to_payload(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": dict(self.details or {}),
            }
        }


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return _plain(value.value)
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in sorted(value.items(), key=_key_text)}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, (bool, int, float, str)) or value is None:
        return value
    if hasattr(value, "item"):
        # numpy scalar
        return _plain(value.item())
    return str(value)


def _key_text(item: tuple[Any, Any]) -> str:
    return str(item[0])
