from __future__ import annotations

from collections import OrderedDict
from typing import Any, Mapping


class BindingError(ValueError):
    """
    Base error for caller input shapes that cannot be bound to a native function.

    Related: ...application.services.input_binder,
      ...application.services.native_call_adapter
    """

    def __init__(self, message: str, *, function_id: str, details: Mapping[str, Any]) -> None:
        """
        Store function id and ordered diagnostic details.

        Args:
            message: Human-readable message.
            function_id: Native function name the call targeted.
            details: Ordered diagnostic fields.
        Returns:
            None.
        Assumptions:
            Detail keys are stable identifiers used by boundary error payloads.
        Raises:
            None.
        Side Effects:
            None.
        """
        self._function_id = str(function_id)
        self._details: Mapping[str, Any] = OrderedDict(
            [("function", self._function_id), *details.items()]
        )
        super().__init__(message)

    @property
    def function_id(self) -> str:
        return self._function_id

    @property
    def details(self) -> Mapping[str, Any]:
        """
        Return ordered details payload for diagnostics and boundary mapping.

        Args:
            None.
        Returns:
            Mapping[str, Any]: Ordered details, always starting with `function`.
        Assumptions:
            Mapping order is preserved for predictable error rendering.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self._details
