from __future__ import annotations

from collections import OrderedDict

from .binding_error import BindingError


class UnsupportedParameterKindError(BindingError):
    """
    Raised when a schema declares an input kind the binder does not know.

    Signals a defect in the schema/adapter pairing, never a caller mistake.
    """

    def __init__(self, *, function_id: str, param_name: str, kind: object) -> None:
        kind_value = getattr(kind, "value", kind)
        super().__init__(
            f"unknown input type {kind_value!r} for {param_name} of {function_id}",
            function_id=function_id,
            details=OrderedDict([("param", param_name), ("param_kind", str(kind_value))]),
        )
