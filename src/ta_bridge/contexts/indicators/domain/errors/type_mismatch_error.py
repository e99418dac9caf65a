from __future__ import annotations

from collections import OrderedDict

from .binding_error import BindingError


class TypeMismatchError(BindingError):
    """
    Raised when a bound value is not a one-dimensional numeric sequence.
    """

    def __init__(self, *, function_id: str, label: str, got: str) -> None:
        super().__init__(
            f"expected numeric 1D sequence for {label} of {function_id}, got {got}",
            function_id=function_id,
            details=OrderedDict([("input", label), ("got", got)]),
        )
