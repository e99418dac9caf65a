from __future__ import annotations

from collections import OrderedDict

from .binding_error import BindingError


class InputLengthMismatchError(BindingError):
    """
    Raised when a bound array is not as long as the call input length.
    """

    def __init__(self, *, function_id: str, label: str, expected: int, actual: int) -> None:
        super().__init__(
            f"{label} of {function_id} has length {actual}, expected {expected}",
            function_id=function_id,
            details=OrderedDict([("input", label), ("expected", expected), ("actual", actual)]),
        )
