from __future__ import annotations

from collections import OrderedDict

from .binding_error import BindingError


class EmptyInputError(BindingError):
    """
    Raised when the computed input length of a call is zero.
    """

    def __init__(self, *, function_id: str) -> None:
        super().__init__(
            f"{function_id} received empty input arrays",
            function_id=function_id,
            details=OrderedDict([("input_length", 0)]),
        )
