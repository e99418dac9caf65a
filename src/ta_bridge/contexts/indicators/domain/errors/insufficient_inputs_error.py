from __future__ import annotations

from collections import OrderedDict

from .binding_error import BindingError


class InsufficientInputsError(BindingError):
    """
    Raised when the caller supplied fewer raw arrays than a parameter needs.
    """

    def __init__(
        self,
        *,
        function_id: str,
        param_name: str,
        required: int,
        available: int,
        position: int,
        roles: tuple[str, ...] = (),
    ) -> None:
        if roles:
            message = (
                f"{function_id} requires {required} price arrays ({', '.join(roles)}) "
                f"for {param_name}, but only {available} provided at position {position}"
            )
        else:
            message = (
                f"not enough input arrays for {function_id}: expected array for "
                f"{param_name} at index {position}, but only {position + available} provided"
            )
        super().__init__(
            message,
            function_id=function_id,
            details=OrderedDict(
                [
                    ("param", param_name),
                    ("roles", list(roles)),
                    ("required", required),
                    ("available", available),
                    ("position", position),
                ]
            ),
        )
