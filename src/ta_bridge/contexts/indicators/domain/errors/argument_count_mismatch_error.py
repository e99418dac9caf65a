from __future__ import annotations

from collections import OrderedDict

from .binding_error import BindingError


class ArgumentCountMismatchError(BindingError):
    """
    Raised when the caller supplied more raw arrays than the schema consumes.
    """

    def __init__(self, *, function_id: str, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"{function_id} expected {expected} input arrays but received {received}",
            function_id=function_id,
            details=OrderedDict([("expected", expected), ("received", received)]),
        )
