from __future__ import annotations

from collections import OrderedDict

from .binding_error import BindingError


class MissingBundleElementError(BindingError):
    """
    Raised when a price bundle lacks the array for one of its roles.
    """

    def __init__(self, *, function_id: str, role: str, position: int) -> None:
        super().__init__(
            f"missing price array for {role} at index {position} of {function_id}",
            function_id=function_id,
            details=OrderedDict([("role", role), ("position", position)]),
        )
