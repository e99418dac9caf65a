from __future__ import annotations

from collections import OrderedDict
from typing import Any, Mapping

from ..entities.native_ret_code import NativeRetCode


class NativeCallError(RuntimeError):
    """
    Raised when a native entry point returns a nonzero code.

    Native failures are deterministic for identical inputs and are never retried.

    Related: ..entities.native_ret_code, ...application.services.native_call_adapter
    """

    def __init__(self, *, function_id: str, code: int, step: str) -> None:
        """
        Build message and details from the raw native code.

        Args:
            function_id: Native function the call targeted.
            code: Raw return code.
            step: Native step that failed, e.g. `TA_CallFunc`.
        Returns:
            None.
        Assumptions:
            Unknown codes collapse to `UNKNOWN_ERR` or `INTERNAL_ERROR`.
        Raises:
            None.
        Side Effects:
            None.
        """
        self.function_id = str(function_id)
        self.code = int(code)
        self.ret_code = NativeRetCode.from_code(self.code)
        self.step = step
        self._details: Mapping[str, Any] = OrderedDict(
            [
                ("function", self.function_id),
                ("step", step),
                ("code", self.code),
                ("name", self.ret_code.name),
            ]
        )
        super().__init__(
            f"{self.function_id}: {step} failed with TA_{self.ret_code.name} ({self.code})"
        )

    @property
    def details(self) -> Mapping[str, Any]:
        return self._details


def check_return_code(code: int, *, function_id: str, step: str) -> None:
    """
    Raise `NativeCallError` for any nonzero native return code.

    Args:
        code: Raw return code.
        function_id: Native function the call targeted.
        step: Native step name for diagnostics.
    Returns:
        None.
    Assumptions:
        Zero means success for every TA-Lib entry point.
    Raises:
        NativeCallError: If `code` is nonzero.
    Side Effects:
        None.
    """
    if code != NativeRetCode.SUCCESS:
        raise NativeCallError(function_id=function_id, code=code, step=step)
