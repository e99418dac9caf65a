"""
Map indicator-context errors onto the platform boundary error contract.

Related: ta_bridge.platform.errors.ta_bridge_error, apps/api/common/errors.py
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.errors import (
    BindingError,
    InvalidParameterError,
    NativeCallError,
    TaLibNotInstalledError,
    UnknownFunctionError,
    UnknownIndicatorError,
    UnsupportedParameterKindError,
)
from ta_bridge.platform.errors import ErrorCode, TaBridgeError


def map_indicator_error(error: Exception) -> TaBridgeError | None:
    """
    Convert one indicator error into `TaBridgeError`.

    Args:
        error: Raised exception.
    Returns:
        TaBridgeError | None: Boundary error, or None when the exception is not an
            indicator-context error and must propagate unchanged.
    Assumptions:
        A schema declaring an input kind the binder cannot handle is an
        `internal_error`; other binding failures are caller mistakes.
    Raises:
        None.
    Side Effects:
        None.
    """
    if isinstance(error, TaBridgeError):
        return error
    if isinstance(error, UnsupportedParameterKindError):
        return TaBridgeError(
            code=ErrorCode.INTERNAL,
            message=str(error),
            details={"kind": type(error).__name__, **error.details},
        )
    if isinstance(error, BindingError):
        return TaBridgeError(
            code=ErrorCode.VALIDATION,
            message=str(error),
            details={"kind": type(error).__name__, **error.details},
        )
    if isinstance(error, InvalidParameterError):
        return TaBridgeError(
            code=ErrorCode.VALIDATION,
            message=str(error),
            details={"kind": type(error).__name__},
        )
    if isinstance(error, UnknownFunctionError):
        return TaBridgeError(
            code=ErrorCode.NOT_FOUND,
            message=str(error),
            details={"kind": type(error).__name__, **error.details},
        )
    if isinstance(error, UnknownIndicatorError):
        return TaBridgeError(
            code=ErrorCode.NOT_FOUND,
            message=str(error),
            details={"kind": type(error).__name__},
        )
    if isinstance(error, NativeCallError):
        return TaBridgeError(code=ErrorCode.NATIVE, message=str(error), details=error.details)
    if isinstance(error, TaLibNotInstalledError):
        return TaBridgeError(code=ErrorCode.UNAVAILABLE, message=str(error))
    return None
