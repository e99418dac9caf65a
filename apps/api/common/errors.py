"""
Render TaBridgeError and request-validation failures as `{"error": ...}` JSON.

Related: ta_bridge.platform.errors.ta_bridge_error
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse

from ta_bridge.platform.errors import ErrorCode, TaBridgeError


def register_api_error_handlers(*, app: FastAPI) -> None:
    """
    Install the boundary error handlers on one application.

    Args:
        app: FastAPI application instance.
    Returns:
        None.
    Assumptions:
        Called once by the app factory.
    Raises:
        None.
    Side Effects:
        Mutates the FastAPI exception-handler registry.
    """
    app.add_exception_handler(TaBridgeError, ta_bridge_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)


def ta_bridge_error_handler(_request: Request, error: Exception) -> JSONResponse:
    assert isinstance(error, TaBridgeError)
    return JSONResponse(status_code=error.http_status, content=error.to_payload())


def request_validation_error_handler(_request: Request, error: Exception) -> JSONResponse:
    """
    Convert a request-body validation failure into a `validation_error` response.

    Args:
        _request: Starlette request object (unused).
        error: Raised `RequestValidationError`.
    Returns:
        JSONResponse: HTTP 422 with `details.errors` sorted by path, code, message.
    Assumptions:
        Pydantic error items carry `loc`, `type`, and `msg`.
    Raises:
        None.
    Side Effects:
        None.
    """
    assert isinstance(error, RequestValidationError)
    bridge_error = TaBridgeError(
        code=ErrorCode.VALIDATION,
        message="request validation failed",
        details={"errors": validation_items(error.errors())},
    )
    return ta_bridge_error_handler(_request, bridge_error)


def validation_items(raw_errors: Iterable[Mapping[str, Any]]) -> list[dict[str, str]]:
    """
    Flatten pydantic error items into `{"path", "code", "message"}` rows.

    `loc` parts are joined with dots (`body.inputs.prices.2`) and pydantic's
    `missing` type is reported as `required`.
    """
    items = []
    for raw in raw_errors:
        path = ".".join(str(part) for part in raw.get("loc", ())) or "body"
        raw_type = str(raw.get("type") or "validation_error")
        code = "required" if raw_type == "missing" else raw_type
        items.append({"path": path, "code": code, "message": str(raw.get("msg", ""))})
    return sorted(items, key=lambda item: (item["path"], item["code"], item["message"]))
