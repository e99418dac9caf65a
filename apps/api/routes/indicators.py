"""
Indicators API routes.

Related: apps.api.dto.indicators,
  ta_bridge.contexts.indicators.application.services.indicators.technical_indicators
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from apps.api.dto import (
    IndicatorComputeRequest,
    IndicatorComputeResponse,
    IndicatorResponse,
    IndicatorsResponse,
    build_indicator_compute_response,
    build_indicator_response,
    build_indicators_response,
)
from ta_bridge.contexts.indicators.application.services import (
    TechnicalIndicators,
    map_indicator_error,
)
from ta_bridge.contexts.indicators.domain import all_specs
from ta_bridge.contexts.indicators.domain.entities import IndicatorSpec
from ta_bridge.platform.errors import ErrorCode, TaBridgeError

log = logging.getLogger(__name__)


def build_indicators_router(*, indicators: TechnicalIndicators | None) -> APIRouter:
    """
    Build router exposing indicator catalog and compute endpoints.

    Args:
        indicators: Ready facade, or None when the native library is unavailable.
    Returns:
        APIRouter: Router with `GET /indicators`, `GET /indicators/{name}`, and
            `POST /indicators/{name}/compute`.
    Assumptions:
        Catalog endpoints work without the native library; compute answers 503.
    Raises:
        None.
    Side Effects:
        None.
    """
    specs = indicators.list_specs() if indicators is not None else all_specs()
    specs_by_name = {spec.name: spec for spec in specs}
    router = APIRouter(tags=["indicators"])

    def _resolve_spec(name: str) -> IndicatorSpec:
        spec = specs_by_name.get(name.strip().lower())
        if spec is None:
            raise TaBridgeError(
                code=ErrorCode.NOT_FOUND,
                message=f"unknown indicator: {name!r}",
                details={"indicator": name},
            )
        return spec

    @router.get("/indicators", response_model=IndicatorsResponse)
    def get_indicators() -> IndicatorsResponse:
        """
        Return the indicator catalog in declaration order.

        Args:
            None.
        Returns:
            IndicatorsResponse: Catalog payload.
        Assumptions:
            Catalog is immutable after startup.
        Raises:
            None.
        Side Effects:
            None.
        """
        return build_indicators_response(specs=specs)

    @router.get("/indicators/{name}", response_model=IndicatorResponse)
    def get_indicator(name: str) -> IndicatorResponse:
        return build_indicator_response(spec=_resolve_spec(name))

    @router.post("/indicators/{name}/compute", response_model=IndicatorComputeResponse)
    def post_indicator_compute(
        name: str,
        request: IndicatorComputeRequest,
    ) -> IndicatorComputeResponse:
        """
        Compute one indicator over caller-provided series.

        Args:
            name: Catalog indicator name.
            request: Named input series and options.
        Returns:
            IndicatorComputeResponse: Output series keyed by output name.
        Assumptions:
            Request inputs are keyed by catalog input names.
        Raises:
            TaBridgeError: `not_found`, `validation_error`, `native_error`, or
                `unavailable` rendered by shared API error handlers.
        Side Effects:
            Executes one native library call.
        """
        spec = _resolve_spec(name)
        if indicators is None:
            raise TaBridgeError(
                code=ErrorCode.UNAVAILABLE,
                message="TA-Lib C library is not available on this server",
                details={"indicator": spec.name},
            )

        try:
            result = indicators.compute_mapping(spec.name, request.inputs, request.options)
        except Exception as error:
            mapped = map_indicator_error(error)
            if mapped is None:
                raise
            log.info(
                "indicator compute rejected",
                extra={"indicator": spec.name, "code": mapped.code.value},
            )
            raise mapped from error

        return build_indicator_compute_response(spec=spec, result=result)

    return router
