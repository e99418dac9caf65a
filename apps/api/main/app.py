"""
FastAPI application factory for the ta-bridge API.
"""

from __future__ import annotations

import os
from typing import Mapping

from fastapi import FastAPI

from apps.api.common import register_api_error_handlers
from apps.api.routes import build_indicators_router
from apps.api.wiring.modules import build_technical_indicators
from ta_bridge import __version__
from ta_bridge.contexts.indicators.application.services import TechnicalIndicators


def create_app(
    *,
    environ: Mapping[str, str] | None = None,
    indicators: TechnicalIndicators | None = None,
) -> FastAPI:
    """
    Build FastAPI app with the indicators module wired at startup.

    Related: apps.api.routes.indicators,
      apps.api.wiring.modules.indicators

    Args:
        environ: Optional environment mapping override.
        indicators: Optional prebuilt facade; built from `environ` when omitted.
    Returns:
        FastAPI: Application instance with registered routers.
    Assumptions:
        Without TA-Lib the catalog is still served and compute answers 503.
    Raises:
        FileNotFoundError: If an explicit config path is missing.
        ValueError: If config parsing/validation fails.
    Side Effects:
        Reads YAML config and loads the TA-Lib shared library.
    """
    if indicators is None:
        effective_environ = os.environ if environ is None else environ
        indicators = build_technical_indicators(environ=effective_environ)

    app = FastAPI(
        title="ta-bridge API",
        version=__version__,
    )
    register_api_error_handlers(app=app)
    app.include_router(build_indicators_router(indicators=indicators))
    return app

