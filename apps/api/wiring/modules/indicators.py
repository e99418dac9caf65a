"""
Composition helpers for indicators API module.
"""

from __future__ import annotations

import logging
from typing import Mapping

from ta_bridge.contexts.indicators.adapters.outbound import open_technical_indicators
from ta_bridge.contexts.indicators.application.services import TechnicalIndicators
from ta_bridge.contexts.indicators.domain.errors import TaLibNotInstalledError
from ta_bridge.platform.config import load_talib_runtime_config

log = logging.getLogger(__name__)


def build_technical_indicators(*, environ: Mapping[str, str]) -> TechnicalIndicators | None:
    """
    Build indicators facade from environment-aware runtime config.

    Args:
        environ: Process environment mapping.
    Returns:
        TechnicalIndicators | None: Ready facade, or None when TA-Lib is not installed.
    Assumptions:
        A missing native library degrades compute endpoints instead of failing startup.
    Raises:
        FileNotFoundError: If an explicit config path does not exist.
        ValueError: If environment/config is invalid.
        NativeCallError: If TA-Lib loads but fails to initialize.
    Side Effects:
        Reads YAML config and loads the TA-Lib shared library.
    """
    config = load_talib_runtime_config(environ=environ)
    try:
        return open_technical_indicators(config)
    except TaLibNotInstalledError as error:
        log.warning(
            "talib library unavailable, compute endpoints disabled",
            extra={"reason": str(error)},
        )
        return None
