from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ta_bridge.contexts.indicators.adapters.outbound import open_technical_indicators
from ta_bridge.contexts.indicators.application.services import TechnicalIndicators
from ta_bridge.platform.config import load_talib_runtime_config


@dataclass(frozen=True, slots=True)
class IndicatorsCliWiring:
    """
    Composition root for indicator CLI commands.

    Env is the source of truth for native library lookup.
    """

    environ: Mapping[str, str]

    def technical_indicators(self) -> TechnicalIndicators:
        """
        Build a ready facade over the installed TA-Lib library.

        Args:
            None.
        Returns:
            TechnicalIndicators: Facade backed by the ctypes native adapter.
        Assumptions:
            Config file resolution follows `TA_BRIDGE_CONFIG` / `TA_BRIDGE_ENV`.
        Raises:
            TaLibNotInstalledError: If the shared library cannot be loaded.
            FileNotFoundError: If an explicit config path is missing.
            ValueError: If config is invalid.
        Side Effects:
            Reads YAML config and loads the shared library.
        """
        config = load_talib_runtime_config(environ=self.environ)
        return open_technical_indicators(config)
