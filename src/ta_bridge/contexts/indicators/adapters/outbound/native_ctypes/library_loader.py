"""
Locate and load the TA-Lib shared library.

Related: ta_bridge.platform.config.talib_runtime
"""

from __future__ import annotations

import ctypes
import ctypes.util
import logging
from typing import Callable

from ta_bridge.contexts.indicators.domain.errors import TaLibNotInstalledError
from ta_bridge.platform.config import TaLibRuntimeConfig

log = logging.getLogger(__name__)

_INSTALL_HINT = "TA-Lib C library is not installed. Please install it from https://ta-lib.org/"


def library_candidates(
    config: TaLibRuntimeConfig,
    *,
    find_library: Callable[[str], str | None] = ctypes.util.find_library,
) -> tuple[str, ...]:
    """
    Resolve loadable library names in lookup order.

    Args:
        config: Runtime lookup settings.
        find_library: Name resolver, `ctypes.util.find_library` by default.
    Returns:
        tuple[str, ...]: Explicit path alone when configured, otherwise every
            configured name the resolver found.
    Assumptions:
        An explicit path disables name lookup.
    Raises:
        None.
    Side Effects:
        May spawn the platform linker tools used by `find_library`.
    """
    if config.library_path is not None:
        return (str(config.library_path),)

    candidates: list[str] = []
    for name in config.library_names:
        found = find_library(name)
        if found and found not in candidates:
            candidates.append(found)
    return tuple(candidates)


def load_talib_library(
    config: TaLibRuntimeConfig,
    *,
    loader: Callable[[str], ctypes.CDLL] = ctypes.CDLL,
    find_library: Callable[[str], str | None] = ctypes.util.find_library,
) -> ctypes.CDLL:
    """
    Load the first loadable TA-Lib candidate.

    Args:
        config: Runtime lookup settings.
        loader: Shared-library loader, `ctypes.CDLL` by default.
        find_library: Name resolver, `ctypes.util.find_library` by default.
    Returns:
        ctypes.CDLL: Loaded library handle.
    Assumptions:
        Candidates are tried in order; the first successful load wins.
    Raises:
        TaLibNotInstalledError: If no candidate exists or none loads.
    Side Effects:
        Loads a shared library into the process.
    """
    candidates = library_candidates(config, find_library=find_library)
    failures: list[str] = []
    for candidate in candidates:
        try:
            library = loader(candidate)
        except OSError as error:
            failures.append(f"{candidate}: {error}")
            continue
        log.info("talib library loaded", extra={"library": candidate})
        return library

    tried = "; ".join(failures) if failures else ", ".join(config.library_names)
    raise TaLibNotInstalledError(f"{_INSTALL_HINT} (tried: {tried})")
