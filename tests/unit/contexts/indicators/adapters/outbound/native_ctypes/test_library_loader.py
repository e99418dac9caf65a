from __future__ import annotations

from pathlib import Path

import pytest

from ta_bridge.contexts.indicators.adapters.outbound.native_ctypes.library_loader import (
    library_candidates,
    load_talib_library,
)
from ta_bridge.contexts.indicators.adapters.outbound.native_ctypes.structs import (
    roles_from_flags,
)
from ta_bridge.contexts.indicators.domain.entities import PriceRole
from ta_bridge.contexts.indicators.domain.errors import TaLibNotInstalledError
from ta_bridge.platform.config import TaLibRuntimeConfig


def _finder(found: dict[str, str]):
    return lambda name: found.get(name)


def test_explicit_path_disables_name_lookup() -> None:
    config = TaLibRuntimeConfig(library_path=Path("/opt/ta-lib/libta-lib.so"))

    candidates = library_candidates(config, find_library=_finder({"ta-lib": "libta-lib.so"}))

    assert candidates == ("/opt/ta-lib/libta-lib.so",)


def test_names_resolve_in_configured_order_without_duplicates() -> None:
    config = TaLibRuntimeConfig(library_names=("ta-lib", "ta_lib", "ta"))
    finder = _finder({"ta-lib": "libta-lib.so.0", "ta_lib": "libta_lib.so", "ta": "libta-lib.so.0"})

    assert library_candidates(config, find_library=finder) == ("libta-lib.so.0", "libta_lib.so")


def test_first_loadable_candidate_wins() -> None:
    """
    Verify loader falls through failing candidates and returns the first success.
    """
    attempts: list[str] = []
    sentinel = object()

    def _loader(name: str):
        attempts.append(name)
        if name == "libta-lib.so":
            raise OSError("cannot open shared object file")
        return sentinel

    config = TaLibRuntimeConfig()
    finder = _finder({"ta-lib": "libta-lib.so", "ta_lib": "libta_lib.so"})

    library = load_talib_library(config, loader=_loader, find_library=finder)

    assert library is sentinel
    assert attempts == ["libta-lib.so", "libta_lib.so"]


def test_missing_library_raises_install_hint() -> None:
    config = TaLibRuntimeConfig()

    with pytest.raises(TaLibNotInstalledError) as error_info:
        load_talib_library(config, loader=lambda name: None, find_library=_finder({}))

    message = str(error_info.value)
    assert message.startswith("TA-Lib C library is not installed.")
    assert "https://ta-lib.org/" in message
    assert "ta-lib, ta_lib" in message


def test_load_failures_are_listed_in_error() -> None:
    def _loader(name: str):
        raise OSError("bad ELF header")

    config = TaLibRuntimeConfig(library_path=Path("/tmp/libta-lib.so"))

    with pytest.raises(TaLibNotInstalledError, match="bad ELF header"):
        load_talib_library(config, loader=_loader)


def test_price_flags_decode_into_slot_ordered_roles() -> None:
    """
    Verify native price flag bits map onto roles in fixed slot order.
    """
    assert roles_from_flags(0b001110) == (PriceRole.HIGH, PriceRole.LOW, PriceRole.CLOSE)
    assert roles_from_flags(0b010000) == (PriceRole.VOLUME,)
    assert roles_from_flags(0b111111) == tuple(PriceRole)
    assert roles_from_flags(0) == ()
