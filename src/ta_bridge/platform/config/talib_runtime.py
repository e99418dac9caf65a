"""
Runtime config loader for the TA-Lib native library binding.

Related: ta_bridge.contexts.indicators.adapters.outbound.native_ctypes.library_loader,
  ta_bridge.contexts.indicators.adapters.outbound.native_ctypes.bootstrap
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

_ENV_NAME_KEY = "TA_BRIDGE_ENV"
_CONFIG_PATH_KEY = "TA_BRIDGE_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")

_LIBRARY_PATH_ENV_KEYS = ("TA_BRIDGE_TALIB_LIBRARY", "TALIB_LIBRARY_PATH")
_LIBRARY_NAMES_ENV_KEYS = ("TA_BRIDGE_TALIB_LIBRARY_NAMES",)

_DEFAULT_LIBRARY_NAMES = ("ta-lib", "ta_lib")


@dataclass(frozen=True, slots=True)
class TaLibRuntimeConfig:
    """
    Immutable runtime config for locating the TA-Lib shared library.

    Related: ta_bridge.contexts.indicators.adapters.outbound.native_ctypes.library_loader
    """

    library_path: Path | None = None
    library_names: tuple[str, ...] = _DEFAULT_LIBRARY_NAMES

    def __post_init__(self) -> None:
        """
        Validate library lookup settings.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            At least one lookup strategy (explicit path or names) is configured.
        Raises:
            ValueError: If path is blank or names are empty or blank.
        Side Effects:
            Normalizes `library_path` to `Path` and strips names.
        """
        if self.library_path is not None:
            if not str(self.library_path).strip():
                raise ValueError("library_path must be a non-empty path when provided")
            object.__setattr__(self, "library_path", Path(self.library_path))

        names = tuple(str(name).strip() for name in self.library_names)
        if len(names) == 0 or any(not name for name in names):
            raise ValueError(f"library_names must be non-empty strings, got {self.library_names!r}")
        object.__setattr__(self, "library_names", names)


def load_talib_runtime_config(*, environ: Mapping[str, str]) -> TaLibRuntimeConfig:
    """
    Load TA-Lib runtime config from YAML and env overrides.

    Args:
        environ: Environment mapping used to resolve env and override values.
    Returns:
        TaLibRuntimeConfig: Validated runtime settings.
    Assumptions:
        Optional `native.talib` section lives in `ta_bridge.yaml`; the env-derived
        file may be absent, an explicit `TA_BRIDGE_CONFIG` must exist.
    Raises:
        FileNotFoundError: If the explicit config path does not exist.
        ValueError: If YAML or environment values are invalid.
    Side Effects:
        Reads at most one YAML file from disk.
    """
    config_path, required = _resolve_config_path(environ=environ)
    file_payload = _load_optional_talib_payload(path=config_path, required=required)

    library_path = _resolve_optional_path_setting(
        environ=environ,
        env_keys=_LIBRARY_PATH_ENV_KEYS,
        payload=file_payload,
        payload_key="library_path",
    )
    library_names = _resolve_names_setting(
        environ=environ,
        env_keys=_LIBRARY_NAMES_ENV_KEYS,
        payload=file_payload,
        payload_key="library_names",
        default=_DEFAULT_LIBRARY_NAMES,
    )
    return TaLibRuntimeConfig(library_path=library_path, library_names=library_names)


def _resolve_config_path(*, environ: Mapping[str, str]) -> tuple[Path, bool]:
    """
    Resolve YAML path using explicit override or `TA_BRIDGE_ENV`.

    Args:
        environ: Environment mapping.
    Returns:
        tuple[Path, bool]: Config path and whether the file must exist.
    Assumptions:
        `TA_BRIDGE_CONFIG` has priority over env-derived path.
    Raises:
        ValueError: If env value is invalid.
    Side Effects:
        None.
    """
    override = environ.get(_CONFIG_PATH_KEY, "").strip()
    if override:
        return Path(override), True

    env_name = _resolve_env_name(environ=environ)
    return Path("configs") / env_name / "ta_bridge.yaml", False


def _resolve_env_name(*, environ: Mapping[str, str]) -> str:
    raw_env = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env not in _ALLOWED_ENVS:
        raise ValueError(
            f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env!r}"
        )
    return raw_env


def _load_optional_talib_payload(*, path: Path, required: bool) -> Mapping[str, Any]:
    """
    Load optional `native.talib` mapping from YAML.

    Args:
        path: Config path.
        required: Whether a missing file is an error.
    Returns:
        Mapping[str, Any]: `native.talib` mapping, or empty mapping.
    Assumptions:
        Unknown keys are ignored by this loader.
    Raises:
        FileNotFoundError: If a required YAML path does not exist.
        ValueError: If YAML structure is invalid.
    Side Effects:
        Reads one UTF-8 file from disk when present.
    """
    if not path.exists():
        if required:
            raise FileNotFoundError(f"ta_bridge config not found: {path}")
        return {}
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("ta_bridge config must be a mapping at top-level")

    native_map = raw.get("native")
    if native_map is None:
        return {}
    if not isinstance(native_map, dict):
        raise ValueError("native section must be a mapping")

    talib_map = native_map.get("talib")
    if talib_map is None:
        return {}
    if not isinstance(talib_map, dict):
        raise ValueError("native.talib section must be a mapping")
    return talib_map


def _resolve_optional_path_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
) -> Path | None:
    """
    Resolve optional path setting from env -> payload -> None precedence.

    Args:
        environ: Environment mapping.
        env_keys: Candidate env variable names by priority.
        payload: Parsed YAML subsection.
        payload_key: YAML key name.
    Returns:
        Path | None: Resolved path, or None when unset everywhere.
    Assumptions:
        Relative paths are resolved by the dynamic loader.
    Raises:
        ValueError: If YAML value is blank or non-string.
    Side Effects:
        None.
    """
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return Path(raw)

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return None
    if not isinstance(payload_value, str):
        raise ValueError(
            f"expected string for native.talib.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    normalized = payload_value.strip()
    if not normalized:
        raise ValueError(f"native.talib.{payload_key} must be non-empty")
    return Path(normalized)


def _resolve_names_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: tuple[str, ...],
) -> tuple[str, ...]:
    """
    Resolve library-name list from env -> payload -> default precedence.

    Args:
        environ: Environment mapping.
        env_keys: Candidate env variable names by priority; values are comma-separated.
        payload: Parsed YAML subsection.
        payload_key: YAML key name.
        default: Fallback names.
    Returns:
        tuple[str, ...]: Non-empty names in lookup order.
    Assumptions:
        Empty items in comma-separated env values are ignored.
    Raises:
        ValueError: If YAML value is not a list of strings.
    Side Effects:
        None.
    """
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return tuple(item.strip() for item in raw.split(",") if item.strip())

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return default
    if not isinstance(payload_value, list) or not all(
        isinstance(item, str) for item in payload_value
    ):
        raise ValueError(f"native.talib.{payload_key} must be a list of strings")
    return tuple(payload_value)


__all__ = [
    "TaLibRuntimeConfig",
    "load_talib_runtime_config",
]
