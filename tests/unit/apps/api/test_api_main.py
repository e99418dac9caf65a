from __future__ import annotations

from typing import Any

from apps.api.main import main as api_main


def test_flags_override_inherited_environment() -> None:
    args = api_main._build_parser().parse_args(
        ["--config", "/etc/ta_bridge.yaml", "--talib-library", "/opt/libta-lib.so"]
    )
    inherited = {"TA_BRIDGE_CONFIG": "configs/dev/ta_bridge.yaml", "HOME": "/root"}

    environ = api_main.server_environ(args, inherited)

    assert environ["TA_BRIDGE_CONFIG"] == "/etc/ta_bridge.yaml"
    assert environ["TA_BRIDGE_TALIB_LIBRARY"] == "/opt/libta-lib.so"
    assert environ["HOME"] == "/root"
    assert inherited["TA_BRIDGE_CONFIG"] == "configs/dev/ta_bridge.yaml"


def test_without_flags_environment_is_copied_unchanged() -> None:
    args = api_main._build_parser().parse_args([])

    assert api_main.server_environ(args, {"TA_BRIDGE_ENV": "test"}) == {"TA_BRIDGE_ENV": "test"}


def test_main_builds_app_and_runs_uvicorn(monkeypatch) -> None:
    captured: dict[str, Any] = {}
    sentinel_app = object()

    def _create_app(*, environ):
        captured["environ"] = environ
        return sentinel_app

    def _run(app, **kwargs):
        captured["app"] = app
        captured["kwargs"] = kwargs

    monkeypatch.setattr(api_main, "create_app", _create_app)
    monkeypatch.setattr(api_main.uvicorn, "run", _run)

    exit_code = api_main.main(["--port", "9001", "--config", "custom.yaml"])

    assert exit_code == 0
    assert captured["app"] is sentinel_app
    assert captured["kwargs"] == {"host": "127.0.0.1", "port": 9001, "log_level": "info"}
    assert captured["environ"]["TA_BRIDGE_CONFIG"] == "custom.yaml"
