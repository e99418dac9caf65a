from __future__ import annotations

import numpy as np
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.api.common import register_api_error_handlers
from apps.api.routes import build_indicators_router
from ta_bridge.contexts.indicators.application.services import TechnicalIndicators
from ta_bridge.contexts.indicators.domain import all_specs


def _client(indicators: TechnicalIndicators | None) -> TestClient:
    """
    Build test client with indicators router and shared error handlers.

    Args:
        indicators: Facade under test, or None for the unavailable mode.
    Returns:
        TestClient: Client bound to a fresh FastAPI app.
    Assumptions:
        Router wiring mirrors `apps.api.main.app.create_app`.
    Raises:
        None.
    Side Effects:
        None.
    """
    app = FastAPI()
    register_api_error_handlers(app=app)
    app.include_router(build_indicators_router(indicators=indicators))
    return TestClient(app)


def _warmup_kernel(call, length: int) -> tuple[int, int]:
    source = call.inputs[0]
    for buffer in call.outputs.values():
        buffer[: length - 2] = source[2:] * 2.0
    return 2, length - 2


def test_get_indicators_lists_catalog_in_order(make_native) -> None:
    client = _client(TechnicalIndicators(make_native()))

    response = client.get("/indicators")

    assert response.status_code == 200
    payload = response.json()
    assert payload["schema_version"] == 1
    assert [item["name"] for item in payload["items"]] == [spec.name for spec in all_specs()]


def test_get_indicator_describes_options(make_native) -> None:
    client = _client(TechnicalIndicators(make_native()))

    response = client.get("/indicators/BBANDS")

    assert response.status_code == 200
    payload = response.json()
    assert payload["function_id"] == "BBANDS"
    assert payload["outputs"] == ["upper_band", "middle_band", "lower_band"]
    options = {option["name"]: option for option in payload["options"]}
    assert options["period"]["default"] == 5
    assert options["period"]["bounded_by_data"] is True
    assert options["ma_type"]["hard_max"] == 8
    assert options["nbdev_up"]["native_names"] == ["optInNbDevUp"]


def test_unknown_indicator_returns_not_found_payload(make_native) -> None:
    client = _client(TechnicalIndicators(make_native()))

    response = client.get("/indicators/nope")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "not_found"


def test_compute_returns_nulls_for_warmup_positions(make_native) -> None:
    """
    Verify NaN outputs are rendered as JSON nulls keyed by catalog output name.
    """
    client = _client(TechnicalIndicators(make_native(kernels={"SMA": _warmup_kernel})))

    response = client.post(
        "/indicators/sma/compute",
        json={"inputs": {"prices": [1, 2, 3, 4, 5]}, "options": {"period": 3}},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["indicator"] == "sma"
    assert payload["length"] == 5
    assert payload["outputs"] == {"value": [None, None, 6.0, 8.0, 10.0]}


def test_compute_multi_output_indicator(make_native) -> None:
    client = _client(TechnicalIndicators(make_native()))

    response = client.post(
        "/indicators/bbands/compute",
        json={"inputs": {"prices": [1.0, 2.0, 3.0, 4.0, 5.0]}},
    )

    assert response.status_code == 200
    assert list(response.json()["outputs"]) == ["upper_band", "middle_band", "lower_band"]


def test_compute_validation_errors_return_422(make_native) -> None:
    native = make_native()
    client = _client(TechnicalIndicators(native))

    response = client.post(
        "/indicators/sma/compute",
        json={"inputs": {"prices": [1.0, 2.0]}, "options": {"period": 5}},
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "validation_error"
    assert error["message"] == "period (5) cannot exceed data size (2)"
    assert error["details"]["kind"] == "InvalidParameterError"
    assert native.calls == []


def test_compute_missing_inputs_return_422(make_native) -> None:
    client = _client(TechnicalIndicators(make_native()))

    response = client.post(
        "/indicators/atr/compute",
        json={"inputs": {"high": [2.0, 3.0], "low": [1.0, 2.0]}},
    )

    assert response.status_code == 422
    assert "missing: close" in response.json()["error"]["message"]


def test_native_failure_returns_502(make_native) -> None:
    client = _client(TechnicalIndicators(make_native(codes={"call": 2})))

    response = client.post(
        "/indicators/sma/compute",
        json={"inputs": {"prices": [1.0, 2.0, 3.0]}, "options": {"period": 2}},
    )

    assert response.status_code == 502
    error = response.json()["error"]
    assert error["code"] == "native_error"
    assert error["details"]["name"] == "BAD_PARAM"
    assert error["details"]["step"] == "TA_CallFunc"


def test_malformed_body_returns_sorted_validation_errors(make_native) -> None:
    client = _client(TechnicalIndicators(make_native()))

    response = client.post("/indicators/sma/compute", json={"options": {"period": 3}})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "validation_error"
    assert error["details"]["errors"][0]["path"] == "body.inputs"
    assert error["details"]["errors"][0]["code"] == "required"


def test_unavailable_library_serves_catalog_and_rejects_compute() -> None:
    """
    Verify the service degrades to 503 for compute when TA-Lib is missing.
    """
    client = _client(None)

    listing = client.get("/indicators")
    response = client.post(
        "/indicators/sma/compute",
        json={"inputs": {"prices": [1.0, 2.0, 3.0]}},
    )

    assert listing.status_code == 200
    assert response.status_code == 503
    assert response.json()["error"]["code"] == "unavailable"
