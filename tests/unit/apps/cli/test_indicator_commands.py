from __future__ import annotations

import json
from pathlib import Path

import pytest

from apps.cli.commands.compute import ComputeIndicatorCli, parse_option_value, read_csv_columns
from apps.cli.commands.describe import DescribeIndicatorCli
from apps.cli.commands.list_indicators import ListIndicatorsCli
from apps.cli.main.main import main
from ta_bridge.contexts.indicators.application.services import TechnicalIndicators
from ta_bridge.contexts.indicators.domain.errors import TaLibNotInstalledError


def _write_csv(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "bars.csv"
    path.write_text(body, encoding="utf-8")
    return path


def _warmup_kernel(call, length: int) -> tuple[int, int]:
    source = call.inputs[0]
    for buffer in call.outputs.values():
        buffer[: length - 1] = source[1:]
    return 1, length - 1


def test_list_indicators_json_filters_by_group(capsys) -> None:
    cli = ListIndicatorsCli()

    exit_code = cli.run(["--group", "Volume Indicators", "--report-format", "json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert [item["name"] for item in payload] == ["obv", "ad", "adosc"]
    assert payload[0]["function_id"] == "OBV"


def test_describe_prints_catalog_entry(capsys) -> None:
    exit_code = DescribeIndicatorCli().run(["stoch"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith("stoch (STOCH): ")
    assert "- option slowk_ma_type = 0" in out


def test_describe_native_schema_uses_library(make_native, capsys) -> None:
    native = make_native()
    cli = DescribeIndicatorCli(indicators_factory=lambda: TechnicalIndicators(native))

    exit_code = cli.run(["atr", "--native", "--report-format", "json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["native"]["inputs"] == [
        {"name": "inPriceHLC", "kind": "price", "roles": ["high", "low", "close"]}
    ]
    assert payload["native"]["opt_inputs"][0]["name"] == "optInTimePeriod"


def test_describe_native_without_library_prints_unavailable(capsys) -> None:
    def _factory() -> TechnicalIndicators:
        raise TaLibNotInstalledError("TA-Lib C library is not installed")

    exit_code = DescribeIndicatorCli(indicators_factory=_factory).run(["sma", "--native"])

    assert exit_code == 1
    assert json.loads(capsys.readouterr().out)["error"]["code"] == "unavailable"


def test_describe_unknown_indicator_exits_2() -> None:
    assert DescribeIndicatorCli().run(["nope"]) == 2


def test_compute_writes_csv_with_blank_warmup(make_native, tmp_path, capsys) -> None:
    """
    Verify text report is CSV with empty cells where the indicator has no value.
    """
    native = make_native(kernels={"SMA": _warmup_kernel})
    cli = ComputeIndicatorCli(indicators_factory=lambda: TechnicalIndicators(native))
    path = _write_csv(tmp_path, "close,volume\n1,10\n2,20\n3,30\n")

    exit_code = cli.run(
        ["sma", "--csv", str(path), "--column", "prices=close", "--option", "period=2"]
    )

    assert exit_code == 0
    assert capsys.readouterr().out == "value\n\n2.0\n3.0\n"
    assert native.last_call.opt_inputs == {0: 2}


def test_compute_json_report_uses_input_named_columns(make_native, tmp_path, capsys) -> None:
    native = make_native()
    cli = ComputeIndicatorCli(indicators_factory=lambda: TechnicalIndicators(native))
    path = _write_csv(tmp_path, "close,volume\n1,10\n2,20\n3,30\n")

    exit_code = cli.run(["obv", "--csv", str(path), "--report-format", "json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"indicator": "obv", "outputs": {"value": [1.0, 2.0, 3.0]}}


def test_compute_validation_error_prints_payload_and_exits_2(make_native, tmp_path, capsys) -> None:
    cli = ComputeIndicatorCli(indicators_factory=lambda: TechnicalIndicators(make_native()))
    path = _write_csv(tmp_path, "prices\n1\n2\n")

    exit_code = cli.run(["sma", "--csv", str(path), "--option", "period=5"])

    assert exit_code == 2
    error = json.loads(capsys.readouterr().out)["error"]
    assert error["code"] == "validation_error"
    assert error["message"] == "period (5) cannot exceed data size (2)"


def test_compute_native_error_exits_1(make_native, tmp_path, capsys) -> None:
    native = make_native(codes={"call": 2})
    cli = ComputeIndicatorCli(indicators_factory=lambda: TechnicalIndicators(native))
    path = _write_csv(tmp_path, "prices\n1\n2\n3\n")

    exit_code = cli.run(["sma", "--csv", str(path), "--option", "period=2"])

    assert exit_code == 1
    assert json.loads(capsys.readouterr().out)["error"]["code"] == "native_error"


def test_compute_missing_column_exits_2(make_native, tmp_path) -> None:
    cli = ComputeIndicatorCli(indicators_factory=lambda: TechnicalIndicators(make_native()))
    path = _write_csv(tmp_path, "close\n1\n")

    assert cli.run(["atr", "--csv", str(path)]) == 2


def test_compute_rejects_malformed_option_argument(make_native, tmp_path) -> None:
    cli = ComputeIndicatorCli(indicators_factory=lambda: TechnicalIndicators(make_native()))
    path = _write_csv(tmp_path, "prices\n1\n")

    assert cli.run(["sma", "--csv", str(path), "--option", "period"]) == 2


def test_read_csv_columns_reports_bad_cells(tmp_path) -> None:
    path = _write_csv(tmp_path, "close\n1\nabc\n")

    with pytest.raises(ValueError, match=r"bars.csv:3: column 'close' is not a number"):
        read_csv_columns(path, {"prices": "close"})


def test_parse_option_value_keeps_integers() -> None:
    assert parse_option_value("14") == 14
    assert isinstance(parse_option_value("14"), int)
    assert parse_option_value("0.5") == 0.5


def test_main_dispatch(capsys) -> None:
    assert main([]) == 2
    assert main(["bogus"]) == 2
    assert main(["list-indicators"]) == 0
    assert "sma" in capsys.readouterr().out
