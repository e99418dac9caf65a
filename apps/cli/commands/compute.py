from __future__ import annotations

import argparse
import csv
import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Sequence

import numpy as np

from apps.cli.wiring.modules import IndicatorsCliWiring
from ta_bridge.contexts.indicators.application.dto import IndicatorOutputs
from ta_bridge.contexts.indicators.application.services import (
    TechnicalIndicators,
    map_indicator_error,
)

logger = logging.getLogger(__name__)

@dataclass(frozen=True, slots=True)
class ComputeCliArgs:
    name: str
    csv_path: Path
    columns: Mapping[str, str]
    options: Mapping[str, int | float]
    report_format: str


class ComputeIndicatorCli:
    """
    Compute one indicator over columns of a CSV file.

    Inputs are read from columns named after the indicator inputs unless
    remapped with `--column input=column`.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        indicators_factory: Callable[[], TechnicalIndicators] | None = None,
    ) -> None:
        self._environ = dict(environ) if environ is not None else None
        self._indicators_factory = indicators_factory

    def run(self, argv: Sequence[str]) -> int:
        ns = _build_parser().parse_args(list(argv))
        try:
            args = _to_args(ns)
        except ValueError as e:
            logger.error("Invalid arguments: %s", e)
            return 2

        try:
            indicators = self._build_indicators()
            spec = indicators.get_spec(args.name)
        except Exception as e:
            return _report_error(e)

        columns = {name: args.columns.get(name, name) for name in spec.inputs}
        try:
            inputs = read_csv_columns(args.csv_path, columns)
        except (OSError, ValueError) as e:
            logger.error("Invalid input file: %s", e)
            return 2

        try:
            result = indicators.compute_mapping(spec.name, inputs, dict(args.options))
        except Exception as e:
            return _report_error(e)

        named = result.as_dict() if isinstance(result, IndicatorOutputs) else {
            spec.outputs[0]: result
        }
        if args.report_format == "json":
            print(json.dumps(_json_payload(spec.name, named), ensure_ascii=False))
        else:
            print(_render_csv(named), end="")
        return 0

    def _build_indicators(self) -> TechnicalIndicators:
        if self._indicators_factory is not None:
            return self._indicators_factory()
        environ = self._environ if self._environ is not None else os.environ
        return IndicatorsCliWiring(environ=environ).technical_indicators()


def _report_error(error: Exception) -> int:
    mapped = map_indicator_error(error)
    if mapped is None:
        raise error
    logger.error("indicator compute failed", extra={"code": mapped.code.value})
    print(json.dumps(mapped.to_payload(), ensure_ascii=False))
    return mapped.exit_code


def read_csv_columns(path: Path, columns: Mapping[str, str]) -> dict[str, np.ndarray]:
    """
    Read selected CSV columns as float64 series.

    Args:
        path: CSV file with a header row.
        columns: Mapping `input name -> column name`.
    Returns:
        dict[str, np.ndarray]: Series keyed by input name.
    Assumptions:
        Cells are decimal numbers or `nan`.
    Raises:
        ValueError: If a column is missing or a cell is not a number.
        FileNotFoundError: If the file does not exist.
    Side Effects:
        Reads the file.
    """
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        header = reader.fieldnames or []
        missing = [column for column in columns.values() if column not in header]
        if missing:
            raise ValueError(f"{path}: missing columns {', '.join(missing)}")

        values: dict[str, list[float]] = {name: [] for name in columns}
        for line_number, row in enumerate(reader, start=2):
            for name, column in columns.items():
                cell = (row.get(column) or "").strip()
                try:
                    values[name].append(float(cell))
                except ValueError as e:
                    raise ValueError(
                        f"{path}:{line_number}: column {column!r} is not a number: {cell!r}"
                    ) from e

    return {name: np.asarray(series, dtype=np.float64) for name, series in values.items()}


def parse_option_value(text: str) -> int | float:
    """
    Parse `--option` value: integers stay int, everything else is float.
    """
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        return float(stripped)


def _to_args(ns: argparse.Namespace) -> ComputeCliArgs:
    name = str(ns.name).strip()
    if not name:
        raise ValueError("indicator name must be non-empty")

    columns: dict[str, str] = {}
    for item in ns.column or []:
        key, sep, value = str(item).partition("=")
        if not sep or not key.strip() or not value.strip():
            raise ValueError(f"--column expects input=column, got {item!r}")
        columns[key.strip()] = value.strip()

    options: dict[str, int | float] = {}
    for item in ns.option or []:
        key, sep, value = str(item).partition("=")
        if not sep or not key.strip():
            raise ValueError(f"--option expects name=value, got {item!r}")
        options[key.strip()] = parse_option_value(value)

    return ComputeCliArgs(
        name=name,
        csv_path=Path(ns.csv),
        columns=columns,
        options=options,
        report_format=str(ns.report_format),
    )


def _json_payload(name: str, named: Mapping[str, np.ndarray]) -> dict[str, object]:
    return {
        "indicator": name,
        "outputs": {
            key: [None if math.isnan(value) else value for value in series.tolist()]
            for key, series in named.items()
        },
    }


def _render_csv(named: Mapping[str, np.ndarray]) -> str:
    lines = [",".join(named)]
    for row in zip(*(series.tolist() for series in named.values())):
        lines.append(",".join("" if math.isnan(value) else repr(value) for value in row))
    return "\n".join(lines) + "\n"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="compute")
    p.add_argument("name", help="Catalog indicator name, e.g. sma")
    p.add_argument("--csv", required=True, help="CSV file with a header row")
    p.add_argument(
        "--column",
        action="append",
        help="Map an indicator input to a CSV column: input=column. Repeatable.",
    )
    p.add_argument(
        "--option",
        action="append",
        help="Indicator option: name=value. Repeatable.",
    )
    p.add_argument(
        "--report-format",
        choices=("text", "json"),
        default="text",
        help="Output format: CSV table (text) or JSON",
    )
    return p
