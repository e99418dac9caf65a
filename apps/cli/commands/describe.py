from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Any, Callable, Mapping, Sequence

from apps.cli.wiring.modules import IndicatorsCliWiring
from ta_bridge.contexts.indicators.application.services import (
    TechnicalIndicators,
    map_indicator_error,
)
from ta_bridge.contexts.indicators.domain import all_specs
from ta_bridge.contexts.indicators.domain.entities import FunctionSchema, IndicatorSpec

log = logging.getLogger(__name__)


class DescribeIndicatorCli:
    """
    Print one catalog entry, optionally with the native schema read from TA-Lib.
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
        name = str(ns.name).strip().lower()
        spec = next((item for item in all_specs() if item.name == name), None)
        if spec is None:
            log.error("unknown indicator: %s", ns.name)
            return 2

        payload: dict[str, Any] = {"indicator": _spec_payload(spec)}
        if ns.native:
            try:
                indicators = self._build_indicators()
                payload["native"] = _schema_payload(indicators.get_schema(spec))
            except Exception as e:
                mapped = map_indicator_error(e)
                if mapped is None:
                    raise
                print(json.dumps(mapped.to_payload(), ensure_ascii=False))
                return mapped.exit_code

        if ns.report_format == "json":
            print(json.dumps(payload, ensure_ascii=False))
        else:
            print(_render_text(payload))
        return 0

    def _build_indicators(self) -> TechnicalIndicators:
        if self._indicators_factory is not None:
            return self._indicators_factory()
        environ = self._environ if self._environ is not None else os.environ
        return IndicatorsCliWiring(environ=environ).technical_indicators()


def _spec_payload(spec: IndicatorSpec) -> dict[str, Any]:
    return {
        "name": spec.name,
        "function_id": str(spec.function_id),
        "title": spec.title,
        "group": spec.group,
        "inputs": list(spec.inputs),
        "options": {option.name: option.default for option in spec.options},
        "outputs": list(spec.outputs),
    }


def _schema_payload(schema: FunctionSchema) -> dict[str, Any]:
    return {
        "function_id": str(schema.function_id),
        "inputs": [
            {
                "name": param.name,
                "kind": param.kind.value,
                "roles": [role.value for role in param.roles],
            }
            for param in schema.inputs
        ],
        "opt_inputs": [
            {"name": opt.name, "kind": opt.kind.value, "default": opt.default}
            for opt in schema.opt_inputs
        ],
        "outputs": [
            {"name": output.name, "kind": output.kind.value} for output in schema.outputs
        ],
    }


def _render_text(payload: Mapping[str, Any]) -> str:
    indicator = payload["indicator"]
    lines = [
        f"{indicator['name']} ({indicator['function_id']}): {indicator['title']}",
        f"- group: {indicator['group']}",
        f"- inputs: {', '.join(indicator['inputs'])}",
        f"- outputs: {', '.join(indicator['outputs'])}",
    ]
    for name, default in indicator["options"].items():
        lines.append(f"- option {name} = {default}")

    native = payload.get("native")
    if native is not None:
        lines.append("native schema:")
        for param in native["inputs"]:
            roles = f" [{', '.join(param['roles'])}]" if param["roles"] else ""
            lines.append(f"- input {param['name']}: {param['kind']}{roles}")
        for opt in native["opt_inputs"]:
            lines.append(f"- opt input {opt['name']}: {opt['kind']} = {opt['default']}")
        for output in native["outputs"]:
            lines.append(f"- output {output['name']}: {output['kind']}")
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="describe")
    p.add_argument("name", help="Catalog indicator name, e.g. bbands")
    p.add_argument(
        "--native",
        action="store_true",
        help="Also read the native function schema from TA-Lib",
    )
    p.add_argument(
        "--report-format",
        choices=("text", "json"),
        default="text",
        help="Output format",
    )
    return p
