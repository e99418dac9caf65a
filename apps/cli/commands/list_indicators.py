from __future__ import annotations

import argparse
import json
from typing import Sequence

from ta_bridge.contexts.indicators.domain import all_specs


class ListIndicatorsCli:
    """
    Print the indicator catalog. Works without the native library.
    """

    def run(self, argv: Sequence[str]) -> int:
        ns = _build_parser().parse_args(list(argv))
        specs = all_specs()
        if ns.group:
            specs = tuple(spec for spec in specs if spec.group == ns.group)

        if ns.report_format == "json":
            payload = [
                {
                    "name": spec.name,
                    "function_id": str(spec.function_id),
                    "group": spec.group,
                    "title": spec.title,
                }
                for spec in specs
            ]
            print(json.dumps(payload, ensure_ascii=False))
            return 0

        for spec in specs:
            print(f"{spec.name:<24} {str(spec.function_id):<20} {spec.title}")
        return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="list-indicators")
    p.add_argument("--group", default=None, help="Only list indicators of this group")
    p.add_argument(
        "--report-format",
        choices=("text", "json"),
        default="text",
        help="Output format",
    )
    return p
