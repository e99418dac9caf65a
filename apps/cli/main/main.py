from __future__ import annotations

import logging
import sys

from apps.cli.commands.compute import ComputeIndicatorCli
from apps.cli.commands.describe import DescribeIndicatorCli
from apps.cli.commands.list_indicators import ListIndicatorsCli

_USAGE = (
    "Usage:\n"
    "  list-indicators [--group GROUP] [--report-format text|json]\n"
    "  describe NAME [--native] [--report-format text|json]\n"
    "  compute NAME --csv PATH [--column input=column] [--option name=value]"
    " [--report-format text|json]\n"
)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    args = argv if argv is not None else sys.argv[1:]

    if not args:
        print(_USAGE)
        return 2

    cmd = args[0]
    rest = args[1:]

    if cmd == "list-indicators":
        return ListIndicatorsCli().run(rest)
    if cmd == "describe":
        return DescribeIndicatorCli().run(rest)
    if cmd == "compute":
        return ComputeIndicatorCli().run(rest)

    print(f"unknown command: {cmd}\n\n{_USAGE}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
