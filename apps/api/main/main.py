"""
Run the ta-bridge HTTP API under uvicorn.

Usage:
    ta-bridge-api --port 8000 --config configs/prod/ta_bridge.yaml
    ta-bridge-api --talib-library /opt/ta-lib/lib/libta-lib.so
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Mapping

import uvicorn

from apps.api.main.app import create_app

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ta-bridge-api")
    parser.add_argument("--host", default="127.0.0.1", help="Bind host")
    parser.add_argument("--port", type=int, default=8000, help="Bind port")
    parser.add_argument(
        "--config",
        help="ta_bridge.yaml path; overrides TA_BRIDGE_CONFIG",
    )
    parser.add_argument(
        "--talib-library",
        help="Explicit TA-Lib shared library path; overrides TA_BRIDGE_TALIB_LIBRARY",
    )
    parser.add_argument(
        "--log-level",
        choices=("debug", "info", "warning", "error"),
        default="info",
    )
    return parser


def server_environ(
    args: argparse.Namespace, environ: Mapping[str, str]
) -> dict[str, str]:
    """
    Overlay command-line settings onto the process environment.

    Args:
        args: Parsed command-line arguments.
        environ: Base environment mapping.
    Returns:
        dict[str, str]: Environment used to load `TaLibRuntimeConfig`.
    Assumptions:
        Flags win over inherited variables; the process environment is not mutated.
    Raises:
        None.
    Side Effects:
        None.
    """
    effective = dict(environ)
    if args.config:
        effective["TA_BRIDGE_CONFIG"] = args.config
    if args.talib_library:
        effective["TA_BRIDGE_TALIB_LIBRARY"] = args.talib_library
    return effective


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(environ=server_environ(args, os.environ))
    log.info("starting ta-bridge API", extra={"host": args.host, "port": args.port})
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
