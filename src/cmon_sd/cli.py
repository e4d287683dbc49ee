"""
Command line entry point.

Usage:
    cmon-sd [-p PORT]

Reads CMON_ENDPOINT, CMON_USERNAME and CMON_PASSWORD from the environment and
serves Prometheus http_sd targets on the given port.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

import structlog
import uvicorn
from pydantic import ValidationError

from cmon_sd.config import get_settings
from cmon_sd.logging import configure_logging

DEFAULT_PORT = 8080

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmon-sd",
        description="Prometheus HTTP service discovery for ClusterControl",
    )
    parser.add_argument("-p", "--port", type=int, default=DEFAULT_PORT, help="Listen port.")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging()
        errors = "; ".join(str(err["msg"]).removeprefix("Value error, ") for err in exc.errors())
        logger.error("Error creating handler", error=errors)
        sys.exit(1)

    configure_logging(settings.log_level)

    from cmon_sd.api.main import app

    uvicorn.run(app, host="0.0.0.0", port=args.port, log_config=None)


if __name__ == "__main__":  # pragma: no cover
    main()
