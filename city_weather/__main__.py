"""
Entrypoint for running the city weather MCP server through stdio.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from dotenv import load_dotenv

from .city_weather_server import create_weather_server
from .config import Settings

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    # stdout carries the MCP stream; logs must stay on stderr.
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mcp-city-weather",
        description="MCP server exposing a BMI calculator and OpenWeatherMap lookups.",
    )
    parser.add_argument(
        "transport",
        nargs="?",
        default="stdio",
        choices=["stdio"],
        help="MCP transport. Only 'stdio' is available.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging threshold for messages written to stderr.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    _configure_logging(args.log_level)

    try:
        load_dotenv()
        settings = Settings.from_env()
        server = create_weather_server(settings)
        logger.info("Server started with transport %s", args.transport)
        server.run(args.transport, show_banner=False)
    except Exception as exc:
        logger.exception("Error starting MCP server: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
