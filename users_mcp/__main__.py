"""
Command-line entry point.

    users-mcp                      # stdio, data/users.json
    users-mcp --data-file db.json
    users-mcp --transport http --port 8080
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import anyio

from .adapter import create_user_records_adapter
from .config import DATA_FILE, HTTP_HOST, HTTP_PORT, LOG_FORMAT, LOG_LEVEL
from .errors import ConfigurationError
from .stdio import run_stdio

logger = logging.getLogger("users_mcp")


def configure_logging(level: str) -> None:
    """Send log records to stderr. stdout carries protocol messages only."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")
    logging.basicConfig(stream=sys.stderr, level=numeric, format=LOG_FORMAT, force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="users-mcp",
        description="MCP server for creating and reading user records.",
    )
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default="stdio",
        help="Transport to serve on (default: stdio)",
    )
    parser.add_argument(
        "--data-file",
        default=DATA_FILE,
        help=f"JSON file holding the user collection (default: {DATA_FILE})",
    )
    parser.add_argument("--host", default=HTTP_HOST, help="HTTP bind address")
    parser.add_argument("--port", type=int, default=HTTP_PORT, help="HTTP port")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure_logging(args.log_level)
        if not 0 < args.port < 65536:
            raise ConfigurationError(f"Port out of range: {args.port}")
    except ConfigurationError as e:
        print(f"users-mcp: {e}", file=sys.stderr)
        return 2

    if not Path(args.data_file).is_file():
        logger.warning("Data file %s does not exist; requests will fail until it does", args.data_file)

    adapter = create_user_records_adapter(args.data_file)

    if args.transport == "stdio":
        anyio.run(run_stdio, adapter)
        return 0

    import uvicorn

    from .server import create_app

    logger.info("Serving %s over HTTP on %s:%d", adapter.store.path, args.host, args.port)
    uvicorn.run(create_app(adapter), host=args.host, port=args.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
