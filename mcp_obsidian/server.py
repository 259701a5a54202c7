"""FastMCP server initialization, logging setup and command-line entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from mcp.server.fastmcp import FastMCP

from mcp_obsidian.constants import LOG_LEVEL, LOG_LEVEL_ENV

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("mcp_obsidian")

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators

TRANSPORTS = {
    "stdio": "stdio",
    "sse": "sse",
    "http": "streamable-http",
}


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr so the stdio transport stays clean."""
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-obsidian",
        description="MCP server for an Obsidian vault served by the Local REST API plugin.",
    )
    transport = parser.add_mutually_exclusive_group()
    transport.add_argument(
        "--stdio",
        dest="transport",
        action="store_const",
        const="stdio",
        help="Serve over stdin/stdout (default).",
    )
    transport.add_argument(
        "--sse",
        dest="transport",
        action="store_const",
        const="sse",
        help="Serve over HTTP with server-sent events.",
    )
    transport.add_argument(
        "--http",
        dest="transport",
        action="store_const",
        const="http",
        help="Serve over streamable HTTP.",
    )
    parser.set_defaults(transport="stdio")
    parser.add_argument("--host", default=None, help="Bind address for --sse/--http.")
    parser.add_argument("--port", type=int, default=None, help="Port for --sse/--http.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or {LOG_LEVEL}).",
    )
    return parser


def run_server(argv: Optional[Sequence[str]] = None) -> None:
    """Parse the command line and start the MCP server."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.host:
        mcp.settings.host = args.host
    if args.port:
        mcp.settings.port = args.port

    transport = TRANSPORTS[args.transport]
    logger.info("Starting Obsidian MCP Server (transport=%s)", transport)
    mcp.run(transport=transport)


if __name__ == "__main__":
    run_server()
