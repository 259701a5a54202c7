"""Allow ``python -m mcp_obsidian``."""

from mcp_obsidian import run_server

run_server()
