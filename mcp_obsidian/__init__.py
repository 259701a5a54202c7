"""Obsidian MCP Server

Structure-aware Obsidian note access via Model Context Protocol, backed by
the Obsidian Local REST API plugin.
"""

from mcp_obsidian.client import ObsidianClient
from mcp_obsidian.config import load_obsidian_config
from mcp_obsidian.data_models import FileInfo, ObsidianConfig
from mcp_obsidian.session import get_client, get_config, set_client
from mcp_obsidian.server import mcp, run_server

# Import tools to register them with the MCP server
from mcp_obsidian import tools  # noqa: F401

__version__ = "0.1.0"
__all__ = [
    "ObsidianClient",
    "ObsidianConfig",
    "FileInfo",
    "load_obsidian_config",
    "get_client",
    "get_config",
    "set_client",
    "mcp",
    "run_server",
]
