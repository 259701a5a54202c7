"""MCP tool definitions for Obsidian vault operations.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from mcp_obsidian.tools import note_tools
from mcp_obsidian.tools import patch_tools
from mcp_obsidian.tools import structure_tools
from mcp_obsidian.tools import frontmatter_tools

__all__ = [
    "note_tools",
    "patch_tools",
    "structure_tools",
    "frontmatter_tools",
]
