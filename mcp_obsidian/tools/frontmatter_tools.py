"""Frontmatter management MCP tools.

All tools delegate to core operations in mcp_obsidian.core.frontmatter_operations.
"""
from __future__ import annotations

from typing import Any

from mcp_obsidian.server import mcp
from mcp_obsidian.session import get_client
from mcp_obsidian.models import (
    GetFrontmatterInput,
    SetFrontmatterFieldInput,
    UpdateFrontmatterInput,
)
from mcp_obsidian.core.frontmatter_operations import (
    get_frontmatter,
    set_frontmatter_field,
    update_frontmatter,
)


@mcp.tool()
async def obsidian_get_frontmatter(input: GetFrontmatterInput) -> dict[str, Any]:
    """Read frontmatter metadata without returning the markdown body.

    Args:
        input (GetFrontmatterInput): Validated input containing:
            - filepath (str): Path relative to the vault root

    Returns:
        {
            "filepath": str,
            "frontmatter": dict,
            "has_frontmatter": bool,
            "status": "read"
        }

    Error Handling:
        - Invalid YAML in the block → ValueError with details
    """
    return await get_frontmatter(get_client(), input.filepath)


@mcp.tool()
async def obsidian_set_frontmatter(input: SetFrontmatterFieldInput) -> dict[str, Any]:
    """Set one frontmatter field, creating it when missing.

    Args:
        input (SetFrontmatterFieldInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - field (str): Field name
            - value (any): New value, sent as JSON

    Returns:
        {"filepath": str, "field": str, "value": any, "status": "updated"}
    """
    return await set_frontmatter_field(get_client(), input.filepath, input.field, input.value)


@mcp.tool()
async def obsidian_update_frontmatter(input: UpdateFrontmatterInput) -> dict[str, Any]:
    """Merge several fields into a note's frontmatter block.

    Creates the block when missing. Nested dictionaries merge recursively;
    lists replace existing lists.

    Args:
        input (UpdateFrontmatterInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - frontmatter (dict): Fields to upsert

    Returns:
        {
            "filepath": str,
            "status": "updated" | "unchanged",
            "fields_updated": list[str]
        }

    Error Handling:
        - Unsupported value types → ValueError
        - Frontmatter too large (>10KB) → ValueError
    """
    return await update_frontmatter(get_client(), input.filepath, input.frontmatter)
