"""Structure discovery and structured read MCP tools.

This module provides MCP tool wrappers for the markdown structure engine:
- Discover heading, block, and frontmatter targets
- Fetch the subtree under a nested heading path
- Read elements matching a selector
- List headings and read the content under one heading

All tools delegate to core operations in mcp_obsidian.core.structure_operations.
"""
from __future__ import annotations

from typing import Any

from mcp_obsidian.server import mcp
from mcp_obsidian.session import get_client
from mcp_obsidian.models import (
    DiscoverStructureInput,
    GetNestedContentInput,
    ReadContentInput,
    GetHeadingsInput,
    GetHeadingContentInput,
)
from mcp_obsidian.core.structure_operations import (
    discover_structure,
    get_nested_content,
    read_content,
    get_headings,
    get_heading_content,
)


# ==============================================================================
# DISCOVERY
# ==============================================================================

# Call this before patching: its heading strings are valid patch targets as-is.
@mcp.tool()
async def obsidian_discover_structure(input: DiscoverStructureInput) -> dict[str, Any]:
    """List every patch target a note offers.

    Args:
        input (DiscoverStructureInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - max_depth (int): Deepest heading level expanded, default 3 (0 = all)

    Returns:
        {
            "filepath": str,
            "headings": ["Top", "Top -> Sub", ...],
            "blocks": [{"type", "block_id", "line", "content"}],
            "frontmatter": [{"field", "value", "line"}],
            "summary": "2 heading(s), 1 paragraph(s)"
        }
    """
    return await discover_structure(get_client(), input.filepath, input.max_depth)


@mcp.tool()
async def obsidian_get_nested_content(input: GetNestedContentInput) -> dict[str, Any]:
    """Return the section addressed by a nested heading path, with all children.

    Args:
        input (GetNestedContentInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - nested_path (str): e.g. 'Troubleshooting -> Common Issues'
            - permissive (bool, optional): Allow partial or skipping paths

    Returns:
        {
            "filepath": str,
            "nested_path": str,
            "target": str,        # file's own 'A -> B' spelling
            "wire_target": str,   # 'A::B'
            "element": {...}      # heading with nested children
        }

    Error Handling:
        - Path not found → error listing top-level headings
    """
    return await get_nested_content(
        get_client(), input.filepath, input.nested_path, input.permissive
    )


# ==============================================================================
# READ OPERATIONS
# ==============================================================================

@mcp.tool()
async def obsidian_read_content(input: ReadContentInput) -> dict[str, Any]:
    """Read headings, ID-able blocks, or frontmatter matching a selector.

    Args:
        input (ReadContentInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - selector_type ("heading" | "block" | "frontmatter")
            - query (str, optional): Text to match; empty matches all
            - level (int, optional): Heading level filter, 0 = any
            - exact (bool, optional): Full match instead of substring

    Returns:
        {
            "filepath": str,
            "selector_type": str,
            "query": str,
            "count": int,
            "matches": [...],
            "available": [...]   # only when nothing matched
        }
    """
    return await read_content(
        get_client(),
        input.filepath,
        input.selector_type,
        input.query,
        input.level,
        input.exact,
    )


@mcp.tool()
async def obsidian_get_headings(input: GetHeadingsInput) -> dict[str, Any]:
    """List every heading of a note with level, line, and content.

    Returns:
        {
            "filepath": str,
            "headings": [{"level", "title", "content", "line"}],
            "total": int
        }
    """
    return await get_headings(get_client(), input.filepath)


@mcp.tool()
async def obsidian_get_heading_content(input: GetHeadingContentInput) -> dict[str, Any]:
    """Return the text under the first heading matching a title.

    Args:
        input (GetHeadingContentInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - heading (str): Title, case-insensitive substring by default
            - exact (bool, optional): Match the title verbatim

    Returns:
        {"filepath": str, "level": int, "title": str, "content": str, "line": int}

    Error Handling:
        - No match → error listing every heading title
    """
    return await get_heading_content(get_client(), input.filepath, input.heading, input.exact)
