"""Targeted patch MCP tool.

All tools delegate to core operations in mcp_obsidian.core.patch_operations.
"""
from __future__ import annotations

from typing import Any

from mcp_obsidian.server import mcp
from mcp_obsidian.session import get_client
from mcp_obsidian.models import PatchContentInput
from mcp_obsidian.core.patch_operations import patch_content


@mcp.tool()
async def obsidian_patch_content(input: PatchContentInput) -> dict[str, Any]:
    """Insert, prepend, or replace content relative to a target inside a note.

    Heading targets are checked against the current file before anything is
    written. Matching is forgiving (case, emoji, partial titles) and the
    outgoing target is rewritten to the file's own full heading path.

    Args:
        input (PatchContentInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - operation ("append" | "prepend" | "replace")
            - target_type ("heading" | "block" | "frontmatter")
            - target (str): 'Parent -> Child' heading path, block ID, or field
            - content (str): Markdown to insert

    Returns:
        {
            "filepath": str,
            "operation": str,
            "target_type": str,
            "target": str,   # as sent, '::'-delimited for nested headings
            "status": "patched"
        }

    Examples:
        - Append a task under "Roadmap -> Q3": target_type="heading"
        - Replace a paragraph tagged ^summary: target_type="block", target="summary"
        - Unsure of the heading path → call obsidian_discover_structure() first

    Error Handling:
        - Unknown heading → error listing the available headings
        - Block or field missing → API error from Obsidian
    """
    return await patch_content(
        get_client(),
        input.filepath,
        input.operation,
        input.target_type,
        input.target,
        input.content,
    )
