"""Whole-file MCP tools.

This module provides MCP tool wrappers for connection checks, listings, and
file-level operations:
- Test the Local REST API connection
- List vault and directory contents
- Read, overwrite, append to, and delete files

All tools delegate to core operations in mcp_obsidian.core.note_operations.
"""
from __future__ import annotations

from typing import Any

from mcp_obsidian.server import mcp
from mcp_obsidian.session import get_client, get_config
from mcp_obsidian.models import (
    CheckConnectionInput,
    ListFilesInVaultInput,
    ListFilesInDirInput,
    GetFileContentsInput,
    PutContentInput,
    AppendContentInput,
    DeleteFileInput,
)
from mcp_obsidian.core import note_operations


# ==============================================================================
# CONNECTION
# ==============================================================================

@mcp.tool()
async def obsidian_test_connection(input: CheckConnectionInput) -> dict[str, Any]:
    """Check that Obsidian and the Local REST API plugin are reachable.

    Args:
        input (CheckConnectionInput): Takes no parameters.

    Returns:
        {
            "status": "connected",
            "host": str,
            "port": int,
            "protocol": "http" | "https",
            "vault_path": str | None,
            "verify_ssl": bool
        }

    Error Handling:
        - Missing OBSIDIAN_API_KEY → ValueError before any request
        - Obsidian not running or plugin disabled → connection error
        - Wrong API key → API error 40101
    """
    return await note_operations.test_connection(get_client(), get_config())


# ==============================================================================
# LISTING
# ==============================================================================

@mcp.tool()
async def obsidian_list_files_in_vault(input: ListFilesInVaultInput) -> dict[str, Any]:
    """List files and directories at the root of the vault.

    Args:
        input (ListFilesInVaultInput): Takes no parameters.

    Returns:
        {
            "files": [{"name": str, "path": str, "type": "file" | "directory"}],
            "total": int
        }

    Examples:
        - Use when: Orienting in an unfamiliar vault
        - Follow-up: obsidian_list_files_in_dir() on a directory entry
    """
    return await note_operations.list_files_in_vault(get_client())


@mcp.tool()
async def obsidian_list_files_in_dir(input: ListFilesInDirInput) -> dict[str, Any]:
    """List the entries of one vault directory.

    Args:
        input (ListFilesInDirInput): Validated input containing:
            - dirpath (str): Directory relative to the vault root
            - max_depth (int): Listing depth hint, default 3 (0 = unlimited)

    Returns:
        {
            "directory": str,
            "max_depth": int,
            "total_items": int,
            "items": [{"name", "path", "type", "has_children"?, "children_depth"?}]
        }

    Error Handling:
        - ValidationError: Empty, absolute, or traversing directory path
        - Directory not found → API error 40400
    """
    return await note_operations.list_files_in_dir(get_client(), input.dirpath, input.max_depth)


# ==============================================================================
# FILE OPERATIONS
# ==============================================================================

@mcp.tool()
async def obsidian_get_file_contents(input: GetFileContentsInput) -> dict[str, Any]:
    """Return the full markdown of a file.

    Can be expensive for large notes. Prefer obsidian_discover_structure()
    plus obsidian_get_nested_content() when only a section is needed.

    Args:
        input (GetFileContentsInput): Validated input containing:
            - filepath (str): Path relative to the vault root, with extension

    Returns:
        {"filepath": str, "content": str, "status": "read"}
    """
    return await note_operations.get_file_contents(get_client(), input.filepath)


@mcp.tool()
async def obsidian_put_content(input: PutContentInput) -> dict[str, Any]:
    """Create a file or replace its entire content (destructive).

    Args:
        input (PutContentInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - content (str): Complete new markdown

    Returns:
        {"filepath": str, "status": "written"}
    """
    return await note_operations.put_content(get_client(), input.filepath, input.content)


@mcp.tool()
async def obsidian_append_content(input: AppendContentInput) -> dict[str, Any]:
    """Append markdown to the end of a file, creating the file if needed.

    Args:
        input (AppendContentInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - content (str): Markdown to append

    Returns:
        {"filepath": str, "status": "appended"}

    Examples:
        - Use when: Logging to a daily note
        - Don't use when: Content belongs under a heading → obsidian_patch_content()
    """
    return await note_operations.append_content(get_client(), input.filepath, input.content)


@mcp.tool()
async def obsidian_delete_file(input: DeleteFileInput) -> dict[str, Any]:
    """Delete a file or directory from the vault (permanent).

    Args:
        input (DeleteFileInput): Validated input containing:
            - filepath (str): Path relative to the vault root
            - confirm (bool): Must be true

    Returns:
        {"filepath": str, "status": "deleted"}

    Error Handling:
        - confirm is false → ValueError, nothing is deleted
        - File not found → API error 40400
    """
    return await note_operations.delete_file(get_client(), input.filepath, input.confirm)
