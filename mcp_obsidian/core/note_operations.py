"""Core business logic for whole-file vault operations."""

from __future__ import annotations

import logging
from typing import Any

from mcp_obsidian.client import ObsidianClient
from mcp_obsidian.constants import DEFAULT_MAX_DEPTH
from mcp_obsidian.data_models import FileInfo, ObsidianConfig

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _file_payload(info: FileInfo, max_depth: int) -> dict[str, Any]:
    """Serialize a listing entry, marking directories that can be expanded.

    Args:
        info: Listing entry returned by the API.
        max_depth: Remaining listing depth; ``0`` means unlimited.

    Returns:
        The entry payload. Directories gain ``has_children`` and
        ``children_depth`` when another level could be listed.
    """
    payload = info.as_payload()
    if info.is_directory and (max_depth == 0 or max_depth > 1):
        payload["has_children"] = True
        payload["children_depth"] = max_depth - 1 if max_depth else 0
    return payload


# ==============================================================================
# CONNECTION
# ==============================================================================


async def test_connection(client: ObsidianClient, config: ObsidianConfig) -> dict[str, Any]:
    """Check that the Local REST API is reachable with the configured key.

    Returns:
        Dictionary with status plus host, port, protocol and vault_path.

    Raises:
        ObsidianError: If the request fails or the API rejects the key.
    """
    await client.test_connection()
    logger.info("Connected to Obsidian at %s", config.base_url)
    return {"status": "connected", **config.as_payload()}


# ==============================================================================
# LISTING OPERATIONS
# ==============================================================================


async def list_files_in_vault(client: ObsidianClient) -> dict[str, Any]:
    """List the files and directories at the root of the vault."""
    files = await client.list_files_in_vault()
    logger.info("Listed %s vault entries", len(files))
    return {
        "files": [info.as_payload() for info in files],
        "total": len(files),
    }


async def list_files_in_dir(
    client: ObsidianClient,
    dirpath: str,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Any]:
    """List the entries of one vault directory.

    Args:
        client: API client.
        dirpath: Directory relative to the vault root.
        max_depth: Listing depth hint; sub-directories report how many more
            levels may be requested. ``0`` means unlimited.

    Returns:
        Dictionary with directory, max_depth, total_items, and items.
    """
    if max_depth < 0:
        raise ValueError("max_depth must be 0 (unlimited) or a positive integer.")

    files = await client.list_files_in_dir(dirpath)
    logger.info("Listed %s entries in directory '%s'", len(files), dirpath)
    return {
        "directory": dirpath,
        "max_depth": max_depth,
        "total_items": len(files),
        "items": [_file_payload(info, max_depth) for info in files],
    }


# ==============================================================================
# FILE OPERATIONS
# ==============================================================================


async def get_file_contents(client: ObsidianClient, filepath: str) -> dict[str, Any]:
    """Return the raw markdown of a file."""
    content = await client.get_file_contents(filepath)
    logger.info("Read file '%s' (%s characters)", filepath, len(content))
    return {"filepath": filepath, "content": content, "status": "read"}


async def put_content(client: ObsidianClient, filepath: str, content: str) -> dict[str, Any]:
    """Create a file or replace its whole content."""
    await client.put_content(filepath, content)
    logger.info("Wrote file '%s'", filepath)
    return {"filepath": filepath, "status": "written"}


async def append_content(client: ObsidianClient, filepath: str, content: str) -> dict[str, Any]:
    """Append content to the end of a file, creating it if needed."""
    await client.append_content(filepath, content)
    logger.info("Appended %s characters to '%s'", len(content), filepath)
    return {"filepath": filepath, "status": "appended"}


async def delete_file(client: ObsidianClient, filepath: str, confirm: bool = False) -> dict[str, Any]:
    """Delete a file or directory from the vault.

    Raises:
        ValueError: If ``confirm`` is not ``True``.
    """
    if not confirm:
        raise ValueError(
            f"Deleting '{filepath}' requires confirm=true. This operation cannot be undone."
        )

    await client.delete_file(filepath)
    logger.info("Deleted '%s'", filepath)
    return {"filepath": filepath, "status": "deleted"}
