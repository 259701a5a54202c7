"""Read-side operations over a note's markdown structure."""

from __future__ import annotations

import logging
from typing import Any

from mcp_obsidian.client import ObsidianClient
from mcp_obsidian.constants import DEFAULT_MAX_DEPTH
from mcp_obsidian.errors import TargetNotFoundError
from mcp_obsidian.markdown import (
    MarkdownElement,
    NestedElement,
    PathNotFound,
    SelectorType,
    build_nested_structure,
    classify,
    extract_headings,
    find_heading,
    format_target,
    resolve_nested_path,
    select_elements,
    split_nested_path,
    to_wire_target,
)
from mcp_obsidian.markdown.summary import (
    block_targets,
    frontmatter_targets,
    heading_targets,
    serialize_node,
    summarize_elements,
)

logger = logging.getLogger(__name__)


async def _load_forest(
    client: ObsidianClient,
    filepath: str,
) -> tuple[list[MarkdownElement], list[NestedElement]]:
    """Fetch ``filepath`` and return its flat elements and heading forest."""
    text = await client.get_file_contents(filepath)
    elements = classify(text)
    return elements, build_nested_structure(elements)


async def discover_structure(
    client: ObsidianClient,
    filepath: str,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Any]:
    """List the patch targets a note offers.

    Args:
        client: API client.
        filepath: Note path relative to the vault root.
        max_depth: Headings at or deeper than this level are listed but not
            descended into. ``0`` lists every heading.

    Returns:
        Dictionary with filepath, headings (human-form targets), blocks,
        frontmatter, and summary.
    """
    elements, forest = await _load_forest(client, filepath)
    headings = heading_targets(forest, max_depth)
    logger.info("Discovered %s heading targets in '%s'", len(headings), filepath)
    return {
        "filepath": filepath,
        "headings": headings,
        "blocks": block_targets(forest),
        "frontmatter": frontmatter_targets(forest),
        "summary": summarize_elements(elements),
    }


async def get_nested_content(
    client: ObsidianClient,
    filepath: str,
    nested_path: str,
    permissive: bool = False,
) -> dict[str, Any]:
    """Return the element addressed by ``nested_path`` and everything beneath it.

    Args:
        client: API client.
        filepath: Note path relative to the vault root.
        nested_path: Heading titles joined by ``" -> "``, outermost first.
        permissive: Also accept paths that start below the root or skip
            intermediate headings.

    Raises:
        TargetNotFoundError: If the path does not resolve. The error lists
            the note's top-level headings.
    """
    _, forest = await _load_forest(client, filepath)
    resolution = resolve_nested_path(forest, split_nested_path(nested_path), permissive)
    if isinstance(resolution, PathNotFound):
        raise TargetNotFoundError(nested_path, resolution.available, filepath)

    target = format_target(resolution)
    logger.info("Resolved '%s' in '%s' to line %s", nested_path, filepath, resolution.element.line)
    return {
        "filepath": filepath,
        "nested_path": nested_path,
        "target": target,
        "wire_target": to_wire_target(target),
        "element": serialize_node(resolution),
    }


async def read_content(
    client: ObsidianClient,
    filepath: str,
    selector_type: str,
    query: str = "",
    level: int = 0,
    exact: bool = False,
) -> dict[str, Any]:
    """Read headings, blocks or frontmatter matching a selector.

    Returns:
        Dictionary with filepath, selector_type, query, count, and matches.
        When nothing matches, ``available`` lists the note's heading targets.

    Raises:
        ValueError: If ``selector_type`` is not heading, block or frontmatter.
    """
    try:
        selector = SelectorType(selector_type)
    except ValueError as exc:
        raise ValueError(
            f"Invalid selector_type '{selector_type}'. Must be one of: heading, block, frontmatter"
        ) from exc

    _, forest = await _load_forest(client, filepath)
    matches = select_elements(forest, selector, query, level, exact)
    logger.info(
        "Selected %s %s element(s) from '%s' (query=%r)",
        len(matches),
        selector.value,
        filepath,
        query,
    )

    result: dict[str, Any] = {
        "filepath": filepath,
        "selector_type": selector.value,
        "query": query,
        "count": len(matches),
        "matches": [serialize_node(node) for node in matches],
    }
    if not matches:
        result["available"] = heading_targets(forest, max_depth=0)
    return result


async def get_headings(client: ObsidianClient, filepath: str) -> dict[str, Any]:
    """List every heading with its level, line and content."""
    text = await client.get_file_contents(filepath)
    headings = extract_headings(text)
    logger.info("Found %s headings in '%s'", len(headings), filepath)
    return {
        "filepath": filepath,
        "headings": [heading.as_payload() for heading in headings],
        "total": len(headings),
    }


async def get_heading_content(
    client: ObsidianClient,
    filepath: str,
    heading: str,
    exact: bool = False,
) -> dict[str, Any]:
    """Return the text under the first heading matching ``heading``.

    Raises:
        TargetNotFoundError: If no heading matches; lists every heading title.
    """
    text = await client.get_file_contents(filepath)
    headings = extract_headings(text)
    found = find_heading(headings, heading, exact)
    if found is None:
        raise TargetNotFoundError(heading, [info.title for info in headings], filepath)

    logger.info("Read content under heading '%s' in '%s'", found.title, filepath)
    return {"filepath": filepath, **found.as_payload()}
