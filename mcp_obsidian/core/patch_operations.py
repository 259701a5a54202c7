"""Targeted edits relative to headings, blocks and frontmatter fields."""

from __future__ import annotations

import logging
from typing import Any, Union

from mcp_obsidian.client import ObsidianClient
from mcp_obsidian.errors import (
    InvalidOperationError,
    InvalidTargetTypeError,
    TargetNotFoundError,
)
from mcp_obsidian.markdown import (
    NESTED_PATH_DELIMITER,
    WIRE_DELIMITER,
    PathNotFound,
    build_nested_structure,
    classify,
    format_target,
    resolve_heading_target,
    resolve_nested_path,
    split_nested_path,
    to_human_target,
    to_wire_target,
)

logger = logging.getLogger(__name__)

VALID_OPERATIONS = ("append", "prepend", "replace")
VALID_TARGET_TYPES = ("heading", "block", "frontmatter")


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _is_nested(target: str) -> bool:
    return NESTED_PATH_DELIMITER in target or WIRE_DELIMITER in target


def prepare_heading_target(text: str, target: str) -> Union[str, PathNotFound]:
    """Validate a heading target against ``text`` and return its wire form.

    The whole target is first looked up as a bare title anywhere in the
    document, exact spelling first, so a heading such as ``C++ :: Notes`` is
    found by its own name. Only when that fails is a target containing
    ``" -> "`` or ``"::"`` split into a heading chain, which must start at a
    root heading. Either way the outgoing target is rebuilt from the matched
    heading, so it carries the file's own casing and full path.

    Returns:
        The ``::``-joined target, or :class:`PathNotFound` when nothing matches.
    """
    target = target.strip()
    forest = build_nested_structure(classify(text))

    resolution = resolve_heading_target(forest, target)
    if isinstance(resolution, PathNotFound) and _is_nested(target):
        segments = split_nested_path(to_human_target(target))
        resolution = resolve_nested_path(forest, segments)

    if isinstance(resolution, PathNotFound):
        return resolution
    return to_wire_target(format_target(resolution))


def validate_patch_request(operation: str, target_type: str) -> None:
    """Reject unknown operations or target types before any I/O.

    Raises:
        InvalidTargetTypeError: If ``target_type`` is not heading, block or frontmatter.
        InvalidOperationError: If ``operation`` is not append, prepend or replace.
    """
    if target_type not in VALID_TARGET_TYPES:
        raise InvalidTargetTypeError(target_type, VALID_TARGET_TYPES)
    if operation not in VALID_OPERATIONS:
        raise InvalidOperationError(operation, VALID_OPERATIONS)


# ==============================================================================
# PATCH OPERATIONS
# ==============================================================================


async def patch_content(
    client: ObsidianClient,
    filepath: str,
    operation: str,
    target_type: str,
    target: str,
    content: str,
) -> dict[str, Any]:
    """Insert or replace content relative to a heading, block or frontmatter field.

    Heading targets are checked against the current file first, so a typo
    fails here with the list of available headings instead of as an opaque
    API error.

    Returns:
        Dictionary with filepath, operation, target_type, target (as sent),
        and status.

    Raises:
        InvalidOperationError: Unknown operation.
        InvalidTargetTypeError: Unknown target type.
        TargetNotFoundError: Heading target not present in the file.
    """
    validate_patch_request(operation, target_type)

    target = target.strip()
    if target_type == "heading":
        text = await client.get_file_contents(filepath)
        prepared = prepare_heading_target(text, target)
        if isinstance(prepared, PathNotFound):
            raise TargetNotFoundError(target, prepared.available, filepath)
        if prepared != target:
            logger.debug("Heading target '%s' resolved to '%s'", target, prepared)
        target = prepared

    await client.patch_content(filepath, operation, target_type, target, content)
    logger.info(
        "Patched '%s' (%s %s '%s')",
        filepath,
        operation,
        target_type,
        target,
    )
    return {
        "filepath": filepath,
        "operation": operation,
        "target_type": target_type,
        "target": target,
        "status": "patched",
    }
