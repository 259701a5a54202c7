"""Patch target formatting plus block-ID and frontmatter field extraction.

Nested heading targets have two equivalent encodings: the human form joins
titles with ``" -> "`` and the wire form expected by the Local REST API joins
them with ``"::"``.
"""

from __future__ import annotations

from mcp_obsidian.markdown.elements import ElementKind, MarkdownElement, NestedElement
from mcp_obsidian.markdown.resolver import NESTED_PATH_DELIMITER

WIRE_DELIMITER = "::"
HEADING_SEGMENT_PREFIX = f"{ElementKind.HEADING.value}:"


def format_target(node: NestedElement) -> str:
    """Return the human-form patch target for a heading node.

    Heading titles are recovered from the node's path; non-heading segments
    are skipped. Empty titles (a bare ``#`` line) keep their place so the
    target still names the same chain. Returns ``""`` for non-heading nodes.
    """
    if not node.is_heading:
        return ""

    titles = [
        segment[len(HEADING_SEGMENT_PREFIX) :]
        for segment in node.path
        if segment.startswith(HEADING_SEGMENT_PREFIX)
    ]
    return NESTED_PATH_DELIMITER.join(titles)


def to_wire_target(target: str) -> str:
    """Convert a human-form target to the ``::`` wire form."""
    return target.replace(NESTED_PATH_DELIMITER, WIRE_DELIMITER).strip()


def to_human_target(target: str) -> str:
    """Convert a ``::`` wire-form target to the human form."""
    parts = [part.strip() for part in target.split(WIRE_DELIMITER)]
    return NESTED_PATH_DELIMITER.join(parts)


def extract_block_id(element: MarkdownElement) -> str:
    """Return the first ``^block-id`` found on its own line, or ``""``."""
    for line in element.content.split("\n"):
        line = line.strip()
        if line.startswith("^") and len(line) > 1 and not line[1].isspace():
            return line[1:].split(maxsplit=1)[0]
    return ""


def extract_frontmatter_fields(content: str) -> dict[str, str]:
    """Parse ``key: value`` lines of a frontmatter block into a mapping.

    Lines without ``:`` and ``#`` comment lines are ignored. Later duplicates
    overwrite earlier ones.
    """
    fields: dict[str, str] = {}
    for line in content.split("\n"):
        line = line.strip()
        if ":" not in line or line.startswith("#"):
            continue
        name, _, value = line.partition(":")
        name = name.strip()
        if name:
            fields[name] = value.strip()
    return fields
