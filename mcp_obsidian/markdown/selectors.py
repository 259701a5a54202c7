"""Selector matching for reading headings, blocks and frontmatter."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from mcp_obsidian.markdown.elements import BLOCK_KINDS, ElementKind, NestedElement
from mcp_obsidian.markdown.targets import extract_block_id, extract_frontmatter_fields
from mcp_obsidian.markdown.tree import iter_nodes


class SelectorType(str, Enum):
    """Element families addressable by the read path."""

    HEADING = "heading"
    BLOCK = "block"
    FRONTMATTER = "frontmatter"


def matches_query(text: str, query: str, exact: bool = False) -> bool:
    """Case-insensitive equality (``exact``) or substring test."""
    if exact:
        return text.casefold() == query.casefold()
    return query.lower() in text.lower()


def matches_selector(
    node: NestedElement,
    selector_type: SelectorType,
    query: str = "",
    level: int = 0,
    exact: bool = False,
) -> bool:
    element = node.element

    if selector_type is SelectorType.HEADING:
        if not element.is_heading:
            return False
        if level and element.level != level:
            return False
        return not query or matches_query(element.title, query, exact)

    if selector_type is SelectorType.BLOCK:
        if element.kind not in BLOCK_KINDS:
            return False
        if not query:
            return True
        block_id = extract_block_id(element)
        if block_id and matches_query(block_id, query, exact):
            return True
        return matches_query(element.content, query, exact)

    if element.kind is not ElementKind.FRONTMATTER:
        return False
    if not query:
        return True
    fields = extract_frontmatter_fields(element.content)
    return any(
        matches_query(name, query, exact) or matches_query(value, query, exact)
        for name, value in fields.items()
    )


def select_elements(
    forest: Sequence[NestedElement],
    selector_type: SelectorType,
    query: str = "",
    level: int = 0,
    exact: bool = False,
) -> list[NestedElement]:
    """Return every node in ``forest`` matching the selector, depth-first.

    A matching heading is returned together with its subtree, and its
    descendants are still considered on their own.
    """
    selector_type = SelectorType(selector_type)
    return [
        node
        for node in iter_nodes(forest)
        if matches_selector(node, selector_type, query, level, exact)
    ]
