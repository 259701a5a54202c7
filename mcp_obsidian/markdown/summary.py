"""JSON-ready views of a parsed document for discovery and read tools."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mcp_obsidian.markdown.elements import (
    BLOCK_KINDS,
    ElementKind,
    MarkdownElement,
    NestedElement,
)
from mcp_obsidian.markdown.targets import (
    extract_block_id,
    extract_frontmatter_fields,
    format_target,
)
from mcp_obsidian.markdown.tree import iter_nodes

HEADING_DESCRIPTIONS = {
    1: "Main document title",
    2: "Major section",
    3: "Subsection",
    4: "Sub-subsection",
    5: "Minor subsection",
}

KIND_DESCRIPTIONS = {
    ElementKind.PARAGRAPH: "Text content block",
    ElementKind.LIST: "List of items",
    ElementKind.TABLE: "Data table",
    ElementKind.BLOCKQUOTE: "Quoted text",
    ElementKind.LINK: "External or internal link",
    ElementKind.IMAGE: "Image or media file",
    ElementKind.FRONTMATTER: "Document frontmatter",
}

# (kind, label) pairs in the order they appear in a summary line.
SUMMARY_KINDS = (
    (ElementKind.HEADING, "heading(s)"),
    (ElementKind.PARAGRAPH, "paragraph(s)"),
    (ElementKind.LIST, "list(s)"),
    (ElementKind.CODE_BLOCK, "code block(s)"),
    (ElementKind.TABLE, "table(s)"),
)


def describe_element(element: MarkdownElement) -> str:
    """Return a short human description of ``element``."""
    if element.is_heading:
        return HEADING_DESCRIPTIONS.get(element.level, "Deep subsection")
    if element.kind is ElementKind.CODE_BLOCK:
        language = element.attributes.get("language", "")
        if language:
            return f"Code block in {language} language"
        return "Code block"
    return KIND_DESCRIPTIONS.get(element.kind, "Content element")


def content_preview(element: MarkdownElement) -> str:
    """Full element content with doubled spaces collapsed."""
    return element.content.strip().replace("  ", " ")


def summarize_elements(elements: Sequence[MarkdownElement]) -> str:
    """Count headings, paragraphs, lists, code blocks and tables."""
    counts = {kind: 0 for kind, _ in SUMMARY_KINDS}
    for element in elements:
        if element.kind in counts:
            counts[element.kind] += 1

    parts = [f"{counts[kind]} {label}" for kind, label in SUMMARY_KINDS if counts[kind]]
    if not parts:
        return "Empty file"
    return ", ".join(parts)


def heading_targets(forest: Sequence[NestedElement], max_depth: int = 3) -> list[str]:
    """Flatten heading nodes into human-form patch targets.

    A heading's children are visited only when ``max_depth`` is ``0``
    (unlimited) or the heading's level is below ``max_depth``.
    """
    targets: list[str] = []
    stack = [node for node in reversed(forest) if node.is_heading]
    while stack:
        node = stack.pop()
        target = format_target(node)
        if target:
            targets.append(target)
        if node.children and (max_depth == 0 or node.level < max_depth):
            stack.extend(child for child in reversed(node.children) if child.is_heading)
    return targets


def block_targets(forest: Sequence[NestedElement]) -> list[dict[str, Any]]:
    """List every paragraph, table or code block that carries a block ID."""
    blocks: list[dict[str, Any]] = []
    for node in iter_nodes(forest):
        if node.element.kind not in BLOCK_KINDS:
            continue
        block_id = extract_block_id(node.element)
        if not block_id:
            continue
        block: dict[str, Any] = {
            "type": node.element.kind.value,
            "block_id": block_id,
            "line": node.element.line,
        }
        preview = content_preview(node.element)
        if preview:
            block["content"] = preview
        blocks.append(block)
    return blocks


def frontmatter_targets(forest: Sequence[NestedElement]) -> list[dict[str, Any]]:
    """List the fields of the document's frontmatter as patch targets."""
    fields: list[dict[str, Any]] = []
    for node in forest:
        if node.element.kind is not ElementKind.FRONTMATTER:
            continue
        for name, value in extract_frontmatter_fields(node.element.content).items():
            fields.append({"field": name, "value": value, "line": node.element.line})
    return fields


def _node_payload(node: NestedElement) -> dict[str, Any]:
    payload = node.element.as_payload()
    payload["description"] = describe_element(node.element)
    if node.is_heading:
        payload["target"] = format_target(node)
    else:
        block_id = extract_block_id(node.element)
        if block_id:
            payload["block_id"] = block_id
    return payload


def serialize_node(node: NestedElement, max_depth: int = 0) -> dict[str, Any]:
    """Serialize ``node`` and its subtree for tool responses.

    ``max_depth`` limits how many levels of children are included; ``0``
    includes the whole subtree. Nodes at the depth limit report
    ``child_count`` instead of ``children``.
    """
    root = _node_payload(node)
    stack = [(node, root, max_depth)]
    while stack:
        current, payload, depth = stack.pop()
        if not current.children:
            continue
        if depth == 1:
            payload["child_count"] = len(current.children)
            continue

        next_depth = depth - 1 if depth else 0
        payload["children"] = [_node_payload(child) for child in current.children]
        for child, child_payload in zip(current.children, payload["children"]):
            stack.append((child, child_payload, next_depth))
    return root

