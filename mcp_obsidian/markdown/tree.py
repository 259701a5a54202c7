"""Build the heading-rooted tree from a flat element sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional

from mcp_obsidian.markdown.elements import MarkdownElement, NestedElement, path_segment


@dataclass
class _ArenaNode:
    element: MarkdownElement
    path: tuple[str, ...]
    children: list[int] = field(default_factory=list)


def build_nested_structure(elements: Sequence[MarkdownElement]) -> list[NestedElement]:
    """Nest ``elements`` under their owning headings.

    Nodes live in an arena addressed by index while the tree is built; the
    heading stack holds arena indices of the currently open headings,
    outermost first. A heading closes every open heading of the same or a
    deeper level. Non-heading elements attach to the innermost open heading
    and never change the stack.

    Returns:
        The forest of root nodes in document order.
    """
    arena: list[_ArenaNode] = []
    roots: list[int] = []
    stack: list[int] = []

    for element in elements:
        if element.is_heading:
            while stack and arena[stack[-1]].element.level >= element.level:
                stack.pop()

        index = len(arena)
        segment = path_segment(element)
        if stack:
            parent = arena[stack[-1]]
            arena.append(_ArenaNode(element, parent.path + (segment,)))
            parent.children.append(index)
        else:
            arena.append(_ArenaNode(element, (segment,)))
            roots.append(index)

        if element.is_heading:
            stack.append(index)

    return _materialize(arena, roots)


def _materialize(arena: list[_ArenaNode], roots: list[int]) -> list[NestedElement]:
    # Children always sit at higher indices than their parent, so walking the
    # arena backwards finishes every child before its parent is built.
    built: list[Optional[NestedElement]] = [None] * len(arena)
    for index in range(len(arena) - 1, -1, -1):
        node = arena[index]
        built[index] = NestedElement(
            element=node.element,
            path=node.path,
            children=[built[child] for child in node.children],
        )
    return [built[index] for index in roots]


def iter_nodes(forest: Sequence[NestedElement]) -> Iterator[NestedElement]:
    """Yield every node of ``forest`` depth-first in document order."""
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def iter_headings(forest: Sequence[NestedElement]) -> Iterator[NestedElement]:
    """Yield every heading node of ``forest`` depth-first in document order."""
    return (node for node in iter_nodes(forest) if node.is_heading)
