"""Resolve heading paths such as ``"Setup -> Installation"`` against a tree.

Title comparison cascades through four rules, strongest first:

1. case-insensitive equality of the raw titles
2. case-insensitive equality once characters outside printable ASCII
   (code points 32-126) are removed, so emoji decorations are ignored
3. the cleaned title contains the cleaned segment
4. the cleaned segment contains the cleaned title

Among sibling headings the strongest rule wins, ties going to document order.
Failures are returned as :class:`PathNotFound` values, never raised.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Union

from mcp_obsidian.markdown.elements import NestedElement
from mcp_obsidian.markdown.tree import iter_headings

NESTED_PATH_DELIMITER = " -> "


class MatchRule(IntEnum):
    """Title match strength; lower values take precedence."""

    EXACT = 1
    CLEANED_EXACT = 2
    CONTAINS = 3
    CONTAINED = 4


@dataclass(frozen=True)
class PathNotFound:
    """Diagnostic returned when a path or target cannot be resolved."""

    target: str
    available: list[str] = field(default_factory=list)


Resolution = Union[NestedElement, PathNotFound]


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def clean_title(value: str) -> str:
    """Drop characters outside printable ASCII, then trim and lowercase."""
    return "".join(char for char in value if 32 <= ord(char) <= 126).strip().lower()


def match_rule(title: str, segment: str) -> Optional[MatchRule]:
    """Return the strongest rule under which ``title`` matches ``segment``."""
    title = title.strip()
    segment = segment.strip()
    if title.casefold() == segment.casefold():
        return MatchRule.EXACT

    cleaned_title = clean_title(title)
    cleaned_segment = clean_title(segment)
    # An emptied string carries no information and must not match everything.
    if not cleaned_title or not cleaned_segment:
        return None
    if cleaned_title == cleaned_segment:
        return MatchRule.CLEANED_EXACT
    if cleaned_segment in cleaned_title:
        return MatchRule.CONTAINS
    if cleaned_title in cleaned_segment:
        return MatchRule.CONTAINED
    return None


def split_nested_path(nested_path: str, delimiter: str = NESTED_PATH_DELIMITER) -> list[str]:
    """Split a user path on ``delimiter`` and drop empty, trimmed segments."""
    return [part.strip() for part in nested_path.split(delimiter) if part.strip()]


def top_level_titles(forest: Sequence[NestedElement]) -> list[str]:
    """Titles of the root headings of ``forest``."""
    return [node.title for node in forest if node.is_heading]


def _ranked_candidates(
    nodes: Sequence[NestedElement],
    segment: str,
) -> list[NestedElement]:
    """Heading nodes matching ``segment``, strongest rule first, then document order."""
    candidates = []
    for position, node in enumerate(nodes):
        if node.is_heading:
            rule = match_rule(node.title, segment)
            if rule is not None:
                candidates.append((rule, position, node))
    candidates.sort(key=lambda candidate: (candidate[0], candidate[1]))
    return [node for _, _, node in candidates]


def _search(
    nodes: Sequence[NestedElement],
    segments: Sequence[str],
    permissive: bool,
) -> Optional[NestedElement]:
    """Depth-first search for ``segments`` starting at ``nodes``.

    Runs on an explicit work stack so arbitrarily deep heading chains do not
    exhaust the interpreter stack. Work items are either a finished match
    (a node) or a pending search ``(nodes, segment index)``; they are pushed
    in reverse so they pop in the order a recursive walk would visit them.
    """
    work: list[Union[NestedElement, tuple[Sequence[NestedElement], int]]] = [(nodes, 0)]
    while work:
        item = work.pop()
        if isinstance(item, NestedElement):
            return item

        level_nodes, index = item
        last = index == len(segments) - 1
        pending: list[Union[NestedElement, tuple[Sequence[NestedElement], int]]] = []
        for node in _ranked_candidates(level_nodes, segments[index]):
            pending.append(node if last else (node.children, index + 1))

        if permissive:
            # Retry one level deeper with the full remaining path, even beneath
            # headings that did not match the head segment.
            pending.extend((node.children, index) for node in level_nodes if node.children)

        work.extend(reversed(pending))

    return None


# ==============================================================================
# RESOLVERS
# ==============================================================================


def resolve_nested_path(
    forest: Sequence[NestedElement],
    segments: Sequence[str],
    permissive: bool = False,
) -> Resolution:
    """Resolve a sequence of heading segments to a node of ``forest``.

    Args:
        forest: Root nodes produced by the tree builder.
        segments: Path segments, outermost first.
        permissive: By default the first segment must match a root heading
            and each further segment a direct child heading. When true, a
            path may also start at any depth and skip intermediate headings,
            because every branch is searched again with the full remaining path.

    Returns:
        The matching node, or :class:`PathNotFound` listing the top-level
        heading titles. An empty path is reported as not found.
    """
    cleaned = [segment.strip() for segment in segments if segment.strip()]
    if not cleaned:
        return PathNotFound(target="", available=top_level_titles(forest))

    found = _search(forest, cleaned, permissive)
    if found is None:
        return PathNotFound(
            target=NESTED_PATH_DELIMITER.join(cleaned),
            available=top_level_titles(forest),
        )
    return found


def resolve_heading_target(forest: Sequence[NestedElement], target: str) -> Resolution:
    """Resolve a bare heading title anywhere in ``forest``.

    An exact title match is preferred; a case-insensitive match is the
    fallback. On failure every heading title in the document is listed.
    """
    target = target.strip()
    headings = list(iter_headings(forest))
    for node in headings:
        if node.title == target:
            return node

    folded = target.casefold()
    for node in headings:
        if node.title.casefold() == folded:
            return node

    return PathNotFound(target=target, available=[node.title for node in headings])
