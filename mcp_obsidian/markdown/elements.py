"""Data model for classified markdown elements and the heading tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ElementKind(str, Enum):
    """Markdown construct categories recognized by the classifier."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    CODE_BLOCK = "code_block"
    TABLE = "table"
    BLOCKQUOTE = "blockquote"
    LINK = "link"
    IMAGE = "image"
    FRONTMATTER = "frontmatter"


# Element kinds that may carry an Obsidian ``^block-id``.
BLOCK_KINDS = frozenset({ElementKind.CODE_BLOCK, ElementKind.TABLE, ElementKind.PARAGRAPH})


@dataclass(frozen=True)
class MarkdownElement:
    """One classified markdown construct.

    ``level`` is the heading depth (1-6) and ``0`` for every other kind.
    ``title`` holds heading text or the bracketed text of a link/image.
    ``line`` is the 1-based source line where the element begins.
    """

    kind: ElementKind
    line: int
    level: int = 0
    title: str = ""
    content: str = ""
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def is_heading(self) -> bool:
        return self.kind is ElementKind.HEADING

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        payload: dict[str, Any] = {"type": self.kind.value, "line": self.line}
        if self.title:
            payload["title"] = self.title
        if self.level:
            payload["level"] = self.level
        if self.content:
            payload["content"] = self.content
        if self.attributes:
            payload["attributes"] = dict(self.attributes)
        return payload


@dataclass(frozen=True)
class HeadingInfo:
    """A heading found by the flat heading extractor."""

    level: int
    title: str
    content: str
    line: int

    def as_payload(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "title": self.title,
            "content": self.content,
            "line": self.line,
        }


@dataclass
class NestedElement:
    """An element placed in the heading-rooted tree.

    ``path`` is the chain of ``"<kind>:<title>"`` segments from the root
    heading down to (and including) this node. Nodes only reference their
    children; ancestry is recovered by walking down from the roots.
    """

    element: MarkdownElement
    path: tuple[str, ...]
    children: list[NestedElement] = field(default_factory=list)

    @property
    def is_heading(self) -> bool:
        return self.element.is_heading

    @property
    def title(self) -> str:
        return self.element.title

    @property
    def level(self) -> int:
        return self.element.level


def path_segment(element: MarkdownElement) -> str:
    """Return the ``"<kind>:<title>"`` path segment for ``element``."""
    return f"{element.kind.value}:{element.title}"
