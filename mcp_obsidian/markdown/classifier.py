"""Single-pass classification of markdown text into typed elements.

The classifier is deliberately permissive: it never rejects input. Each line
is tested against an ordered list of boundary rules (first match wins) and
either extends the currently open element or finalizes it and opens a new
one. Worst case, malformed input collapses into a few large paragraphs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mcp_obsidian.markdown.elements import ElementKind, MarkdownElement

FENCE = "```"
FRONTMATTER_DELIMITER = "---"
LIST_MARKERS = ("- ", "* ", "+ ")


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


@dataclass
class _OpenElement:
    """Mutable accumulator for the element currently being built."""

    kind: ElementKind
    line: int
    level: int = 0
    title: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    lines: list[str] = field(default_factory=list)

    def finalize(self) -> MarkdownElement:
        return MarkdownElement(
            kind=self.kind,
            line=self.line,
            level=self.level,
            title=self.title,
            content="\n".join(self.lines).strip(),
            attributes=self.attributes,
        )


def parse_heading_line(stripped: str) -> tuple[int, str]:
    """Split a ``#``-prefixed line into ``(level, title)``.

    ``level`` is the length of the leading run of ``#`` characters; it is not
    capped, matching the permissive classification rules.
    """
    level = len(stripped) - len(stripped.lstrip("#"))
    return level, stripped[level:].strip()


def extract_link_title(line: str) -> str:
    """Return the text between the first ``[`` and the first ``]`` after it."""
    start = line.find("[")
    if start == -1:
        return ""
    end = line.find("]", start + 1)
    if end == -1:
        return ""
    return line[start + 1 : end].strip()


def _is_list_line(stripped: str) -> bool:
    return stripped.startswith(LIST_MARKERS)


def _is_table_line(stripped: str) -> bool:
    return stripped.count("|") >= 2


def _is_blockquote_line(stripped: str) -> bool:
    return stripped.startswith(">")


def _is_link_line(stripped: str) -> bool:
    return "[" in stripped and "]" in stripped


# ==============================================================================
# CLASSIFIER
# ==============================================================================


def classify(text: str) -> list[MarkdownElement]:
    """Classify markdown ``text`` into an ordered list of elements.

    Args:
        text: Raw markdown document contents.

    Returns:
        Elements in document order. Every finalized element has its content
        joined with ``\\n`` and stripped of surrounding whitespace.
    """
    elements: list[MarkdownElement] = []
    current: Optional[_OpenElement] = None
    in_code_block = False
    in_frontmatter = False

    def flush() -> None:
        nonlocal current
        if current is not None:
            elements.append(current.finalize())
            current = None

    def accumulate(kind: ElementKind, line_number: int, value: str) -> None:
        # Lists, tables and blockquotes merge consecutive lines of the same kind.
        nonlocal current
        if current is None or current.kind is not kind:
            flush()
            current = _OpenElement(kind=kind, line=line_number)
        current.lines.append(value)

    for index, raw_line in enumerate(text.split("\n")):
        line_number = index + 1
        line = raw_line.rstrip("\r")
        stripped = line.strip()

        if in_frontmatter:
            if stripped == FRONTMATTER_DELIMITER:
                flush()
                in_frontmatter = False
            else:
                current.lines.append(line)
            continue

        if index == 0 and stripped == FRONTMATTER_DELIMITER:
            current = _OpenElement(kind=ElementKind.FRONTMATTER, line=line_number)
            in_frontmatter = True
            continue

        if stripped.startswith(FENCE):
            flush()
            if in_code_block:
                in_code_block = False
            else:
                language = stripped[len(FENCE) :].strip()
                current = _OpenElement(
                    kind=ElementKind.CODE_BLOCK,
                    line=line_number,
                    attributes={"language": language},
                )
                in_code_block = True
            continue

        if in_code_block:
            current.lines.append(line)
            continue

        if stripped.startswith("#"):
            flush()
            level, title = parse_heading_line(stripped)
            current = _OpenElement(
                kind=ElementKind.HEADING, line=line_number, level=level, title=title
            )
            continue

        if _is_list_line(stripped):
            accumulate(ElementKind.LIST, line_number, stripped)
            continue

        if _is_table_line(stripped):
            accumulate(ElementKind.TABLE, line_number, stripped)
            continue

        if _is_blockquote_line(stripped):
            accumulate(ElementKind.BLOCKQUOTE, line_number, stripped)
            continue

        if _is_link_line(stripped):
            flush()
            kind = ElementKind.IMAGE if "![" in stripped else ElementKind.LINK
            current = _OpenElement(
                kind=kind, line=line_number, title=extract_link_title(stripped)
            )
            continue

        if stripped:
            accumulate(ElementKind.PARAGRAPH, line_number, line)
        elif current is not None and current.kind is ElementKind.PARAGRAPH:
            flush()

    flush()
    return elements
