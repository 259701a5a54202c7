"""Flat heading extraction used for heading listings and content lookups."""

from __future__ import annotations

from typing import Optional

from mcp_obsidian.markdown.classifier import parse_heading_line
from mcp_obsidian.markdown.elements import HeadingInfo


def extract_headings(text: str) -> list[HeadingInfo]:
    """Return every heading in ``text`` together with the lines beneath it.

    A line is a heading when its stripped form starts with ``#``. Everything up
    to the next heading (or end of input) becomes that heading's content,
    regardless of fences, lists or other constructs. Lines before the first
    heading are ignored.
    """
    headings: list[HeadingInfo] = []
    level = 0
    title = ""
    line_number = 0
    content: Optional[list[str]] = None

    for index, raw_line in enumerate(text.split("\n")):
        line = raw_line.rstrip("\r")
        stripped = line.strip()
        if stripped.startswith("#"):
            if content is not None:
                headings.append(
                    HeadingInfo(level, title, "\n".join(content).strip(), line_number)
                )
            level, title = parse_heading_line(stripped)
            line_number = index + 1
            content = []
        elif content is not None:
            content.append(line)

    if content is not None:
        headings.append(HeadingInfo(level, title, "\n".join(content).strip(), line_number))

    return headings


def find_heading(
    headings: list[HeadingInfo],
    heading: str,
    exact: bool = False,
) -> Optional[HeadingInfo]:
    """Find the first heading matching ``heading``.

    Exact mode compares titles verbatim; otherwise the lookup is a
    case-insensitive substring test.
    """
    needle = heading.lower()
    for info in headings:
        if exact:
            if info.title == heading:
                return info
        elif needle in info.title.lower():
            return info
    return None
