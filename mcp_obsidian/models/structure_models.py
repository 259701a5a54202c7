"""Pydantic input models for structure discovery and structured reads.

This module defines input models for the read side of the markdown engine:
- Discover the patch targets of a note
- Fetch the subtree under a nested heading path
- Read headings, blocks, or frontmatter matching a selector
- List headings and read the text under one heading
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from mcp_obsidian.constants import DEFAULT_MAX_DEPTH

from .base import BaseFileInput


class DiscoverStructureInput(BaseFileInput):
    """Input model for obsidian_discover_structure tool.

    Examples:
        >>> DiscoverStructureInput(filepath="Projects/Plan.md")
        >>> DiscoverStructureInput(filepath="Projects/Plan.md", max_depth=0)
    """

    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        ge=0,
        le=6,
        description=(
            "Deepest heading level whose children are listed. "
            "0 lists every heading regardless of depth."
        ),
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"filepath": "Projects/Plan.md", "max_depth": 3},
                {"filepath": "Reference/Big Note.md", "max_depth": 0},
            ]
        }
    )


class GetNestedContentInput(BaseFileInput):
    """Input model for obsidian_get_nested_content tool.

    Examples:
        >>> GetNestedContentInput(filepath="Guide.md", nested_path="Troubleshooting -> Common Issues")
    """

    nested_path: str = Field(
        min_length=1,
        description=(
            "Heading path with ' -> ' between levels. Matching is case-insensitive "
            "and ignores emoji, and partial titles are accepted."
        ),
        examples=["Troubleshooting -> Common Issues", "Setup"],
    )

    permissive: bool = Field(
        False,
        description=(
            "Also accept paths that start below a root heading or skip "
            "intermediate headings. Off by default so a path means exactly one chain."
        ),
    )

    @field_validator("nested_path")
    @classmethod
    def validate_nested_path(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError(
                "Nested path cannot be empty. "
                "Use headings joined by ' -> ', e.g. 'Setup -> Installation'."
            )
        return cleaned

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"filepath": "Guide.md", "nested_path": "Troubleshooting -> Common Issues"},
            ]
        }
    )


class ReadContentInput(BaseFileInput):
    """Input model for obsidian_read_content tool.

    Examples:
        >>> ReadContentInput(filepath="Plan.md", selector_type="heading", query="Roadmap")
        >>> ReadContentInput(filepath="Plan.md", selector_type="block", query="blk123", exact=True)
    """

    selector_type: Literal["heading", "block", "frontmatter"] = Field(
        description="Element family to read: headings, ID-able blocks, or frontmatter.",
    )

    query: str = Field(
        "",
        description=(
            "Text to match: heading title, block ID or content, or frontmatter "
            "field name or value. Empty matches every element of the family."
        ),
    )

    level: int = Field(
        0,
        ge=0,
        le=6,
        description="Only match headings of this level (1-6). 0 matches any level.",
    )

    exact: bool = Field(
        False,
        description="Require a case-insensitive full match instead of a substring match.",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"filepath": "Plan.md", "selector_type": "heading", "query": "Roadmap"},
                {"filepath": "Plan.md", "selector_type": "frontmatter", "query": "status"},
            ]
        }
    )


class GetHeadingsInput(BaseFileInput):
    """Input model for obsidian_get_headings tool."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"filepath": "Projects/Plan.md"}]}
    )


class GetHeadingContentInput(BaseFileInput):
    """Input model for obsidian_get_heading_content tool.

    Examples:
        >>> GetHeadingContentInput(filepath="Plan.md", heading="roadmap")
        >>> GetHeadingContentInput(filepath="Plan.md", heading="Roadmap", exact=True)
    """

    heading: str = Field(
        min_length=1,
        description="Heading text without # markers. Case-insensitive substring unless exact.",
        examples=["Roadmap", "Meeting Notes"],
    )

    exact: bool = Field(
        False,
        description="Match the heading title verbatim.",
    )

    @field_validator("heading")
    @classmethod
    def validate_heading(cls, v: str) -> str:
        """Strip whitespace and any leading # markers the caller included."""
        cleaned = v.strip().lstrip("#").strip()
        if not cleaned:
            raise ValueError(
                "Heading cannot be empty or just '#' markers. "
                "Provide the heading text (e.g., 'Tasks', 'Summary')."
            )
        return cleaned

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"filepath": "Plan.md", "heading": "Roadmap", "exact": False},
            ]
        }
    )
