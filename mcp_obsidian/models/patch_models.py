"""Pydantic input models for targeted patch operations."""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from .base import BaseFileInput


class PatchContentInput(BaseFileInput):
    """Input model for obsidian_patch_content tool.

    Inserts content relative to a heading, a block reference, or a
    frontmatter field. Nested headings use ``" -> "`` (or ``"::"``) between
    levels, exactly as returned by obsidian_discover_structure().

    Examples:
        >>> PatchContentInput(
        ...     filepath="Projects/Plan.md",
        ...     operation="append",
        ...     target_type="heading",
        ...     target="Roadmap -> Q3",
        ...     content="- Ship v2",
        ... )
    """

    operation: Literal["append", "prepend", "replace"] = Field(
        description="Where the content goes relative to the target.",
    )

    target_type: Literal["heading", "block", "frontmatter"] = Field(
        description=(
            "What the target names: a heading path, a block ID (without ^), "
            "or a frontmatter field."
        ),
    )

    target: str = Field(
        min_length=1,
        description=(
            "Heading path ('Roadmap -> Q3'), block ID ('blk123'), or frontmatter "
            "field name ('status'). Heading matching falls back to case-insensitive "
            "and emoji-insensitive comparison."
        ),
        examples=["Roadmap -> Q3", "blk123", "status"],
    )

    content: str = Field(
        description="Markdown to insert or, for replace, the new content.",
    )

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError(
                "Target cannot be empty. "
                "Call obsidian_discover_structure() to list valid targets."
            )
        return cleaned

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "filepath": "Projects/Plan.md",
                    "operation": "append",
                    "target_type": "heading",
                    "target": "Roadmap -> Q3",
                    "content": "- Ship v2",
                },
                {
                    "filepath": "Projects/Plan.md",
                    "operation": "replace",
                    "target_type": "frontmatter",
                    "target": "status",
                    "content": "done",
                },
            ]
        }
    )
