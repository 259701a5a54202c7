"""Pydantic input models for frontmatter operations.

This module defines input models for YAML frontmatter management:
- Read frontmatter metadata
- Set a single field through the API
- Merge several fields into the block
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from .base import BaseFileInput


class GetFrontmatterInput(BaseFileInput):
    """Input model for obsidian_get_frontmatter tool.

    Reads frontmatter metadata without returning the markdown body.
    """

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"filepath": "Projects/Plan.md"}]}
    )


class SetFrontmatterFieldInput(BaseFileInput):
    """Input model for obsidian_set_frontmatter tool.

    Replaces one field, creating it when missing. The value is sent as JSON,
    so lists and numbers keep their types.

    Examples:
        >>> SetFrontmatterFieldInput(filepath="Plan.md", field="status", value="done")
        >>> SetFrontmatterFieldInput(filepath="Plan.md", field="tags", value=["a", "b"])
    """

    field: str = Field(
        min_length=1,
        description="Frontmatter field name. Examples: 'status', 'tags'.",
        examples=["status", "tags"],
    )

    value: Any = Field(
        description="New value: string, number, boolean, list, or mapping.",
    )

    @field_validator("field")
    @classmethod
    def validate_field(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("Frontmatter field name cannot be empty.")
        return cleaned

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"filepath": "Plan.md", "field": "status", "value": "done"},
                {"filepath": "Plan.md", "field": "tags", "value": ["project", "active"]},
            ]
        }
    )


class UpdateFrontmatterInput(BaseFileInput):
    """Input model for obsidian_update_frontmatter tool.

    Merges new fields into the existing frontmatter block. Creates the block
    if missing and preserves fields not mentioned in the update.

    Examples:
        >>> UpdateFrontmatterInput(filepath="Plan.md", frontmatter={"tags": ["python", "mcp"]})
    """

    frontmatter: dict[str, Any] = Field(
        description=(
            "Fields to upsert into frontmatter. "
            "Recursively merges nested dictionaries. "
            "Lists replace existing lists. "
            "Preserves other fields."
        ),
        examples=[
            {"tags": ["python", "mcp"], "status": "active"},
            {"created": "2025-01-01", "author": "Ada"},
        ],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "filepath": "Plan.md",
                    "frontmatter": {"tags": ["python", "mcp"], "status": "active"},
                },
            ]
        }
    )
