"""Base Pydantic models for MCP tool input validation.

Base Models:
- BaseFileInput: Common validation for file paths relative to the vault root
- clean_vault_path: Shared path check, also used for directory inputs
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


def clean_vault_path(value: str, kind: str = "File path") -> str:
    """Validate a vault-relative path and strip surrounding whitespace.

    Raises:
        ValueError: On empty paths, absolute paths, or ``.``/``..`` segments.
    """
    cleaned = value.strip()

    if not cleaned:
        raise ValueError(
            f"{kind} cannot be empty. "
            "Provide a path relative to the vault root like 'Projects/Plan.md'."
        )

    if cleaned.startswith("/"):
        raise ValueError(
            f"{kind} must be relative to the vault root. "
            "Do not start with '/'. "
            f"Invalid path: '{cleaned}'"
        )

    parts = cleaned.rstrip("/").split("/")
    if any(part in {".", ".."} for part in parts):
        raise ValueError(
            f"{kind} cannot contain '.' or '..' path segments. "
            f"Invalid path: '{cleaned}'"
        )

    return cleaned


class BaseFileInput(BaseModel):
    """Base model for operations on a single vault file.

    Unlike heading or block targets, the file path is passed through to the
    Local REST API as-is, so it must include the ``.md`` extension.
    """

    filepath: str = Field(
        min_length=1,
        description=(
            "Path to the file relative to the vault root, including the extension. "
            "Examples: 'Daily Notes/2025-10-27.md', 'Projects/Plan.md'."
        ),
        examples=["Daily Notes/2025-10-27.md", "Projects/Plan.md", "README.md"],
    )

    @field_validator("filepath")
    @classmethod
    def validate_filepath(cls, v: str) -> str:
        return clean_vault_path(v)
