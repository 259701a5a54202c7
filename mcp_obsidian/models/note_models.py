"""Pydantic input models for whole-file operations.

This module defines input models for listing and file management:
- Test the API connection
- List vault root and directory contents
- Read, overwrite, append to, and delete files
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mcp_obsidian.constants import DEFAULT_MAX_DEPTH

from .base import BaseFileInput, clean_vault_path


class CheckConnectionInput(BaseModel):
    """Input model for obsidian_test_connection tool.

    Takes no parameters; the model keeps every tool on the same calling
    convention.
    """

    model_config = ConfigDict(json_schema_extra={"examples": [{}]})


class ListFilesInVaultInput(BaseModel):
    """Input model for obsidian_list_files_in_vault tool."""

    model_config = ConfigDict(json_schema_extra={"examples": [{}]})


class ListFilesInDirInput(BaseModel):
    """Input model for obsidian_list_files_in_dir tool.

    Examples:
        >>> ListFilesInDirInput(dirpath="Projects")
        >>> ListFilesInDirInput(dirpath="Daily Notes", max_depth=1)
    """

    dirpath: str = Field(
        min_length=1,
        description=(
            "Directory relative to the vault root. "
            "Examples: 'Projects', 'Daily Notes/2025'."
        ),
        examples=["Projects", "Daily Notes/2025"],
    )

    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        ge=0,
        description=(
            "How many directory levels the listing may expand. "
            "Sub-directories report the remaining depth. 0 means unlimited."
        ),
    )

    @field_validator("dirpath")
    @classmethod
    def validate_dirpath(cls, v: str) -> str:
        return clean_vault_path(v, kind="Directory path").rstrip("/")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"dirpath": "Projects", "max_depth": 3},
                {"dirpath": "Daily Notes", "max_depth": 1},
            ]
        }
    )


class GetFileContentsInput(BaseFileInput):
    """Input model for obsidian_get_file_contents tool.

    Returns the raw markdown of one file. Large notes can be expensive;
    prefer obsidian_discover_structure() and obsidian_read_content() when
    only part of a note is needed.
    """

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"filepath": "Projects/Plan.md"}]}
    )


class PutContentInput(BaseFileInput):
    """Input model for obsidian_put_content tool.

    Creates the file or replaces its entire content.

    Examples:
        >>> PutContentInput(filepath="Inbox/Idea.md", content="# Idea\\n\\nDetails...")
    """

    content: str = Field(
        description="Complete markdown content. Replaces everything in the file.",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"filepath": "Inbox/Idea.md", "content": "# Idea\n\nDetails..."},
            ]
        }
    )


class AppendContentInput(BaseFileInput):
    """Input model for obsidian_append_content tool.

    Appends to the end of the file, creating it when missing.
    """

    content: str = Field(
        min_length=1,
        description="Markdown to add at the end of the file.",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"filepath": "Daily Notes/2025-10-27.md", "content": "- Call the bank"},
            ]
        }
    )


class DeleteFileInput(BaseFileInput):
    """Input model for obsidian_delete_file tool.

    Deletion is permanent, so it must be confirmed explicitly.

    Examples:
        >>> DeleteFileInput(filepath="Inbox/Scratch.md", confirm=True)
    """

    confirm: bool = Field(
        False,
        description="Must be true to delete. Guards against accidental deletions.",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"filepath": "Inbox/Scratch.md", "confirm": True},
            ]
        }
    )
