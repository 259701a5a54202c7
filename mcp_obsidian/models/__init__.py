"""Pydantic input models for MCP tool validation.

Each model is the input schema of one tool: FastMCP derives the JSON schema
from it and rejects malformed calls before any request reaches Obsidian.

Architecture:
- base: BaseFileInput and the shared vault path check
- note_models: Connection check, listings, and whole-file operations
- patch_models: Targeted heading/block/frontmatter edits
- structure_models: Structure discovery and structured reads
- frontmatter_models: Frontmatter read, set, and merge

Usage:
    from mcp_obsidian.models import PatchContentInput, ReadContentInput
"""

from .base import BaseFileInput, clean_vault_path
from .note_models import (
    CheckConnectionInput,
    ListFilesInVaultInput,
    ListFilesInDirInput,
    GetFileContentsInput,
    PutContentInput,
    AppendContentInput,
    DeleteFileInput,
)
from .patch_models import PatchContentInput
from .structure_models import (
    DiscoverStructureInput,
    GetNestedContentInput,
    ReadContentInput,
    GetHeadingsInput,
    GetHeadingContentInput,
)
from .frontmatter_models import (
    GetFrontmatterInput,
    SetFrontmatterFieldInput,
    UpdateFrontmatterInput,
)

__all__ = [
    # Base
    "BaseFileInput",
    "clean_vault_path",
    # Whole-file models
    "CheckConnectionInput",
    "ListFilesInVaultInput",
    "ListFilesInDirInput",
    "GetFileContentsInput",
    "PutContentInput",
    "AppendContentInput",
    "DeleteFileInput",
    # Patch models
    "PatchContentInput",
    # Structure models
    "DiscoverStructureInput",
    "GetNestedContentInput",
    "ReadContentInput",
    "GetHeadingsInput",
    "GetHeadingContentInput",
    # Frontmatter models
    "GetFrontmatterInput",
    "SetFrontmatterFieldInput",
    "UpdateFrontmatterInput",
]
