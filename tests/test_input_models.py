"""Tests for Pydantic input models.

This test suite validates the input validation logic for MCP tools,
ensuring that:
- Valid inputs are accepted and normalized correctly
- Invalid inputs raise ValidationError with descriptive messages
- Schema generation produces usable JSON schemas for MCP
"""

import pytest
from pydantic import ValidationError

from mcp_obsidian.models import (
    AppendContentInput,
    BaseFileInput,
    DeleteFileInput,
    DiscoverStructureInput,
    GetHeadingContentInput,
    GetNestedContentInput,
    ListFilesInDirInput,
    PatchContentInput,
    ReadContentInput,
    SetFrontmatterFieldInput,
    UpdateFrontmatterInput,
)


class TestBaseFileInput:
    """Test suite for BaseFileInput path validation."""

    def test_valid_nested_path(self):
        """Test that nested paths are accepted unchanged."""
        model = BaseFileInput(filepath="Daily Notes/2025-10-27.md")
        assert model.filepath == "Daily Notes/2025-10-27.md"

    def test_extension_is_kept(self):
        """Test that the .md extension is passed through to the API."""
        assert BaseFileInput(filepath="Plan.md").filepath == "Plan.md"

    def test_whitespace_is_stripped(self):
        """Test that surrounding whitespace is removed."""
        assert BaseFileInput(filepath="  Plan.md  ").filepath == "Plan.md"

    def test_dots_inside_names_are_allowed(self):
        """Test that dots within a filename are not mistaken for traversal."""
        assert BaseFileInput(filepath="Files/my.config.md").filepath == "Files/my.config.md"

    # Validation Error Tests

    @pytest.mark.parametrize("filepath", ["", "   "])
    def test_empty_path_raises_error(self, filepath):
        """Test that empty or blank paths raise ValidationError."""
        with pytest.raises(ValidationError):
            BaseFileInput(filepath=filepath)

    def test_absolute_path_raises_error(self):
        """Test that paths starting with '/' are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            BaseFileInput(filepath="/etc/passwd")
        assert "relative to the vault root" in str(exc_info.value)

    @pytest.mark.parametrize("filepath", ["../secret.md", "Notes/../../x.md", "./Plan.md"])
    def test_traversal_raises_error(self, filepath):
        """Test that '.' and '..' segments are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            BaseFileInput(filepath=filepath)
        assert "'..'" in str(exc_info.value)


class TestNoteInputs:
    """Test suite for listing and whole-file models."""

    def test_dirpath_trailing_slash_removed(self):
        """Test that directory paths are normalized without a trailing slash."""
        model = ListFilesInDirInput(dirpath="Projects/")
        assert model.dirpath == "Projects"
        assert model.max_depth == 3

    def test_negative_max_depth_raises_error(self):
        """Test that max_depth below zero is rejected."""
        with pytest.raises(ValidationError):
            ListFilesInDirInput(dirpath="Projects", max_depth=-1)

    def test_append_requires_content(self):
        """Test that appending nothing is rejected."""
        with pytest.raises(ValidationError):
            AppendContentInput(filepath="Plan.md", content="")

    def test_delete_defaults_to_unconfirmed(self):
        """Test that deletion must be confirmed explicitly."""
        assert DeleteFileInput(filepath="Plan.md").confirm is False


class TestPatchContentInput:
    """Test suite for PatchContentInput."""

    def test_valid_heading_patch(self):
        """Test that a nested heading target is accepted and stripped."""
        model = PatchContentInput(
            filepath="Plan.md",
            operation="append",
            target_type="heading",
            target="  Roadmap -> Q3 ",
            content="- Ship v2",
        )
        assert model.target == "Roadmap -> Q3"

    def test_invalid_operation_raises_error(self):
        """Test that operations outside append/prepend/replace are rejected."""
        with pytest.raises(ValidationError):
            PatchContentInput(
                filepath="Plan.md",
                operation="insert",
                target_type="heading",
                target="Roadmap",
                content="x",
            )

    def test_invalid_target_type_raises_error(self):
        """Test that unknown target types are rejected."""
        with pytest.raises(ValidationError):
            PatchContentInput(
                filepath="Plan.md",
                operation="append",
                target_type="paragraph",
                target="Roadmap",
                content="x",
            )

    def test_blank_target_raises_error(self):
        """Test that whitespace-only targets are rejected."""
        with pytest.raises(ValidationError):
            PatchContentInput(
                filepath="Plan.md",
                operation="append",
                target_type="block",
                target="   ",
                content="x",
            )


class TestStructureInputs:
    """Test suite for discovery and read models."""

    def test_discover_depth_bounds(self):
        """Test that max_depth accepts 0-6 only."""
        assert DiscoverStructureInput(filepath="Plan.md", max_depth=0).max_depth == 0
        with pytest.raises(ValidationError):
            DiscoverStructureInput(filepath="Plan.md", max_depth=7)

    def test_nested_path_defaults_to_strict(self):
        """Test that permissive matching is opt-in."""
        model = GetNestedContentInput(filepath="Guide.md", nested_path=" Setup -> Install ")
        assert model.nested_path == "Setup -> Install"
        assert model.permissive is False

    def test_read_content_defaults(self):
        """Test that query, level and exact default to match-all."""
        model = ReadContentInput(filepath="Plan.md", selector_type="block")
        assert (model.query, model.level, model.exact) == ("", 0, False)

    def test_read_content_rejects_unknown_selector(self):
        """Test that selector types outside heading/block/frontmatter are rejected."""
        with pytest.raises(ValidationError):
            ReadContentInput(filepath="Plan.md", selector_type="list")

    def test_heading_markers_are_stripped(self):
        """Test that leading # markers are removed from heading queries."""
        assert GetHeadingContentInput(filepath="Plan.md", heading="## Tasks").heading == "Tasks"

    def test_heading_of_only_markers_raises_error(self):
        """Test that '###' alone is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            GetHeadingContentInput(filepath="Plan.md", heading="###")
        assert "Heading cannot be empty" in str(exc_info.value)


class TestFrontmatterInputs:
    """Test suite for frontmatter models."""

    def test_set_field_accepts_list_values(self):
        """Test that non-string values are kept as-is."""
        model = SetFrontmatterFieldInput(filepath="Plan.md", field=" tags ", value=["a", "b"])
        assert model.field == "tags"
        assert model.value == ["a", "b"]

    def test_update_requires_mapping(self):
        """Test that a non-dict frontmatter payload is rejected."""
        with pytest.raises(ValidationError):
            UpdateFrontmatterInput(filepath="Plan.md", frontmatter=["not", "a", "dict"])


class TestSchemaGeneration:
    """Test suite for the JSON schemas FastMCP exposes."""

    def test_patch_schema_lists_enums(self):
        """Test that Literal fields surface as enums in the schema."""
        schema = PatchContentInput.model_json_schema()
        assert schema["properties"]["operation"]["enum"] == ["append", "prepend", "replace"]
        assert set(schema["required"]) == {
            "filepath",
            "operation",
            "target_type",
            "target",
            "content",
        }

    def test_schema_examples_present(self):
        """Test that model-level examples are published."""
        schema = ReadContentInput.model_json_schema()
        assert schema["examples"][0]["selector_type"] == "heading"
