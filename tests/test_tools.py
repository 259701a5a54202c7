"""End-to-end checks of the registered MCP tools and the command line."""

import pytest

import mcp_obsidian
from mcp_obsidian import session
from mcp_obsidian.errors import TargetNotFoundError
from mcp_obsidian.models import (
    DiscoverStructureInput,
    GetNestedContentInput,
    PatchContentInput,
    UpdateFrontmatterInput,
)
from mcp_obsidian.server import TRANSPORTS, build_parser
from mcp_obsidian.tools import frontmatter_tools, patch_tools, structure_tools

pytestmark = pytest.mark.integration

EXPECTED_TOOLS = {
    "obsidian_test_connection",
    "obsidian_list_files_in_vault",
    "obsidian_list_files_in_dir",
    "obsidian_get_file_contents",
    "obsidian_put_content",
    "obsidian_append_content",
    "obsidian_delete_file",
    "obsidian_patch_content",
    "obsidian_discover_structure",
    "obsidian_get_nested_content",
    "obsidian_read_content",
    "obsidian_get_headings",
    "obsidian_get_heading_content",
    "obsidian_get_frontmatter",
    "obsidian_set_frontmatter",
    "obsidian_update_frontmatter",
}


@pytest.fixture
def shared_client(client):
    session.set_client(client)
    yield client
    session.set_client(None)


@pytest.mark.asyncio
async def test_all_tools_are_registered():
    tools = await mcp_obsidian.mcp.list_tools()
    assert {tool.name for tool in tools} == EXPECTED_TOOLS


@pytest.mark.asyncio
async def test_discover_then_patch(shared_client, vault):
    vault.files["Plan.md"] = "# Roadmap\n## Q3 🚀\nShip it.\n"

    structure = await structure_tools.obsidian_discover_structure(
        DiscoverStructureInput(filepath="Plan.md")
    )
    target = structure["headings"][-1]
    assert target == "Roadmap -> Q3 🚀"

    result = await patch_tools.obsidian_patch_content(
        PatchContentInput(
            filepath="Plan.md",
            operation="append",
            target_type="heading",
            target=target,
            content="- launch",
        )
    )
    assert result["target"] == "Roadmap::Q3 🚀"
    assert vault.last_request.headers["Target"] == "Roadmap%3A%3AQ3%20%F0%9F%9A%80"


@pytest.mark.asyncio
async def test_nested_content_errors_propagate(shared_client, vault):
    vault.files["Plan.md"] = "# Roadmap\n"
    with pytest.raises(TargetNotFoundError):
        await structure_tools.obsidian_get_nested_content(
            GetNestedContentInput(filepath="Plan.md", nested_path="Budget")
        )


@pytest.mark.asyncio
async def test_update_frontmatter_tool(shared_client, vault):
    vault.files["Plan.md"] = "# Roadmap\n"
    result = await frontmatter_tools.obsidian_update_frontmatter(
        UpdateFrontmatterInput(filepath="Plan.md", frontmatter={"status": "active"})
    )
    assert result["fields_updated"] == ["status"]
    assert vault.files["Plan.md"].startswith("---\nstatus: active\n---")


def test_session_reuses_installed_client(shared_client):
    assert session.get_client() is shared_client
    assert session.get_config() is shared_client.config


class TestCommandLine:
    def test_defaults_to_stdio(self):
        args = build_parser().parse_args([])
        assert TRANSPORTS[args.transport] == "stdio"
        assert args.log_level is None

    def test_http_transport_with_bind_options(self):
        args = build_parser().parse_args(["--http", "--host", "0.0.0.0", "--port", "9000"])
        assert TRANSPORTS[args.transport] == "streamable-http"
        assert (args.host, args.port) == ("0.0.0.0", 9000)

    def test_log_level_is_case_insensitive(self):
        assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_transports_are_mutually_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--stdio", "--sse"])
