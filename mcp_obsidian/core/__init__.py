"""Core operations behind the MCP tools.

Each operation takes an :class:`~mcp_obsidian.client.ObsidianClient` and
returns a JSON-serializable payload.
"""
