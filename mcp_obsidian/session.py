"""Process-wide client state shared by the MCP tools."""

from typing import Optional

from mcp_obsidian.client import ObsidianClient
from mcp_obsidian.config import load_obsidian_config
from mcp_obsidian.data_models import ObsidianConfig

# Session state storage
_CONFIG: Optional[ObsidianConfig] = None
_CLIENT: Optional[ObsidianClient] = None


def get_config() -> ObsidianConfig:
    """Return the connection settings, loading them on first use.

    Raises:
        ValueError: If the configuration is incomplete (e.g. no API key).
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_obsidian_config()
    return _CONFIG


def get_client() -> ObsidianClient:
    """Return the shared :class:`ObsidianClient`, creating it on first use."""
    global _CLIENT
    if _CLIENT is None:
        _CLIENT = ObsidianClient(get_config())
    return _CLIENT


def set_client(client: Optional[ObsidianClient], config: Optional[ObsidianConfig] = None) -> None:
    """Install (or clear, with ``None``) the shared client and its settings."""
    global _CLIENT, _CONFIG
    _CLIENT = client
    _CONFIG = config if config is not None else (client.config if client else None)
