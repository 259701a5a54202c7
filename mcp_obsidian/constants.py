"""Module-level constants for the Obsidian MCP server."""

from pathlib import Path

# Configuration
CONFIG_PATH = Path(__file__).parent.parent / "obsidian.yaml"
CONFIG_PATH_ENV = "MCP_OBSIDIAN_CONFIG"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 27124
DEFAULT_PROTOCOL = "https"
DEFAULT_TIMEOUT = 30.0

# Listing
DEFAULT_MAX_DEPTH = 3

# Limits
MAX_FRONTMATTER_BYTES = 10_240

# Logging
LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "MCP_OBSIDIAN_LOG_LEVEL"
