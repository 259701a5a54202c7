"""Data models for connection settings and vault listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from mcp_obsidian.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    DEFAULT_TIMEOUT,
)


@dataclass(frozen=True)
class ObsidianConfig:
    """Normalized settings for reaching the Obsidian Local REST API."""

    api_key: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    protocol: str = DEFAULT_PROTOCOL
    vault_path: Optional[str] = None
    verify_ssl: bool = False
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation without the API key."""
        return {
            "host": self.host,
            "port": self.port,
            "protocol": self.protocol,
            "vault_path": self.vault_path,
            "verify_ssl": self.verify_ssl,
        }


@dataclass(frozen=True)
class FileInfo:
    """One entry of a vault or directory listing."""

    name: str
    path: str
    type: str

    @classmethod
    def from_listing(cls, entry: str) -> "FileInfo":
        """Build from a Local REST API listing entry; directories end with ``/``."""
        if entry.endswith("/"):
            return cls(name=entry.rstrip("/"), path=entry, type="directory")
        return cls(name=entry, path=entry, type="file")

    @property
    def is_directory(self) -> bool:
        return self.type == "directory"

    def as_payload(self) -> dict[str, Any]:
        return {"name": self.name, "path": self.path, "type": self.type}
