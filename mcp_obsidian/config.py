"""Configuration loading for the Local REST API connection."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import yaml

from mcp_obsidian.constants import (
    CONFIG_PATH,
    CONFIG_PATH_ENV,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    DEFAULT_TIMEOUT,
)
from mcp_obsidian.data_models import ObsidianConfig

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

# Environment variable -> configuration key.
ENVIRONMENT_KEYS = {
    "OBSIDIAN_API_KEY": "api_key",
    "OBSIDIAN_HOST": "host",
    "OBSIDIAN_PORT": "port",
    "OBSIDIAN_PROTOCOL": "protocol",
    "OBSIDIAN_VAULT_PATH": "vault_path",
    "OBSIDIAN_VERIFY_SSL": "verify_ssl",
    "OBSIDIAN_TIMEOUT": "timeout",
}


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Configuration value '{name}' must be a boolean, got '{value}'")


def _parse_port(value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Configuration value 'port' must be an integer, got '{value}'") from exc
    if not 0 < port < 65536:
        raise ValueError(f"Configuration value 'port' must be between 1 and 65535, got {port}")
    return port


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Configuration value 'timeout' must be a number, got '{value}'") from exc
    if timeout <= 0:
        raise ValueError("Configuration value 'timeout' must be positive")
    return timeout


def _read_config_file(config_path: Path) -> dict[str, Any]:
    """Read the optional YAML configuration file.

    The file may either hold the settings at the top level or nest them under
    an ``obsidian`` key.
    """
    if not config_path.exists():
        return {}

    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")

    section = raw_config.get("obsidian", raw_config)
    if not isinstance(section, dict):
        raise ValueError(f"The 'obsidian' section of {config_path} must be a mapping")

    logger.debug("Loaded configuration file %s", config_path)
    return dict(section)


# ==============================================================================
# LOADER
# ==============================================================================


def load_obsidian_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ObsidianConfig:
    """Load connection settings from ``obsidian.yaml`` and the environment.

    Environment variables override file values. ``OBSIDIAN_USE_HTTPS`` is a
    shorthand that selects ``https`` or ``http`` when no protocol is given.

    Args:
        config_path: Path to the YAML file. Defaults to ``$MCP_OBSIDIAN_CONFIG``
            or ``obsidian.yaml`` at the project root. A missing file is fine.
        environ: Environment mapping, ``os.environ`` by default.

    Returns:
        A validated :class:`ObsidianConfig`.

    Raises:
        ValueError: If the API key is missing or a value has the wrong type.
    """
    if environ is None:
        environ = os.environ
    if config_path is None:
        config_path = Path(environ.get(CONFIG_PATH_ENV) or CONFIG_PATH)

    settings = _read_config_file(config_path)
    for env_name, key in ENVIRONMENT_KEYS.items():
        value = environ.get(env_name)
        if value is not None and value.strip():
            settings[key] = value.strip()

    use_https = environ.get("OBSIDIAN_USE_HTTPS")
    if "protocol" not in settings and use_https is not None and use_https.strip():
        settings["protocol"] = "https" if _parse_bool("use_https", use_https) else "http"

    api_key = str(settings.get("api_key") or "").strip()
    if not api_key:
        raise ValueError(
            "OBSIDIAN_API_KEY is required. Copy the key from the Local REST API "
            "plugin settings in Obsidian."
        )

    protocol = str(settings.get("protocol") or DEFAULT_PROTOCOL).strip().lower()
    if protocol not in {"http", "https"}:
        raise ValueError(f"Configuration value 'protocol' must be 'http' or 'https', got '{protocol}'")

    vault_path = settings.get("vault_path")
    return ObsidianConfig(
        api_key=api_key,
        host=str(settings.get("host") or DEFAULT_HOST).strip(),
        port=_parse_port(settings.get("port", DEFAULT_PORT)),
        protocol=protocol,
        vault_path=str(Path(vault_path).expanduser()) if vault_path else None,
        verify_ssl=_parse_bool("verify_ssl", settings.get("verify_ssl", False)),
        timeout=_parse_timeout(settings.get("timeout", DEFAULT_TIMEOUT)),
    )
