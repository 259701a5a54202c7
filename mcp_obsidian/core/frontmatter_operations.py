"""YAML frontmatter manipulation operations."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

import frontmatter
import yaml

from mcp_obsidian.client import ObsidianClient
from mcp_obsidian.constants import MAX_FRONTMATTER_BYTES

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split raw note text into frontmatter metadata and body.

    Returns:
        ``(metadata, content)``; metadata is empty when the note has no
        frontmatter block.

    Raises:
        ValueError: If the frontmatter block is not valid YAML.
    """
    if not text:
        return {}, ""

    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Frontmatter contains invalid YAML: {exc}") from exc

    metadata = dict(post.metadata or {})
    content = post.content if post.content is not None else ""
    return metadata, content


def _serialize_frontmatter(metadata: dict[str, Any], content: str) -> str:
    """Render metadata and body back into markdown; empty metadata drops the block."""
    if not metadata:
        return content

    post = frontmatter.Post(content)
    post.metadata.update(metadata)
    return frontmatter.dumps(post)


def _jsonable(value: Any) -> Any:
    """Convert YAML-native values (dates) into JSON-friendly ones."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


_SCALARS = (str, int, float, bool, type(None))


def _to_yaml_value(value: Any, where: str) -> Any:
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_to_yaml_value(item, f"{where}[{index}]") for index, item in enumerate(value)]
    if isinstance(value, Mapping):
        return _yaml_mapping(value, where)
    raise ValueError(
        f"Value at '{where}' has unsupported type '{type(value).__name__}'; "
        "use text, numbers, booleans, dates, lists or mappings."
    )


def _yaml_mapping(mapping: Mapping, where: str = "") -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in mapping.items():
        if not isinstance(key, str) or not key.strip():
            location = f" under '{where}'" if where else ""
            raise ValueError(f"Frontmatter key {key!r}{location} is not a usable name.")
        result[key] = _to_yaml_value(value, f"{where}.{key}" if where else key)
    return result


def _yaml_safe(metadata: Mapping) -> dict[str, Any]:
    """Return a YAML-ready copy of ``metadata``.

    Dates are written as ISO strings. The rendered block has to fit in
    ``MAX_FRONTMATTER_BYTES``.

    Raises:
        ValueError: On a bad key, an unsupported value, or an oversized block.
    """
    if not isinstance(metadata, Mapping):
        raise ValueError("Frontmatter must be a dictionary of key/value pairs.")

    cleaned = _yaml_mapping(metadata)
    try:
        rendered = yaml.safe_dump(cleaned, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as exc:
        raise ValueError(f"Frontmatter could not be rendered as YAML: {exc}") from exc

    size = len(rendered.encode("utf-8"))
    if size > MAX_FRONTMATTER_BYTES:
        raise ValueError(
            f"Frontmatter would take {size} bytes; notes allow at most {MAX_FRONTMATTER_BYTES}."
        )
    return cleaned


def _merge_frontmatter(current: Mapping, updates: Mapping) -> dict[str, Any]:
    """Overlay ``updates`` on ``current``; only mapping-on-mapping recurses."""
    merged = {key: copy.deepcopy(value) for key, value in current.items()}
    for key, value in updates.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = _merge_frontmatter(existing, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged



# ==============================================================================
# FRONTMATTER OPERATIONS
# ==============================================================================


async def get_frontmatter(client: ObsidianClient, filepath: str) -> dict[str, Any]:
    """Read frontmatter metadata of a note.

    Returns:
        Dictionary with filepath, frontmatter, has_frontmatter, and status.
    """
    text = await client.get_file_contents(filepath)
    metadata, _ = _parse_frontmatter(text)
    logger.info("Read frontmatter for '%s' (fields=%s)", filepath, len(metadata))
    return {
        "filepath": filepath,
        "frontmatter": _jsonable(metadata),
        "has_frontmatter": bool(metadata),
        "status": "read",
    }


async def set_frontmatter_field(
    client: ObsidianClient,
    filepath: str,
    field: str,
    value: Any,
) -> dict[str, Any]:
    """Set a single frontmatter field through the API, creating it if missing.

    Raises:
        ValueError: If ``field`` is empty or ``value`` is not YAML-safe.
    """
    field = field.strip()
    if not field:
        raise ValueError("Frontmatter field name cannot be empty.")

    payload = _yaml_safe({field: value})

    await client.set_frontmatter_field(filepath, field, payload[field])
    logger.info("Set frontmatter field '%s' in '%s'", field, filepath)
    return {"filepath": filepath, "field": field, "value": payload[field], "status": "updated"}


async def update_frontmatter(
    client: ObsidianClient,
    filepath: str,
    data: dict[str, Any],
) -> dict[str, Any]:
    """Merge ``data`` into a note's frontmatter and write the note back.

    Nested mappings merge recursively; other values (lists included) replace
    what was there. A note without frontmatter gains a new block.

    Returns:
        Dictionary with filepath, status ("updated" or "unchanged"), and
        fields_updated.

    Raises:
        ValueError: If ``data`` is not a mapping, contains unsupported values,
            or the result is too large.
    """
    if not isinstance(data, dict):
        raise ValueError("Frontmatter update payload must be a dictionary.")

    updates = _yaml_safe(data)

    text = await client.get_file_contents(filepath)
    current, content = _parse_frontmatter(text)
    merged = _merge_frontmatter(current, updates)

    if merged == current:
        logger.info("Frontmatter update skipped for '%s' (no changes detected)", filepath)
        return {"filepath": filepath, "status": "unchanged", "fields_updated": []}

    merged = _yaml_safe(merged)
    await client.put_content(filepath, _serialize_frontmatter(merged, content))

    changed_fields = sorted(updates.keys())
    logger.info(
        "Frontmatter updated for '%s' (fields=%s)",
        filepath,
        ", ".join(changed_fields) or "none",
    )
    return {"filepath": filepath, "status": "updated", "fields_updated": changed_fields}
