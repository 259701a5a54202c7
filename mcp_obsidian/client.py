"""Async HTTP client for the Obsidian Local REST API plugin."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from mcp_obsidian.data_models import FileInfo, ObsidianConfig
from mcp_obsidian.errors import ObsidianAPIError, ObsidianError
from mcp_obsidian.markdown.targets import WIRE_DELIMITER


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _vault_endpoint(path: str, directory: bool = False) -> str:
    """Build a ``/vault/...`` endpoint with the path URL-escaped."""
    escaped = quote(path.strip("/"), safe="/")
    if directory:
        return f"/vault/{escaped}/" if escaped else "/vault/"
    return f"/vault/{escaped}"


def _error_from_response(response: httpx.Response) -> ObsidianAPIError:
    """Translate an error response, preferring the API's JSON error body."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and "message" in body:
        return ObsidianAPIError(
            status_code=response.status_code,
            message=str(body["message"]),
            error_code=body.get("errorCode"),
        )
    return ObsidianAPIError(status_code=response.status_code, message=response.text)


def _listing(payload: Any) -> list[FileInfo]:
    files = payload.get("files", []) if isinstance(payload, dict) else []
    return [FileInfo.from_listing(entry) for entry in files]


# ==============================================================================
# CLIENT
# ==============================================================================


class ObsidianClient:
    """Thin async wrapper around the Local REST API.

    Args:
        config: Connection settings.
        transport: Optional httpx transport, used by tests to fake the API.
        logger: Logger for request tracing; the module logger by default.
    """

    def __init__(
        self,
        config: ObsidianConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers={"Authorization": f"Bearer {config.api_key}"},
            timeout=config.timeout,
            verify=config.verify_ssl,
            transport=transport,
        )

    async def __aenter__(self) -> "ObsidianClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        content: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        self.logger.debug("%s %s", method, endpoint)
        try:
            response = await self._client.request(
                method,
                endpoint,
                content=content.encode("utf-8") if content is not None else None,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise ObsidianError(
                f"Request to Obsidian at {self.config.base_url} failed: {exc}"
            ) from exc

        if response.status_code >= 400:
            error = _error_from_response(response)
            self.logger.warning("%s %s failed: %s", method, endpoint, error)
            raise error
        return response

    # ------------------------------------------------------------------
    # Vault files
    # ------------------------------------------------------------------

    async def test_connection(self) -> None:
        """Raise unless the API answers an authenticated vault listing."""
        await self._request("GET", "/vault/")

    async def list_files_in_vault(self) -> list[FileInfo]:
        response = await self._request("GET", "/vault/")
        return _listing(response.json())

    async def list_files_in_dir(self, dirpath: str) -> list[FileInfo]:
        response = await self._request("GET", _vault_endpoint(dirpath, directory=True))
        return _listing(response.json())

    async def get_file_contents(self, filepath: str) -> str:
        response = await self._request(
            "GET", _vault_endpoint(filepath), headers={"Accept": "text/markdown"}
        )
        return response.text

    async def put_content(self, filepath: str, content: str) -> None:
        """Create or overwrite a file."""
        await self._request(
            "PUT",
            _vault_endpoint(filepath),
            content=content,
            headers={"Content-Type": "text/markdown"},
        )

    async def append_content(self, filepath: str, content: str) -> None:
        """Append to a file, creating it when missing."""
        await self._request(
            "POST",
            _vault_endpoint(filepath),
            content=content,
            headers={"Content-Type": "text/markdown"},
        )

    async def delete_file(self, filepath: str) -> None:
        await self._request("DELETE", _vault_endpoint(filepath))

    # ------------------------------------------------------------------
    # Targeted edits
    # ------------------------------------------------------------------

    async def patch_content(
        self,
        filepath: str,
        operation: str,
        target_type: str,
        target: str,
        content: str,
    ) -> None:
        """Insert ``content`` relative to a heading, block or frontmatter target.

        Heading targets must already be in ``::`` wire form. The target is
        URL-encoded because headings may contain characters that are not
        valid in HTTP header values.
        """
        headers = {
            "Content-Type": "text/markdown",
            "Operation": operation,
            "Target-Type": target_type,
            "Target": quote(target, safe=""),
            "Trim-Target-Whitespace": "true",
        }
        if target_type == "heading" and WIRE_DELIMITER in target:
            headers["Target-Delimiter"] = WIRE_DELIMITER

        await self._request("PATCH", _vault_endpoint(filepath), content=content, headers=headers)

    async def set_frontmatter_field(self, filepath: str, field: str, value: Any) -> None:
        """Replace one frontmatter field, creating it when missing."""
        headers = {
            "Content-Type": "application/json",
            "Operation": "replace",
            "Target-Type": "frontmatter",
            "Target": quote(field, safe=""),
            "Create-Target-If-Missing": "true",
        }
        await self._request(
            "PATCH", _vault_endpoint(filepath), content=json.dumps(value), headers=headers
        )
