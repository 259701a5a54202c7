"""Shared fixtures: an in-memory stand-in for the Local REST API."""

from __future__ import annotations

import json
from urllib.parse import unquote

import httpx
import pytest

from mcp_obsidian.client import ObsidianClient
from mcp_obsidian.data_models import ObsidianConfig


class FakeVault:
    """Serves ``/vault/`` requests from a dict of path -> markdown.

    Every request is recorded so tests can assert on headers and bodies.
    """

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.requests: list[httpx.Request] = []

    def _listing(self, prefix: str) -> list[str]:
        entries: list[str] = []
        for path in sorted(self.files):
            if not path.startswith(prefix):
                continue
            rest = path[len(prefix):]
            head, sep, _ = rest.partition("/")
            entry = f"{head}/" if sep else head
            if entry not in entries:
                entries.append(entry)
        return entries

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.headers.get("Authorization") != "Bearer secret":
            return httpx.Response(401, json={"errorCode": 40101, "message": "Authorization required"})

        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        if not raw_path.startswith("/vault/"):
            return httpx.Response(404, json={"errorCode": 40400, "message": "Not Found"})
        path = unquote(raw_path[len("/vault/"):])

        if request.method == "GET" and (path == "" or path.endswith("/")):
            return httpx.Response(200, json={"files": self._listing(path)})

        if request.method == "GET":
            if path not in self.files:
                return httpx.Response(404, json={"errorCode": 40400, "message": "File does not exist"})
            return httpx.Response(200, text=self.files[path])

        if request.method == "PUT":
            self.files[path] = request.content.decode("utf-8")
            return httpx.Response(204)

        if request.method == "POST":
            self.files[path] = self.files.get(path, "") + request.content.decode("utf-8")
            return httpx.Response(204)

        if request.method == "DELETE":
            if self.files.pop(path, None) is None:
                return httpx.Response(404, json={"errorCode": 40400, "message": "File does not exist"})
            return httpx.Response(204)

        if request.method == "PATCH":
            if path not in self.files:
                return httpx.Response(404, json={"errorCode": 40400, "message": "File does not exist"})
            return httpx.Response(200, text="")

        return httpx.Response(405, json={"errorCode": 40500, "message": "Method not allowed"})

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content.decode("utf-8"))


@pytest.fixture
def config() -> ObsidianConfig:
    return ObsidianConfig(api_key="secret", host="127.0.0.1", port=27124, protocol="https")


@pytest.fixture
def vault() -> FakeVault:
    return FakeVault()


@pytest.fixture
def client(config: ObsidianConfig, vault: FakeVault) -> ObsidianClient:
    return ObsidianClient(config, transport=httpx.MockTransport(vault.handler))
