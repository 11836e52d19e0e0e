"""Shared fixtures: a fake Contents API served through ``httpx.MockTransport``."""

from __future__ import annotations

import json
from collections.abc import Iterator

import httpx
import pytest

from github_tree.infrastructure.github_rest_adapter import GitHubContentsAdapter

OWNER = "octo"
REPO = "demo"
_PREFIX = f"/repos/{OWNER}/{REPO}/contents/"


class FakeContentsApi:
    """Serves ``{path: [(name, type), ...]}`` listings and records requested paths."""

    def __init__(self, listings: dict[str, list[tuple[str, str]]]) -> None:
        self.listings = listings
        self.requested: list[str] = []
        self.auth_headers: list[str | None] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.auth_headers.append(request.headers.get("Authorization"))
        assert request.url.path.startswith(_PREFIX), request.url.path
        path = request.url.path[len(_PREFIX):]
        self.requested.append(path)
        if path not in self.listings:
            return httpx.Response(404, json={"message": "Not Found"})
        body = [{"name": name, "type": kind} for name, kind in self.listings[path]]
        return httpx.Response(200, content=json.dumps(body).encode())

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def make_api():
    return FakeContentsApi


@pytest.fixture
def make_adapter() -> Iterator:
    clients: list[httpx.Client] = []

    def _make(api: FakeContentsApi) -> GitHubContentsAdapter:
        client = httpx.Client(transport=api.transport)
        clients.append(client)
        return GitHubContentsAdapter(client, token="test-token")

    yield _make
    for client in clients:
        client.close()
