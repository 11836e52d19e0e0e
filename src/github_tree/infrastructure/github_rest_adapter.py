"""GitHub REST API adapter — implements the ContentsFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import httpx

from github_tree.domain.entities import Entry, EntryType
from github_tree.domain.exceptions import (
    ContentsDecodeError,
    GitHubApiError,
    GitHubAuthenticationError,
    GitHubRateLimitError,
    RepositoryAccessDeniedError,
    RepositoryNotFoundError,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


class GitHubContentsAdapter:
    """Concrete ContentsFetcher backed by the GitHub v3 Contents API."""

    def __init__(
        self,
        client: httpx.Client,
        token: str,
        base_url: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "github-tree/1.0",
            "Authorization": f"Bearer {token}",
        }

    def list_contents(self, owner: str, repo: str, path: str) -> list[Entry]:
        """GET /repos/{owner}/{repo}/contents/{path} → [Entry]."""
        endpoint = f"/repos/{owner}/{repo}/contents/{quote(path.strip('/'), safe='/')}"
        resp = self._api_get(endpoint)

        try:
            data: Any = resp.json()
        except ValueError as exc:
            raise ContentsDecodeError(
                f"GitHub API returned a non-JSON body for {endpoint}"
            ) from exc

        if not isinstance(data, list):
            raise ContentsDecodeError(
                f"Expected a directory listing for '{path or '/'}' "
                f"in {owner}/{repo}, got a {type(data).__name__}."
            )

        entries: list[Entry] = []
        for item in data:
            if not isinstance(item, dict) or not isinstance(item.get("name"), str):
                raise ContentsDecodeError(
                    f"Malformed entry in listing of '{path or '/'}': {item!r}"
                )
            entries.append(
                Entry(name=item["name"], type=EntryType.parse(str(item.get("type", ""))))
            )
        return entries

    def _api_get(self, endpoint: str) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._base_url}{endpoint}"
        logger.debug("GET %s", url)
        try:
            resp = self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            raise GitHubApiError(f"Network error fetching {url}: {exc}") from exc

        if resp.is_success:
            return resp

        if resp.status_code == 401:
            raise GitHubAuthenticationError(
                "GitHub rejected the access token. Check GITHUB_ACCESS_TOKEN."
            )

        if resp.status_code == 404:
            raise RepositoryNotFoundError(f"Not found: {url}")

        if resp.status_code == 403:
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise GitHubRateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}."
                )
            raise RepositoryAccessDeniedError(
                "Access denied. The token may lack access to this repository."
            )

        if resp.status_code == 429:
            raise GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise GitHubApiError(f"GitHub API returned HTTP {resp.status_code} for {url}")
