"""Port: contents fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from github_tree.domain.entities import Entry


class ContentsFetcher(Protocol):
    """Abstract contract for listing a directory of a GitHub repository."""

    def list_contents(self, owner: str, repo: str, path: str) -> list[Entry]:
        """Return the entries at *path* (repository root when empty), in API order."""
        ...
