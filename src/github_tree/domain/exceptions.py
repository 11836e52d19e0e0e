"""Domain exception hierarchy.

Every failure in this tool is fatal.  Inner layers raise these; the CLI
entry point is the only place that turns them into an exit status.
"""

from __future__ import annotations


class GitHubTreeError(Exception):
    """Base exception for the entire application."""


# ── Inputs / settings ───────────────────────────────────────────────────────


class MissingRepositoryError(GitHubTreeError):
    """Owner or repository name is empty after merging flags and stored inputs."""


class InputsFileError(GitHubTreeError):
    """The persisted inputs file could not be read, parsed or written."""


class ConfigurationError(GitHubTreeError):
    """Environment / ``.env`` configuration failed validation."""


class MissingTokenError(GitHubTreeError):
    """``GITHUB_ACCESS_TOKEN`` is not set."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class GitHubApiError(GitHubTreeError):
    """Transport failure or unexpected HTTP status from the Contents API."""


class GitHubAuthenticationError(GitHubApiError):
    """The bearer token was rejected (401)."""


class RepositoryNotFoundError(GitHubApiError):
    """The repository or path does not exist (404)."""


class RepositoryAccessDeniedError(GitHubApiError):
    """Access to the repository was denied (403)."""


class GitHubRateLimitError(GitHubApiError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class ContentsDecodeError(GitHubApiError):
    """The response body is not a JSON array of ``{name, type}`` objects."""
