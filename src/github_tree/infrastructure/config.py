"""Process configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_tree.domain.exceptions import ConfigurationError

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class AppConfig(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    The per-run tree parameters (owner, repo, path, depth) are not part of
    this; they live in the inputs file handled by
    :mod:`github_tree.infrastructure.inputs_store`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_access_token: SecretStr | None = None
    github_api_url: str = "https://api.github.com"
    inputs_file: str = "github-tree-inputs.txt"
    http_timeout: float | None = None
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            msg = f"Unknown log level '{v}'. Use one of: {', '.join(sorted(_LOG_LEVELS))}."
            raise ValueError(msg)
        return level


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Return the singleton process configuration (cached after first call)."""
    try:
        return AppConfig()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
