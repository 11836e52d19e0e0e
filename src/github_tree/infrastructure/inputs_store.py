"""Persisted last-used inputs (``github-tree-inputs.txt``)."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from github_tree.domain.entities import TreeSettings
from github_tree.domain.exceptions import InputsFileError

logger = logging.getLogger(__name__)


class InputsDocument(BaseModel):
    """On-disk JSON schema of the inputs file."""

    model_config = ConfigDict(populate_by_name=True)

    owner: str = ""
    repo: str = ""
    path: str = ""
    max_depth: int = Field(default=1, alias="maxDepth")

    @classmethod
    def from_settings(cls, settings: TreeSettings) -> InputsDocument:
        return cls(
            owner=settings.owner,
            repo=settings.repo,
            path=settings.path,
            max_depth=settings.max_depth,
        )

    def to_settings(self) -> TreeSettings:
        return TreeSettings(
            owner=self.owner,
            repo=self.repo,
            path=self.path,
            max_depth=self.max_depth,
        )


class InputsStore:
    """Reads and writes the inputs file at a fixed location."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> TreeSettings:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputsFileError(f"Failed to read inputs from {self.path}: {exc}") from exc

        try:
            document = InputsDocument.model_validate_json(raw)
        except ValidationError as exc:
            raise InputsFileError(f"Failed to parse inputs from {self.path}: {exc}") from exc

        logger.debug("Loaded inputs from %s", self.path)
        return document.to_settings()

    def save(self, settings: TreeSettings) -> None:
        """Write *settings* as pretty-printed JSON, creating or truncating the file."""
        payload = InputsDocument.from_settings(settings).model_dump_json(
            by_alias=True, indent=2
        )
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise InputsFileError(
                f"Failed to write inputs to {self.path}: {exc}"
            ) from exc
        logger.debug("Saved inputs to %s", self.path)
