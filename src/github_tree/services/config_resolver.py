"""Config resolver — merges command-line flags with the persisted inputs file.

Flags that are non-empty replace stored ``owner`` / ``repo`` / ``path``.
``max_depth`` is always taken from the flag (default 1), so a depth is never
remembered across runs unless it is passed again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from github_tree.domain.entities import TreeSettings
from github_tree.domain.exceptions import MissingRepositoryError
from github_tree.infrastructure.inputs_store import InputsStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FlagOverrides:
    """Raw flag values; empty strings mean "not given"."""

    owner: str = ""
    repo: str = ""
    path: str = ""
    max_depth: int = 1


def merge(stored: TreeSettings, flags: FlagOverrides) -> TreeSettings:
    """Overlay *flags* onto *stored* without touching the filesystem."""
    return TreeSettings(
        owner=flags.owner or stored.owner,
        repo=flags.repo or stored.repo,
        path=flags.path or stored.path,
        max_depth=flags.max_depth,
    )


def resolve(store: InputsStore, flags: FlagOverrides) -> TreeSettings:
    """Return the settings for this run and persist them to *store*.

    Raises :class:`MissingRepositoryError` before anything is written when
    owner or repo is still empty after the merge.
    """
    if store.exists():
        settings = merge(store.load(), flags)
        logger.debug("Merged flags with stored inputs from %s", store.path)
    else:
        settings = TreeSettings(
            owner=flags.owner,
            repo=flags.repo,
            path=flags.path,
            max_depth=flags.max_depth,
        )
        logger.debug("No inputs file at %s; using flags only", store.path)

    if not settings.owner or not settings.repo:
        raise MissingRepositoryError(
            "Both owner and repo are required. Pass -O/--owner and -R/--repo "
            f"or set them in {store.path.name}."
        )

    store.save(settings)
    return settings
