"""Tree fetcher — depth-first walk over the Contents API.

Each directory is listed with one request and its subtree is fully printed
before the next sibling is visited, so output order matches a pre-order
traversal of the API listings.
"""

from __future__ import annotations

import logging
from typing import Callable

from github_tree.domain.entities import EntryType, TreeSettings
from github_tree.domain.ports.contents_fetcher import ContentsFetcher
from github_tree.services.tree_renderer import continuation, render_line

logger = logging.getLogger(__name__)

LineWriter = Callable[[str], None]


def child_path(parent: str, name: str) -> str:
    """Join a repository path and an entry name with a single ``/``."""
    parent = parent.strip("/")
    return f"{parent}/{name}" if parent else name


def walk(
    fetcher: ContentsFetcher,
    write: LineWriter,
    owner: str,
    repo: str,
    path: str,
    indent: str = "",
    level: int = 1,
    max_depth: int = 1,
) -> None:
    """Print the listing at *path* and recurse into directories up to *max_depth*."""
    if level > max_depth:
        return

    logger.debug("Listing %s/%s:/%s (level %d of %d)", owner, repo, path, level, max_depth)
    entries = fetcher.list_contents(owner, repo, path)

    for i, entry in enumerate(entries):
        is_last = i == len(entries) - 1
        if entry.type is EntryType.FILE:
            write(render_line(indent, entry.name, is_last))
        elif entry.type is EntryType.DIR:
            write(render_line(indent, entry.name, is_last))
            walk(
                fetcher,
                write,
                owner,
                repo,
                child_path(path, entry.name),
                indent + continuation(is_last),
                level + 1,
                max_depth,
            )
        else:
            logger.debug("Skipping %s (%s)", entry.name, entry.type.value)


def print_tree(fetcher: ContentsFetcher, settings: TreeSettings, write: LineWriter) -> None:
    """Walk the tree described by *settings*, starting at level 1."""
    logger.info("Fetching %s:/%s to depth %d", settings.full_name, settings.path, settings.max_depth)
    walk(
        fetcher,
        write,
        settings.owner,
        settings.repo,
        settings.path,
        max_depth=settings.max_depth,
    )
