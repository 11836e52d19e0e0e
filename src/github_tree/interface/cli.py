"""Command-line interface — flag parsing and the single top-level error handler."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

import httpx

from github_tree.domain.exceptions import GitHubTreeError, MissingTokenError
from github_tree.infrastructure.config import AppConfig
from github_tree.infrastructure.github_rest_adapter import GitHubContentsAdapter
from github_tree.infrastructure.inputs_store import InputsStore
from github_tree.services.config_resolver import FlagOverrides, resolve
from github_tree.services.tree_fetcher import print_tree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-tree",
        description=(
            "Print a directory tree of a GitHub repository path using the "
            "Contents API. Last-used inputs are saved to github-tree-inputs.txt."
        ),
    )
    parser.add_argument("-O", "--owner", default="", help="Repository owner")
    parser.add_argument("-R", "--repo", default="", help="Repository name")
    parser.add_argument("-P", "--path", default="", help="Path within the repository")
    parser.add_argument(
        "-M",
        "--maxDepth",
        "--max-depth",
        dest="max_depth",
        type=int,
        default=1,
        help="Maximum depth for fetching content (default: 1)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    return parser


def _execute(
    args: argparse.Namespace,
    config: AppConfig,
    stdout: TextIO,
    transport: httpx.BaseTransport | None,
) -> None:
    store = InputsStore(Path.cwd() / config.inputs_file)
    settings = resolve(
        store,
        FlagOverrides(
            owner=args.owner,
            repo=args.repo,
            path=args.path,
            max_depth=args.max_depth,
        ),
    )

    token = config.github_access_token.get_secret_value() if config.github_access_token else ""
    if not token:
        raise MissingTokenError("GitHub access token not found in environment (GITHUB_ACCESS_TOKEN).")

    def write(line: str) -> None:
        print(line, file=stdout, flush=True)

    with httpx.Client(timeout=httpx.Timeout(config.http_timeout), transport=transport) as client:
        adapter = GitHubContentsAdapter(client, token, base_url=config.github_api_url)
        print_tree(adapter, settings, write)


def run(
    args: argparse.Namespace,
    config: AppConfig,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """Run one invocation and return the process exit status.

    Every :class:`GitHubTreeError` is fatal: it is reported on *stderr* and
    turned into status 1.  Lines already written to *stdout* stay there.
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    try:
        _execute(args, config, stdout, transport)
    except GitHubTreeError as exc:
        logger.debug("%s: %s", type(exc).__name__, exc)
        print(f"error: {exc}", file=stderr)
        return 1
    except KeyboardInterrupt:
        print("interrupted", file=stderr)
        return 130
    return 0
