"""Tree renderer — box-drawing prefixes for the tree view."""

from __future__ import annotations

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def branch_glyph(is_last: bool) -> str:
    """Connector placed before an entry name (same for files and directories)."""
    return LAST_BRANCH if is_last else BRANCH


def continuation(is_last: bool) -> str:
    """Indent added for the children of a directory."""
    return SPACE if is_last else PIPE


def render_line(indent: str, name: str, is_last: bool) -> str:
    return f"{indent}{branch_glyph(is_last)}{name}"
