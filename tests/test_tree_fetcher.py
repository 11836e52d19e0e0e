from __future__ import annotations

import pytest

from conftest import OWNER, REPO
from github_tree.domain.entities import TreeSettings
from github_tree.domain.exceptions import RepositoryNotFoundError
from github_tree.services.tree_fetcher import child_path, print_tree, walk


def _collect(fetcher, max_depth: int, path: str = "") -> list[str]:
    lines: list[str] = []
    print_tree(fetcher, TreeSettings(OWNER, REPO, path, max_depth), lines.append)
    return lines


def test_depth_one_lists_root_without_recursing(make_api, make_adapter):
    api = make_api({"": [("A", "dir"), ("B", "file")], "A": [("C", "file")]})

    lines = _collect(make_adapter(api), max_depth=1)

    assert lines == ["├── A", "└── B"]
    assert api.requested == [""]


def test_depth_two_propagates_continuation_prefix(make_api, make_adapter):
    api = make_api({"": [("A", "dir"), ("B", "file")], "A": [("C", "file")]})

    lines = _collect(make_adapter(api), max_depth=2)

    assert lines == ["├── A", "│   └── C", "└── B"]


def test_last_directory_uses_blank_continuation(make_api, make_adapter):
    api = make_api({"": [("B", "file"), ("A", "dir")], "A": [("C", "file"), ("D", "file")]})

    lines = _collect(make_adapter(api), max_depth=2)

    assert lines == ["├── B", "└── A", "    ├── C", "    └── D"]


def test_preorder_completes_subtree_before_next_sibling(make_api, make_adapter):
    api = make_api(
        {
            "": [("src", "dir"), ("docs", "dir"), ("setup.py", "file")],
            "src": [("pkg", "dir")],
            "src/pkg": [("core.py", "file")],
            "docs": [("index.md", "file")],
        }
    )

    lines = _collect(make_adapter(api), max_depth=3)

    assert lines == [
        "├── src",
        "│   └── pkg",
        "│       └── core.py",
        "├── docs",
        "│   └── index.md",
        "└── setup.py",
    ]
    assert api.requested == ["", "src", "src/pkg", "docs"]


def test_api_order_is_kept(make_api, make_adapter):
    api = make_api({"": [("zeta", "file"), ("alpha", "file")]})

    assert _collect(make_adapter(api), max_depth=1) == ["├── zeta", "└── alpha"]


def test_starting_path_is_used_for_children(make_api, make_adapter):
    api = make_api({"lib": [("util", "dir")], "lib/util": [("x.py", "file")]})

    lines = _collect(make_adapter(api), max_depth=2, path="lib")

    assert lines == ["└── util", "    └── x.py"]
    assert api.requested == ["lib", "lib/util"]


def test_other_entry_types_are_skipped_but_count_for_last(make_api, make_adapter):
    api = make_api({"": [("a.txt", "file"), ("link", "symlink")]})

    assert _collect(make_adapter(api), max_depth=1) == ["├── a.txt"]


@pytest.mark.parametrize("max_depth", [1, 2, 3, 4, 6])
def test_requests_never_exceed_depth_bound(make_api, make_adapter, max_depth):
    # A chain d1/d2/d3/d4/d5, each holding the next directory and one file.
    listings = {}
    path = ""
    for n in range(1, 6):
        listings[path] = [(f"d{n}", "dir"), ("f.txt", "file")]
        path = child_path(path, f"d{n}")
    listings[path] = [("leaf.txt", "file")]
    api = make_api(listings)

    _collect(make_adapter(api), max_depth=max_depth)

    assert len(api.requested) == min(max_depth, 6)


def test_level_beyond_max_depth_is_a_noop(make_api, make_adapter):
    api = make_api({"": [("a", "file")]})
    lines: list[str] = []

    walk(make_adapter(api), lines.append, OWNER, REPO, "", level=3, max_depth=2)

    assert lines == []
    assert api.requested == []


def test_failure_keeps_lines_already_written(make_api, make_adapter):
    api = make_api({"": [("A", "dir"), ("B", "dir")], "A": [("x", "file")]})
    lines: list[str] = []

    with pytest.raises(RepositoryNotFoundError):
        print_tree(make_adapter(api), TreeSettings(OWNER, REPO, "", 2), lines.append)

    assert lines == ["├── A", "│   └── x", "└── B"]


@pytest.mark.parametrize(
    ("parent", "name", "expected"),
    [("", "A", "A"), ("src", "A", "src/A"), ("/src/", "A", "src/A")],
)
def test_child_path(parent, name, expected):
    assert child_path(parent, name) == expected


def test_directory_names_with_url_characters(make_api, make_adapter):
    api = make_api({"": [("C#", "dir")], "C#": [("Program.cs", "file")]})

    lines = _collect(make_adapter(api), max_depth=2)

    assert lines == ["└── C#", "    └── Program.cs"]
    assert api.requested == ["", "C#"]
