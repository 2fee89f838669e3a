"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

TreeFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    xdg = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    return xdg


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo root-logger changes (e.g. configure_logging) after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Build a directory tree from relative paths.

    Paths ending in "/" become directories; all others become files
    (parents are created as needed). Returns the tree root.
    """

    def _make(*paths: str, root_name: str = "node_modules") -> Path:
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for rel in paths:
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(f"// {rel}\n")
        return root

    return _make


@pytest.fixture
def package_tree(make_tree: TreeFactory) -> Path:
    """A small node_modules tree with a mix of junk and runtime files."""
    return make_tree(
        "left-pad/package.json",
        "left-pad/index.js",
        "left-pad/README.md",
        "left-pad/LICENSE",
        "left-pad/test/index.test.js",
        "left-pad/test/README.md",
        "left-pad/lib/util.js",
        "left-pad/lib/util.d.ts",
        "@scope/widget/package.json",
        "@scope/widget/dist/widget.js",
        "@scope/widget/docs/api/README.md",
        "@scope/widget/.eslintrc",
        "@scope/widget/.github/workflows/ci.yml",
        "@scope/widget/CHANGELOG.md",
        "@scope/widget/src/widget.coffee",
        "@scope/widget/node_modules/dep/index.js",
        "@scope/widget/node_modules/dep/tests/",
    )
