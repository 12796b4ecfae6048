from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory directory source so the renderer can be driven with a
   fixed enumeration order.
3. Filesystem tree builders and logging teardown shared across suites.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from foldertree.domain.tree_models import SPACER_ENTRY, DirectoryEntry, DirectoryListing  # noqa: E402
from foldertree.infra.logging import shutdown_logging  # noqa: E402

# Marks a folder that exists in its parent's listing but cannot be opened
UNREADABLE = object()

VIRTUAL_ROOT = os.path.abspath("virtual-root")


class MemoryScanner:
    """
    Directory source backed by a nested dict.

    Dict values are folders, None values are files and UNREADABLE marks a
    folder whose own listing fails. Insertion order is the enumeration order.
    """

    def __init__(self, tree: Dict[str, Any], root: str = VIRTUAL_ROOT):
        self.tree = tree
        self.root = root
        self.listed: List[str] = []

    def _node(self, path: str) -> Any:
        rel = os.path.relpath(path, self.root)
        node: Any = self.tree
        if rel == ".":
            return node
        for part in rel.split(os.sep):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        return node

    def list_directory(self, path: str, show_files: bool = False) -> DirectoryListing:
        self.listed.append(path)
        node = self._node(path)
        if not isinstance(node, dict):
            return DirectoryListing()

        folders = [DirectoryEntry(k, True) for k, v in node.items() if v is not None]
        files = [DirectoryEntry(k, False) for k, v in node.items() if v is None] if show_files else []
        if files:
            files.append(SPACER_ENTRY)
        return DirectoryListing(folders=tuple(folders), files=tuple(files))

    def has_subfolder(self, path: str) -> bool:
        node = self._node(path)
        return isinstance(node, dict) and any(v is not None for v in node.values())


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def memory_scanner():
    """Factory building a MemoryScanner rooted at VIRTUAL_ROOT."""
    def _make(tree: Dict[str, Any]) -> MemoryScanner:
        return MemoryScanner(tree)
    return _make


@pytest.fixture
def make_tree():
    """
    Materialize a nested dict on disk.

    Dict values become folders, string values become files with that
    content and None values become empty files.
    """
    def _make(base: Path, spec: Dict[str, Any]) -> Path:
        base.mkdir(parents=True, exist_ok=True)
        for name, value in spec.items():
            target = base / name
            if isinstance(value, dict):
                _make(target, value)
            else:
                target.write_text(value or "", encoding="utf-8")
        return base
    return _make


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Detach package handlers so captured streams are never reused."""
    yield
    shutdown_logging()


@pytest.fixture
def virtual_root() -> str:
    """Absolute root path understood by MemoryScanner."""
    return VIRTUAL_ROOT


@pytest.fixture
def unreadable() -> object:
    """Marker for an in-memory folder whose listing fails."""
    return UNREADABLE
