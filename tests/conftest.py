"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections import Counter
from pathlib import Path

import pytest
from layoutctl.layout.adapter import LocalFilesystem
from layoutctl.layout.reconciler import Reconciler


class CountingFilesystem(LocalFilesystem):
    """LocalFilesystem that counts calls to its mutating operations."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: Counter[str] = Counter()

    def create_directory(self, parent: Path, name: str) -> Path:
        self.calls["create_directory"] += 1
        return super().create_directory(parent, name)

    def write_marker(self, path: Path) -> bool:
        self.calls["write_marker"] += 1
        return super().write_marker(path)

    def move_directory(self, source: Path, destination: Path) -> None:
        self.calls["move_directory"] += 1
        super().move_directory(source, destination)


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config and history files out of the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "xdg-state"))


@pytest.fixture
def tree_root(tmp_path: Path) -> Path:
    """An empty tree root directory named Assets."""
    root = tmp_path / "Assets"
    root.mkdir()
    return root


@pytest.fixture
def counting_fs() -> CountingFilesystem:
    """Filesystem adapter recording how often it mutates the disk."""
    return CountingFilesystem()


@pytest.fixture
def reconciler(tree_root: Path, counting_fs: CountingFilesystem) -> Reconciler:
    """Reconciler on the reference layout with base folder MyGame."""
    rec = Reconciler(tree_root, adapter=counting_fs)
    rec.set_base_name("MyGame")
    return rec
