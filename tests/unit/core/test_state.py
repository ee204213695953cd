"""Unit tests for StateManager.

Tests for the StateManager class that handles history persistence.
"""

import json
import logging
from pathlib import Path

import pytest
from layoutctl.core.state import StateManager
from layoutctl.models.history import (
    HistoryActionType,
    HistoryEntry,
    HistoryItem,
    create_history_entry,
)


def _entry(path: str, action: HistoryActionType = HistoryActionType.CREATE) -> HistoryEntry:
    return create_history_entry(action_type=action, items=[HistoryItem(path=path)])


class TestStateManagerInit:
    """Tests for StateManager initialization."""

    def test_default_state_dir(self, tmp_path: Path) -> None:
        """StateManager uses the XDG state directory by default."""
        manager = StateManager()
        assert manager.history_path == tmp_path / "xdg-state" / "layoutctl" / "history.jsonl"

    def test_custom_state_dir(self, tmp_path: Path) -> None:
        """history_path follows a custom state directory."""
        manager = StateManager(state_dir=tmp_path)
        assert manager.history_path == tmp_path / "history.jsonl"


class TestRecordAction:
    """Tests for StateManager.record_action method."""

    def test_creates_file_and_directories(self, tmp_path: Path) -> None:
        """record_action creates the history file and its parents."""
        manager = StateManager(state_dir=tmp_path / "nested" / "state")

        manager.record_action(_entry("/a"))

        assert manager.history_path.exists()

    def test_appends_json_lines(self, tmp_path: Path) -> None:
        """Each entry is a single JSON line appended to the file."""
        manager = StateManager(state_dir=tmp_path)

        manager.record_action(_entry("/a"))
        manager.record_action(_entry("/b", HistoryActionType.REMEDIATE))

        lines = manager.history_path.read_text().splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["items"] == [{"path": "/a"}]
        assert json.loads(lines[1])["action_type"] == "remediate"

    def test_default_dir_created(self, tmp_path: Path) -> None:
        """The default state directory is created on first write."""
        StateManager().record_action(_entry("/a"))

        assert (tmp_path / "xdg-state" / "layoutctl" / "history.jsonl").exists()


class TestGetHistory:
    """Tests for StateManager.get_history method."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing history file yields no entries."""
        assert StateManager(state_dir=tmp_path).get_history() == []

    def test_newest_first_and_limit(self, tmp_path: Path) -> None:
        """Entries come back newest first, truncated to limit."""
        manager = StateManager(state_dir=tmp_path)
        for path in ("/1", "/2", "/3"):
            manager.record_action(_entry(path))

        assert [e.items[0].path for e in manager.get_history()] == ["/3", "/2", "/1"]
        assert [e.items[0].path for e in manager.get_history(limit=2)] == ["/3", "/2"]

    def test_skips_corrupt_lines(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Corrupt and blank lines are skipped with a warning."""
        caplog.set_level(logging.WARNING, logger="layoutctl")
        manager = StateManager(state_dir=tmp_path)
        manager.record_action(_entry("/good"))
        with manager.history_path.open("a") as f:
            f.write("not json\n\n")
            f.write('{"id": "x"}\n')

        entries = manager.get_history()

        assert [e.items[0].path for e in entries] == ["/good"]
        assert "Skipping corrupt history line 2" in caplog.text
        assert "Skipping corrupt history line 4" in caplog.text
