"""Unit tests for history models."""

import json

import pytest
from layoutctl.models.history import (
    HistoryActionType,
    HistoryEntry,
    HistoryItem,
    create_history_entry,
)


class TestHistoryItem:
    """Tests for HistoryItem dataclass."""

    def test_empty_path_rejected(self) -> None:
        """An item needs a path."""
        with pytest.raises(ValueError, match="cannot be empty"):
            HistoryItem(path="")

    def test_to_dict_omits_missing_destination(self) -> None:
        """Create items serialize without a destination key."""
        assert HistoryItem(path="/a").to_dict() == {"path": "/a"}

    def test_from_dict_with_destination(self) -> None:
        """Remediate items keep their destination."""
        item = HistoryItem.from_dict({"path": "/a", "destination": "/q/a"})
        assert item == HistoryItem(path="/a", destination="/q/a")


class TestHistoryEntry:
    """Tests for HistoryEntry dataclass."""

    def test_requires_items(self) -> None:
        """An entry without items is invalid."""
        with pytest.raises(ValueError, match="at least one item"):
            HistoryEntry(
                id="abc123456789",
                timestamp="2026-01-01T00:00:00+00:00",
                action_type=HistoryActionType.CREATE,
                items=(),
            )

    def test_json_line_is_compact(self) -> None:
        """JSON lines contain no newlines or padding."""
        entry = HistoryEntry(
            id="abc123456789",
            timestamp="2026-01-01T00:00:00+00:00",
            action_type=HistoryActionType.REMEDIATE,
            items=(HistoryItem(path="/a", destination="/q/a"),),
            metadata={"base": "MyGame"},
        )

        line = entry.to_json_line()

        assert "\n" not in line
        assert ", " not in line
        assert json.loads(line)["action_type"] == "remediate"
        assert HistoryEntry.from_json_line(line) == entry

    def test_from_dict_unknown_action(self) -> None:
        """Unknown action types raise ValueError."""
        with pytest.raises(ValueError):
            HistoryEntry.from_dict(
                {
                    "id": "x",
                    "timestamp": "t",
                    "action_type": "install",
                    "items": [{"path": "/a"}],
                }
            )

    def test_from_dict_missing_field(self) -> None:
        """Missing required fields raise KeyError."""
        with pytest.raises(KeyError):
            HistoryEntry.from_dict({"id": "x"})


class TestCreateHistoryEntry:
    """Tests for create_history_entry factory."""

    def test_generates_id_and_timestamp(self) -> None:
        """The factory fills in a short id and a UTC timestamp."""
        entry = create_history_entry(HistoryActionType.CREATE, [HistoryItem(path="/a")])

        assert len(entry.id) == 12
        assert entry.timestamp.endswith("+00:00")
        assert entry.metadata == {}

    def test_rejects_empty_items(self) -> None:
        """The factory refuses to build an empty entry."""
        with pytest.raises(ValueError, match="no items"):
            create_history_entry(HistoryActionType.CREATE, [])
