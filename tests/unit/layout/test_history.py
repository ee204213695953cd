"""Unit tests for layout history recording."""

from pathlib import Path

from layoutctl.core.state import StateManager
from layoutctl.layout.errors import ErrorKind
from layoutctl.layout.history import record_create, record_remediation
from layoutctl.layout.models import CreateSummary, MoveResult, RemediationSummary
from layoutctl.models.history import HistoryActionType


class TestRecordCreate:
    """Tests for record_create function."""

    def test_records_created_folders(self, tmp_path: Path) -> None:
        """Created folders are written as one CREATE entry."""
        state = StateManager(state_dir=tmp_path / "state")
        root = tmp_path / "Assets"
        summary = CreateSummary(
            created=(root / "MyGame", root / "MyGame" / "Art"),
            markers=(root / "MyGame", root / "MyGame" / "Art"),
        )

        assert record_create(summary, root, "MyGame", state=state) is True

        entries = state.get_history()
        assert len(entries) == 1
        entry = entries[0]
        assert entry.action_type == HistoryActionType.CREATE
        assert [i.path for i in entry.items] == [
            (root / "MyGame").as_posix(),
            (root / "MyGame" / "Art").as_posix(),
        ]
        assert entry.metadata["base"] == "MyGame"
        assert entry.metadata["root"] == root.as_posix()

    def test_nothing_created(self, tmp_path: Path) -> None:
        """A run that only wrote markers records nothing."""
        state = StateManager(state_dir=tmp_path / "state")
        summary = CreateSummary(created=(), markers=(tmp_path / "Assets" / "MyGame",))

        assert record_create(summary, tmp_path / "Assets", "MyGame", state=state) is False
        assert not state.history_path.exists()

    def test_defaults_to_user_state_dir(self, tmp_path: Path) -> None:
        """Without a StateManager the XDG state directory is used."""
        summary = CreateSummary(created=(tmp_path / "Assets" / "MyGame",), markers=())

        record_create(summary, tmp_path / "Assets", "MyGame")

        assert (tmp_path / "xdg-state" / "layoutctl" / "history.jsonl").exists()


class TestRecordRemediation:
    """Tests for record_remediation function."""

    def test_records_successful_moves_only(self, tmp_path: Path) -> None:
        """Failed moves are left out of the entry."""
        state = StateManager(state_dir=tmp_path / "state")
        root = tmp_path / "Assets"
        quarantine = root / "Plugins" / "ThirdParty"
        summary = RemediationSummary(
            results=(
                MoveResult(root / "Legacy", quarantine / "Legacy", success=True),
                MoveResult(
                    root / "Old",
                    quarantine / "Old",
                    success=False,
                    error="Destination already exists",
                    kind=ErrorKind.CONFLICT,
                ),
            ),
            quarantine=quarantine,
        )

        assert record_remediation(summary, root, "MyGame", state=state) is True

        entry = state.get_history()[0]
        assert entry.action_type == HistoryActionType.REMEDIATE
        assert len(entry.items) == 1
        assert entry.items[0].path == (root / "Legacy").as_posix()
        assert entry.items[0].destination == (quarantine / "Legacy").as_posix()

    def test_nothing_moved(self, tmp_path: Path) -> None:
        """A no-op remediation records nothing."""
        state = StateManager(state_dir=tmp_path / "state")

        result = record_remediation(
            RemediationSummary(nothing_to_do=True), tmp_path, "MyGame", state=state
        )

        assert result is False
        assert state.get_history() == []
