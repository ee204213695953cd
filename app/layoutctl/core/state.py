"""State management for history tracking.

This module provides the StateManager class for persisting and querying
history entries in a JSONL file format.
"""

import json
import logging
from pathlib import Path

from layoutctl.core.paths import ensure_state_dir, get_history_path
from layoutctl.models.history import HistoryEntry

logger = logging.getLogger(__name__)


class StateManager:
    """Manages history state in JSONL file.

    Storage location: ~/.local/state/layoutctl/history.jsonl

    Each line of the history file is a complete JSON object representing
    a HistoryEntry, which keeps writes append-only.

    Attributes:
        state_dir: Directory containing the history file.
    """

    HISTORY_FILENAME = "history.jsonl"

    def __init__(self, state_dir: Path | None = None) -> None:
        """Initialize StateManager.

        Args:
            state_dir: Optional override for state directory.
                      Default: ~/.local/state/layoutctl
        """
        self._state_dir = state_dir

    @property
    def history_path(self) -> Path:
        """Path to history.jsonl file."""
        if self._state_dir is None:
            return get_history_path()
        return self._state_dir / self.HISTORY_FILENAME

    def record_action(self, entry: HistoryEntry) -> None:
        """Append action to history file.

        Creates file and parent directories if they don't exist.

        Args:
            entry: The history entry to record.

        Raises:
            RuntimeError: If the state directory cannot be created.
            OSError: If the file cannot be written.
        """
        if self._state_dir is None:
            ensure_state_dir()
        else:
            self._state_dir.mkdir(parents=True, exist_ok=True)

        with self.history_path.open(mode="a", encoding="utf-8") as f:
            f.write(entry.to_json_line() + "\n")
            f.flush()

    def get_history(self, limit: int | None = None) -> list[HistoryEntry]:
        """Read history entries, newest first.

        Args:
            limit: Maximum number of entries to return.
                  If None, returns all entries.

        Returns:
            List of HistoryEntry, newest first.
            Returns empty list if file doesn't exist.
        """
        if not self.history_path.exists():
            return []

        entries: list[HistoryEntry] = []

        with self.history_path.open(encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue

                try:
                    entries.append(HistoryEntry.from_json_line(line))
                except (json.JSONDecodeError, KeyError, ValueError) as e:
                    logger.warning("Skipping corrupt history line %d: %s", line_num, str(e))
                    continue

        entries.reverse()

        if limit is not None:
            return entries[:limit]

        return entries
