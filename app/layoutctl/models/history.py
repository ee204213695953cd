"""History entry model for tracking layout changes.

This module defines data structures for recording create and
remediate operations in a history file, giving an audit trail of
what layoutctl changed on disk.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class HistoryActionType(str, Enum):
    """Type of action recorded in history.

    Attributes:
        CREATE: Missing layout folders were created.
        REMEDIATE: Unexpected folders were moved into the quarantine.
    """

    CREATE = "create"
    REMEDIATE = "remediate"


@dataclass(frozen=True, slots=True)
class HistoryItem:
    """Single path affected by an action.

    Attributes:
        path: Folder that was created or moved.
        destination: Where the folder was moved to (remediate only).
    """

    path: str
    destination: str | None = None

    def __post_init__(self) -> None:
        """Validate item data after initialization."""
        if not self.path:
            msg = "History item path cannot be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage."""
        result: dict[str, Any] = {"path": self.path}
        if self.destination is not None:
            result["destination"] = self.destination
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryItem:
        """Deserialize from dictionary.

        Raises:
            KeyError: If required fields are missing.
        """
        return cls(path=data["path"], destination=data.get("destination"))


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Record of a single action in history.

    Attributes:
        id: Unique identifier (12-character hex string from UUID).
        timestamp: When the action occurred (ISO 8601 format with timezone).
        action_type: Type of action (create or remediate).
        items: Tuple of paths affected by this action.
        metadata: Additional context (tree root, base folder, command).
    """

    id: str
    timestamp: str
    action_type: HistoryActionType
    items: tuple[HistoryItem, ...]
    metadata: dict[str, Any] = field(default_factory=lambda: {})

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.id:
            msg = "History entry ID cannot be empty"
            raise ValueError(msg)
        if not self.timestamp:
            msg = "Timestamp cannot be empty"
            raise ValueError(msg)
        if not self.items:
            msg = "History entry must have at least one item"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "action_type": self.action_type.value,
            "items": [item.to_dict() for item in self.items],
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryEntry:
        """Deserialize from dictionary.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If action_type or item data is invalid.
        """
        return cls(
            id=data["id"],
            timestamp=data["timestamp"],
            action_type=HistoryActionType(data["action_type"]),
            items=tuple(HistoryItem.from_dict(item) for item in data["items"]),
            metadata=data.get("metadata", {}),
        )

    def to_json_line(self) -> str:
        """Serialize to JSON line for JSONL storage (no trailing newline)."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json_line(cls, line: str) -> HistoryEntry:
        """Deserialize from JSON line.

        Raises:
            json.JSONDecodeError: If line is not valid JSON.
            KeyError: If required fields are missing.
            ValueError: If data is invalid.
        """
        return cls.from_dict(json.loads(line.strip()))


def create_history_entry(
    action_type: HistoryActionType,
    items: list[HistoryItem],
    metadata: dict[str, Any] | None = None,
) -> HistoryEntry:
    """Factory function to create a new HistoryEntry.

    Automatically generates a unique ID and current timestamp.

    Args:
        action_type: Type of action being recorded.
        items: Paths affected by this action.
        metadata: Optional additional context.

    Returns:
        New HistoryEntry with auto-generated ID and timestamp.

    Raises:
        ValueError: If items list is empty.
    """
    if not items:
        msg = "Cannot create history entry with no items"
        raise ValueError(msg)

    return HistoryEntry(
        id=uuid.uuid4().hex[:12],
        timestamp=datetime.now(UTC).isoformat(),
        action_type=action_type,
        items=tuple(items),
        metadata=metadata or {},
    )
