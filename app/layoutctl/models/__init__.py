"""Data models for layoutctl.

This module exports the layout file and history models.
"""

from layoutctl.models.history import (
    HistoryActionType,
    HistoryEntry,
    HistoryItem,
    create_history_entry,
)
from layoutctl.models.layout_config import (
    GroupEntry,
    LayoutConfig,
    QuarantineConfig,
    TreeConfig,
    default_layout_config,
)

__all__ = [
    "GroupEntry",
    "HistoryActionType",
    "HistoryEntry",
    "HistoryItem",
    "LayoutConfig",
    "QuarantineConfig",
    "TreeConfig",
    "create_history_entry",
    "default_layout_config",
]
