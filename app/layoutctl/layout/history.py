"""Layout history recording.

Records create and remediate runs to the shared history file,
giving an audit trail of folders created and moved.
"""

from pathlib import Path

from layoutctl.core.state import StateManager
from layoutctl.layout.models import CreateSummary, RemediationSummary
from layoutctl.models.history import (
    HistoryActionType,
    HistoryItem,
    create_history_entry,
)


def record_create(
    summary: CreateSummary,
    root: Path,
    base_name: str,
    state: StateManager | None = None,
) -> bool:
    """Record the folders created by a CREATE run.

    Args:
        summary: Result of the create run.
        root: Tree root the layout was applied to.
        base_name: Base folder name used for the run.
        state: Optional StateManager (defaults to the user state dir).

    Returns:
        True if an entry was written, False if nothing was created.
    """
    if not summary.created:
        return False

    entry = create_history_entry(
        action_type=HistoryActionType.CREATE,
        items=[HistoryItem(path=p.as_posix()) for p in summary.created],
        metadata={"root": root.as_posix(), "base": base_name, "command": "layoutctl create"},
    )
    (state or StateManager()).record_action(entry)
    return True


def record_remediation(
    summary: RemediationSummary,
    root: Path,
    base_name: str,
    state: StateManager | None = None,
) -> bool:
    """Record the folders moved by a REMEDIATE run.

    Only successful moves are recorded.

    Args:
        summary: Result of the remediate run.
        root: Tree root the layout was applied to.
        base_name: Base folder name used for the run.
        state: Optional StateManager (defaults to the user state dir).

    Returns:
        True if an entry was written, False if nothing was moved.
    """
    if not summary.moved:
        return False

    entry = create_history_entry(
        action_type=HistoryActionType.REMEDIATE,
        items=[
            HistoryItem(path=r.source.as_posix(), destination=r.destination.as_posix())
            for r in summary.moved
        ],
        metadata={
            "root": root.as_posix(),
            "base": base_name,
            "command": "layoutctl remediate",
        },
    )
    (state or StateManager()).record_action(entry)
    return True
