"""History command for viewing past actions.

This module provides the `layoutctl history` command for viewing
folders created and moved by earlier runs.
"""

import json
from datetime import datetime
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from layoutctl.core.state import StateManager
from layoutctl.models.history import HistoryEntry
from layoutctl.utils.formatting import console, print_info

app = typer.Typer(
    name="history",
    help="View history of layout changes.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def history(
    ctx: typer.Context,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum number of entries to show.",
        ),
    ] = 20,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show history of layout changes.

    Examples:
        layoutctl history              # Show last 20 entries
        layoutctl history -n 50        # Show last 50 entries
        layoutctl history --json       # JSON output for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    entries = StateManager().get_history(limit=limit)

    if not entries:
        print_info("No history entries found.")
        return

    if json_output:
        typer.echo(json.dumps([entry.to_dict() for entry in entries], indent=2))
    else:
        _print_table(entries)


def _print_table(entries: list[HistoryEntry]) -> None:
    """Print history as Rich table."""
    table = Table(title="Layout History")
    table.add_column("ID", style="dim")
    table.add_column("Timestamp", style="info")
    table.add_column("Action", style="success")
    table.add_column("Folders", style="text")

    for entry in entries:
        count = len(entry.items)
        names = ", ".join(item.path.rsplit("/", 1)[-1] for item in entry.items[:3])
        if count > 3:
            names += f" (+{count - 3} more)"

        table.add_row(
            entry.id[:8],
            _format_timestamp(entry.timestamp),
            entry.action_type.value,
            escape(names),
        )

    console.print(table)


def _format_timestamp(iso_timestamp: str) -> str:
    """Format ISO timestamp for display (YYYY-MM-DD HH:MM)."""
    dt = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00"))
    return dt.strftime("%Y-%m-%d %H:%M")
