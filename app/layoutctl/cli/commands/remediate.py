"""Remediate command implementation.

Moves unexpected top-level folders into the quarantine folder.
"""

from typing import Annotated

import typer
from rich.markup import escape

from layoutctl.cli.display import (
    create_move_plan_table,
    create_move_results_table,
    print_move_summary,
    print_report,
)
from layoutctl.cli.types import BaseOption, LayoutOption, RootOption, fail, open_session
from layoutctl.layout.errors import LayoutError
from layoutctl.layout.history import record_remediation
from layoutctl.utils.formatting import console, print_info, print_warning

app = typer.Typer(
    help="Move unexpected top-level folders into the quarantine.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def remediate_layout(
    ctx: typer.Context,
    base: BaseOption = None,
    root: RootOption = None,
    layout: LayoutOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be moved."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Move unexpected top-level folders into the quarantine.

    Validates the tree first, then moves every unexpected top-level
    folder into the quarantine folder (Plugins/ThirdParty by default).
    A folder whose destination already exists is left in place and
    reported as failed. The tree is validated again afterwards.

    Examples:
        layoutctl remediate --base MyGame --dry-run
        layoutctl remediate -b MyGame --yes
    """
    if ctx.invoked_subcommand is not None:
        return

    session = open_session(base, root, layout)
    reconciler = session.reconciler

    try:
        report = reconciler.run_validate()
    except LayoutError as e:
        fail(e)

    if not report.unexpected_paths:
        print_info("Nothing to do: no unexpected top-level folders.")
        return

    quarantine = reconciler.resolve().quarantine
    moves = [(source, quarantine / source.name) for source in report.unexpected_paths]
    console.print(create_move_plan_table(moves, session.root, dry_run=dry_run))

    if dry_run:
        print_info(f"Dry-run: {len(moves)} folder(s) would be moved.")
        return

    if not yes:
        confirmed = typer.confirm(
            f"\nProceed with moving {len(moves)} folder(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        summary = reconciler.run_remediate()
    except LayoutError as e:
        fail(e)

    console.print(create_move_results_table(summary.results, session.root))
    print_move_summary(summary.results)

    if summary.report is not None:
        console.print()
        print_report(summary.report, session.root)

    try:
        if record_remediation(summary, session.root, session.base_name):
            print_info("Moves recorded to history.")
    except (OSError, RuntimeError) as e:
        print_warning(f"Could not record to history: {escape(str(e))}")

    if summary.failed:
        raise typer.Exit(code=1)
