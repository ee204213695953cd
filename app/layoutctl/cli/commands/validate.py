"""Validate command implementation.

Compares the folder structure on disk with the layout and reports drift.
"""

import json
from typing import Annotated

import typer

from layoutctl.cli.display import print_report
from layoutctl.cli.types import BaseOption, LayoutOption, RootOption, fail, open_session
from layoutctl.layout.errors import LayoutError

app = typer.Typer(
    help="Validate the current folder structure.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def validate_layout(
    ctx: typer.Context,
    base: BaseOption = None,
    root: RootOption = None,
    layout: LayoutOption = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON for scripting.",
        ),
    ] = False,
) -> None:
    """Validate the current folder structure.

    Reports missing folders and unexpected top-level folders. Exits with
    code 1 when any drift is found.

    Finding kinds:
      missing base: the base folder does not exist
      missing:      a group folder does not exist
      missing sub:  a group's subfolder does not exist
      unexpected:   a top-level folder the layout does not declare

    Examples:
        layoutctl validate --base MyGame
        layoutctl validate -b MyGame --json
    """
    if ctx.invoked_subcommand is not None:
        return

    session = open_session(base, root, layout)

    try:
        report = session.reconciler.run_validate()
    except LayoutError as e:
        fail(e)

    if json_output:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        print_report(report, session.root)

    if not report.is_clean:
        raise typer.Exit(code=1)
