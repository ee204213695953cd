"""Create command implementation.

Provisions every folder of the layout that does not exist yet.
"""

import typer
from rich.markup import escape

from layoutctl.cli.display import print_create_summary
from layoutctl.cli.types import BaseOption, LayoutOption, RootOption, fail, open_session
from layoutctl.layout.errors import LayoutError
from layoutctl.layout.history import record_create
from layoutctl.utils.formatting import print_info, print_warning

app = typer.Typer(
    help="Create or update the folder structure.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def create_layout(
    ctx: typer.Context,
    base: BaseOption = None,
    root: RootOption = None,
    layout: LayoutOption = None,
) -> None:
    """Create or update the folder structure.

    Creates the base folder, every group and every subfolder that is
    missing, each with a marker file. Existing folders are left as they
    are, so the command can be re-run safely.

    Examples:
        layoutctl create --base MyGame
        layoutctl create -b MyGame --root ./Assets
    """
    if ctx.invoked_subcommand is not None:
        return

    session = open_session(base, root, layout)

    try:
        summary = session.reconciler.run_create()
    except LayoutError as e:
        fail(e)

    print_create_summary(summary, session.root)

    try:
        if record_create(summary, session.root, session.base_name):
            print_info("Created folders recorded to history.")
    except (OSError, RuntimeError) as e:
        print_warning(f"Could not record to history: {escape(str(e))}")
