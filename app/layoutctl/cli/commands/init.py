"""Init command implementation.

Writes the reference layout to a layout file so it can be customized.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from layoutctl.core.layout_file import LayoutFileError, layout_exists, save_layout
from layoutctl.core.paths import get_layout_path
from layoutctl.layout.errors import InvalidInputError
from layoutctl.layout.resolver import validate_base_name
from layoutctl.models.layout_config import default_layout_config
from layoutctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Write the reference layout file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def init_layout(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Layout file to write (defaults to ~/.config/layoutctl/layout.toml).",
            dir_okay=False,
        ),
    ] = None,
    base: Annotated[
        str | None,
        typer.Option("--base", "-b", help="Default base folder name to store."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing layout file."),
    ] = False,
) -> None:
    """Write the reference layout file.

    The written file declares the built-in layout and can be edited to
    add, remove or re-anchor groups.

    Examples:
        layoutctl init
        layoutctl init --base MyGame
        layoutctl init -o ./layout.toml --force
    """
    if ctx.invoked_subcommand is not None:
        return

    output_path = output or get_layout_path()

    if layout_exists(output_path) and not force:
        print_error(f"Layout file already exists: {escape(str(output_path))}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    config = default_layout_config()
    if base is not None:
        try:
            config.base = validate_base_name(base)
        except InvalidInputError as e:
            print_error(escape(str(e)))
            raise typer.Exit(code=1) from e

    try:
        saved_path = save_layout(config, output_path)
    except LayoutFileError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    root_groups = sum(1 for g in config.groups if g.anchor == "root")
    console.print()
    console.print("[bold]Layout Summary[/bold]")
    console.print(f"  Tree root: [info]{config.tree.root}[/info]")
    console.print(f"  Groups: [bold]{len(config.groups)}[/bold] ({root_groups} at tree root)")
    quarantine = f"{config.quarantine.group}/{config.quarantine.folder}"
    console.print(f"  Quarantine: [muted]{quarantine}[/muted]")
    print_success(f"Layout written to {escape(str(saved_path))}")
