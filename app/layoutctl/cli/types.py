"""Shared option types and helpers for CLI commands.

This module provides the tree options common to the create, validate
and remediate commands and builds the Reconciler they operate on.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.markup import escape

from layoutctl.core.layout_file import require_layout
from layoutctl.layout.errors import InvalidInputError, LayoutError
from layoutctl.layout.reconciler import Reconciler
from layoutctl.models.layout_config import LayoutConfig
from layoutctl.utils.formatting import print_error, print_info

BaseOption = Annotated[
    str | None,
    typer.Option(
        "--base",
        "-b",
        help="Base folder name (defaults to 'base' in the layout file).",
    ),
]

RootOption = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Tree root directory (defaults to the layout's root under the current directory).",
        file_okay=False,
    ),
]

LayoutOption = Annotated[
    Path | None,
    typer.Option(
        "--layout",
        "-l",
        help="Layout file (defaults to ~/.config/layoutctl/layout.toml).",
        dir_okay=False,
    ),
]


@dataclass(frozen=True, slots=True)
class Session:
    """Everything a tree command needs to run.

    Attributes:
        reconciler: Reconciler bound to the tree root and base name.
        config: Layout file the schema was built from.
        root: Tree root directory.
        base_name: Validated base folder name.
    """

    reconciler: Reconciler
    config: LayoutConfig
    root: Path
    base_name: str


def open_session(
    base: str | None,
    root: Path | None,
    layout_path: Path | None,
) -> Session:
    """Load the layout and prepare a Reconciler.

    Args:
        base: Base folder name from the command line.
        root: Tree root from the command line.
        layout_path: Layout file from the command line.

    Returns:
        Session ready for create/validate/remediate.

    Raises:
        typer.Exit: If the layout cannot be loaded or the base name is invalid.
    """
    config = require_layout(layout_path)
    tree_root = root if root is not None else Path.cwd() / config.tree.root

    base_name = base if base is not None else config.base
    if base_name is None:
        print_error("No base folder name given.")
        print_info("Pass --base or set 'base' in the layout file.")
        raise typer.Exit(code=1)

    reconciler = Reconciler(tree_root, config.to_schema())
    try:
        reconciler.set_base_name(base_name)
    except InvalidInputError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    return Session(reconciler=reconciler, config=config, root=tree_root, base_name=base_name)


def fail(error: LayoutError) -> NoReturn:
    """Print a layout error with its kind and exit with code 1."""
    print_error(f"{escape(str(error))} ({error.kind.value})")
    raise typer.Exit(code=1) from error
