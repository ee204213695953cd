"""CLI package for layoutctl.

This package contains the Typer application and all subcommands.
"""

from layoutctl.cli.main import app

__all__ = ["app"]
