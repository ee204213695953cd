"""Layout file I/O operations.

This module provides functions for loading and saving layout files
in TOML format with proper validation using Pydantic models.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from layoutctl.core.paths import get_layout_path
from layoutctl.models.layout_config import LayoutConfig, default_layout_config


class LayoutFileError(Exception):
    """Base exception for layout file errors."""


class LayoutFileNotFoundError(LayoutFileError):
    """Raised when the layout file is not found."""


class LayoutFileParseError(LayoutFileError):
    """Raised when the layout file cannot be parsed."""


class LayoutFileValidationError(LayoutFileError):
    """Raised when the layout file content is invalid."""


def load_layout(path: Path | None = None) -> LayoutConfig:
    """Load and validate a layout from a TOML file.

    Args:
        path: Path to the layout file. If None, uses default layout path.

    Returns:
        Validated LayoutConfig object.

    Raises:
        LayoutFileNotFoundError: If the layout file doesn't exist.
        LayoutFileParseError: If the TOML syntax is invalid.
        LayoutFileValidationError: If the content doesn't match the schema.
    """
    layout_path = path or get_layout_path()

    if not layout_path.exists():
        raise LayoutFileNotFoundError(f"Layout file not found: {layout_path}")

    try:
        with open(layout_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise LayoutFileParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise LayoutFileError(f"Failed to read layout file: {e}") from e

    try:
        return LayoutConfig.model_validate(data)
    except ValidationError as e:
        raise LayoutFileValidationError(f"Invalid layout content: {e}") from e


def load_layout_or_default(path: Path | None = None) -> LayoutConfig:
    """Load the layout file, falling back to the reference catalog.

    The fallback only applies to the default location; an explicitly
    given path must exist.

    Args:
        path: Explicit layout file path, or None for the default location.

    Returns:
        LayoutConfig from disk or the built-in reference layout.

    Raises:
        LayoutFileError: If the file exists but cannot be loaded, or an
            explicit path does not exist.
    """
    if path is None and not layout_exists():
        return default_layout_config()
    return load_layout(path)


def save_layout(config: LayoutConfig, path: Path | None = None) -> Path:
    """Save a layout to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.

    Args:
        config: The LayoutConfig object to save.
        path: Path to save the layout. If None, uses default layout path.

    Returns:
        Path where the layout was saved.

    Raises:
        LayoutFileError: If the file cannot be written.
    """
    layout_path = path or get_layout_path()
    data = _layout_to_dict(config)

    tmp_path: Path | None = None
    try:
        layout_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=layout_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(layout_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise LayoutFileError(f"Failed to write layout file: {e}") from e

    return layout_path


def layout_exists(path: Path | None = None) -> bool:
    """Check if a layout file exists.

    Args:
        path: Path to check. If None, uses default layout path.

    Returns:
        True if the layout file exists, False otherwise.
    """
    layout_path = path or get_layout_path()
    return layout_path.exists()


def require_layout(layout_path: Path | None = None) -> LayoutConfig:
    """Load the layout or exit with a helpful error message.

    Args:
        layout_path: Optional custom layout path.

    Returns:
        Loaded and validated LayoutConfig.

    Raises:
        typer.Exit: If the layout cannot be loaded.
    """
    import typer
    from rich.markup import escape

    from layoutctl.utils.formatting import print_error, print_info

    try:
        return load_layout_or_default(layout_path)
    except LayoutFileNotFoundError as e:
        print_error(escape(str(e)))
        print_info("Run 'layoutctl init' to write the reference layout.")
        raise typer.Exit(code=1) from e
    except LayoutFileError as e:
        print_error(f"Failed to load layout: {escape(str(e))}")
        raise typer.Exit(code=1) from e


def _layout_to_dict(config: LayoutConfig) -> dict[str, Any]:
    """Convert a LayoutConfig to a dictionary suitable for TOML serialization.

    Args:
        config: The LayoutConfig object to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, Any] = {}
    if config.base:
        result["base"] = config.base
    result["tree"] = {
        "root": config.tree.root,
        "marker": config.tree.marker,
        "ignore": list(config.tree.ignore),
    }
    result["quarantine"] = {
        "group": config.quarantine.group,
        "folder": config.quarantine.folder,
    }
    result["groups"] = [
        {"name": g.name, "children": list(g.children), "anchor": g.anchor} for g in config.groups
    ]
    return result
