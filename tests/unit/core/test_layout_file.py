"""Unit tests for layout file I/O.

Tests for loading, saving and defaulting layout.toml files.
"""

from pathlib import Path

import pytest
import typer
from layoutctl.core.layout_file import (
    LayoutFileError,
    LayoutFileNotFoundError,
    LayoutFileParseError,
    LayoutFileValidationError,
    layout_exists,
    load_layout,
    load_layout_or_default,
    require_layout,
    save_layout,
)
from layoutctl.layout.catalog import DEFAULT_SCHEMA
from layoutctl.models.layout_config import default_layout_config

VALID_LAYOUT = """\
base = "MyGame"

[tree]
root = "Assets"
ignore = [".*"]

[quarantine]
group = "Vendor"
folder = "Stray"

[[groups]]
name = "Art"
children = ["Textures"]

[[groups]]
name = "Vendor"
anchor = "root"
"""


class TestLoadLayout:
    """Tests for load_layout function."""

    def test_loads_valid_file(self, tmp_path: Path) -> None:
        """A valid file is parsed into a LayoutConfig."""
        path = tmp_path / "layout.toml"
        path.write_text(VALID_LAYOUT)

        config = load_layout(path)

        assert config.base == "MyGame"
        assert config.tree.ignore == [".*"]
        assert config.tree.marker == ".gitkeep"
        schema = config.to_schema()
        assert schema.is_root_group("Vendor")
        assert schema.quarantine_folder == "Stray"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises LayoutFileNotFoundError."""
        with pytest.raises(LayoutFileNotFoundError):
            load_layout(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises LayoutFileParseError."""
        path = tmp_path / "layout.toml"
        path.write_text("[[groups]\nname = ")

        with pytest.raises(LayoutFileParseError, match="Invalid TOML syntax"):
            load_layout(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise LayoutFileValidationError."""
        path = tmp_path / "layout.toml"
        path.write_text('[[groups]]\nname = "Art"\nanchor = "elsewhere"\n')

        with pytest.raises(LayoutFileValidationError):
            load_layout(path)

    def test_inconsistent_layout(self, tmp_path: Path) -> None:
        """A quarantine group that is not root-anchored is rejected."""
        path = tmp_path / "layout.toml"
        path.write_text('[quarantine]\ngroup = "Art"\n\n[[groups]]\nname = "Art"\n')

        with pytest.raises(LayoutFileValidationError):
            load_layout(path)


class TestLoadLayoutOrDefault:
    """Tests for load_layout_or_default function."""

    def test_default_location_missing(self) -> None:
        """Without a file at the default location the reference layout is used."""
        config = load_layout_or_default()

        assert config == default_layout_config()
        assert config.to_schema() == DEFAULT_SCHEMA

    def test_explicit_path_must_exist(self, tmp_path: Path) -> None:
        """An explicit path is never replaced by the default."""
        with pytest.raises(LayoutFileNotFoundError):
            load_layout_or_default(tmp_path / "missing.toml")


class TestSaveLayout:
    """Tests for save_layout function."""

    def test_save_and_reload(self, tmp_path: Path) -> None:
        """A saved layout loads back unchanged."""
        config = default_layout_config().model_copy(update={"base": "MyGame"})
        path = tmp_path / "sub" / "layout.toml"

        assert save_layout(config, path) == path

        assert load_layout(path) == config
        assert list(path.parent.glob("*.tmp")) == []

    def test_defaults_to_config_dir(self, tmp_path: Path) -> None:
        """Without a path the file lands in the XDG config directory."""
        path = save_layout(default_layout_config())

        assert path == tmp_path / "xdg-config" / "layoutctl" / "layout.toml"
        assert layout_exists()

    def test_base_omitted_when_unset(self, tmp_path: Path) -> None:
        """An unset base is not written to the file."""
        path = save_layout(default_layout_config(), tmp_path / "layout.toml")

        assert "base" not in path.read_text().split("[tree]")[0]

    def test_write_failure(self, tmp_path: Path) -> None:
        """Write errors raise LayoutFileError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        with pytest.raises(LayoutFileError):
            save_layout(default_layout_config(), blocker / "x" / "layout.toml")


class TestRequireLayout:
    """Tests for require_layout function."""

    def test_returns_config(self, tmp_path: Path) -> None:
        """A loadable layout is returned."""
        path = tmp_path / "layout.toml"
        path.write_text(VALID_LAYOUT)

        assert require_layout(path).base == "MyGame"

    def test_exits_on_error(self, tmp_path: Path) -> None:
        """Load errors exit with code 1."""
        path = tmp_path / "layout.toml"
        path.write_text("not [ toml")

        with pytest.raises(typer.Exit) as exc_info:
            require_layout(path)

        assert exc_info.value.exit_code == 1
