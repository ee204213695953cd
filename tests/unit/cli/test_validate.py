"""Unit tests for validate command.

Tests for the CLI validate command implementation.
"""

import json
import shutil
from pathlib import Path

import pytest
from layoutctl.cli.main import app
from layoutctl.layout.models import SUCCESS_MESSAGE
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def created_root(tree_root: Path) -> Path:
    """Tree root with the full layout created for MyGame."""
    result = runner.invoke(app, ["create", "-r", str(tree_root), "-b", "MyGame"])
    assert result.exit_code == 0
    return tree_root


def _validate(tree_root: Path, *extra: str):
    return runner.invoke(app, ["validate", "-r", str(tree_root), "-b", "MyGame", *extra])


class TestValidateCommand:
    """Tests for layoutctl validate command."""

    def test_clean_tree(self, created_root: Path) -> None:
        """A clean tree prints the success message and exits 0."""
        result = _validate(created_root)

        assert result.exit_code == 0
        assert SUCCESS_MESSAGE in result.stdout

    def test_drift_exits_nonzero(self, created_root: Path) -> None:
        """Missing and unexpected folders are listed with a summary."""
        shutil.rmtree(created_root / "MyGame" / "Scenes")
        (created_root / "LegacyStuff").mkdir()

        result = _validate(created_root)

        assert result.exit_code == 1
        assert "Assets/MyGame/Scenes" in result.stdout
        assert "Assets/LegacyStuff" in result.stdout
        assert "1 missing" in result.stdout
        assert "1 unexpected" in result.stdout

    def test_json_output(self, created_root: Path) -> None:
        """--json prints the report as JSON."""
        (created_root / "LegacyStuff").mkdir()

        result = _validate(created_root, "--json")

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["clean"] is False
        assert data["unexpected_top_level"] == [(created_root / "LegacyStuff").as_posix()]
        assert data["messages"] == [
            f"Unexpected top-level folder: {(created_root / 'LegacyStuff').as_posix()}"
        ]

    def test_json_clean(self, created_root: Path) -> None:
        """A clean report in JSON carries the success message."""
        result = _validate(created_root, "-j")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["clean"] is True
        assert data["messages"] == [SUCCESS_MESSAGE]

    def test_empty_root(self, tree_root: Path) -> None:
        """An empty root reports the missing base folder."""
        result = _validate(tree_root, "--json")

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["messages"][0] == (
            f"Missing base folder: {(tree_root / 'MyGame').as_posix()}"
        )

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing tree root is an error, not a finding."""
        result = _validate(tmp_path / "Assets")

        assert result.exit_code == 1
        assert "(not_found)" in result.output

    def test_validate_does_not_modify(self, tree_root: Path) -> None:
        """Validation never creates anything."""
        _validate(tree_root)

        assert list(tree_root.iterdir()) == []

    def test_overlong_base_name(self, tree_root: Path) -> None:
        """An unusable base name fails cleanly with the error kind."""
        result = runner.invoke(app, ["validate", "-r", str(tree_root), "-b", "x" * 300])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "(io_failure)" in result.output
