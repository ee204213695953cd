"""Layout domain models.

This module defines the declarative schema (GroupSpec, LayoutSchema)
and the transient results produced by the reconciler: validation
findings and reports, per-folder move results and run summaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from layoutctl.layout.errors import ErrorKind, InvalidInputError

DEFAULT_MARKER_NAME = ".gitkeep"

SUCCESS_MESSAGE = "All folders are correctly set up!"


def validate_segment(name: str, what: str = "Name") -> str:
    """Check that a name is usable as a single path segment.

    Args:
        name: Candidate directory name.
        what: Label used in the error message.

    Returns:
        The name, unchanged.

    Raises:
        InvalidInputError: If the name is empty, whitespace-only, a
            relative marker ("." or "..") or contains a path separator
            or a null byte.
    """
    if not name or not name.strip():
        msg = f"{what} cannot be empty"
        raise InvalidInputError(msg)
    if "\x00" in name:
        msg = f"{what} cannot contain a null byte"
        raise InvalidInputError(msg)
    if "/" in name or "\\" in name:
        msg = f"{what} cannot contain path separators"
        raise InvalidInputError(msg, name)
    if name in (".", ".."):
        msg = f"{what} cannot be a relative path marker"
        raise InvalidInputError(msg, name)
    return name


@dataclass(frozen=True, slots=True)
class GroupSpec:
    """One top-level category of the layout and its required subfolders.

    Attributes:
        name: Directory name of the group.
        children: Ordered names of the subfolders the group must contain.
    """

    name: str
    children: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate group data after initialization."""
        validate_segment(self.name, "Group name")
        for child in self.children:
            validate_segment(child, f"Subfolder of {self.name}")
        if len(set(self.children)) != len(self.children):
            msg = f"Group {self.name} lists a subfolder more than once"
            raise InvalidInputError(msg)


@dataclass(frozen=True, slots=True)
class LayoutSchema:
    """Declarative target layout.

    Attributes:
        groups: Catalog of groups, in rendering order.
        root_groups: Names of groups anchored at the tree root instead of
            beneath the base directory.
        quarantine_group: Root-anchored group that hosts the quarantine.
        quarantine_folder: Folder inside quarantine_group receiving
            unexpected top-level folders.
        marker_name: File name of the zero-byte marker placed in every
            created directory.
        ignore: fnmatch patterns of root entries never reported as
            unexpected.
    """

    groups: tuple[GroupSpec, ...]
    root_groups: frozenset[str] = frozenset()
    quarantine_group: str = "Plugins"
    quarantine_folder: str = "ThirdParty"
    marker_name: str = DEFAULT_MARKER_NAME
    ignore: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate catalog invariants after initialization."""
        names = [group.name for group in self.groups]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            msg = f"Group names must be unique, duplicated: {', '.join(duplicates)}"
            raise InvalidInputError(msg)

        unknown = sorted(self.root_groups - set(names))
        if unknown:
            msg = f"Root groups not in catalog: {', '.join(unknown)}"
            raise InvalidInputError(msg)

        if self.quarantine_group not in self.root_groups:
            msg = f"Quarantine group must be root-anchored: {self.quarantine_group}"
            raise InvalidInputError(msg)
        validate_segment(self.quarantine_folder, "Quarantine folder")
        validate_segment(self.marker_name, "Marker name")

    def is_root_group(self, name: str) -> bool:
        """Check whether a group is anchored at the tree root."""
        return name in self.root_groups


class FindingKind(str, Enum):
    """Kind of drift reported by validation.

    Attributes:
        MISSING_BASE: The base directory does not exist.
        MISSING_FOLDER: A group anchor does not exist.
        MISSING_SUBFOLDER: A group child does not exist.
        UNEXPECTED: A root-level folder that the layout does not declare.
    """

    MISSING_BASE = "missing_base"
    MISSING_FOLDER = "missing_folder"
    MISSING_SUBFOLDER = "missing_subfolder"
    UNEXPECTED = "unexpected"


_FINDING_LABELS: dict[FindingKind, str] = {
    FindingKind.MISSING_BASE: "Missing base folder",
    FindingKind.MISSING_FOLDER: "Missing folder",
    FindingKind.MISSING_SUBFOLDER: "Missing subfolder",
    FindingKind.UNEXPECTED: "Unexpected top-level folder",
}


@dataclass(frozen=True, slots=True)
class Finding:
    """A single drift entry.

    Attributes:
        kind: What kind of drift this is.
        path: Path the finding is about.
    """

    kind: FindingKind
    path: Path

    @property
    def message(self) -> str:
        """Human-readable rendering of the finding."""
        return f"{_FINDING_LABELS[self.kind]}: {self.path.as_posix()}"

    @property
    def is_missing(self) -> bool:
        return self.kind != FindingKind.UNEXPECTED


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Result of comparing the expected layout with the filesystem.

    A report is rebuilt from scratch on every validation and never merged
    with a previous one.

    Attributes:
        findings: Drift entries in catalog order, unexpected folders last.
    """

    findings: tuple[Finding, ...] = ()

    @property
    def messages(self) -> tuple[str, ...]:
        """Rendered messages, or a single success message when clean."""
        if not self.findings:
            return (SUCCESS_MESSAGE,)
        return tuple(f.message for f in self.findings)

    @property
    def missing(self) -> tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.is_missing)

    @property
    def unexpected_paths(self) -> tuple[Path, ...]:
        return tuple(f.path for f in self.findings if f.kind == FindingKind.UNEXPECTED)

    @property
    def unexpected_top_level(self) -> tuple[str, ...]:
        """Unexpected root-level folders as POSIX path strings."""
        return tuple(p.as_posix() for p in self.unexpected_paths)

    @property
    def is_clean(self) -> bool:
        return not self.findings

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the report.
        """
        return {
            "clean": self.is_clean,
            "messages": list(self.messages),
            "findings": [
                {"kind": f.kind.value, "path": f.path.as_posix()} for f in self.findings
            ],
            "unexpected_top_level": list(self.unexpected_top_level),
        }


@dataclass(frozen=True, slots=True)
class CreateSummary:
    """What a CREATE run changed on disk.

    Attributes:
        created: Directories that did not exist and were created.
        markers: Marker files that were written.
    """

    created: tuple[Path, ...] = ()
    markers: tuple[Path, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.created or self.markers)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Result of relocating one unexpected folder into the quarantine.

    Attributes:
        source: Folder that was to be moved.
        destination: Target path inside the quarantine.
        success: Whether the folder was relocated.
        error: Error message if the move failed, None otherwise.
        kind: Error category if the move failed, None otherwise.
    """

    source: Path
    destination: Path
    success: bool
    error: str | None = None
    kind: ErrorKind | None = None


@dataclass(frozen=True, slots=True)
class RemediationSummary:
    """Outcome of a REMEDIATE run.

    Attributes:
        results: One MoveResult per unexpected folder, in report order.
        report: Validation report refreshed after the moves (the last
            report unchanged when there was nothing to do).
        quarantine: Quarantine directory, None when nothing was done.
        nothing_to_do: True when there were no unexpected folders.
    """

    results: tuple[MoveResult, ...] = ()
    report: ValidationReport | None = None
    quarantine: Path | None = None
    nothing_to_do: bool = False

    @property
    def moved(self) -> tuple[MoveResult, ...]:
        return tuple(r for r in self.results if r.success)

    @property
    def failed(self) -> tuple[MoveResult, ...]:
        return tuple(r for r in self.results if not r.success)
