"""Layout reconciler.

This module provides the Reconciler class that provisions a layout on
disk (CREATE), compares it against the filesystem (VALIDATE) and moves
unexpected top-level folders into the quarantine (REMEDIATE).
"""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Callable
from pathlib import Path

from layoutctl.layout.adapter import FilesystemAdapter, LocalFilesystem
from layoutctl.layout.catalog import DEFAULT_SCHEMA
from layoutctl.layout.errors import InvalidInputError, LayoutError
from layoutctl.layout.models import (
    CreateSummary,
    Finding,
    FindingKind,
    LayoutSchema,
    MoveResult,
    RemediationSummary,
    ValidationReport,
)
from layoutctl.layout.resolver import ResolvedLayout, resolve, validate_base_name

logger = logging.getLogger(__name__)

# Called after operations that changed the tree, e.g. to refresh an asset index
RefreshHook = Callable[[], None]


class Reconciler:
    """Reconciles a declarative layout with a directory tree.

    Operations are synchronous and not safe for concurrent use; callers
    must serialize them. The base directory name must be set before any
    operation runs.

    Example:
        >>> reconciler = Reconciler(Path("Assets"))
        >>> reconciler.set_base_name("MyGame")
        >>> reconciler.run_create()
        >>> report = reconciler.run_validate()
        >>> if report.unexpected_paths:
        ...     summary = reconciler.run_remediate()
    """

    def __init__(
        self,
        root: Path,
        schema: LayoutSchema | None = None,
        adapter: FilesystemAdapter | None = None,
        refresh: RefreshHook | None = None,
    ) -> None:
        """Initialize the Reconciler.

        Args:
            root: Tree root directory the layout applies to.
            schema: Layout to enforce. Defaults to the reference catalog.
            adapter: Filesystem backend. Defaults to the local disk.
            refresh: Optional hook invoked after the tree was changed.
        """
        self._root = root
        self._schema = schema if schema is not None else DEFAULT_SCHEMA
        self._adapter = (
            adapter if adapter is not None else LocalFilesystem(self._schema.marker_name)
        )
        self._refresh = refresh
        self._base_name: str | None = None
        self._last_report: ValidationReport | None = None

    @property
    def root(self) -> Path:
        return self._root

    @property
    def schema(self) -> LayoutSchema:
        return self._schema

    @property
    def base_name(self) -> str | None:
        return self._base_name

    @property
    def last_report(self) -> ValidationReport | None:
        """Report produced by the most recent validation, if any."""
        return self._last_report

    def set_base_name(self, name: str) -> None:
        """Set the base directory name for subsequent operations.

        Changing the base name discards the previous validation report.

        Raises:
            InvalidInputError: If the name is empty or not a single segment.
        """
        self._base_name = validate_base_name(name)
        self._last_report = None

    def resolve(self) -> ResolvedLayout:
        """Resolve the expected layout for the current base name.

        Raises:
            InvalidInputError: If no base name has been set.
        """
        if self._base_name is None:
            msg = "Base folder name is not set"
            raise InvalidInputError(msg)
        return resolve(self._schema, self._root, self._base_name)

    # =========================================================================
    # CREATE
    # =========================================================================

    def run_create(self) -> CreateSummary:
        """Create every missing directory of the layout.

        Directories are created in catalog order and each receives a
        marker file. Existing directories and markers are left untouched,
        so repeated runs change nothing. The first error aborts the run;
        directories created before it are kept and the refresh
        hook is not called.

        Returns:
            CreateSummary listing created directories and written markers.

        Raises:
            InvalidInputError: If no base name has been set.
            PathNotFoundError: If a parent directory is missing.
            ConflictError: If a file occupies an expected directory path.
            IOFailureError: If a directory or marker cannot be written.
        """
        layout = self.resolve()
        created: list[Path] = []
        markers: list[Path] = []

        def ensure(parent: Path, name: str) -> None:
            path, was_created, marker_written = self._ensure_directory(parent, name)
            if was_created:
                created.append(path)
            if marker_written:
                markers.append(path)

        ensure(layout.root, layout.base.name)
        for group in layout.groups:
            ensure(layout.root if group.at_root else layout.base, group.spec.name)
            for child in group.spec.children:
                ensure(group.anchor, child)

        if created or markers:
            self._notify()

        logger.info(
            "Create finished: %d folder(s) created, %d marker(s) written",
            len(created),
            len(markers),
        )
        return CreateSummary(created=tuple(created), markers=tuple(markers))

    # =========================================================================
    # VALIDATE
    # =========================================================================

    def run_validate(self) -> ValidationReport:
        """Compare the expected layout with the filesystem.

        Missing directories are reported as findings, not raised. A
        missing group anchor suppresses the checks of its own subfolders
        only. Root-level folders other than the base directory and the
        root-anchored groups are reported as unexpected.

        Returns:
            A fresh ValidationReport, which also becomes last_report.

        Raises:
            InvalidInputError: If no base name has been set.
            PathNotFoundError: If the tree root does not exist.
            IOFailureError: If the tree root cannot be listed.
        """
        layout = self.resolve()
        findings: list[Finding] = []

        if not self._adapter.exists(layout.base):
            findings.append(Finding(FindingKind.MISSING_BASE, layout.base))

        for group in layout.groups:
            if not self._adapter.exists(group.anchor):
                findings.append(Finding(FindingKind.MISSING_FOLDER, group.anchor))
                continue
            for child in group.children:
                if not self._adapter.exists(child):
                    findings.append(Finding(FindingKind.MISSING_SUBFOLDER, child))

        allowed = layout.allowed_root_entries
        for folder in self._adapter.list_subdirectories(layout.root):
            if folder in allowed or self._is_ignored(folder):
                continue
            findings.append(Finding(FindingKind.UNEXPECTED, folder))

        report = ValidationReport(findings=tuple(findings))
        self._last_report = report
        logger.debug("Validation produced %d finding(s)", len(findings))
        return report

    # =========================================================================
    # REMEDIATE
    # =========================================================================

    def run_remediate(self) -> RemediationSummary:
        """Move the unexpected folders of the last report into the quarantine.

        Each move is attempted independently; a failed move is recorded
        in its MoveResult and the remaining folders are still processed.
        Existing destinations are never overwritten. After the batch the
        tree is validated again and the fresh report is embedded in the
        summary.

        Returns:
            RemediationSummary. Without a report or unexpected folders
            nothing_to_do is set and the filesystem is not touched.

        Raises:
            InvalidInputError: If no base name has been set.
            LayoutError: If the quarantine directory cannot be created.
        """
        report = self._last_report
        if report is None or not report.unexpected_paths:
            logger.info("No unexpected folders to move")
            return RemediationSummary(report=report, nothing_to_do=True)

        layout = self.resolve()
        group_dir, _, _ = self._ensure_directory(layout.root, self._schema.quarantine_group)
        quarantine, _, _ = self._ensure_directory(group_dir, self._schema.quarantine_folder)

        results: list[MoveResult] = []
        for source in report.unexpected_paths:
            results.append(self._move(source, quarantine / source.name))

        self._notify()
        refreshed = self.run_validate()
        return RemediationSummary(
            results=tuple(results),
            report=refreshed,
            quarantine=quarantine,
        )

    # === Private helpers ===

    def _ensure_directory(self, parent: Path, name: str) -> tuple[Path, bool, bool]:
        """Create parent/name if needed and make sure it carries a marker.

        Returns:
            Tuple of (path, directory was created, marker was written).
        """
        path = parent / name
        was_created = False
        if not self._adapter.exists(path):
            self._adapter.create_directory(parent, name)
            was_created = True
        marker_written = self._adapter.write_marker(path)
        return path, was_created, marker_written

    def _move(self, source: Path, destination: Path) -> MoveResult:
        try:
            self._adapter.move_directory(source, destination)
        except LayoutError as e:
            logger.error(
                "Failed to move %s to %s: %s", source.as_posix(), destination.as_posix(), e
            )
            return MoveResult(
                source=source,
                destination=destination,
                success=False,
                error=str(e),
                kind=e.kind,
            )

        logger.info("Moved %s to %s", source.as_posix(), destination.as_posix())
        return MoveResult(source=source, destination=destination, success=True)

    def _is_ignored(self, folder: Path) -> bool:
        return any(fnmatch.fnmatch(folder.name, pattern) for pattern in self._schema.ignore)

    def _notify(self) -> None:
        if self._refresh is not None:
            self._refresh()
