"""Shared Rich display functions for layout reports and results.

Provides reusable table builders and summary printers for findings,
created folders and quarantine moves across CLI commands.
"""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from layoutctl.layout.models import (
    CreateSummary,
    FindingKind,
    MoveResult,
    ValidationReport,
)
from layoutctl.utils.formatting import console, print_success, print_warning

_KIND_STYLES: dict[FindingKind, tuple[str, str]] = {
    FindingKind.MISSING_BASE: ("missing", "missing base"),
    FindingKind.MISSING_FOLDER: ("missing", "missing"),
    FindingKind.MISSING_SUBFOLDER: ("missing", "missing sub"),
    FindingKind.UNEXPECTED: ("unexpected", "unexpected"),
}


def create_findings_table(report: ValidationReport, root: Path) -> Table:
    """Create a Rich table displaying validation findings.

    Args:
        report: Validation report to display.
        root: Tree root; paths are shown starting from its name.

    Returns:
        Rich Table with one row per finding.
    """
    table = Table(
        title="Layout Drift",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Kind", width=14)
    table.add_column("Path", no_wrap=True)

    for finding in report.findings:
        style, label = _KIND_STYLES[finding.kind]
        table.add_row(
            f"[{style}]{label}[/{style}]",
            f"[path]{escape(_relative(finding.path, root))}[/path]",
        )

    return table


def print_report(report: ValidationReport, root: Path) -> None:
    """Print a validation report as a table followed by a summary line.

    A clean report prints only the success message.
    """
    if report.is_clean:
        print_success(report.messages[0])
        return

    console.print(create_findings_table(report, root))

    parts: list[str] = []
    if report.missing:
        parts.append(f"[missing]{len(report.missing)} missing[/missing]")
    if report.unexpected_paths:
        parts.append(f"[unexpected]{len(report.unexpected_paths)} unexpected[/unexpected]")
    console.print(f"\nSummary: {', '.join(parts)}")


def print_create_summary(summary: CreateSummary, root: Path) -> None:
    """Print what a create run changed below root."""
    if not summary.changed:
        print_success("Layout is already up to date. Nothing created.")
        return

    table = Table(
        title="Created Folders",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    for path in summary.created:
        table.add_row(f"[created]+{escape(_relative(path, root))}[/created]")
    if summary.created:
        console.print(table)

    print_success(
        f"Layout created/updated: {len(summary.created)} folder(s), "
        f"{len(summary.markers)} marker(s)."
    )


def create_move_plan_table(
    moves: list[tuple[Path, Path]],
    root: Path,
    dry_run: bool = False,
) -> Table:
    """Create a Rich table displaying planned quarantine moves.

    Args:
        moves: (source, destination) pairs.
        root: Tree root; paths are shown starting from its name.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table configured for the move plan.
    """
    title = "Planned Moves (dry-run)" if dry_run else "Planned Moves"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Folder", no_wrap=True)
    table.add_column("Destination", style="muted")

    for source, destination in moves:
        table.add_row(
            f"[unexpected]{escape(_relative(source, root))}[/unexpected]",
            escape(_relative(destination, root)),
        )

    return table


def create_move_results_table(results: tuple[MoveResult, ...], root: Path) -> Table:
    """Create a Rich table displaying move results.

    Args:
        results: Per-folder move results.
        root: Tree root; paths are shown starting from its name.

    Returns:
        Rich Table with status and error details per folder.
    """
    table = Table(
        title="Move Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Folder", no_wrap=True)
    table.add_column("Details", style="muted")

    for result in results:
        if result.success:
            status = "[success]OK[/success]"
            detail = f"[moved]moved to {escape(_relative(result.destination, root))}[/moved]"
        else:
            status = "[error]FAIL[/error]"
            detail = escape(result.error or "Unknown error")
        table.add_row(status, escape(_relative(result.source, root)), detail)

    return table


def print_move_summary(results: tuple[MoveResult, ...]) -> None:
    """Print a summary of move results."""
    success_count = sum(1 for r in results if r.success)
    fail_count = len(results) - success_count

    if fail_count == 0:
        print_success(f"All {success_count} folder(s) moved to quarantine.")
    else:
        print_warning(f"{success_count} moved, {fail_count} failed")


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root.parent).as_posix()
    except ValueError:
        return path.as_posix()
