"""Expected-path resolution.

Turns a LayoutSchema plus a base directory name into the concrete
directory paths the tree must contain. Resolution never touches the
filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from layoutctl.layout.models import GroupSpec, LayoutSchema, validate_segment


def validate_base_name(name: str) -> str:
    """Validate a caller-supplied base directory name.

    Args:
        name: Base directory name.

    Returns:
        The validated name.

    Raises:
        InvalidInputError: If the name is empty or not a single segment.
    """
    return validate_segment(name, "Base folder name")


@dataclass(frozen=True, slots=True)
class ResolvedGroup:
    """A group with its anchor resolved to a concrete path.

    Attributes:
        spec: The group definition.
        anchor: Resolved location of the group directory.
        children: Resolved locations of the group's subfolders, in order.
        at_root: True if the anchor sits directly under the tree root.
    """

    spec: GroupSpec
    anchor: Path
    children: tuple[Path, ...]
    at_root: bool


@dataclass(frozen=True, slots=True)
class ResolvedLayout:
    """Every directory a schema expects for one base directory name.

    Attributes:
        root: Tree root directory.
        base: Base directory (``root/<base name>``).
        groups: Resolved groups in catalog order.
        quarantine: Directory receiving unexpected top-level folders.
    """

    root: Path
    base: Path
    groups: tuple[ResolvedGroup, ...]
    quarantine: Path

    @property
    def paths(self) -> tuple[Path, ...]:
        """Expected paths in catalog order, base directory first."""
        ordered: list[Path] = [self.base]
        for group in self.groups:
            ordered.append(group.anchor)
            ordered.extend(group.children)
        return tuple(ordered)

    @property
    def path_set(self) -> frozenset[Path]:
        return frozenset(self.paths)

    @property
    def allowed_root_entries(self) -> frozenset[Path]:
        """Root-level directories the layout accounts for."""
        return frozenset({self.base, *(g.anchor for g in self.groups if g.at_root)})


def resolve(schema: LayoutSchema, root: Path, base_name: str) -> ResolvedLayout:
    """Resolve a schema against a tree root and base directory name.

    Groups listed in the schema's root set are anchored at ``root/<group>``,
    all others at ``root/<base>/<group>``.

    Args:
        schema: Declarative layout.
        root: Tree root directory.
        base_name: Base directory name for nested groups.

    Returns:
        ResolvedLayout holding every expected directory.

    Raises:
        InvalidInputError: If base_name is not a valid single segment.
    """
    validate_base_name(base_name)
    base = root / base_name

    groups: list[ResolvedGroup] = []
    for spec in schema.groups:
        at_root = schema.is_root_group(spec.name)
        anchor = (root if at_root else base) / spec.name
        groups.append(
            ResolvedGroup(
                spec=spec,
                anchor=anchor,
                children=tuple(anchor / child for child in spec.children),
                at_root=at_root,
            )
        )

    quarantine = root / schema.quarantine_group / schema.quarantine_folder
    return ResolvedLayout(root=root, base=base, groups=tuple(groups), quarantine=quarantine)
