"""Layout file models.

This module defines the Pydantic models representing the layout.toml
structure that declares the target directory layout.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from layoutctl.layout.catalog import DEFAULT_SCHEMA, DEFAULT_TREE_ROOT
from layoutctl.layout.errors import InvalidInputError
from layoutctl.layout.models import DEFAULT_MARKER_NAME, GroupSpec, LayoutSchema

# Where a group is anchored: under the base directory or at the tree root
AnchorType = Literal["base", "root"]


class GroupEntry(BaseModel):
    """Entry for a single group in the layout file.

    Attributes:
        name: Directory name of the group.
        children: Required subfolders, in order.
        anchor: "root" for groups living at the tree root, "base" otherwise.
    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(min_length=1, description="Group directory name")]
    children: Annotated[
        list[str],
        Field(default_factory=list, description="Required subfolders"),
    ]
    anchor: Annotated[AnchorType, Field(description="Group anchor")] = "base"


class TreeConfig(BaseModel):
    """Tree section of the layout file.

    Attributes:
        root: Name of the tree root directory.
        marker: File name of the marker placed in created directories.
        ignore: fnmatch patterns of root entries never reported as unexpected.
    """

    model_config = ConfigDict(extra="forbid")

    root: Annotated[str, Field(min_length=1, description="Tree root directory")] = (
        DEFAULT_TREE_ROOT
    )
    marker: Annotated[str, Field(min_length=1, description="Marker file name")] = (
        DEFAULT_MARKER_NAME
    )
    ignore: Annotated[
        list[str],
        Field(default_factory=list, description="Ignored root entry patterns"),
    ]


class QuarantineConfig(BaseModel):
    """Quarantine section of the layout file.

    Attributes:
        group: Root-anchored group hosting the quarantine.
        folder: Folder inside the group receiving unexpected folders.
    """

    model_config = ConfigDict(extra="forbid")

    group: Annotated[str, Field(description="Quarantine group")] = DEFAULT_SCHEMA.quarantine_group
    folder: Annotated[str, Field(description="Quarantine folder")] = (
        DEFAULT_SCHEMA.quarantine_folder
    )


class LayoutConfig(BaseModel):
    """Complete layout file.

    Attributes:
        base: Optional default base directory name.
        tree: Tree root, marker and ignore settings.
        quarantine: Quarantine location.
        groups: Group catalog in rendering order.
    """

    model_config = ConfigDict(extra="forbid")

    base: Annotated[str | None, Field(description="Default base folder name")] = None
    tree: Annotated[TreeConfig, Field(default_factory=TreeConfig)]
    quarantine: Annotated[QuarantineConfig, Field(default_factory=QuarantineConfig)]
    groups: Annotated[list[GroupEntry], Field(min_length=1, description="Group catalog")]

    @model_validator(mode="after")
    def validate_schema(self) -> LayoutConfig:
        """Validate that the groups form a consistent layout schema."""
        try:
            self.to_schema()
        except InvalidInputError as e:
            raise ValueError(str(e)) from e
        return self

    def to_schema(self) -> LayoutSchema:
        """Build the LayoutSchema described by this file.

        Raises:
            InvalidInputError: If the declared layout is inconsistent.
        """
        return LayoutSchema(
            groups=tuple(GroupSpec(g.name, tuple(g.children)) for g in self.groups),
            root_groups=frozenset(g.name for g in self.groups if g.anchor == "root"),
            quarantine_group=self.quarantine.group,
            quarantine_folder=self.quarantine.folder,
            marker_name=self.tree.marker,
            ignore=tuple(self.tree.ignore),
        )

    @classmethod
    def from_schema(
        cls,
        schema: LayoutSchema,
        root: str = DEFAULT_TREE_ROOT,
        base: str | None = None,
    ) -> LayoutConfig:
        """Describe an existing LayoutSchema as a layout file."""
        return cls(
            base=base,
            tree=TreeConfig(root=root, marker=schema.marker_name, ignore=list(schema.ignore)),
            quarantine=QuarantineConfig(
                group=schema.quarantine_group,
                folder=schema.quarantine_folder,
            ),
            groups=[
                GroupEntry(
                    name=g.name,
                    children=list(g.children),
                    anchor="root" if schema.is_root_group(g.name) else "base",
                )
                for g in schema.groups
            ],
        )


def default_layout_config() -> LayoutConfig:
    """Layout file describing the reference catalog."""
    return LayoutConfig.from_schema(DEFAULT_SCHEMA)
