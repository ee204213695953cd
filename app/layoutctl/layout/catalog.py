"""Reference layout catalog.

The built-in layout used when no layout file is configured: a game
project tree under ``Assets`` with twelve groups, four of which live
at the tree root.
"""

from layoutctl.layout.models import DEFAULT_MARKER_NAME, GroupSpec, LayoutSchema

# Name of the tree root directory the layout is applied to
DEFAULT_TREE_ROOT = "Assets"

DEFAULT_GROUPS: tuple[GroupSpec, ...] = (
    GroupSpec("Art", ("Characters", "Environment", "UI")),
    GroupSpec("Audio"),
    GroupSpec("Materials"),
    GroupSpec("Prefabs", ("UI", "Characters", "Environment", "Props", "Effects")),
    GroupSpec("Scenes", ("Levels", "UI")),
    GroupSpec("Scripts", ("Core", "Game", "Managers", "UI", "Systems")),
    GroupSpec("UI", ("HUD", "Popups", "Settings")),
    GroupSpec("Resources"),
    GroupSpec("Plugins", ("ThirdParty", "Custom")),
    GroupSpec("StreamingAssets"),
    GroupSpec("Testing", ("EditorTests", "RuntimeTests")),
    GroupSpec("Sandbox"),
)

# Third-party code, scratch area, streaming payloads and runtime-loaded resources
DEFAULT_ROOT_GROUPS: frozenset[str] = frozenset(
    {"Plugins", "Sandbox", "StreamingAssets", "Resources"}
)

DEFAULT_SCHEMA = LayoutSchema(
    groups=DEFAULT_GROUPS,
    root_groups=DEFAULT_ROOT_GROUPS,
    quarantine_group="Plugins",
    quarantine_folder="ThirdParty",
    marker_name=DEFAULT_MARKER_NAME,
)
