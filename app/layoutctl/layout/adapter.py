"""Filesystem adapters.

The adapter is the only part of the engine that performs I/O. The
FilesystemAdapter interface keeps the reconciler independent of the
storage backend; LocalFilesystem implements it on the local disk.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from layoutctl.layout.errors import ConflictError, IOFailureError, PathNotFoundError
from layoutctl.layout.models import DEFAULT_MARKER_NAME

logger = logging.getLogger(__name__)


class FilesystemAdapter(ABC):
    """Abstract capability surface over a filesystem.

    All operations are synchronous and raise LayoutError subclasses
    carrying the offending path.

    Example:
        >>> fs = LocalFilesystem()
        >>> fs.create_directory(Path("Assets"), "MyGame")
        >>> fs.write_marker(Path("Assets/MyGame"))
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if a directory exists at path.

        Raises:
            IOFailureError: If path cannot be inspected.
        """

    @abstractmethod
    def create_directory(self, parent: Path, name: str) -> Path:
        """Create a directory named name inside parent.

        An already existing directory is left as is.

        Args:
            parent: Existing parent directory.
            name: Name of the directory to create.

        Returns:
            Path of the directory.

        Raises:
            PathNotFoundError: If parent does not exist.
            ConflictError: If name is taken by a non-directory entry.
            IOFailureError: If the directory cannot be created.
        """

    @abstractmethod
    def list_subdirectories(self, path: Path) -> list[Path]:
        """List the immediate subdirectories of path, sorted by name.

        Raises:
            PathNotFoundError: If path does not exist.
            IOFailureError: If path cannot be read.
        """

    @abstractmethod
    def write_marker(self, path: Path) -> bool:
        """Write an empty marker file into directory path.

        Returns:
            True if the marker was written, False if it already existed.

        Raises:
            IOFailureError: If the marker cannot be written.
        """

    @abstractmethod
    def move_directory(self, source: Path, destination: Path) -> None:
        """Relocate a directory as a single step.

        Either the directory ends up at destination or nothing changes.

        Raises:
            PathNotFoundError: If source or destination's parent is missing.
            ConflictError: If destination already exists.
            IOFailureError: If the move cannot be performed.
        """


class LocalFilesystem(FilesystemAdapter):
    """FilesystemAdapter backed by the local disk.

    Attributes:
        _marker_name: File name used for marker files.
    """

    def __init__(self, marker_name: str = DEFAULT_MARKER_NAME) -> None:
        """Initialize the LocalFilesystem.

        Args:
            marker_name: File name used for marker files.
        """
        self._marker_name = marker_name

    @property
    def marker_name(self) -> str:
        return self._marker_name

    def exists(self, path: Path) -> bool:
        return _is_dir(path)

    def create_directory(self, parent: Path, name: str) -> Path:
        if not _is_dir(parent):
            raise PathNotFoundError("Parent folder does not exist", parent)

        target = parent / name
        if _is_dir(target):
            return target
        if target.exists() or target.is_symlink():
            raise ConflictError("A file with this name already exists", target)

        try:
            target.mkdir()
        except OSError as e:
            raise IOFailureError(f"Cannot create folder ({e.strerror or e})", target) from e
        except ValueError as e:
            raise IOFailureError(f"Cannot create folder ({e})", target) from e

        logger.info("Created folder: %s", target.as_posix())
        return target

    def list_subdirectories(self, path: Path) -> list[Path]:
        if not _is_dir(path):
            raise PathNotFoundError("Folder does not exist", path)

        try:
            entries = sorted(path.iterdir())
        except OSError as e:
            raise IOFailureError(f"Cannot list folder ({e.strerror or e})", path) from e

        return [entry for entry in entries if _is_dir(entry)]

    def write_marker(self, path: Path) -> bool:
        marker = path / self._marker_name
        if marker.exists():
            return False

        try:
            marker.touch(exist_ok=False)
        except FileExistsError:
            return False
        except OSError as e:
            raise IOFailureError(f"Cannot write marker ({e.strerror or e})", marker) from e

        logger.debug("Wrote marker: %s", marker.as_posix())
        return True

    def move_directory(self, source: Path, destination: Path) -> None:
        if not _is_dir(source):
            raise PathNotFoundError("Source folder does not exist", source)
        if destination.exists() or destination.is_symlink():
            raise ConflictError("Destination already exists", destination)
        if not _is_dir(destination.parent):
            raise PathNotFoundError("Destination parent does not exist", destination.parent)

        # A single rename keeps the move atomic; cross-device moves fail instead of copying
        try:
            source.rename(destination)
        except OSError as e:
            raise IOFailureError(f"Cannot move folder ({e.strerror or e})", source) from e


def _is_dir(path: Path) -> bool:
    """Check for a directory, wrapping stat failures such as over-long names."""
    try:
        return path.is_dir()
    except OSError as e:
        raise IOFailureError(f"Cannot access path ({e.strerror or e})", path) from e
    except ValueError as e:
        raise IOFailureError(f"Cannot access path ({e})", path) from e
