import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, List, Optional, Union

from fswalker.core.common.enums import EntryKind, WalkerDiagnostic
from fswalker.core.config.settings import settings

# Windows only; absent from stat on other platforms
_FILE_ATTRIBUTE_REPARSE_POINT = getattr(stat, "FILE_ATTRIBUTE_REPARSE_POINT", 0x400)


@dataclass(frozen=True)
class WalkerSettings:
    """
    Immutable policy snapshot for a FileSystemWalker.
    """
    follow_directory_symlinks: bool = False
    follow_file_symlinks: bool = False
    recurse_directories: bool = False

    @classmethod
    def snapshot(cls, other) -> "WalkerSettings":
        """
        Copies the three policy flags by value from any settings-like object,
        so later changes to a caller-held (possibly mutable) object are not seen.
        """
        return cls(
            follow_directory_symlinks=bool(other.follow_directory_symlinks),
            follow_file_symlinks=bool(other.follow_file_symlinks),
            recurse_directories=bool(other.recurse_directories),
        )

    @classmethod
    def from_env(cls) -> "WalkerSettings":
        return cls(
            follow_directory_symlinks=settings.FOLLOW_DIRECTORY_SYMLINKS,
            follow_file_symlinks=settings.FOLLOW_FILE_SYMLINKS,
            recurse_directories=settings.RECURSE_DIRECTORIES,
        )


def _is_reparse_point(path: Path) -> bool:
    try:
        st = path.lstat()
    except OSError:
        return False
    if stat.S_ISLNK(st.st_mode):
        return True
    # Junctions and other reparse points on Windows
    attributes = getattr(st, "st_file_attributes", 0)
    return bool(attributes & _FILE_ATTRIBUTE_REPARSE_POINT)


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Handle to a directory on disk.
    Attributes are read from the live filesystem each time they are accessed.
    """
    path: Path
    kind: ClassVar[EntryKind] = EntryKind.DIRECTORY

    def __post_init__(self):
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def full_name(self) -> str:
        return os.path.abspath(self.path)

    @property
    def exists(self) -> bool:
        return self.path.is_dir()

    @property
    def is_reparse_point(self) -> bool:
        return _is_reparse_point(self.path)


@dataclass(frozen=True)
class FileEntry:
    """
    Handle to a file on disk.
    A dangling symlink does not exist; neither does a path that is now a directory.
    """
    path: Path
    kind: ClassVar[EntryKind] = EntryKind.FILE

    def __post_init__(self):
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def full_name(self) -> str:
        return os.path.abspath(self.path)

    @property
    def exists(self) -> bool:
        return self.path.exists() and not self.path.is_dir()

    @property
    def is_reparse_point(self) -> bool:
        return _is_reparse_point(self.path)


FileSystemEntry = Union[DirectoryEntry, FileEntry]


@dataclass(frozen=True)
class DirectoryFound:
    entry: DirectoryEntry


@dataclass(frozen=True)
class FileFound:
    entry: FileEntry


@dataclass(frozen=True)
class DiagnosticEvent:
    """
    A lifecycle stage of the walk.
    `path` is the entry the stage concerns (the root for start/completion).
    """
    diagnostic: WalkerDiagnostic
    path: Optional[Path] = None


@dataclass
class WalkSummary:
    """
    Report accumulated from the diagnostics of one walk.
    """
    files_processed: int = 0
    files_read: int = 0
    files_failed: int = 0
    directories_processed: int = 0
    directories_read: int = 0
    directories_failed: int = 0
    reparse_points: int = 0
    unknown_objects: int = 0
    completed: bool = False
    errors: List[str] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.files_failed or self.directories_failed)
