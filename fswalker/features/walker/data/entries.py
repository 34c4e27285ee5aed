import os
from pathlib import Path
from typing import List, Tuple, Union

from fswalker.core.common.enums import EntryKind

from ..domain.interfaces import IEntryProvider
from ..domain.models import DirectoryEntry, FileEntry

class LocalEntryProvider(IEntryProvider):
    """
    Concrete implementation using os.scandir.
    Order is whatever the filesystem returns; nothing is sorted.
    """

    def list_children(self, directory: DirectoryEntry) -> Tuple[List[FileEntry], List[DirectoryEntry]]:
        files: List[FileEntry] = []
        subdirs: List[DirectoryEntry] = []

        with os.scandir(directory.path) as entries:
            for child in entries:
                child_path = Path(child.path)
                # Follows symlinks: a link to a directory is a subdirectory,
                # a dangling link is listed as a file.
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False

                if is_dir:
                    subdirs.append(DirectoryEntry(child_path))
                else:
                    files.append(FileEntry(child_path))

        return files, subdirs


def classify_kind(path: Union[str, Path]) -> EntryKind:
    """
    Platform status query for a walk root.
    Anything that is not a directory (including a missing path) is a file;
    the walker reports a missing one as an unknown object.
    """
    if Path(path).is_dir():
        return EntryKind.DIRECTORY
    return EntryKind.FILE


def classify_path(path: Union[str, Path]) -> Union[DirectoryEntry, FileEntry]:
    """Wraps `path` in the entry type matching its classification."""
    path = Path(path)
    if classify_kind(path) is EntryKind.DIRECTORY:
        return DirectoryEntry(path)
    return FileEntry(path)
