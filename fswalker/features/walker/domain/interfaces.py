from abc import ABC, abstractmethod
from typing import List, Tuple

from .models import DirectoryEntry, FileEntry

class IAccessDiagnostics(ABC):
    """
    Contract for best-effort access-control reporting.
    Invoked only after a file failed with an access-denied error.
    """
    @abstractmethod
    def dump_access_controls(self, entry: FileEntry) -> None:
        """
        Logs whatever ownership information is available for the entry.
        Implementations must never raise.
        """
        pass

class IEntryProvider(ABC):
    """
    Contract for enumerating the immediate children of a directory.
    """
    @abstractmethod
    def list_children(self, directory: DirectoryEntry) -> Tuple[List[FileEntry], List[DirectoryEntry]]:
        """
        Returns (files, subdirectories) in filesystem enumeration order.
        Enumeration errors (e.g. PermissionError) are raised to the caller.
        """
        pass
