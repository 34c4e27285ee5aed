import logging
from pathlib import Path
from typing import Optional

from fswalker.core.common.enums import EntryKind, FailureKind, WalkerDiagnostic
from fswalker.core.common.errors import ContractViolationError
from fswalker.core.events.channel import EventChannel

from ..data.access_control import default_access_diagnostics
from ..data.entries import LocalEntryProvider
from ..domain.interfaces import IAccessDiagnostics, IEntryProvider
from ..domain.models import (
    DiagnosticEvent,
    DirectoryEntry,
    DirectoryFound,
    FileEntry,
    FileFound,
    FileSystemEntry,
    WalkerSettings,
)

logger = logging.getLogger(__name__)


def classify_failure(error: BaseException) -> FailureKind:
    if isinstance(error, PermissionError):
        return FailureKind.ACCESS_DENIED
    return FailureKind.GENERIC


def root_kind(root: object) -> Optional[EntryKind]:
    """Discriminant of a walk root, or None when it is not an entry at all."""
    if isinstance(root, (DirectoryEntry, FileEntry)):
        return root.kind
    return None


class FileSystemWalker:
    """
    Recursive, depth-first filesystem walker.

    Within every directory the DirectoryFound notification fires first, then
    all immediate files are processed, then (when recursing) all immediate
    subdirectories. Errors are contained at the entry that raised them: a
    failing file or directory gets a *_FAILED diagnostic and the walk moves on.
    """

    def __init__(self,
                 settings: WalkerSettings,
                 access_diagnostics: Optional[IAccessDiagnostics] = None,
                 entry_provider: Optional[IEntryProvider] = None):
        # Copy the settings so this walker is immune to any changes the caller
        # makes to its own settings object afterwards.
        self._settings = WalkerSettings.snapshot(settings)
        self._access_diagnostics = access_diagnostics or default_access_diagnostics()
        self._entries = entry_provider or LocalEntryProvider()

        self.diagnostic_detected: EventChannel[DiagnosticEvent] = EventChannel("diagnostic_detected")
        self.file_found: EventChannel[FileFound] = EventChannel("file_found")
        self.directory_found: EventChannel[DirectoryFound] = EventChannel("directory_found")

    @property
    def settings(self) -> WalkerSettings:
        return self._settings

    def run(self, root: FileSystemEntry) -> None:
        """
        Walks `root`, which the caller has already classified as a
        DirectoryEntry or a FileEntry (see classify_path).

        PROCESSING_STARTED is always the first diagnostic and
        PROCESSING_COMPLETED is always the last, emitted exactly once.

        Raises:
            ContractViolationError: `root` is neither kind of entry.
        """
        root_path = getattr(root, "path", None)

        try:
            self._raise_diagnostic(WalkerDiagnostic.PROCESSING_STARTED, root_path)

            kind = root_kind(root)
            if kind is EntryKind.DIRECTORY:
                self._process_directory(root)
            elif kind is EntryKind.FILE:
                self._process_file(root)
            else:
                raise ContractViolationError(root)
        finally:
            self._raise_diagnostic(WalkerDiagnostic.PROCESSING_COMPLETED, root_path)

    # --- Directories ---

    def _process_directory(self, entry: DirectoryEntry) -> None:
        try:
            self._walk_directory(entry)
        except Exception:
            logger.exception(f'Error processing directory: "{entry.full_name}"')
            self._raise_diagnostic(WalkerDiagnostic.DIRECTORY_FAILED, entry.path)

    def _walk_directory(self, entry: DirectoryEntry) -> None:
        # 1. Vanished since enumeration (or never existed)
        if not entry.exists:
            logger.warning(f'Path does not exist: "{entry.full_name}"')
            self._raise_diagnostic(WalkerDiagnostic.UNKNOWN_OBJECT, entry.path)
            return

        self._raise_diagnostic(WalkerDiagnostic.DIRECTORY_PROCESSING, entry.path)

        # 2. Symlink policy. Unfollowed links are skipped without a dedicated diagnostic.
        is_symlink = entry.is_reparse_point
        if is_symlink:
            self._raise_diagnostic(WalkerDiagnostic.DIRECTORY_REPARSE_POINT, entry.path)
            if not self._settings.follow_directory_symlinks:
                return

        # 3. Announce before touching any child
        self.directory_found.publish(DirectoryFound(entry))

        # 4. Files first, then subdirectories
        files, subdirs = self._entries.list_children(entry)

        for file_entry in files:
            self._process_file(file_entry)

        if self._settings.recurse_directories:
            for subdir in subdirs:
                self._process_directory(subdir)

        self._raise_diagnostic(WalkerDiagnostic.DIRECTORY_READ, entry.path)

    # --- Files ---

    def _process_file(self, entry: FileEntry) -> None:
        try:
            self._walk_file(entry)
        except Exception as e:
            self._report_file_failure(entry, e)
            self._raise_diagnostic(WalkerDiagnostic.FILE_FAILED, entry.path)

    def _walk_file(self, entry: FileEntry) -> None:
        if not entry.exists:
            # Enumerated a moment ago and gone now: a check/use race worth investigating
            logger.error(f'Path does not exist: "{entry.full_name}"')
            self._raise_diagnostic(WalkerDiagnostic.UNKNOWN_OBJECT, entry.path)
            return

        self._raise_diagnostic(WalkerDiagnostic.FILE_PROCESSING, entry.path)

        is_symlink = entry.is_reparse_point
        if is_symlink:
            self._raise_diagnostic(WalkerDiagnostic.FILE_REPARSE_POINT, entry.path)
            if not self._settings.follow_file_symlinks:
                return

        self.file_found.publish(FileFound(entry))

        # No listener raised, so the file counts as read.
        self._raise_diagnostic(WalkerDiagnostic.FILE_READ, entry.path)

    def _report_file_failure(self, entry: FileEntry, error: Exception) -> None:
        kind = classify_failure(error)

        if kind is FailureKind.ACCESS_DENIED:
            # Expected and not critical; no traceback
            logger.warning(f'Access denied: "{entry.full_name}"')
            self._dump_access_controls(entry)
        else:
            logger.error(f'Error processing file: "{entry.full_name}"', exc_info=error)

    def _dump_access_controls(self, entry: FileEntry) -> None:
        try:
            self._access_diagnostics.dump_access_controls(entry)
        except Exception as e:
            logger.warning(f'Access diagnostics failed for "{entry.full_name}": {e}')

    # --- Delivery ---

    def _raise_diagnostic(self, diagnostic: WalkerDiagnostic, path: Optional[Path] = None) -> None:
        self.diagnostic_detected.publish(DiagnosticEvent(diagnostic, path))
