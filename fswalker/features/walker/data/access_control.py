import logging
import os
import traceback
from typing import Optional

from ..domain.interfaces import IAccessDiagnostics
from ..domain.models import FileEntry

logger = logging.getLogger(__name__)


class NullAccessDiagnostics(IAccessDiagnostics):
    """
    No-op implementation for platforms without ownership lookups.
    """

    def dump_access_controls(self, entry: FileEntry) -> None:
        return None


class PosixAccessDiagnostics(IAccessDiagnostics):
    """
    Logs the owning group of a file.
    Tries the group name first and falls back to the numeric group id.
    """

    def dump_access_controls(self, entry: FileEntry) -> None:
        try:
            gid = self._owning_gid(entry)
            if gid is None:
                return

            identity: Optional[str] = None

            # 1. Try the group name
            try:
                identity = self._group_name(gid)
                logger.info(f"Owning group of {entry.full_name}: {identity}")
            except NotImplementedError:
                raise
            except Exception as e:
                logger.warning(f"Could not resolve group name for gid {gid}: {e}")

            # 2. Fall back to the raw group id
            if identity is None:
                try:
                    identity = str(int(gid))
                    logger.info(f"Owning group id of {entry.full_name}: {identity}")
                except Exception as e:
                    logger.warning(f"Could not read group id for {entry.full_name}: {e}")

        except NotImplementedError as nex:
            # Ownership can't be read on this runtime. Log it and move on.
            logger.warning(_describe_not_implemented(nex))

    def _owning_gid(self, entry: FileEntry) -> Optional[int]:
        try:
            return entry.path.stat().st_gid
        except OSError as e:
            logger.warning(f"Could not stat {entry.full_name} for access diagnostics: {e}")
            return None

    def _group_name(self, gid: int) -> str:
        import grp

        return grp.getgrgid(gid).gr_name


def _describe_not_implemented(error: NotImplementedError) -> str:
    frames = traceback.extract_tb(error.__traceback__)
    if frames:
        last = frames[-1]
        return f"{error}: '{last.name}' at {last.filename}:{last.lineno}"
    return f"Feature not implemented: {error}"


def default_access_diagnostics() -> IAccessDiagnostics:
    """
    Picks the ownership reporter for the current platform.
    """
    if os.name == "posix":
        return PosixAccessDiagnostics()
    return NullAccessDiagnostics()
