import logging
from pathlib import Path
from typing import Callable, Optional, Union

from ..data.entries import classify_path
from ..domain.models import DirectoryFound, FileFound, WalkerSettings, WalkSummary
from .tally import DiagnosticTally
from .walker import FileSystemWalker

logger = logging.getLogger(__name__)

def walk_path(path: Union[str, Path],
              settings: Optional[WalkerSettings] = None,
              on_file: Optional[Callable[[FileFound], None]] = None,
              on_directory: Optional[Callable[[DirectoryFound], None]] = None) -> WalkSummary:
    """
    Standalone API: classifies `path`, walks it and reports what happened.
    Uses settings from the environment when none are given.
    """
    walker = FileSystemWalker(settings or WalkerSettings.from_env())

    if on_file is not None:
        walker.file_found.subscribe(on_file)
    if on_directory is not None:
        walker.directory_found.subscribe(on_directory)
    tally = DiagnosticTally().attach(walker)

    root = classify_path(path)
    logger.info(f"Starting walk of: {root.full_name}")

    walker.run(root)

    summary = tally.summary
    logger.info(
        f"Walk complete. Files read: {summary.files_read}/{summary.files_processed}, "
        f"directories read: {summary.directories_read}/{summary.directories_processed}"
    )
    return summary
