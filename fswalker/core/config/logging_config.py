# File: fswalker/core/config/logging_config.py

import logging
from typing import Optional

from .settings import settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Bootstraps root logging for host applications.
    Library modules only create loggers; they never attach handlers themselves.
    """
    resolved = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=resolved, format=settings.LOG_FORMAT)
    logging.getLogger("fswalker").setLevel(resolved)
