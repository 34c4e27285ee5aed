# File: fswalker/core/config/settings.py

import os


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"true", "1", "yes"}


class Settings:
    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FSWALKER_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv(
        "FSWALKER_LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # --- Walker Defaults ---
    # Only used when a caller builds WalkerSettings from the environment.
    @property
    def FOLLOW_DIRECTORY_SYMLINKS(self) -> bool:
        return _env_flag("FSWALKER_FOLLOW_DIRECTORY_SYMLINKS")

    @property
    def FOLLOW_FILE_SYMLINKS(self) -> bool:
        return _env_flag("FSWALKER_FOLLOW_FILE_SYMLINKS")

    @property
    def RECURSE_DIRECTORIES(self) -> bool:
        return _env_flag("FSWALKER_RECURSE_DIRECTORIES")


settings = Settings()
