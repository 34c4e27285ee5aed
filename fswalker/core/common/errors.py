# File: fswalker/core/common/errors.py


class WalkerError(Exception):
    """Base class for all errors raised by fswalker."""


class ContractViolationError(WalkerError):
    """
    Raised when the walker is handed a root that is neither a file nor a directory.
    This is a caller bug, not a runtime condition to recover from.
    """

    def __init__(self, root: object):
        self.root = root
        super().__init__(
            f"Root must be a DirectoryEntry or a FileEntry, got {type(root).__name__}: {root!r}"
        )
