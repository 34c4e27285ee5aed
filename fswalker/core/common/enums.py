# File: fswalker/core/common/enums.py

from enum import Enum, unique

@unique
class WalkerDiagnostic(str, Enum):
    PROCESSING_STARTED = "processing_started"
    FILE_PROCESSING = "file_processing"
    FILE_REPARSE_POINT = "file_reparse_point"
    FILE_FAILED = "file_failed"
    FILE_READ = "file_read"
    DIRECTORY_PROCESSING = "directory_processing"
    DIRECTORY_REPARSE_POINT = "directory_reparse_point"
    DIRECTORY_FAILED = "directory_failed"
    DIRECTORY_READ = "directory_read"
    UNKNOWN_OBJECT = "unknown_object"
    PROCESSING_COMPLETED = "processing_completed"

@unique
class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"

@unique
class FailureKind(str, Enum):
    ACCESS_DENIED = "access_denied"
    GENERIC = "generic"
