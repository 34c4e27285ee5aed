from fswalker.core.common.enums import WalkerDiagnostic

from ..domain.models import DiagnosticEvent, WalkSummary


class DiagnosticTally:
    """
    Diagnostic listener that folds one walk into a WalkSummary.
    """

    def __init__(self):
        self.summary = WalkSummary()

    def attach(self, walker) -> "DiagnosticTally":
        walker.diagnostic_detected.subscribe(self)
        return self

    def __call__(self, event: DiagnosticEvent) -> None:
        summary = self.summary
        diagnostic = event.diagnostic

        if diagnostic == WalkerDiagnostic.FILE_PROCESSING:
            summary.files_processed += 1
        elif diagnostic == WalkerDiagnostic.FILE_READ:
            summary.files_read += 1
        elif diagnostic == WalkerDiagnostic.FILE_FAILED:
            summary.files_failed += 1
            summary.errors.append(f"File failed: {event.path}")
        elif diagnostic == WalkerDiagnostic.DIRECTORY_PROCESSING:
            summary.directories_processed += 1
        elif diagnostic == WalkerDiagnostic.DIRECTORY_READ:
            summary.directories_read += 1
        elif diagnostic == WalkerDiagnostic.DIRECTORY_FAILED:
            summary.directories_failed += 1
            summary.errors.append(f"Directory failed: {event.path}")
        elif diagnostic in (WalkerDiagnostic.FILE_REPARSE_POINT, WalkerDiagnostic.DIRECTORY_REPARSE_POINT):
            summary.reparse_points += 1
        elif diagnostic == WalkerDiagnostic.UNKNOWN_OBJECT:
            summary.unknown_objects += 1
        elif diagnostic == WalkerDiagnostic.PROCESSING_COMPLETED:
            summary.completed = True
