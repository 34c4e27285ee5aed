# File: tests/conftest.py

import os
import sys
from pathlib import Path

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from fswalker.core.common.enums import WalkerDiagnostic
from fswalker.features.walker.domain.models import DiagnosticEvent, DirectoryFound, FileFound


class Recorder:
    """
    Subscribes to all three walker channels and records one flat timeline
    of (kind, entry name) pairs.
    """

    def __init__(self):
        self.events = []

    def attach(self, walker) -> "Recorder":
        walker.diagnostic_detected.subscribe(self.on_diagnostic)
        walker.file_found.subscribe(self.on_file)
        walker.directory_found.subscribe(self.on_directory)
        return self

    def on_diagnostic(self, event: DiagnosticEvent):
        name = event.path.name if event.path is not None else None
        self.events.append((event.diagnostic.name, name))

    def on_file(self, event: FileFound):
        self.events.append(("FILE_FOUND", event.entry.name))

    def on_directory(self, event: DirectoryFound):
        self.events.append(("DIRECTORY_FOUND", event.entry.name))

    def diagnostics(self):
        return [kind for kind, _ in self.events if kind in WalkerDiagnostic.__members__]

    def names_for(self, kind: str):
        return [name for k, name in self.events if k == kind]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def sample_tree(tmp_path) -> Path:
    """
    R/
      A
      B/
        C
    """
    root = tmp_path / "R"
    root.mkdir()
    (root / "A").write_text("alpha")
    sub = root / "B"
    sub.mkdir()
    (sub / "C").write_text("charlie")
    return root


@pytest.fixture
def make_symlink():
    """Creates a symlink or skips the test where the platform refuses."""
    def _make(link: Path, target: Path, target_is_directory: bool = False) -> Path:
        try:
            os.symlink(target, link, target_is_directory=target_is_directory)
        except (OSError, NotImplementedError) as e:
            pytest.skip(f"Symlinks not supported here: {e}")
        return link
    return _make
