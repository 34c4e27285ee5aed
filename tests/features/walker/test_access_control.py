import logging
import os

import pytest

from fswalker.features.walker.data.access_control import (
    NullAccessDiagnostics,
    PosixAccessDiagnostics,
    default_access_diagnostics,
)
from fswalker.features.walker.domain.models import FileEntry

posix_only = pytest.mark.skipif(os.name != "posix", reason="POSIX group lookup")


def test_default_matches_platform():
    expected = PosixAccessDiagnostics if os.name == "posix" else NullAccessDiagnostics
    assert isinstance(default_access_diagnostics(), expected)


def test_null_diagnostics_do_nothing(tmp_path):
    assert NullAccessDiagnostics().dump_access_controls(FileEntry(tmp_path / "x")) is None


@posix_only
def test_logs_group_name(sample_tree, caplog, monkeypatch):
    caplog.set_level(logging.INFO, logger="fswalker")
    monkeypatch.setattr(PosixAccessDiagnostics, "_group_name", lambda self, gid: "staff")

    PosixAccessDiagnostics().dump_access_controls(FileEntry(sample_tree / "A"))

    assert any("Owning group" in r.getMessage() and "staff" in r.getMessage() for r in caplog.records)


@posix_only
def test_falls_back_to_group_id(sample_tree, caplog, monkeypatch):
    caplog.set_level(logging.INFO, logger="fswalker")

    def no_name(self, gid):
        raise KeyError(gid)

    monkeypatch.setattr(PosixAccessDiagnostics, "_group_name", no_name)
    entry = FileEntry(sample_tree / "A")

    PosixAccessDiagnostics().dump_access_controls(entry)

    gid = str(entry.path.stat().st_gid)
    assert any("Owning group id" in r.getMessage() and gid in r.getMessage() for r in caplog.records)


def test_missing_file_is_logged_not_raised(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="fswalker")

    PosixAccessDiagnostics().dump_access_controls(FileEntry(tmp_path / "ghost"))

    assert any("Could not stat" in r.getMessage() for r in caplog.records)


def test_not_implemented_is_swallowed(sample_tree, caplog, monkeypatch):
    caplog.set_level(logging.WARNING, logger="fswalker")

    def unsupported(self, entry):
        raise NotImplementedError("ownership lookup")

    monkeypatch.setattr(PosixAccessDiagnostics, "_owning_gid", unsupported)

    PosixAccessDiagnostics().dump_access_controls(FileEntry(sample_tree / "A"))

    assert any("ownership lookup" in r.getMessage() and "unsupported" in r.getMessage()
               for r in caplog.records)


def test_unsupported_group_lookup_is_reported_once(sample_tree, caplog, monkeypatch):
    caplog.set_level(logging.INFO, logger="fswalker")

    def group_lookup_unavailable(self, gid):
        raise NotImplementedError("group lookup")

    monkeypatch.setattr(PosixAccessDiagnostics, "_group_name", group_lookup_unavailable)

    PosixAccessDiagnostics().dump_access_controls(FileEntry(sample_tree / "A"))

    messages = [r.getMessage() for r in caplog.records]
    assert any("group lookup" in m and "group_lookup_unavailable" in m for m in messages)
    # Not mistaken for an unknown group, and no fallback attempted
    assert not any("Could not resolve group name" in m for m in messages)
    assert not any("Owning group id" in m for m in messages)
