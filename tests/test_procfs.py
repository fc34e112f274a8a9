"""Tests for the procfs process source."""

import os
import sys
from pathlib import Path
from unittest import mock

import pytest

from checkprocs.errors import EnumerationError, ExistenceCheckError, VanishedError
from checkprocs.procfs import DEFAULT_PROC_ROOT, ProcfsSource

linux_only = pytest.mark.skipif(
    not sys.platform.startswith("linux") or not Path("/proc/self/stat").exists(),
    reason="requires a mounted Linux /proc",
)


class TestProcfsSourceFixture:
    """ProcfsSource against a fake registry tree."""

    def test_default_root(self):
        assert ProcfsSource().root == DEFAULT_PROC_ROOT

    def test_entries_reports_directories(self, fake_proc):
        fake_proc.add_process(1, "init", 0)
        fake_proc.add_file("meminfo")
        (fake_proc.root / "self").symlink_to(fake_proc.root / "1")

        entries = dict(ProcfsSource(fake_proc.root).entries())

        assert entries == {"1": True, "meminfo": False, "self": False}

    def test_entries_missing_root(self, tmp_path):
        source = ProcfsSource(tmp_path / "not-mounted")

        with pytest.raises(EnumerationError, match="cannot list"):
            source.entries()

    def test_entries_root_is_a_file(self, tmp_path):
        root = tmp_path / "proc"
        root.write_text("")

        with pytest.raises(EnumerationError):
            ProcfsSource(root).entries()

    def test_read_stat(self, fake_proc):
        fake_proc.add_raw("300", "300 (sshd) S 1 300 300 0\n")

        assert ProcfsSource(fake_proc.root).read_stat(300) == "300 (sshd) S 1 300 300 0\n"

    def test_read_stat_undecodable_name(self, fake_proc):
        proc_dir = fake_proc.add_raw("5", None)
        (proc_dir / "stat").write_bytes(b"5 (bad\xffname) S 1 5 5 0\n")

        data = ProcfsSource(fake_proc.root).read_stat(5)

        assert data.encode("utf-8", "surrogateescape") == b"5 (bad\xffname) S 1 5 5 0\n"

    def test_read_stat_vanished_process(self, fake_proc):
        with pytest.raises(VanishedError) as excinfo:
            ProcfsSource(fake_proc.root).read_stat(4242)

        assert excinfo.value.pid == 4242

    def test_read_stat_missing_stat_file(self, fake_proc):
        fake_proc.add_raw("77", None)

        with pytest.raises(VanishedError):
            ProcfsSource(fake_proc.root).read_stat(77)

    @pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores file modes")
    def test_read_stat_permission_denied(self, fake_proc):
        proc_dir = fake_proc.add_process(8, "secret", 1)
        (proc_dir / "stat").chmod(0)

        try:
            with pytest.raises(VanishedError, match="cannot read"):
                ProcfsSource(fake_proc.root).read_stat(8)
        finally:
            (proc_dir / "stat").chmod(0o644)

    def test_exists(self, fake_proc):
        fake_proc.add_process(1, "init", 0)
        fake_proc.add_file("2")
        source = ProcfsSource(fake_proc.root)

        assert source.exists(1)
        assert not source.exists(2)
        assert not source.exists(3)

    def test_exists_root_is_a_file(self, tmp_path):
        root = tmp_path / "proc"
        root.write_text("")

        assert not ProcfsSource(root).exists(1)

    def test_exists_permission_denied(self, fake_proc):
        source = ProcfsSource(fake_proc.root)

        with mock.patch("checkprocs.procfs.os.stat", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(ExistenceCheckError, match="Permission denied") as excinfo:
                source.exists(1)

        assert excinfo.value.pid == 1

    def test_is_available(self, fake_proc, tmp_path):
        assert ProcfsSource(fake_proc.root).is_available()
        assert not ProcfsSource(tmp_path / "missing").is_available()


@linux_only
class TestProcfsSourceLive:
    """ProcfsSource against the real /proc."""

    def test_exists_self(self):
        assert ProcfsSource().exists(os.getpid())

    def test_exists_nonexistent(self):
        # Use a pid above the kernel's pid_max ceiling
        assert not ProcfsSource().exists(2**22 + 1)

    def test_read_stat_self(self):
        data = ProcfsSource().read_stat(os.getpid())

        assert data.startswith(f"{os.getpid()} (")

    def test_entries_include_self_pid(self):
        entries = dict(ProcfsSource().entries())

        assert entries[str(os.getpid())] is True
        assert entries["self"] is False
