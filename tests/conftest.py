"""Shared fixtures: a fake procfs tree under tmp_path."""

from pathlib import Path

import pytest


def stat_line(pid: int, name: str, ppid: int, state: str = "S") -> str:
    """Build a realistic /proc/<pid>/stat line."""
    return f"{pid} ({name}) {state} {ppid} {pid} {pid} 0 -1 4194560 1043 0 0 0 12 7 0 0 20 0 1 0 35 17932288 2701\n"


class FakeProc:
    """Builder for a procfs-like directory tree."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def add_process(self, pid: int, name: str, ppid: int, state: str = "S") -> Path:
        return self.add_raw(str(pid), stat_line(pid, name, ppid, state))

    def add_raw(self, dirname: str, stat: str | None) -> Path:
        proc_dir = self.root / dirname
        proc_dir.mkdir()
        if stat is not None:
            (proc_dir / "stat").write_text(stat)
        return proc_dir

    def add_file(self, name: str, content: str = "") -> Path:
        path = self.root / name
        path.write_text(content)
        return path


@pytest.fixture
def fake_proc(tmp_path: Path) -> FakeProc:
    root = tmp_path / "proc"
    root.mkdir()
    return FakeProc(root)
