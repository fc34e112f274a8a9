"""
procfs-backed process source.

All filesystem access to the kernel's process registry goes through
ProcfsSource, so tests can point it at a fixture tree instead of /proc.
"""

import os
import stat
from pathlib import Path

from checkprocs.errors import EnumerationError, ExistenceCheckError, VanishedError

DEFAULT_PROC_ROOT = Path("/proc")


class ProcfsSource:
    """Read-only view of a procfs mount."""

    def __init__(self, root: str | os.PathLike[str] = DEFAULT_PROC_ROOT) -> None:
        """
        Initialize the source.

        Args:
            root: Mount point of the process registry. Default /proc.
        """
        self._root = Path(root)

    @property
    def root(self) -> Path:
        """Get the registry mount point."""
        return self._root

    def is_available(self) -> bool:
        """Check whether the registry is mounted at all."""
        return self._root.is_dir()

    def entries(self) -> list[tuple[str, bool]]:
        """
        List the registry.

        Returns:
            ``(name, is_dir)`` for every entry. Symlinks such as ``self`` are
            never reported as directories.

        Raises:
            EnumerationError: If the registry cannot be opened or listed.
        """
        try:
            with os.scandir(self._root) as it:
                return [(entry.name, _is_real_dir(entry)) for entry in it]
        except OSError as exc:
            raise EnumerationError(f"cannot list {self._root}: {exc}") from exc

    def read_stat(self, pid: int) -> str:
        """
        Read the raw stat record of a process.

        Raises:
            VanishedError: If the record cannot be read, usually because the
                process exited after it was discovered.
        """
        path = self._root / str(pid) / "stat"
        try:
            with open(path, encoding="utf-8", errors="surrogateescape") as f:
                return f.read()
        except (FileNotFoundError, NotADirectoryError, ProcessLookupError) as exc:
            raise VanishedError(pid) from exc
        except OSError as exc:
            raise VanishedError(pid, f"cannot read {path} ({exc.strerror})") from exc

    def exists(self, pid: int) -> bool:
        """
        Check if a process is running by verifying <root>/<pid> is a directory.

        Raises:
            ExistenceCheckError: If the entry cannot be checked for a reason other than
                its absence, e.g. permission denied.
        """
        try:
            st = os.stat(self._root / str(pid))
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as exc:
            raise ExistenceCheckError(pid, exc.strerror or str(exc)) from exc
        return stat.S_ISDIR(st.st_mode)


def _is_real_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
