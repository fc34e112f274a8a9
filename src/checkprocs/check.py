"""Detached-process check in the Nagios/Sensu plugin convention."""

from collections.abc import Iterable
from enum import IntEnum

from checkprocs.models import Process

# The primordial process that orphans are reparented to.
INIT_PID = 1


class ExitCode(IntEnum):
    """Monitoring plugin exit codes."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


def find_detached(processes: Iterable[Process], name: str, parent: int = INIT_PID) -> Process | None:
    """
    Find a process running ``name`` whose parent is ``parent``.

    With the default parent this answers "is the daemon running on its own,
    not as a child of some shell".
    """
    for proc in processes:
        if proc.executable == name and proc.ppid == parent:
            return proc
    return None
