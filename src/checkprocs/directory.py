"""Enumeration of running process identifiers."""

import logging
from collections.abc import Iterator

from checkprocs.procfs import ProcfsSource

logger = logging.getLogger(__name__)


def _is_pid_name(name: str) -> bool:
    return name.isascii() and name.isdigit()


class ProcessDirectory:
    """
    Lists the identifiers of all processes visible in the registry.

    Only directory entries with purely decimal names are processes; everything
    else (``self``, ``sys``, ``meminfo``, ...) is a kernel object and ignored.
    The result is a snapshot in name only: any of the returned processes may
    already have exited by the time the caller reads it.
    """

    def __init__(self, source: ProcfsSource) -> None:
        self._source = source

    def pids(self) -> Iterator[int]:
        """
        Yield identifiers of currently running processes, in no particular order.

        Raises:
            EnumerationError: If the registry itself cannot be listed. Raised
                by the call, before any identifier is yielded.
        """
        return self._iter_pids(self._source.entries())

    def _iter_pids(self, entries: list[tuple[str, bool]]) -> Iterator[int]:
        for name, is_dir in entries:
            if not is_dir or not _is_pid_name(name):
                continue

            try:
                pid = int(name)
            except ValueError:
                logger.debug("skipping registry entry %r", name)
                continue

            if pid > 0:
                yield pid
