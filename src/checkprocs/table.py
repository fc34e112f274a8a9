"""Point-in-time process table built from procfs."""

import logging
from concurrent.futures import ThreadPoolExecutor

from checkprocs.config import Settings
from checkprocs.directory import ProcessDirectory
from checkprocs.errors import MalformedRecordError, VanishedError
from checkprocs.models import ProcessRecord
from checkprocs.parser import parse_stat
from checkprocs.procfs import ProcfsSource
from checkprocs.psutil_table import PsutilTable

logger = logging.getLogger(__name__)


class ProcessTable:
    """
    Reads the live process table on every call.

    Nothing is cached between calls: each snapshot() or lookup() re-reads the
    registry, so results are always "truth as of now".
    """

    def __init__(self, source: ProcfsSource | None = None, max_workers: int | None = None) -> None:
        """
        Initialize the ProcessTable.

        Args:
            source: Registry to read from. Default is the real /proc.
            max_workers: Parse records on this many threads. None or 0 parses
                sequentially.
        """
        self._source = source if source is not None else ProcfsSource()
        self._directory = ProcessDirectory(self._source)
        self._max_workers = max_workers or None

    def snapshot(self) -> list[ProcessRecord]:
        """
        Collect records for all running processes.

        Processes that vanish mid-read or have unparseable records are
        skipped; they never fail the whole snapshot.

        Raises:
            EnumerationError: If the registry cannot be listed.
        """
        pids = list(self._directory.pids())

        if self._max_workers is None:
            results = map(self._try_read, pids)
            return [record for record in results if record is not None]

        with ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="ProcessTable") as pool:
            results = pool.map(self._try_read, pids)
            return [record for record in results if record is not None]

    def lookup(self, pid: int) -> ProcessRecord | None:
        """
        Look up a single process by pid.

        Returns:
            The record, or None if no such process is running.

        Raises:
            VanishedError: If the process exited after the existence check.
            ExistenceCheckError: If the existence check itself fails.
            MalformedRecordError: If its stat record cannot be parsed.
        """
        if not self._source.exists(pid):
            return None
        return self._read(pid)

    def _read(self, pid: int) -> ProcessRecord:
        return parse_stat(pid, self._source.read_stat(pid))

    def _try_read(self, pid: int) -> ProcessRecord | None:
        try:
            return self._read(pid)
        except (VanishedError, MalformedRecordError) as exc:
            logger.debug("skipping pid %d: %s", pid, exc)
            return None


def open_table(settings: Settings) -> ProcessTable | PsutilTable:
    """
    Pick the process table implementation for this platform.

    ``auto`` uses procfs when the configured root is mounted and falls back
    to psutil otherwise.
    """
    source = ProcfsSource(settings.proc_root)
    backend = settings.backend
    if backend == "auto":
        backend = "procfs" if source.is_available() else "psutil"

    logger.debug("using %s backend", backend)
    if backend == "psutil":
        return PsutilTable()
    return ProcessTable(source, max_workers=settings.workers)
