"""Process table for platforms without a procfs registry, backed by psutil."""

import logging

import psutil

from checkprocs.errors import EnumerationError, ProcessError, VanishedError
from checkprocs.models import ProcessRecord

logger = logging.getLogger(__name__)


class PsutilTable:
    """
    Same snapshot()/lookup() surface as ProcessTable, read through psutil.

    Records carry only identity fields; state, process group and session
    are left unset.
    """

    def snapshot(self) -> list[ProcessRecord]:
        """
        Collect records for all running processes.

        Handles NoSuchProcess, AccessDenied and ZombieProcess per process by
        skipping it.

        Raises:
            EnumerationError: If the process list itself cannot be read.
        """
        try:
            procs = list(psutil.process_iter())
        except (psutil.Error, OSError) as exc:
            raise EnumerationError(f"cannot list processes: {exc}") from exc

        records: list[ProcessRecord] = []

        for proc in procs:
            try:
                with proc.oneshot():
                    info = {"pid": proc.pid, "ppid": proc.ppid(), "name": proc.name()}
                record = _to_record(info)
            except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                continue
            except ValueError as exc:
                # pid 0 on BSD/macOS, or attributes psutil could not read
                logger.debug("skipping pid %s: %s", proc.pid, exc)
                continue
            records.append(record)

        return records

    def lookup(self, pid: int) -> ProcessRecord | None:
        """
        Look up a single process by pid.

        Returns:
            The record, or None if no such process is running.

        Raises:
            VanishedError: If the process exited after the existence check.
            ProcessError: If the process exists but cannot be inspected.
        """
        if pid <= 0 or not psutil.pid_exists(pid):
            return None

        try:
            proc = psutil.Process(pid)
            with proc.oneshot():
                info = {"pid": pid, "ppid": proc.ppid(), "name": proc.name()}
        except psutil.NoSuchProcess as exc:
            raise VanishedError(pid) from exc
        except psutil.AccessDenied as exc:
            raise ProcessError(f"access denied reading pid {pid}") from exc

        try:
            return _to_record(info)
        except ValueError as exc:
            raise ProcessError(f"cannot build record for pid {pid}: {exc}") from exc


def _to_record(info: dict) -> ProcessRecord:
    if info.get("ppid") is None:
        raise ValueError("parent pid unavailable")
    return ProcessRecord(pid=info["pid"], ppid=info["ppid"], executable=info.get("name") or "")
