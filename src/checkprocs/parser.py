"""Parser for the per-process ``stat`` record exposed by procfs."""

from checkprocs.errors import MalformedRecordError
from checkprocs.models import ProcessRecord

# state, ppid, pgrp, session
_REQUIRED_FIELDS = 4


def parse_stat(pid: int, data: str) -> ProcessRecord:
    """
    Parse the text of ``/proc/<pid>/stat`` into a ProcessRecord.

    The record looks like ``300 (sshd) S 1 300 300 0 -1 ...``. The name sits
    between the first ``(`` and the *last* ``)``, because the name itself may
    contain parentheses. Fields after the name are split on whitespace; only
    state, parent pid, process group and session are kept.

    Args:
        pid: Process ID the record belongs to.
        data: Raw record text.

    Returns:
        A fully populated ProcessRecord.

    Raises:
        MalformedRecordError: If the record does not have the expected layout.
    """
    start = data.find("(")
    if start < 0:
        raise MalformedRecordError(pid, "missing '('")

    end = data.rfind(")", start + 1)
    if end < 0:
        raise MalformedRecordError(pid, "missing ')'")

    name = data[start + 1 : end]
    if not name:
        raise MalformedRecordError(pid, "empty executable name")

    if data[end + 1 : end + 2] != " ":
        raise MalformedRecordError(pid, "expected a space after ')'")

    fields = data[end + 2 :].split()
    if len(fields) < _REQUIRED_FIELDS:
        raise MalformedRecordError(
            pid, f"expected at least {_REQUIRED_FIELDS} fields after name, got {len(fields)}"
        )

    state = fields[0]
    if len(state) != 1:
        raise MalformedRecordError(pid, f"invalid state {state!r}")

    try:
        ppid, pgrp, sid = (int(field) for field in fields[1:_REQUIRED_FIELDS])
    except ValueError as exc:
        raise MalformedRecordError(pid, f"non-numeric field: {exc}") from exc

    return ProcessRecord(pid=pid, ppid=ppid, executable=name, state=state, pgrp=pgrp, sid=sid)
