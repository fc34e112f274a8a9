"""Data models for checkprocs."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Process(Protocol):
    """Identity of a running process, whatever platform it was read on."""

    @property
    def pid(self) -> int: ...

    @property
    def ppid(self) -> int: ...

    @property
    def executable(self) -> str: ...


@dataclass(slots=True, frozen=True)
class ProcessRecord:
    """
    Immutable point-in-time record of one process.

    Re-reading a process yields a new record; a record is never updated
    in place. ``executable`` is the short kernel name of the binary, not a
    path, and may already be truncated by the kernel.
    """

    pid: int
    ppid: int
    executable: str
    state: str = "?"  # 'R', 'S', 'Z', 'D', etc.
    pgrp: int | None = None
    sid: int | None = None

    def __post_init__(self) -> None:
        if self.pid <= 0:
            raise ValueError(f"pid must be positive, got {self.pid}")
        if not self.executable:
            raise ValueError(f"empty executable name for pid {self.pid}")
