"""Exceptions raised by checkprocs."""


class ProcessError(Exception):
    """Base class for all checkprocs errors."""


class EnumerationError(ProcessError):
    """The process registry itself could not be listed."""


class VanishedError(ProcessError):
    """A process disappeared between discovery and the detailed read."""

    def __init__(self, pid: int, reason: str = "process vanished") -> None:
        super().__init__(f"{reason}: {pid}")
        self.pid = pid


class MalformedRecordError(ProcessError):
    """A status record was read but does not have the expected layout."""

    def __init__(self, pid: int, reason: str) -> None:
        super().__init__(f"malformed stat record for pid {pid}: {reason}")
        self.pid = pid
        self.reason = reason


class ExistenceCheckError(ProcessError):
    """The existence of a process could not be determined."""

    def __init__(self, pid: int, reason: str) -> None:
        super().__init__(f"cannot check pid {pid}: {reason}")
        self.pid = pid


class ConfigError(ProcessError):
    """A configuration value could not be interpreted."""
