"""Environment-driven settings for checkprocs."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from checkprocs.errors import ConfigError
from checkprocs.procfs import DEFAULT_PROC_ROOT

BACKENDS = ("auto", "procfs", "psutil")


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved runtime settings."""

    proc_root: Path = DEFAULT_PROC_ROOT
    backend: str = "auto"
    log_level: str = "WARNING"
    workers: int = 0  # 0 = parse sequentially

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ConfigError(f"unknown backend {self.backend!r}, expected one of {', '.join(BACKENDS)}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"unknown log level {self.log_level!r}")
        if self.workers < 0:
            raise ConfigError(f"workers must not be negative, got {self.workers}")

    def with_overrides(self, **overrides: object) -> "Settings":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from CHECKPROCS_* environment variables.

    Args:
        environ: Mapping to read from. Default os.environ.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ

    workers_raw = env.get("CHECKPROCS_WORKERS", "0")
    try:
        workers = int(workers_raw)
    except ValueError as exc:
        raise ConfigError(f"CHECKPROCS_WORKERS must be an integer, got {workers_raw!r}") from exc

    return Settings(
        proc_root=Path(env.get("CHECKPROCS_PROC_ROOT", str(DEFAULT_PROC_ROOT))),
        backend=env.get("CHECKPROCS_BACKEND", "auto").lower(),
        log_level=env.get("CHECKPROCS_LOG_LEVEL", "WARNING").upper(),
        workers=workers,
    )
