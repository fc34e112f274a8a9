"""checkprocs - command-line entry point."""

import argparse
import logging
import sys
from pathlib import Path

from checkprocs.check import ExitCode, find_detached
from checkprocs.config import BACKENDS, load_settings
from checkprocs.errors import ProcessError
from checkprocs.logging_config import setup_logging
from checkprocs.table import open_table

logger = logging.getLogger(__name__)


class PluginArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with UNKNOWN instead of argparse's 0/2."""

    def error(self, message: str) -> None:
        self.print_help(sys.stderr)
        self.exit(ExitCode.UNKNOWN, f"\n{self.prog}: error: {message}\n")

    def exit(self, status: int = 0, message: str | None = None) -> None:
        super().exit(ExitCode.UNKNOWN, message)


def build_parser() -> PluginArgumentParser:
    """Create the argument parser for the checkprocs command."""
    parser = PluginArgumentParser(
        prog="checkprocs",
        description="Check that a process is running detached (its parent is init).",
        epilog='example:\n  checkprocs -c "sshd"',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-c", "--command", required=True, metavar="NAME", help="process name (string)")
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=None,
        help="process table implementation (env: CHECKPROCS_BACKEND, default: auto)",
    )
    parser.add_argument(
        "--proc-root",
        type=Path,
        default=None,
        help="procfs mount point (env: CHECKPROCS_PROC_ROOT, default: /proc)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (env: CHECKPROCS_LOG_LEVEL, default: WARNING)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="threads used to parse stat records, 0 parses sequentially (env: CHECKPROCS_WORKERS, default: 0)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the check and return the plugin exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.error("process name must not be empty")

    try:
        settings = load_settings().with_overrides(
            backend=args.backend,
            proc_root=args.proc_root,
            log_level=args.log_level.upper() if args.log_level else None,
            workers=args.workers,
        )
    except ProcessError as exc:
        print(f"Error: {exc}")
        return ExitCode.UNKNOWN

    setup_logging(settings.log_level)

    try:
        processes = open_table(settings).snapshot()
    except ProcessError as exc:
        logger.error("process table unavailable: %s", exc)
        print(f"Error: {exc}")
        return ExitCode.UNKNOWN

    logger.debug("read %d processes", len(processes))
    match = find_detached(processes, args.command)
    if match is not None:
        print(f"Process exist: {match.executable}, pid: {match.pid}")
        return ExitCode.OK

    print(f"Process do not exist: {args.command}")
    return ExitCode.CRITICAL


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
