"""
Python logging configuration for the checkprocs command.

Logs go to stderr; stdout carries only the plugin's one-line result.
"""

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure Python logging for the command line.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)

    Log Format:
        YYYY-MM-DD HH:MM:SS [LEVEL] Message
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr
    )
