"""
Package logger and console/file log configuration for the CLI.
"""

from __future__ import annotations

import logging
from typing import List, Optional

LOG = logging.getLogger("pharmacv")

VERBOSITY_QUIET = 0
VERBOSITY_NORMAL = 1
VERBOSITY_VERBOSE = 2

FILE_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Loggers of libraries used during export, capped at WARNING
NOISY_LOGGERS = ("asyncio",)


def level_for(verbosity: int, debug: bool = False) -> int:
    if debug or verbosity >= VERBOSITY_VERBOSE:
        return logging.DEBUG
    if verbosity >= VERBOSITY_NORMAL:
        return logging.INFO
    return logging.WARNING


def _console_formatter(level: int) -> logging.Formatter:
    # Quiet runs print bare messages
    if level <= logging.INFO:
        return logging.Formatter("%(levelname)s: %(message)s")
    return logging.Formatter("%(message)s")


def _is_console(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)


def _file_handler(path: str) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
    return handler


def setup_logging(debug: bool, log_file: Optional[str] = None, verbosity: int = VERBOSITY_QUIET) -> None:
    """
    Configure the root logger for a CLI run.

    ``debug`` wins over ``verbosity``. Console handlers already installed
    (pytest's, or a previous call's) are retuned instead of duplicated. The
    optional log file always records DEBUG.
    """
    level = level_for(verbosity, debug)
    root = logging.getLogger()

    consoles = [h for h in root.handlers if _is_console(h)]
    if not root.handlers:
        consoles = [logging.StreamHandler()]
        root.addHandler(consoles[0])
    for handler in consoles:
        handler.setLevel(level)
        handler.setFormatter(_console_formatter(level))
    root.setLevel(level)

    if log_file:
        root.addHandler(_file_handler(log_file))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def fmt_issues(errors: List[str], warnings: List[str]) -> str:
    """One-line summary of a VerificationResult's issues, ``-`` when clean."""
    parts: List[str] = []
    if errors:
        parts.append("errors: " + ", ".join(errors))
    if warnings:
        parts.append("warnings: " + ", ".join(warnings))
    return " | ".join(parts) if parts else "-"
