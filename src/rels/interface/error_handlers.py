"""Translate domain errors into a terminal message and a process exit code.

Inner layers raise; this is the only place that turns an exception into
output, so a failed run never prints a partial report.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from rels.domain.exceptions import (
    InvalidRepositoryError,
    MissingRepositoryError,
    RelsError,
)

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2

_EXCEPTION_EXIT_CODES: list[tuple[type[RelsError], int]] = [
    (MissingRepositoryError, EXIT_USAGE),
    (InvalidRepositoryError, EXIT_USAGE),
    (RelsError, EXIT_FAILURE),
]


def exit_code_for(exc: BaseException) -> int:
    """Return the exit code of the first matching exception type."""
    for exc_type, code in _EXCEPTION_EXIT_CODES:
        if isinstance(exc, exc_type):
            return code
    return EXIT_FAILURE


def report_error(console: Console, exc: Exception) -> int:
    """Print *exc* on *console* and return the exit code to use."""
    if isinstance(exc, RelsError):
        logger.info("%s: %s", type(exc).__name__, exc)
        message = str(exc)
    else:
        logger.exception("Unhandled exception")
        message = "An unexpected error occurred. Please try again later."

    console.print(f"[red bold]error:[/red bold] {escape(message)}")
    return exit_code_for(exc)
