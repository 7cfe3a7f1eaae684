"""
CLI Error Handling and Reporting
================================

Exit codes, the top-level exception handler, and the reporter that
prints lexical errors to the terminal.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from pylox.errors import format_diagnostic


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    SCAN_ERROR = 1       # Lexical errors were reported
    INVALID_ARGS = 2     # Invalid arguments or unreadable files
    INTERNAL_ERROR = 3   # Unexpected internal error


class ConsoleReporter:
    """
    Error reporter that prints ``[line N] Error: message`` to stderr.

    Keeps a count so the caller can choose an exit code, and can be
    reset between interactive lines.
    """

    def __init__(self) -> None:
        self.error_count = 0

    def report(self, line: int, message: str) -> None:
        click.echo(format_diagnostic(line, message), err=True)
        self.error_count += 1

    @property
    def had_error(self) -> bool:
        return self.error_count > 0

    def reset(self) -> None:
        self.error_count = 0


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI.

    Formats the error message, optionally prints a traceback in verbose
    mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    if isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, UnicodeDecodeError):
        click.echo(f"Error: source is not valid UTF-8: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
