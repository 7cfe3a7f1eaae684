"""
pylox Error Hierarchy
=====================

This module defines the exception hierarchy and error-reporting plumbing
for pylox. All exceptions inherit from LoxError, allowing callers to catch
every pylox-related error with a single except clause if desired.

Exception Hierarchy
-------------------
LoxError (base)
├── ScanError - a single lexical diagnostic
│   ├── UnexpectedCharacterError - character matches no token class
│   └── UnterminatedStringError - string literal never closed
└── ScanFailedError - aggregate of every diagnostic from one scan

Reporting Model
---------------
The scanner never raises ScanError. Lexical faults are recoverable: the
scanner builds the error object, keeps it, and hands ``(line, message)``
to an ErrorReporter. What happens next (printing, collecting, aborting)
is decided by whoever supplied the reporter.

Error messages follow this format:
    [line 3] Error: Unexpected character '@'.
        var a = @b;
    hint: remove the character or put it inside a string
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol, runtime_checkable


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all pylox errors.

        try:
            collector.raise_if_errors()
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Scan Diagnostics
# =============================================================================

class ScanError(LoxError):
    """
    A lexical error found while scanning.

    Attributes:
        message: The error description
        line: Line number where the error occurred (1-indexed)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        line: int,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.line = line
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error with its line, source context, and hint.

        Example output:
            [line 1] Error: Unterminated string.
                print "hello;
            hint: add a closing '"' to complete the string
        """
        parts = [format_diagnostic(self.line, self.message)]

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnexpectedCharacterError(ScanError):
    """
    A character that belongs to no recognized token class.

    Everything outside the ASCII punctuation, digit, letter and whitespace
    classes ends up here, including any non-ASCII character.
    """

    def __init__(
        self,
        char: str,
        line: int,
        source_line: Optional[str] = None,
    ):
        self.char = char
        shown = char if char.isprintable() and char.isascii() else repr(char)[1:-1]
        super().__init__(
            f"Unexpected character '{shown}'.",
            line,
            hint="remove the character or put it inside a string",
            source_line=source_line,
        )


class UnterminatedStringError(ScanError):
    """
    A string literal whose closing quote never appears.

    The reported line is the line the string started on, not the line
    where the input ran out.
    """

    def __init__(
        self,
        line: int,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Unterminated string.",
            line,
            hint="add a closing '\"' to complete the string",
            source_line=source_line,
        )


class ScanFailedError(LoxError):
    """
    Aggregate error covering every diagnostic of a scan.

    The message is the pre-formatted report from ErrorCollector.
    """

    def __init__(self, report: str, diagnostics: Optional[List["Diagnostic"]] = None):
        self.diagnostics = list(diagnostics or [])
        super().__init__(report)


def format_diagnostic(line: int, message: str) -> str:
    """Render a ``(line, message)`` pair as ``[line N] Error: message``."""
    return f"[line {line}] Error: {message}"


# =============================================================================
# Error Reporting
# =============================================================================

@runtime_checkable
class ErrorReporter(Protocol):
    """
    Sink for lexical diagnostics.

    The scanner calls ``report`` once per error and never looks at what
    the sink does with it.
    """

    def report(self, line: int, message: str) -> None:
        ...


@dataclass(frozen=True)
class Diagnostic:
    """A single ``(line, message)`` pair received by a reporter."""
    line: int
    message: str

    def __str__(self) -> str:
        return format_diagnostic(self.line, self.message)


class ErrorCollector:
    """
    Collects diagnostics for batch reporting.

    This is the reporter a Scanner uses when none is supplied. It lets a
    caller scan everything first and decide afterwards whether the
    errors are fatal.

    Example:
        collector = ErrorCollector()
        tokens = Scanner(source, collector).scan_tokens()

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self) -> None:
        self.diagnostics: List[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        """Record one diagnostic."""
        self.diagnostics.append(Diagnostic(line, message))

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been collected."""
        return len(self.diagnostics) > 0

    def error_count(self) -> int:
        """Return the number of collected diagnostics."""
        return len(self.diagnostics)

    def format_report(self) -> str:
        """Format all diagnostics followed by a summary line."""
        lines = [str(diagnostic) for diagnostic in self.diagnostics]

        count = len(self.diagnostics)
        word = "error" if count == 1 else "errors"
        lines.append(f"{count} {word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Forget all collected diagnostics."""
        self.diagnostics.clear()

    def raise_if_errors(self) -> None:
        """Raise ScanFailedError if any diagnostics were collected."""
        if self.has_errors():
            raise ScanFailedError(self.format_report(), self.diagnostics)
