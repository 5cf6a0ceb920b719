"""
loxlex Error Hierarchy
======================

This module defines the exception hierarchy for loxlex together with the
diagnostics sinks the scanner reports into.

The scanner itself never raises for malformed input. Every lexical problem
is handed to a diagnostics sink as ``report(line, message)`` and scanning
carries on, so that a single pass can surface every independent error in a
source file. The exception classes below double as the records a sink keeps,
and give callers something to raise once scanning is over.

Exception Hierarchy
-------------------
LoxError (base)
└── LexicalError - a problem found while scanning
    ├── UnexpectedCharacterError - character matches no token rule
    ├── UnterminatedStringError - string literal never closed
    ├── UnterminatedCommentError - block comment never closed
    └── ScanFailedError - aggregate report of several lexical errors

Diagnostics Sinks
-----------------
- ErrorCollector: records errors for batch reporting after the scan
- ConsoleReporter: prints each error immediately, Lox style

Error Message Format
--------------------
    filename:line: error: description
        source_line_text
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional, Protocol, TextIO

import click


# =============================================================================
# Message Constants
# =============================================================================
# The scanner reports plain (line, message) pairs. These are the messages it
# uses, shared so sinks can classify what they receive.

UNEXPECTED_CHARACTER = "Unexpected Character."
UNTERMINATED_STRING = "Unterminated string."
UNTERMINATED_COMMENT = "Unterminated block comment."


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all loxlex errors.

    Callers can catch every error raised by the package with one clause:

        try:
            collector.raise_if_errors()
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source code for error reporting.

    The scanner tracks lines only, so a location is a file and a line.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(LoxError):
    """
    Base class for problems found while scanning.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line number of the error, if known."""
        return self.location.line if self.location else None

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            script.lox:3: error: Unterminated string.
                print "hello;
            hint: add a closing '"' to complete the string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnexpectedCharacterError(LexicalError):
    """
    A character that starts no token.

    The scanner drops the character and resumes on the next one. Letters
    and digits land here too, since this scanner has no identifier or
    number rules.
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        message: str = UNEXPECTED_CHARACTER,
    ):
        super().__init__(message, location=location, source_line=source_line)


class UnterminatedStringError(LexicalError):
    """
    A string literal whose closing quote never appears.

    Example:
        print "hello;    // Missing closing quote
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        message: str = UNTERMINATED_STRING,
    ):
        super().__init__(
            message,
            location=location,
            hint="add a closing '\"' to complete the string",
            source_line=source_line,
        )


class UnterminatedCommentError(LexicalError):
    """A block comment opened with /* that runs to end of input."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        message: str = UNTERMINATED_COMMENT,
    ):
        super().__init__(
            message,
            location=location,
            hint="add closing */ to terminate the comment",
            source_line=source_line,
        )


class ScanFailedError(LexicalError):
    """
    Aggregate error raised after a scan that reported problems.

    The message is a report already formatted by ErrorCollector, so it is
    passed through without another location prefix.
    """

    def __init__(self, message: str, errors: Optional[list[LexicalError]] = None):
        self.errors = errors or []
        super().__init__(message)

    def _format_message(self) -> str:
        """Return message as-is - it's already a formatted aggregate report."""
        return self.message


# Maps a reported message to the error class that represents it
ERROR_KINDS: dict[str, type[LexicalError]] = {
    UNEXPECTED_CHARACTER: UnexpectedCharacterError,
    UNTERMINATED_STRING: UnterminatedStringError,
    UNTERMINATED_COMMENT: UnterminatedCommentError,
}


# =============================================================================
# Diagnostics Sinks
# =============================================================================

class ErrorReporter(Protocol):
    """
    Anything the scanner can report lexical errors to.

    The sink returns nothing to the scanner and must not interrupt it.
    """

    def report(self, line: int, message: str) -> None:
        ...


class ErrorCollector:
    """
    Collects lexical errors for batch reporting.

    The scanner reports into this sink and keeps going, so by the time
    scan_tokens() returns the collector holds every problem in the source.

    Example:
        collector = ErrorCollector(source, "script.lox")
        tokens = Scanner(source, reporter=collector).scan_tokens()

        if collector.has_errors():
            print(collector.format_report())
    """

    def __init__(self, source: Optional[str] = None, filename: str = "<input>"):
        """
        Initialize the error collector.

        Args:
            source: The scanned source, used to quote offending lines
            filename: Name of the source file (for error messages)
        """
        self.errors: list[LexicalError] = []
        self.filename = filename
        self._lines = source.split("\n") if source is not None else None

    def report(self, line: int, message: str) -> None:
        """Record an error reported by the scanner."""
        error_class = ERROR_KINDS.get(message)
        location = SourceLocation(self.filename, line)
        source_line = self._source_line(line)

        if error_class is None:
            self.add(LexicalError(message, location, source_line=source_line))
        else:
            self.add(error_class(location, source_line, message=message))

    def add(self, error: LexicalError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def _source_line(self, line: int) -> Optional[str]:
        if self._lines is None or not 1 <= line <= len(self._lines):
            return None
        return self._lines[line - 1].rstrip("\r")

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def format_report(self) -> str:
        """Format all errors for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")  # Blank line between errors

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise a ScanFailedError if any errors were collected."""
        if self.has_errors():
            raise ScanFailedError(self.format_report(), list(self.errors))


class ConsoleReporter:
    """
    Prints each lexical error as soon as it is reported.

    Output follows the classic Lox interpreter format:

        [line 3] Error: Unterminated string.

    Attributes:
        had_error: True once anything has been reported
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Args:
            stream: Where to write; defaults to stderr
        """
        self.stream = stream
        self.had_error = False

    def report(self, line: int, message: str) -> None:
        """Print one error and remember that it happened."""
        self.had_error = True
        text = f"[line {line}] Error: {message}"
        if self.stream is None:
            click.echo(text, err=True)
        else:
            click.echo(text, file=self.stream)

    def reset(self) -> None:
        """Forget previous errors (REPL drivers call this between lines)."""
        self.had_error = False
