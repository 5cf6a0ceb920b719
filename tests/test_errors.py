# =============================================================================
# test_errors.py - Error Hierarchy and Diagnostics Sink Tests
# =============================================================================
# Tests for the exception classes, ErrorCollector and ConsoleReporter.
# =============================================================================

import io

import pytest

from loxlex.errors import (
    ConsoleReporter,
    ErrorCollector,
    LexicalError,
    LoxError,
    ScanFailedError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from loxlex.scanner import Scanner


# =============================================================================
# Exception Tests
# =============================================================================

class TestExceptions:
    """Test exception formatting and hierarchy."""

    def test_hierarchy(self):
        for cls in (
            UnexpectedCharacterError,
            UnterminatedStringError,
            UnterminatedCommentError,
            ScanFailedError,
        ):
            assert issubclass(cls, LexicalError)
        assert issubclass(LexicalError, LoxError)

    def test_source_location_str(self):
        assert str(SourceLocation("main.lox", 4)) == "main.lox:4"

    def test_format_with_location_and_source(self):
        error = UnexpectedCharacterError(SourceLocation("main.lox", 2), "+ @")
        assert str(error) == "main.lox:2: error: Unexpected Character.\n    + @"
        assert error.line == 2

    def test_format_with_hint(self):
        error = UnterminatedStringError(SourceLocation("main.lox", 1))
        assert str(error) == (
            "main.lox:1: error: Unterminated string.\n"
            "hint: add a closing '\"' to complete the string"
        )

    def test_format_without_location(self):
        error = LexicalError("something odd")
        assert str(error) == "error: something odd"
        assert error.line is None

    def test_scan_failed_passes_message_through(self):
        error = ScanFailedError("already formatted")
        assert str(error) == "already formatted"
        assert error.errors == []


# =============================================================================
# ErrorCollector Tests
# =============================================================================

class TestErrorCollector:
    """Test batch collection of scanner reports."""

    def test_starts_empty(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        assert collector.error_count() == 0

    def test_report_classifies_messages(self):
        collector = ErrorCollector()
        collector.report(1, "Unexpected Character.")
        collector.report(2, "Unterminated string.")
        collector.report(3, "Unterminated block comment.")
        collector.report(4, "Something else.")
        assert [type(e) for e in collector.errors] == [
            UnexpectedCharacterError,
            UnterminatedStringError,
            UnterminatedCommentError,
            LexicalError,
        ]
        assert [e.line for e in collector.errors] == [1, 2, 3, 4]

    def test_quotes_source_line(self):
        collector = ErrorCollector("+\r\n-@", "f.lox")
        collector.report(2, "Unexpected Character.")
        assert collector.errors[0].source_line == "-@"
        assert collector.errors[0].location == SourceLocation("f.lox", 2)

    def test_line_out_of_range(self):
        collector = ErrorCollector("+")
        collector.report(5, "Unexpected Character.")
        assert collector.errors[0].source_line is None

    def test_format_report(self):
        source = "@"
        collector = ErrorCollector(source)
        Scanner(source, reporter=collector).scan_tokens()
        assert collector.format_report() == (
            "<input>:1: error: Unexpected Character.\n"
            "    @\n"
            "\n"
            "1 error"
        )

    def test_format_report_plural(self):
        collector = ErrorCollector()
        collector.report(1, "Unexpected Character.")
        collector.report(1, "Unexpected Character.")
        assert collector.format_report().endswith("2 errors")

    def test_raise_if_errors(self):
        collector = ErrorCollector('"open')
        Scanner('"open', reporter=collector).scan_tokens()
        with pytest.raises(ScanFailedError) as exc_info:
            collector.raise_if_errors()
        assert len(exc_info.value.errors) == 1
        assert "Unterminated string." in str(exc_info.value)

    def test_raise_if_errors_clean(self):
        ErrorCollector().raise_if_errors()

    def test_clear(self):
        collector = ErrorCollector()
        collector.report(1, "Unexpected Character.")
        collector.clear()
        assert not collector.has_errors()


# =============================================================================
# ConsoleReporter Tests
# =============================================================================

class TestConsoleReporter:
    """Test immediate Lox-style reporting."""

    def test_prints_to_stream(self):
        stream = io.StringIO()
        reporter = ConsoleReporter(stream)
        Scanner("+\n&", reporter=reporter).scan_tokens()
        assert stream.getvalue() == "[line 2] Error: Unexpected Character.\n"
        assert reporter.had_error

    def test_defaults_to_stderr(self, capsys):
        reporter = ConsoleReporter()
        reporter.report(3, "Unterminated string.")
        captured = capsys.readouterr()
        assert captured.err == "[line 3] Error: Unterminated string.\n"
        assert captured.out == ""

    def test_no_errors(self):
        reporter = ConsoleReporter(io.StringIO())
        Scanner("( )", reporter=reporter).scan_tokens()
        assert not reporter.had_error

    def test_reset(self):
        reporter = ConsoleReporter(io.StringIO())
        reporter.report(1, "Unexpected Character.")
        reporter.reset()
        assert not reporter.had_error
