"""
loxlex - Scanner for the Lox Scripting Language
===============================================

This package provides the lexical-analysis stage of a tree-walking Lox
interpreter: it turns raw source text into the ordered list of tokens a
parser consumes.

Main Components
---------------
- **tokens**: TokenType and the immutable Token record
- **scanner**: the single-pass Scanner and its ScannerOptions
- **errors**: exception hierarchy and diagnostics sinks
- **cli**: the loxscan token-dump tool

Quick Start
-----------
Scan a string and check for errors:
    >>> from loxlex import ErrorCollector, Scanner
    >>> source = 'print "hi" == "hi";'
    >>> collector = ErrorCollector(source)
    >>> tokens = Scanner(source, reporter=collector).scan_tokens()
    >>> collector.has_errors()  # the letters of 'print' are not tokens here
    True

Or use the command-line tool:
    $ loxscan script.lox
    $ loxscan --json script.lox
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from loxlex.tokens import Token, TokenType
from loxlex.scanner import Scanner, ScannerOptions, scan_tokens
from loxlex.errors import (
    LoxError,
    LexicalError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    UnterminatedCommentError,
    ScanFailedError,
    SourceLocation,
    ErrorReporter,
    ErrorCollector,
    ConsoleReporter,
)

__all__ = [
    # Version info
    "__version__",
    # Tokens
    "Token",
    "TokenType",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "scan_tokens",
    # Exception hierarchy
    "LoxError",
    "LexicalError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "UnterminatedCommentError",
    "ScanFailedError",
    "SourceLocation",
    # Diagnostics sinks
    "ErrorReporter",
    "ErrorCollector",
    "ConsoleReporter",
]
