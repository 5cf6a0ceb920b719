"""
Lox Scanner
===========

This module implements the scanner (lexer) for the Lox scripting language.
It makes a single pass over the source text and produces the list of
tokens the parser consumes.

Dispatch Rules
--------------
| Leading char  | Result                                          |
|---------------|-------------------------------------------------|
| ( ) { } , . - + ; | one-character token                         |
| *             | STAR_STAR if followed by *, else STAR           |
| ! = < >       | the _EQUAL variant if followed by =             |
| /             | // line comment, /* block comment, else SLASH   |
| space \\r \\t   | skipped                                         |
| \\n            | skipped, line counter advances                  |
| "             | string literal, may span lines                  |
| anything else | "Unexpected Character." reported, char dropped  |

Every ambiguous character is resolved with one character of lookahead
(maximal munch), so the scanner never backtracks.

Error Handling
--------------
Malformed input never stops a scan. Each problem is reported once to the
diagnostics sink as ``report(line, message)`` and scanning resumes with the
next character. The returned list always ends with exactly one EOF token.

Example Usage
-------------
>>> from loxlex.scanner import Scanner
>>> for token in Scanner('(1 != "a")').scan_tokens():
...     print(repr(token))
Token(LEFT_PAREN, '(', 1)
Token(BANG_EQUAL, '!=', 1)
Token(STRING, '"a"', 'a', 1)
Token(RIGHT_PAREN, ')', 1)
Token(EOF, '', 1)

The digit 1 above is reported as an unexpected character.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from loxlex.errors import (
    ErrorCollector,
    ErrorReporter,
    UNEXPECTED_CHARACTER,
    UNTERMINATED_COMMENT,
    UNTERMINATED_STRING,
)
from loxlex.tokens import (
    EQUAL_SUFFIXED_TOKENS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Scanner Options
# =============================================================================

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable, keeping the default if unset or invalid."""
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.debug("ignoring invalid value %r for %s", value, name)
    return default


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        block_comments: If True (default), /* starts a comment that runs to
                        the matching */ and may span lines. If False, /* is
                        treated like // and only skips to end of line.
        exponent_operator: If True (default), ** scans as STAR_STAR. If False,
                           it scans as two STAR tokens.
    """
    block_comments: bool = True
    exponent_operator: bool = True

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Environment variables (all optional):
            LOXLEX_BLOCK_COMMENTS: Enable /* ... */ comments (true/false)
            LOXLEX_EXPONENT_OPERATOR: Enable the ** operator (true/false)

        Returns:
            ScannerOptions with values from environment variables
        """
        defaults = cls()
        return cls(
            block_comments=_env_flag("LOXLEX_BLOCK_COMMENTS", defaults.block_comments),
            exponent_operator=_env_flag(
                "LOXLEX_EXPONENT_OPERATOR", defaults.exponent_operator
            ),
        )


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    The scanner keeps three cursors: the start of the lexeme being built,
    the next unread character, and the current line. They are private to
    the instance, so independent scanners can run side by side.

    Usage:
        collector = ErrorCollector(source, "script.lox")
        tokens = Scanner(source, reporter=collector).scan_tokens()

    Attributes:
        source: The source code being tokenized
        reporter: Diagnostics sink receiving lexical errors
        options: Scanner configuration
        filename: Name of the source file (for log messages)
    """

    NULL_CHAR = "\0"

    def __init__(
        self,
        source: str,
        reporter: Optional[ErrorReporter] = None,
        options: Optional[ScannerOptions] = None,
        filename: str = "<input>",
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: The complete Lox source text
            reporter: Where to report lexical errors (a fresh ErrorCollector
                      if None)
            options: Scanner configuration (uses defaults if None)
            filename: Name of the source file
        """
        self.source = source
        self.filename = filename
        self.options = options or ScannerOptions()
        self.reporter = reporter if reporter is not None else ErrorCollector(source, filename)

        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._error_count = 0

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source.

        Scanning the same Scanner again starts over and returns an equal,
        freshly built list.

        Returns:
            The tokens in source order, ending with a single EOF token
        """
        self._tokens = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._error_count = 0

        logger.debug("scanning %s (%d chars)", self.filename, len(self.source))

        while not self._at_end():
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))

        logger.debug(
            "scanned %s: %d tokens, %d errors",
            self.filename,
            len(self._tokens),
            self._error_count,
        )

        # Hand the list over; the next scan builds a new one
        tokens = self._tokens
        self._tokens = []
        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._current >= len(self.source)

    def _peek(self) -> str:
        """Look at the next unread character, or NULL_CHAR at end of source."""
        if self._at_end():
            return self.NULL_CHAR
        return self.source[self._current]

    def _advance(self) -> str:
        """
        Consume and return the next character.

        Newlines advance the line counter as they are consumed, whether
        they separate tokens or sit inside a string or block comment.
        """
        char = self.source[self._current]
        self._current += 1
        if char == "\n":
            self._line += 1
        return char

    def _match(self, expected: str) -> bool:
        """
        Consume next character if it matches expected.

        Args:
            expected: The character to match

        Returns:
            True if matched and consumed, False otherwise
        """
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    # =========================================================================
    # Token Creation and Error Reporting
    # =========================================================================

    def _add_token(self, token_type: TokenType, literal: Optional[str] = None) -> None:
        text = self.source[self._start:self._current]
        self._tokens.append(Token(token_type, text, literal, self._start_line))

    def _error(self, line: int, message: str) -> None:
        self._error_count += 1
        logger.debug("%s:%d: %s", self.filename, line, message)
        self.reporter.report(line, message)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        """Scan one lexeme starting at the current position."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
            return

        if char in EQUAL_SUFFIXED_TOKENS:
            single, double = EQUAL_SUFFIXED_TOKENS[char]
            self._add_token(double if self._match("=") else single)
            return

        if char == "*":
            if self.options.exponent_operator and self._match("*"):
                self._add_token(TokenType.STAR_STAR)
            else:
                self._add_token(TokenType.STAR)
            return

        if char == "/":
            if self._match("/"):
                self._skip_line_comment()
            elif self._match("*"):
                if self.options.block_comments:
                    self._skip_block_comment()
                else:
                    self._skip_line_comment()
            else:
                self._add_token(TokenType.SLASH)
            return

        # Whitespace; _advance() already counted any newline
        if char in " \r\t\n":
            return

        if char == '"':
            self._scan_string()
            return

        self._error(self._line, UNEXPECTED_CHARACTER)

    def _skip_line_comment(self) -> None:
        """Skip to (not past) the end of the line."""
        while self._peek() != "\n" and not self._at_end():
            self._advance()

    def _skip_block_comment(self) -> None:
        """
        Skip a block comment after its opening /*.

        Comments do not nest; an inner /* is just comment text.

        An unterminated comment is reported at the line of its opening /*,
        unlike an unterminated string, which is reported at the line where
        input ran out. A runaway comment swallows everything after it, so
        the line counter at end of input says nothing about where the
        problem is.
        """
        while not self._at_end():
            if self._advance() == "*" and self._match("/"):
                return

        self._error(self._start_line, UNTERMINATED_COMMENT)

    def _scan_string(self) -> None:
        """
        Scan a string literal after its opening quote.

        No escape sequences are processed: the literal is exactly the text
        between the quotes. An unterminated string is reported at the
        current line, i.e. the last line of the input.
        """
        while self._peek() != '"' and not self._at_end():
            self._advance()

        if self._at_end():
            self._error(self._line, UNTERMINATED_STRING)
            return

        self._advance()  # closing "
        value = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value)


# =============================================================================
# Convenience Functions
# =============================================================================

def scan_tokens(
    source: str,
    reporter: Optional[ErrorReporter] = None,
    options: Optional[ScannerOptions] = None,
    filename: str = "<input>",
) -> list[Token]:
    """
    Scan Lox source into tokens.

    Args:
        source: The complete Lox source text
        reporter: Where to report lexical errors
        options: Scanner configuration
        filename: Name of the source file

    Returns:
        The tokens in source order, ending with a single EOF token
    """
    return Scanner(source, reporter=reporter, options=options, filename=filename).scan_tokens()
