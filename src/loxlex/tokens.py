"""
Lox Token Model
===============

Token types and the immutable Token record produced by the scanner.

Token Categories
----------------
- Punctuation: ( ) { } , . ; and the arithmetic operators - + / *
- Exponentiation: **
- Comparison/assignment: ! != = == < <= > >=
- Literals: "double quoted" strings
- EOF: always the last token of a scan

There are no identifier, keyword or number categories. The scanner reports
letters and digits as unexpected characters.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Lexical categories of the Lox scanner."""

    # === Single-character Punctuation ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or Two Character Operators ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    STAR_STAR = auto()      # **

    # === Literals ===
    STRING = auto()         # "..."

    # === Structural ===
    EOF = auto()            # End of input


# Characters that always produce a one-character token
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
}

# Characters that become a two-character token when followed by '='
EQUAL_SUFFIXED_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token scanned from Lox source.

    Attributes:
        type: The TokenType classification
        lexeme: Exact source text of the token ("" for EOF)
        literal: Inner text for STRING tokens, None for everything else
        line: Line on which the token began (1-indexed)
    """
    type: TokenType
    lexeme: str
    literal: Optional[str]
    line: int

    def __str__(self) -> str:
        """Render as 'TYPE lexeme literal', the way Lox tools print tokens."""
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, {self.line})"

    def to_dict(self) -> dict:
        """Plain-data form used by the JSON token dump."""
        return {
            "type": self.type.name,
            "lexeme": self.lexeme,
            "literal": self.literal,
            "line": self.line,
        }
