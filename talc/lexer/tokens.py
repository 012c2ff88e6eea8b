"""
Token definitions for the TAL lexer.

This module defines the closed set of token kinds produced by the scanner:
- Integer literals
- Arithmetic operators (+ - * /)
- Parentheses
- Whitespace trivia
- Invalid characters and the end-of-input sentinel

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenKind(Enum):
    """
    Enumeration of all token kinds in TAL.

    The set is closed: every token carries exactly one of these.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42 (value stored on Token.value)

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )

    # ========================================================================
    # Trivia, Error and Special Tokens
    # ========================================================================
    WHITESPACE = auto()             # one whitespace character
    INVALID = auto()                # Unrecognized character
    EOF = auto()                    # End of input


# Placeholder literal carried by the end-of-input sentinel span
EOF_LITERAL = "\0"


@dataclass(frozen=True)
class TextSpan:
    """
    Half-open character range ``[start, end)`` a token was read from,
    together with the exact source text it covers.
    """
    start: int
    end: int
    literal: str

    @property
    def length(self) -> int:
        return self.end - self.start

    @classmethod
    def sentinel(cls) -> "TextSpan":
        """Zero-length span used by the end-of-input token."""
        return cls(0, 0, EOF_LITERAL)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics; tokens themselves only carry a TextSpan.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in a TAL expression.

    Pairs the token kind with the span it was read from. NUMBER tokens also
    carry their integer value; every other kind leaves ``value`` as None.
    """
    kind: TokenKind
    span: TextSpan
    value: Optional[int] = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.kind.name}({self.literal!r} -> {self.value!r})"
        return f"{self.kind.name}({self.literal!r})"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.span.start}, {self.span.end}, "
                f"{self.literal!r}, {self.value!r})")

    @property
    def literal(self) -> str:
        return self.span.literal

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenKind.EOF

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic operator."""
        return self.kind in OPERATOR_KINDS

    @property
    def is_paren(self) -> bool:
        return self.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN)

    @property
    def is_trivia(self) -> bool:
        """Check if a parser may discard this token."""
        return self.kind == TokenKind.WHITESPACE

    @property
    def is_invalid(self) -> bool:
        return self.kind == TokenKind.INVALID


# Lookup table for single-character tokens
PUNCTUATION = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

OPERATOR_KINDS = frozenset({
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.ASTERISK,
    TokenKind.SLASH,
})

# Only ASCII digits start a number; str.isdigit() would also accept '²' or '٣'
DECIMAL_DIGITS = frozenset("0123456789")

# Whitespace that is expected in source text; anything else str.isspace()
# accepts is still lexed as WHITESPACE but reported with a warning
COMMON_WHITESPACE = frozenset(" \t\r\n")
