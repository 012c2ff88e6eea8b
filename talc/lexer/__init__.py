"""
TAL Lexer Package

Pull-based lexical analyzer for TAL arithmetic expressions.

Key Features:
- Integer literals, the four arithmetic operators and parentheses
- One token per whitespace character (trivia is kept, not skipped)
- Unrecognized characters become INVALID tokens instead of aborting
- Character-offset spans whose literals reproduce the source exactly
- Explicit end-of-input sentinel followed by an exhausted state

Author: xwest
"""

from .tokens import Token, TokenKind, TextSpan, SourceLocation, EOF_LITERAL
from .lexer import (
    Lexer, ScannerState, tokenize, tokenize_string, strip_trivia,
    reconstruct_source,
)
from .errors import LexerError, LexerWarning, Diagnostic

__all__ = [
    "Lexer",
    "ScannerState",
    "Token",
    "TokenKind",
    "TextSpan",
    "SourceLocation",
    "EOF_LITERAL",
    "tokenize",
    "tokenize_string",
    "strip_trivia",
    "reconstruct_source",
    "LexerError",
    "LexerWarning",
    "Diagnostic",
]
