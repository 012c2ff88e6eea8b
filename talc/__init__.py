"""
TAL Compiler Package

Front end of the TAL arithmetic-expression compiler. Only the lexical
analysis stage lives here; the parser and later stages consume the token
stream produced by ``talc.lexer``.

Architecture:
    talc/
    └── lexer/           # Tokenization and lexical analysis

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind, TextSpan, tokenize

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenKind",
    "TextSpan",
    "tokenize",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
