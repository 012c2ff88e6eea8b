"""
TAL Lexer - turns expression source text into tokens, one at a time

The parser pulls tokens with next_token(). Every character of the source
ends up in exactly one token (whitespace included), so joining the literals
gives back the original text. After the EOF sentinel the lexer is exhausted
and keeps returning None.

xwest
"""

import logging
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Union

from .tokens import (
    Token, TokenKind, TextSpan, SourceLocation, PUNCTUATION, DECIMAL_DIGITS,
    COMMON_WHITESPACE
)
from .errors import (
    LexerError, LexerWarning, create_invalid_character_error,
    create_unusual_whitespace_warning
)

logger = logging.getLogger(__name__)


class ScannerState(Enum):
    """Lifecycle of a Lexer instance."""
    SCANNING = auto()       # cursor <= len(source)
    EXHAUSTED = auto()      # EOF already emitted; terminal


class Lexer:
    """
    TAL lexical analyzer.

    Produces one classified token per call to next_token(), tracking a
    character-offset cursor into the source. Unrecognized characters are
    emitted as INVALID tokens and recorded as diagnostics; lexing never
    stops early.

    Not safe for concurrent use: the cursor is mutated in place.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Expression source text
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.state = ScannerState.SCANNING
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

        logger.debug("Lexer created for %s (%d characters)", filename, len(source))

    @property
    def position(self) -> int:
        """Current cursor offset in characters."""
        return self.pos

    @property
    def is_exhausted(self) -> bool:
        return self.state == ScannerState.EXHAUSTED

    def next_token(self) -> Optional[Token]:
        """
        Scan the next token.

        Returns:
            The next token, the EOF sentinel once the source is consumed,
            and None on every call after that.
        """
        if self.state == ScannerState.EXHAUSTED:
            return None

        if self.pos == len(self.source):
            # Step past the end so the cursor also marks the terminal state
            self.pos += 1
            self.state = ScannerState.EXHAUSTED
            logger.debug("Reached end of input in %s", self.filename)
            return Token(TokenKind.EOF, TextSpan.sentinel())

        start_pos = self.pos
        current_char = self.source[self.pos]
        value = None

        if current_char in DECIMAL_DIGITS:
            value = self._consume_number()
            kind = TokenKind.NUMBER
        elif current_char.isspace():
            kind = self._consume_whitespace()
        else:
            kind = self._consume_punctuation()

        literal = self.source[start_pos:self.pos]
        return Token(kind, TextSpan(start_pos, self.pos, literal), value)

    def _consume_number(self) -> int:
        """Consume a maximal run of ASCII digits and return its value."""
        number = 0
        while self.pos < len(self.source) and self.source[self.pos] in DECIMAL_DIGITS:
            number = number * 10 + (ord(self.source[self.pos]) - ord('0'))
            self._advance()
        return number

    def _consume_whitespace(self) -> TokenKind:
        char = self.source[self.pos]
        if char not in COMMON_WHITESPACE:
            self.warnings.append(
                create_unusual_whitespace_warning(char, self.location_at_cursor())
            )
        self._advance()
        return TokenKind.WHITESPACE

    def _consume_punctuation(self) -> TokenKind:
        char = self.source[self.pos]
        kind = PUNCTUATION.get(char)
        if kind is None:
            location = self.location_at_cursor()
            logger.debug("Invalid character %r at %s", char, location)
            self.errors.append(create_invalid_character_error(char, location))
            kind = TokenKind.INVALID
        self._advance()
        return kind

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.source[self.pos] == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1

    def location_at_cursor(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def tokenize(self) -> List[Token]:
        """
        Drain the remaining tokens.

        Returns:
            List of tokens ending with the EOF token, or an empty list if
            the lexer was already exhausted
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def has_errors(self) -> bool:
        """Check if lexer encountered any invalid characters."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings)."""
        return self.errors + self.warnings


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    INVALID tokens are left in the result; nothing is raised.
    """
    return Lexer(source, filename).tokenize()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Tokenize a source string, rejecting unrecognized characters.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If the source contains an invalid character
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def strip_trivia(tokens: Iterable[Token]) -> List[Token]:
    """Drop whitespace tokens, keeping everything else in order."""
    return [token for token in tokens if not token.is_trivia]


def reconstruct_source(tokens: Iterable[Token]) -> str:
    """Join the literals of all tokens except the EOF sentinel."""
    return "".join(token.literal for token in tokens if not token.is_eof)
