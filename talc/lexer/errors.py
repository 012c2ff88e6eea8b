"""
Error handling for the TAL lexer.

The scanner never aborts on bad input. Unrecognized characters are turned
into INVALID tokens and, alongside, into diagnostics collected on the lexer
so a parser or driver can report them with source locations and
suggestions.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Error produced for an unrecognized character.

    The lexer collects these instead of raising them; only the strict
    ``tokenize_string`` helper raises one.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop compilation.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Suggestions attached to diagnostics for characters the lexer rejects.
    """

    # Unicode look-alikes people paste in from documents and calculators
    ASCII_ALTERNATIVES = {
        '×': ['*'],
        '⋅': ['*'],
        '∗': ['*'],
        '·': ['*'],
        '÷': ['/'],
        '∕': ['/'],
        '⁄': ['/'],
        '−': ['-'],
        '–': ['-'],
        '—': ['-'],
        '＋': ['+'],
        '＊': ['*'],
        '／': ['/'],
        '（': ['('],
        '）': [')'],
        '[': ['('],
        ']': [')'],
        '{': ['('],
        '}': [')'],
    }

    @staticmethod
    def suggest_ascii_alternatives(char: str) -> List[str]:
        """Suggest ASCII operators or parentheses for a rejected character."""
        return list(ErrorRecovery.ASCII_ALTERNATIVES.get(char, []))


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
}

WARNING_CODES = {
    "W001": "Unusual whitespace character",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an invalid character."""
    suggestions = ErrorRecovery.suggest_ascii_alternatives(char)

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in a TAL expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unusual_whitespace_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for whitespace other than space, tab, CR and LF."""
    return LexerWarning(
        message=f"Unusual whitespace character U+{ord(char):04X}",
        location=location,
        code="W001",
        help_text="This character is treated as whitespace but is easy to miss.",
        suggestions=["Replace it with a regular space"]
    )
