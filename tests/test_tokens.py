"""
Tests for the TAL token data model.

Author: xwest
"""

import unittest
import dataclasses
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from talc.lexer.tokens import (
    Token, TokenKind, TextSpan, SourceLocation, EOF_LITERAL, PUNCTUATION,
)


class TestTextSpan(unittest.TestCase):

    def test_length(self):
        self.assertEqual(TextSpan(3, 7, "1234").length, 4)

    def test_sentinel(self):
        span = TextSpan.sentinel()
        self.assertEqual((span.start, span.end, span.literal), (0, 0, EOF_LITERAL))
        self.assertEqual(span.length, 0)

    def test_immutable(self):
        span = TextSpan(0, 1, "+")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            span.start = 5


class TestToken(unittest.TestCase):

    def test_number_token_str(self):
        token = Token(TokenKind.NUMBER, TextSpan(0, 2, "12"), 12)
        self.assertEqual(str(token), "NUMBER('12' -> 12)")
        self.assertEqual(token.literal, "12")

    def test_operator_token_str(self):
        token = Token(TokenKind.PLUS, TextSpan(2, 3, "+"))
        self.assertEqual(str(token), "PLUS('+')")
        self.assertIsNone(token.value)

    def test_classification_properties(self):
        plus = Token(TokenKind.PLUS, TextSpan(0, 1, "+"))
        paren = Token(TokenKind.LEFT_PAREN, TextSpan(0, 1, "("))
        space = Token(TokenKind.WHITESPACE, TextSpan(0, 1, " "))
        bad = Token(TokenKind.INVALID, TextSpan(0, 1, "#"))
        eof = Token(TokenKind.EOF, TextSpan.sentinel())

        self.assertTrue(plus.is_operator)
        self.assertFalse(paren.is_operator)
        self.assertTrue(paren.is_paren)
        self.assertTrue(space.is_trivia)
        self.assertTrue(bad.is_invalid)
        self.assertTrue(eof.is_eof)
        self.assertFalse(plus.is_eof)

    def test_tokens_compare_by_value(self):
        a = Token(TokenKind.NUMBER, TextSpan(0, 1, "5"), 5)
        b = Token(TokenKind.NUMBER, TextSpan(0, 1, "5"), 5)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_punctuation_table(self):
        self.assertEqual(set(PUNCTUATION), set("+-*/()"))
        self.assertEqual(PUNCTUATION["*"], TokenKind.ASTERISK)
        self.assertEqual(PUNCTUATION["/"], TokenKind.SLASH)


class TestSourceLocation(unittest.TestCase):

    def test_str(self):
        location = SourceLocation("expr.tal", 2, 5, 14)
        self.assertEqual(str(location), "expr.tal:2:5")
        self.assertEqual(repr(location), "SourceLocation('expr.tal', 2, 5, 14)")


if __name__ == '__main__':
    unittest.main()
