# tests/notation_tests/test_lexer_tokens.py
# This file is part of Seqex - Sequence Expression Matching
#
# Test suite for pattern lexer tokenization and error handling

"""Test suite for pattern lexer functionality.

This module tests the lexical analysis phase of pattern parsing, verifying
tokenization of names, literals, operators and comments, and error handling
for illegal characters.
"""

import pytest
from notation.lexer import SeqexLexer
from utils.logger import get_logger


class TestSeqexLexer:
    """Test cases for pattern lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = SeqexLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text."""
        self.logger.debug(f"Tokenizing: '{text}'")
        return [token.type for token in self.lexer.tokenize(text)]

    def _tokenize_to_values(self, text: str) -> list:
        return [token.value for token in self.lexer.tokenize(text)]

    # Test cases for valid tokenization scenarios
    VALID_TOKENIZATION_CASES = [
        # Names and calls
        ("even", ["NAME"]),
        ("zero_or_more", ["NAME"]),
        ("seq(a, 'b')", ["NAME", "LPAREN", "NAME", "COMMA", "STRING", "RPAREN"]),
        ("exactly()", ["NAME", "LPAREN", "RPAREN"]),
        # Literals and sets
        ("42", ["NUMBER"]),
        ('"text"', ["STRING"]),
        ("{1, -2.5}", ["LBRACE", "NUMBER", "COMMA", "NUMBER", "RBRACE"]),
        # Operators
        ("!a & b | c", ["NOT", "NAME", "AND", "NAME", "OR", "NAME"]),
        ("a&!b", ["NAME", "AND", "NOT", "NAME"]),
        # Definitions
        ("x = 1;", ["NAME", "ASSIGN", "NUMBER", "SEMI"]),
        # Comments and whitespace
        ("a # trailing comment", ["NAME"]),
        ("# only a comment", []),
        (" \t a \n & \r\n b ", ["NAME", "AND", "NAME"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes valid pattern syntax.

        Args:
            input_text: Valid pattern text
            expected_types: Expected sequence of token types
        """
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_number_values(self):
        """Integers stay integers, decimals become floats."""
        assert self._tokenize_to_values("3 -7 2.5 -0.25") == [3, -7, 2.5, -0.25]
        assert isinstance(self._tokenize_to_values("3")[0], int)

    def test_string_values_are_unquoted(self):
        assert self._tokenize_to_values("'a b' \"it's\"") == ["a b", "it's"]

    def test_line_numbers_follow_newlines(self):
        tokens = list(self.lexer.tokenize("a\n\nb"))
        assert [token.lineno for token in tokens] == [1, 3]

    ILLEGAL_CHARACTERS = ["@", "$", "%", "^", "*", "`", "~", "?", ":", "[", "]", "\\", "+", "<", ">"]

    @pytest.mark.parametrize("illegal_char", ILLEGAL_CHARACTERS)
    def test_illegal_character_handling(self, illegal_char):
        """Test lexer raises ValueError for illegal characters.

        Args:
            illegal_char: Character not allowed in patterns
        """
        test_input = f"a & {illegal_char}"

        with pytest.raises(ValueError) as exc_info:
            self._tokenize_to_types(test_input)

        error_message = str(exc_info.value)
        assert "Illegal character" in error_message
        assert illegal_char in error_message

    def test_unterminated_string_is_illegal(self):
        with pytest.raises(ValueError):
            self._tokenize_to_types("seq('abc)")
