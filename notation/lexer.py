# notation/lexer.py
# This file is part of Seqex - Sequence Expression Matching
#
# Lexical analyzer for pattern tokenization using SLY

"""Lexical analyzer for pattern strings.

Supported Tokens:
- Operators: !, &, |, (, ), {, }, ",", =, ;
- Numbers: integers and decimals, optionally negative
- Strings: single- or double-quoted, no escapes
- Names: builtin matchers, functions, predicates and definitions
- Comments: from '#' to the end of the line
"""

from sly import Lexer
from utils.logger import get_logger


class SeqexLexer(Lexer):
    """SLY-based lexer for pattern tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "NAME",
        "NUMBER",
        "STRING",
        "NOT",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
        "LBRACE",
        "RBRACE",
        "COMMA",
        "ASSIGN",
        "SEMI",
    }

    ignore = " \t\r"
    ignore_comment = r"\#.*"

    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"
    LBRACE = r"\{"
    RBRACE = r"\}"
    COMMA = r","
    ASSIGN = r"="
    SEMI = r";"

    NAME = r"[a-zA-Z_][a-zA-Z0-9_]*"

    @_(r"-?\d+(?:\.\d+)?")
    def NUMBER(self, t):
        t.value = float(t.value) if "." in t.value else int(t.value)
        return t

    @_(r"'[^']*'", r'"[^"]*"')
    def STRING(self, t):
        t.value = t.value[1:-1]
        return t

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += t.value.count("\n")

    def error(self, t):
        """Handle illegal characters during tokenization.

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at line {self.lineno}, "
            f"position {error_pos}"
        )
