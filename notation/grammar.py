# notation/grammar.py
# This file is part of Seqex - Sequence Expression Matching
#
# LALR(1) grammar and parser for patterns using SLY

"""Pattern grammar implementation using SLY parser generator.

Grammar:
    program    := definition* expr
    definition := NAME '=' expr ';'
    expr       := expr '|' expr | expr '&' expr | '!' expr | '(' expr ')' | atom
    atom       := NAME | NAME '(' [expr (',' expr)*] ')' | value
                | '{' [value (',' value)*] '}'
    value      := NUMBER | STRING

Operator Precedence (lowest to highest):
- OR ('|'): left-associative
- AND ('&'): left-associative
- NOT ('!'): right-associative
"""

from sly import Parser
from .lexer import SeqexLexer
from .ast_nodes import And, Call, Definition, Expr, Name, Not, Or, Program, Value, ValueSet
from .exceptions import ParseError
from utils.logger import get_logger


class _SeqexParser(Parser):
    """SLY-based LALR(1) parser for patterns.

    Attributes:
        tokens: Token types from SeqexLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = SeqexLexer.tokens

    precedence = (
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def program(self, p) -> Program:
        """A pattern without definitions."""
        return Program((), p.expr)

    @_("definitions expr")
    def program(self, p) -> Program:
        """Definitions followed by the main expression."""
        return Program(tuple(p.definitions), p.expr)

    @_("definition")
    def definitions(self, p):
        return [p.definition]

    @_("definitions definition")
    def definitions(self, p):
        return p.definitions + [p.definition]

    @_("NAME ASSIGN expr SEMI")
    def definition(self, p) -> Definition:
        return Definition(p.NAME, p.expr)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("atom")
    def expr(self, p) -> Expr:
        return p.atom

    @_("NAME")
    def atom(self, p) -> Expr:
        return Name(p.NAME)

    @_("NAME LPAREN RPAREN")
    def atom(self, p) -> Expr:
        return Call(p.NAME, ())

    @_("NAME LPAREN arguments RPAREN")
    def atom(self, p) -> Expr:
        return Call(p.NAME, tuple(p.arguments))

    @_("value")
    def atom(self, p) -> Expr:
        return p.value

    @_("LBRACE RBRACE")
    def atom(self, p) -> Expr:
        return ValueSet(())

    @_("LBRACE values RBRACE")
    def atom(self, p) -> Expr:
        return ValueSet(tuple(value.value for value in p.values))

    @_("expr")
    def arguments(self, p):
        return [p.expr]

    @_("arguments COMMA expr")
    def arguments(self, p):
        return p.arguments + [p.expr]

    @_("value")
    def values(self, p):
        return [p.value]

    @_("values COMMA value")
    def values(self, p):
        return p.values + [p.value]

    @_("NUMBER")
    def value(self, p) -> Value:
        return Value(p.NUMBER)

    @_("STRING")
    def value(self, p) -> Value:
        return Value(p.STRING)

    def parse(self, text: str) -> Program:
        """Parse pattern text into a Program.

        Raises:
            ParseError: If the pattern is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing pattern: {text}")

        try:
            ast_result = super().parse(SeqexLexer().tokenize(text))

            if ast_result is None and text.strip() == "":
                raise ParseError("Input pattern is empty.")

            if ast_result is None:
                raise ParseError("Failed to parse pattern (syntax error).")

            logger.debug(f"Successfully parsed pattern into {type(ast_result).__name__}")
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of pattern"

        raise ParseError(error_msg)
