# notation/__init__.py
# This file is part of Seqex - Sequence Expression Matching
#
# Textual pattern notation compiled into matcher trees

"""Pattern notation for sequence expressions.

A compact textual form of matcher trees, convenient for pattern files and the
command-line runner. Patterns are tokenized and parsed with SLY into an AST
and then compiled into the matchers of the ``core`` package.

Core Functions:
    parse: Converts pattern strings into a Program AST
    compile_pattern: Complete parsing and compilation pipeline

Example:
    >>> from notation import compile_pattern
    >>> m = compile_pattern("seq(unique & even, exactly(3) & text)")
    >>> # Distinct even numbers followed by exactly three strings
"""

from typing import Any, Callable, Mapping, Optional

from core import Matcher
from utils.logger import get_logger

from .ast_nodes import Program
from .compiler import PatternCompiler, compile_program
from .exceptions import CompileError, ParseError
from .grammar import _SeqexParser


def parse(source: str) -> Program:
    """Parse a pattern string into its AST.

    Uses a fresh parser instance for each invocation.

    Args:
        source: Pattern text

    Returns:
        Program node holding the definitions and the main expression

    Raises:
        ParseError: Pattern syntax is malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing pattern: {source}")

    parser = _SeqexParser()

    try:
        return parser.parse(source)

    except ParseError:
        logger.debug("ParseError encountered during pattern parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def compile_pattern(
    source: str,
    predicates: Optional[Mapping[str, Callable[[Any], Any]]] = None,
    functions: Optional[Mapping[str, Callable[[Any], Any]]] = None,
) -> Matcher:
    """Parse a pattern string and compile it into a matcher tree.

    Args:
        source: Pattern text
        predicates: Extra named predicates usable as bare names
        functions: Extra named functions usable in project()

    Returns:
        Root matcher of the compiled pattern

    Raises:
        ParseError: Pattern syntax is malformed
        CompileError: Pattern refers to unknown names or misuses a builtin
    """
    program = parse(source)
    matcher = compile_program(program, predicates, functions)
    get_logger().debug(f"Pattern compiled into {type(matcher).__name__}")
    return matcher


__all__ = [
    "parse",
    "compile_pattern",
    "compile_program",
    "PatternCompiler",
    "Program",
    "ParseError",
    "CompileError",
]
