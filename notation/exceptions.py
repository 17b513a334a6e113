# notation/exceptions.py
# This file is part of Seqex - Sequence Expression Matching
#
# Exceptions for pattern parsing and compilation

"""Domain-specific exceptions for the pattern notation.

Both exceptions are raised before any token is matched: a pattern either
compiles into a matcher tree or fails with one of these errors.
"""


class ParseError(RuntimeError):
    """Exception raised when pattern parsing fails due to syntax errors.

    Covers illegal characters, malformed expressions and empty input.
    """

    pass


class CompileError(ParseError):
    """Exception raised when a well-formed pattern cannot become a matcher.

    Raised for unknown names, duplicate or self-referential definitions,
    and calls with the wrong number or kind of arguments.
    """

    pass
