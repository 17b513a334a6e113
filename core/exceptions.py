# core/exceptions.py
# This file is part of Seqex - Sequence Expression Matching
#
# Exceptions raised while building or evaluating matchers

"""Domain-specific exceptions for matcher construction and evaluation.

Rejecting an input is never an error: it is the INVALID verdict. The
exceptions below signal misuse instead, either a malformed matcher definition
or tokens that a matcher cannot meaningfully handle.
"""


class SeqexError(Exception):
    """Base class for errors raised by the matching engine."""

    pass


class MatcherDefinitionError(SeqexError, ValueError):
    """Raised when a matcher is constructed from malformed arguments.

    Examples are negative cardinality bounds, an upper bound below the lower
    bound, or a lazy thunk that does not produce a matcher.
    """

    pass


class ComparabilityError(SeqexError, TypeError):
    """Raised when an ordering-based matcher meets tokens with no mutual order.

    Indicates that the matcher was applied to an incompatible token domain,
    which is distinct from a legitimate content mismatch.
    """

    pass
