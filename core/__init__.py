# core/__init__.py
# This file is part of Seqex - Sequence Expression Matching
#
# Core module public API for sequence expressions

"""Core components for sequence expressions.

Sequence expressions generalize regular expressions from character strings to
sequences of arbitrary tokens. Small matchers (cardinality, equality,
predicates, order and uniqueness constraints) are combined with boolean and
serial composition into immutable matcher trees, which are evaluated one token
at a time through the ``begin`` / ``advance`` contract.

Primary Components:
    Verdict: Two-flag outcome (may continue, is matching) and its algebra
    Matcher: Base class of all sequence expressions
    Serial: Path-tracking composition of child matchers under a superior
    MatchSession: Evaluation driver with logging and path-set statistics

Example:
    >>> from core import seq, literal, one_or_more, predicate, matches
    >>> m = seq(literal("start"), one_or_more, predicate(str.isdigit))
    >>> matches(m, ["start", "x", "1", "2"])
    True
"""

from .combinators import (
    And,
    Not,
    Or,
    Project,
    logical_and,
    logical_not,
    logical_or,
    project,
)
from .compare import compare, eq, ge, gt, le, lt, rng
from .exceptions import ComparabilityError, MatcherDefinitionError, SeqexError
from .matcher import Lazy, Matcher, advance_live, lazy
from .primitives import (
    AnyOf,
    Cardinality,
    Literal,
    Predicate,
    StatelessCardinality,
    any_of,
    between,
    cardinality,
    exactly,
    exactly_one,
    literal,
    one_or_more,
    optional,
    predicate,
    zero_or_more,
)
from .serial import Path, PathSet, Serial, seq, serial
from .session import MatchSession, evaluate, matches, verdicts
from .stateful import (
    NOTHING,
    Ascending,
    IndexRange,
    Unique,
    Varying,
    ascending,
    index_range,
    unique,
    varying,
)
from .verdict import Verdict, intersection, union

__all__ = [
    "Verdict",
    "union",
    "intersection",
    "Matcher",
    "Lazy",
    "lazy",
    "advance_live",
    "Cardinality",
    "StatelessCardinality",
    "Literal",
    "AnyOf",
    "Predicate",
    "cardinality",
    "exactly",
    "between",
    "exactly_one",
    "optional",
    "zero_or_more",
    "one_or_more",
    "literal",
    "any_of",
    "predicate",
    "NOTHING",
    "Varying",
    "Ascending",
    "Unique",
    "IndexRange",
    "varying",
    "ascending",
    "unique",
    "index_range",
    "Not",
    "And",
    "Or",
    "Project",
    "logical_not",
    "logical_and",
    "logical_or",
    "project",
    "Path",
    "PathSet",
    "Serial",
    "serial",
    "seq",
    "compare",
    "gt",
    "ge",
    "eq",
    "le",
    "lt",
    "rng",
    "MatchSession",
    "evaluate",
    "verdicts",
    "matches",
    "SeqexError",
    "MatcherDefinitionError",
    "ComparabilityError",
]

__version__ = "1.0.0"
__description__ = "Core components for sequence expressions"
