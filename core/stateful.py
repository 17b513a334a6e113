# core/stateful.py
# This file is part of Seqex - Sequence Expression Matching
#
# Order-, change- and uniqueness-sensitive matchers

"""Matchers whose verdict depends on tokens seen earlier in the session.

Varying and Ascending remember the previous token, Unique remembers every
token seen so far, and IndexRange counts through the indices 0..n-1. Before
any token is seen the previous-token state holds the ``NOTHING`` sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet

from sentinels import Sentinel

from .exceptions import ComparabilityError, MatcherDefinitionError
from .matcher import Matcher, Step
from .verdict import Verdict

NOTHING = Sentinel("NOTHING")


@dataclass(frozen=True, slots=True)
class Varying(Matcher):
    """Sequences with no two consecutive equal tokens."""

    def begin(self) -> Step:
        # Nothing precedes the first token, so the empty prefix is accepted
        return NOTHING, Verdict.SATISFIED

    def advance(self, state: Any, token: Any) -> Step:
        return token, Verdict.from_bool(state is NOTHING or token != state)


@dataclass(frozen=True, slots=True)
class Ascending(Matcher):
    """Sequences in which every token is >= the token before it.

    Raises:
        ComparabilityError: Two consecutive tokens cannot be ordered
    """

    def begin(self) -> Step:
        return NOTHING, Verdict.SATISFIED

    def advance(self, state: Any, token: Any) -> Step:
        if state is NOTHING:
            return token, Verdict.SATISFIED
        try:
            ordered = state <= token
        except TypeError as exc:
            raise ComparabilityError(
                f"Cannot order {state!r} and {token!r}: {exc}"
            ) from exc
        return token, Verdict.from_bool(ordered)


@dataclass(frozen=True, slots=True)
class Unique(Matcher):
    """Sequences with no repeated token anywhere in the session.

    Every valid prefix, including the empty one, is SATISFIED.
    """

    def begin(self) -> Step:
        return frozenset(), Verdict.SATISFIED

    def advance(self, state: FrozenSet[Any], token: Any) -> Step:
        return state | {token}, Verdict.from_bool(token not in state)


@dataclass(frozen=True, slots=True)
class IndexRange(Matcher):
    """The exact sequence 0, 1, ..., n-1.

    This is the superior matcher behind ``seq``: each child is used once, in
    order, with no skips.
    """

    n: int

    def __post_init__(self):
        if self.n < 0:
            raise MatcherDefinitionError(f"IndexRange size must be >= 0, got {self.n}")

    def begin(self) -> Step:
        # Even the empty range only continues, so seq() accepts nothing
        return 0, Verdict.CONTINUE

    def advance(self, state: int, token: Any) -> Step:
        if token != state:
            verdict = Verdict.INVALID
        elif state < self.n - 1:
            verdict = Verdict.CONTINUE
        elif state == self.n - 1:
            verdict = Verdict.MATCHING
        else:
            verdict = Verdict.INVALID
        return state + 1, verdict


varying = Varying()
ascending = Ascending()
unique = Unique()


def index_range(n: int) -> IndexRange:
    """Match the indices 0 to n-1 in order, each exactly once."""
    return IndexRange(n)
