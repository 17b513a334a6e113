# core/primitives.py
# This file is part of Seqex - Sequence Expression Matching
#
# Cardinality, equality and predicate matchers

"""Primitive sequence expressions.

Cardinality matchers constrain how many tokens are matched regardless of their
values. Literal and set-membership matchers match exactly one token by
equality. Predicate matchers match any run of tokens that each satisfy a
user-supplied function.

Raw values and callables never act as matchers on their own; they are wrapped
explicitly with ``literal``, ``any_of`` or ``predicate``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, Iterable, Optional

from .exceptions import MatcherDefinitionError
from .matcher import Matcher, Step
from .verdict import Verdict


@dataclass(frozen=True, slots=True)
class Cardinality(Matcher):
    """Sequences of ``low`` to ``high`` tokens (any values).

    The state is the number of tokens consumed so far. Without an upper bound
    the count saturates at ``low``, since larger counts all judge the same.

    Attributes:
        low: Minimum number of tokens
        high: Maximum number of tokens, or None for no upper bound
    """

    low: int
    high: Optional[int] = None

    def __post_init__(self):
        if self.low < 0:
            raise MatcherDefinitionError(f"Cardinality lower bound must be >= 0, got {self.low}")
        if self.high is not None and self.high < self.low:
            raise MatcherDefinitionError(
                f"Cardinality upper bound {self.high} is below lower bound {self.low}"
            )

    def _judge(self, count: int) -> Verdict:
        if count < self.low:
            return Verdict.CONTINUE
        if self.high is None or count < self.high:
            return Verdict.SATISFIED
        if count == self.high:
            return Verdict.MATCHING
        return Verdict.INVALID

    def begin(self) -> Step:
        return 0, self._judge(0)

    def advance(self, state: int, token: Any) -> Step:
        count = state + 1
        verdict = self._judge(count)
        if self.high is None:
            count = min(count, self.low)
        elif count > self.high:
            # Every later count is INVALID as well
            count = self.high + 1
        return count, verdict


@dataclass(frozen=True, slots=True)
class StatelessCardinality(Matcher):
    """Cardinality whose state is the verdict to report for the next token.

    Used for the common shapes (exactly one, optional, zero or more, one or
    more) so that their state space is a single verdict rather than a count.

    Attributes:
        name: Display name of the shape
        initial: Verdict for the empty sequence
        first: Verdict after the first token
        rest: Verdict after every later token
    """

    name: str
    initial: Verdict
    first: Verdict
    rest: Verdict

    def begin(self) -> Step:
        return self.first, self.initial

    def advance(self, state: Verdict, token: Any) -> Step:
        return self.rest, state


exactly_one = StatelessCardinality(
    "exactly_one", Verdict.CONTINUE, Verdict.MATCHING, Verdict.INVALID
)
optional = StatelessCardinality(
    "optional", Verdict.SATISFIED, Verdict.MATCHING, Verdict.INVALID
)
zero_or_more = StatelessCardinality(
    "zero_or_more", Verdict.SATISFIED, Verdict.SATISFIED, Verdict.SATISFIED
)
one_or_more = StatelessCardinality(
    "one_or_more", Verdict.CONTINUE, Verdict.SATISFIED, Verdict.SATISFIED
)


def cardinality(low: int, high: Optional[int] = None) -> Cardinality:
    """Sequences with at least ``low`` and at most ``high`` tokens."""
    return Cardinality(low, high)


def exactly(count: int) -> Cardinality:
    """Sequences of exactly ``count`` tokens."""
    return Cardinality(count, count)


def between(low: int, high: int) -> Cardinality:
    """Sequences of ``low`` to ``high`` tokens, inclusive."""
    return Cardinality(low, high)


def _same_value(token: Any, value: Any) -> bool:
    # bool is an int subclass; True must not stand in for 1, nor False for 0
    return token == value and isinstance(token, bool) == isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Literal(Matcher):
    """A single token equal to ``value``.

    Booleans only equal booleans, so ``literal(1)`` rejects ``True``.
    The state records whether the matcher is still fresh, i.e. has not yet
    consumed a token.
    """

    value: Any

    def begin(self) -> Step:
        return True, Verdict.CONTINUE

    def advance(self, state: bool, token: Any) -> Step:
        matched = state and _same_value(token, self.value)
        return False, Verdict.MATCHING if matched else Verdict.INVALID


@dataclass(frozen=True, slots=True)
class AnyOf(Matcher):
    """A single token that is a member of ``values`` (booleans as in Literal)."""

    values: FrozenSet[Any]

    def begin(self) -> Step:
        return True, Verdict.CONTINUE

    def advance(self, state: bool, token: Any) -> Step:
        matched = (
            state
            and token in self.values
            and any(_same_value(token, value) for value in self.values)
        )
        return False, Verdict.MATCHING if matched else Verdict.INVALID


@dataclass(frozen=True, slots=True)
class Predicate(Matcher):
    """Any run of tokens that each satisfy ``fn``, including the empty run.

    Exceptions raised by ``fn`` propagate to the caller unchanged.
    """

    fn: Callable[[Any], Any]

    def begin(self) -> Step:
        return None, Verdict.SATISFIED

    def advance(self, state: None, token: Any) -> Step:
        return state, Verdict.from_bool(self.fn(token))


def literal(value: Any) -> Literal:
    """Match exactly one token equal to ``value``."""
    return Literal(value)


def any_of(values: Iterable[Any]) -> AnyOf:
    """Match exactly one token that belongs to ``values``."""
    return AnyOf(frozenset(values))


def predicate(fn: Callable[[Any], Any]) -> Predicate:
    """Match any run of tokens for which ``fn`` returns a truthy value."""
    if not callable(fn):
        raise MatcherDefinitionError(f"predicate() expects a callable, got {fn!r}")
    return Predicate(fn)
