# core/combinators.py
# This file is part of Seqex - Sequence Expression Matching
#
# Boolean combinators and the token projection adapter

"""Higher-order matchers that take other matchers as arguments.

And and Or run every child over the same token stream in parallel and combine
the per-step verdicts with intersection or union. Not inverts its child
coarsely: it only distinguishes "outright rejected" from everything else.
Project feeds its child a transformed token.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Tuple

from .exceptions import MatcherDefinitionError
from .matcher import Matcher, Step, advance_live
from .verdict import Verdict, intersection_all, union_all


@dataclass(frozen=True, slots=True)
class Not(Matcher):
    """Sequences on which ``matcher`` is INVALID.

    The verdict after each token is SATISFIED when the child is INVALID and
    INVALID otherwise, so CONTINUE, MATCHING and SATISFIED all collapse into
    "not rejected". Consequently ``Not(Not(m))`` is generally not ``m``. The
    empty sequence keeps the child's own begin verdict.

    The state pairs the child's state with its latest verdict.
    """

    matcher: Matcher

    def begin(self) -> Step:
        state, verdict = self.matcher.begin()
        return (state, verdict), verdict

    def advance(self, state: Tuple[Any, Verdict], token: Any) -> Step:
        inner_state, inner_verdict = advance_live(self.matcher, *state, token)
        return (inner_state, inner_verdict), Verdict.from_bool(inner_verdict.is_invalid)


@dataclass(frozen=True, slots=True)
class Parallel(Matcher):
    """Children evaluated side by side on the same tokens.

    The state is a tuple holding one (state, verdict) pair per child. A child
    that can no longer continue stays INVALID. Subclasses decide how the
    children's verdicts are merged.
    """

    matchers: Tuple[Matcher, ...]

    def merge(self, verdicts) -> Verdict:
        raise NotImplementedError

    def _combine(self, steps) -> Step:
        steps = tuple(steps)
        return steps, self.merge([verdict for _, verdict in steps])

    def begin(self) -> Step:
        return self._combine(m.begin() for m in self.matchers)

    def advance(self, state: Tuple[Tuple[Any, Verdict], ...], token: Any) -> Step:
        return self._combine(
            advance_live(m, s, v, token) for m, (s, v) in zip(self.matchers, state)
        )


@dataclass(frozen=True, slots=True)
class And(Parallel):
    """Sequences matched by every child (verdict intersection)."""

    def merge(self, verdicts) -> Verdict:
        return intersection_all(verdicts)


@dataclass(frozen=True, slots=True)
class Or(Parallel):
    """Sequences matched by at least one child (verdict union)."""

    def merge(self, verdicts) -> Verdict:
        return union_all(verdicts)


@dataclass(frozen=True, slots=True)
class Project(Matcher):
    """Sequences whose tokens, mapped through ``fn``, match ``matcher``."""

    fn: Callable[[Any], Any]
    matcher: Matcher

    def begin(self) -> Step:
        return self.matcher.begin()

    def advance(self, state: Any, token: Any) -> Step:
        return self.matcher.advance(state, self.fn(token))


def _check_matchers(name: str, matchers) -> Tuple[Matcher, ...]:
    for m in matchers:
        if not isinstance(m, Matcher):
            raise MatcherDefinitionError(
                f"{name}() expects matchers, got {type(m).__name__}: {m!r}"
            )
    return tuple(matchers)


def logical_not(matcher: Matcher) -> Not:
    """Sequences on which ``matcher`` is outright INVALID."""
    return Not(_check_matchers("logical_not", [matcher])[0])


def logical_and(*matchers: Matcher) -> And:
    """Sequences matched by every one of ``matchers``."""
    return And(_check_matchers("logical_and", matchers))


def logical_or(*matchers: Matcher) -> Or:
    """Sequences matched by at least one of ``matchers``."""
    return Or(_check_matchers("logical_or", matchers))


def project(fn: Callable[[Any], Any], matcher: Matcher) -> Project:
    """Apply ``matcher`` to ``fn(token)`` instead of each token."""
    if not callable(fn):
        raise MatcherDefinitionError(f"project() expects a callable, got {fn!r}")
    return Project(fn, _check_matchers("project", [matcher])[0])
