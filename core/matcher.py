# core/matcher.py
# This file is part of Seqex - Sequence Expression Matching
#
# Matcher contract shared by every sequence expression

"""The matcher contract and the lazy (self-referential) matcher.

Every sequence expression implements two pure operations:

    begin() -> (state, verdict)
        The verdict for the empty token sequence, together with the initial
        state for subsequent calls.

    advance(state, token) -> (state, verdict)
        The verdict after consuming ``token`` given the prior ``state``.

Matchers are frozen dataclasses. They never keep per-session data, so one
matcher tree can be evaluated any number of times, on independent inputs,
from independent threads. All session data lives in the state values, which
the caller threads from one call to the next.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

from .exceptions import MatcherDefinitionError
from .verdict import Verdict

Step = Tuple[Any, Verdict]


@dataclass(frozen=True, slots=True)
class Matcher:
    """Base class for all sequence expressions.

    Subclasses implement ``begin`` and ``advance``. Equality and hashing are
    structural, so two equal matchers are interchangeable wherever a matcher
    is used as part of a key (see the serial engine's path records).
    """

    def begin(self) -> Step:
        """Return the initial state and the verdict for the empty sequence.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def advance(self, state: Any, token: Any) -> Step:
        """Consume one token and return the new state and verdict.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Lazy(Matcher):
    """Matcher produced on first use by a zero-argument thunk.

    The thunk is resolved once and cached, which lets grammars refer to
    themselves (or to matchers defined later) without infinite eager
    construction. The cache does not take part in equality or hashing.
    """

    thunk: Callable[[], Matcher]
    _resolved: Optional[Matcher] = field(
        default=None, init=False, repr=False, compare=False
    )

    def resolve(self) -> Matcher:
        """Return the matcher produced by the thunk, computing it once."""
        resolved = self._resolved
        if resolved is None:
            resolved = self.thunk()
            if not isinstance(resolved, Matcher):
                raise MatcherDefinitionError(
                    f"Lazy thunk returned {type(resolved).__name__}, expected a Matcher"
                )
            object.__setattr__(self, "_resolved", resolved)
        return resolved

    def begin(self) -> Step:
        return self.resolve().begin()

    def advance(self, state: Any, token: Any) -> Step:
        return self.resolve().advance(state, token)


def advance_live(matcher: Matcher, state: Any, verdict: Verdict, token: Any) -> Step:
    """Advance ``matcher`` unless its previous verdict rules out continuation.

    A branch whose verdict could not continue is dead: it stays INVALID and
    the token is not fed to it. Drivers that thread a child's state (the
    boolean combinators and the evaluation session) go through this helper,
    so a matcher that judges each token independently, such as a predicate,
    cannot revive after rejecting a token.
    """
    if not verdict.may_continue:
        return state, Verdict.INVALID
    return matcher.advance(state, token)


def lazy(thunk: Callable[[], Matcher]) -> Lazy:
    """Wrap a zero-argument function returning a matcher as a lazy matcher."""
    if not callable(thunk):
        raise MatcherDefinitionError(f"lazy() expects a callable, got {thunk!r}")
    return Lazy(thunk)
