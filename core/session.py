# core/session.py
# This file is part of Seqex - Sequence Expression Matching
#
# Evaluation driver threading matcher state through a token sequence

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from utils.logger import get_logger

from .matcher import Matcher, advance_live
from .serial import Serial
from .verdict import Verdict


@dataclass
class MatchSession:
    """One evaluation of a matcher over a token sequence.

    Calls ``begin`` on construction and ``advance`` for every fed token,
    keeping the opaque state private. The matcher itself is never modified,
    so many sessions may share one matcher tree.

    Attributes:
        matcher: Root matcher being evaluated
        verdict: Verdict for the tokens fed so far
        tokens_consumed: Number of tokens fed so far
        history: Verdict for every prefix, starting with the empty one
        verbose: Log every token at INFO level
    """

    matcher: Matcher
    verbose: bool = False
    verdict: Verdict = field(init=False)
    tokens_consumed: int = field(default=0, init=False)
    history: List[Verdict] = field(default_factory=list, init=False)
    _state: Any = field(default=None, init=False, repr=False)
    _peak_path_count: int = field(default=0, init=False, repr=False)

    def __post_init__(self):
        logger = get_logger()
        self._state, self.verdict = self.matcher.begin()
        self.history.append(self.verdict)
        self._track_paths()
        logger.debug(
            f"Session started for {type(self.matcher).__name__} with verdict {self.verdict}"
        )

    @property
    def is_matching(self) -> bool:
        """Whether the tokens fed so far are accepted."""
        return self.verdict.is_matching

    @property
    def may_continue(self) -> bool:
        """Whether more tokens could still lead to acceptance."""
        return self.verdict.may_continue

    @property
    def is_conclusive(self) -> bool:
        """No further token can change the outcome.

        Once the verdict cannot continue, every later verdict is INVALID.
        """
        return not self.verdict.may_continue

    def feed(self, token: Any) -> Verdict:
        """Consume one token and return the new verdict.

        Once the verdict can no longer continue, every later verdict is
        INVALID and the matcher is not consulted again.
        """
        self._state, self.verdict = advance_live(
            self.matcher, self._state, self.verdict, token
        )
        self.tokens_consumed += 1
        self.history.append(self.verdict)
        self._track_paths()

        if self.verbose:
            get_logger().token_processed(self.tokens_consumed, repr(token), str(self.verdict))

        return self.verdict

    def feed_all(self, tokens: Iterable[Any], stop_when_decided: bool = False) -> Verdict:
        """Consume every token in order.

        Args:
            tokens: Tokens to feed
            stop_when_decided: Stop early once the verdict is INVALID

        Returns:
            Verdict after the last consumed token
        """
        for token in tokens:
            self.feed(token)
            if stop_when_decided and self.verdict.is_invalid:
                get_logger().debug(
                    f"Stopping early after {self.tokens_consumed} token(s): verdict is INVALID"
                )
                break
        return self.verdict

    def path_count(self) -> Optional[int]:
        """Live path count when the root is a serial matcher, else None."""
        if isinstance(self.matcher, Serial):
            return Serial.path_count(self._state)
        return None

    def _track_paths(self) -> None:
        count = self.path_count()
        if count is not None and count > self._peak_path_count:
            self._peak_path_count = count

    def get_performance_stats(self) -> Dict[str, Any]:
        """Return a dictionary of session statistics.

        Returns:
            Tokens consumed plus current and peak serial path counts
            (None when the root is not a serial matcher)
        """
        count = self.path_count()
        return {
            "tokens_consumed": self.tokens_consumed,
            "current_path_count": count,
            "peak_path_count": self._peak_path_count if count is not None else None,
        }

    def print_header(self) -> None:
        get_logger().session_start(type(self.matcher).__name__, str(self.history[0]))

    def print_final_verdict(self) -> None:
        get_logger().final_verdict(str(self.verdict), self.is_matching)


def verdicts(matcher: Matcher, tokens: Iterable[Any]) -> List[Verdict]:
    """Verdict for every prefix of ``tokens``, starting with the empty one."""
    session = MatchSession(matcher)
    session.feed_all(tokens)
    return list(session.history)


def evaluate(matcher: Matcher, tokens: Iterable[Any]) -> Verdict:
    """Final verdict of ``matcher`` over ``tokens``."""
    session = MatchSession(matcher)
    return session.feed_all(tokens)


def matches(matcher: Matcher, tokens: Iterable[Any]) -> bool:
    """Whether ``matcher`` accepts the complete sequence ``tokens``."""
    return evaluate(matcher, tokens).is_matching
