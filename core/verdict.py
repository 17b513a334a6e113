# core/verdict.py
# This file is part of Seqex - Sequence Expression Matching
#
# Two-flag verdict algebra for sequence matching results

from __future__ import annotations

from enum import Enum
from functools import reduce
from typing import Iterable


class Verdict(Enum):
    """Outcome of matching the tokens seen so far.

    A verdict carries two independent flags. ``may_continue`` says whether
    feeding more tokens could still lead to acceptance; ``is_matching`` says
    whether the tokens consumed so far would be accepted if the sequence ended
    here. The flags are orthogonal, which gives four values:

    Values:
        INVALID: Not matching and cannot continue (outright rejection)
        CONTINUE: Not matching yet, but more tokens may lead to a match
        MATCHING: Matching, but no further token can be accepted
        SATISFIED: Matching, and further tokens may still be accepted

    Verdicts behave like sets of the two flags: union (``|``) is a flag-wise
    OR with INVALID as identity, intersection (``&``) is a flag-wise AND with
    SATISFIED as identity.
    """

    INVALID = (False, False)
    CONTINUE = (True, False)
    MATCHING = (False, True)
    SATISFIED = (True, True)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_bool(cls, value) -> Verdict:
        """SATISFIED for a truthy value, INVALID otherwise."""
        return cls.SATISFIED if value else cls.INVALID

    @classmethod
    def from_flags(cls, may_continue: bool, is_matching: bool) -> Verdict:
        """Look up the verdict carrying the given pair of flags."""
        return cls((bool(may_continue), bool(is_matching)))

    @property
    def may_continue(self) -> bool:
        return self.value[0]

    @property
    def is_matching(self) -> bool:
        return self.value[1]

    @property
    def is_invalid(self) -> bool:
        return self is Verdict.INVALID

    @property
    def is_satisfied(self) -> bool:
        return self is Verdict.SATISFIED

    def union(self, other: Verdict) -> Verdict:
        """Flag-wise OR of two verdicts."""
        return Verdict.from_flags(
            self.may_continue or other.may_continue,
            self.is_matching or other.is_matching,
        )

    def intersection(self, other: Verdict) -> Verdict:
        """Flag-wise AND of two verdicts."""
        return Verdict.from_flags(
            self.may_continue and other.may_continue,
            self.is_matching and other.is_matching,
        )

    def __or__(self, other: Verdict) -> Verdict:
        if not isinstance(other, Verdict):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Verdict) -> Verdict:
        if not isinstance(other, Verdict):
            return NotImplemented
        return self.intersection(other)


def union(*verdicts: Verdict) -> Verdict:
    """Union of any number of verdicts; INVALID when none are given."""
    return union_all(verdicts)


def intersection(*verdicts: Verdict) -> Verdict:
    """Intersection of any number of verdicts; SATISFIED when none are given."""
    return intersection_all(verdicts)


def union_all(verdicts: Iterable[Verdict]) -> Verdict:
    return reduce(Verdict.union, verdicts, Verdict.INVALID)


def intersection_all(verdicts: Iterable[Verdict]) -> Verdict:
    return reduce(Verdict.intersection, verdicts, Verdict.SATISFIED)
