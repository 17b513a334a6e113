# tests/core_tests/test_verdict_algebra.py
# This file is part of Seqex - Sequence Expression Matching
#
# Test suite for the two-flag verdict algebra

import itertools

import pytest
from core.verdict import Verdict, intersection, union

ALL = list(Verdict)


class TestVerdictFlags:
    """Flags and predicates of the four named verdicts."""

    @pytest.mark.parametrize(
        "verdict, may_continue, is_matching",
        [
            (Verdict.INVALID, False, False),
            (Verdict.CONTINUE, True, False),
            (Verdict.MATCHING, False, True),
            (Verdict.SATISFIED, True, True),
        ],
    )
    def test_flags(self, verdict, may_continue, is_matching):
        assert verdict.may_continue is may_continue
        assert verdict.is_matching is is_matching
        assert Verdict.from_flags(may_continue, is_matching) is verdict

    def test_predicates(self):
        assert Verdict.INVALID.is_invalid
        assert not Verdict.CONTINUE.is_invalid
        assert Verdict.SATISFIED.is_satisfied
        assert not Verdict.MATCHING.is_satisfied

    def test_from_bool(self):
        assert Verdict.from_bool(True) is Verdict.SATISFIED
        assert Verdict.from_bool(False) is Verdict.INVALID
        assert Verdict.from_bool(0) is Verdict.INVALID
        assert Verdict.from_bool([1]) is Verdict.SATISFIED

    def test_string_form(self):
        assert str(Verdict.CONTINUE) == "CONTINUE"


class TestVerdictCombination:
    """Union and intersection behave as flag-wise OR and AND."""

    def test_union_table(self):
        assert Verdict.CONTINUE | Verdict.MATCHING is Verdict.SATISFIED
        assert Verdict.INVALID | Verdict.MATCHING is Verdict.MATCHING
        assert Verdict.CONTINUE | Verdict.CONTINUE is Verdict.CONTINUE

    def test_intersection_table(self):
        assert Verdict.CONTINUE & Verdict.MATCHING is Verdict.INVALID
        assert Verdict.SATISFIED & Verdict.MATCHING is Verdict.MATCHING
        assert Verdict.SATISFIED & Verdict.CONTINUE is Verdict.CONTINUE

    @pytest.mark.parametrize("a, b", list(itertools.product(ALL, repeat=2)))
    def test_commutative(self, a, b):
        assert a | b is b | a
        assert a & b is b & a

    @pytest.mark.parametrize("a, b, c", list(itertools.product(ALL, repeat=3)))
    def test_associative(self, a, b, c):
        assert (a | b) | c is a | (b | c)
        assert (a & b) & c is a & (b & c)

    @pytest.mark.parametrize("a", ALL)
    def test_identities(self, a):
        assert a | Verdict.INVALID is a
        assert a & Verdict.SATISFIED is a

    def test_variadic_helpers(self):
        assert union() is Verdict.INVALID
        assert intersection() is Verdict.SATISFIED
        assert union(Verdict.CONTINUE, Verdict.INVALID, Verdict.MATCHING) is Verdict.SATISFIED
        assert intersection(Verdict.SATISFIED, Verdict.CONTINUE) is Verdict.CONTINUE

    def test_operators_reject_other_types(self):
        with pytest.raises(TypeError):
            Verdict.CONTINUE | True
