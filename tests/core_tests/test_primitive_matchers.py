# tests/core_tests/test_primitive_matchers.py
# This file is part of Seqex - Sequence Expression Matching
#
# Test suite for cardinality, literal, set, predicate and lazy matchers

import pytest
from core import (
    Lazy,
    MatcherDefinitionError,
    Verdict,
    any_of,
    between,
    cardinality,
    exactly,
    exactly_one,
    lazy,
    literal,
    matches,
    one_or_more,
    optional,
    predicate,
    seq,
    logical_or,
    verdicts,
    zero_or_more,
)

LENGTHS = range(0, 7)


def _accepted_lengths(matcher):
    return [n for n in LENGTHS if matches(matcher, ["x"] * n)]


class TestCardinality:
    """Cardinality matchers judge only how many tokens were consumed."""

    def test_exactly(self):
        assert _accepted_lengths(exactly(3)) == [3]

    def test_exactly_zero(self):
        assert _accepted_lengths(exactly(0)) == [0]

    def test_between(self):
        assert _accepted_lengths(between(2, 4)) == [2, 3, 4]

    def test_zero_or_more(self):
        assert _accepted_lengths(zero_or_more) == list(LENGTHS)

    def test_one_or_more(self):
        assert _accepted_lengths(one_or_more) == [1, 2, 3, 4, 5, 6]

    def test_optional(self):
        assert _accepted_lengths(optional) == [0, 1]

    def test_exactly_one(self):
        assert _accepted_lengths(exactly_one) == [1]

    def test_unbounded_cardinality(self):
        assert _accepted_lengths(cardinality(2)) == [2, 3, 4, 5, 6]

    def test_between_verdict_sequence(self):
        assert verdicts(between(1, 2), "abc") == [
            Verdict.CONTINUE,
            Verdict.SATISFIED,
            Verdict.MATCHING,
            Verdict.INVALID,
        ]

    def test_exactly_one_verdict_sequence(self):
        assert verdicts(exactly_one, "ab") == [
            Verdict.CONTINUE,
            Verdict.MATCHING,
            Verdict.INVALID,
        ]

    def test_unbounded_state_saturates(self):
        m = cardinality(2)
        state, _ = m.begin()
        for token in range(10):
            state, verdict = m.advance(state, token)
        assert state == 2
        assert verdict is Verdict.SATISFIED

    def test_stateless_shapes_keep_finite_state(self):
        state, _ = zero_or_more.begin()
        seen = {state}
        for token in range(5):
            state, _ = zero_or_more.advance(state, token)
            seen.add(state)
        assert len(seen) == 1

    @pytest.mark.parametrize("low, high", [(-1, None), (3, 2), (0, -1)])
    def test_rejects_malformed_bounds(self, low, high):
        with pytest.raises(MatcherDefinitionError):
            cardinality(low, high)

    def test_malformed_bounds_are_value_errors(self):
        with pytest.raises(ValueError):
            between(5, 1)


class TestEqualityMatchers:
    """Literal and set matchers consume exactly one token."""

    def test_literal_matches_single_equal_token(self):
        assert matches(literal("a"), ["a"])
        assert not matches(literal("a"), ["b"])
        assert not matches(literal("a"), [])
        assert not matches(literal("a"), ["a", "a"])

    def test_literal_verdicts(self):
        assert verdicts(literal(1), [1, 1]) == [
            Verdict.CONTINUE,
            Verdict.MATCHING,
            Verdict.INVALID,
        ]

    def test_literal_of_none(self):
        assert matches(literal(None), [None])

    def test_any_of(self):
        vowels = any_of("aeiou")
        assert matches(vowels, ["e"])
        assert not matches(vowels, ["x"])
        assert not matches(vowels, ["a", "e"])

    def test_booleans_do_not_equal_numbers(self):
        assert not matches(literal(1), [True])
        assert not matches(literal(0), [False])
        assert not matches(literal(True), [1])
        assert matches(literal(True), [True])
        assert matches(literal(1), [1.0])

    def test_any_of_keeps_booleans_apart(self):
        assert not matches(any_of([0, 1]), [True])
        assert matches(any_of([0, 1]), [1])
        assert matches(any_of([False, "x"]), [False])
        assert not matches(any_of([False, "x"]), [0])

    def test_matchers_compare_structurally(self):
        assert literal("a") == literal("a")
        assert any_of([1, 2]) == any_of([2, 1])
        assert hash(literal(3)) == hash(literal(3))


class TestPredicate:
    """Predicates match runs of individually accepted tokens."""

    def test_runs_of_accepted_tokens(self, is_even):
        assert matches(is_even, [2, 4, 6])
        assert not matches(is_even, [2, 3])

    def test_rejected_token_is_final(self, is_even):
        assert verdicts(is_even, [1, 2, 4]) == [
            Verdict.SATISFIED,
            Verdict.INVALID,
            Verdict.INVALID,
            Verdict.INVALID,
        ]

    def test_bare_predicate_accepts_empty_input(self, is_even):
        # Documented quirk: the empty sequence is a (vacuous) run of even numbers
        assert matches(is_even, [])
        assert is_even.begin() == (None, Verdict.SATISFIED)

    def test_predicate_faults_propagate(self):
        def explode(token):
            raise KeyError(token)

        with pytest.raises(KeyError):
            matches(predicate(explode), ["boom"])

    def test_predicate_requires_callable(self):
        with pytest.raises(MatcherDefinitionError):
            predicate("not callable")


class TestLazy:
    """Lazy matchers resolve their thunk once, on first use."""

    def test_thunk_is_called_once(self):
        calls = []

        def thunk():
            calls.append(1)
            return literal("a")

        m = lazy(thunk)
        assert calls == []
        assert matches(m, ["a"])
        assert matches(m, ["a"])
        assert calls == [1]

    def test_recursive_definition(self):
        # Balanced parentheses: "(" nested ")" | empty
        def balanced():
            return logical_or(seq(literal("("), nested, literal(")")), exactly(0))

        nested = lazy(balanced)

        assert matches(nested, [])
        assert matches(nested, list("()"))
        assert matches(nested, list("((()))"))
        assert not matches(nested, list("(()"))
        assert not matches(nested, list(")("))

    def test_thunk_must_produce_matcher(self):
        with pytest.raises(MatcherDefinitionError):
            lazy(lambda: "a").begin()

    def test_cache_ignored_by_equality(self):
        def thunk():
            return literal(1)

        resolved = Lazy(thunk)
        resolved.resolve()
        assert resolved == Lazy(thunk)
