# tests/core_tests/test_match_session.py
# This file is part of Seqex - Sequence Expression Matching
#
# Test suite for the evaluation session and convenience drivers

from core import (
    MatchSession,
    Verdict,
    evaluate,
    exactly,
    literal,
    matches,
    seq,
    serial,
    verdicts,
    zero_or_more,
)


class TestMatchSession:
    """Session bookkeeping around begin/advance."""

    def test_initial_state(self):
        session = MatchSession(exactly(2))
        assert session.verdict is Verdict.CONTINUE
        assert session.tokens_consumed == 0
        assert session.history == [Verdict.CONTINUE]
        assert session.may_continue
        assert not session.is_matching
        assert session.is_conclusive is False

    def test_feed_returns_verdict(self):
        session = MatchSession(exactly(2))
        assert session.feed("x") is Verdict.CONTINUE
        assert session.feed("y") is Verdict.MATCHING
        assert session.is_matching
        assert session.is_conclusive
        assert session.tokens_consumed == 2

    def test_invalid_is_permanent(self, is_even):
        session = MatchSession(is_even)
        session.feed_all([1, 2, 4, 6])
        assert session.history[1:] == [Verdict.INVALID] * 4

    def test_stop_when_decided(self):
        session = MatchSession(literal(1))
        verdict = session.feed_all([1, 2, 3, 4], stop_when_decided=True)
        assert verdict is Verdict.INVALID
        assert session.tokens_consumed == 2

    def test_feed_all_consumes_everything_by_default(self):
        session = MatchSession(literal(1))
        session.feed_all([1, 2, 3, 4])
        assert session.tokens_consumed == 4

    def test_sessions_are_independent(self):
        m = seq(literal("a"), literal("b"))
        first, second = MatchSession(m), MatchSession(m)
        first.feed("a")
        second.feed("b")
        assert first.verdict is Verdict.CONTINUE
        assert second.verdict is Verdict.INVALID
        assert first.feed("b") is Verdict.MATCHING

    def test_evaluation_is_deterministic(self, is_even, is_odd):
        m = serial(zero_or_more, is_even, is_odd)
        tokens = [5, 2, 8, 3, 3, 6]
        assert verdicts(m, tokens) == verdicts(m, tokens)

    def test_verbose_session_logs_without_error(self):
        session = MatchSession(exactly(1), verbose=True)
        session.print_header()
        session.feed("token")
        session.print_final_verdict()
        assert session.is_matching


class TestPerformanceStats:
    def test_serial_root_reports_path_counts(self):
        session = MatchSession(seq(literal("a"), literal("b")))
        session.feed("a")
        stats = session.get_performance_stats()
        assert stats["tokens_consumed"] == 1
        assert stats["current_path_count"] == session.path_count() == 2
        assert stats["peak_path_count"] >= stats["current_path_count"]

    def test_non_serial_root_has_no_path_counts(self):
        session = MatchSession(exactly(1))
        assert session.path_count() is None
        assert session.get_performance_stats() == {
            "tokens_consumed": 0,
            "current_path_count": None,
            "peak_path_count": None,
        }


class TestDrivers:
    def test_verdicts_include_empty_prefix(self):
        assert verdicts(exactly(1), []) == [Verdict.CONTINUE]

    def test_evaluate_and_matches(self):
        assert evaluate(exactly(1), ["x"]) is Verdict.MATCHING
        assert matches(exactly(1), ["x"])
        assert not matches(exactly(1), [])

    def test_accepts_any_iterable(self):
        assert matches(exactly(3), iter("abc"))
        assert matches(exactly(3), (n for n in range(3)))
