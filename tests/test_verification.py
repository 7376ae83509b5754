"""Tests for verification - verify(), Times, verify_no_more_interactions()."""

import pytest

from stubmatch import (
    MockFailure,
    UnmatchedInvocation,
    at_least,
    at_most,
    eq,
    never,
    times,
    verify,
    verify_no_more_interactions,
    when,
)
from stubmatch.verification import Comparison, Times


class TestTimes:
    def test_exact(self):
        assert times(2).satisfied_by(2)
        assert not times(2).satisfied_by(3)

    def test_never(self):
        assert never() == Times(0)
        assert never().satisfied_by(0)

    def test_bounds(self):
        assert at_least(2).satisfied_by(5)
        assert not at_least(2).satisfied_by(1)
        assert at_most(2).satisfied_by(0)
        assert not at_most(2).satisfied_by(3)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            times(-1)

    def test_describe(self):
        assert times(1).describe() == "exactly 1 call(s)"
        assert at_least(3).describe() == "at least 3 call(s)"
        assert Times(2, Comparison.AT_MOST).describe() == "at most 2 call(s)"


class TestVerify:
    def test_default_is_exactly_once(self, repo, failures):
        when(repo.fetch_()).then_return("x")
        repo.fetch(1)
        outcome = verify(repo.fetch_(eq(1)))
        assert outcome.satisfied
        assert outcome.actual == 1
        assert failures.messages == []

    def test_int_shorthand(self, repo, failures):
        when(repo.fetch_()).then_return("x")
        repo.fetch(1)
        repo.fetch(1)
        assert verify(repo.fetch_(1), 2).satisfied
        assert failures.messages == []

    def test_mismatch_reported_not_raised(self, repo, failures):
        when(repo.fetch_()).then_return("x")
        repo.fetch(1)
        outcome = verify(repo.fetch_(eq(2)), times(1))
        assert not outcome.satisfied
        assert outcome.actual == 0
        assert len(failures) == 1
        message = failures.messages[0]
        assert "Verification failed for fetch(eq(2))" in message
        assert "expected exactly 1 call(s), but was called 0 time(s)" in message
        assert "fetch(1)" in message

    def test_mismatch_with_default_reporter(self, repo, strict_reporter):
        with pytest.raises(MockFailure, match="Verification failed"):
            verify(repo.count_(), times(1))

    def test_counts_unmatched_calls_too(self, repo, failures):
        when(repo.fetch_(eq(1))).then_return("one")
        repo.fetch(1)
        with pytest.raises(UnmatchedInvocation):
            repo.fetch(5)
        failures.clear()
        assert verify(repo.fetch_(eq(5)), times(1)).satisfied
        assert failures.messages == []

    def test_never_called(self, repo, failures):
        assert verify(repo.store_(), never()).satisfied
        assert failures.messages == []

    def test_outcome_model(self, repo):
        when(repo.count_()).then_return(3)
        repo.count()
        outcome = verify(repo.count_(), at_least(1))
        dumped = outcome.model_dump(mode="json")
        assert dumped["member"] == "count"
        assert dumped["expected"] == "at least 1 call(s)"
        assert dumped["satisfied"] is True


class TestVerifyNoMoreInteractions:
    def test_all_verified(self, repo, failures):
        when(repo.fetch_()).then_return("x")
        repo.fetch(1)
        verify(repo.fetch_(1))
        assert verify_no_more_interactions(repo) == []
        assert failures.messages == []

    def test_leftover_reported(self, repo, failures):
        when(repo.fetch_()).then_return("x")
        repo.fetch(1)
        repo.fetch(2)
        verify(repo.fetch_(1))
        leftover = verify_no_more_interactions(repo)
        assert [inv.values for inv in leftover] == [[2]]
        assert "No more interactions expected" in failures.messages[0]
        assert "fetch(2)" in failures.messages[0]

    def test_rejects_non_mock(self):
        with pytest.raises(TypeError):
            verify_no_more_interactions(object())
