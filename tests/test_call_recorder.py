"""Tests for core.recorder - append-only invocation log."""

import pytest

from stubmatch.core.matchers import any_, any_of_type, eq
from stubmatch.core.recorder import CallRecorder
from stubmatch.core.types import ArgumentValue, Invocation, Member
from stubmatch.errors import ArityMismatch

FETCH = Member.method("fetch", arity=1)
PING = Member.method("ping")


def _record_fetches(recorder, *values):
    for v in values:
        recorder.record(Invocation.of(FETCH, [v]))


class TestCallRecorder:
    def test_empty(self):
        recorder = CallRecorder()
        assert recorder.entries() == []
        assert recorder.all_invocations(FETCH) == ()
        assert recorder.count_matching(FETCH, [any_()]) == 0

    def test_insertion_order_per_member(self):
        recorder = CallRecorder()
        _record_fetches(recorder, 1, 2)
        recorder.record(Invocation.of(PING))
        _record_fetches(recorder, 3)
        assert [inv.values for inv in recorder.all_invocations(FETCH)] == [[1], [2], [3]]
        assert [c.index for c in recorder.entries()] == [0, 1, 2, 3]
        assert len(recorder.all_invocations(PING)) == 1

    def test_all_invocations_replayable(self):
        recorder = CallRecorder()
        _record_fetches(recorder, 1)
        assert recorder.all_invocations(FETCH) == recorder.all_invocations(FETCH)

    def test_count_matching(self):
        recorder = CallRecorder()
        _record_fetches(recorder, 5, 7, 5, "5")
        assert recorder.count_matching(FETCH, [eq(5)]) == 2
        assert recorder.count_matching(FETCH, [any_of_type(str)]) == 1
        assert recorder.count_matching(FETCH, [any_()]) == 4

    def test_count_matching_ignores_opaque_for_eq(self):
        recorder = CallRecorder()
        recorder.record(Invocation(FETCH, (ArgumentValue.opaque(),)))
        assert recorder.count_matching(FETCH, [eq(None)]) == 0
        assert recorder.count_matching(FETCH, [any_()]) == 1

    def test_count_matching_checks_arity(self, failures):
        recorder = CallRecorder()
        with pytest.raises(ArityMismatch):
            recorder.count_matching(FETCH, [])
        assert len(failures) == 1

    def test_verified_tracking(self):
        recorder = CallRecorder()
        _record_fetches(recorder, 1, 2)
        recorder.mark_verified(recorder.matching(FETCH, [eq(1)]))
        leftover = recorder.unverified()
        assert [c.invocation.values for c in leftover] == [[2]]
