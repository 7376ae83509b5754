"""
Resolution engine: one per mock object.

Ties the registry, the answer chains and the call recorder together.
For every incoming call it:
1. Scans the member's registrations newest-first for a full match
2. Records the invocation, tagged with the selected registration (or none)
3. Advances the selected chain and returns its answer, or NOT_FOUND

Steps 1-3 run under a single lock so concurrent call sites on the same
mock never interleave a lookup with another call's cursor advance.
"""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from typing import Any, Iterable, Sequence

from stubmatch.config import StubMatchConfig, get_config
from stubmatch.core.chain import AnswerChain
from stubmatch.core.matchers import ArgumentMatcher
from stubmatch.core.recorder import CallRecorder, RecordedCall
from stubmatch.core.registry import StubRegistration, StubRegistry
from stubmatch.core.types import (
    NOT_FOUND,
    Answer,
    ArgumentValue,
    Invocation,
    Member,
    Resolution,
)
from stubmatch.errors import UnmatchedInvocation
from stubmatch.models import InvocationRecord, MockReport
from stubmatch.reporting import report_failure

LOG = logging.getLogger("core.engine")


class ResolutionEngine:
    """
    Owns the stub registry and call recorder of one mock object.

    Usage::

        engine = ResolutionEngine()
        fetch = Member.method("fetch", arity=1)
        engine.register(fetch, [eq(5)], [Return("five")])
        engine.invoke(fetch, [5])   # "five"
    """

    def __init__(self, config: StubMatchConfig | None = None) -> None:
        self._config = config or get_config()
        self.registry = StubRegistry()
        self.recorder = CallRecorder()
        self._lock = threading.RLock() if self._config.thread_safe else nullcontext()

    # -- registration -------------------------------------------------

    def register(
        self,
        member: Member,
        matchers: Sequence[ArgumentMatcher],
        answers: Iterable[Answer],
    ) -> StubRegistration:
        """
        Register a stub for *member*.

        Raises:
            ArityMismatch: matcher count differs from the declared arity
            ChainConfigurationError: *answers* is empty or invalid
        """
        chain = AnswerChain(answers)
        with self._lock:
            return self.registry.register(member, matchers, chain)

    def extend(self, registration: StubRegistration, answer: Answer) -> None:
        """Append *answer* to an already registered chain."""
        with self._lock:
            registration.chain.append(answer)

    # -- resolution ---------------------------------------------------

    def resolve(self, member: Member, values: Iterable[Any]) -> Answer | Resolution:
        """
        Resolve a call to *member* with *values*.

        Raw values are wrapped with ``ArgumentValue.of``. Returns the
        selected chain's next Answer, or NOT_FOUND. The call is recorded
        either way.
        """
        return self.resolve_invocation(Invocation.of(member, values))

    def resolve_invocation(self, invocation: Invocation) -> Answer | Resolution:
        with self._lock:
            registration = self.registry.find(invocation.member, invocation.arguments)
            self.recorder.record(invocation, registration)
            if registration is None:
                LOG.debug("No stub for %s", invocation.describe())
                return NOT_FOUND
            answer = registration.chain.advance()

        LOG.debug(
            "Resolved %s via stub #%d: %s",
            invocation.describe(),
            registration.sequence_number,
            answer.describe(),
        )
        return answer

    def invoke(self, member: Member, args: Iterable[Any] = ()) -> Any:
        """
        Adapter entry point: resolve and apply the outcome.

        Returns the value of a Return answer and raises the error of a
        Throw answer. NOT_FOUND is reported through the failure reporter
        and then raised as UnmatchedInvocation; no default value is ever
        substituted.
        """
        invocation = Invocation.of(member, args)
        with self._lock:
            outcome = self.resolve_invocation(invocation)
            candidates = self.registry.registrations(member) if outcome is NOT_FOUND else []
        if outcome is NOT_FOUND:
            error = UnmatchedInvocation(invocation, candidates)
            report_failure(str(error))
            raise error
        return outcome.resolve()

    # -- verification queries -----------------------------------------

    def all_invocations(self, member: Member) -> tuple[Invocation, ...]:
        with self._lock:
            return self.recorder.all_invocations(member)

    def matching(
        self,
        member: Member,
        matchers: Sequence[ArgumentMatcher],
    ) -> list[RecordedCall]:
        with self._lock:
            return self.recorder.matching(member, matchers)

    def count_matching(self, member: Member, matchers: Sequence[ArgumentMatcher]) -> int:
        return len(self.matching(member, matchers))

    def mark_verified(self, calls: Iterable[RecordedCall]) -> None:
        with self._lock:
            self.recorder.mark_verified(calls)

    def unverified(self) -> list[RecordedCall]:
        with self._lock:
            return self.recorder.unverified()

    # -- reporting ----------------------------------------------------

    def report(self) -> MockReport:
        """Snapshot of registrations and recorded calls."""
        with self._lock:
            unverified = {call.index for call in self.recorder.unverified()}
            records = [
                InvocationRecord(
                    index=call.index,
                    member=call.invocation.member.name,
                    kind=call.invocation.member.kind.value,
                    arguments=[a.describe() for a in call.invocation.arguments],
                    stub=call.registration.sequence_number if call.registration else None,
                    verified=call.index not in unverified,
                )
                for call in self.recorder.entries()
            ]
            return MockReport(stub_count=len(self.registry), invocations=records)
