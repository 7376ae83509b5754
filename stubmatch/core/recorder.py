"""
Call recorder: append-only log of invocations for verification.

Every resolved call is recorded, whether or not a stub matched, together
with the registration that answered it. Verification queries count
recorded invocations against a matcher list independently of how the
call was resolved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from stubmatch.core.matchers import ArgumentMatcher, matches_all
from stubmatch.core.registry import StubRegistration, check_arity
from stubmatch.core.types import Invocation, Member

LOG = logging.getLogger("core.recorder")


@dataclass(frozen=True)
class RecordedCall:
    """One log entry: the invocation and the registration that answered it."""

    index: int
    invocation: Invocation
    registration: StubRegistration | None = None

    @property
    def matched(self) -> bool:
        return self.registration is not None


class CallRecorder:
    """
    Append-only ordered log of calls made on one mock object.

    Keeps a per-member index for lookups and the set of entries already
    claimed by a verification, for ``verify_no_more_interactions``.
    """

    def __init__(self) -> None:
        self._calls: list[RecordedCall] = []
        self._by_member: dict[Member, list[int]] = {}
        self._verified: set[int] = set()

    def record(
        self,
        invocation: Invocation,
        registration: StubRegistration | None = None,
    ) -> RecordedCall:
        idx = len(self._calls)
        call = RecordedCall(idx, invocation, registration)
        self._calls.append(call)
        self._by_member.setdefault(invocation.member, []).append(idx)

        LOG.debug(
            "Recorded call #%d: %s -> %s",
            idx,
            invocation.describe(),
            f"stub #{registration.sequence_number}" if registration else "no stub",
        )
        return call

    def entries(self, member: Member | None = None) -> list[RecordedCall]:
        """Recorded calls in call order, optionally for one member only."""
        if member is None:
            return list(self._calls)
        return [self._calls[i] for i in self._by_member.get(member, ())]

    def all_invocations(self, member: Member) -> tuple[Invocation, ...]:
        return tuple(call.invocation for call in self.entries(member))

    def matching(
        self,
        member: Member,
        matchers: Sequence[ArgumentMatcher],
    ) -> list[RecordedCall]:
        """
        Recorded calls of *member* whose arguments satisfy *matchers*.

        Raises:
            ArityMismatch: matcher count differs from the declared arity
        """
        check_arity(member, matchers)
        return [
            call
            for call in self.entries(member)
            if matches_all(matchers, call.invocation.arguments)
        ]

    def count_matching(
        self,
        member: Member,
        matchers: Sequence[ArgumentMatcher],
    ) -> int:
        return len(self.matching(member, matchers))

    def mark_verified(self, calls: Iterable[RecordedCall]) -> None:
        self._verified.update(call.index for call in calls)

    def unverified(self) -> list[RecordedCall]:
        return [call for call in self._calls if call.index not in self._verified]

    def __len__(self) -> int:
        return len(self._calls)
