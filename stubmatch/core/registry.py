"""
Stub registry: per-member, append-only lists of stub registrations.

Registration never removes or mutates earlier entries. "Override" falls
out of lookup order: ``find`` scans a bucket newest-first and the first
registration whose matchers all match wins.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Sequence

from stubmatch.core.chain import AnswerChain
from stubmatch.core.matchers import ArgumentMatcher, describe_matchers, matches_all
from stubmatch.core.types import ArgumentValue, Member
from stubmatch.errors import ArityMismatch
from stubmatch.reporting import report_failure

LOG = logging.getLogger("core.registry")


@dataclass(frozen=True, eq=False)
class StubRegistration:
    """A (matchers, answer chain) pair stamped with its registration order."""

    member: Member
    matchers: tuple[ArgumentMatcher, ...]
    chain: AnswerChain = field(repr=False)
    sequence_number: int = 0

    def matches(self, values: Sequence[ArgumentValue]) -> bool:
        return matches_all(self.matchers, values)

    def describe(self) -> str:
        return f"{self.member.label}({describe_matchers(self.matchers)}) => {self.chain.describe()}"


def check_arity(member: Member, matchers: Sequence[ArgumentMatcher]) -> None:
    """Report and raise ArityMismatch unless len(matchers) == member.arity."""
    if len(matchers) != member.arity:
        error = ArityMismatch(member, len(matchers))
        report_failure(str(error))
        raise error


class StubRegistry:
    """
    Registrations of one mock object, bucketed by member.

    Sequence numbers are strictly increasing across all buckets of the
    registry, so they also give a global registration order.
    """

    def __init__(self) -> None:
        self._buckets: dict[Member, list[StubRegistration]] = {}
        self._sequence = itertools.count(1)

    def register(
        self,
        member: Member,
        matchers: Sequence[ArgumentMatcher],
        chain: AnswerChain,
    ) -> StubRegistration:
        """
        Append a new registration for *member*.

        Raises:
            ArityMismatch: matcher count differs from the declared arity
        """
        check_arity(member, matchers)
        registration = StubRegistration(
            member=member,
            matchers=tuple(matchers),
            chain=chain,
            sequence_number=next(self._sequence),
        )
        self._buckets.setdefault(member, []).append(registration)
        LOG.debug("Registered stub #%d: %s", registration.sequence_number, registration.describe())
        return registration

    def find(
        self,
        member: Member,
        values: Sequence[ArgumentValue],
    ) -> StubRegistration | None:
        """Newest registration for *member* matching *values*, if any."""
        for registration in reversed(self._buckets.get(member, ())):
            if registration.matches(values):
                return registration
        return None

    def registrations(self, member: Member) -> list[StubRegistration]:
        """Registrations for *member* in registration order."""
        return list(self._buckets.get(member, ()))

    def members(self) -> list[Member]:
        return list(self._buckets)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())
