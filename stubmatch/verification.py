"""
Verification of recorded calls.

``verify`` counts the recorded calls matching a descriptor and hands a
VerificationMismatch message to the failure reporter when the count does
not satisfy the expectation. It never raises on its own: with the default
reporter the test fails, with a collecting reporter execution continues.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from stubmatch.core.engine import ResolutionEngine
from stubmatch.core.types import Invocation
from stubmatch.errors import VerificationMismatch
from stubmatch.mock import InvocationDescriptor, MockObject, engine_of
from stubmatch.models import VerificationOutcome
from stubmatch.reporting import report_failure

LOG = logging.getLogger("verification")


class Comparison(StrEnum):
    EXACTLY = "exactly"
    AT_LEAST = "at_least"
    AT_MOST = "at_most"


@dataclass(frozen=True)
class Times:
    """Expected call count: an exact number or a bound."""

    count: int
    comparison: Comparison = Comparison.EXACTLY

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Expected call count must be non-negative, got {self.count}")

    def satisfied_by(self, actual: int) -> bool:
        if self.comparison == Comparison.AT_LEAST:
            return actual >= self.count
        if self.comparison == Comparison.AT_MOST:
            return actual <= self.count
        return actual == self.count

    def describe(self) -> str:
        if self.comparison == Comparison.EXACTLY:
            return f"exactly {self.count} call(s)"
        return f"{self.comparison.value.replace('_', ' ')} {self.count} call(s)"


def times(count: int) -> Times:
    return Times(count)


def never() -> Times:
    return Times(0)


def at_least(count: int) -> Times:
    return Times(count, Comparison.AT_LEAST)


def at_most(count: int) -> Times:
    return Times(count, Comparison.AT_MOST)


def verify(
    descriptor: InvocationDescriptor,
    expected: Times | int | None = None,
) -> VerificationOutcome:
    """
    Check how often the described call was made.

    Args:
        descriptor: member and matchers from a mock's stub hook
        expected: a Times, a bare int (exact count), or None for exactly once

    Returns:
        VerificationOutcome, also when the expectation is unmet and the
        installed reporter returns normally
    """
    if expected is None:
        expected = times(1)
    elif isinstance(expected, int):
        expected = times(expected)

    engine = descriptor.engine
    calls = engine.matching(descriptor.member, descriptor.matchers)
    engine.mark_verified(calls)

    actual = len(calls)
    outcome = VerificationOutcome(
        member=descriptor.member.label,
        expectation=descriptor.describe(),
        expected=expected.describe(),
        actual=actual,
        satisfied=expected.satisfied_by(actual),
    )
    LOG.debug("verify %s: expected %s, actual %d", outcome.expectation, outcome.expected, actual)

    if not outcome.satisfied:
        error = VerificationMismatch(
            descriptor.describe(),
            expected.describe(),
            actual,
            engine.all_invocations(descriptor.member),
        )
        report_failure(str(error))
    return outcome


def verify_no_more_interactions(mock: MockObject | ResolutionEngine) -> list[Invocation]:
    """
    Report every recorded call not yet claimed by a ``verify``.

    Returns the unverified invocations (empty when the check passes).
    """
    leftover = [call.invocation for call in engine_of(mock).unverified()]
    if leftover:
        lines = ["No more interactions expected, but found:"]
        lines.extend(f"  {inv.describe()}" for inv in leftover)
        report_failure("\n".join(lines))
    return leftover
