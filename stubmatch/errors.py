"""
Exception hierarchy for stubmatch.

All configuration and resolution failures derive from StubMatchError so
adapters can catch them in one place. MockFailure is the odd one out: it is
what the default failure reporter raises, and it subclasses AssertionError
so test runners treat it as a test failure rather than an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from stubmatch.core.registry import StubRegistration
    from stubmatch.core.types import Invocation, Member


class StubMatchError(Exception):
    """Base exception for stubmatch errors."""

    pass


class ChainConfigurationError(StubMatchError):
    """An answer chain was built empty or with an invalid answer."""

    pass


class ArityMismatch(StubMatchError):
    """Matcher list length differs from the member's declared arity."""

    def __init__(self, member: "Member", actual: int) -> None:
        self.member = member
        self.expected = member.arity
        self.actual = actual
        super().__init__(
            f"Arity mismatch for {member.describe()}: "
            f"declared {member.arity} argument(s), got {actual} matcher(s)"
        )


class UnmatchedInvocation(StubMatchError):
    """No registered stub matched a call."""

    def __init__(
        self,
        invocation: "Invocation",
        candidates: Sequence["StubRegistration"] = (),
    ) -> None:
        self.invocation = invocation
        self.candidates = tuple(candidates)

        lines = [f"No stubbing found for {invocation.describe()}"]
        if self.candidates:
            lines.append("Registered stubbings for this member (newest first):")
            for reg in reversed(self.candidates):
                lines.append(f"  #{reg.sequence_number}: {reg.describe()}")
        else:
            lines.append("No stubbings are registered for this member.")
        super().__init__("\n".join(lines))


class VerificationMismatch(StubMatchError):
    """Recorded call count does not satisfy the expected count.

    Only used to build the failure message; the engine hands the message to
    the failure reporter instead of raising.
    """

    def __init__(
        self,
        expectation: str,
        expected: str,
        actual: int,
        recorded: Sequence["Invocation"] = (),
    ) -> None:
        self.expectation = expectation
        self.expected = expected
        self.actual = actual
        self.recorded = tuple(recorded)

        lines = [
            f"Verification failed for {expectation}: "
            f"expected {expected}, but was called {actual} time(s)"
        ]
        if self.recorded:
            lines.append("Recorded invocations of this member:")
            lines.extend(f"  {inv.describe()}" for inv in self.recorded)
        super().__init__("\n".join(lines))


class MockFailure(AssertionError):
    """Raised by the default failure reporter."""

    pass
