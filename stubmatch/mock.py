"""
Base class for mock objects.

This is the contract generated (or hand-written) mock types build on. A
subclass declares one Member per interface member and routes each call
site through ``_invoke``; for every member it also exposes a stubbing
hook returning ``_stub(member, *matchers)``, which ``when`` and ``verify``
consume::

    class CalculatorMock(MockObject):
        ADD = Member.method("add", arity=2)

        def add(self, a, b):
            return self._invoke(self.ADD, a, b)

        def add_(self, a=any_(), b=any_()):
            return self._stub(self.ADD, a, b)

Properties and subscripts use the same path with getter/setter members;
a setter passes the assigned value as its trailing argument.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from stubmatch.config import StubMatchConfig
from stubmatch.core.engine import ResolutionEngine
from stubmatch.core.matchers import ArgumentMatcher, any_, as_matcher, describe_matchers
from stubmatch.core.types import Member
from stubmatch.models import MockReport

LOG = logging.getLogger("mock")


@dataclass(frozen=True)
class InvocationDescriptor:
    """A member plus a matcher list, bound to the engine of one mock."""

    engine: ResolutionEngine
    member: Member
    matchers: tuple[ArgumentMatcher, ...] = ()

    def describe(self) -> str:
        return f"{self.member.label}({describe_matchers(self.matchers)})"


class MockObject:
    """
    Owns one ResolutionEngine; registry and recorder live and die with
    the mock instance.
    """

    def __init__(self, config: StubMatchConfig | None = None) -> None:
        self._engine = ResolutionEngine(config)

    def _stub(self, member: Member, *matchers: Any) -> InvocationDescriptor:
        """
        Build a descriptor for *member*.

        Bare values become ``eq(value)``. Trailing positions left out
        default to ``any_()``; surplus matchers are kept so registration
        reports the arity mismatch.
        """
        coerced = [as_matcher(m) for m in matchers]
        coerced.extend(any_() for _ in range(member.arity - len(coerced)))
        return InvocationDescriptor(self._engine, member, tuple(coerced))

    def _invoke(self, member: Member, *args: Any) -> Any:
        return self._engine.invoke(member, args)

    async def _invoke_async(self, member: Member, *args: Any) -> Any:
        return self._engine.invoke(member, args)


def engine_of(mock: MockObject | ResolutionEngine) -> ResolutionEngine:
    if isinstance(mock, ResolutionEngine):
        return mock
    if isinstance(mock, MockObject):
        return mock._engine
    raise TypeError(f"Not a mock object: {mock!r}")


def report(mock: MockObject | ResolutionEngine) -> MockReport:
    """Registrations and recorded calls of *mock* as a pydantic model."""
    return engine_of(mock).report()
