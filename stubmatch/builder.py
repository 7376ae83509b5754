"""Stubbing surface: ``when(descriptor).then_return(...).then_throw(...)``."""

from __future__ import annotations

from typing import Any

from stubmatch.core.registry import StubRegistration
from stubmatch.core.types import Answer, Return, Throw
from stubmatch.mock import InvocationDescriptor


class AnswerChainBuilder:
    """
    Chainable builder for one stub registration.

    The first ``then_*`` call registers the stub with a one-answer chain,
    so a chain is never empty; later calls append to that same chain,
    even after the stub has started answering calls.
    """

    def __init__(self, descriptor: InvocationDescriptor) -> None:
        self._descriptor = descriptor
        self._registration: StubRegistration | None = None

    @property
    def registration(self) -> StubRegistration | None:
        return self._registration

    def then_return(self, value: Any = None) -> "AnswerChainBuilder":
        return self._then(Return(value))

    def then_throw(self, error: BaseException | type[BaseException]) -> "AnswerChainBuilder":
        return self._then(Throw(error))

    def _then(self, answer: Answer) -> "AnswerChainBuilder":
        engine = self._descriptor.engine
        if self._registration is None:
            self._registration = engine.register(
                self._descriptor.member, self._descriptor.matchers, [answer]
            )
        else:
            engine.extend(self._registration, answer)
        return self


def when(descriptor: InvocationDescriptor) -> AnswerChainBuilder:
    """Start stubbing the call described by *descriptor*."""
    if not isinstance(descriptor, InvocationDescriptor):
        raise TypeError(
            f"when() expects an invocation descriptor from a mock's stub hook, got {descriptor!r}"
        )
    return AnswerChainBuilder(descriptor)
