"""
Answer chains: ordered outcomes with stick-on-last replay.

A chain owns a cursor that only moves forward. Each ``advance()`` yields
the answer under the cursor and then steps forward unless the cursor is
already on the last answer, so ``[a1, a2, a3]`` yields
``a1, a2, a3, a3, a3, ...`` and never cycles back.
"""

from __future__ import annotations

import logging
from typing import Iterable

from stubmatch.core.types import Answer, Return, Throw
from stubmatch.errors import ChainConfigurationError

LOG = logging.getLogger("core.chain")


class AnswerChain:
    """
    Ordered, extendable sequence of answers plus a saturating cursor.

    Appending while the chain is in use only extends the tail; the cursor
    is never reset. A chain sitting on its last answer moves on to a newly
    appended one at the next ``advance()``, after yielding the old last
    answer once more.
    """

    def __init__(self, answers: Iterable[Answer]) -> None:
        self._answers: list[Answer] = []
        for answer in answers:
            self._check(answer)
            self._answers.append(answer)
        if not self._answers:
            raise ChainConfigurationError("An answer chain needs at least one answer")
        self._cursor = 0

    @staticmethod
    def _check(answer: object) -> None:
        if not isinstance(answer, (Return, Throw)):
            raise ChainConfigurationError(
                f"Answers must be Return or Throw, got {answer!r}"
            )

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def answers(self) -> tuple[Answer, ...]:
        return tuple(self._answers)

    @property
    def exhausted(self) -> bool:
        """True once the cursor rests on the final answer."""
        return self._cursor == len(self._answers) - 1

    def __len__(self) -> int:
        return len(self._answers)

    def advance(self) -> Answer:
        """Yield the current answer, then move the cursor unless at the end."""
        answer = self._answers[self._cursor]
        if self._cursor < len(self._answers) - 1:
            self._cursor += 1
        return answer

    def append(self, answer: Answer) -> None:
        self._check(answer)
        self._answers.append(answer)
        LOG.debug("Chain extended to %d answers (cursor=%d)", len(self._answers), self._cursor)

    def describe(self) -> str:
        return " -> ".join(a.describe() for a in self._answers)
