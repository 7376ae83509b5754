from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class InvocationRecord(BaseModel):
    index: int
    member: str
    kind: str
    arguments: List[str]
    stub: Optional[int] = None
    verified: bool = False


class VerificationOutcome(BaseModel):
    member: str
    expectation: str
    expected: str
    actual: int
    satisfied: bool


class MockReport(BaseModel):
    stub_count: int
    invocations: List[InvocationRecord]

    @property
    def unmatched(self) -> List[InvocationRecord]:
        return [record for record in self.invocations if record.stub is None]
