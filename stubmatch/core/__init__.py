"""
Invocation matching and stub resolution.

Leaves first: types (members, argument values, answers), matchers,
answer chains, the stub registry, the call recorder, and the resolution
engine that ties them together.
"""

from __future__ import annotations

from stubmatch.core.chain import AnswerChain
from stubmatch.core.engine import ResolutionEngine
from stubmatch.core.matchers import (
    AnyMatcher,
    AnyOfTypeMatcher,
    ArgumentMatcher,
    EqualsMatcher,
    any_,
    any_of_type,
    as_matcher,
    eq,
    matches_all,
)
from stubmatch.core.recorder import CallRecorder, RecordedCall
from stubmatch.core.registry import StubRegistration, StubRegistry
from stubmatch.core.types import (
    NOT_FOUND,
    Answer,
    ArgumentValue,
    Invocation,
    Member,
    MemberKind,
    Resolution,
    Return,
    Throw,
)

__all__ = [
    "AnswerChain",
    "ResolutionEngine",
    "AnyMatcher",
    "AnyOfTypeMatcher",
    "ArgumentMatcher",
    "EqualsMatcher",
    "any_",
    "any_of_type",
    "as_matcher",
    "eq",
    "matches_all",
    "CallRecorder",
    "RecordedCall",
    "StubRegistration",
    "StubRegistry",
    "NOT_FOUND",
    "Answer",
    "ArgumentValue",
    "Invocation",
    "Member",
    "MemberKind",
    "Resolution",
    "Return",
    "Throw",
]
