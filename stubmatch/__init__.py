"""
stubmatch: a test-double engine.

Register canned answers for calls matching argument patterns, resolve
real calls against them, and verify recorded call history::

    from stubmatch import when, verify, times, eq

    when(mock.fetch_(eq(5))).then_return("five").then_throw(KeyError)
    mock.fetch(5)                      # "five"
    verify(mock.fetch_(eq(5)), times(1))
"""

from __future__ import annotations

from stubmatch.builder import AnswerChainBuilder, when
from stubmatch.config import StubMatchConfig, configure_logging, get_config, set_config
from stubmatch.core import (
    NOT_FOUND,
    AnswerChain,
    ArgumentMatcher,
    ArgumentValue,
    Invocation,
    Member,
    MemberKind,
    ResolutionEngine,
    Return,
    Throw,
    any_,
    any_of_type,
    eq,
)
from stubmatch.errors import (
    ArityMismatch,
    ChainConfigurationError,
    MockFailure,
    StubMatchError,
    UnmatchedInvocation,
    VerificationMismatch,
)
from stubmatch.mock import InvocationDescriptor, MockObject, report
from stubmatch.reporting import (
    FailureCollector,
    failure_reporter,
    get_failure_reporter,
    report_failure,
    set_failure_reporter,
)
from stubmatch.verification import (
    Times,
    at_least,
    at_most,
    never,
    times,
    verify,
    verify_no_more_interactions,
)

__version__ = "0.1.0"

__all__ = [
    # Stubbing
    "when",
    "AnswerChainBuilder",
    # Verification
    "verify",
    "verify_no_more_interactions",
    "Times",
    "times",
    "never",
    "at_least",
    "at_most",
    # Matchers
    "ArgumentMatcher",
    "any_",
    "any_of_type",
    "eq",
    # Engine and data model
    "NOT_FOUND",
    "AnswerChain",
    "ArgumentValue",
    "Invocation",
    "Member",
    "MemberKind",
    "ResolutionEngine",
    "Return",
    "Throw",
    # Mock objects
    "MockObject",
    "InvocationDescriptor",
    "report",
    # Failure reporting
    "FailureCollector",
    "failure_reporter",
    "get_failure_reporter",
    "report_failure",
    "set_failure_reporter",
    # Errors
    "StubMatchError",
    "ArityMismatch",
    "ChainConfigurationError",
    "MockFailure",
    "UnmatchedInvocation",
    "VerificationMismatch",
    # Config
    "StubMatchConfig",
    "configure_logging",
    "get_config",
    "set_config",
]
