"""
Process-wide failure reporting.

Resolution failures, arity mismatches and unmet verifications are handed
to a single replaceable callback. The default reporter logs the message
and raises MockFailure, which test runners treat as a failed assertion.
A reporter that returns normally lets the caller continue; whether that
is acceptable is the reporter's decision, not the engine's.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from stubmatch.errors import MockFailure

LOG = logging.getLogger("reporting")

FailureReporter = Callable[[str], None]


def default_failure_reporter(message: str) -> None:
    LOG.error("%s", message)
    raise MockFailure(message)


_reporter: FailureReporter = default_failure_reporter


def report_failure(message: str) -> None:
    """Send *message* to the installed reporter."""
    _reporter(message)


def get_failure_reporter() -> FailureReporter:
    return _reporter


def set_failure_reporter(reporter: FailureReporter | None) -> FailureReporter:
    """
    Install *reporter* process-wide and return the previous one.

    Passing None restores the default reporter.
    """
    global _reporter
    previous = _reporter
    _reporter = reporter if reporter is not None else default_failure_reporter
    return previous


@contextmanager
def failure_reporter(reporter: FailureReporter) -> Iterator[FailureReporter]:
    """Temporarily install *reporter*."""
    previous = set_failure_reporter(reporter)
    try:
        yield reporter
    finally:
        set_failure_reporter(previous)


class FailureCollector:
    """Reporter that stores messages instead of failing."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        LOG.info("Collected failure: %s", message.splitlines()[0] if message else message)
        self.messages.append(message)

    def __len__(self) -> int:
        return len(self.messages)

    def clear(self) -> None:
        self.messages.clear()
