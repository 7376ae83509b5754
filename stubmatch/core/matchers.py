"""
Argument matchers.

A matcher constrains one argument position. Matchers are pure and
stateless; a matcher list matches a call when every position matches
(conjunction), evaluated independently of each other.

Three kinds are built in:
    - AnyMatcher: wildcard, also accepts non-matchable values
    - EqualsMatcher: same type and equal value, never accepts non-matchable values
    - AnyOfTypeMatcher: exact runtime type tag, regardless of matchability
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Sequence

from stubmatch.core.types import ArgumentValue, short_repr

LOG = logging.getLogger("core.matchers")


class ArgumentMatcher(ABC):
    """
    Abstract predicate over one ArgumentValue.

    ``type_tag`` is the type a matcher requires, or None when it accepts
    values of any type.
    """

    type_tag: type | None = None

    @abstractmethod
    def matches(self, value: ArgumentValue) -> bool:
        """Return True if *value* satisfies this matcher. Never raises."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable form used in failure messages."""
        ...

    def __repr__(self) -> str:
        return self.describe()


class AnyMatcher(ArgumentMatcher):
    """Matches everything, including non-matchable values."""

    def matches(self, value: ArgumentValue) -> bool:
        return True

    def describe(self) -> str:
        return "any()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AnyMatcher)

    def __hash__(self) -> int:
        return hash(AnyMatcher)


class EqualsMatcher(ArgumentMatcher):
    """
    Matches matchable values of the same type as ``expected`` that compare
    equal to it. ``eq(1)`` does not match ``True`` or ``1.0``.
    """

    def __init__(self, expected: Any) -> None:
        self.expected = expected
        self.type_tag = type(expected)

    def matches(self, value: ArgumentValue) -> bool:
        if not value.matchable or value.type_tag is not self.type_tag:
            return False
        try:
            return bool(value.value == self.expected)
        except Exception as exc:
            # A broken __eq__ on a user type is a non-match, not a crash.
            LOG.debug("Equality check against %s raised %r", short_repr(self.expected), exc)
            return False

    def describe(self) -> str:
        return f"eq({short_repr(self.expected)})"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, EqualsMatcher)
            and other.type_tag is self.type_tag
            and other.expected == self.expected
        )

    def __hash__(self) -> int:
        try:
            return hash((EqualsMatcher, self.type_tag, self.expected))
        except TypeError:
            return hash((EqualsMatcher, self.type_tag))


class AnyOfTypeMatcher(ArgumentMatcher):
    """
    Matches values whose runtime type tag is exactly ``type_tag``.

    Used instead of AnyMatcher where value-based equality would be unsound,
    e.g. for generic parameters.
    """

    def __init__(self, type_tag: type) -> None:
        if not isinstance(type_tag, type):
            raise TypeError(f"any_of_type() requires a type, got {type_tag!r}")
        self.type_tag = type_tag

    def matches(self, value: ArgumentValue) -> bool:
        return value.type_tag is self.type_tag

    def describe(self) -> str:
        return f"any_of_type({self.type_tag.__name__})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AnyOfTypeMatcher) and other.type_tag is self.type_tag

    def __hash__(self) -> int:
        return hash((AnyOfTypeMatcher, self.type_tag))


_ANY = AnyMatcher()


def any_() -> AnyMatcher:
    """The wildcard matcher."""
    return _ANY


def eq(expected: Any) -> EqualsMatcher:
    """Match arguments equal to *expected*."""
    return EqualsMatcher(expected)


def any_of_type(type_tag: type) -> AnyOfTypeMatcher:
    """Match arguments whose runtime type is exactly *type_tag*."""
    return AnyOfTypeMatcher(type_tag)


def as_matcher(obj: Any) -> ArgumentMatcher:
    """Coerce a bare value to ``eq(value)``; matchers pass through."""
    if isinstance(obj, ArgumentMatcher):
        return obj
    return EqualsMatcher(obj)


def matches_all(
    matchers: Sequence[ArgumentMatcher],
    values: Sequence[ArgumentValue],
) -> bool:
    """Conjunction over positions. Differing lengths never match."""
    if len(matchers) != len(values):
        return False
    return all(m.matches(v) for m, v in zip(matchers, values))


def describe_matchers(matchers: Sequence[ArgumentMatcher]) -> str:
    return ", ".join(m.describe() for m in matchers)
