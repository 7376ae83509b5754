"""
Core data models for the resolution engine.

Every call style a mocked interface exposes (methods, property getters and
setters, subscripts) is normalized into the same shape: a Member token plus
an ordered tuple of ArgumentValue. Answers are a two-case union, Return or
Throw, and NOT_FOUND is a separate outcome that is never an Answer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any, Iterable

from stubmatch.config import get_config
from stubmatch.errors import ChainConfigurationError

LOG = logging.getLogger("core.types")


def short_repr(value: Any, limit: int | None = None) -> str:
    """``repr`` truncated to the configured length."""
    limit = limit or get_config().max_repr_length
    text = repr(value)
    if len(text) > limit:
        return text[: max(limit - 3, 0)] + "..."
    return text


class MemberKind(StrEnum):
    """Call style of a mocked member."""

    METHOD = "method"
    GETTER = "getter"
    SETTER = "setter"
    SUBSCRIPT_GETTER = "subscript_getter"
    SUBSCRIPT_SETTER = "subscript_setter"


@dataclass(frozen=True)
class Member:
    """
    Invocation identifier: which member of the mocked interface is called.

    Tokens are allocated by whoever builds the mock type, one per method,
    getter, setter, subscript getter and subscript setter. Setters carry the
    assigned value as a trailing argument, so their arity is one more than
    the number of index arguments.
    """

    name: str
    kind: MemberKind = MemberKind.METHOD
    arity: int = 0

    def __post_init__(self) -> None:
        if self.arity < 0:
            raise ValueError(f"Arity must be non-negative, got {self.arity}")

    @classmethod
    def method(cls, name: str, arity: int = 0) -> "Member":
        return cls(name, MemberKind.METHOD, arity)

    @classmethod
    def getter(cls, name: str) -> "Member":
        return cls(name, MemberKind.GETTER, 0)

    @classmethod
    def setter(cls, name: str) -> "Member":
        return cls(name, MemberKind.SETTER, 1)

    @classmethod
    def subscript_getter(cls, name: str = "subscript", index_arity: int = 1) -> "Member":
        return cls(name, MemberKind.SUBSCRIPT_GETTER, index_arity)

    @classmethod
    def subscript_setter(cls, name: str = "subscript", index_arity: int = 1) -> "Member":
        return cls(name, MemberKind.SUBSCRIPT_SETTER, index_arity + 1)

    @property
    def label(self) -> str:
        if self.kind == MemberKind.METHOD:
            return self.name
        return f"{self.name}.{self.kind.value}"

    def describe(self) -> str:
        if self.kind == MemberKind.METHOD:
            return f"{self.name}()"
        return self.label

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "kind": self.kind.value, "arity": self.arity}


@dataclass(frozen=True)
class ArgumentValue:
    """
    One argument of a call: a runtime type tag, the raw value, and whether
    the value may be compared at all.

    Non-matchable values (e.g. callbacks the mock does not retain) only
    satisfy the wildcard matcher.
    """

    type_tag: type
    value: Any = None
    matchable: bool = True

    @classmethod
    def of(cls, value: Any) -> "ArgumentValue":
        """Wrap a concrete value; already wrapped values pass through."""
        if isinstance(value, ArgumentValue):
            return value
        return cls(type(value), value, True)

    @classmethod
    def opaque(cls, type_tag: type = object) -> "ArgumentValue":
        """The non-matchable sentinel for values that cannot be compared."""
        return cls(type_tag, None, False)

    def describe(self) -> str:
        if not self.matchable:
            return f"<opaque {self.type_tag.__name__}>"
        return short_repr(self.value)


@dataclass(frozen=True)
class Invocation:
    """Immutable snapshot of one call."""

    member: Member
    arguments: tuple[ArgumentValue, ...] = ()

    @classmethod
    def of(cls, member: Member, args: Iterable[Any] = ()) -> "Invocation":
        return cls(member, tuple(ArgumentValue.of(a) for a in args))

    @property
    def values(self) -> list[Any]:
        return [a.value for a in self.arguments]

    def describe(self) -> str:
        args = ", ".join(a.describe() for a in self.arguments)
        return f"{self.member.label}({args})"


@dataclass(frozen=True)
class Return:
    """Answer that returns ``value`` to the caller."""

    value: Any = None

    def resolve(self) -> Any:
        return self.value

    def describe(self) -> str:
        return f"return {short_repr(self.value)}"


@dataclass(frozen=True)
class Throw:
    """Answer that raises ``error`` at the call site."""

    error: BaseException | type[BaseException]

    def __post_init__(self) -> None:
        error = self.error
        is_instance = isinstance(error, BaseException)
        is_class = isinstance(error, type) and issubclass(error, BaseException)
        if not (is_instance or is_class):
            raise ChainConfigurationError(
                f"Throw requires an exception instance or class, got {error!r}"
            )

    def resolve(self) -> Any:
        if isinstance(self.error, BaseException):
            # replays of the same instance start from a clean traceback
            raise self.error.with_traceback(None)
        raise self.error

    def describe(self) -> str:
        return f"raise {short_repr(self.error)}"


Answer = Return | Throw


class Resolution(Enum):
    """Outcomes of resolution that are not an Answer."""

    NOT_FOUND = "not_found"


NOT_FOUND = Resolution.NOT_FOUND
