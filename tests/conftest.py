"""
Shared test fixtures and pytest configuration.

Markers:
    @pytest.mark.scenario  - End-to-end stubbing/verification scenarios

Run subsets:
    pytest -m scenario             # only scenarios
    pytest -m "not scenario"       # unit tests only

Every test runs with a FailureCollector installed as the failure reporter
(see the ``failures`` fixture), so reported failures are asserted on
instead of aborting the test. Tests that need the default raising
reporter request ``strict_reporter``.
"""

from typing import Any, Iterator

import pytest

from stubmatch import (
    ArgumentValue,
    FailureCollector,
    Member,
    MockObject,
    StubMatchConfig,
    any_,
    set_config,
    set_failure_reporter,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "scenario: end-to-end stubbing and verification scenario")


@pytest.fixture(autouse=True)
def failures() -> Iterator[FailureCollector]:
    """Install a collecting failure reporter for the duration of a test."""
    collector = FailureCollector()
    previous = set_failure_reporter(collector)
    yield collector
    set_failure_reporter(previous)


@pytest.fixture
def strict_reporter(failures) -> Iterator[None]:
    """Restore the default reporter, which raises MockFailure."""
    previous = set_failure_reporter(None)
    yield
    set_failure_reporter(previous)


@pytest.fixture(autouse=True)
def _reset_config() -> Iterator[None]:
    set_config(StubMatchConfig())
    yield
    set_config(None)


# ---------------------------------------------------------------------------
# Hand-written mocks, shaped the way generated mock types are
# ---------------------------------------------------------------------------


class RepositoryMock(MockObject):
    """Mock of an interface ``fetch(key)``, ``store(key, value)``, ``count()``."""

    FETCH = Member.method("fetch", arity=1)
    STORE = Member.method("store", arity=2)
    COUNT = Member.method("count")
    SUBSCRIBE = Member.method("subscribe", arity=1)
    LOAD = Member.method("load", arity=1)

    def fetch(self, key: Any) -> Any:
        return self._invoke(self.FETCH, key)

    def store(self, key: Any, value: Any) -> Any:
        return self._invoke(self.STORE, key, value)

    def count(self) -> int:
        return self._invoke(self.COUNT)

    def subscribe(self, callback: Any) -> Any:
        # callbacks are not retained, so they are passed as non-matchable
        return self._invoke(self.SUBSCRIBE, ArgumentValue.opaque(type(callback)))

    async def load(self, key: Any) -> Any:
        return await self._invoke_async(self.LOAD, key)

    # stubbing hooks

    def fetch_(self, key: Any = any_()):
        return self._stub(self.FETCH, key)

    def store_(self, key: Any = any_(), value: Any = any_()):
        return self._stub(self.STORE, key, value)

    def count_(self):
        return self._stub(self.COUNT)

    def subscribe_(self, callback: Any = any_()):
        return self._stub(self.SUBSCRIBE, callback)

    def load_(self, key: Any = any_()):
        return self._stub(self.LOAD, key)


class GetSetPropertyMock(MockObject):
    """Mock of an interface with a read/write ``value`` property."""

    VALUE_GET = Member.getter("value")
    VALUE_SET = Member.setter("value")

    @property
    def value(self) -> Any:
        return self._invoke(self.VALUE_GET)

    @value.setter
    def value(self, new_value: Any) -> None:
        self._invoke(self.VALUE_SET, new_value)

    def value_getter(self):
        return self._stub(self.VALUE_GET)

    def value_setter(self, new_value: Any = any_()):
        return self._stub(self.VALUE_SET, new_value)


class GridMock(MockObject):
    """Mock of an interface with a two-index subscript."""

    CELL_GET = Member.subscript_getter("cell", index_arity=2)
    CELL_SET = Member.subscript_setter("cell", index_arity=2)

    def __getitem__(self, index: tuple[int, int]) -> Any:
        row, col = index
        return self._invoke(self.CELL_GET, row, col)

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        row, col = index
        self._invoke(self.CELL_SET, row, col, value)

    def cell_getter(self, row: Any = any_(), col: Any = any_()):
        return self._stub(self.CELL_GET, row, col)

    def cell_setter(self, row: Any = any_(), col: Any = any_(), value: Any = any_()):
        return self._stub(self.CELL_SET, row, col, value)


@pytest.fixture
def repo() -> RepositoryMock:
    return RepositoryMock()


@pytest.fixture
def prop_mock() -> GetSetPropertyMock:
    return GetSetPropertyMock()


@pytest.fixture
def grid() -> GridMock:
    return GridMock()
