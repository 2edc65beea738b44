"""
conftest.py - pytest fixtures for uuid_gen tests.
"""

import threading

import pytest

from uuid_gen import UuidGenerator
from uuid_gen.entropy.base import EntropySource
from uuid_gen.entropy.system import SystemEntropySource
from uuid_gen.errors import EntropyUnavailableError


class ScriptedEntropySource(EntropySource):
    """Returns pre-recorded draws in order, then repeats the last one."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.calls = 0

    def random_bits(self, count):
        draw = self._draws[min(self.calls, len(self._draws) - 1)]
        self.calls += 1
        return list(draw)


class FlakyEntropySource(EntropySource):
    """System entropy that fails on a chosen call number (1-based)."""

    def __init__(self, fail_on_call: int, error: Exception | None = None):
        self._inner = SystemEntropySource()
        self._fail_on_call = fail_on_call
        self._error = error or EntropyUnavailableError("source offline", source="flaky")
        self._lock = threading.Lock()
        self.calls = 0
        self.started = 0
        self.closed = 0

    @property
    def name(self) -> str:
        return "flaky"

    def start(self):
        self.started += 1

    def close(self):
        self.closed += 1

    def random_bits(self, count):
        with self._lock:
            self.calls += 1
            call = self.calls
        if call == self._fail_on_call:
            raise self._error
        return self._inner.random_bits(count)


class ManualClock:
    """Clock returning a settable millisecond value."""

    def __init__(self, now_ms: int):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms


@pytest.fixture
def generator():
    """An initialized generator on the system entropy source."""
    gen = UuidGenerator()
    gen.initialize()
    yield gen
    gen.close()


@pytest.fixture
def manual_clock():
    return ManualClock(1_700_000_000_000)


@pytest.fixture
def clocked_generator(manual_clock):
    """An initialized generator reading time from manual_clock."""
    gen = UuidGenerator(clock=manual_clock)
    gen.initialize()
    yield gen
    gen.close()
