"""Shared test fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `src.*` imports work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeClock:
    """Deterministic monotonic clock; sleep() advances time instantly."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeMouse:
    """Records (action, button, time) instead of injecting OS events."""

    def __init__(self, clock: FakeClock | None = None) -> None:
        self.calls: list[tuple] = []
        self._clock = clock

    def _stamp(self) -> float:
        return self._clock.now if self._clock else 0.0

    def press(self, button) -> None:
        self.calls.append(("press", button, self._stamp()))

    def release(self, button) -> None:
        self.calls.append(("release", button, self._stamp()))


class LogCollector:
    def __init__(self) -> None:
        self.entries: list[tuple[str, str]] = []

    def __call__(self, level: str, msg: str) -> None:
        self.entries.append((level, msg))

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m in self.entries if level is None or lvl == level]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def logs():
    return LogCollector()


@pytest.fixture
def mouse(clock):
    return FakeMouse(clock)
