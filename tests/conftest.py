"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from datetime import UTC, datetime, timedelta

from entity_timestamps import Timestamps


class TickingClock:
    """Deterministic clock: each call returns a time one step after the last."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        self.calls += 1
        return current


@pytest.fixture
def start() -> datetime:
    return datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def clock(start):
    """Ticking clock starting at `start`."""
    return TickingClock(start)


@pytest.fixture
def timestamps(clock):
    """Fresh registry on the ticking clock."""
    return Timestamps.new(clock=clock)
