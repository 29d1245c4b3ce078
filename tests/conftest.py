from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from mixdesign.runs import MixDesignService
from mixdesign.store import RunStore


class StepClock:
    """Deterministic clock: each call advances by `step` seconds."""

    def __init__(self, start=datetime(2026, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc), step=1.0):
        self.now = start
        self.step = timedelta(seconds=step)

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def service(clock):
    return MixDesignService(store=RunStore(), clock=clock)
