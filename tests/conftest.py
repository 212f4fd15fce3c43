import matplotlib
matplotlib.use("Agg")

import pytest


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, dt):
        self.now += dt


@pytest.fixture
def clock():
    return FakeClock(start=100.0)


@pytest.fixture
def make_clock():
    return FakeClock
