import pytest


class FakeClock:
    """Manually advanced time source for deterministic tweens."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CallCounter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def counter():
    return CallCounter()


@pytest.fixture
def make_counter():
    return CallCounter
