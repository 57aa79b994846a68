import pytest


class FakeClock:
    """Collects simulated time instead of sleeping"""

    def __init__(self):
        self.elapsed = 0.0
        self.waits = []

    def sleep(self, seconds):
        self.waits.append(seconds)
        self.elapsed += seconds


class FakeToneEmitter:
    def __init__(self, clock):
        self.clock = clock
        self.tones = []

    def emit(self, frequency, duration):
        self.tones.append((frequency, duration))
        self.clock.elapsed += duration / 1000


class ListTranscript:
    def __init__(self):
        self.lines = []

    def append(self, text):
        self.lines.append(text)

    @property
    def text(self):
        return ''.join(self.lines)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def emitter(clock):
    return FakeToneEmitter(clock)


@pytest.fixture
def transcript():
    return ListTranscript()
