import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake.body import Body  # noqa: E402


class ScriptedRandom:
    """Stand-in random source that replays ``values`` from ``randrange``."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, stop):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        assert 0 <= value < stop
        return value

    def choice(self, seq):
        return seq[0]


def assert_consistent(body: Body) -> None:
    forward = list(body)
    backward = list(reversed(body))
    assert forward == backward[::-1]
    assert len(forward) == len(body) == len(set(forward))
    assert body.head.prev is None
    assert body.tail.next is None
    assert all(body.contains(p) for p in forward)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def check_body():
    return assert_consistent
