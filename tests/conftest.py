import numpy as np
import pytest

from pong_config import GameConfig
from pong_loop import FrameDriver, ManualTimer
from pong_state import new_game


class RecordingCanvas:
    """Canvas that remembers every drawing call instead of drawing."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill_rect", x, y, w, h, color))

    def fill_circle(self, x, y, r, color):
        self.calls.append(("fill_circle", x, y, r, color))

    def stroke_circle(self, x, y, r, color):
        self.calls.append(("stroke_circle", x, y, r, color))

    def count(self, name):
        return sum(1 for c in self.calls if c[0] == name)


class RecordingScoreboard:
    def __init__(self):
        self.shown = []

    @property
    def last(self):
        return self.shown[-1] if self.shown else None

    def show(self, player, computer):
        self.shown.append((player, computer))


class FixedRng:
    """Stands in for numpy's Generator with fixed draws."""

    def __init__(self, angle=0.0, coin=0.75):
        self.angle = angle
        self.coin = coin

    def uniform(self, low, high):
        return min(high, max(low, self.angle))

    def random(self):
        return self.coin


@pytest.fixture
def cfg():
    return GameConfig()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def state(cfg):
    return new_game(cfg)


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def scoreboard():
    return RecordingScoreboard()


@pytest.fixture
def driver(state, canvas, rng, scoreboard, cfg):
    return FrameDriver(state, canvas, rng, ManualTimer(cfg.frame_ms), scoreboard)


@pytest.fixture
def fixed_rng():
    return FixedRng
