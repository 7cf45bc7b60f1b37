import random

import pytest

from flappy_bracket.data_models import GameConfig


class RecordingConsole:
    """Console double: records draw calls and replays scripted keys and frame times."""

    def __init__(self, width=80, height=50, keys=None, frame_time_ms=0.0):
        self.width = width
        self.height = height
        self.keys = list(keys or [])
        self.key = None
        self.frame_time_ms = frame_time_ms
        self.quitting = False
        self.cells = {}
        self.set_calls = 0
        self.texts = []
        self.background = None
        self.presents = 0
        self.closed = False

    def poll(self):
        self.key = self.keys.pop(0) if self.keys else None

    def cls(self):
        self.cls_bg((0, 0, 0))

    def cls_bg(self, color):
        self.background = color
        self.cells = {}
        self.texts = []

    def set(self, x, y, fg, bg, glyph):
        self.set_calls += 1
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[(x, y)] = (glyph, fg, bg)

    def print(self, x, y, text):
        self.texts.append((x, y, text))

    def print_centered(self, y, text):
        self.print((self.width - len(text)) // 2, y, text)

    def request_quit(self):
        self.quitting = True

    def present(self):
        self.presents += 1

    def close(self):
        self.closed = True

    def text_lines(self):
        return [text for _, _, text in self.texts]


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def config():
    return GameConfig()
