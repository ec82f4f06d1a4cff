"""Shared fixtures.

- headless SDL drivers so pygame never opens a real window or audio device
- a recording DrawingSink
"""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from core.point3 import Point3
from core.wireframe import WireframeCube


class RecordingSink:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self, width, height):
        self.calls.append(("clear", width, height))

    def begin_path(self):
        self.calls.append(("begin_path",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def stroke(self):
        self.calls.append(("stroke",))


class RecordingText:
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.begun = 0
        self.ended = 0

    def begin(self):
        self.begun += 1

    def end(self):
        self.ended += 1

    def draw_text(self, text, x, y, color=(0, 0, 0), *, key):
        self.lines.append(text)
        return 100, 16


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def text() -> RecordingText:
    return RecordingText()


@pytest.fixture()
def unit_cube() -> WireframeCube:
    return WireframeCube(Point3(0, 0, 0), 2)
