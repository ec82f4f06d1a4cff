"""DrawingSink backed by the fixed-function OpenGL pipeline.

The wireframe is already projected to screen space, so this sets up a
pixel-aligned orthographic projection (origin top-left, y down) and emits
one GL_LINES pair per path segment.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from OpenGL.GL import (
    glBegin,
    glEnd,
    glClear,
    glClearColor,
    glColor3f,
    glLineWidth,
    glLoadIdentity,
    glMatrixMode,
    glOrtho,
    glVertex2f,
    glViewport,
    GL_COLOR_BUFFER_BIT,
    GL_LINES,
    GL_MODELVIEW,
    GL_PROJECTION,
)

from config import BACKGROUND, LINE_COLOR, LINE_WIDTH

Point2 = Tuple[float, float]


def _unit_rgb(color) -> Tuple[float, float, float]:
    r, g, b = color[:3]
    return r / 255.0, g / 255.0, b / 255.0


class GLSink:
    def __init__(self, *, background=BACKGROUND, color=LINE_COLOR, width: int = LINE_WIDTH) -> None:
        self.background = _unit_rgb(background)
        self.color = _unit_rgb(color)
        self.width = width
        self._segments: List[Tuple[Point2, Point2]] = []
        self._cursor: Optional[Point2] = None

    def clear(self, width: float, height: float) -> None:  # pragma: no cover - visual
        glViewport(0, 0, int(width), int(height))
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, width, height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glClearColor(*self.background, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

    def begin_path(self) -> None:
        self._segments = []
        self._cursor = None

    def move_to(self, x: float, y: float) -> None:
        self._cursor = (x, y)

    def line_to(self, x: float, y: float) -> None:
        end = (x, y)
        if self._cursor is not None:
            self._segments.append((self._cursor, end))
        self._cursor = end

    def stroke(self) -> None:  # pragma: no cover - visual
        if not self._segments:
            return
        glLineWidth(self.width)
        glColor3f(*self.color)
        glBegin(GL_LINES)
        for (x0, y0), (x1, y1) in self._segments:
            glVertex2f(x0, y0)
            glVertex2f(x1, y1)
        glEnd()
