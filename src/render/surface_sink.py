"""DrawingSink over a plain pygame.Surface (software back end)."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

import pygame

from config import BACKGROUND, LINE_COLOR, LINE_WIDTH

logger = logging.getLogger(__name__)

Point2 = Tuple[float, float]


class SurfaceSink:
    """Buffers a path between begin_path() and stroke(), then draws it.

    pygame can't rasterize inf/nan, so segments with a non-finite endpoint
    are dropped at stroke time. The projected points themselves are left
    as-is upstream.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        *,
        background=BACKGROUND,
        color=LINE_COLOR,
        width: int = LINE_WIDTH,
    ) -> None:
        self.surface = surface
        self.background = background
        self.color = color
        self.width = width
        self._segments: List[Tuple[Point2, Point2]] = []
        self._cursor: Optional[Point2] = None
        self.skipped = 0

    def clear(self, width: float, height: float) -> None:
        self.surface.fill(self.background, pygame.Rect(0, 0, int(width), int(height)))

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

    def stroke(self) -> None:
        self.skipped = 0
        for start, end in self._segments:
            if not all(math.isfinite(v) for v in (*start, *end)):
                self.skipped += 1
                continue
            pygame.draw.line(self.surface, self.color, start, end, self.width)
        if self.skipped:
            logger.debug("Skipped %d non-finite segments", self.skipped)
