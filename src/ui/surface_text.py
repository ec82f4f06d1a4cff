from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

Color = Tuple[int, int, int]


class SurfaceTextRenderer:
    """TextRenderer counterpart that blits straight onto a pygame.Surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        font: Optional[pygame.font.Font] = None,
        size: int = 20,
    ) -> None:
        self.surface = surface
        self.font = font or pygame.font.Font(None, size)
        self._rendered: Dict[str, Tuple[str, pygame.Surface]] = {}

    def begin(self) -> None:
        pass

    def end(self) -> None:
        pass

    def draw_text(
        self, text: str, x: float, y: float, color: Color = (0, 0, 0), *, key: str
    ) -> Tuple[int, int]:
        cached = self._rendered.get(key)
        if cached is None or cached[0] != text:
            cached = (text, self.font.render(text, True, color))
            self._rendered[key] = cached
        surf = cached[1]
        self.surface.blit(surf, (x, y))
        return surf.get_width(), surf.get_height()
