"""Simple text rendering for OpenGL with pygame fonts.

Draws 2D HUD labels in screen space on top of the wireframe. Each label is
keyed to a texture slot that is only re-uploaded when its text changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glPushMatrix,
    glPopMatrix,
    glBegin,
    glEnd,
    glOrtho,
    glLoadIdentity,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    glBlendFunc,
    glEnable,
    glDisable,
    glMatrixMode,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_QUADS,
)

Color = Tuple[int, int, int]


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]
    last_text: str | None = None


class TextRenderer:
    """2D text renderer for OpenGL using pygame.font.

    - Call begin() once before drawing labels; call end() after.
    - draw_text() takes a `key` so a changing label reuses one texture.
    """

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        font: Optional[pygame.font.Font] = None,
        size: int = 20,
    ) -> None:
        self.width = screen_width
        self.height = screen_height
        self.font = font or pygame.font.Font(None, size)
        self._slots: Dict[str, _TexSlot] = {}
        self._in_overlay = False

    # --------------------------- overlay state ---------------------------
    def begin(self) -> None:  # pragma: no cover - visual
        if self._in_overlay:
            return
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)
        self._in_overlay = True

    def end(self) -> None:  # pragma: no cover - visual
        if not self._in_overlay:
            return
        glDisable(GL_TEXTURE_2D)
        glDisable(GL_BLEND)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
        self._in_overlay = False

    # --------------------------- rendering ------------------------------
    def _upload_surface(self, slot: _TexSlot, surf: pygame.Surface) -> None:
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        slot.size = (w, h)

    def draw_text(
        self, text: str, x: float, y: float, color: Color = (0, 0, 0), *, key: str
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw one line with its top-left corner at (x, y); returns (w, h)."""
        slot = self._slots.get(key)
        if slot is None:
            slot = _TexSlot(id=glGenTextures(1), size=(0, 0))
            self._slots[key] = slot
        if slot.last_text != text:
            self._upload_surface(slot, self.font.render(text, True, color))
            slot.last_text = text

        w, h = slot.size
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # Note: tostring with True flips rows, so v coords run bottom-up
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()
        return w, h
