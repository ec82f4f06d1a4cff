"""Input events consumed by scenes, plus the pygame-backed source.

Scenes only ever see the small event types defined here; translating raw
pygame events (touch fingers, left mouse button, keys) happens in
PygameInputSource so the controller logic stays independent of pygame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Union

import pygame


@dataclass(frozen=True)
class DragStart:
    x: float
    y: float


@dataclass(frozen=True)
class DragMove:
    x: float
    y: float


@dataclass(frozen=True)
class DragEnd:
    pass


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Quit:
    pass


InputEvent = Union[DragStart, DragMove, DragEnd, KeyPress, Quit]


class InputSource(Protocol):
    def wait(self) -> List[InputEvent]: ...  # noqa: D401


_KEY_NAMES = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_w: "w",
    pygame.K_s: "s",
    pygame.K_ESCAPE: "escape",
}


class PygameInputSource:
    """Translate pygame's event queue into InputEvents.

    Finger coordinates arrive normalized to [0, 1] and are scaled by the
    viewport size. Mouse events that SDL synthesizes from touches are
    dropped so a single touch never produces two drags. Extra fingers that
    land while one is already dragging are ignored until it lifts.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        # finger_id of the touch driving the current drag
        self._finger: Optional[int] = None

    def translate(self, event: pygame.event.Event) -> Optional[InputEvent]:
        etype = event.type
        if etype == pygame.QUIT:
            return Quit()
        if etype == pygame.KEYDOWN:
            name = _KEY_NAMES.get(event.key)
            if name is None:
                name = getattr(event, "unicode", "") or str(event.key)
            return KeyPress(name)

        # touch: only the finger that started the drag steers it
        if etype == pygame.FINGERDOWN:
            if self._finger is not None:
                return None
            self._finger = event.finger_id
            return DragStart(event.x * self.width, event.y * self.height)
        if etype == pygame.FINGERMOTION:
            if event.finger_id != self._finger:
                return None
            return DragMove(event.x * self.width, event.y * self.height)
        if etype == pygame.FINGERUP:
            if event.finger_id != self._finger:
                return None
            self._finger = None
            return DragEnd()

        # mouse (left button only)
        if getattr(event, "touch", False):
            return None
        if etype == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return DragStart(*event.pos)
        if etype == pygame.MOUSEMOTION:
            return DragMove(*event.pos)
        if etype == pygame.MOUSEBUTTONUP and event.button == 1:
            return DragEnd()
        return None

    def _translate_all(self, events) -> List[InputEvent]:
        out: List[InputEvent] = []
        for event in events:
            translated = self.translate(event)
            if translated is not None:
                out.append(translated)
        return out

    def wait(self) -> List[InputEvent]:
        """Block until at least one pygame event arrives, then drain the queue."""
        first = pygame.event.wait()
        return self._translate_all([first, *pygame.event.get()])
