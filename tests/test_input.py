from __future__ import annotations

import numpy as np
import pygame
import pytest

from camera import Camera, CubeController
from core.input import DragEnd, DragMove, DragStart, KeyPress, PygameInputSource, Quit
from core.point3 import Point3
from core.wireframe import WireframeCube


@pytest.fixture()
def source() -> PygameInputSource:
    return PygameInputSource(512, 256)


def test_fingers_scale_to_viewport(source) -> None:
    down = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.25, dx=0.0, dy=0.0, finger_id=0, touch_id=0)
    move = pygame.event.Event(pygame.FINGERMOTION, x=1.0, y=1.0, dx=0.5, dy=0.75, finger_id=0, touch_id=0)
    up = pygame.event.Event(pygame.FINGERUP, x=1.0, y=1.0, dx=0.0, dy=0.0, finger_id=0, touch_id=0)
    assert source.translate(down) == DragStart(256.0, 64.0)
    assert source.translate(move) == DragMove(512.0, 256.0)
    assert source.translate(up) == DragEnd()


def test_left_mouse_button_drags(source) -> None:
    assert source.translate(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20))
    ) == DragStart(10, 20)
    assert source.translate(
        pygame.event.Event(pygame.MOUSEMOTION, pos=(15, 22), rel=(5, 2), buttons=(1, 0, 0))
    ) == DragMove(15, 22)
    assert source.translate(
        pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(15, 22))
    ) == DragEnd()


def test_other_buttons_and_synthetic_touch_mouse_ignored(source) -> None:
    assert source.translate(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(1, 1))) is None
    assert source.translate(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), touch=True)) is None


@pytest.mark.parametrize(
    "key, name",
    [
        (pygame.K_UP, "up"),
        (pygame.K_DOWN, "down"),
        (pygame.K_LEFT, "left"),
        (pygame.K_RIGHT, "right"),
        (pygame.K_w, "w"),
        (pygame.K_s, "s"),
        (pygame.K_ESCAPE, "escape"),
    ],
)
def test_keys_map_to_names(source, key, name) -> None:
    assert source.translate(pygame.event.Event(pygame.KEYDOWN, key=key, unicode="")) == KeyPress(name)


def test_unmapped_key_uses_its_character(source) -> None:
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a, unicode="a")
    assert source.translate(event) == KeyPress("a")


def test_quit_and_unknown_events(source) -> None:
    assert source.translate(pygame.event.Event(pygame.QUIT)) == Quit()
    assert source.translate(pygame.event.Event(pygame.USEREVENT)) is None


def _finger(etype, finger_id, x, y):
    return pygame.event.Event(etype, x=x, y=y, dx=0.0, dy=0.0, finger_id=finger_id, touch_id=0)


def test_second_finger_down_is_ignored_while_dragging(source) -> None:
    assert source.translate(_finger(pygame.FINGERDOWN, 0, 0.25, 0.5)) == DragStart(128.0, 128.0)
    assert source.translate(_finger(pygame.FINGERDOWN, 1, 0.75, 0.5)) is None
    assert source.translate(_finger(pygame.FINGERMOTION, 0, 0.5, 0.5)) == DragMove(256.0, 128.0)


def test_other_finger_motion_and_lift_are_ignored(source) -> None:
    source.translate(_finger(pygame.FINGERDOWN, 0, 0.25, 0.5))
    source.translate(_finger(pygame.FINGERDOWN, 1, 0.75, 0.5))
    assert source.translate(_finger(pygame.FINGERMOTION, 1, 0.9, 0.9)) is None
    assert source.translate(_finger(pygame.FINGERUP, 1, 0.9, 0.9)) is None
    assert source.translate(_finger(pygame.FINGERUP, 0, 0.25, 0.5)) == DragEnd()


def test_new_finger_can_drag_after_first_lifts(source) -> None:
    source.translate(_finger(pygame.FINGERDOWN, 0, 0.1, 0.1))
    source.translate(_finger(pygame.FINGERUP, 0, 0.1, 0.1))
    assert source.translate(_finger(pygame.FINGERDOWN, 1, 0.5, 0.5)) == DragStart(256.0, 128.0)
    assert source.translate(_finger(pygame.FINGERMOTION, 0, 0.2, 0.2)) is None


def test_second_finger_does_not_jolt_the_cube(source) -> None:
    cube = WireframeCube(Point3(0, 0, 4), 2)
    ctl = CubeController(cube, Camera(), sensitivity=0.5)
    events = [
        _finger(pygame.FINGERDOWN, 0, 0.25, 0.5),
        _finger(pygame.FINGERDOWN, 1, 0.75, 0.5),
        _finger(pygame.FINGERMOTION, 0, 0.251, 0.5),
        _finger(pygame.FINGERUP, 1, 0.75, 0.5),
    ]
    for event in events:
        translated = source.translate(event)
        if translated is not None:
            ctl.handle(translated)

    # finger 0 moved ~0.5 px, so the cube turned ~0.25 degrees, not ~128
    assert np.allclose(cube.center().as_array(), [0, 0, 4], atol=0.05)
    assert ctl.is_dragging is True
