"""Wireframe cube: eight vertices, twelve fixed edges.

Vertex order is binary counting over the back face (z = -size/2) then the
front face (z = +size/2), each face counter-clockwise, so back vertex ``i``
pairs with front vertex ``i + 4``::

    3 ----- 2        7 ----- 6
    |  back |        | front |
    0 ----- 1        4 ----- 5

Rotations act about the world origin, not the cube's centre. A cube built
off-origin therefore orbits the origin when rotated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

from core.point3 import HasXYZ, Point3

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]

CUBE_EDGES: Tuple[Edge, ...] = (
    # back face
    (0, 1), (1, 2), (2, 3), (3, 0),
    # front face
    (4, 5), (5, 6), (6, 7), (7, 4),
    # back -> front
    (0, 4), (1, 5), (2, 6), (3, 7),
)

# Corner signs in vertex order.
_CORNER_SIGNS: Tuple[Tuple[int, int, int], ...] = (
    (-1, -1, -1),
    (+1, -1, -1),
    (+1, +1, -1),
    (-1, +1, -1),
    (-1, -1, +1),
    (+1, -1, +1),
    (+1, +1, +1),
    (-1, +1, +1),
)


@dataclass(frozen=True)
class RenderResult:
    """Projected vertices (index-aligned with the cube) plus its edge list."""

    projected: Tuple[Point3, ...]
    edges: Tuple[Edge, ...]

    def __iter__(self) -> Iterator[object]:
        yield self.projected
        yield self.edges

    def is_finite(self) -> bool:
        return all(p.is_finite() for p in self.projected)


class WireframeCube:
    def __init__(self, center: Point3, size: float):
        half = size / 2
        self.vertices: Tuple[Point3, ...] = tuple(
            Point3(center.x + sx * half, center.y + sy * half, center.z + sz * half)
            for sx, sy, sz in _CORNER_SIGNS
        )
        self._edges: Tuple[Edge, ...] = CUBE_EDGES
        logger.debug("Cube built at %s with size %s", center, size)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    # Each rotation swaps in a whole new vertex tuple.
    def rotate_around_x(self, angle: float) -> None:
        self.vertices = tuple(v.rotate_around_x(angle) for v in self.vertices)

    def rotate_around_y(self, angle: float) -> None:
        self.vertices = tuple(v.rotate_around_y(angle) for v in self.vertices)

    def rotate_around_z(self, angle: float) -> None:
        self.vertices = tuple(v.rotate_around_z(angle) for v in self.vertices)

    def center(self) -> Point3:
        arr = np.array([v.as_array() for v in self.vertices])
        cx, cy, cz = arr.mean(axis=0)
        return Point3(float(cx), float(cy), float(cz))

    def render(
        self,
        view_width: float,
        view_height: float,
        field_of_view: float,
        view_distance: float,
        camera: HasXYZ,
    ) -> RenderResult:
        projected = tuple(
            v.project(view_width, view_height, field_of_view, view_distance, camera)
            for v in self.vertices
        )
        return RenderResult(projected=projected, edges=self._edges)
