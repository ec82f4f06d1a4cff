"""Geometry core: Point3 and WireframeCube."""

from .point3 import Point3
from .wireframe import CUBE_EDGES, RenderResult, WireframeCube

__all__ = [
    "Point3",
    "WireframeCube",
    "RenderResult",
    "CUBE_EDGES",
]
