"""World package: re-export the cube scene for simpler imports.

    from world import CubeScene
"""

from .cubescene import CubeScene

__all__ = [
    "CubeScene",
]
