from typing import Protocol

from core.wireframe import RenderResult


class DrawingSink(Protocol):
    """Minimal path-based 2D drawing surface."""

    def clear(self, width: float, height: float) -> None: ...  # noqa: D401

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...


def draw_wireframe(
    sink: DrawingSink, result: RenderResult, view_width: float, view_height: float
) -> None:
    """Clear the viewport and stroke one segment per edge in a single path."""
    sink.clear(view_width, view_height)
    sink.begin_path()
    projected = result.projected
    for start, end in result.edges:
        a = projected[start]
        b = projected[end]
        sink.move_to(a.x, a.y)
        sink.line_to(b.x, b.y)
    sink.stroke()
