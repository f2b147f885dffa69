"""Triangle meshes for the rectangular obstacles."""

from __future__ import annotations

from typing import Optional

from .geometry import Rectangle, Vec2
from .mesh import Mesh, MeshType

RECTANGLE_COLOR = (1.0, 0.0, 0.0, 1.0)


class RectangleNotFoundError(LookupError):
    """Raised when a rectangle to be edited has no vertices in the renderer."""


def _corners(rectangle: Rectangle) -> list[Vec2]:
    return [
        rectangle.lower_left(),
        rectangle.upper_left(),
        rectangle.upper_right(),
        rectangle.lower_right(),
    ]


class RectanglesRenderer:
    """Each rectangle becomes four vertices and two triangles."""

    color = RECTANGLE_COLOR

    def __init__(self) -> None:
        self._vertices: list[Vec2] = []
        self._indices: list[int] = []
        self._mesh = Mesh()

    @property
    def vertices(self) -> tuple[Vec2, ...]:
        return tuple(self._vertices)

    def add_rectangle(self, rectangle: Rectangle) -> None:
        first = len(self._vertices)
        self._vertices.extend(_corners(rectangle))
        self._indices.extend(
            (first, first + 1, first + 2, first + 2, first + 3, first)
        )
        self._mesh.update(self._vertices, self._indices, MeshType.TRIANGLES)

    def edit_rectangle(self, old_rectangle: Rectangle, new_rectangle: Rectangle) -> None:
        """Move the vertices of the last rectangle equal to old_rectangle."""
        index = self.find_rectangle(old_rectangle)
        if index is None:
            raise RectangleNotFoundError("Could not find triangle")
        self._vertices[index : index + 4] = _corners(new_rectangle)
        self._mesh.update_some_vertices(self._vertices, index, 4)

    def find_rectangle(self, rectangle: Rectangle) -> Optional[int]:
        """Index of the first vertex of the last matching rectangle, or None."""
        corners = _corners(rectangle)
        for index in range(len(self._vertices) - 4, -1, -4):
            if self._vertices[index : index + 4] == corners:
                return index
        return None

    def triangles(self) -> list[tuple[Vec2, ...]]:
        return self._mesh.primitives()