"""Indexed vertex meshes of plane points."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from .geometry import Vec2


class MeshType(Enum):
    """How the index list is assembled into primitives."""

    TRIANGLES = "triangles"
    LINES = "lines"
    LINE_STRIP = "line_strip"
    PATCHES = "patches"


_GROUP_SIZES = {
    MeshType.TRIANGLES: 3,
    MeshType.LINES: 2,
    MeshType.PATCHES: 3,
}


class Mesh:
    """Vertices and indices describing a drawable shape."""

    def __init__(self) -> None:
        self._vertices: list[Vec2] = []
        self._indices: list[int] = []
        self.mesh_type = MeshType.TRIANGLES

    @property
    def vertices(self) -> tuple[Vec2, ...]:
        return tuple(self._vertices)

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(self._indices)

    def update(
        self,
        vertices: Iterable[Vec2],
        indices: Iterable[int],
        mesh_type: MeshType = MeshType.TRIANGLES,
    ) -> None:
        """Replace all vertex and index data."""
        new_vertices = list(vertices)
        new_indices = [int(i) for i in indices]
        for index in new_indices:
            if not 0 <= index < len(new_vertices):
                raise IndexError(f"index {index} outside {len(new_vertices)} vertices")
        self._vertices = new_vertices
        self._indices = new_indices
        self.mesh_type = MeshType(mesh_type)

    def update_some_vertices(
        self, vertices: Sequence[Vec2], starting_index: int, count: int
    ) -> None:
        """Copy vertices[starting_index:starting_index+count] into the mesh."""
        stop = starting_index + count
        if starting_index < 0 or count < 0:
            raise IndexError("starting index and count must not be negative")
        if stop > len(self._vertices) or stop > len(vertices):
            raise IndexError("vertex range outside the mesh")
        self._vertices[starting_index:stop] = vertices[starting_index:stop]

    def elements_count(self) -> int:
        return len(self._indices)

    def primitives(self) -> list[tuple[Vec2, ...]]:
        """The primitives the indices describe, as tuples of vertices."""
        points = [self._vertices[i] for i in self._indices]
        if self.mesh_type is MeshType.LINE_STRIP:
            return list(zip(points, points[1:]))
        size = _GROUP_SIZES[self.mesh_type]
        whole = len(points) - len(points) % size
        return [tuple(points[i : i + size]) for i in range(0, whole, size)]