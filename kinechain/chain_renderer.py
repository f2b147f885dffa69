"""Drawable line strips for the reachable chain configurations."""

from __future__ import annotations

from typing import NamedTuple

from .chain import (
    ChainParameters,
    ChainState,
    KinematicChain,
    NoPossibleChainStates,
    OnePossibleChainState,
    PossibleChainStates,
    TwoPossibleChainStates,
)
from .geometry import Vec2
from .mesh import Mesh, MeshType

Color = tuple[float, float, float, float]

FIRST_CONFIGURATION_COLOR: Color = (0.0, 0.0, 1.0, 1.0)
SECOND_CONFIGURATION_COLOR: Color = (0.5, 0.5, 0.5, 1.0)


class ChainDrawable(NamedTuple):
    """A coloured polyline: base, joint, end effector."""

    color: Color
    points: tuple[Vec2, ...]


class ChainRenderer:
    """Keeps up to two chain configurations ready for drawing."""

    def __init__(self) -> None:
        self.parameters = ChainParameters()
        self._first = Mesh()
        self._second = Mesh()
        self._first_valid = True
        self._second_valid = True

    def update(self, states: PossibleChainStates) -> None:
        """Rebuild the meshes from the given possible states."""
        match states:
            case NoPossibleChainStates():
                self._first_valid = False
                self._second_valid = False
            case OnePossibleChainState(state=state):
                self._first_valid = True
                self._second_valid = False
                self._update_mesh(self._first, state)
            case TwoPossibleChainStates(state1=first, state2=second):
                self._first_valid = True
                self._second_valid = True
                self._update_mesh(self._first, first)
                self._update_mesh(self._second, second)
            case _:
                raise TypeError(f"unsupported chain states: {states!r}")

    def drawables(self) -> list[ChainDrawable]:
        """Valid configurations in drawing order: the second below the first."""
        layers = (
            (self._second_valid, self._second, SECOND_CONFIGURATION_COLOR),
            (self._first_valid, self._first, FIRST_CONFIGURATION_COLOR),
        )
        return [
            ChainDrawable(color, self._points(mesh))
            for valid, mesh, color in layers
            if valid and mesh.elements_count() > 0
        ]

    def _update_mesh(self, mesh: Mesh, state: ChainState) -> None:
        chain = KinematicChain(self.parameters, state)
        mesh.update([chain.base, chain.joint, chain.end], [0, 1, 2], MeshType.LINE_STRIP)

    @staticmethod
    def _points(mesh: Mesh) -> tuple[Vec2, ...]:
        vertices = mesh.vertices
        return tuple(vertices[i] for i in mesh.indices)