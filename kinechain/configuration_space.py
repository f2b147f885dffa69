"""The joint-angle configuration space and its obstacle map."""

from __future__ import annotations

from typing import Generic, TypeVar

from .angle import Angle
from .chain import ChainState
from .grid import Grid2D
from .obstacles import ObstaclesManager

T = TypeVar("T")

FREE = 0
COLLISION = 255


class ConfigurationSpace(Generic[T]):
    """A grid over (alpha, beta), each axis covering a full turn."""

    def __init__(self, resolution_alpha: int, resolution_beta: int, fill: T = 0) -> None:
        self._data: Grid2D[T] = Grid2D(resolution_alpha, resolution_beta, fill)

    def __getitem__(self, key: tuple[int, int]) -> T:
        return self._data[key]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        self._data[key] = value

    def indices_to_state(self, alpha_index: int, beta_index: int) -> ChainState:
        full_turn = Angle.from_degrees(360.0)
        return ChainState(
            full_turn / float(self.alpha_resolution()) * float(alpha_index),
            full_turn / float(self.beta_resolution()) * float(beta_index),
        )

    def alpha_resolution(self) -> int:
        return self._data.columns

    def beta_resolution(self) -> int:
        return self._data.rows

    def values(self) -> list[T]:
        """Cells in row-major order (beta rows of alpha columns), shared not copied."""
        return self._data.values()


class ConfigurationSpaceManager:
    """Computes which chain configurations collide with obstacles."""

    def __init__(self, resolution_alpha: int, resolution_beta: int) -> None:
        self.configuration_space: ConfigurationSpace[int] = ConfigurationSpace(
            resolution_alpha, resolution_beta, FREE
        )
        self.distance_map: ConfigurationSpace[float] = ConfigurationSpace(
            resolution_alpha, resolution_beta, 0.0
        )

    def calculate_reachability(
        self, obstacles_manager: ObstaclesManager
    ) -> ConfigurationSpace[int]:
        """Mark each cell COLLISION or FREE and return the updated space."""
        space = self.configuration_space
        if obstacles_manager.number_of_obstacles() == 0:
            space.values()[:] = [FREE] * len(space.values())
            return space

        for alpha_index in range(space.alpha_resolution()):
            for beta_index in range(space.beta_resolution()):
                state = space.indices_to_state(alpha_index, beta_index)
                collides = obstacles_manager.collides_with_rectangles(state)
                space[alpha_index, beta_index] = COLLISION if collides else FREE
        return space