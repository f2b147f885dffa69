"""Colour image of the configuration space collision map."""

from __future__ import annotations

from .configuration_space import ConfigurationSpace
from .grid import Grid2D

RGB = tuple[float, float, float]

FREE_COLOR: RGB = (0.0, 0.0, 0.0)
COLLISION_COLOR: RGB = (1.0, 0.0, 0.0)


class ReachabilityRenderer:
    """Turns a configuration space into an RGB image, alpha across, beta down."""

    def __init__(self, resolution_alpha: int = 360, resolution_beta: int = 360) -> None:
        self._image: Grid2D[RGB] = Grid2D(resolution_alpha, resolution_beta, FREE_COLOR)

    @property
    def width(self) -> int:
        return self._image.columns

    @property
    def height(self) -> int:
        return self._image.rows

    def update(self, configuration_space: ConfigurationSpace[int]) -> None:
        """Paint colliding cells red and free cells black."""
        columns = configuration_space.alpha_resolution()
        rows = configuration_space.beta_resolution()
        if (columns, rows) != (self._image.columns, self._image.rows):
            self._image = Grid2D(columns, rows, FREE_COLOR)
        for alpha_index in range(columns):
            for beta_index in range(rows):
                occupied = configuration_space[alpha_index, beta_index] != 0
                self._image[alpha_index, beta_index] = (
                    COLLISION_COLOR if occupied else FREE_COLOR
                )

    def color_at(self, alpha_index: int, beta_index: int) -> RGB:
        return self._image[alpha_index, beta_index]

    def rows(self) -> list[list[RGB]]:
        """Image rows, one per beta index, each ordered by alpha index."""
        data = self._image.values()
        width = self._image.columns
        return [data[start : start + width] for start in range(0, len(data), width)] if width else [
            [] for _ in range(self._image.rows)
        ]