"""A fixed-size two-dimensional grid stored row by row."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Grid2D(Generic[T]):
    """Columns x rows cells, addressed as grid[column, row]."""

    __slots__ = ("columns", "rows", "_data")

    def __init__(self, columns: int, rows: int, fill: T = 0) -> None:
        if columns < 0 or rows < 0:
            raise ValueError("grid dimensions must not be negative")
        self.columns = columns
        self.rows = rows
        self._data: list[T] = [fill] * (columns * rows)

    def _offset(self, key: tuple[int, int]) -> int:
        column, row = key
        if not (0 <= column < self.columns and 0 <= row < self.rows):
            raise IndexError(
                f"cell ({column}, {row}) outside {self.columns}x{self.rows} grid"
            )
        return self.columns * row + column

    def __getitem__(self, key: tuple[int, int]) -> T:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        self._data[self._offset(key)] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def values(self) -> list[T]:
        """The underlying row-major cell list (shared, not copied)."""
        return self._data

    def fill(self, value: T) -> None:
        self._data[:] = [value] * len(self._data)