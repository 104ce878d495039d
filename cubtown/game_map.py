"""The tile grid of a level."""

from __future__ import annotations

from typing import Iterable

from .definitions import MAP_FLOOR, MAP_VOID


class GameMap:
    """A mutable grid of map characters whose rows may differ in length."""

    def __init__(self, rows: Iterable[str]):
        self._rows = [list(row) for row in rows]

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self._rows), default=0)

    @property
    def rows(self) -> list[str]:
        """The grid as a list of strings."""
        return ["".join(row) for row in self._rows]

    def is_outside(self, x: int, y: int) -> bool:
        """Whether (x, y) lies outside the stored rows."""
        return x < 0 or y < 0 or y >= len(self._rows) or x >= len(self._rows[y])

    def is_floor(self, x: int, y: int) -> bool:
        return not self.is_outside(x, y) and self._rows[y][x] == MAP_FLOOR

    def is_wall(self, x: int, y: int) -> bool:
        """Any cell inside the grid that is not floor blocks movement."""
        return not self.is_outside(x, y) and self._rows[y][x] != MAP_FLOOR

    def is_void(self, x: int, y: int) -> bool:
        return self.is_outside(x, y) or self._rows[y][x] == MAP_VOID

    def get_cell(self, x: int, y: int) -> str | None:
        """The character at (x, y), or None outside the grid."""
        if self.is_outside(x, y):
            return None
        return self._rows[y][x]

    def set_cell(self, x: int, y: int, value: str) -> None:
        if self.is_outside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        if len(value) != 1:
            raise ValueError("a map cell holds exactly one character")
        self._rows[y][x] = value