# adventurers/geometry.py - grid coordinates and movement directions

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """The four cardinal moves as (row, col) deltas."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def __add__(self, direction: Direction) -> "Position":
        if not isinstance(direction, Direction):
            return NotImplemented
        return Position(self.row + direction.d_row, self.col + direction.d_col)

    def __str__(self):
        return f"({self.row}, {self.col})"
