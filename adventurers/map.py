# adventurers/map.py

import logging
from typing import List, Sequence, Tuple

from .errors import NoObjectHere, OutOfBounds
from .geometry import Position
from .tiles import Empty, Tile, TileKind


class TileGrid:
    """A fixed-size rectangular grid of tiles, indexed by (row, col).

    The grid never grows or shrinks after loading. The only change it allows
    is ``consume_object_at``, which turns an Object into Empty ground once.
    """

    __slots__ = ("_height", "_width", "_tiles")

    def __init__(self, height: int, width: int, fill: Tile = None):
        if height <= 0 or width <= 0:
            raise ValueError("TileGrid dimensions must be positive")
        fill = fill if fill is not None else Empty()
        self._height = height
        self._width = width
        self._tiles: List[List[Tile]] = [[fill for _ in range(width)] for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> "TileGrid":
        """Build a grid from fully populated rows of equal length."""
        if not rows:
            raise ValueError("rows must not be empty")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")
        grid = cls(len(rows), width)
        grid._tiles = [list(row) for row in rows]
        return grid

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.row < self._height and 0 <= position.col < self._width

    def tile_at(self, position: Position) -> Tile:
        if not self.in_bounds(position):
            raise OutOfBounds(position, self._height, self._width)
        return self._tiles[position.row][position.col]

    def consume_object_at(self, position: Position) -> str:
        """Replace the Object at ``position`` with its ground and return the item id.

        Raises NoObjectHere if the cell does not currently hold an Object, so
        a second pickup at the same place fails.
        """
        tile = self.tile_at(position)
        if tile.kind is not TileKind.OBJECT:
            raise NoObjectHere(position, tile)
        self._tiles[position.row][position.col] = Empty(tile.ground)
        logging.debug(f"TileGrid: object '{tile.item_id}' consumed at {position}")
        return tile.item_id

    def view(self) -> Tuple[Tuple[Tile, ...], ...]:
        """Read-only copy of all rows for rendering."""
        return tuple(tuple(row) for row in self._tiles)

    def __repr__(self):
        return f"TileGrid(height={self._height}, width={self._width})"
