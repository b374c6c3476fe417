# tests/helpers.py - small grids for tests

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from adventurers.engine import InteractionEngine
from adventurers.geometry import Position
from adventurers.map import TileGrid
from adventurers.player import PlayerState
from adventurers.tiles import Barrier, Empty, Water


def grid_from(layout, extras=None):
    """'.' empty, '~' water, '#' barrier; extras maps (row, col) -> Tile."""
    legend = {'.': Empty(), '~': Water(), '#': Barrier()}
    rows = [[legend[ch] for ch in line] for line in layout]
    for (row, col), tile in (extras or {}).items():
        rows[row][col] = tile
    return TileGrid.from_rows(rows)


def make_engine(layout, start, extras=None):
    grid = grid_from(layout, extras)
    player = PlayerState(Position(*start))
    return InteractionEngine(grid, player), grid, player
