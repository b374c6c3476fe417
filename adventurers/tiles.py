# adventurers/tiles.py - tile variants
#
# Every cell holds exactly one of these values. Behaviour is keyed on
# ``kind``; how a tile looks is decided by the renderer alone.

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .constants import GROUND_GRASS, GROUNDS, TERRAIN_WATER


class TileKind(Enum):
    EMPTY = "empty"
    WATER = "water"
    BARRIER = "barrier"
    SIGN = "sign"
    OBJECT = "object"


@dataclass(frozen=True)
class Empty:
    ground: str = GROUND_GRASS
    kind: ClassVar[TileKind] = TileKind.EMPTY

    def __post_init__(self):
        if self.ground not in GROUNDS:
            raise ValueError(f"Unknown ground: {self.ground!r}")


@dataclass(frozen=True)
class Water:
    kind: ClassVar[TileKind] = TileKind.WATER


@dataclass(frozen=True)
class Barrier:
    kind: ClassVar[TileKind] = TileKind.BARRIER


@dataclass(frozen=True)
class Sign:
    message: str
    ground: str = GROUND_GRASS
    kind: ClassVar[TileKind] = TileKind.SIGN


@dataclass(frozen=True)
class Object:
    glyph: str
    item_id: str
    ground: str = GROUND_GRASS
    kind: ClassVar[TileKind] = TileKind.OBJECT

    def __post_init__(self):
        if len(self.glyph) != 1:
            raise ValueError(f"Object glyph must be a single character, got {self.glyph!r}")


Tile = Union[Empty, Water, Barrier, Sign, Object]


def terrain_of(tile: Tile) -> str:
    """Terrain name of a tile as seen by quests ('water', 'sand', ...)."""
    if tile.kind is TileKind.WATER:
        return TERRAIN_WATER
    if tile.kind is TileKind.BARRIER:
        return "barrier"
    return tile.ground
