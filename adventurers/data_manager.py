# adventurers/data_manager.py - map file loading

import json
import logging
import os
from typing import Dict, List, Optional

from . import config
from .constants import LAYOUT_BARRIER, LAYOUT_LEGEND, LAYOUT_WATER
from .errors import MapFormatError
from .geometry import Position
from .map import TileGrid
from .quest import Quest, build_quest
from .tiles import Barrier, Empty, Object, Sign, Tile, TileKind, Water


class MapDefinition:
    """A parsed map file. Builds a fresh grid and quest for every run."""
    def __init__(self, name: str, rows: List[List[Tile]], start: Position, quest_spec=None, source=None):
        self.name = name
        self.rows = rows
        self.start = start
        self.quest_spec = quest_spec or []
        self.source = source

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    def build_grid(self):
        return TileGrid.from_rows(self.rows)

    def build_quest(self) -> Optional[Quest]:
        return build_quest(self.quest_spec)


def _parse_key(key: str, source) -> Position:
    """'row,col' -> Position"""
    try:
        row, col = (int(part) for part in key.split(','))
    except ValueError:
        raise MapFormatError(source, f"bad cell key {key!r}, expected 'row,col'")
    return Position(row, col)


def _parse_layout(layout, source) -> List[List[Tile]]:
    if not layout or not isinstance(layout, list):
        raise MapFormatError(source, "'layout' must be a non-empty list of strings")
    if not all(isinstance(line, str) for line in layout):
        raise MapFormatError(source, "layout rows must be strings")
    width = len(layout[0])
    if width == 0:
        raise MapFormatError(source, "layout rows must not be empty")

    rows = []
    for r, line in enumerate(layout):
        if len(line) != width:
            raise MapFormatError(source, f"row {r} has width {len(line)}, expected {width}")
        row = []
        for c, ch in enumerate(line):
            if ch == LAYOUT_WATER:
                row.append(Water())
            elif ch == LAYOUT_BARRIER:
                row.append(Barrier())
            elif ch in LAYOUT_LEGEND:
                row.append(Empty(LAYOUT_LEGEND[ch]))
            else:
                raise MapFormatError(source, f"unknown layout character {ch!r} at ({r}, {c})")
        rows.append(row)
    return rows


def _ground_cell(rows, position: Position, what: str, source) -> Tile:
    """Return the Empty tile a sign or object will sit on."""
    if not (0 <= position.row < len(rows) and 0 <= position.col < len(rows[0])):
        raise MapFormatError(source, f"{what} at {position} is outside the layout")
    tile = rows[position.row][position.col]
    if tile.kind is not TileKind.EMPTY:
        raise MapFormatError(source, f"{what} at {position} must sit on ground, not {tile.kind.value}")
    return tile


def parse_map(data: Dict, source="<memory>") -> MapDefinition:
    """Turn decoded map JSON into a MapDefinition, validating it."""
    if not isinstance(data, dict):
        raise MapFormatError(source, "top level must be an object")

    rows = _parse_layout(data.get("layout"), source)
    for section in ("signs", "objects"):
        if not isinstance(data.get(section, {}), dict):
            raise MapFormatError(source, f"'{section}' must be an object keyed by 'row,col'")

    for key, message in data.get("signs", {}).items():
        position = _parse_key(key, source)
        ground = _ground_cell(rows, position, "sign", source)
        rows[position.row][position.col] = Sign(str(message), ground.ground)

    for key, obj in data.get("objects", {}).items():
        position = _parse_key(key, source)
        ground = _ground_cell(rows, position, "object", source)
        try:
            rows[position.row][position.col] = Object(obj["glyph"], obj["item"], ground.ground)
        except (KeyError, TypeError, ValueError) as e:
            raise MapFormatError(source, f"bad object at {position}: {e}")

    start = data.get("start")
    if not isinstance(start, list) or len(start) != 2:
        raise MapFormatError(source, "'start' must be [row, col]")
    try:
        start_pos = Position(int(start[0]), int(start[1]))
    except (TypeError, ValueError):
        raise MapFormatError(source, f"bad start {start!r}")
    if not (0 <= start_pos.row < len(rows) and 0 <= start_pos.col < len(rows[0])):
        raise MapFormatError(source, f"start {start_pos} is outside the layout")
    if rows[start_pos.row][start_pos.col].kind is TileKind.BARRIER:
        raise MapFormatError(source, f"start {start_pos} is on a barrier")

    quest_spec = data.get("quest", [])
    try:
        build_quest(quest_spec)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MapFormatError(source, f"bad quest: {e}")

    name = data.get("name") or os.path.splitext(os.path.basename(str(source)))[0]
    definition = MapDefinition(name, rows, start_pos, quest_spec, source)
    logging.debug(f"parse_map: '{name}' {definition.height}x{definition.width}, start {start_pos}")
    return definition


def resolve_map_path(name: Optional[str] = None) -> str:
    """A bare map name is looked up in MAPS_DIR; anything else is a path."""
    name = name or config.DEFAULT_MAP
    if os.path.exists(name):
        return name
    candidate = name if name.endswith(".json") else f"{name}.json"
    return os.path.join(config.MAPS_DIR, candidate)


def load_map(name: Optional[str] = None) -> MapDefinition:
    """Load and validate a map JSON file."""
    file_path = resolve_map_path(name)
    if not os.path.exists(file_path):
        raise MapFormatError(file_path, "file not found")
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MapFormatError(file_path, f"invalid JSON: {e}")
    except UnicodeDecodeError as e:
        raise MapFormatError(file_path, f"not UTF-8: {e}")
    logging.info(f"load_map: loading {file_path}")
    return parse_map(data, file_path)


def list_maps() -> List[str]:
    """Names of the bundled maps."""
    if not os.path.isdir(config.MAPS_DIR):
        return []
    return sorted(f[:-len('.json')] for f in os.listdir(config.MAPS_DIR) if f.endswith('.json'))
