# adventurers/engine.py - the movement and interaction rules

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import PlayerDead
from .geometry import Direction, Position
from .map import TileGrid
from .player import PlayerState
from .tiles import TileKind


class MoveStatus(Enum):
    OK = "ok"
    BLOCKED = "blocked"
    DROWNED = "drowned"


@dataclass(frozen=True)
class MoveOutcome:
    """What happened on one move: where the player ended up plus any side effects."""
    status: MoveStatus
    position: Position
    picked_up: Optional[str] = None
    message: Optional[str] = None

    @property
    def blocked(self) -> bool:
        return self.status is MoveStatus.BLOCKED

    @property
    def drowned(self) -> bool:
        return self.status is MoveStatus.DROWNED


class InteractionEngine:
    """Applies player intents to the grid and the player state.

    This is the only code that mutates either of them. Each call runs to
    completion before the next one starts.
    """

    def __init__(self, grid: TileGrid, player: PlayerState):
        self.grid = grid
        self.player = player

    def attempt_move(self, direction: Direction) -> MoveOutcome:
        player = self.player
        if not player.alive:
            raise PlayerDead()

        target = player.position + direction
        if not self.grid.in_bounds(target):
            logging.debug(f"InteractionEngine: move {direction.name} to {target} blocked by map edge")
            return MoveOutcome(MoveStatus.BLOCKED, player.position)

        tile = self.grid.tile_at(target)
        if tile.kind is TileKind.BARRIER:
            logging.debug(f"InteractionEngine: move {direction.name} to {target} blocked by barrier")
            return MoveOutcome(MoveStatus.BLOCKED, player.position)

        player.move_to(target)
        picked_up = None
        message = None

        if tile.kind is TileKind.OBJECT:
            picked_up = self.grid.consume_object_at(target)
            player.push_item(picked_up)
            logging.debug(f"InteractionEngine: picked up '{picked_up}' at {target}")
        elif tile.kind is TileKind.SIGN:
            message = tile.message

        status = MoveStatus.OK
        if player.tick_water(tile.kind is TileKind.WATER):
            status = MoveStatus.DROWNED
            logging.info(f"InteractionEngine: player drowned at {target} after {player.water_streak} water steps")
        else:
            logging.debug(f"InteractionEngine: moved to {target} (water streak {player.water_streak})")

        return MoveOutcome(status, target, picked_up=picked_up, message=message)
