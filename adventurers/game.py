# adventurers/game.py - one run of the game: input -> engine -> events -> snapshot

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from . import config
from .controls import Action, action_for_key, direction_for
from .engine import InteractionEngine, MoveOutcome
from .errors import GameError, PlayerDead
from .events import (
    EventManager, ItemPickedUpEvent, MessageEvent, PlayerDrownedEvent, TileEnteredEvent
)
from .geometry import Position
from .localization import _
from .player import PlayerState
from .quest import QuestTracker
from .tiles import Tile


@dataclass(frozen=True)
class Notice:
    title: str
    text: str


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything the renderer may read between steps."""
    tiles: Tuple[Tuple[Tile, ...], ...]
    player: Position
    inventory: Tuple[str, ...]
    water_streak: int
    oxygen: int
    alive: bool
    notice: Optional[Notice]
    quest: Optional[str]
    viewport: Position


class Viewport:
    """Top-left map cell currently shown on screen."""

    def __init__(self, padding: int = config.VIEW_PADDING):
        self.padding = padding
        self.origin = Position(0, 0)

    def follow(self, position: Position, height: int, width: int) -> Position:
        """Scroll until ``position`` is at least ``padding`` cells from every edge."""
        row, col = self.origin.row, self.origin.col
        pad_rows = min(self.padding, max((height - 1) // 2, 0))
        pad_cols = min(self.padding, max((width - 1) // 2, 0))

        if position.row - row < pad_rows:
            row = position.row - pad_rows
        elif row + height - 1 - position.row < pad_rows:
            row = position.row - height + 1 + pad_rows
        if position.col - col < pad_cols:
            col = position.col - pad_cols
        elif col + width - 1 - position.col < pad_cols:
            col = position.col - width + 1 + pad_cols

        self.origin = Position(row, col)
        return self.origin


class Game:
    """Owns the grid, the player and the engine for one map.

    ``handle_action`` processes exactly one input to completion; the caller
    renders ``snapshot()`` afterwards.
    """

    def __init__(self, map_definition):
        self.map_definition = map_definition
        self.viewport = Viewport()
        self.view_size = (map_definition.height, map_definition.width)
        self.is_running = False
        self._start_run()

    def _start_run(self):
        definition = self.map_definition
        self.grid = definition.build_grid()
        self.player = PlayerState(definition.start)
        self.engine = InteractionEngine(self.grid, self.player)
        self.event_manager = EventManager()
        self.event_manager.register(MessageEvent, self)
        self.event_manager.register(PlayerDrownedEvent, self)

        quest = definition.build_quest()
        self.quest_tracker = QuestTracker(quest, self.event_manager) if quest else None

        self.notice: Optional[Notice] = None
        self.show_notice = True
        self.viewport.follow(self.player.position, *self.view_size)
        logging.info(f"Game: run started on '{definition.name}' at {definition.start}")

    @property
    def game_over(self) -> bool:
        return not self.player.alive

    # --- event handlers ---

    def handle_message_event(self, event: MessageEvent):
        self.notice = Notice(event.title, event.text)
        self.show_notice = True

    def handle_player_drowned_event(self, event: PlayerDrownedEvent):
        self.notice = Notice(_("You died"), _("You drowned, press Enter to restart."))
        self.show_notice = True

    # --- input ---

    def handle_key(self, key: Optional[str]) -> bool:
        action = action_for_key(key)
        if action is None:
            logging.debug(f"Game: ignored key {key!r}")
            return True
        return self.handle_action(action)

    def handle_action(self, action: Action) -> bool:
        """Apply one action. Returns False when the game should stop."""
        if action is Action.QUIT:
            logging.info("Game: quit requested")
            return False

        if action is Action.RESTART:
            if self.game_over:
                logging.info("Game: restarting after death")
                self._start_run()
            return True

        if action is Action.TOGGLE_MESSAGE:
            self.show_notice = not self.show_notice
            return True

        if action is Action.SHOW_INVENTORY:
            text = ", ".join(self.player.inventory) if self.player.inventory else _("Your bag is empty.")
            self._set_notice(_("Your bag has"), text)
            return True

        if action is Action.SHOW_QUEST:
            text = self.quest_tracker.describe() if self.quest_tracker else _("No quest on this map.")
            self._set_notice(_("Quest"), text)
            return True

        direction = direction_for(action)
        if direction is None or self.game_over:
            return True

        try:
            outcome = self.engine.attempt_move(direction)
        except PlayerDead:
            return True
        except GameError:
            logging.exception(f"Game: fatal error while moving {direction.name}")
            raise

        self._publish(outcome)
        self.viewport.follow(self.player.position, *self.view_size)
        return True

    def _set_notice(self, title: str, text: str):
        self.notice = Notice(title, text)
        self.show_notice = True

    def _publish(self, outcome: MoveOutcome):
        """Turn an engine outcome into events and deliver them."""
        if outcome.blocked:
            return
        push = self.event_manager.push
        push(TileEnteredEvent(outcome.position, self.grid.tile_at(outcome.position)))
        if outcome.picked_up is not None:
            push(ItemPickedUpEvent(outcome.picked_up, outcome.position))
            push(MessageEvent(_("Pick up an object"), _("You pick up '{item}'").format(item=outcome.picked_up)))
        if outcome.message is not None:
            push(MessageEvent(_("You saw a message on the sign"), outcome.message))
        self.event_manager.process_events()
        # Death goes last so its notice is the one left on screen
        if outcome.drowned:
            push(PlayerDrownedEvent(outcome.position))
            self.event_manager.process_events()

    # --- rendering ---

    def set_view_size(self, height: int, width: int):
        self.view_size = (max(height, 1), max(width, 1))
        self.viewport.follow(self.player.position, *self.view_size)

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(
            tiles=self.grid.view(),
            player=self.player.position,
            inventory=tuple(self.player.inventory),
            water_streak=self.player.water_streak,
            oxygen=self.player.oxygen,
            alive=self.player.alive,
            notice=self.notice if self.show_notice else None,
            quest=self.quest_tracker.describe() if self.quest_tracker else None,
            viewport=self.viewport.origin,
        )

    def run(self, ui, renderer):
        """Blocking loop: read a key, apply it, redraw, until quit."""
        self.is_running = True
        self.set_view_size(*renderer.map_view_size())
        renderer.draw(self.snapshot())
        while self.is_running:
            key = ui.get_key_input()
            self.is_running = self.handle_key(key)
            if self.is_running:
                renderer.draw(self.snapshot())
