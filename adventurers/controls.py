# adventurers/controls.py - key -> action mapping

from enum import Enum
from typing import Optional

import readchar

from .geometry import Direction


class Action(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SHOW_INVENTORY = "show_inventory"
    SHOW_QUEST = "show_quest"
    TOGGLE_MESSAGE = "toggle_message"
    RESTART = "restart"
    QUIT = "quit"


MOVE_DIRECTIONS = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}

KEY_MAP = {
    # Standard ANSI
    '\x1b[A': Action.MOVE_UP,
    '\x1b[B': Action.MOVE_DOWN,
    '\x1b[D': Action.MOVE_LEFT,
    '\x1b[C': Action.MOVE_RIGHT,
    # Application cursor keys
    '\x1bOA': Action.MOVE_UP,
    '\x1bOB': Action.MOVE_DOWN,
    '\x1bOD': Action.MOVE_LEFT,
    '\x1bOC': Action.MOVE_RIGHT,
    # readchar constants (platform specific on Windows)
    readchar.key.UP: Action.MOVE_UP,
    readchar.key.DOWN: Action.MOVE_DOWN,
    readchar.key.LEFT: Action.MOVE_LEFT,
    readchar.key.RIGHT: Action.MOVE_RIGHT,
    # WASD
    'w': Action.MOVE_UP,
    'a': Action.MOVE_LEFT,
    's': Action.MOVE_DOWN,
    'd': Action.MOVE_RIGHT,

    'b': Action.SHOW_INVENTORY,
    'i': Action.SHOW_INVENTORY,
    'j': Action.SHOW_QUEST,
    't': Action.TOGGLE_MESSAGE,

    readchar.key.ENTER: Action.RESTART,
    '\r': Action.RESTART,
    '\n': Action.RESTART,

    'q': Action.QUIT,
    # A lone Esc only arrives on Windows; POSIX readkey waits for a sequence
    readchar.key.ESC: Action.QUIT,
}


def action_for_key(key: Optional[str]) -> Optional[Action]:
    """Return the action bound to ``key``, or None for keys the game ignores."""
    if not key:
        return None
    action = KEY_MAP.get(key)
    if action is None and len(key) == 1:
        action = KEY_MAP.get(key.lower())
    return action


def direction_for(action: Action) -> Optional[Direction]:
    return MOVE_DIRECTIONS.get(action)
