# adventurers/errors.py - game exception hierarchy
#
# OutOfBounds and NoObjectHere signal engine or loader defects and are fatal.
# PlayerDead is the expected refusal of a move after drowning.
# A blocked move is an outcome, not an error, and has no exception here.


class GameError(Exception):
    """Base class for all game errors."""


class OutOfBounds(GameError):
    def __init__(self, position, height: int, width: int):
        self.position = position
        self.height = height
        self.width = width
        super().__init__(f"Position {position} is outside the {height}x{width} grid")


class NoObjectHere(GameError):
    def __init__(self, position, tile):
        self.position = position
        self.tile = tile
        super().__init__(f"No object to pick up at {position} (tile is {tile!r})")


class PlayerDead(GameError):
    def __init__(self):
        super().__init__("The player is dead; no further moves are accepted")


class MapFormatError(GameError):
    def __init__(self, source, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid map {source}: {reason}")
