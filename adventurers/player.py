# adventurers/player.py

from typing import List

from .config import DROWNING_THRESHOLD
from .geometry import Position


class PlayerState:
    """Position, bag and drowning counter of the player.

    Only InteractionEngine calls the mutators below; none of them check
    bounds or passability.
    """

    def __init__(self, position: Position, drowning_threshold: int = DROWNING_THRESHOLD):
        self.position = position
        self.inventory: List[str] = []
        self.water_streak = 0
        self.alive = True
        self.drowning_threshold = drowning_threshold

    @property
    def oxygen(self) -> int:
        """Water steps left before drowning."""
        return max(self.drowning_threshold - self.water_streak, 0)

    def move_to(self, position: Position):
        self.position = position

    def push_item(self, item_id: str):
        self.inventory.append(item_id)

    def tick_water(self, is_on_water: bool) -> bool:
        """Advance or reset the water streak. Returns True if this tick drowned the player."""
        if not is_on_water:
            self.water_streak = 0
            return False
        self.water_streak += 1
        if self.alive and self.water_streak >= self.drowning_threshold:
            self.alive = False
            return True
        return False

    def __repr__(self):
        return (f"PlayerState(position={self.position}, inventory={self.inventory}, "
                f"water_streak={self.water_streak}, alive={self.alive})")
