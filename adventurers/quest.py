# adventurers/quest.py - optional map objectives tracked from game events

import logging
from typing import List, Optional, Tuple

from .events import EventManager, ItemPickedUpEvent, MessageEvent, TileEnteredEvent
from .localization import _
from .tiles import terrain_of


class QuestProgress:
    """Step counter shared by all quests.

    ``step`` is the 1-based step currently being attempted; it becomes None
    once all ``steps`` are done.
    """

    def __init__(self, steps: int):
        if steps < 1:
            raise ValueError("A quest needs at least one step")
        self.steps = steps
        self.step: Optional[int] = 1

    def progress(self) -> Optional[Tuple[int, int]]:
        """(current step, total steps), or None once completed."""
        if self.step is None:
            return None
        return self.step, self.steps

    def next(self) -> bool:
        """Complete the current step. Returns False if already completed."""
        if self.step is None:
            return False
        if self.step < self.steps:
            self.step += 1
        else:
            self.step = None
        return True

    def is_completed(self) -> bool:
        return self.step is None

    def reset(self):
        self.step = 1


class Quest:
    def __init__(self, steps: int):
        self.progress = QuestProgress(steps)

    def on_tile_entered(self, event: TileEnteredEvent):
        pass

    def on_item_picked_up(self, event: ItemPickedUpEvent):
        pass

    def is_completed(self) -> bool:
        return self.progress.is_completed()

    def reset(self):
        self.progress.reset()

    def _progress_suffix(self) -> str:
        current = self.progress.progress()
        if current is None:
            return f"({_('Completed')})"
        step, total = current
        return f"({step - 1}/{total})"


class StepQuest(Quest):
    """Walk on ``steps`` consecutive tiles of one terrain."""

    def __init__(self, terrain: str, steps: int):
        super().__init__(steps)
        self.terrain = terrain

    def on_tile_entered(self, event):
        if self.is_completed():
            return
        if terrain_of(event.tile) == self.terrain:
            self.progress.next()
        else:
            self.progress.reset()

    def __str__(self):
        return f"walk on {self.progress.steps} {self.terrain} tile(s). {self._progress_suffix()}"


class PickupQuest(Quest):
    """Pick up ``count`` items with the given id."""

    def __init__(self, item_id: str, count: int):
        super().__init__(count)
        self.item_id = item_id

    def on_item_picked_up(self, event):
        if self.is_completed():
            return
        if event.item_id == self.item_id:
            self.progress.next()

    def __str__(self):
        return f"pickup {self.progress.steps} {self.item_id}(s). {self._progress_suffix()}"


class CompoundQuest(Quest):
    """Sub-quests that must be finished in order."""

    def __init__(self, sub_quests: List[Quest]):
        super().__init__(len(sub_quests))
        self.sub_quests = sub_quests

    def _current(self) -> Optional[Quest]:
        current = self.progress.progress()
        if current is None:
            return None
        return self.sub_quests[current[0] - 1]

    def on_tile_entered(self, event):
        self._forward("on_tile_entered", event)

    def on_item_picked_up(self, event):
        self._forward("on_item_picked_up", event)

    def _forward(self, method: str, event):
        sub_quest = self._current()
        if sub_quest is None:
            return
        getattr(sub_quest, method)(event)
        if sub_quest.is_completed():
            self.progress.next()

    def reset(self):
        super().reset()
        for sub_quest in self.sub_quests:
            sub_quest.reset()

    def __str__(self):
        current = self.progress.progress()
        if current is None:
            return _("Completed")
        step, total = current
        return f"{step}/{total}: {self.sub_quests[step - 1]}"


class QuestTracker:
    """Event listener that feeds tile and pickup events into a quest."""

    def __init__(self, quest: Quest, event_manager: EventManager):
        self.quest = quest
        self.event_manager = event_manager
        event_manager.register(TileEnteredEvent, self)
        event_manager.register(ItemPickedUpEvent, self)

    def handle_tile_entered_event(self, event: TileEnteredEvent):
        self._update(self.quest.on_tile_entered, event)

    def handle_item_picked_up_event(self, event: ItemPickedUpEvent):
        self._update(self.quest.on_item_picked_up, event)

    def _update(self, handler, event):
        if self.quest.is_completed():
            return
        handler(event)
        if self.quest.is_completed():
            logging.info(f"QuestTracker: quest completed: {self.quest}")
            self.event_manager.push(MessageEvent(_("Quest completed!"), str(self.quest)))

    def describe(self) -> str:
        return str(self.quest)


def build_quest(spec) -> Optional[Quest]:
    """Build a quest from map data: a list of steps, or None for no quest.

    One step becomes that quest; several become a CompoundQuest.
    """
    if not spec:
        return None
    quests = [_build_single(step) for step in spec]
    if len(quests) == 1:
        return quests[0]
    return CompoundQuest(quests)


def _build_single(step: dict) -> Quest:
    quest_type = step.get("type")
    if quest_type == "walk":
        return StepQuest(step["terrain"], int(step["steps"]))
    if quest_type == "pickup":
        return PickupQuest(step["item"], int(step.get("count", 1)))
    raise ValueError(f"Unknown quest type: {quest_type!r}")
