# adventurers/events.py - game events and the queue that delivers them

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Type

from .geometry import Position
from .tiles import Tile


class Event:
    """Message passed from the game loop to listeners."""
    pass


@dataclass
class TileEnteredEvent(Event):
    position: Position
    tile: Tile


@dataclass
class ItemPickedUpEvent(Event):
    item_id: str
    position: Position


@dataclass
class MessageEvent(Event):
    """Text for the notice panel"""
    title: str
    text: str


@dataclass
class PlayerDrownedEvent(Event):
    position: Position


def handler_name(event_type: Type[Event]) -> str:
    """CamelCase event class -> handle_snake_case method name."""
    snake_name = re.sub(r'(?<!^)(?=[A-Z])', '_', event_type.__name__).lower()
    return f"handle_{snake_name}"


class EventManager:
    """Queues events and hands them to registered listeners in FIFO order.

    A listener handles ``FooBarEvent`` by defining ``handle_foo_bar_event``.
    """
    def __init__(self):
        self.listeners: Dict[Type[Event], List[Any]] = {}
        self.event_queue: List[Event] = []

    def register(self, event_type: Type[Event], listener: Any):
        if event_type not in self.listeners:
            self.listeners[event_type] = []
        if listener not in self.listeners[event_type]:
            self.listeners[event_type].append(listener)

    def push(self, event: Event):
        self.event_queue.append(event)

    def process_events(self):
        """Deliver every queued event, including ones pushed while processing."""
        while self.event_queue:
            event = self.event_queue.pop(0)
            event_type = type(event)
            name = handler_name(event_type)
            for listener in self.listeners.get(event_type, []):
                handler = getattr(listener, name, None)
                if handler:
                    handler(event)

    def clear(self):
        self.event_queue.clear()
