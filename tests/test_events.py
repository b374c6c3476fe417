import unittest
from unittest.mock import MagicMock

from helpers import Position

from adventurers.events import (
    EventManager, ItemPickedUpEvent, MessageEvent, PlayerDrownedEvent, handler_name
)


class TestEventManager(unittest.TestCase):
    def test_handler_name(self):
        self.assertEqual(handler_name(MessageEvent), "handle_message_event")
        self.assertEqual(handler_name(ItemPickedUpEvent), "handle_item_picked_up_event")

    def test_events_delivered_in_order(self):
        manager = EventManager()
        received = []

        class Listener:
            def handle_message_event(self, event):
                received.append(event.text)

        manager.register(MessageEvent, Listener())
        manager.push(MessageEvent("a", "first"))
        manager.push(MessageEvent("b", "second"))
        self.assertEqual(received, [])
        manager.process_events()
        self.assertEqual(received, ["first", "second"])
        self.assertEqual(manager.event_queue, [])

    def test_events_pushed_while_processing_are_delivered(self):
        manager = EventManager()
        received = []

        class Chain:
            def handle_player_drowned_event(self, event):
                manager.push(MessageEvent("dead", "drowned"))

            def handle_message_event(self, event):
                received.append(event.text)

        chain = Chain()
        manager.register(PlayerDrownedEvent, chain)
        manager.register(MessageEvent, chain)
        manager.push(PlayerDrownedEvent(Position(0, 0)))
        manager.process_events()
        self.assertEqual(received, ["drowned"])

    def test_listener_registered_once(self):
        manager = EventManager()
        listener = MagicMock()
        manager.register(MessageEvent, listener)
        manager.register(MessageEvent, listener)
        manager.push(MessageEvent("t", "x"))
        manager.process_events()
        listener.handle_message_event.assert_called_once()

    def test_unhandled_events_are_dropped(self):
        manager = EventManager()
        manager.push(MessageEvent("t", "x"))
        manager.process_events()
        self.assertEqual(manager.event_queue, [])

    def test_clear_drops_pending_events(self):
        manager = EventManager()
        listener = MagicMock()
        manager.register(MessageEvent, listener)
        manager.push(MessageEvent("t", "x"))
        manager.clear()
        manager.process_events()
        listener.handle_message_event.assert_not_called()


if __name__ == '__main__':
    unittest.main()
