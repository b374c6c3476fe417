import unittest

from helpers import Position

from adventurers.player import PlayerState


class TestPlayerState(unittest.TestCase):
    def setUp(self):
        self.player = PlayerState(Position(0, 0))

    def test_initial_state(self):
        self.assertTrue(self.player.alive)
        self.assertEqual(self.player.water_streak, 0)
        self.assertEqual(self.player.inventory, [])
        self.assertEqual(self.player.oxygen, 10)

    def test_move_to_does_not_check_anything(self):
        self.player.move_to(Position(-5, 99))
        self.assertEqual(self.player.position, Position(-5, 99))

    def test_push_item_keeps_order_and_duplicates(self):
        for item in ("coin", "key", "coin"):
            self.player.push_item(item)
        self.assertEqual(self.player.inventory, ["coin", "key", "coin"])

    def test_tick_water_counts_and_resets(self):
        for _ in range(4):
            self.player.tick_water(True)
        self.assertEqual(self.player.water_streak, 4)
        self.assertEqual(self.player.oxygen, 6)
        self.player.tick_water(False)
        self.assertEqual(self.player.water_streak, 0)
        self.assertTrue(self.player.alive)

    def test_drowns_exactly_at_threshold(self):
        for _ in range(9):
            self.assertFalse(self.player.tick_water(True))
        self.assertTrue(self.player.alive)
        self.assertTrue(self.player.tick_water(True))
        self.assertFalse(self.player.alive)
        self.assertEqual(self.player.oxygen, 0)

    def test_death_is_permanent(self):
        for _ in range(10):
            self.player.tick_water(True)
        self.player.tick_water(False)
        self.assertFalse(self.player.alive)

    def test_custom_threshold(self):
        player = PlayerState(Position(0, 0), drowning_threshold=2)
        player.tick_water(True)
        self.assertTrue(player.tick_water(True))


if __name__ == '__main__':
    unittest.main()
