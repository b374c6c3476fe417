import io
import unittest

from helpers import Position

from adventurers.constants import BACKGROUND_MAP, PLAYER, SIGN
from adventurers.controls import Action
from adventurers.data_manager import parse_map
from adventurers.game import Game
from adventurers.renderer import Renderer, char_width, tile_cell
from adventurers.tiles import Barrier, Empty, Object, Sign, Water


def strip_row(row):
    """Visible characters of a buffer row, without colour codes."""
    text = ""
    for cell in row:
        if not cell:
            continue
        while cell.startswith("\033["):
            cell = cell[cell.index("m") + 1:]
        text += cell[:1] if cell else ""
    return text


class TestTileCell(unittest.TestCase):
    def test_glyphs(self):
        self.assertIn(SIGN, tile_cell(Sign("hi")))
        self.assertIn("$", tile_cell(Object('$', "coin")))
        self.assertIn(PLAYER, tile_cell(Water(), is_player=True))

    def test_background_colours(self):
        self.assertIn(BACKGROUND_MAP["water"], tile_cell(Water()))
        self.assertIn(BACKGROUND_MAP["sand"], tile_cell(Empty("sand")))
        self.assertIn(BACKGROUND_MAP["barrier"], tile_cell(Barrier()))

    def test_char_width(self):
        self.assertEqual(char_width("a"), 1)
        self.assertEqual(char_width("가"), 2)


class TestRenderer(unittest.TestCase):
    def setUp(self):
        self.stream = io.StringIO()
        self.renderer = Renderer(width=60, height=10, stream=self.stream)
        self.game = Game(parse_map({
            "start": [0, 0],
            "layout": ["...", "..."],
            "signs": {"0,1": "Read me"},
            "objects": {"1,1": {"glyph": "$", "item": "coin"}},
        }, "inline"))
        self.game.set_view_size(*self.renderer.map_view_size())

    def test_map_view_leaves_room_for_status(self):
        self.assertEqual(self.renderer.map_view_size(), (5, 60))

    def test_compose_draws_player_and_tiles(self):
        self.renderer.compose(self.game.snapshot())
        origin = self.game.viewport.origin
        y, x = -origin.row, -origin.col
        self.assertIn(PLAYER, self.renderer.buffer[y][x])
        self.assertIn(SIGN, self.renderer.buffer[y][x + 1])
        self.assertIn("$", self.renderer.buffer[y + 1][x + 1])

    def test_status_and_notice(self):
        self.game.handle_action(Action.MOVE_RIGHT)
        self.renderer.compose(self.game.snapshot())
        status = strip_row(self.renderer.buffer[5])
        self.assertTrue(status.startswith("Oxygen:"))
        self.assertIn("Position: (0, 1)", status)
        self.assertIn("You saw a message on the sign", strip_row(self.renderer.buffer[7]))
        self.assertEqual(strip_row(self.renderer.buffer[8]).strip(), "Read me")

    def test_draw_text_clips(self):
        self.renderer.draw_text(58, 0, "abcdef")
        self.assertEqual(strip_row(self.renderer.buffer[0])[-2:], "ab")

    def test_render_writes_frame(self):
        self.renderer.draw(self.game.snapshot())
        output = self.stream.getvalue()
        self.assertTrue(output.startswith("\033[H"))
        self.assertIn(PLAYER, output)

    def test_open_close_cursor(self):
        self.renderer.open()
        self.renderer.close()
        output = self.stream.getvalue()
        self.assertIn("\033[?25l", output)
        self.assertIn("\033[?25h", output)


if __name__ == '__main__':
    unittest.main()
