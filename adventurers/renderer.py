# adventurers/renderer.py - double-buffered ANSI map and status panel

import os
import sys
import unicodedata

from . import config
from .constants import BACKGROUND_MAP, COLOR_MAP, EMPTY_SPACE, PLAYER, SIGN
from .geometry import Position
from .localization import _
from .tiles import TileKind, terrain_of


def char_width(char: str) -> int:
    """Terminal columns taken by a character (2 for CJK wide/full-width)."""
    return 2 if unicodedata.east_asian_width(char) in ('W', 'F') else 1


def tile_cell(tile, is_player: bool = False) -> str:
    """One map cell as an ANSI-coloured character."""
    background = BACKGROUND_MAP.get(terrain_of(tile), "")
    if is_player:
        char = PLAYER
    elif tile.kind is TileKind.SIGN:
        char = SIGN
    elif tile.kind is TileKind.OBJECT:
        char = tile.glyph
    else:
        char = EMPTY_SPACE
    return f"{background}{COLOR_MAP['black']}{char}{COLOR_MAP['reset']}"


class Renderer:
    """
    Double-buffered terminal renderer.
    A full frame is composed in memory and written to the terminal in one go.
    """
    def __init__(self, width=None, height=None, stream=None):
        try:
            ts = os.get_terminal_size()
            detected_width = ts.columns
            detected_height = ts.lines
        except OSError:
            detected_width = 80
            detected_height = 24

        self.width = width if width is not None else detected_width
        self.height = height if height is not None else detected_height
        self.stream = stream if stream is not None else sys.stdout
        self.buffer = [[" " for _ in range(self.width)] for _ in range(self.height)]

    def open(self):
        """Clear the screen and hide the cursor."""
        self.stream.write("\033[H\033[J")
        self.stream.write("\033[?25l")
        self.stream.flush()

    def close(self):
        """Show the cursor and reset colours."""
        self.stream.write("\033[?25h")
        self.stream.write("\033[0m\n")
        self.stream.flush()

    def map_view_size(self):
        """(rows, cols) of the map area; the rest is the status panel."""
        return max(self.height - config.STATUS_HEIGHT, 1), self.width

    def clear_buffer(self):
        self.buffer = [[" " for _ in range(self.width)] for _ in range(self.height)]

    def draw_cell(self, x, y, cell):
        """Store a pre-coloured single-column cell."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.buffer[y][x] = cell

    def draw_text(self, x, y, text, color="white"):
        if 0 <= y < self.height:
            color_code = COLOR_MAP.get(color, COLOR_MAP["white"])
            current_x = x
            for char in text:
                if current_x >= self.width:
                    break
                if current_x >= 0:
                    self.buffer[y][current_x] = f"{color_code}{char}{COLOR_MAP['reset']}"
                    if char_width(char) == 2 and current_x + 1 < self.width:
                        # The wide char already covers the next column
                        self.buffer[y][current_x + 1] = ""
                current_x += char_width(char)

    def compose(self, snapshot):
        """Fill the buffer from a RenderSnapshot."""
        self.clear_buffer()
        view_rows, view_cols = self.map_view_size()
        origin = snapshot.viewport
        tiles = snapshot.tiles
        height, width = len(tiles), len(tiles[0])

        for y in range(view_rows):
            for x in range(view_cols):
                position = Position(origin.row + y, origin.col + x)
                if 0 <= position.row < height and 0 <= position.col < width:
                    tile = tiles[position.row][position.col]
                    self.draw_cell(x, y, tile_cell(tile, position == snapshot.player))

        status_y = view_rows
        oxygen_color = "cyan" if snapshot.oxygen > 3 else "red"
        self.draw_text(0, status_y, f"{_('Oxygen')}: {'█' * snapshot.oxygen:<{config.DROWNING_THRESHOLD}} {snapshot.oxygen:2}", oxygen_color)
        self.draw_text(config.DROWNING_THRESHOLD + 14, status_y,
                       f"{_('Bag')}: {len(snapshot.inventory)}  {_('Position')}: {snapshot.player}")
        if snapshot.quest:
            self.draw_text(0, status_y + 1, f"{_('Quest')}: {snapshot.quest}", "yellow")
        if snapshot.notice:
            color = "white" if snapshot.alive else "red"
            self.draw_text(0, status_y + 2, f" {snapshot.notice.title} ", "invert")
            self.draw_text(0, status_y + 3, snapshot.notice.text, color)
        self.draw_text(0, status_y + 4,
                       f"[←↑↓→/WASD] {_('Move')}  [B] {_('Bag')}  [J] {_('Quest')}  [T] {_('Toggle message')}  [Q] {_('Quit')}",
                       "dark_grey")

    def render(self):
        """Write the buffer to the terminal."""
        self.stream.write("\033[H")
        self.stream.write("\n".join("".join(row) for row in self.buffer))
        self.stream.flush()

    def draw(self, snapshot):
        self.compose(snapshot)
        self.render()
