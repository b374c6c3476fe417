# adventurers/ui.py - console screens and blocking key input

import shutil
import sys

import readchar

from .constants import COLOR_MAP
from .localization import _


class ConsoleUI:
    """Console screens outside the map view, and key input."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def _clear_screen(self):
        """Move the cursor home and clear to the end of the screen."""
        self.stream.write("\033[H\033[J")
        self.stream.flush()

    def get_key_input(self):
        """Block until a key is pressed. Enter is not needed.

        Ctrl-C raises KeyboardInterrupt from inside readchar.
        """
        return readchar.readkey()

    def show_title_screen(self, map_name: str):
        self._clear_screen()
        terminal_width = shutil.get_terminal_size().columns

        title = [
            "",
            "   _   _    _  _ ___ _  _ _____ _   _ ___ ___ ___  ___ ",
            "  /_\\ |  \\ | || | __| \\| |_   _| | | | _ \\ __| _ \\/ __|",
            " / _ \\| |) || V /| _|| .` | | | | |_| |   / _||   /\\__ \\",
            "/_/ \\_\\___/  \\_/ |___|_|\\_| |_|  \\___/|_|_\\___|_|_\\|___/",
            "",
        ]
        for line in title:
            padding = max((terminal_width - len(line)) // 2, 0)
            self.stream.write(f"{COLOR_MAP['yellow']}{' ' * padding}{line}{COLOR_MAP['reset']}\n")

        for line in ("", map_name, "", _("Press any key to start.")):
            padding = max((terminal_width - len(line)) // 2, 0)
            self.stream.write(f"{' ' * padding}{line}\n")
        self.stream.flush()

        return self.get_key_input()
