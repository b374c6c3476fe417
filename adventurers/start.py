# adventurers/start.py - console entry point

import logging
import sys
import traceback

from . import config
from .data_manager import load_map
from .errors import MapFormatError
from .game import Game
from .renderer import Renderer
from .ui import ConsoleUI


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        filename=config.LOG_FILE,
        filemode='w'
    )


def main(argv=None):
    """Run the game on the map named in argv[0] (default: the tutorial)."""
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    try:
        map_definition = load_map(argv[0] if argv else None)
    except MapFormatError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    ui = ConsoleUI()
    renderer = Renderer()
    try:
        ui.show_title_screen(map_definition.name)
        renderer.open()
        Game(map_definition).run(ui, renderer)
    except KeyboardInterrupt:
        logging.info("main: interrupted")
    except Exception as e:
        renderer.close()
        logging.exception("main: fatal error")
        print("Fatal error:", e)
        traceback.print_exc()
        return 1
    renderer.close()
    print("Game Ended!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
