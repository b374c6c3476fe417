# adventurers/config.py - global game settings

import os

# Consecutive water steps before the player drowns
DROWNING_THRESHOLD = 10

# Scroll the viewport once the player is closer than this to an edge
VIEW_PADDING = 2

# Rows reserved under the map for the status line and notice panel
STATUS_HEIGHT = 5

# Map data
MAPS_DIR = os.path.join(os.path.dirname(__file__), "data", "maps")
DEFAULT_MAP = "tutorial.json"

# Logging (the terminal belongs to the renderer, so logs go to a file)
LOG_FILE = "adventurers_debug.log"
LOG_LEVEL = os.environ.get("ADVENTURERS_LOG_LEVEL", "INFO").upper()

# UI language ("en", "ko")
LANGUAGE = os.environ.get("ADVENTURERS_LANGUAGE", "en")
