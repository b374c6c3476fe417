# constants.py
# Display constants. Nothing here changes how a tile behaves.

# --- Glyphs ---
PLAYER = '☻'
SIGN = '⚑'
EMPTY_SPACE = ' '

# --- Grounds (cosmetic background of walkable tiles) ---
GROUND_GRASS = "grass"
GROUND_SAND = "sand"
GROUND_ROCK = "rock"
GROUND_CINDERBLOCK = "cinderblock"
GROUND_FLOWERBUSH = "flowerbush"

GROUNDS = (GROUND_GRASS, GROUND_SAND, GROUND_ROCK, GROUND_CINDERBLOCK, GROUND_FLOWERBUSH)

# Terrain names used by quests; water is a terrain but not a ground
TERRAIN_WATER = "water"

# --- Map layout legend ---
LAYOUT_LEGEND = {
    '.': GROUND_GRASS,
    ' ': GROUND_GRASS,
    ',': GROUND_SAND,
    ':': GROUND_ROCK,
    '=': GROUND_CINDERBLOCK,
    '*': GROUND_FLOWERBUSH,
}
LAYOUT_WATER = '~'
LAYOUT_BARRIER = '#'

# --- Terminal colours ---
COLOR_MAP = {
    "white": "\033[97m",
    "black": "\033[30m",
    "yellow": "\033[93m",
    "red": "\033[91m",
    "green": "\033[92m",
    "blue": "\033[94m",
    "cyan": "\033[36m",
    "dark_grey": "\033[90m",
    "invert": "\033[7m",
    "reset": "\033[0m"
}

# Background colour per terrain
BACKGROUND_MAP = {
    GROUND_GRASS: "\033[42m",        # green
    GROUND_SAND: "\033[103m",        # light yellow
    GROUND_ROCK: "\033[100m",        # dark grey
    GROUND_CINDERBLOCK: "\033[101m", # light red
    GROUND_FLOWERBUSH: "\033[105m",  # light magenta
    TERRAIN_WATER: "\033[104m",      # light blue
    "barrier": "\033[40m",           # black
}
