"""blobworld/constants.py — Default level values and generator parameters.

All values are in world pixels unless noted. A level description only needs
to specify what differs from these.
"""

# ---------------------------------------------------------------------------
# Level defaults
# ---------------------------------------------------------------------------

DEFAULT_LEVEL_NAME = "Level"

THEME_BG = "#F0F0F0"
THEME_PLATFORM = "#C8C8C8"
THEME_BLOB = "#1478FF"

GRAVITY = 0.65
JUMP_VELOCITY = -11.0

START_X = 80
START_Y = 180
START_R = 26

# Canvas fallbacks when a level has no platforms
DEFAULT_CANVAS_WIDTH = 640
DEFAULT_CANVAS_HEIGHT = 360

# ---------------------------------------------------------------------------
# Stairs generator
# ---------------------------------------------------------------------------

STAIRS_WORLD_W = 640
STAIRS_FLOOR_Y = 324
STAIRS_FLOOR_H = 36
STAIRS_START_X = 120
STAIRS_START_Y = 290
STAIRS_STEP_W = 80
STAIRS_STEP_H = 12
STAIRS_RISE = 22
STAIRS_COUNT = 8

# ---------------------------------------------------------------------------
# Random hops generator
# ---------------------------------------------------------------------------

HOPS_WORLD_W = 900
HOPS_FLOOR_Y = 324
HOPS_FLOOR_H = 36
HOPS_COUNT = 10
HOPS_PLAT_H = 12
HOPS_PLAT_W_MIN = 70
HOPS_PLAT_W_MAX = 120
HOPS_GAP_MIN = 55
HOPS_GAP_MAX = 95
HOPS_RISE_MIN = -15
HOPS_RISE_MAX = 25
HOPS_START_X = 140
HOPS_START_Y = 280

# Playable band for hop platforms: never above HOP_MIN_Y,
# never lower than floorY - HOP_FLOOR_MARGIN.
HOP_MIN_Y = 110
HOP_FLOOR_MARGIN = 60

# ---------------------------------------------------------------------------
# Viewer
# ---------------------------------------------------------------------------

FPS = 60
HUD_MARGIN = 4
