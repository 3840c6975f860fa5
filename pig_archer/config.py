"""
Configuration constants for Pig Archer.

All positions and sizes are in the fixed logical coordinate space of the
play field; speeds are in logical units per tick.
"""

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
FIELD_WIDTH: int = 800
FIELD_HEIGHT: int = 600
UPDATE_RATE: int = 60  # Hz – one tick per display refresh

# ---------------------------------------------------------------------------
# Pig (player avatar)
# ---------------------------------------------------------------------------
PIG_X: int = 60
PIG_WIDTH: int = 40
PIG_HEIGHT: int = 40
PIG_SPEED: int = 3
PIG_START_Y: float = FIELD_HEIGHT / 2

# ---------------------------------------------------------------------------
# Arrow
# ---------------------------------------------------------------------------
ARROW_WIDTH: int = 20
ARROW_HEIGHT: int = 5
ARROW_SPEED: int = 8
ARROW_HEAD_LENGTH: int = 10

# ---------------------------------------------------------------------------
# Wolf
# ---------------------------------------------------------------------------
WOLF_WIDTH: int = 40
WOLF_HEIGHT: int = 50
WOLF_START_Y: int = 90
WOLF_SPAWN_LEFT: int = 400      # leftmost spawn x (the branch starts here)
WOLF_SPAWN_MARGIN: int = 60     # kept clear at the right edge
WOLF_SPEED_MIN: float = 0.3     # buoyant drift range is [min, max)
WOLF_SPEED_MAX: float = 1.1
WOLF_FALL_SPEED: int = 8
WOLF_EYE_BUOYANT: int = 8
WOLF_EYE_FALLING: int = 12

BALLOON_RADIUS: int = 28
BALLOON_OFFSET_Y: int = 15      # balloon centre sits this far above the body
HIT_PADDING: int = 10

# ---------------------------------------------------------------------------
# Session rules
# ---------------------------------------------------------------------------
STARTING_LIVES: int = 5
POINTS_PER_WOLF: int = 100
SPAWN_INTERVAL: int = 120
SPAWN_INTERVAL_FAST: int = 100
FAST_SPAWN_SCORE: int = 500     # fast cadence once score exceeds this

# ---------------------------------------------------------------------------
# Scenery
# ---------------------------------------------------------------------------
ROPE_X: int = PIG_X + 20
ROPE_WIDTH: int = 4
TRUNK_WIDTH: int = 100
BRANCH_Y: int = 60
BRANCH_HEIGHT: int = 30
GROUND_HEIGHT: int = 10

# ---------------------------------------------------------------------------
# Audio
# ---------------------------------------------------------------------------
MUSIC_VOLUME: float = 0.3

# ---------------------------------------------------------------------------
# Colors (RGB / RGBA)
# ---------------------------------------------------------------------------
COLOR_SKY = (176, 224, 230)
COLOR_ROPE = (51, 51, 51)
COLOR_TRUNK = (139, 69, 19)
COLOR_FOLIAGE = (50, 205, 50)
COLOR_GROUND = (76, 175, 80)
COLOR_PIG = (255, 192, 203)
COLOR_PIG_SNOUT = (255, 105, 180)
COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (255, 255, 255)
COLOR_BALLOON = (255, 0, 0)
COLOR_BALLOON_SHINE = (255, 255, 255, 77)
COLOR_WOLF = (85, 85, 85)
COLOR_WOLF_FALLING = (51, 51, 51)
COLOR_WOLF_EYE = (255, 255, 0)
COLOR_HUD = (20, 20, 20)
COLOR_OVERLAY = (0, 0, 0, 160)
