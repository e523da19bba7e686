"""
constants.py: Centralized configuration for the grid, timing and physics.
"""

# -------- Display Config --------
SCREEN_WIDTH = 80               # Columns
SCREEN_HEIGHT = 50              # Rows
WINDOW_TITLE = "Flappy Bird"
CELL_SIZE = 12                  # Pixels per cell edge in the pygame window
RENDER_FPS = 60

# -------- Timing Config --------
FRAME_DURATION = 55.0           # Milliseconds of accumulated time per scroll step
TIME_SCALE = 80.0               # Elapsed ms are divided by this before integration

# -------- Physics Config (rows / scaled-frame^2) --------
GRAVITY = 0.3
INITIAL_SPEED = 1.0
FLAP_HEIGHT = 2                 # Rows jumped instantly on a flap

# -------- Player Config --------
PLAYER_X = 40
PLAYER_Y = 25

# -------- Obstacle Config --------
GAP_Y_MIN = 10
GAP_Y_MAX = 40                  # Exclusive
BASE_GAP_SIZE = 20              # Gap shrinks by one row per point
MIN_GAP_SIZE = 2

# -------- Glyphs & Colours --------
PLAYER_GLYPH = "@"
OBSTACLE_GLYPH = "|"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)
