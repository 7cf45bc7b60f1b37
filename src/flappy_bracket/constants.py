"""
constants.py: Centralized configuration for the console and the game world.
"""

# -------- Console Config --------
SCREEN_WIDTH = 80               # Console width in cells
SCREEN_HEIGHT = 50              # Console height in cells
CELL_SIZE = 12                  # Pixels per cell edge in the pygame window
RENDER_FPS = 60                 # Render loop cap (frames/second)
TITLE = "Flappy Bracket"

# Time synchronization
FRAME_DURATION_MS = 30.0        # Logical tick length, decoupled from RENDER_FPS

# -------- Player Config --------
PLAYER_START_X = 5
PLAYER_START_Y = 25
PLAYER_SCREEN_X = 5             # Column the camera keeps the player on

# -------- Physics Config (cells / tick) --------
GRAVITY = 0.2                   # Velocity added per tick while under the cap
TERMINAL_VELOCITY = 2.0         # Soft cap: gravity stops once velocity exceeds it
FLAP_VELOCITY = -2.0            # Instantaneous upward velocity

# -------- Obstacle Config --------
OBSTACLE_MIN_WIDTH = 3
OBSTACLE_BASE_MAX_WIDTH = 5     # Exclusive upper bound at score 0
OBSTACLE_WIDTH_SCORE_STEP = 5   # Upper bound widens by one every N points
OBSTACLE_GAP_Y_RANGE = (10, 40) # [low, high) range for the gap centre
OBSTACLE_BASE_SIZE = 20         # Opening height at score 0
OBSTACLE_MIN_SIZE = 2

# -------- Glyphs & Colors (RGB) --------
PLAYER_GLYPH = "@"
OBSTACLE_GLYPH = "|"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
NAVY = (0, 0, 128)

# -------- UI Text --------
START_PROMPT = "Press [Enter] to start"
RESTART_PROMPT = "Press [Enter] to restart"
QUIT_PROMPT = "Press [Q] to quit"
FLAP_HINT = "Press [Space] to flap"
GAME_OVER_TEXT = "Game Over"
