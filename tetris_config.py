"""Game constants and runtime config"""

# Playfield, in pixels and cells
CANVAS_WIDTH, CANVAS_HEIGHT = 200, 400
PREVIEW_WIDTH, PREVIEW_HEIGHT = 160, 80
GRID_WIDTH, GRID_HEIGHT = 10, 20
CELL_WIDTH = CANVAS_WIDTH // GRID_WIDTH
CELL_HEIGHT = CANVAS_HEIGHT // GRID_HEIGHT

# Timer period for gravity ticks
TICK_RATE_MS = 1

# Scoring & level progression
CLEAR_SCORE = 100
LEVEL_SCORE = 500

# Fall throttle: below FAST_LEVEL a tick falls every (105 - 15*level) ticks
FAST_LEVEL = 7
FAST_DIVISOR = 10

CONFIG = {
    "SEED": None,
    "DISPLAY_SCALE": 2,
    "FPS": 60,
    "LOG_LEVEL": "INFO",
}
