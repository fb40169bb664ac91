from __future__ import annotations

# Board
GRID_SIZE = 20

# Timing (milliseconds)
TICK_MS = 100
FRAME_MS = 16.6
LOOP_FPS = 240
MAX_CATCHUP_TICKS = 3

# Window
BLOCK = 20
HUD_HEIGHT = 28

# Colors (R, G, B)
BG_COLOR = (18, 26, 38)
GRID_LINE = (30, 44, 61)
FOOD_COLOR = (255, 83, 95)
BODY_COLOR = (66, 168, 90)
HEAD_COLOR = (112, 224, 120)
TEXT_COLOR = (240, 240, 240)
