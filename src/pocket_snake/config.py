from dataclasses import dataclass
from typing import Optional

# ----- Grid & timing -----
GRID_SIZE = 15          # cells per side, the board is GRID_SIZE x GRID_SIZE
TICK_MS = 150           # one snake step every TICK_MS while PLAYING

# ----- Window -----
CELL_SIZE = 24
HUD_H = 32
WIDTH, HEIGHT = GRID_SIZE * CELL_SIZE, GRID_SIZE * CELL_SIZE + HUD_H
FPS = 60

# ----- Colors (handheld green palette) -----
BG      = (139, 160, 96)
SCREEN  = (155, 188, 15)
DARK    = (48, 98, 48)
DARKEST = (15, 56, 15)
FOOD    = (87, 124, 67)
TEXT    = (15, 56, 15)

# ----- Directions (dx, dy), y grows downwards -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = {"UP": UP, "DOWN": DOWN, "LEFT": LEFT, "RIGHT": RIGHT}

# ----- Phases -----
SPLASH = "SPLASH"
MENU = "MENU"
PLAYING = "PLAYING"
PAUSED = "PAUSED"
GAME_OVER = "GAME_OVER"
PHASES = {SPLASH, MENU, PLAYING, PAUSED, GAME_OVER}

# ----- Splash fade (ms) -----
SPLASH_FADE_IN_MS = 1000
SPLASH_HOLD_MS = 1000
SPLASH_FADE_OUT_MS = 1000
SPLASH_TITLE = "MEZZ Studios"

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    splash_fade_in_ms: int = SPLASH_FADE_IN_MS
    splash_hold_ms: int = SPLASH_HOLD_MS
    splash_fade_out_ms: int = SPLASH_FADE_OUT_MS

CFG = Config()
