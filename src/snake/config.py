from dataclasses import dataclass
import os

# ----- Grid & window -----
GRID_N = 20                     # board is GRID_N x GRID_N cells
CELL_SIZE = 24                  # logical pixels per cell
BOARD_PX = GRID_N * CELL_SIZE
HUD_H = 32                      # score bar above the board
CONTROLS_H = 56                 # on-screen button strip below the board
WIDTH, HEIGHT = BOARD_PX, HUD_H + BOARD_PX + CONTROLS_H

# ----- Colors -----
BG        = (10, 16, 32)
GRID_LINE = (20, 32, 61)
FOOD      = (239, 68, 68)
HEAD      = (34, 197, 94)
BODY      = (22, 163, 74)
TEXT      = (220, 220, 230)
PANEL     = (15, 23, 42)
BUTTON    = (30, 41, 59)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Tunables (the fixed speed ramp lives here) -----
@dataclass
class Config:
    seed: int = 0
    initial_length: int = 4
    move_every_ms: int = 120
    min_move_ms: int = 60
    foods_per_speedup: int = 5
    speedup_delta_ms: int = 6
    best_score_file: str = os.path.join(os.path.expanduser("~"), ".snake_best.json")

CFG = Config()
