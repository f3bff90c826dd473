# game.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional, Set, Tuple
import random

from .board import BOARD, Board, Cell
from .config import CFG, Config, DIRECTIONS, RIGHT

Direction = Tuple[int, int]


class Outcome(Enum):
    IDLE = "idle"              # paused or already over, nothing happened
    MOVED = "moved"
    ATE = "ate"
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"  # no free cell left for food: the player filled the board

    @property
    def is_terminal(self) -> bool:
        return self in (Outcome.WALL, Outcome.SELF, Outcome.BOARD_FULL)


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def _check_direction(d: Direction) -> Direction:
    if d not in DIRECTIONS:
        raise ValueError(f"Not a unit direction: {d!r}")
    return d

# ---------- State ----------
@dataclass
class GameState:
    snake: Deque[Cell]             # tail at index 0, head at index -1
    occupied: Set[Cell]            # same cells as `snake`, for O(1) lookups
    direction: Direction           # direction the snake is actually moving
    pending: Direction             # buffered intent, committed on the next tick
    food: Cell
    score: int = 0
    food_eaten: int = 0
    step_ms: int = CFG.move_every_ms
    paused: bool = False
    terminal: bool = False
    outcome: Optional[Outcome] = None

    @property
    def head(self) -> Cell:
        return self.snake[-1]

    @property
    def running(self) -> bool:
        return not self.paused and not self.terminal


@dataclass
class StepResult:
    outcome: Outcome
    score: int
    interval_changed: bool = False
    new_best: Optional[int] = None   # set when a finished game beat the stored best

    @property
    def alive(self) -> bool:
        return not self.outcome.is_terminal


def new_game_state(cfg: Config = CFG, board: Board = BOARD, rng: Optional[random.Random] = None) -> GameState:
    """Fresh game: a horizontal snake heading right, zero score, base speed."""
    rng = rng if rng is not None else random.Random(cfg.seed)
    head_x, y = board.size // 3, board.size // 2
    snake = deque((head_x - i, y) for i in range(cfg.initial_length - 1, -1, -1))
    occupied = set(snake)
    food = board.random_free_cell(occupied, rng)
    if food is None:
        raise ValueError("initial snake leaves no room for food")
    return GameState(
        snake=snake,
        occupied=occupied,
        direction=RIGHT,
        pending=RIGHT,
        food=food,
        step_ms=cfg.move_every_ms,
    )

# ---------- Mutators ----------
def set_direction(state: GameState, cand: Direction) -> bool:
    """Buffer a turn. 180° turns against the *current* heading are refused."""
    _check_direction(cand)
    if state.terminal or is_opposite(cand, state.direction):
        return False
    state.pending = cand
    return True

def toggle_pause(state: GameState) -> bool:
    if not state.terminal:
        state.paused = not state.paused
    return state.paused

def _finish(state: GameState, outcome: Outcome, best_score: int) -> StepResult:
    state.terminal = True
    state.outcome = outcome
    new_best = state.score if state.score > best_score else None
    return StepResult(outcome=outcome, score=state.score, new_best=new_best)

def step_game(
    state: GameState,
    board: Board = BOARD,
    cfg: Config = CFG,
    rng: Optional[random.Random] = None,
    best_score: int = 0,
) -> StepResult:
    """
    Advance the game by exactly one grid step.

    Does nothing while paused or after the game ended. Collisions end the
    game; reporting a beaten best score is left to the caller via
    `StepResult.new_best`.
    """
    if not state.running:
        return StepResult(outcome=Outcome.IDLE, score=state.score)

    # Commit direction once per tick
    state.direction = state.pending

    hx, hy = state.head
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not board.in_bounds(new_head):
        return _finish(state, Outcome.WALL, best_score)

    # Self collision, checked against the whole pre-move body (tail included)
    if new_head in state.occupied:
        return _finish(state, Outcome.SELF, best_score)

    state.snake.append(new_head)
    state.occupied.add(new_head)

    if new_head != state.food:
        tail = state.snake.popleft()
        state.occupied.discard(tail)
        return StepResult(outcome=Outcome.MOVED, score=state.score)

    # Eat & grow
    state.score += 1
    state.food_eaten += 1
    interval_changed = False
    if state.food_eaten % cfg.foods_per_speedup == 0:
        faster = max(cfg.min_move_ms, state.step_ms - cfg.speedup_delta_ms)
        interval_changed = faster != state.step_ms
        state.step_ms = faster

    food = board.random_free_cell(state.occupied, rng if rng is not None else random.Random())
    if food is None:
        result = _finish(state, Outcome.BOARD_FULL, best_score)
        result.interval_changed = interval_changed
        return result
    state.food = food
    return StepResult(outcome=Outcome.ATE, score=state.score, interval_changed=interval_changed)
