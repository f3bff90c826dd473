# session.py
from __future__ import annotations
from typing import Optional
import random

from .board import BOARD, Board
from .config import CFG, Config
from .game import (
    Direction, GameState, Outcome, StepResult,
    new_game_state, set_direction, step_game, toggle_pause,
)
from .scheduler import TickScheduler
from .store import ScoreStore


class Session:
    """
    Owns the one live GameState and wires it to the timer and the score file.
    Every mutation goes through here, one event at a time.
    """

    def __init__(
        self,
        store: ScoreStore,
        scheduler: TickScheduler,
        cfg: Config = CFG,
        board: Board = BOARD,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.scheduler = scheduler
        self.cfg = cfg
        self.board = board
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.best_score = 0
        self.state: Optional[GameState] = None
        self.dirty = True   # something changed since the last redraw

    # ---------- lifecycle ----------
    def start(self) -> None:
        self.best_score = self.store.load()
        self.restart()

    def restart(self) -> None:
        self.scheduler.cancel()
        self.state = new_game_state(self.cfg, self.board, self.rng)
        self.scheduler.arm(self.state.step_ms, self.tick)
        self.dirty = True

    # ---------- per-event entry points ----------
    def tick(self) -> StepResult:
        assert self.state is not None, "Call start() first."
        result = step_game(self.state, self.board, self.cfg, self.rng, self.best_score)
        if result.outcome is Outcome.IDLE:
            return result

        if result.alive:
            if result.interval_changed:
                self.scheduler.arm(self.state.step_ms, self.tick)
        else:
            self.scheduler.cancel()
            if result.new_best is not None:
                self._record_best(result.new_best)
        self.dirty = True
        return result

    def set_direction(self, d: Direction) -> bool:
        assert self.state is not None, "Call start() first."
        return set_direction(self.state, d)

    def toggle_pause(self) -> None:
        assert self.state is not None, "Call start() first."
        if self.state.terminal:
            return
        if toggle_pause(self.state):
            self.scheduler.cancel()
        else:
            self.scheduler.arm(self.state.step_ms, self.tick)
        self.dirty = True

    def _record_best(self, score: int) -> None:
        self.best_score = score
        try:
            self.store.save(score)
        except OSError as e:
            print(f"[SCORE] Could not save best score to {self.store.path}: {e}")
            return
        print(f"[SCORE] New best score: {score}")
