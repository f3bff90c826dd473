"""Test doubles and state builders shared across the test modules."""

from __future__ import annotations

from collections import deque
from typing import List, Tuple

from src.snake.game import GameState


class FakeTimer:
    """Records pygame.time.set_timer calls instead of starting real timers."""

    def __init__(self) -> None:
        self.calls: List[Tuple[int, int]] = []

    def __call__(self, event_type: int, interval_ms: int) -> None:
        self.calls.append((event_type, interval_ms))


def make_state(cells, direction, food, **kwargs) -> GameState:
    """Build a GameState from tail-to-head cells."""
    snake = deque(cells)
    return GameState(
        snake=snake,
        occupied=set(snake),
        direction=direction,
        pending=direction,
        food=food,
        **kwargs,
    )
